'''
Binary operators known to the calculator.

Shared, read-only data: the lexer recognizes the symbols, the converter
orders by precedence and associativity, and the machine applies the
functions.
'''

from collections import namedtuple
from enum import Enum
from types import MappingProxyType
import operator
import math

from .util import CalcError, ErrorKind


class Assoc(Enum):
    LEFT = 'left'
    RIGHT = 'right'


OperatorInfo = namedtuple('OperatorInfo', 'precedence assoc function')


def _odd(n):
    return float(n).is_integer() and n % 2 == 1


def power(base, exponent):
    '''
    IEEE 754 pow: overflow and poles give infinities, a negative base to a
    fractional exponent gives NaN. Never complex, never raises.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _odd(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0:
            # Pole: 0 to a negative power. -0.0 keeps its sign on odd powers.
            if _odd(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


OPERATORS = MappingProxyType({
    '+': OperatorInfo(2, Assoc.LEFT, operator.__add__),
    '-': OperatorInfo(2, Assoc.LEFT, operator.__sub__),
    '*': OperatorInfo(3, Assoc.LEFT, operator.__mul__),
    '/': OperatorInfo(3, Assoc.LEFT, operator.__truediv__),
    '^': OperatorInfo(4, Assoc.RIGHT, power),
})


def lookup(symbol):
    '''
    Return the OperatorInfo for symbol, or fail with OP_NOT_FOUND.
    '''
    try:
        return OPERATORS[symbol]
    except KeyError:
        raise CalcError(ErrorKind.OP_NOT_FOUND, repr(symbol)) from None
