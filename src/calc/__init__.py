'''
Infix calculator.

Evaluates plain arithmetic: + - * / ^ and parentheses over decimal numbers.
Expressions are tokenized, rearranged into postfix (RPN) by shunting-yard,
then run on a stack machine.

Either . or , works as the decimal point, so 1,5 and 1.5 are the same
number. Anything that isn't part of the grammar is ignored, unless you ask
for strict lexing.
'''

from .util import CalcError, ErrorKind
from .lexer import Lexer, Number, Operator, OpenParen, CloseParen
from .converter import Converter
from .machine import Machine
from .calculator import Calculator
from .cli import CLI


def evaluate(expr):
    '''
    Evaluate expr with a default Calculator.
    '''
    return Calculator().eval(expr)


__all__ = ('Calculator', 'CLI', 'Lexer', 'Converter', 'Machine',
           'Number', 'Operator', 'OpenParen', 'CloseParen',
           'CalcError', 'ErrorKind', 'evaluate')
