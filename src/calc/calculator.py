import math

from .lexer import Lexer
from .converter import Converter
from .machine import Machine


class Calculator:
    '''
    Infix calculator: Lexer, then Converter, then Machine.
    '''

    def __init__(self, strict=False):
        '''
        :param strict: Reject characters outside the grammar rather than
                       dropping them.
        '''
        self.lexer = Lexer(strict=strict)
        self.converter = Converter()
        self.machine = Machine()

    def __call__(self, expr):
        return self.eval(expr)

    def postfix(self, expr):
        '''
        Return expr as a list of postfix tokens.
        '''
        return self.converter.to_postfix(self.lexer.tokenize(expr))

    def eval(self, expr):
        '''
        Evaluate expr. An empty expression is NaN, not an error.
        '''
        if not expr:
            return math.nan
        return self.machine.eval_postfix(self.postfix(expr))
