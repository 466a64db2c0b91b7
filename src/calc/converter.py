from .util import CalcError, ErrorKind
from .lexer import Number, Operator, OpenParen, CloseParen
from .operators import Assoc, lookup


class Converter:
    '''
    Infix to postfix (RPN) converter, by shunting-yard.

    Expects tokens already validated by the Lexer.
    '''

    def to_postfix(self, tokens):
        '''
        Reorder infix tokens into postfix, dropping parentheses.
        '''
        stack = []
        postfix = []
        for token in tokens:
            if isinstance(token, Number):
                postfix.append(token)
            elif isinstance(token, OpenParen):
                stack.append(token)
            elif isinstance(token, CloseParen):
                self._close(stack, postfix)
            elif isinstance(token, Operator):
                self._operator(token, stack, postfix)
            else:
                raise TypeError('Not a token: {!r}'.format(token))
        # Balanced input leaves only operators behind.
        while stack:
            postfix.append(stack.pop())
        return postfix

    def _operator(self, token, stack, postfix):
        '''
        Flush operators binding at least as tight as token, then stack it.
        '''
        info = lookup(token.symbol)
        while stack and self._pops(info, stack[-1]):
            postfix.append(stack.pop())
        stack.append(token)

    def _pops(self, info, top):
        '''
        Return True if the operator on top of the stack goes out first.

        Right associative operators never flush an equal precedence top, so
        2^3^2 is 2^(3^2).
        '''
        if not isinstance(top, Operator):
            return False
        return (info.assoc is Assoc.LEFT and
                lookup(top.symbol).precedence >= info.precedence)

    def _close(self, stack, postfix):
        '''
        Unstack up to and including the matching open parenthesis.
        '''
        while stack:
            top = stack.pop()
            if isinstance(top, OpenParen):
                return
            postfix.append(top)
        raise CalcError(ErrorKind.MISSING_OPERATOR, 'unmatched )')
