from .util import CalcError, ErrorKind
from .lexer import Number, Operator
from .operators import lookup


class Machine:
    '''
    Arithmetic stack machine.

    Runs postfix token lists. Every run gets a fresh stack; the machine
    itself keeps no state between runs.
    '''

    def eval_postfix(self, postfix):
        '''
        Evaluate postfix tokens and return the single resulting float.
        '''
        stack = []
        for token in postfix:
            if isinstance(token, Number):
                self._pshstack(stack, token.value)
            elif isinstance(token, Operator):
                self._apply(stack, token.symbol)
            else:
                # Parentheses never survive conversion.
                raise CalcError(ErrorKind.MISSING_OPERATOR, str(token))
        if len(stack) != 1:
            raise CalcError(ErrorKind.MISSING_OPERATOR,
                            '{} values left on stack'.format(len(stack)))
        return float(stack[0])

    def _apply(self, stack, symbol):
        '''
        Pop two operands, apply the operator, push the result.
        '''
        info = lookup(symbol)
        # The right hand operand is on top. If you don't reverse, you'll do
        # 3 - 7 when you say 7 3 -.
        right, left = self._popstack(stack, 2)
        if symbol == '/' and right == 0:
            raise CalcError(ErrorKind.DIV_BY_ZERO)
        self._pshstack(stack, info.function(left, right))

    def _pshstack(self, stack, *new):
        '''
        Push all elements onto stack, leftmost at the bottom.
        '''
        stack.extend(new)

    def _popstack(self, stack, n=1):
        '''
        Pop specified number of values from stack, topmost first.
        '''
        if len(stack) < n:
            raise CalcError(ErrorKind.MISSING_OPERAND,
                            'less than {} value(s) on stack'.format(n))
        return [stack.pop() for _ in range(n)]
