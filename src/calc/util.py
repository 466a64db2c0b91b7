from enum import Enum


class ErrorKind(Enum):
    '''
    Every way an expression can fail. The value is the user-facing message.
    '''
    MISSING_OPERAND = 'Missing or bad operand'
    MISSING_OPERATOR = 'Missing operator or parenthesis'
    DIV_BY_ZERO = 'Division with 0'
    OP_NOT_FOUND = 'Operator not found'
    INVALID_CHARACTER = 'Invalid character'


class CalcError(Exception):
    '''
    Failure evaluating one expression.

    Branch on ``kind``, not on the message.
    '''
    def __init__(self, kind, detail=None):
        self.kind = kind
        self.detail = detail
        if detail is None:
            super().__init__(kind.value)
        else:
            super().__init__('{}: {}'.format(kind.value, detail))
