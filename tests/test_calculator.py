'''
End to end tests, infix string in, float out
'''

import math
import random

from calc import Calculator, evaluate
from calc.util import CalcError, ErrorKind

from pytest import approx, raises, mark


@mark.parametrize('expr, expected', [
    ('6/3', 2.0),
    ('2^3', 8.0),
    ('7-2', 5.0),
    ('1+1', 2.0),
    ('3*4', 12.0),
    ('2+3*4', 14.0),
    ('(2+3)*4', 20.0),
    ('2^3^2', 512.0),
    ('(2^3)^2', 64.0),
    ('10-4-3', 3.0),
    ('100/10/5', 2.0),
    ('1,5+1.5', 3.0),
    ('2 * (3 + 4) ^ 2', 98.0),
    ('1+@@2', 3.0),
])
def test_eval(calculator, expr, expected):
    assert calculator.eval(expr) == expected


def test_call(calculator):
    assert calculator('1+2') == 3.0


def test_evaluate():
    assert evaluate('0.1*10') == approx(1.0)


def test_empty(calculator):
    assert math.isnan(calculator.eval(''))


@mark.parametrize('expr, expected', [
    ('2^9999', math.inf),
    ('0^(0-1)', math.inf),
    ('(0-2)^9999', -math.inf),
])
def test_infinite_power(calculator, expr, expected):
    assert calculator.eval(expr) == expected


def test_undefined_power(calculator):
    assert math.isnan(calculator.eval('(1-3)^(1/2)'))


@mark.parametrize('expr, kind', [
    ('5/0', ErrorKind.DIV_BY_ZERO),
    ('5/(2-2)', ErrorKind.DIV_BY_ZERO),
    ('1+', ErrorKind.MISSING_OPERAND),
    (' ', ErrorKind.MISSING_OPERAND),
    ('1 2', ErrorKind.MISSING_OPERATOR),
    ('(1+2', ErrorKind.MISSING_OPERATOR),
    # Counts add up but the parentheses are inside out.
    (')1+2(', ErrorKind.MISSING_OPERATOR),
])
def test_errors(calculator, expr, kind):
    with raises(CalcError) as e:
        calculator.eval(expr)
    assert e.value.kind is kind


def test_postfix(calculator):
    assert [str(t) for t in calculator.postfix('1-(2+3)')] == \
        ['1.0', '2.0', '3.0', '+', '-']


def test_strict():
    with raises(CalcError) as e:
        Calculator(strict=True).eval('1+a')
    assert e.value.kind is ErrorKind.INVALID_CHARACTER


class Reference:
    '''
    Recursive descent evaluator, to check the shunting-yard one against.

    Only handles the unsigned decimal integers the generator produces.
    '''
    def __init__(self, expr):
        self.text = expr.replace(' ', '')
        self.i = 0

    def peek(self):
        return self.text[self.i] if self.i < len(self.text) else None

    def eat(self):
        c = self.text[self.i]
        self.i += 1
        return c

    def expr(self):
        value = self.term()
        while self.peek() in ('+', '-'):
            if self.eat() == '+':
                value = value + self.term()
            else:
                value = value - self.term()
        return value

    def term(self):
        value = self.factor()
        while self.peek() in ('*', '/'):
            if self.eat() == '*':
                value = value * self.factor()
            else:
                value = value / self.factor()
        return value

    def factor(self):
        base = self.primary()
        if self.peek() == '^':
            self.eat()
            return math.pow(base, self.factor())
        return base

    def primary(self):
        if self.peek() == '(':
            self.eat()
            value = self.expr()
            assert self.eat() == ')'
            return value
        start = self.i
        while self.peek() is not None and self.peek().isdigit():
            self.eat()
        return float(self.text[start:self.i])

    def evaluate(self):
        value = self.expr()
        assert self.i == len(self.text)
        return value


def generate(rng, depth):
    '''
    Random well-formed expression, small enough not to overflow.
    '''
    if depth == 0 or rng.random() < 0.3:
        return str(rng.randint(0, 99))
    kind = rng.choice('+-*/^(')
    if kind == '(':
        return '(' + generate(rng, depth - 1) + ')'
    elif kind == '^':
        # Small positive bases keep powers real and finite.
        return '^'.join(str(rng.randint(1, 3))
                        for _ in range(rng.randint(2, 3)))
    space = rng.choice(['', ' '])
    return generate(rng, depth - 1) + space + kind + space + \
        generate(rng, depth - 1)


@mark.parametrize('seed', range(20))
def test_against_reference(calculator, seed):
    rng = random.Random(seed)
    for _ in range(25):
        expr = generate(rng, 4)
        try:
            expected = Reference(expr).evaluate()
        except ZeroDivisionError:
            with raises(CalcError) as e:
                calculator.eval(expr)
            assert e.value.kind is ErrorKind.DIV_BY_ZERO, expr
            continue
        assert calculator.eval(expr) == approx(expected), expr
