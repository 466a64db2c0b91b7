from collections import Counter
from dataclasses import dataclass
from functools import reduce
import operator

import regex

from .util import CalcError, ErrorKind
from .operators import OPERATORS


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self):
        return repr(self.value)


@dataclass(frozen=True)
class Operator:
    symbol: str

    def __str__(self):
        return self.symbol


@dataclass(frozen=True)
class OpenParen:
    def __str__(self):
        return '('


@dataclass(frozen=True)
class CloseParen:
    def __str__(self):
        return ')'


class Lexer:
    '''
    Lexer for infix arithmetic expressions.

    Holds configuration only, so one instance can tokenize any number of
    expressions.
    '''
    assert not [symbol
                for symbol
                in OPERATORS
                if len(symbol) != 1]
    # Backslash every symbol; several are special inside a character class.
    SYMBOLS = r''.join('\\' + symbol for symbol in OPERATORS)
    OPERATOR = r'[' + SYMBOLS + r']'
    # Digits and decimal separators. Runs of separators are squashed later.
    NUMBER = r'[0-9.,]+'
    # Only the space character separates; tabs and the like are noise.
    SPACE = r'\x20+'
    # Anything that can't start or continue a lexeme.
    NOISE = r'[^0-9.,()\x20' + SYMBOLS + r']+'
    SEPARATORS = r'[.,]+'
    # What's left of a number once its separators are squashed.
    DECIMAL = r'''
               (?:
                   # 1, 1.5, 1. (trailing dot)
                   [0-9]+
                   (?:
                       \.
                       [0-9]*
                   )?
               )|(?:
                   # .5
                   \.
                   [0-9]+
               )
               '''

    # All possible lexemes, once the noise is gone.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<open>\()|' \
             r'(?<close>\))|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, strict=False):
        '''
        :param strict: Fail on characters outside the grammar instead of
                       silently dropping them.
        '''
        self.strict = strict

    def filter(self, expr):
        '''
        Remove every character the grammar doesn't know about.
        '''
        if self.strict:
            bad = regex.findall(type(self).NOISE, expr)
            if bad:
                raise CalcError(ErrorKind.INVALID_CHARACTER,
                                repr(''.join(bad)))
        return regex.sub(type(self).NOISE, '', expr)

    def lex(self, expr):
        '''
        Take an expression and yield all lexeme matches, spaces included.
        '''
        return regex.finditer(type(self).LEXEME, self.filter(expr),
                              flags=type(self).FLAGS)

    def tokenize(self, expr):
        '''
        Turn an expression into a validated list of tokens.

        Spaces are dropped, decimal separators normalized.
        '''
        if not expr:
            return []
        matches = [match
                   for match
                   in self.lex(expr)
                   if match.lastgroup != 'space']
        # Counts first: '1 . 2' is a missing operator before it's a bad
        # number.
        self.validate(matches)
        return [self.token(match) for match in matches]

    def token(self, match):
        '''
        Build the token for a single lexeme match.
        '''
        kind = match.lastgroup
        if kind == 'number':
            return Number(self.number(match.group()))
        elif kind == 'operator':
            return Operator(match.group())
        elif kind == 'open':
            return OpenParen()
        elif kind == 'close':
            return CloseParen()
        raise ValueError('Unexpected lexeme {!r}'.format(match.group()))

    def number(self, text):
        '''
        Parse a numeric lexeme, treating any run of . or , as one point.
        '''
        normalized = regex.sub(type(self).SEPARATORS, '.', text)
        if not regex.fullmatch(type(self).DECIMAL, normalized,
                               flags=type(self).FLAGS):
            raise CalcError(ErrorKind.MISSING_OPERAND, repr(text))
        return float(normalized)

    def validate(self, matches):
        '''
        Check operand, operator and parenthesis counts of lexeme matches
        agree.
        '''
        counts = Counter(match.lastgroup for match in matches)
        operators = counts['operator']
        operands = counts['number']
        opens = counts['open']
        closes = counts['close']
        if operators >= operands:
            raise CalcError(ErrorKind.MISSING_OPERAND)
        if operands > operators + 1 or opens != closes:
            raise CalcError(ErrorKind.MISSING_OPERATOR)
