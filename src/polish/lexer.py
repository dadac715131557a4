from functools import reduce
import math
import operator

import regex

from .symbols import Bracket, Number, Op, Operation
from .util import InvalidNumberLiteral, InvalidSymbol, wrap_user_errors


class Lexer:
    '''
    Lexer for the infix arithmetic *regular* grammar.

    Holds no per-expression state; one instance lexes any number of
    expressions.
    '''
    # Number: a run of digits with at most one decimal point.
    NUMBER = r'''
              # 1, 12, 1. (notice trailing dot), 1.25 but not .25
              \d+
              (?:
                  \.
                  \d*
              )?
              '''
    # Whatever is glued onto a number without an operator, bracket or space
    # in between. Never valid; matched only to report the whole literal.
    TRAILING = r'''
                # The .3 in 1.2.3, the a in 12a
                [^\-+*/\^()\s]*
                '''

    assert not [operation
                for operation
                in Operation
                if len(operation.char) != 1]
    OPERATOR = r'(?:' + r'|'.join(regex.escape(operation.char)
                                  for operation
                                  in Operation) + r')'
    BRACKET = r'[()]'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')' \
             r'(?<trailing>' + TRAILING + r')|' \
             r'(?<operator>' + OPERATOR + r')|' \
             r'(?<bracket>' + BRACKET + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes. ASCII, so that only 0-9 are
    # digits.
    FLAGS = reduce(operator.__or__,
                   {regex.ASCII,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PATTERN = regex.compile(LEXEME, flags=FLAGS)

    def lex(self, expression):
        '''
        Take an expression and yield all lexemes, whitespace included.

        Raises on the first bad lexeme, after yielding the good ones before it.
        '''
        position = 0
        while position < len(expression):
            match = type(self).PATTERN.match(expression, position)
            if match is None:
                raise InvalidSymbol('Invalid symbol {!r} at position {}'
                                    .format(expression[position], position))
            if match.group('trailing'):
                raise InvalidNumberLiteral('Invalid number literal {!r}'
                                           .format(match.group(0)))
            yield match
            position = match.end()

    def symbols(self, expression):
        '''
        Yield the symbols of an expression, in infix order.
        '''
        for match in self.lex(expression):
            symbol = self.symbol(match)
            if symbol is not None:
                yield symbol

    def symbol(self, match):
        '''
        Return the symbol for a lexeme match, None for whitespace.
        '''
        groups = self.matchedgroups(match)
        if 'number' in groups:
            return self._number(groups['number'])
        elif 'operator' in groups:
            return Op(Operation.from_char(groups['operator']))
        elif 'bracket' in groups:
            return Bracket(groups['bracket'])
        return None

    def matchedgroups(self, match):
        '''
        Return the non-empty named groups of a lexeme match.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}

    @wrap_user_errors('Invalid number literal {1!r}', InvalidNumberLiteral)
    def _number(self, text):
        value = float(text)
        # 400 digits still lex fine, but are no finite double.
        if not math.isfinite(value):
            raise InvalidNumberLiteral('Number literal {!r} out of range'
                                       .format(text))
        return Number(value)
