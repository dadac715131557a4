'''
Symbols of infix and postfix notation.

A symbol is one of:

- Number, a finite float;
- Op, one of the binary operations;
- Bracket.OPEN or Bracket.CLOSE, only ever seen in infix notation.
'''

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operation(Enum):
    '''
    Binary arithmetic operations, with how tightly they bind.
    '''
    # character, precedence, right associative
    ADD = ('+', 1, False)
    SUBTRACT = ('-', 1, False)
    MULTIPLY = ('*', 2, False)
    DIVIDE = ('/', 2, False)
    POWER = ('^', 3, True)

    def __init__(self, char, precedence, right_associative):
        self.char = char
        self.precedence = precedence
        self.right_associative = right_associative

    @classmethod
    def from_char(cls, char):
        '''
        Return the operation written as char.
        '''
        for operation in cls:
            if operation.char == char:
                return operation
        raise ValueError('Not an operator: {!r}'.format(char))

    def __str__(self):
        return self.char


class Bracket(Enum):
    OPEN = '('
    CLOSE = ')'

    def __str__(self):
        return self.value


OpenBracket = Bracket.OPEN
CloseBracket = Bracket.CLOSE


@dataclass(frozen=True)
class Number:
    value: float

    def __str__(self):
        return str(float(self.value))


@dataclass(frozen=True)
class Op:
    operation: Operation

    def __str__(self):
        return str(self.operation)


Symbol = Union[Number, Op, Bracket]


__all__ = ('Operation', 'Bracket', 'OpenBracket', 'CloseBracket',
           'Number', 'Op', 'Symbol')
