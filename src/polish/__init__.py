'''
Infix calculator.

Converts plain old infix arithmetic (+ - * / ^ and parentheses over floats)
to Reverse Polish Notation with a shunting-yard pass, then evaluates the RPN
on a stack.

Not supported, on purpose for now:

- Unary minus. -5+3 is a subtraction missing its left operand.
- Implicit multiplication, functions, variables.
'''

import logging

from .cli import CLI
from .converter import Converter, convert
from .evaluator import Evaluator, evaluate
from .lexer import Lexer
from .symbols import (Bracket, CloseBracket, Number, Op, OpenBracket,
                      Operation, Symbol)
from .util import (DivisionByZero, EmptyOrInvalidResult, InvalidNumberLiteral,
                   InvalidRpnExpression, InvalidSymbol, NumericalError,
                   PolishError, UnbalancedBrackets)


logging.getLogger(__name__).addHandler(logging.NullHandler())


def run(expression, logger=None):
    '''
    Evaluate an infix expression.
    '''
    return evaluate(convert(expression, logger=logger), logger=logger)


__all__ = ('run', 'convert', 'evaluate',
           'Converter', 'Evaluator', 'Lexer', 'CLI',
           'Operation', 'Bracket', 'OpenBracket', 'CloseBracket',
           'Number', 'Op', 'Symbol',
           'PolishError', 'InvalidNumberLiteral', 'InvalidSymbol',
           'UnbalancedBrackets', 'InvalidRpnExpression', 'DivisionByZero',
           'EmptyOrInvalidResult', 'NumericalError')
