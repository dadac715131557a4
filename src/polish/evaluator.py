from collections import deque
import logging
import math
import operator

from .symbols import Number, Op, Operation
from .util import (DivisionByZero, EmptyOrInvalidResult, InvalidRpnExpression,
                   NumericalError, wrap_user_errors)


@wrap_user_errors('Cannot raise {0} to the power of {1}', NumericalError)
def _power(left, right):
    # math.pow rather than **: a real result or an exception, never complex.
    return math.pow(left, right)


class Evaluator:
    '''
    Postfix (RPN) evaluator over a stack of floats.
    '''

    # Operations on (left, right), left being pushed first.
    OPERATIONS = {
        Operation.ADD: operator.__add__,
        Operation.SUBTRACT: operator.__sub__,
        Operation.MULTIPLY: operator.__mul__,
        Operation.DIVIDE: operator.__truediv__,
        Operation.POWER: _power,
    }
    # Divisors closer to zero than this are zero.
    EPSILON = 1e-10

    def __init__(self, logger=None):
        '''
        Create evaluator.

        :param logger: Where to log evaluation steps, at DEBUG level.
        '''
        self.logger = logger or logging.getLogger(__name__)

    def evaluate(self, tokens):
        '''
        Evaluate symbols in postfix order down to a single float.
        '''
        stack = deque()
        for token in tokens:
            if isinstance(token, Number):
                stack.append(float(token.value))
            elif isinstance(token, Op):
                stack.append(self._apply(stack, token.operation))
            else:
                raise InvalidRpnExpression('Invalid RPN expression: '
                                           'unexpected {}'.format(token))
            self.logger.debug('Stack: %s', list(stack))
        if len(stack) != 1:
            raise EmptyOrInvalidResult('Empty or invalid expression: '
                                       '{} value(s) left'.format(len(stack)))
        return stack.pop()

    def _apply(self, stack, operation):
        '''
        Pop the operands of operation and return its result.
        '''
        right, left = self._popstack(stack, 2)
        if operation is Operation.DIVIDE and abs(right) < type(self).EPSILON:
            raise DivisionByZero('Division by zero: {} / {}'
                                 .format(left, right))
        result = type(self).OPERATIONS[operation](left, right)
        # inf, or nan from inf - inf, is no answer.
        if not math.isfinite(result):
            raise NumericalError('{} {} {} is out of range'
                                 .format(left, operation, right))
        self.logger.debug('%s %s %s = %s', left, operation, right, result)
        return result

    def _popstack(self, stack, n):
        '''
        Pop n values from stack, topmost first.
        '''
        if len(stack) < n:
            raise InvalidRpnExpression('Invalid RPN expression: '
                                       'less than {} operand(s) on stack'
                                       .format(n))
        return [stack.pop() for _ in range(n)]


def evaluate(tokens, logger=None):
    '''
    Evaluate a sequence of symbols in postfix order.
    '''
    return Evaluator(logger=logger).evaluate(tokens)
