from collections import deque
import logging

from .lexer import Lexer
from .symbols import Bracket, Number, Op
from .util import UnbalancedBrackets


class Converter:
    '''
    Shunting-yard conversion of infix notation to postfix (RPN) notation.
    '''

    def __init__(self, lexer=None, logger=None):
        '''
        Create converter.

        :param lexer: Lexer splitting expressions into symbols.
        :param logger: Where to log conversion steps, at DEBUG level.
        '''
        self.lexer = lexer or Lexer()
        self.logger = logger or logging.getLogger(__name__)

    def convert(self, expression):
        '''
        Return the symbols of an infix expression, in postfix order.

        Numbers go straight to the output; operators and brackets wait on a
        stack until precedence, associativity or a closing bracket releases
        them.
        '''
        output = []
        stack = deque()
        for symbol in self.lexer.symbols(expression):
            self.logger.debug('Got %s', symbol)
            if isinstance(symbol, Number):
                output.append(symbol)
            elif isinstance(symbol, Op):
                while stack and self._releases(stack[-1], symbol):
                    self._output(output, stack.pop())
                stack.append(symbol)
            elif symbol is Bracket.OPEN:
                stack.append(symbol)
            elif symbol is Bracket.CLOSE:
                self._close(output, stack)
        while stack:
            top = stack.pop()
            if isinstance(top, Bracket):
                raise UnbalancedBrackets('Malformed expression: '
                                         'unbalanced parentheses')
            self._output(output, top)
        self.logger.debug('Postfix: %s', ' '.join(map(str, output)))
        return output

    def _releases(self, top, incoming):
        '''
        Return True if top of the stack goes to output before incoming.

        Brackets never do. Operators do when they bind tighter than incoming,
        or as tightly and incoming is left associative.
        '''
        if not isinstance(top, Op):
            return False
        top, incoming = top.operation, incoming.operation
        if top.precedence != incoming.precedence:
            return top.precedence > incoming.precedence
        return not incoming.right_associative

    def _close(self, output, stack):
        '''
        Pop operators to output down to the matching open bracket.
        '''
        while stack:
            top = stack.pop()
            if top is Bracket.OPEN:
                return
            self._output(output, top)
        raise UnbalancedBrackets('Malformed expression: unmatched ")"')

    def _output(self, output, symbol):
        self.logger.debug('Popped %s to output', symbol)
        output.append(symbol)


def convert(expression, logger=None):
    '''
    Convert infix expression to a list of symbols in postfix order.
    '''
    return Converter(logger=logger).convert(expression)
