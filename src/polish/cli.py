from argparse import ArgumentParser, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .converter import Converter
from .evaluator import Evaluator
from .lexer import Lexer
from .symbols import Number
from .util import PolishError


class InteractiveInput:
    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        session = PromptSession(message=self.prompt,
                                enable_suspend=True,
                                history=None,
                                prompt_continuation=' ' * len(self.prompt),
                                # Certainly not! But be explicit.
                                erase_when_done=False)
        try:
            while True:
                line = session.prompt()
                if line.strip():
                    yield line
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the infix calculator.
    '''

    DEFAULT_PROMPT = '> '
    RESULT = 'Result: {}'
    PROBLEM = 'Problem evaluating expression: {}'
    GREEN = '\x1b[0;32m'
    RESET = '\x1b[0m'

    def dumper(self):
        '''
        Dump postfix symbols, one per line, with their kind.
        '''
        print('<kind>\t<symbol>')
        status = 0
        for expression in self._expressions():
            try:
                symbols = self.converter.convert(expression)
            except PolishError as e:
                status = self._problem(e)
                continue
            for symbol in symbols:
                kind = 'number' if isinstance(symbol, Number) else 'operator'
                print(kind, symbol, sep='\t')
        return status

    def executor(self):
        '''
        Evaluate expression(s), reporting each result or problem.
        '''
        status = 0
        for expression in self._expressions():
            try:
                result = self.evaluator.evaluate(
                    self.converter.convert(expression))
            except PolishError as e:
                status = self._problem(e)
                continue
            print(self.RESULT.format(self._colour(result)))
        return status

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)
        return 0

    def _problem(self, error):
        '''
        Report error, returning the exit status it warrants.
        '''
        self.logger.debug('Evaluation failed', exc_info=error)
        print(self.PROBLEM.format(error), file=sys.stderr)
        return 0 if self._interactive() else 1

    def _colour(self, result):
        if sys.stdout.isatty():
            return self.GREEN + str(result) + self.RESET
        return str(result)

    def _interactive(self):
        return self.args.expression is None

    def _expressions(self):
        if self._interactive():
            return InteractiveInput(prompt=self.args.prompt_text)
        return [self.args.expression]

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Infix calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='log tokenization and '
                                               'evaluation steps')
        self.argument_parser.add_argument('expression',
                                          nargs=OPTIONAL,
                                          help='infix expression, '
                                               'e.g. "1 + 2 * 3"')
        self.argument_parser.add_argument('-p', '--prompt',
                                          action='store_true',
                                          help='read expressions '
                                               'interactively')
        self.argument_parser.add_argument('--prompt-text',
                                          default=self.DEFAULT_PROMPT,
                                          help='prompt shown by --prompt')
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor)
        self.logger = logging.getLogger(__name__)

    def run(self, args=None):
        '''
        Run CLI, given these args, or the process' own. Return exit status.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.action != self.raw_grammar:
            if self.args.expression is None and not self.args.prompt:
                self.argument_parser.error('the following arguments are '
                                           'required: expression')
            if self.args.expression is not None and self.args.prompt:
                self.argument_parser.error('an expression and --prompt are '
                                           'mutually exclusive')
        logging.basicConfig(level=(logging.DEBUG
                                   if self.args.verbose
                                   else logging.WARNING),
                            format='%(name)s: %(message)s',
                            stream=sys.stderr)
        self.converter = Converter()
        self.evaluator = Evaluator()
        try:
            return self.args.action()
        except KeyboardInterrupt:
            return 1
