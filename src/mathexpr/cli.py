from os import isatty, path
import sys
from argparse import ArgumentParser, ArgumentTypeError, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from . import builtins
from .evaluator import Evaluator
from .util import MathExprError


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, history_file):
        self.prompt = prompt
        self.history_file = history_file

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    history=FileHistory(self.history_file),
                                    enable_suspend=True,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


def definition(text):
    '''
    Parse a NAME=VALUE variable definition.
    '''
    name, sep, value = text.partition('=')
    if not sep or not name.strip():
        raise ArgumentTypeError('Expected NAME=VALUE, got {}'.format(
            repr(text)))
    try:
        return name.strip(), float(value)
    except ValueError:
        raise ArgumentTypeError('Bad value for {}: {}'.format(
            name.strip(), repr(value)))


class CLI:
    '''
    Command line interface to the evaluator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.mathexpr_history'
    QUIT = {'exit', 'quit', 'exit()', 'quit()'}

    def executor(self):
        '''
        Evaluate every expression, printing results or errors.
        '''
        evaluator = Evaluator(precision=self.args.precision)
        evaluator.add_variables(self.args.variables)
        expressions = self.args.expressions
        if expressions is None:
            expressions = self._prompting_input()
        for line in expressions:
            line = line.strip()
            if not line:
                continue
            if line in self.QUIT:
                break
            try:
                result = evaluator.evaluate(line)
            # One bad line doesn't stop the rest
            except MathExprError as e:
                logger.debug('Failed to evaluate %r', line, exc_info=True)
                print(e, file=sys.stderr)
            else:
                print('{} = {}'.format(line, result))

    def lister(self):
        '''
        Print every builtin function and constant.
        '''
        print('functions:', *sorted(builtins.FUNCTIONS))
        print('constants:', *sorted(builtins.CONSTANTS))

    def _prompting_input(self):
        '''
        Return prompting input if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history_file=path.expanduser(
                                        self.HISTORY_FILE))
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Mathematical expression evaluator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-k', '--precision', type=int,
                                          help='round results to this many '
                                               'decimal places')
        self.argument_parser.add_argument('-D', '--define', type=definition,
                                          action='append', dest='variables',
                                          metavar='NAME=VALUE')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        self.argument_parser.add_argument('-l', '--list',
                                          action='store_const',
                                          const=self.lister,
                                          dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None,
                                          variables=[],
                                          precision=Evaluator.DEFAULT_PRECISION)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(level=logging.DEBUG if self.args.verbose
                            else logging.WARNING)
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)


def main():
    CLI().run()
