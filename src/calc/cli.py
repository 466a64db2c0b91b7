from os import path
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import traceback
import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory

from .util import CalcError
from .lexer import Lexer
from .calculator import Calculator


class InteractiveInput:
    def __init__(self, prompt, history=None):
        self.prompt = prompt
        self.history = history

    def _history(self):
        if not self.history:
            # prompt_toolkit falls back to in-memory history.
            return None
        return FileHistory(path.expanduser(self.history))

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    history=self._history(),
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '
    HISTORY_FILE = '~/.calc_history'

    def _lines(self):
        '''
        Yield expressions with their line endings stripped.
        '''
        for line in self.args.expressions:
            yield line.rstrip('\r\n')

    def _error(self, e):
        print(e, file=sys.stderr)
        if self.args.verbose:
            traceback.print_exception(type(e), e, e.__traceback__,
                                      file=sys.stderr)

    def _round(self, n):
        '''
        Round result to precision if asked to.
        '''
        if self.args.precision is None:
            return n
        return round(n, self.args.precision)

    def dumper(self):
        '''
        Dump tokens and postfix of every expression.
        '''
        calculator = Calculator(strict=self.args.strict)
        print('<tokens>\t<postfix>')
        for line in self._lines():
            try:
                tokens = calculator.lexer.tokenize(line)
                postfix = calculator.converter.to_postfix(tokens)
            # Abort this expression only, keep going with the next
            except CalcError as e:
                self._error(e)
                continue
            print(' '.join(map(str, tokens)),
                  ' '.join(map(str, postfix)),
                  sep='\t')

    def executor(self):
        '''
        Evaluate every expression and print its result.
        '''
        calculator = Calculator(strict=self.args.strict)
        for line in self._lines():
            try:
                result = calculator.eval(line)
            except CalcError as e:
                self._error(e)
                continue
            print(self._round(result))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        print(Lexer.LEXEME)

    def _prompting_input(self):
        '''
        Return a prompting session instead of bare stdin if either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           sys.stdin.isatty() and sys.stdout.isatty():
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    history=self.args.history)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Infix arithmetic calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true',
                                          help='print tracebacks on errors')
        self.argument_parser.add_argument('-s', '--strict',
                                          action='store_true',
                                          help='reject unknown characters '
                                               'instead of ignoring them')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round results to this many '
                                               'digits')
        self.argument_parser.add_argument('-H', '--history',
                                          default=self.HISTORY_FILE,
                                          help='interactive history file, '
                                               'empty for none')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=None)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.expressions is None:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
