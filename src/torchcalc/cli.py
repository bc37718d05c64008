from os import isatty
import sys
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from .util import CalcError, iserror, to_display
from .lexer import Lexer
from .resolver import Resolver
from .session import Session


class InteractiveInput:
    # Offered on tab; glyphs are typed directly.
    WORDS = sorted(Resolver.FUNCTIONS) + ['pi', 'e']

    def __init__(self, prompt):
        self.prompt = prompt

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Lives as long as the calculator; never
                                    # written to disk.
                                    history=InMemoryHistory(),
                                    completer=WordCompleter(self.WORDS),
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

    Every line is a fresh expression. Lines starting with a colon are
    commands, see HELP.
    '''

    DEFAULT_PROMPT = '> '
    HELP = '''\
:history  list evaluations, oldest first
:forget   clear the history
:help     this text
functions: {functions} (trigonometry in degrees)
operators: + - * × / ÷ % ^ ( ), constants: π e'''

    def dumper(self):
        '''
        Dump the tokens of each expression, after normalization and function
        resolution.
        '''
        session = self._session()
        print('<kind>\t<value>')
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            try:
                for token in session.evaluator.tokens(line):
                    print(token.kind, repr(token.value), sep='\t')
            except CalcError as e:
                self._report(e.reason, e.args[0])

    def executor(self):
        '''
        Evaluate each expression, printing its result.
        '''
        session = self._session()
        for line in self.args.expressions:
            line = line.strip()
            if not line:
                continue
            if line.startswith(':'):
                self.command(session, line)
                continue
            session.clear()
            session.append(line)
            result = session.evaluate()
            if iserror(result):
                self._report(result.reason, result.message)
            else:
                print(session.get_display(), flush=True)

    def command(self, session, line):
        '''
        Run a colon command against session.
        '''
        if line == ':history':
            for entry in session.get_history():
                if iserror(entry.result):
                    shown = 'Error: ' + entry.result.message
                else:
                    shown = to_display(entry.result, session.precision)
                print(entry.expression, '=', shown)
        elif line == ':forget':
            session.history.clear()
        elif line == ':help':
            print(self.HELP.format(
                functions=' '.join(sorted(Resolver.FUNCTIONS))))
        else:
            print('Unknown command {}, try :help'.format(line),
                  file=sys.stderr)

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _session(self):
        return Session(history_size=self.args.history_size,
                       precision=self.args.precision)

    def _report(self, reason, message):
        if self.args.verbose:
            print('Error: {} [{}]'.format(message, reason),
                  file=sys.stderr)
        else:
            print('Error: {}'.format(message), file=sys.stderr)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(stdin.fileno()) and isatty(stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT)
        else:
            return stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Scientific calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-n', '--history-size',
                                          type=int,
                                          default=None,
                                          help='evaluations to remember '
                                               '(default: all)')
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          default=Session.DEFAULT_PRECISION,
                                          help='significant digits shown')
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
                                          expressions=stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.history_size is not None and self.args.history_size < 1:
            self.argument_parser.error('history size must be positive')
        if self.args.precision < 1:
            self.argument_parser.error('precision must be positive')
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
