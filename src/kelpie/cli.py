from os import environ, isatty
import sys
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from .conversions import Dimension, convert, find_unit, get_units
from .evaluator import Evaluator
from .functions import AngleMode
from .parser import Parser
from .util import ConversionError, KelpieError


logger = logging.getLogger(__name__)


class InteractiveInput:
    def __init__(self, prompt, words=()):
        self.prompt = prompt
        self.words = list(words)

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    # Session only; nothing is saved to disk.
                                    history=InMemoryHistory(),
                                    completer=WordCompleter(self.words),
                                    complete_while_typing=False,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the evaluator and unit converter.
    '''

    DEFAULT_PROMPT = '> '
    DEFAULT_ANGLE_MODE = 'degrees'
    ANGLE_MODE_ENV = 'KELPIE_ANGLE_MODE'
    LOG_FORMAT = '%(levelname)s [%(name)s] %(message)s'

    def _evaluator(self):
        return Evaluator(angle_mode=self.args.angle_mode)

    def _units(self):
        '''
        Return (from, to) units to convert results with, if any.
        '''
        if self.args.convert is None:
            return None
        from_unit, to_unit = (find_unit(name) for name in self.args.convert)
        if from_unit.dimension != to_unit.dimension:
            raise ConversionError("Can't convert {} ({}) to {} ({})".format(
                from_unit, from_unit.dimension, to_unit, to_unit.dimension))
        return from_unit, to_unit

    def _round(self, n):
        '''
        Round number to precision (on output) if set to round.
        '''
        if self.args.precision is None:
            return n
        return round(n, self.args.precision)

    def executor(self):
        '''
        Evaluate each expression, printing its value or what's wrong with it.
        '''
        evaluator = self._evaluator()
        units = self._units()
        for line in self.args.expressions:
            expression = line.rstrip('\n')
            try:
                result = evaluator.evaluate(expression)
            # Carry on with the next one; a bad expression is no reason to quit
            except KelpieError as e:
                print(e.args[0], file=sys.stderr)
                continue
            if units is not None:
                result = convert(result, *units)
                logger.debug('converted to %s: %r', units[1], result)
            print(self._round(result))

    def dumper(self):
        '''
        Dump tokens and syntax tree of each expression.
        '''
        evaluator = self._evaluator()
        print('<tokens>\t<ast>')
        for line in self.args.expressions:
            expression = line.rstrip('\n')
            try:
                tokens = list(evaluator.lexer.lex(expression))
                ast = Parser(tokens).parse()
            except KelpieError as e:
                print(e.args[0], file=sys.stderr)
                continue
            print(' '.join(map(str, tokens)), repr(ast), sep='\t')

    def raw_grammar(self):
        '''
        Print current internally defined lexeme grammar.
        '''
        print(self._evaluator().lexer.grammar)

    def list_functions(self):
        for function in self._evaluator().function_register():
            print(function.name)

    def list_constants(self):
        for constant in self._evaluator().constant_register():
            print(constant.name, constant.value, sep='\t')

    def list_units(self):
        '''
        Print every unit, by dimension.
        '''
        for dimension in Dimension:
            print(dimension)
            for unit in get_units(dimension):
                print('', unit.name, unit.system, sep='\t')

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            evaluator = self._evaluator()
            words = [function.name for function in evaluator.function_register()]
            words += [constant.name for constant in evaluator.constant_register()]
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    words=words)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(
            description='Calculator and unit converter')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument(
            '-a', '--angle-mode',
            type=AngleMode.parse,
            default=environ.get(self.ANGLE_MODE_ENV, self.DEFAULT_ANGLE_MODE),
            help='degrees, radians or gradians (default: ${} or {})'.format(
                self.ANGLE_MODE_ENV, self.DEFAULT_ANGLE_MODE))
        self.argument_parser.add_argument('-k', '--precision',
                                          type=int,
                                          help='round results to this many '
                                               'decimal places')
        self.argument_parser.add_argument('-c', '--convert',
                                          nargs=2,
                                          metavar=('FROM', 'TO'),
                                          help='convert results between '
                                               'units')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-F', '--functions',
                                       self.list_functions),
                                      ('-C', '--constants',
                                       self.list_constants),
                                      ('-U', '--units', self.list_units),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=self.executor,
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(
            level=logging.DEBUG if self.args.verbose else logging.WARNING,
            format=self.LOG_FORMAT)
        # Listing actions never read expressions, so never prompt for them.
        if self.args.action in (self.executor, self.dumper) and \
           self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except ConversionError as e:
            print(e.args[0], file=sys.stderr)
            sys.exit(2)
        except KeyboardInterrupt:
            sys.exit(1)
