from os import isatty
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

import regex
from prompt_toolkit import PromptSession

from .brain import Brain, NAME
from .lexer import Lexer
from .numeric import format_number, parse_number
from .util import RPNError, wrap_user_errors


class InteractiveInput:
    def __init__(self, prompt, toolbar=None):
        self.prompt = prompt
        self.toolbar = toolbar

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Current expression, as described.
                                    bottom_toolbar=self.toolbar,
                                    prompt_continuation=' ' * len(self.prompt),
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator brain.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes matches, and arity of what they resolve to.
        '''
        lexer = Lexer(self.brain.registry)
        print('[groups]\t<repr(lexeme)>\t<arity>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)  # the lexeme text itself
                groups = lexer.matchedgroups(match)
                print(*groups.keys(),
                      repr(matched),
                      self._arity(lexer, groups),
                      sep='\t')

    def _arity(self, lexer, groups):
        if 'number' in groups:
            return 0
        for key in 'operator', 'word':
            if key in groups:
                operation = lexer.lookup(groups[key])
                # Unknown words are variables.
                return 0 if operation is None else operation.arity
        return None

    def executor(self):
        '''
        Run the brain on every input line, printing where it's at.
        '''
        lexer = Lexer(self.brain.registry)
        for line in self.args.expressions:
            fed = False
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        fed |= self.feed(lexer, lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except RPNError as e:
                print(e.args[0], file=sys.stderr)
            if fed:
                self.printresult()

    def feed(self, lexer, groups):
        '''
        Push or run one lexeme on the brain.

        Return True if the brain's program or variables may have changed.
        '''
        brain = self.brain
        if 'number' in groups:
            brain.push_operand(parse_number(groups['number']))
        elif 'operator' in groups:
            brain.perform_operation(lexer.symbol(groups['operator']))
        elif 'word' in groups:
            word = groups['word']
            if lexer.lookup(word) is None:
                brain.push_variable(word)
            else:
                brain.perform_operation(lexer.symbol(word))
        elif 'store' in groups:
            self.store(groups['__name__'])
        elif 'command' in groups:
            return self.command(groups['__command__'])
        return True

    def store(self, name):
        '''
        Bind the current value to name.
        '''
        value = self.brain.evaluate()
        if value is None:
            raise RPNError('Nothing to store in {}'.format(repr(name)))
        self.brain.set_variable(name, value)

    def command(self, name):
        if name == 'clear':
            self.brain.clear()
            print(self.brain.description)
        elif name == 'program':
            print(*self.brain.program)
        elif name == 'vars':
            for variable, value in sorted(self.brain.variables.items()):
                print('{}={}'.format(variable, format_number(value)))
        else:
            raise RPNError('No such command {}'.format(repr(name)))
        return False

    def printresult(self):
        '''
        Print the description, and the value if there is one.
        '''
        value = self.brain.evaluate()
        if value is None:
            print(self.brain.description)
        else:
            print(self.brain.description, format_number(value))

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer(self.brain.registry)
        print(lexer.LEXEME)

    @wrap_user_errors('Bad binding {1}')
    def bind(self, binding):
        '''
        Apply a NAME=VALUE binding to the brain.
        '''
        name, value = binding.split('=', 1)
        number = parse_number(value.strip())
        if number is None or not regex.fullmatch(NAME, name.strip()):
            raise ValueError(binding)
        self.brain.set_variable(name.strip(), number)

    def _prompting_input(self):
        '''
        Return prompting stdin.__iter__ decorator...

        If either:
        - prompt explicitly specified.
        - both stdin/out are a tty
        '''
        if self.args.prompt or \
           isatty(sys.stdin.fileno()) and isatty(sys.stdout.fileno()):
            return InteractiveInput(prompt=self.args.prompt or
                                    self.DEFAULT_PROMPT,
                                    toolbar=lambda: self.brain.description)
        else:
            return sys.stdin

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.brain = Brain()
        self.argument_parser = ArgumentParser(description='RPN calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        self.argument_parser.add_argument('-s', '--set',
                                          action='append',
                                          metavar='NAME=VALUE',
                                          dest='bindings',
                                          default=[])
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
                                          expressions=sys.stdin)

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        logging.basicConfig(stream=sys.stderr,
                            level=(logging.DEBUG
                                   if self.args.verbose
                                   else logging.WARNING),
                            format='%(name)s: %(message)s')
        for binding in self.args.bindings:
            try:
                self.bind(binding)
            except RPNError as e:
                self.argument_parser.error(e.args[0])
        if self.args.expressions is sys.stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            sys.exit(1)
