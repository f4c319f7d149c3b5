from itertools import chain
from functools import reduce
import operator

import regex

from .brain import NAME
from .numeric import NUMBER
from .util import RPNError


class Lexer:
    '''
    Lexer for the calculator's *regular* input grammar.

    Operator symbols come from the registry it's built with, so it needs to
    be instantiated.
    '''
    # ASCII (and long-hand) spellings of registry symbols.
    ALIASES = {
        '*': '✕',
        '/': '÷',
        '-': '−',
        'sqrt': '√',
        'pi': 'π',
    }
    # Bind the current value to a variable: →x, or >x if you lack the arrow.
    STORE = r'(?:→|>)(?<__name__>' + NAME + r')'
    # Out of band commands to the CLI: :clear, :program, ...
    COMMAND = r':(?<__command__>' + NAME + r')'
    # Named operations and constants (cos, π) or variables.
    WORD = NAME
    SPACE = r'\s+'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def __init__(self, registry):
        '''
        Build the grammar for the operators registry knows.
        '''
        self.registry = registry
        # Words are lexed as words, then resolved.
        symbols = sorted({symbol
                          for symbol
                          in chain(registry, type(self).ALIASES)
                          if not regex.fullmatch(NAME, symbol)},
                         key=len, reverse=True)
        self.OPERATOR = r'(?:' + r'|'.join(map(regex.escape, symbols)) + r')'
        # Immediate, as in immediately complete lexeme
        self.IMMEDIATE = r'(?<operator>' + self.OPERATOR + r')|' \
                         r'(?<space>' + type(self).SPACE + r')'
        # All possible lexemes.
        self.LEXEME = r'(?<number>' + NUMBER + r')|' \
                      r'(?<store>' + type(self).STORE + r')|' \
                      r'(?<command>' + type(self).COMMAND + r')|' \
                      r'(?<word>' + type(self).WORD + r')|' \
                      r'(?<immediate>' + self.IMMEDIATE + r')'
        self._lexeme = regex.compile(self.LEXEME, flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.
        '''
        while line:
            match = self._lexeme.match(line)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise RPNError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to a brain.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value and key != 'immediate'}

    def symbol(self, text):
        '''
        Registry symbol for an operator or word, through the aliases.
        '''
        return type(self).ALIASES.get(text, text)

    def lookup(self, text):
        '''
        Operation an operator or word denotes, or None for a variable name.
        '''
        return self.registry.lookup(self.symbol(text))
