'''
RPN calculator brain.

Operands, variables and operators are pushed one at a time onto a program;
after every push the program is evaluated as RPN, and can be described back
as conventional infix text, e.g. "3 + 4 =".

The program can be exported as plain tokens and restored later, on this or
another brain.
'''

from .brain import Brain
from .cli import CLI
from .lexer import Lexer
from .registry import Registry
from .util import RPNError


__all__ = 'Brain', 'Registry', 'Lexer', 'CLI', 'RPNError'
