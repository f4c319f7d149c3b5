'''
The operations a program is made of.

A closed set: literal operands, variable references, named constants, and
one- or two-argument operators. Nothing else may appear on a program.
'''

from dataclasses import dataclass
from typing import Callable, ClassVar

from .numeric import format_number


@dataclass(frozen=True)
class Operand:
    value: float

    arity: ClassVar[int] = 0

    @property
    def symbol(self):
        return format_number(self.value)


@dataclass(frozen=True)
class Variable:
    '''
    Deferred lookup of a named value, resolved at evaluation time.
    '''
    name: str

    arity: ClassVar[int] = 0

    @property
    def symbol(self):
        return self.name


@dataclass(frozen=True)
class Constant:
    '''
    Named fixed value; the value is captured when registered.
    '''
    symbol: str
    value: float

    arity: ClassVar[int] = 0


@dataclass(frozen=True)
class UnaryOperation:
    symbol: str
    function: Callable[[float], float]

    arity: ClassVar[int] = 1


@dataclass(frozen=True)
class BinaryOperation:
    '''
    Two-argument operator.

    function(a, b) receives the operand nearest the top of the stack first,
    so for "6 2 ÷" it is called as function(2, 6).
    '''
    symbol: str
    function: Callable[[float, float], float]

    arity: ClassVar[int] = 2

