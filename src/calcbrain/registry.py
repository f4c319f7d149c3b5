'''
Registry of known operators and constants, keyed by symbol.
'''

import logging
import math

from .operations import BinaryOperation, Constant, UnaryOperation
from .util import RPNError


logger = logging.getLogger(__name__)


def _unary(f):
    '''
    Make a math function total: domain errors become nan.
    '''
    def wrapped(only):
        try:
            return f(only)
        except (ValueError, OverflowError):
            return math.nan
    wrapped.__doc__ = f.__doc__
    wrapped.__name__ = f.__name__
    return wrapped


def _divide(a, b):
    '''
    b / a, with IEEE-754 results for a zero divisor.
    '''
    if a == 0:
        if b == 0 or math.isnan(b):
            return math.nan
        return math.copysign(math.inf, b) * math.copysign(1.0, a)
    return b / a


# Operand order: a is the top of stack, b the one below it.
BUILTINS = (
    BinaryOperation('✕', lambda a, b: a * b),
    BinaryOperation('÷', _divide),
    BinaryOperation('+', lambda a, b: a + b),
    BinaryOperation('−', lambda a, b: b - a),
    UnaryOperation('√', _unary(math.sqrt)),
    UnaryOperation('cos', _unary(math.cos)),
    UnaryOperation('sin', _unary(math.sin)),
    Constant('π', math.pi),
)


class Registry:
    '''
    Mapping from symbol to operation.

    Learned once, then frozen; lookups never change it.
    '''

    def __init__(self, operations=()):
        self._operations = dict()
        self.frozen = False
        for operation in operations:
            self.register(operation)

    @classmethod
    def builtin(cls):
        '''
        Create the frozen registry of built-in operators and constants.
        '''
        registry = cls(BUILTINS)
        registry.freeze()
        return registry

    def register(self, operation):
        '''
        Learn operation under its symbol. Last registration wins.
        '''
        if self.frozen:
            raise RPNError('Registry is frozen, cannot learn {}'.format(
                repr(operation.symbol)))
        if operation.symbol in self._operations:
            logger.debug('Relearning %r', operation.symbol)
        self._operations[operation.symbol] = operation

    def freeze(self):
        self.frozen = True

    def lookup(self, symbol):
        '''
        Return the operation for symbol, or None if unknown.
        '''
        return self._operations.get(symbol)

    def __contains__(self, symbol):
        return symbol in self._operations

    def __iter__(self):
        return iter(self._operations)

    def __len__(self):
        return len(self._operations)
