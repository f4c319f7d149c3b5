'''
Operator registry tests
'''

import regex

from pytest import raises

from calcbrain.operations import BinaryOperation, Constant, UnaryOperation
from calcbrain.registry import Registry
from calcbrain.util import RPNError


def test_builtins():
    registry = Registry.builtin()
    assert set(registry) == {'✕', '÷', '+', '−', '√', 'cos', 'sin', 'π'}
    assert len(registry) == 8
    assert isinstance(registry.lookup('÷'), BinaryOperation)
    assert isinstance(registry.lookup('sin'), UnaryOperation)
    assert isinstance(registry.lookup('π'), Constant)


def test_unknown_symbol():
    registry = Registry.builtin()
    assert registry.lookup('%') is None
    assert '%' not in registry


def test_frozen():
    registry = Registry.builtin()
    with raises(RPNError, match=regex.escape("cannot learn '%'")):
        registry.register(Constant('%', 0.01))
    assert registry.lookup('%') is None


def test_last_registration_wins():
    registry = Registry([Constant('e', 2.0), Constant('e', 2.718)])
    assert registry.lookup('e').value == 2.718
    assert len(registry) == 1


def test_arity():
    registry = Registry.builtin()
    assert [registry.lookup(symbol).arity
            for symbol
            in ('π', 'cos', '+')] == [0, 1, 2]
