'''
Program export and import tests
'''

import math

from pytest import raises

from calcbrain.brain import Brain


def test_export(brain, push):
    push(brain, 3, 4.5, '+', 'π', '✕')
    brain.push_variable('x')
    assert brain.program == ['3', '4.5', '+', 'π', '✕', 'x']


def test_import(brain):
    brain.program = ['2', '3', '+']
    assert brain.evaluate() == 5
    assert brain.description == '2 + 3 ='


def test_import_replaces(brain, push):
    push(brain, 7, 8, 9)
    brain.program = ['1']
    assert brain.program == ['1']


def test_import_drops_bad_tokens(brain):
    brain.program = ['2', '@@', '3', '', '+', '1,5']
    assert brain.program == ['2', '3', '+']
    assert brain.evaluate() == 5


def test_import_ascii_spelling_is_not_an_operator(brain):
    brain.program = ['7', '2', '-']
    assert brain.program == ['7', '2']


def test_import_numbers(brain):
    brain.program = ['-3', '1_000', '2.5e3', 'inf']
    assert brain.program == ['-3', '1000', '2500', 'inf']


def test_round_trip(brain, push):
    brain.set_variable('x', 0.1)
    push(brain, 0.1, 1e-7, '+')
    brain.push_variable('x')
    push(brain, '✕', 'π', 'sin', '÷', math.sqrt(2), '√', '−')
    restored = Brain()
    restored.set_variable('x', 0.1)
    restored.program = brain.program
    assert restored.program == brain.program
    assert restored.evaluate() == brain.evaluate()
    assert restored.description == brain.description


def test_none_is_noop(brain, push):
    push(brain, 1, 2)
    brain.program = None
    assert brain.program == ['1', '2']


def test_rejects_bad_shapes(brain, push):
    push(brain, 1, 2)
    with raises(TypeError):
        brain.program = '1 2 +'
    with raises(TypeError):
        brain.program = ['1', 2, '+']
    assert brain.program == ['1', '2']


def test_round_trip_negative_zero(brain, push):
    push(brain, 1, -0.0, '÷')
    assert brain.evaluate() == -math.inf
    assert brain.program == ['1', '-0.0', '÷']
    restored = Brain()
    restored.program = brain.program
    assert restored.evaluate() == -math.inf


def test_round_trip_long_chain(brain):
    brain.program = ['1'] + ['1', '+'] * 1200
    restored = Brain()
    restored.program = brain.program
    assert restored.evaluate() == brain.evaluate() == 1201
