'''
Infix description tests
'''


def test_empty(brain):
    assert brain.description == '  ='


def test_binary(brain, push):
    push(brain, 3, 4, '+')
    assert brain.description == '3 + 4 ='


def test_operand_order(brain, push):
    push(brain, 6, 2, '÷')
    assert brain.description == '6 ÷ 2 ='


def test_nested_binary_parenthesized(brain, push):
    push(brain, 3, 5, 4, '+', '✕')
    assert brain.description == '3 ✕ (5 + 4) ='


def test_unary(brain, push):
    push(brain, 9, '√')
    assert brain.description == '√(9) ='


def test_unary_of_binary_not_parenthesized_twice(brain, push):
    push(brain, 3, 5, '+', '√')
    assert brain.description == '√(3 + 5) ='


def test_binary_of_unary(brain, push):
    push(brain, 'π', 'cos', 2, '−')
    assert brain.description == 'cos(π) − 2 ='


def test_missing_operand(brain, push):
    push(brain, 3, '+')
    assert brain.description == '  + 3 ='
    brain.clear()
    push(brain, '√')
    assert brain.description == '√( ) ='


def test_several_expressions_latest_first(brain, push):
    push(brain, 3, 4, '+', 5)
    assert brain.description == '3 + 4, 5 ='
    push(brain, 'cos')
    assert brain.description == '3 + 4, cos(5) ='


def test_variables_and_fractions(brain, push):
    brain.push_variable('x')
    push(brain, 0.5, '✕')
    assert brain.description == 'x ✕ 0.5 ='


def test_idempotent(brain, push):
    push(brain, 1, 2, 3, '+', '−', 'sin')
    assert brain.description == brain.description


def test_long_chain(brain):
    brain.program = ['1'] + ['1', '+'] * 1200
    description = brain.description
    assert description.startswith('(' * 1199 + '1 + 1) + 1)')
    assert description.endswith(') + 1 =')
    assert description.count('+') == 1200


def test_long_chain_twice_on_stack(brain):
    brain.program = ['2', '√'] * 1500
    assert brain.description == ', '.join(['√(2)'] * 1500) + ' ='
