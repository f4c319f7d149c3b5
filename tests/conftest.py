from pytest import fixture

from calcbrain.brain import Brain
from calcbrain.lexer import Lexer


@fixture
def brain() -> Brain:
    return Brain()


@fixture
def lexer(brain: Brain) -> Lexer:
    return Lexer(brain.registry)


def push_all(brain: Brain, *items) -> None:
    '''
    Push numbers as operands, and strings as operations.
    '''
    for item in items:
        if isinstance(item, str):
            brain.perform_operation(item)
        else:
            brain.push_operand(item)


@fixture
def push():
    return push_all
