'''
The calculator brain: a program of operations, evaluated as RPN.
'''

import logging

import regex

from .numeric import parse_number
from .operations import (BinaryOperation, Constant, Operand, UnaryOperation,
                         Variable)
from .registry import Registry
from .util import RPNError


logger = logging.getLogger(__name__)

# What a restored token must look like to become a variable reference.
NAME = r'[^\W\d]\w*'
_NAME = regex.compile(NAME)


class Brain:
    '''
    RPN calculator engine.

    Keeps the program (operations in entry order, last is the top of the
    stack) and variable bindings. Every push re-evaluates and returns the
    fresh result; None stands for "no value", never an error.

    Not thread-safe. Callers sharing one brain must hold a single lock
    around every call.
    '''

    def __init__(self):
        self.registry = Registry.builtin()
        self.variables = dict()
        self._program = []

    def clear(self):
        '''
        Forget the program and all variable bindings.
        '''
        self._program = []
        self.variables.clear()

    def push_operand(self, operand):
        '''
        Push a number, or a variable reference when given a name.
        '''
        if isinstance(operand, str):
            return self.push_variable(operand)
        self._program.append(Operand(float(operand)))
        return self.evaluate()

    def push_variable(self, name):
        '''
        Push a reference to the variable name.

        Names that would read back as something else from the program
        (numbers like nan, operator symbols like π) are refused.
        '''
        if self._restore(name) != Variable(name):
            raise RPNError('{} is not a variable name'.format(repr(name)))
        self._program.append(Variable(name))
        return self.evaluate()

    def perform_operation(self, symbol):
        '''
        Push the known operation symbol; unknown symbols push nothing.
        '''
        operation = self.registry.lookup(symbol)
        if operation is not None:
            self._program.append(operation)
        else:
            logger.debug('Unknown operation %r', symbol)
        return self.evaluate()

    def set_variable(self, name, value):
        '''
        Bind name to value. Doesn't re-evaluate.
        '''
        self.variables[name] = float(value)

    def _value(self, op):
        '''
        Value of an operand-like operation; None for an unbound variable.
        '''
        if isinstance(op, (Operand, Constant)):
            return op.value
        elif isinstance(op, Variable):
            return self.variables.get(op.name)
        raise TypeError('Not an operation: {}'.format(repr(op)))

    def _evaluate(self, ops, end):
        '''
        Evaluate the expression topping ops[:end].

        Return the result (or None) and the end of what's left over.
        Operators waiting on operands are kept on an explicit stack, so
        arbitrarily long chains don't exhaust Python's recursion limit.
        '''
        # (operator, operands gathered so far), innermost last
        pending = []
        while True:
            if not end:
                result = None
            else:
                op = ops[end - 1]
                end -= 1
                if isinstance(op, (UnaryOperation, BinaryOperation)):
                    pending.append((op, []))
                    continue
                # Unbound still consumes the reference.
                result = self._value(op)
            while pending:
                op, operands = pending[-1]
                if result is None:
                    pending.pop()
                    continue
                operands.append(result)
                if len(operands) < op.arity:
                    break
                pending.pop()
                # Top of stack first: function(a, b)
                result = op.function(*operands)
            else:
                return result, end

    def evaluate(self):
        '''
        Evaluate the whole program. Leftover operands are ignored.
        '''
        result, end = self._evaluate(self._program, len(self._program))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('%s = %s with %s left over',
                         self.program, result, self.program[:end])
        return result

    def _describe(self, ops, end, parent_is_binary=False):
        '''
        Render the expression topping ops[:end] as infix text.

        Nested binary expressions are parenthesized; a missing operand
        renders as a blank.
        '''
        # (operator, operand texts so far, whether its parent is binary)
        pending = []
        while True:
            if not end:
                text = ' '
            else:
                op = ops[end - 1]
                end -= 1
                if isinstance(op, (UnaryOperation, BinaryOperation)):
                    pending.append((op, [], parent_is_binary))
                    parent_is_binary = isinstance(op, BinaryOperation)
                    continue
                text = op.symbol
            while pending:
                op, operands, parent = pending[-1]
                operands.append(text)
                if len(operands) < op.arity:
                    # Second operand of a binary operator.
                    parent_is_binary = True
                    break
                pending.pop()
                if isinstance(op, UnaryOperation):
                    text = '{}({})'.format(op.symbol, operands[0])
                else:
                    a, b = operands
                    text = '{} {} {}'.format(b, op.symbol, a)
                    if parent:
                        text = '({})'.format(text)
            else:
                return text, end

    @property
    def description(self):
        '''
        Infix rendering of every expression on the program, latest first.
        '''
        ops = self._program
        result, end = self._describe(ops, len(ops))
        while end:
            previous, end = self._describe(ops, end)
            result = '{}, {}'.format(previous, result)
        return '{} ='.format(result)

    @property
    def program(self):
        '''
        The program as plain tokens, suitable for storing and restoring.
        '''
        return [op.symbol for op in self._program]

    @program.setter
    def program(self, tokens):
        if tokens is None:
            return
        if isinstance(tokens, str):
            raise TypeError('Program must be a sequence of tokens, not a '
                            'string')
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError('Program token {} is not a string'.format(
                    repr(token)))
        self._program = [op
                         for op
                         in map(self._restore, tokens)
                         if op is not None]

    def _restore(self, token):
        '''
        Turn a program token back into an operation, or None to drop it.
        '''
        op = self.registry.lookup(token)
        if op is not None:
            return op
        value = parse_number(token)
        if value is not None:
            return Operand(value)
        if _NAME.fullmatch(token):
            return Variable(token)
        logger.debug('Dropping token %r', token)
        return None
