'''
Recursive descent parser and the syntax tree it builds.

Precedence, loosest first: addition and subtraction, multiplication and
division, exponentiation, then numbers, parentheses, negation and function
calls. Every level associates to the left, exponentiation included, so
2^3^2 is (2^3)^2.
'''

from collections import namedtuple

import numpy

from .lexer import TokenKind
from .util import ParseError, ieee754


# Closed sets: nothing else may appear in a UnaryOp or BinaryOp.
BINARY = {
    TokenKind.PLUS: numpy.add,
    TokenKind.MINUS: numpy.subtract,
    TokenKind.MULTIPLY: numpy.multiply,
    TokenKind.DIVIDE: numpy.true_divide,
    TokenKind.EXPONENT: numpy.power,
}
UNARY = {
    TokenKind.MINUS: numpy.negative,
}


class Number(namedtuple('Number', 'value')):
    __slots__ = ()

    def evaluate(self, mode):
        return self.value


class UnaryOp(namedtuple('UnaryOp', 'op expr')):
    __slots__ = ()

    @ieee754
    def evaluate(self, mode):
        return UNARY[self.op.kind](self.expr.evaluate(mode))


class BinaryOp(namedtuple('BinaryOp', 'left op right')):
    __slots__ = ()

    @ieee754
    def evaluate(self, mode):
        # Both sides, always. No short circuits.
        left = numpy.float64(self.left.evaluate(mode))
        right = numpy.float64(self.right.evaluate(mode))
        return BINARY[self.op.kind](left, right)


class FunctionCall(namedtuple('FunctionCall', 'function expr')):
    __slots__ = ()

    def evaluate(self, mode):
        return self.function.evaluate(self.expr.evaluate(mode), mode)


class Parser:
    '''
    Single pass, single token lookahead, no backtracking.
    '''

    def __init__(self, tokens):
        self.tokens = list(tokens)
        self.current = 0

    def parse(self):
        '''
        Parse all tokens into one tree.
        '''
        node = self._expression()
        leftover = self._peek()
        if leftover is not None:
            raise ParseError('Unexpected token: {}'.format(leftover))
        return node

    def _expression(self):
        return self._add_sub()

    def _add_sub(self):
        return self._binary({TokenKind.PLUS, TokenKind.MINUS}, self._mul_div)

    def _mul_div(self):
        return self._binary({TokenKind.MULTIPLY, TokenKind.DIVIDE},
                            self._exponent)

    def _exponent(self):
        return self._binary({TokenKind.EXPONENT}, self._primary)

    def _binary(self, kinds, operand):
        '''
        Fold operand (op operand)* to the left.
        '''
        node = operand()
        token = self._peek()
        while token is not None and token.kind in kinds:
            self.current += 1
            node = BinaryOp(node, token, operand())
            token = self._peek()
        return node

    def _primary(self):
        token = self._next()
        if token.kind is TokenKind.NUMBER:
            return Number(token.value)
        elif token.kind is TokenKind.OPEN_PAREN:
            node = self._expression()
            self._close()
            return node
        elif token.kind is TokenKind.MINUS:
            return UnaryOp(token, self._primary())
        elif token.kind is TokenKind.UNARY_FUNCTION:
            if self._peek_kind() is not TokenKind.OPEN_PAREN:
                raise ParseError('Function must be followed by opening '
                                 'parenthesis')
            self.current += 1
            node = self._expression()
            self._close()
            return FunctionCall(token.value, node)
        raise ParseError('Unexpected token: {}'.format(token))

    def _close(self):
        if self._peek_kind() is not TokenKind.CLOSE_PAREN:
            raise ParseError('Unmatched opening parenthesis')
        self.current += 1

    def _peek(self):
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _peek_kind(self):
        token = self._peek()
        return token.kind if token is not None else None

    def _next(self):
        token = self._peek()
        if token is None:
            raise ParseError('Unexpected end of token stream')
        self.current += 1
        return token
