from collections import namedtuple
from enum import Enum

import regex

from .util import TokenizeError, wrap_user_errors


class TokenKind(Enum):
    NUMBER = 'Number'
    PLUS = 'Plus'
    MINUS = 'Minus'
    MULTIPLY = 'Multiply'
    DIVIDE = 'Divide'
    EXPONENT = 'Exponent'
    OPEN_PAREN = 'OpenParen'
    CLOSE_PAREN = 'CloseParen'
    UNARY_FUNCTION = 'UnaryFunction'


class Token(namedtuple('Token', 'kind value')):
    '''
    Lexeme, ready for the parser.

    value is the number for NUMBER tokens, the Function for UNARY_FUNCTION
    tokens, and None otherwise.
    '''
    __slots__ = ()

    def __new__(cls, kind, value=None):
        return super().__new__(cls, kind, value)

    def __str__(self):
        if self.kind is TokenKind.NUMBER:
            return '{}({!r})'.format(self.kind.value, self.value)
        elif self.kind is TokenKind.UNARY_FUNCTION:
            return '{}({})'.format(self.kind.value, self.value.name)
        return self.kind.value


# Single character lexemes
OPERATORS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '*': TokenKind.MULTIPLY,
    '/': TokenKind.DIVIDE,
    '^': TokenKind.EXPONENT,
    '(': TokenKind.OPEN_PAREN,
    ')': TokenKind.CLOSE_PAREN,
}


class Lexer:
    '''
    Lexer for the infix expression grammar.

    Function and constant names are part of the grammar, so it needs to be
    instantiated with the registers it should recognise. Holds no other state.
    '''
    # Greedy; whether it is a well formed number is decided after the fact.
    NUMBER = r'[0-9.]+'
    OPERATOR = r'[' + r''.join(map(regex.escape, OPERATORS)) + r']'
    # Only spaces and newlines. Tabs and friends are invalid tokens.
    SPACE = r'[\x20\n]+'
    # A name can't run on into more letters or digits: sin isn't sinh's prefix,
    # e isn't exp's.
    NAME_END = r'(?![\p{Alphabetic}\p{N}])'
    # Never matches; for when there are no names to recognise.
    NOTHING = r'(?!)'
    FLAGS = regex.VERSION1

    def __init__(self, functions, constants):
        self.functions = {function.name: function for function in functions}
        self.constants = {constant.name: constant for constant in constants}
        # Longest first, so the leftmost alternative is the longest name.
        names = sorted(self.functions.keys() | self.constants.keys(),
                       key=len,
                       reverse=True)
        if names:
            name = r'(?:' + r'|'.join(map(regex.escape, names)) + r')' \
                   + type(self).NAME_END
        else:
            name = type(self).NOTHING
        # All possible lexemes.
        self.grammar = r'(?<number>' + type(self).NUMBER + r')|' \
                       r'(?<operator>' + type(self).OPERATOR + r')|' \
                       r'(?<space>' + type(self).SPACE + r')|' \
                       r'(?<name>' + name + r')'
        self.pattern = regex.compile(self.grammar, flags=type(self).FLAGS)

    def lex(self, expression):
        '''
        Take an expression and yield all its tokens.

        Positions in errors count code points, not bytes, so π is one wide.
        '''
        position = 0
        while position < len(expression):
            match = self.pattern.match(expression, position)
            if match is None:
                raise TokenizeError("Invalid token '{}' at position: {}"
                                    .format(expression[position], position))
            lexeme = match.group(0)
            if match.lastgroup == 'number':
                yield Token(TokenKind.NUMBER, self._number(lexeme, position))
            elif match.lastgroup == 'operator':
                yield Token(OPERATORS[lexeme])
            elif match.lastgroup == 'name':
                yield self._name(lexeme)
            position = match.end()

    @wrap_user_errors("Invalid number '{1}' at position: {2}", TokenizeError)
    def _number(self, text, position):
        return float(text)

    def _name(self, name):
        '''
        Constants are inlined as plain numbers.
        '''
        if name in self.functions:
            return Token(TokenKind.UNARY_FUNCTION, self.functions[name])
        return Token(TokenKind.NUMBER, self.constants[name].value)


def tokenize(expression, functions, constants):
    '''
    Return the list of tokens in expression.
    '''
    return list(Lexer(functions, constants).lex(expression))
