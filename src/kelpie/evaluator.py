import logging

from .constants import get_all as all_constants
from .functions import AngleMode, get_all as all_functions
from .lexer import Lexer
from .parser import Parser
from .util import EvaluationError


logger = logging.getLogger(__name__)


class Evaluator:
    '''
    Turns infix expressions into numbers.

    Owns the angle mode and the function and constant registers. The angle
    mode may be changed between evaluations, but nothing guards it against
    being changed from another thread mid-evaluation.
    '''

    DEFAULT_ANGLE_MODE = AngleMode.DEGREES

    def __init__(self, angle_mode=None, functions=None, constants=None):
        '''
        Create evaluator.

        :param angle_mode: AngleMode for trigonometric functions.
        :param functions: Function register, defaults to all known functions.
        :param constants: Constant register, defaults to all known constants.
        '''
        if angle_mode is None:
            angle_mode = type(self).DEFAULT_ANGLE_MODE
        if functions is None:
            functions = all_functions()
        if constants is None:
            constants = all_constants()
        self.angle_mode = angle_mode
        self._functions = list(functions)
        self._constants = list(constants)
        self.lexer = Lexer(self._functions, self._constants)

    def evaluate(self, expression):
        '''
        Evaluate expression to a float.

        Mathematically undefined results are nan or infinite rather than
        errors. Raises EvaluationError if expression isn't well formed.
        '''
        if not expression:
            raise EvaluationError('Please supply an expression to evaluate')
        tokens = list(self.lexer.lex(expression))
        logger.debug('tokens: %s', ' '.join(map(str, tokens)))
        ast = Parser(tokens).parse()
        logger.debug('ast: %r', ast)
        result = ast.evaluate(self.angle_mode)
        logger.debug('%s = %r (%s)', expression, result, self.angle_mode)
        return result

    def function_register(self):
        return self._functions

    def constant_register(self):
        return self._constants
