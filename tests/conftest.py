from pytest import fixture

from kelpie.constants import get_all as all_constants
from kelpie.evaluator import Evaluator
from kelpie.functions import AngleMode, get_all as all_functions
from kelpie.lexer import Lexer


@fixture
def lexer():
    return Lexer(all_functions(), all_constants())


@fixture
def radians():
    return Evaluator(angle_mode=AngleMode.RADIANS)


@fixture
def degrees():
    return Evaluator(angle_mode=AngleMode.DEGREES)


@fixture
def gradians():
    return Evaluator(angle_mode=AngleMode.GRADIANS)


@fixture
def function():
    '''
    Look up a built-in function by name.
    '''
    functions = {f.name: f for f in all_functions()}
    return functions.__getitem__
