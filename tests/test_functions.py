'''
Function register and angle mode tests
'''

import math

from kelpie.constants import get_all as all_constants
from kelpie.functions import AngleMode, get_all as all_functions

from pytest import approx, mark, raises


def test_catalog_order():
    assert [f.name for f in all_functions()] == [
        'sin', 'cos', 'tan', 'asin', 'acos', 'atan',
        'cosec', 'sec', 'cot', 'acosec', 'asec', 'acot',
        'sinh', 'cosh', 'tanh', 'asinh', 'acosh', 'atanh',
        'exp', 'ln', 'log', 'log2', 'sqrt', 'abs', 'ceil', 'floor',
        'factorial']


def test_get_all_is_a_copy():
    functions = all_functions()
    functions.clear()
    assert all_functions()
    constants = all_constants()
    constants.clear()
    assert len(all_constants()) == 6


@mark.parametrize('text, mode', [
    ('degrees', AngleMode.DEGREES),
    ('Deg', AngleMode.DEGREES),
    ('RADIANS', AngleMode.RADIANS),
    ('rad', AngleMode.RADIANS),
    ('gradians', AngleMode.GRADIANS),
    ('grads', AngleMode.GRADIANS),
    ('gra', AngleMode.GRADIANS),
])
def test_parse_angle_mode(text, mode):
    assert AngleMode.parse(text) is mode


@mark.parametrize('text', ['', 'de', 'turns', 'degreesx'])
def test_parse_unknown_angle_mode(text):
    with raises(ValueError):
        AngleMode.parse(text)


def test_angle_mode_names():
    assert [str(mode) for mode in AngleMode] == ['Degrees', 'Radians', 'Grads']


def test_reciprocal_trig(function):
    mode = AngleMode.DEGREES
    assert function('cosec').evaluate(90.0, mode) == approx(1.0)
    assert function('sec').evaluate(0.0, mode) == 1.0
    assert function('cot').evaluate(45.0, mode) == approx(1.0)
    assert function('cot').evaluate(0.0, AngleMode.RADIANS) == math.inf


def test_inverse_reciprocal_trig(function):
    mode = AngleMode.DEGREES
    assert function('acosec').evaluate(1.0, mode) == approx(90.0)
    assert function('asec').evaluate(1.0, mode) == 0.0
    assert function('acot').evaluate(1.0, mode) == approx(45.0)
    assert function('acot').evaluate(0.0, mode) == approx(90.0)
    assert function('acosec').evaluate(2.0, AngleMode.GRADIANS) == \
        approx(100.0 / 3)


def test_hyperbolic(function):
    mode = AngleMode.DEGREES
    # Angle mode doesn't apply.
    assert function('sinh').evaluate(0.0, mode) == 0.0
    assert function('cosh').evaluate(0.0, mode) == 1.0
    assert function('tanh').evaluate(0.0, mode) == 0.0
    assert function('asinh').evaluate(0.0, mode) == 0.0
    assert function('acosh').evaluate(1.0, mode) == 0.0
    assert function('atanh').evaluate(0.0, mode) == 0.0
    assert function('sinh').evaluate(1.0, mode) == approx(math.sinh(1.0))
    assert function('atanh').evaluate(1.0, mode) == math.inf


def test_rounding(function):
    mode = AngleMode.RADIANS
    assert function('ceil').evaluate(1.2, mode) == 2.0
    assert function('floor').evaluate(-1.2, mode) == -2.0
    assert function('abs').evaluate(-0.5, mode) == 0.5


def test_factorial(function):
    factorial = function('factorial')
    mode = AngleMode.RADIANS
    assert factorial.evaluate(6.0, mode) == 720.0
    assert factorial.evaluate(2.0, mode) == 2.0
    assert factorial.evaluate(math.inf, mode) == math.inf
    assert factorial.evaluate(-math.inf, mode) == -math.inf
    assert math.isnan(factorial.evaluate(math.nan, mode))
    assert math.isnan(factorial.evaluate(0.5, mode))


def test_results_are_floats(function):
    for name in ('sin', 'sqrt', 'floor', 'factorial'):
        assert type(function(name).evaluate(4.0, AngleMode.RADIANS)) is float


def test_repr(function):
    assert repr(function('sin')) == 'Function(sin)'
