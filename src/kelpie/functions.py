'''
Named unary functions understood by the evaluator.

Trigonometric functions interpret their argument, or result for the
inverses, in the evaluator's angle mode. Everything else ignores it.
'''

from collections import namedtuple
from enum import Enum
import math

import numpy

from .util import ieee754


class AngleMode(Enum):
    '''
    Unit in which trigonometric arguments and results are expressed.
    '''
    DEGREES = 'Degrees'
    RADIANS = 'Radians'
    # 400 grads in a full turn
    GRADIANS = 'Grads'

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, text):
        '''
        Look up a mode by (a prefix of at least three letters of) its name.
        '''
        key = text.strip().lower()
        if len(key) >= 3:
            for mode in cls:
                if mode.name.lower().startswith(key) or \
                   mode.value.lower().startswith(key):
                    return mode
        raise ValueError('Unknown angle mode {}'.format(repr(text)))

    def to_radians(self, value):
        if self is AngleMode.DEGREES:
            return numpy.radians(value)
        elif self is AngleMode.GRADIANS:
            return numpy.radians(value * 0.9)
        return value

    def from_radians(self, value):
        if self is AngleMode.DEGREES:
            return numpy.degrees(value)
        elif self is AngleMode.GRADIANS:
            return numpy.degrees(value) / 0.9
        return value


class Function(namedtuple('Function', 'name function')):
    '''
    Named function of one value and the angle mode.
    '''
    __slots__ = ()

    def evaluate(self, value, mode):
        return self.function(value, mode)

    def __repr__(self):
        return 'Function({})'.format(self.name)


def _trig(f):
    @ieee754
    def trig(value, mode):
        return f(mode.to_radians(value))
    return trig


def _atrig(f):
    @ieee754
    def atrig(value, mode):
        return mode.from_radians(f(value))
    return atrig


def _reciprocal(f):
    @ieee754
    def reciprocal(value, mode):
        return numpy.float64(1.0) / f(value, mode)
    return reciprocal


def _of_reciprocal(f):
    @ieee754
    def of_reciprocal(value, mode):
        return f(numpy.float64(1.0) / numpy.float64(value), mode)
    return of_reciprocal


def _plain(f):
    @ieee754
    def plain(value, _mode):
        return f(value)
    return plain


def _factorial(value, _mode):
    '''
    Factorial of a whole number, as a float.

    Anything past 170! overflows a double, so is infinite. Fractional input
    has no factorial here. The last multiplicand is value itself, so 0 gives
    0 and negative whole numbers give themselves.
    '''
    if value > 170:
        return math.inf
    fractional, _ = math.modf(value)
    if math.isnan(value) or fractional != 0:
        return math.nan
    if math.isinf(value):
        return value
    factorial = 1.0
    for i in range(2, math.floor(value)):
        factorial *= i
    return factorial * value


_sin = _trig(numpy.sin)
_cos = _trig(numpy.cos)
_tan = _trig(numpy.tan)
_asin = _atrig(numpy.arcsin)
_acos = _atrig(numpy.arccos)
_atan = _atrig(numpy.arctan)

FUNCTIONS = (
    Function('sin', _sin),
    Function('cos', _cos),
    Function('tan', _tan),
    Function('asin', _asin),
    Function('acos', _acos),
    Function('atan', _atan),
    Function('cosec', _reciprocal(_sin)),
    Function('sec', _reciprocal(_cos)),
    Function('cot', _reciprocal(_tan)),
    Function('acosec', _of_reciprocal(_asin)),
    Function('asec', _of_reciprocal(_acos)),
    Function('acot', _of_reciprocal(_atan)),
    Function('sinh', _plain(numpy.sinh)),
    Function('cosh', _plain(numpy.cosh)),
    Function('tanh', _plain(numpy.tanh)),
    Function('asinh', _plain(numpy.arcsinh)),
    Function('acosh', _plain(numpy.arccosh)),
    Function('atanh', _plain(numpy.arctanh)),
    Function('exp', _plain(numpy.exp)),
    Function('ln', _plain(numpy.log)),
    Function('log', _plain(numpy.log10)),
    Function('log2', _plain(numpy.log2)),
    Function('sqrt', _plain(numpy.sqrt)),
    Function('abs', _plain(numpy.abs)),
    Function('ceil', _plain(numpy.ceil)),
    Function('floor', _plain(numpy.floor)),
    Function('factorial', _factorial),
)


def get_all():
    return list(FUNCTIONS)
