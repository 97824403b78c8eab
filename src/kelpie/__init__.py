'''
Calculator and unit converter.

Evaluates infix arithmetic expressions, with the usual trigonometric,
hyperbolic and logarithmic functions and a few physical constants, in
degrees, radians or gradians. Undefined results come out as nan or inf,
like they would on a pocket calculator that admitted to it, rather than as
errors.

Separately, converts values between units of length, area, mass, volume,
temperature, power, torque, force and energy, metric, imperial and US.
'''

from .cli import CLI
from .conversions import convert, find_unit, get_units, try_convert
from .evaluator import Evaluator
from .functions import AngleMode
from .lexer import Lexer, tokenize
from .parser import Parser
from .util import EvaluationError, KelpieError


__all__ = ('Evaluator', 'AngleMode', 'Lexer', 'Parser', 'tokenize', 'CLI',
           'convert', 'try_convert', 'get_units', 'find_unit',
           'KelpieError', 'EvaluationError')
