'''
Units, and converting values between them.

While conversions within a measurement system are usually whole number
factors (12 inches to a foot), conversions between systems are rarely exact.
So units of the same non-metric system convert through a base unit of that
system, and everything else converts through the dimension's base unit.
'''

from enum import Enum
import logging


logger = logging.getLogger(__name__)


class Dimension(Enum):
    '''
    Physical quantity. Only units of the same dimension inter-convert.
    '''
    LENGTH = 'Length'
    AREA = 'Area'
    MASS = 'Mass'
    VOLUME = 'Volume'
    TEMPERATURE = 'Temperature'
    POWER = 'Power'
    TORQUE = 'Torque'
    FORCE = 'Force'
    ENERGY = 'Energy'

    def __str__(self):
        return self.value


class System(Enum):
    METRIC = 'Metric'
    IMPERIAL = 'Imperial'
    # Volume only
    US = 'US'

    def __str__(self):
        return self.value

    def is_default(self):
        '''
        Metric units always go through the dimension's base unit.
        '''
        return self is System.METRIC


class Unit:
    '''
    Unit of measure.

    The to/from functions take and return floats. A unit without to_base
    and from_base is the base unit of its dimension; one without
    to_system_base and from_system_base is the base unit of its system.
    Units are equal when their names are.
    '''
    __slots__ = ('name', 'dimension', 'system',
                 'to_base', 'from_base',
                 'to_system_base', 'from_system_base')

    def __init__(self, name, dimension, system=System.METRIC,
                 to_base=None, from_base=None,
                 to_system_base=None, from_system_base=None):
        self.name = name
        self.dimension = dimension
        self.system = system
        self.to_base = to_base
        self.from_base = from_base
        self.to_system_base = to_system_base
        self.from_system_base = from_system_base

    def is_base(self):
        return self.to_base is None and self.from_base is None

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return 'Unit({}, {}, {})'.format(self.name, self.dimension,
                                         self.system)


# Metric prefixes. to_x expresses a value in x-units: 2500 g is 2.5 kg.
def to_milli(value):
    return value * 1e3


def from_milli(value):
    return value / 1e3


def to_micro(value):
    return value * 1e6


def from_micro(value):
    return value / 1e6


def to_kilo(value):
    return value / 1e3


def from_kilo(value):
    return value * 1e3


def to_mega(value):
    return value / 1e6


def from_mega(value):
    return value * 1e6


def to_giga(value):
    return value / 1e9


def from_giga(value):
    return value * 1e9


def squared(f):
    '''
    Area conversion from a length conversion.
    '''
    if f is None:
        return None
    return lambda value: f(f(value))


def convert(value, from_unit, to_unit):
    '''
    Convert value in from_unit to to_unit.

    Both units must share a dimension; nothing checks that they do.
    '''
    if from_unit == to_unit:
        return value
    if from_unit.system == to_unit.system and \
       from_unit.dimension == to_unit.dimension and \
       not from_unit.system.is_default():
        to_base, from_base = from_unit.to_system_base, \
                             to_unit.from_system_base
    else:
        to_base, from_base = from_unit.to_base, to_unit.from_base
    # Missing functions mean the unit is the base already.
    result = value
    if to_base is not None:
        result = to_base(result)
    if from_base is not None:
        result = from_base(result)
    return result


def try_convert(value, from_unit, to_unit):
    '''
    Convert, if both units have been chosen.

    Returns 0.0 when either is None, which is indistinguishable from a
    genuine zero; callers that care should check the units themselves.
    '''
    if from_unit is None or to_unit is None:
        logger.warning('Doing a conversion, but units not set')
        return 0.0
    return convert(value, from_unit, to_unit)
