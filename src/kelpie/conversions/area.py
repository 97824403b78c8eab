'''
Area. Square metre is the base unit, square yard the imperial system base.

Squares of length units apply the length conversion twice.
'''

from .base import Dimension, System, Unit, squared
from . import length


def _square_of(name, unit):
    return Unit(name, Dimension.AREA, unit.system,
                to_base=squared(unit.to_base),
                from_base=squared(unit.from_base),
                to_system_base=squared(unit.to_system_base),
                from_system_base=squared(unit.from_system_base))


SQ_METRE = _square_of('Sq Metre', length.METRE)
SQ_CENTIMETRE = _square_of('Sq Centimetre', length.CENTIMETRE)
SQ_MILLIMETRE = _square_of('Sq Millimetre', length.MILLIMETRE)
SQ_MICROMETRE = _square_of('Sq Micrometre', length.MICROMETRE)
HECTARE = Unit('Hectare', Dimension.AREA,
               to_base=lambda v: v * 10000.0,
               from_base=lambda v: v / 10000.0)
SQ_KILOMETRE = _square_of('Sq Kilometre', length.KILOMETRE)

SQ_YARD = _square_of('Sq Yard', length.YARD)
SQ_FOOT = _square_of('Sq Foot', length.FOOT)
SQ_INCH = _square_of('Sq Inch', length.INCH)
ACRE = Unit('Acre', Dimension.AREA, System.IMPERIAL,
            to_base=lambda v: v * 4046.856422,
            from_base=lambda v: v / 4046.856422,
            to_system_base=lambda v: v * 4840.0,
            from_system_base=lambda v: v / 4840.0)
SQ_MILE = _square_of('Sq Mile', length.MILE)
SQ_NAUTICAL_MILE = _square_of('Sq Nautical Mile', length.NAUTICAL_MILE)


def get_all():
    return [SQ_METRE, SQ_CENTIMETRE, SQ_MILLIMETRE, SQ_MICROMETRE,
            HECTARE, SQ_KILOMETRE, SQ_YARD, SQ_FOOT,
            SQ_INCH, ACRE, SQ_MILE, SQ_NAUTICAL_MILE]
