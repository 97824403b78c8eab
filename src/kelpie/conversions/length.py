'''
Length. Metre is the base unit, yard the imperial system base.
'''

from .base import (Dimension, System, Unit,
                   from_kilo, from_micro, from_milli,
                   to_kilo, to_micro, to_milli)


METRE = Unit('Metre', Dimension.LENGTH)
CENTIMETRE = Unit('Centimetre', Dimension.LENGTH,
                  to_base=lambda v: v / 100.0,
                  from_base=lambda v: v * 100.0)
MILLIMETRE = Unit('Millimetre', Dimension.LENGTH,
                  to_base=from_milli,
                  from_base=to_milli)
MICROMETRE = Unit('Micrometre', Dimension.LENGTH,
                  to_base=from_micro,
                  from_base=to_micro)
KILOMETRE = Unit('Kilometre', Dimension.LENGTH,
                 to_base=from_kilo,
                 from_base=to_kilo)

METRES_PER_LIGHTYEAR = 9460730472580800.0
LIGHTYEAR = Unit('Lightyear', Dimension.LENGTH,
                 to_base=lambda v: v * METRES_PER_LIGHTYEAR,
                 from_base=lambda v: v / METRES_PER_LIGHTYEAR)
METRES_PER_PARSEC = 30856775814913670.0
PARSEC = Unit('Parsec', Dimension.LENGTH,
              to_base=lambda v: v * METRES_PER_PARSEC,
              from_base=lambda v: v / METRES_PER_PARSEC)

YARDS_PER_METRE = 1.093613
YARD = Unit('Yard', Dimension.LENGTH, System.IMPERIAL,
            to_base=lambda v: v / YARDS_PER_METRE,
            from_base=lambda v: v * YARDS_PER_METRE)
FOOT = Unit('Foot', Dimension.LENGTH, System.IMPERIAL,
            to_base=lambda v: v / (YARDS_PER_METRE * 3.0),
            from_base=lambda v: v * (YARDS_PER_METRE * 3.0),
            to_system_base=lambda v: v / 3.0,
            from_system_base=lambda v: v * 3.0)
INCH = Unit('Inch', Dimension.LENGTH, System.IMPERIAL,
            to_base=lambda v: v / (YARDS_PER_METRE * 36.0),
            from_base=lambda v: v * (YARDS_PER_METRE * 36.0),
            to_system_base=lambda v: v / 36.0,
            from_system_base=lambda v: v * 36.0)
MILE = Unit('Mile', Dimension.LENGTH, System.IMPERIAL,
            to_base=lambda v: v / (YARDS_PER_METRE / 1760.0),
            from_base=lambda v: v * (YARDS_PER_METRE / 1760.0),
            to_system_base=lambda v: v * 1760.0,
            from_system_base=lambda v: v / 1760.0)
# Yards per nautical mile
_NM_YARDS = 2025.373
NAUTICAL_MILE = Unit('Nautical Mile', Dimension.LENGTH, System.IMPERIAL,
                     to_base=lambda v: v / (YARDS_PER_METRE / _NM_YARDS),
                     from_base=lambda v: v * (YARDS_PER_METRE / _NM_YARDS),
                     to_system_base=lambda v: v * _NM_YARDS,
                     from_system_base=lambda v: v / _NM_YARDS)


def get_all():
    return [METRE, CENTIMETRE, MILLIMETRE, MICROMETRE,
            KILOMETRE, LIGHTYEAR, PARSEC, YARD,
            FOOT, INCH, MILE, NAUTICAL_MILE]
