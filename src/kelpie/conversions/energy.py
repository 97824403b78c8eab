'''
Energy. Joule is the base unit.

Calories are metric here: the thermochemical calorie is defined in joules,
and as a second imperial unit with no system base a calorie to BTU
conversion would come out unchanged.
'''

from .base import (Dimension, System, Unit,
                   from_giga, from_kilo, from_mega,
                   to_giga, to_kilo, to_mega)


JOULE = Unit('Joule', Dimension.ENERGY)
KILOJOULE = Unit('Kilojoule', Dimension.ENERGY,
                 to_base=from_kilo,
                 from_base=to_kilo)
MEGAJOULE = Unit('Megajoule', Dimension.ENERGY,
                 to_base=from_mega,
                 from_base=to_mega)
GIGAJOULE = Unit('Gigajoule', Dimension.ENERGY,
                 to_base=from_giga,
                 from_base=to_giga)
CALORIE = Unit('Calorie', Dimension.ENERGY,
               to_base=lambda v: v * 4.184,
               from_base=lambda v: v / 4.184)
KILOCALORIE = Unit('Kilocalorie', Dimension.ENERGY,
                   to_base=lambda v: CALORIE.to_base(from_kilo(v)),
                   from_base=lambda v: to_kilo(CALORIE.from_base(v)))
KILOWATT_HOUR = Unit('Kilowatt Hour', Dimension.ENERGY,
                     to_base=lambda v: v * 3.6e6,
                     from_base=lambda v: v / 3.6e6)

BRITISH_THERMAL_UNIT = Unit('BTU', Dimension.ENERGY, System.IMPERIAL,
                            to_base=lambda v: v * 1055.05585262,
                            from_base=lambda v: v / 1055.05585262)


def get_all():
    return [JOULE, KILOJOULE, MEGAJOULE, GIGAJOULE,
            CALORIE, KILOCALORIE, KILOWATT_HOUR,
            BRITISH_THERMAL_UNIT]
