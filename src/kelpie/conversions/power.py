from .base import (Dimension, System, Unit,
                   from_giga, from_kilo, from_mega, from_milli,
                   to_giga, to_kilo, to_mega, to_milli)


WATT = Unit('Watt', Dimension.POWER)
MILLIWATT = Unit('Milliwatt', Dimension.POWER,
                 to_base=from_milli,
                 from_base=to_milli)
KILOWATT = Unit('Kilowatt', Dimension.POWER,
                to_base=from_kilo,
                from_base=to_kilo)
MEGAWATT = Unit('Megawatt', Dimension.POWER,
                to_base=from_mega,
                from_base=to_mega)
GIGAWATT = Unit('Gigawatt', Dimension.POWER,
                to_base=from_giga,
                from_base=to_giga)

# Mechanical horsepower; the only imperial power unit.
HORSEPOWER = Unit('Horsepower', Dimension.POWER, System.IMPERIAL,
                  to_base=lambda v: v * 745.699872,
                  from_base=lambda v: v / 745.699872)


def get_all():
    return [WATT, MILLIWATT, KILOWATT, MEGAWATT, GIGAWATT,
            HORSEPOWER]
