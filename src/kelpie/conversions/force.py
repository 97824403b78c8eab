'''
Force. Newton is the base unit, pound-force the imperial system base.

Pound and ounce force are named apart from the masses they share a name
with, since units are told apart by name alone.
'''

from .base import (Dimension, System, Unit,
                   from_giga, from_kilo, from_mega,
                   to_giga, to_kilo, to_mega)


NEWTON = Unit('Newton', Dimension.FORCE)
KILONEWTON = Unit('Kilonewton', Dimension.FORCE,
                  to_base=from_kilo,
                  from_base=to_kilo)
MEGANEWTON = Unit('Meganewton', Dimension.FORCE,
                  to_base=from_mega,
                  from_base=to_mega)
GIGANEWTON = Unit('Giganewton', Dimension.FORCE,
                  to_base=from_giga,
                  from_base=to_giga)

POUND_FORCE = Unit('Pound Force', Dimension.FORCE, System.IMPERIAL,
                   to_base=lambda v: v * 4.4482216152605,
                   from_base=lambda v: v / 4.4482216152605)
OUNCE_FORCE = Unit('Ounce Force', Dimension.FORCE, System.IMPERIAL,
                   to_base=lambda v: v * 0.278013851,
                   from_base=lambda v: v / 0.278013851,
                   to_system_base=lambda v: v / 16.0,
                   from_system_base=lambda v: v * 16.0)


def get_all():
    return [NEWTON, KILONEWTON, MEGANEWTON, GIGANEWTON,
            POUND_FORCE, OUNCE_FORCE]
