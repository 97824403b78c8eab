'''
Torque. Newton metre is the base unit, foot pound the imperial system base.
'''

from .base import (Dimension, System, Unit,
                   from_giga, from_kilo, from_mega,
                   to_giga, to_kilo, to_mega)


NEWTON_METRE = Unit('Newton Metre', Dimension.TORQUE)
KILONEWTON_METRE = Unit('Kilonewton Metre', Dimension.TORQUE,
                        to_base=from_kilo,
                        from_base=to_kilo)
MEGANEWTON_METRE = Unit('Meganewton Metre', Dimension.TORQUE,
                        to_base=from_mega,
                        from_base=to_mega)
GIGANEWTON_METRE = Unit('Giganewton Metre', Dimension.TORQUE,
                        to_base=from_giga,
                        from_base=to_giga)

FOOT_POUND = Unit('Foot Pound', Dimension.TORQUE, System.IMPERIAL,
                  to_base=lambda v: v * 1.3558179483314,
                  from_base=lambda v: v / 1.3558179483314)
INCH_POUND = Unit('Inch Pound', Dimension.TORQUE, System.IMPERIAL,
                  to_base=lambda v: v * 0.1129848290276167,
                  from_base=lambda v: v / 0.1129848290276167,
                  to_system_base=lambda v: v / 12.0,
                  from_system_base=lambda v: v * 12.0)


def get_all():
    return [NEWTON_METRE, KILONEWTON_METRE, MEGANEWTON_METRE, GIGANEWTON_METRE,
            FOOT_POUND, INCH_POUND]
