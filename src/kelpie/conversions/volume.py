'''
Volume. Litre is the base unit. Imperial and US measures are separate
systems, each based on its own fluid ounce.
'''

from .base import (Dimension, System, Unit,
                   from_giga, from_kilo, from_mega,
                   to_giga, to_kilo, to_mega)


LITRE = Unit('Litre', Dimension.VOLUME)
CU_METRE = Unit('Cubic Metre', Dimension.VOLUME,
                to_base=lambda v: v * 1000.0,
                from_base=lambda v: v / 1000.0)
CUBIC_CENTIMETRE = Unit('CC', Dimension.VOLUME,
                        to_base=lambda v: v / 1000.0,
                        from_base=lambda v: v * 1000.0)
CUBIC_KILOMETRE = Unit('Cubic Kilometre', Dimension.VOLUME,
                       to_base=lambda v: v * 1e6 * 1e6,
                       from_base=lambda v: v / (1e6 * 1e6))
KILO_LITRE = Unit('Kilo Litre', Dimension.VOLUME,
                  to_base=from_kilo,
                  from_base=to_kilo)
MEGA_LITRE = Unit('Mega Litre', Dimension.VOLUME,
                  to_base=from_mega,
                  from_base=to_mega)
GIGA_LITRE = Unit('Giga Litre', Dimension.VOLUME,
                  to_base=from_giga,
                  from_base=to_giga)

IMP_FL_OUNCE = Unit('Imp Fl Ounce', Dimension.VOLUME, System.IMPERIAL,
                    to_base=lambda v: v / 35.19507973,
                    from_base=lambda v: v * 35.19507973)
# Cubic inches per imperial fluid ounce
_CUBIC_INCHES = 1.733871455
IMP_CUBIC_INCH = Unit('Cubic Inch', Dimension.VOLUME, System.IMPERIAL,
                      to_base=lambda v: v / 61.02374409,
                      from_base=lambda v: v * 61.02374409,
                      to_system_base=lambda v: v / _CUBIC_INCHES,
                      from_system_base=lambda v: v * _CUBIC_INCHES)
IMP_PINT = Unit('Imp Pint', Dimension.VOLUME, System.IMPERIAL,
                to_base=lambda v: v / 1.759753986,
                from_base=lambda v: v * 1.759753986,
                to_system_base=lambda v: v * 20.0,
                from_system_base=lambda v: v / 20.0)
IMP_QUART = Unit('Imp Quart', Dimension.VOLUME, System.IMPERIAL,
                 to_base=lambda v: v / 0.8798769932,
                 from_base=lambda v: v * 0.8798769932,
                 to_system_base=lambda v: v * 40.0,
                 from_system_base=lambda v: v / 40.0)
IMP_GALLON = Unit('Imp Gallon', Dimension.VOLUME, System.IMPERIAL,
                  to_base=lambda v: v / 0.2199692483,
                  from_base=lambda v: v * 0.2199692483,
                  to_system_base=lambda v: v * 160.0,
                  from_system_base=lambda v: v / 160.0)

US_FL_OUNCE = Unit('US Fl Ounce', Dimension.VOLUME, System.US,
                   to_base=lambda v: v / 33.81402270,
                   from_base=lambda v: v * 33.81402270)
US_PINT = Unit('US Pint', Dimension.VOLUME, System.US,
               to_base=lambda v: v / 2.113376419,
               from_base=lambda v: v * 2.113376419,
               to_system_base=lambda v: v * 16.0,
               from_system_base=lambda v: v / 16.0)
US_QUART = Unit('US Quart', Dimension.VOLUME, System.US,
                to_base=lambda v: v / 1.056688209,
                from_base=lambda v: v * 1.056688209,
                to_system_base=lambda v: v * 32.0,
                from_system_base=lambda v: v / 32.0)
US_GALLON = Unit('US Gallon', Dimension.VOLUME, System.US,
                 to_base=lambda v: v / 0.2641720524,
                 from_base=lambda v: v * 0.2641720524,
                 to_system_base=lambda v: v * 128.0,
                 from_system_base=lambda v: v / 128.0)


def get_all():
    return [LITRE, CU_METRE, CUBIC_CENTIMETRE, CUBIC_KILOMETRE,
            KILO_LITRE, MEGA_LITRE, GIGA_LITRE, IMP_CUBIC_INCH,
            IMP_FL_OUNCE, IMP_PINT, IMP_QUART, IMP_GALLON,
            US_FL_OUNCE, US_PINT, US_QUART, US_GALLON]
