'''
Mass. Kilogram is the base unit, ounce the imperial system base.
'''

from .base import (Dimension, System, Unit,
                   from_giga, from_kilo, from_mega, from_micro, from_milli,
                   to_giga, to_kilo, to_mega, to_micro, to_milli)


KILOGRAM = Unit('Kilogram', Dimension.MASS)
GRAM = Unit('Gram', Dimension.MASS,
            to_base=to_kilo,
            from_base=from_kilo)
MILLIGRAM = Unit('Milligram', Dimension.MASS,
                 to_base=lambda v: GRAM.to_base(from_milli(v)),
                 from_base=lambda v: to_milli(GRAM.from_base(v)))
MICROGRAM = Unit('Microgram', Dimension.MASS,
                 to_base=lambda v: GRAM.to_base(from_micro(v)),
                 from_base=lambda v: to_micro(GRAM.from_base(v)))
TONNE = Unit('Ton (metric)', Dimension.MASS,
             to_base=from_kilo,
             from_base=to_kilo)
KILOTONNE = Unit('Kiloton (metric)', Dimension.MASS,
                 to_base=lambda v: TONNE.to_base(from_kilo(v)),
                 from_base=lambda v: to_kilo(TONNE.from_base(v)))
MEGATONNE = Unit('Megaton (metric)', Dimension.MASS,
                 to_base=lambda v: TONNE.to_base(from_mega(v)),
                 from_base=lambda v: to_mega(TONNE.from_base(v)))
GIGATONNE = Unit('Gigaton (metric)', Dimension.MASS,
                 to_base=lambda v: TONNE.to_base(from_giga(v)),
                 from_base=lambda v: to_giga(TONNE.from_base(v)))

OUNCES_PER_KILO = 35.2739619495804
OUNCE = Unit('Ounce', Dimension.MASS, System.IMPERIAL,
             to_base=lambda v: v / OUNCES_PER_KILO,
             from_base=lambda v: v * OUNCES_PER_KILO)
POUND = Unit('Pound', Dimension.MASS, System.IMPERIAL,
             to_base=lambda v: v * 16.0 / OUNCES_PER_KILO,
             from_base=lambda v: v * OUNCES_PER_KILO / 16.0,
             to_system_base=lambda v: v * 16.0,
             from_system_base=lambda v: v / 16.0)
TON = Unit('Long Ton', Dimension.MASS, System.IMPERIAL,
           to_base=lambda v: v * 2240.0 * 16.0 / OUNCES_PER_KILO,
           from_base=lambda v: v * OUNCES_PER_KILO / (2240.0 * 16.0),
           to_system_base=lambda v: v * 2240.0 * 16.0,
           from_system_base=lambda v: v / (2240.0 * 16.0))
TON_SHORT = Unit('Short Ton', Dimension.MASS, System.IMPERIAL,
                 to_base=lambda v: v * 2000.0 * 16.0 / OUNCES_PER_KILO,
                 from_base=lambda v: v * OUNCES_PER_KILO / (2000.0 * 16.0),
                 to_system_base=lambda v: v * 2000.0 * 16.0,
                 from_system_base=lambda v: v / (2000.0 * 16.0))


def get_all():
    return [KILOGRAM, GRAM, MILLIGRAM, MICROGRAM,
            TONNE, KILOTONNE, MEGATONNE, GIGATONNE,
            OUNCE, POUND, TON, TON_SHORT]
