'''
Temperature. Celsius is the base unit. Conversions are affine, so a
temperature difference does not convert like a temperature.
'''

from .base import Dimension, System, Unit


CELSIUS = Unit('Celsius', Dimension.TEMPERATURE)
KELVIN = Unit('Kelvin', Dimension.TEMPERATURE,
              to_base=lambda v: v - 273.15,
              from_base=lambda v: v + 273.15)
# Sole imperial temperature, so its own system base.
FAHRENHEIT = Unit('Fahrenheit', Dimension.TEMPERATURE, System.IMPERIAL,
                  to_base=lambda v: (v - 32.0) / 9.0 * 5.0,
                  from_base=lambda v: v / 5.0 * 9.0 + 32.0)


def get_all():
    return [CELSIUS, KELVIN, FAHRENHEIT]
