from collections import namedtuple
import math


Constant = namedtuple('Constant', 'name value')

CONSTANTS = (
    Constant('π', math.pi),
    Constant('e', math.e),
    # Golden ratio
    Constant('Φ', 1.618033988749895),
    # Speed of light, m/s
    Constant('C', 299792458.0),
    # Planck, J s
    Constant('ℎ', 6.626e-34),
    # Gravitational, m^3 kg^-1 s^-2
    Constant('G', 6.674e-11),
)


def get_all():
    return list(CONSTANTS)
