'''
Unit conversion.

One catalog module per dimension; get_units() picks the right one.
'''

from ..util import ConversionError
from .base import Dimension, System, Unit, convert, try_convert
from . import (area, energy, force, length, mass, power, temperature, torque,
               volume)


CATALOGS = {
    Dimension.LENGTH: length,
    Dimension.AREA: area,
    Dimension.MASS: mass,
    Dimension.VOLUME: volume,
    Dimension.TEMPERATURE: temperature,
    Dimension.POWER: power,
    Dimension.TORQUE: torque,
    Dimension.FORCE: force,
    Dimension.ENERGY: energy,
}


def get_units(dimension):
    '''
    Return all units measuring dimension.
    '''
    return CATALOGS[dimension].get_all()


def find_unit(name, dimension=None):
    '''
    Return the unit called name, ignoring case.

    Searches every dimension unless one is given.
    '''
    dimensions = list(Dimension) if dimension is None else [dimension]
    key = name.strip().lower()
    found = [unit
             for dimension in dimensions
             for unit in get_units(dimension)
             if unit.name.lower() == key]
    if not found:
        raise ConversionError('No such unit {}'.format(repr(name)))
    elif len(found) > 1:
        raise ConversionError('Ambiguous unit {}: {}'.format(
            repr(name), ', '.join(str(unit.dimension) for unit in found)))
    return found[0]


__all__ = ('Dimension', 'System', 'Unit', 'convert', 'try_convert',
           'get_units', 'find_unit')
