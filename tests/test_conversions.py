'''
Unit model and conversion rule tests
'''

import itertools
import logging

import regex

from kelpie.conversions import (Dimension, System, Unit, convert, find_unit,
                                get_units, try_convert)
from kelpie.conversions.length import FOOT, INCH, METRE, YARD
from kelpie.conversions.mass import GRAM, KILOGRAM, OUNCE, POUND, TON, \
    TON_SHORT, TONNE
from kelpie.util import ConversionError

from pytest import approx, mark, raises


ALL_UNITS = [unit for dimension in Dimension for unit in get_units(dimension)]


def through_base(value, from_unit, to_unit):
    '''
    Convert through the dimension's base unit, whatever the systems.
    '''
    if from_unit.to_base is not None:
        value = from_unit.to_base(value)
    if to_unit.from_base is not None:
        value = to_unit.from_base(value)
    return value


@mark.parametrize('unit', ALL_UNITS, ids=str)
def test_identity(unit):
    assert convert(23.66, unit, unit) == 23.66


@mark.parametrize('dimension', list(Dimension), ids=str)
def test_round_trip(dimension):
    for a, b in itertools.permutations(get_units(dimension), 2):
        there = convert(23.66, a, b)
        assert convert(there, b, a) == approx(23.66, rel=1e-9), (a, b)


@mark.parametrize('dimension', list(Dimension), ids=str)
def test_one_base_unit(dimension):
    units = get_units(dimension)
    assert len([unit for unit in units if unit.is_base()]) == 1
    for unit in units:
        assert unit.dimension is dimension
        assert (unit.to_base is None) == (unit.from_base is None)
        assert (unit.to_system_base is None) == \
            (unit.from_system_base is None)
    assert len({unit.name for unit in units}) == len(units)


@mark.parametrize('dimension', list(Dimension), ids=str)
def test_one_system_base_unit(dimension):
    units = get_units(dimension)
    for system in System:
        if system.is_default():
            continue
        members = [unit for unit in units if unit.system is system]
        if members:
            assert len([unit for unit in members
                        if unit.to_system_base is None]) == 1


@mark.parametrize('dimension', list(Dimension), ids=str)
def test_system_base_agrees_with_base(dimension):
    '''
    Going through the system base only avoids rounding; it shouldn't
    change the answer.
    '''
    for a, b in itertools.permutations(get_units(dimension), 2):
        if a.system is b.system and not a.system.is_default():
            assert convert(23.66, a, b) == \
                approx(through_base(23.66, a, b), rel=1e-5), (a, b)


def test_same_system_uses_system_base():
    assert convert(2.0, OUNCE, POUND) == 0.125
    assert convert(2.0, TON, TON_SHORT) == 2.24
    assert convert(36.0, INCH, YARD) == 1.0


def test_metric_uses_base():
    assert convert(1.0, KILOGRAM, GRAM) == 1000.0
    assert convert(2500.0, GRAM, KILOGRAM) == 2.5


def test_cross_system():
    assert convert(1.0, OUNCE, GRAM) == approx(28.349523125, rel=1e-9)
    assert convert(1.0, TONNE, TON) == approx(0.984207, rel=1e-5)
    assert convert(1.0, METRE, FOOT) == approx(3.280839, rel=1e-6)


def test_try_convert(caplog):
    assert try_convert(1.0, KILOGRAM, GRAM) == 1000.0
    with caplog.at_level(logging.WARNING):
        assert try_convert(1.0, None, GRAM) == 0.0
        assert try_convert(1.0, GRAM, None) == 0.0
    assert 'units not set' in caplog.text


def test_unit_equality():
    assert Unit('Gram', Dimension.LENGTH) == GRAM
    assert hash(Unit('Gram', Dimension.LENGTH)) == hash(GRAM)
    assert GRAM != KILOGRAM
    assert GRAM != 'Gram'
    assert str(GRAM) == 'Gram'


def test_find_unit():
    assert find_unit('metre') is METRE
    assert find_unit(' Short Ton ') is TON_SHORT
    assert find_unit('ounce', Dimension.MASS) is OUNCE
    assert find_unit('Ounce Force').dimension is Dimension.FORCE
    with raises(ConversionError, match=regex.escape("No such unit 'furlong'")):
        find_unit('furlong')
    with raises(ConversionError, match=regex.escape("No such unit 'metre'")):
        find_unit('metre', Dimension.MASS)


def test_unit_names_unique():
    names = [unit.name.lower() for unit in ALL_UNITS]
    assert len(set(names)) == len(names)
