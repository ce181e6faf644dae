#
# GasPlan - breathing gas mix planner.
#
# Copyright (C) 2014 by Artur Wroblewski <wrobell@pld-linux.org>
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.
#

"""
GasPlan pressure and gas fraction calculations.

Gas fractions are rounded with fixed point arithmetic provided by Python's
`decimal` module, so rounding of a fraction does not depend on binary
representation of a float, i.e. 0.35 is always 35%.
"""

from decimal import Decimal, ROUND_HALF_UP, ROUND_FLOOR
import math

from .error import InvalidInputError
from . import const

QUANTUM = Decimal(1).scaleb(-const.SCALE)
ONE = Decimal(1)


def to_decimal(value):
    """
    Convert a number to decimal type.

    Floats are converted using their shortest string representation, so
    0.1 becomes `Decimal('0.1')`.

    :param value: Number to convert.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_fraction(value):
    """
    Round gas fraction to `const.SCALE` decimal places.

    The half is rounded away from zero.

    :param value: Gas fraction.
    """
    return to_decimal(value).quantize(QUANTUM, rounding=ROUND_HALF_UP)


def floor_fraction(value):
    """
    Round gas fraction down to `const.SCALE` decimal places.

    :param value: Gas fraction.
    """
    return to_decimal(value).quantize(QUANTUM, rounding=ROUND_FLOOR)


def pressure_at_depth(depth):
    """
    Convert depth to absolute pressure.

    :param depth: Depth [m].
    """
    return depth / 10 + 1


def depth_at_pressure(abs_p):
    """
    Convert absolute pressure to depth.

    :param abs_p: Absolute pressure [atm].
    """
    return (abs_p - 1) * 10


def is_finite(value):
    """
    Check if a number is finite.

    Numbers, which cannot be converted to float, i.e. very large integers
    or signalling NaN decimals, are not finite.

    :param value: Number to check.
    """
    try:
        return math.isfinite(value)
    except (OverflowError, ValueError):
        return False


def validate_depth(depth):
    """
    Raise `InvalidInputError` if depth is not a non-negative number.

    :param depth: Depth [m].
    """
    if not isinstance(depth, (int, float, Decimal)) or isinstance(depth, bool):
        raise InvalidInputError('Depth is not a number: {!r}'.format(depth))
    if not is_finite(depth):
        raise InvalidInputError('Depth is not finite: {}'.format(depth))
    if depth < 0:
        raise InvalidInputError('Negative depth: {}'.format(depth))


def _lookup(table, key, name):
    try:
        return table[key]
    except (KeyError, TypeError):
        raise InvalidInputError('Unknown {}: {!r}'.format(name, key)) from None


def density_of(element):
    """
    Get density of gas element [g/l].

    :param element: Gas element, i.e. `Element.O2`.
    """
    return _lookup(const.DENSITY, element, 'gas element')


def solubility_of(element):
    """
    Get solubility coefficient of gas element.

    :param element: Gas element, i.e. `Element.N2`.
    """
    return _lookup(const.SOLUBILITY, element, 'gas element')


def min_fraction(element):
    """
    Get minimum acceptable fraction of gas element.

    :param element: Gas element, i.e. `Element.N2`.
    """
    return _lookup(const.MIN_FRACTION, element, 'gas element')


def pp_max(element, mode=const.Mode.NORMAL):
    """
    Get maximum partial pressure of gas element [atm].

    :param element: Gas element, i.e. `Element.O2`.
    :param mode: Gas mix mode.
    """
    limits = _lookup(const.PP_MAX, mode, 'gas mix mode')
    return _lookup(limits, element, 'gas element')


def gas_fraction_at_depth(element, depth, mode=const.Mode.NORMAL):
    """
    Calculate maximum fraction of gas element allowed at depth.

    The fraction is calculated from maximum partial pressure of the element
    and is always rounded down, i.e. 0.359 becomes 0.35. The fraction is
    never greater than 1.

    :param element: Gas element, i.e. `Element.O2`.
    :param depth: Depth [m].
    :param mode: Gas mix mode.
    """
    validate_depth(depth)
    abs_p = pressure_at_depth(to_decimal(depth))
    v = to_decimal(pp_max(element, mode)) / abs_p
    return float(floor_fraction(min(v, ONE)))


# vim: sw=4:et:ai
