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
Gas mix planner.

The planner finds best gas mix for a depth

    >>> from gasplan.planner import best_mix, best_deco_mix
    >>> gas = best_mix(60)
    >>> print(gas)
    20/38

and best decompression gas mix, which is not more soluble than the gas mix
breathed before gas switch

    >>> print(best_deco_mix(gas, 21))
    EAN51

Oxygen and nitrogen fractions are limited by maximum partial pressure of
the gases. Then nitrogen is replaced with helium until gas mix density
is below maximum gas density.
"""

import logging

from .calc import to_decimal, validate_depth, gas_fraction_at_depth, \
    min_fraction
from .const import Element, Mode
from .error import InvalidInputError, NoConvergenceError
from .ft import recurse_while
from .gas import Gas
from . import const

logger = logging.getLogger(__name__)

STEP = to_decimal(const.FRACTION_STEP)


def _add_helium(gas):
    """
    Create new gas mix with helium fraction increased by one percent.

    Oxygen fraction is kept, nitrogen fraction decreases.

    :param gas: Gas mix.
    """
    he = to_decimal(gas.he) + STEP
    return Gas(gas.o2, he)


def best_mix(depth, mode=Mode.NORMAL):
    """
    Find best gas mix for a depth.

    Gas mix oxygen and nitrogen fractions are maximum fractions allowed at
    the depth. Nitrogen is replaced with helium in one percent steps until
    gas mix density is below maximum gas density or nitrogen fraction
    reaches its minimum. In the latter case, the gas mix density can still
    be above maximum gas density.

    At shallow depths oxygen fraction can leave less nitrogen than its
    minimum, i.e. pure oxygen at the surface. Then no helium is added and
    nitrogen fraction is between zero and its minimum.

    :param depth: Depth [m].
    :param mode: Gas mix mode.
    """
    validate_depth(depth)

    o2 = gas_fraction_at_depth(Element.O2, depth, mode)
    n2 = min(
        1 - to_decimal(o2),
        to_decimal(gas_fraction_at_depth(Element.N2, depth, mode))
    )
    gas = Gas(o2, None, n2)

    n2_min = min_fraction(Element.N2)
    dense = lambda g: const.MAX_DENSITY <= g.density_at_depth(depth) \
        and g.n2 > n2_min
    gas = recurse_while(dense, _add_helium, gas)

    logger.debug('best mix at {}m ({}): {}, density {:.4f}g/l'.format(
        depth, mode, gas, gas.density_at_depth(depth)
    ))
    return gas


def best_deco_mix(reference, depth):
    """
    Find best decompression gas mix for a depth.

    Decompression gas mix is found with :func:`best_mix` function using
    `Mode.DECO` mode. Then its nitrogen is replaced with helium in one
    percent steps until decompression gas mix is not more soluble than the
    reference gas mix.

    `NoConvergenceError` is raised if there is no nitrogen left to replace
    and the decompression gas mix is still more soluble than the reference
    gas mix.

    :param reference: Gas mix breathed before switch to decompression gas
        mix.
    :param depth: Depth of gas mix switch [m].
    """
    if not isinstance(reference, Gas):
        raise InvalidInputError(
            'Reference gas mix is not a gas mix: {!r}'.format(reference)
        )

    gas = best_mix(depth, Mode.DECO)
    solubility = reference.solubility

    def next_mix(gas):
        if gas.n2 <= 0:
            raise NoConvergenceError(
                'Cannot find decompression gas mix at {}m not more soluble'
                ' than {}'.format(depth, reference)
            )
        return _add_helium(gas)

    soluble = lambda g: solubility < g.solubility
    gas = recurse_while(soluble, next_mix, gas)

    logger.debug('best deco mix at {}m after {}: {}'.format(
        depth, reference, gas
    ))
    return gas


# vim: sw=4:et:ai
