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
Basic Usage
-----------

The GasPlan library exports its main API via ``gasplan`` module.

The best gas mix for a depth can be found with :func:`~gasplan.best_mix`
function. Oxygen and nitrogen fractions of the gas mix are limited by
maximum partial pressure of both gases, then nitrogen is replaced with
helium until density of the gas mix is acceptable. For example, the best
gas mix for dive to 30 meters is nitrox with 35% of oxygen::

    >>> import gasplan
    >>> gas = gasplan.best_mix(30)
    >>> gas
    Gas(o2=0.35, he=0.0, n2=0.65)
    >>> print(gas)
    EAN35

and for dive to 60 meters it is trimix::

    >>> gas = gasplan.best_mix(60)
    >>> print(gas)
    20/38
    >>> round(gas.density_at_depth(60), 4)
    6.1533

Maximum operating depth of a gas mix is limited by maximum partial pressure
of gas mix elements and by maximum density of gas mix::

    >>> gas.mod()
    60
    >>> gasplan.Gas().mod()
    38

Decompression Gas Mix
---------------------
Decompression gas mix is found with more permissive maximum partial
pressure of oxygen, but it cannot be more soluble than the gas mix breathed
before the gas switch::

    >>> bottom = gasplan.Gas(0.18, 0.45)
    >>> deco = gasplan.best_deco_mix(bottom, 21)
    >>> print(deco)
    51/3
    >>> deco.solubility <= bottom.solubility
    True
    >>> deco.mod(gasplan.Mode.DECO)
    21

"""

from .const import Element, Mode
from .calc import pressure_at_depth, gas_fraction_at_depth
from .error import GasPlanError, InvalidInputError, NoConvergenceError
from .gas import Gas, parse_label
from .planner import best_mix, best_deco_mix

__version__ = '0.1.0'

__all__ = [
    'Gas', 'Element', 'Mode', 'pressure_at_depth', 'gas_fraction_at_depth',
    'best_mix', 'best_deco_mix', 'parse_label', 'GasPlanError',
    'InvalidInputError', 'NoConvergenceError',
]

# vim: sw=4:et:ai
