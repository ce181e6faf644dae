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
GasPlan constants.

The tables are read-only mappings. Use accessor functions of
:mod:`gasplan.calc` module to look up a value with element and mode
validation.
"""

from types import MappingProxyType


class Element(object):
    """
    Gas element enumeration.

    The values are used as keys of the constant tables and of gas mix
    dictionary projection.
    """
    H2 = 'H2'
    HE = 'He'
    N2 = 'N2'
    O2 = 'O2'


class Mode(object):
    """
    Gas mix mode enumeration.

    NORMAL
        Gas mix breathed at working depth, i.e. bottom gas.
    DECO
        Gas mix breathed during ascent only. Allows higher partial
        pressure of oxygen.
    """
    NORMAL = 'normal'
    DECO = 'deco'


ELEMENTS = frozenset((Element.H2, Element.HE, Element.N2, Element.O2))
MODES = frozenset((Mode.NORMAL, Mode.DECO))

# density of gas element [g/l]
DENSITY = MappingProxyType({
    Element.H2: 0.09,
    Element.HE: 0.179,
    Element.N2: 1.251,
    Element.O2: 1.428,
})

# maximum partial pressure of gas element [atm]
PP_MAX = MappingProxyType({
    Mode.NORMAL: MappingProxyType({
        Element.O2: 1.4,
        Element.N2: 5.0,
        Element.HE: 13.0,
    }),
    Mode.DECO: MappingProxyType({
        Element.O2: 1.6,
        Element.N2: 5.0,
        Element.HE: 13.0,
    }),
})

SOLUBILITY = MappingProxyType({
    Element.H2: 0.048,
    Element.HE: 0.015,
    Element.O2: 0.12,
    Element.N2: 0.067,
})

MIN_FRACTION = MappingProxyType({
    Element.H2: 0,
    Element.HE: 0,
    Element.N2: 0.05,
    Element.O2: 0.01,
})

IDEAL_DENSITY = 5.2 # not enforced
MAX_DENSITY = 6.2

# number of decimal places of gas fraction
SCALE = 2
FRACTION_STEP = 0.01

# gas mix search limit
MAX_ITERATIONS = 100

# vim: sw=4:et:ai
