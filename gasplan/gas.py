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
Gas mix model.

A gas mix is described by fractions of oxygen, helium and nitrogen. Each
fraction is rounded to two decimal places, when gas mix is created

    >>> from gasplan.gas import Gas
    >>> Gas(0.32)
    Gas(o2=0.32, he=0.0, n2=0.68)
    >>> Gas(0.185, 0.45)
    Gas(o2=0.19, he=0.45, n2=0.37)

Gas mix is immutable, create new gas mix to change its fractions.
"""

from collections import namedtuple
from decimal import Decimal
import math
import re
import logging

from .calc import to_decimal, round_fraction, pressure_at_depth, \
    depth_at_pressure, validate_depth, is_finite, gas_fraction_at_depth, \
    density_of, solubility_of, pp_max, ONE, QUANTUM
from .const import Element, Mode
from .error import InvalidInputError
from . import const

logger = logging.getLogger(__name__)

RE_EAN = re.compile(r'^ean(\d{1,3})$', re.IGNORECASE)
RE_TRIMIX = re.compile(r'^(\d{1,3})/(\d{1,3})$')


def _fraction(value, name):
    """
    Convert gas fraction into rounded decimal value.

    :param value: Gas fraction.
    :param name: Name of gas fraction used in error message.
    """
    if not isinstance(value, (int, float, Decimal)) or isinstance(value, bool):
        raise InvalidInputError(
            'Gas fraction {} is not a number: {!r}'.format(name, value)
        )
    if not is_finite(value):
        raise InvalidInputError(
            'Gas fraction {} is not finite: {}'.format(name, value)
        )
    v = round_fraction(value)
    if not 0 <= v <= 1:
        raise InvalidInputError(
            'Gas fraction {} out of range: {}'.format(name, value)
        )
    return v


class Gas(namedtuple('Gas', 'o2 he n2')):
    """
    Gas mix of oxygen, helium and nitrogen.

    One of the fractions can be omitted (set to null), then it is
    calculated as complement of the other two fractions.

    :var o2: Oxygen fraction.
    :var he: Helium fraction.
    :var n2: Nitrogen fraction.
    """
    __slots__ = ()

    fraction_at_depth = staticmethod(gas_fraction_at_depth)

    def __new__(cls, o2=0.21, he=0, n2=None):
        """
        Create gas mix.

        :param o2: Oxygen fraction.
        :param he: Helium fraction.
        :param n2: Nitrogen fraction.
        """
        names = ('o2', 'he', 'n2')
        values = (o2, he, n2)
        missing = [k for k, v in enumerate(values) if v is None]
        if len(missing) > 1:
            raise InvalidInputError(
                'Only one gas fraction can be omitted, omitted: {}'.format(
                    ', '.join(names[k] for k in missing)
                )
            )

        fractions = [
            None if v is None else _fraction(v, n)
            for n, v in zip(names, values)
        ]
        if missing:
            k = missing[0]
            # complement is calculated from values before rounding
            v = ONE - sum(to_decimal(v) for v in values if v is not None)
            v = round_fraction(v)
            if v < 0:
                raise InvalidInputError(
                    'Sum of gas fractions greater than 1: {}'.format(
                        ', '.join('{}={}'.format(n, v)
                            for n, v in zip(names, values) if v is not None)
                    )
                )
            fractions[k] = abs(v) if v.is_zero() else v
        elif abs(sum(fractions) - ONE) > QUANTUM:
            raise InvalidInputError(
                'Sum of gas fractions is not 1: o2={}, he={}, n2={}'.format(
                    *values
                )
            )

        return super().__new__(cls, *(float(v) for v in fractions))


    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)


    @classmethod
    def from_dict(cls, data):
        """
        Create gas mix from dictionary of gas fractions.

        The dictionary is keyed with gas elements, see :meth:`Gas.to_dict`.

        :param data: Dictionary of gas fractions.
        """
        return cls(
            data.get(Element.O2), data.get(Element.HE), data.get(Element.N2)
        )


    @classmethod
    def best_mix(cls, depth, mode=Mode.NORMAL):
        """
        Find best gas mix for a depth.

        See :func:`gasplan.planner.best_mix`.
        """
        from .planner import best_mix
        return best_mix(depth, mode)


    @classmethod
    def best_deco_mix(cls, reference, depth):
        """
        Find best decompression gas mix for a depth.

        See :func:`gasplan.planner.best_deco_mix`.
        """
        from .planner import best_deco_mix
        return best_deco_mix(reference, depth)


    def to_dict(self):
        """
        Get dictionary of gas fractions keyed with gas elements.
        """
        return {Element.O2: self.o2, Element.N2: self.n2, Element.HE: self.he}


    def inert_dict(self):
        """
        Get dictionary of inert gas fractions keyed with gas elements.
        """
        return {Element.N2: self.n2, Element.HE: self.he}


    @property
    def density(self):
        """
        Density of gas mix at surface [g/l].
        """
        return sum(density_of(el) * f for el, f in self.to_dict().items())


    @property
    def solubility(self):
        """
        Solubility of inert gases of gas mix.
        """
        return sum(solubility_of(el) * f for el, f in self.inert_dict().items())


    def density_at_depth(self, depth):
        """
        Calculate density of gas mix at depth [g/l].

        :param depth: Depth [m].
        """
        validate_depth(depth)
        return self.density * pressure_at_depth(float(depth))


    def mod(self, mode=Mode.NORMAL):
        """
        Calculate maximum operating depth of gas mix.

        The depth is limited by maximum partial pressure of each gas element
        and by maximum gas density. The depth is rounded down to a meter.

        :param mode: Gas mix mode.
        """
        data = [
            (el, to_decimal(f)) for el, f in self.to_dict().items() if f > 0
        ]
        abs_p = min(to_decimal(pp_max(el, mode)) / f for el, f in data)

        density = sum(to_decimal(density_of(el)) * f for el, f in data)
        abs_p *= min(ONE, to_decimal(const.MAX_DENSITY) / (density * abs_p))

        depth = math.floor(depth_at_pressure(abs_p))
        if __debug__:
            logger.debug('{} mod: {}m at {:.4f}atm ({})'.format(
                self, depth, abs_p, mode
            ))
        return depth


    def label(self):
        """
        Get gas mix label, i.e. EAN32 or 18/45.
        """
        o2 = int(to_decimal(self.o2) * 100)
        he = int(to_decimal(self.he) * 100)
        if he > 0:
            return '{}/{}'.format(o2, he)
        else:
            return 'EAN{}'.format(o2)


    def __str__(self):
        return self.label()



def parse_label(text):
    """
    Create gas mix from its label.

    The supported labels are

    - `EAN<o2>`, i.e. EAN32
    - `<o2>/<he>`, i.e. 18/45
    - `air`

    :param text: Gas mix label.
    """
    text = text.strip()
    if text.lower() == 'air':
        return Gas()

    match = RE_EAN.match(text)
    if match:
        return Gas(int(match.group(1)) / 100, 0)

    match = RE_TRIMIX.match(text)
    if match:
        o2, he = match.groups()
        return Gas(int(o2) / 100, int(he) / 100)

    raise InvalidInputError('Unknown gas mix label: {}'.format(text))


# vim: sw=4:et:ai
