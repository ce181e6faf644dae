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
Find best gas mixes for random depths and check the gas mixes.
"""

import gasplan
from gasplan import const

import random

import unittest

class RandomTestCase(unittest.TestCase):
    """
    Find best gas mixes for random depths.
    """
    def test_random(self):
        """
        Test random depth
        """
        # 10m - 120m, by=0.1m; deeper gas mix is over helium or density limit
        depth = random.randint(100, 1200) / 10
        deco_depth = random.randint(30, int(depth * 10)) / 10
        mode = random.choice((gasplan.Mode.NORMAL, gasplan.Mode.DECO))

        desc = """\
depth: {}
deco depth: {}
mode: {}
""".format(depth, deco_depth, mode)

        print(desc)

        gas = gasplan.best_mix(depth, mode)
        self.assertLessEqual(abs(gas.o2 + gas.he + gas.n2 - 1), 0.01, desc)
        self.assertGreaterEqual(gas.n2, const.MIN_FRACTION['N2'], desc)
        self.assertGreaterEqual(gas.mod(mode), int(depth) - 1, desc)

        deco = gasplan.best_deco_mix(gas, deco_depth)
        self.assertLessEqual(deco.solubility, gas.solubility, desc)

        print('{} mod={}m, deco {} mod={}m'.format(
            gas, gas.mod(mode), deco, deco.mod(gasplan.Mode.DECO)
        ))

# vim: sw=4:et:ai
