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
Functional tools tests.
"""

from gasplan.error import NoConvergenceError
from gasplan.ft import recurse_while

import unittest
from unittest import mock


class RecurseWhileTestCase(unittest.TestCase):
    """
    The `recurse_while` function tests.
    """
    def test_recurse(self):
        """
        Test recurse function
        """
        f = lambda a: a + 1
        p = lambda a: a < 5
        v = recurse_while(p, f, 3)
        self.assertEqual(5, v)


    def test_recurse_start(self):
        """
        Test recurse function with no f execution
        """
        f = mock.MagicMock()
        p = lambda a: a < 5
        v = recurse_while(p, f, 5)
        self.assertEqual(5, v)
        self.assertFalse(f.called)


    def test_recurse_limit(self):
        """
        Test recurse function reaching execution limit
        """
        f = mock.MagicMock(side_effect=lambda a: a + 1)
        p = lambda a: True
        self.assertRaises(NoConvergenceError, recurse_while, p, f, 0, limit=10)
        self.assertEqual(10, f.call_count)


    def test_recurse_at_limit(self):
        """
        Test recurse function finishing at execution limit
        """
        f = lambda a: a + 1
        p = lambda a: a < 10
        v = recurse_while(p, f, 0, limit=10)
        self.assertEqual(10, v)


# vim: sw=4:et:ai
