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
Command line interface tests.
"""

import io

from gasplan.cli import parse_args, main

import unittest
from unittest import mock


class ParseArgsTestCase(unittest.TestCase):
    """
    Command line arguments parsing tests.
    """
    def test_defaults(self):
        """
        Test command line arguments defaults
        """
        args = parse_args(['30'])
        self.assertEqual(30.0, args.depth)
        self.assertEqual('normal', args.mode)
        self.assertIsNone(args.reference)
        self.assertFalse(args.verbose)


    def test_deco(self):
        """
        Test command line arguments for decompression gas mix
        """
        args = parse_args(['-v', '--deco-after', '18/45', '21'])
        self.assertEqual(21.0, args.depth)
        self.assertEqual('18/45', args.reference)
        self.assertTrue(args.verbose)



class MainTestCase(unittest.TestCase):
    """
    Command line interface tests.
    """
    def _main(self, *args):
        with mock.patch('sys.stdout', new_callable=io.StringIO) as stdout, \
                mock.patch('sys.stderr', new_callable=io.StringIO) as stderr:
            status = main(list(args))
        return status, stdout.getvalue(), stderr.getvalue()


    def test_best_mix(self):
        """
        Test printing best gas mix
        """
        status, out, err = self._main('30')
        self.assertEqual(0, status)
        self.assertEqual('EAN35 mod=30m\n', out)

        status, out, err = self._main('60')
        self.assertEqual(0, status)
        self.assertEqual('20/38 mod=60m\n', out)


    def test_best_mix_deco(self):
        """
        Test printing best gas mix in deco mode
        """
        status, out, err = self._main('--mode', 'deco', '21')
        self.assertEqual(0, status)
        self.assertEqual('EAN51 mod=21m\n', out)


    def test_best_deco_mix(self):
        """
        Test printing best decompression gas mix
        """
        status, out, err = self._main('--deco-after', '18/45', '21')
        self.assertEqual(0, status)
        self.assertEqual('51/3 mod=21m\n', out)


    def test_invalid_label(self):
        """
        Test error on invalid gas mix label
        """
        status, out, err = self._main('--deco-after', 'heliox', '21')
        self.assertEqual(1, status)
        self.assertEqual('', out)
        self.assertTrue(err.startswith('gp-mix: error: '), err)


    def test_negative_depth(self):
        """
        Test error on negative depth
        """
        status, out, err = self._main('-5')
        self.assertEqual(1, status)
        self.assertIn('Negative depth', err)


    def test_no_convergence(self):
        """
        Test error when decompression gas mix cannot be found
        """
        status, out, err = self._main('-d', 'EAN100', '21')
        self.assertEqual(1, status)
        self.assertIn('Cannot find decompression gas mix', err)


# vim: sw=4:et:ai
