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
GasPlan command line interface.
"""

import argparse
import logging
import sys

from .const import Mode
from .error import GasPlanError
from .gas import parse_label
from .planner import best_mix, best_deco_mix

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """
    Parse command line arguments.

    :param args: Command line arguments (`sys.argv` by default).
    """
    parser = argparse.ArgumentParser(
        prog='gp-mix',
        description='GasPlan - find best breathing gas mix for a depth'
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', dest='verbose', default=False,
        help='explain what is being done'
    )
    parser.add_argument(
        '-m', '--mode', choices=(Mode.NORMAL, Mode.DECO), default=Mode.NORMAL,
        help='gas mix mode (default: %(default)s)'
    )
    parser.add_argument(
        '-d', '--deco-after', dest='reference', metavar='GAS',
        help='find decompression gas mix to switch to from gas mix GAS,'
            ' i.e. 18/45, EAN32 or air'
    )
    parser.add_argument('depth', type=float, help='depth [m]')
    return parser.parse_args(args)


def main(args=None):
    """
    Find best gas mix and print its label and maximum operating depth.

    Exit status is returned.

    :param args: Command line arguments (`sys.argv` by default).
    """
    args = parse_args(args)

    level = logging.DEBUG if args.verbose else logging.WARN
    logging.basicConfig(level=level)

    try:
        if args.reference:
            reference = parse_label(args.reference)
            gas = best_deco_mix(reference, args.depth)
            mode = Mode.DECO
        else:
            gas = best_mix(args.depth, args.mode)
            mode = args.mode
        mod = gas.mod(mode)
    except GasPlanError as ex:
        logger.debug('gas mix search failed', exc_info=True)
        print('gp-mix: error: {}'.format(ex), file=sys.stderr)
        return 1

    print('{} mod={}m'.format(gas, mod))
    return 0


# vim: sw=4:et:ai
