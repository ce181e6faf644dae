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
GasPlan exceptions.
"""

class GasPlanError(Exception):
    """
    Base class for all GasPlan errors.
    """


class InvalidInputError(GasPlanError):
    """
    Invalid gas mix planner input, i.e. negative depth, gas fraction out of
    range or unknown gas mix mode.
    """


class NoConvergenceError(GasPlanError):
    """
    Gas mix search reached its limit without finding a gas mix.
    """


# vim: sw=4:et:ai
