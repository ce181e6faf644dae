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

import logging

from .error import NoConvergenceError
from . import const

logger = logging.getLogger(__name__)


def recurse_while(predicate, f, start, limit=const.MAX_ITERATIONS):
    """
    Execute function `f` while predicate function is true.

    The first value, for which predicate is false, is returned. If `f` is
    never executed then `start` value is returned.

    `NoConvergenceError` is raised if predicate is still true after `limit`
    executions of `f`.

    :param predicate: Predicate function guarding execution.
    :param f: Function to execute. Value returned by the function is passed
              as argument for next invocation.
    :param start: Value passed as argument during first execution of `f` function.
    :param limit: Maximum number of executions of `f`.
    """
    x = start
    k = 0
    while predicate(x):
        if k == limit:
            raise NoConvergenceError(
                'No result after {} iterations, last value {}'.format(k, x)
            )
        x = f(x)
        k += 1
        if __debug__:
            logger.debug('recurse while: step {}, value {}'.format(k, x))
    return x


# vim: sw=4:et:ai
