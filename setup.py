#!/usr/bin/env python3
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

from setuptools import setup, find_packages

import gasplan

setup(
    name='gasplan',
    version=gasplan.__version__,
    description='GasPlan - breathing gas mix planner',
    author='Artur Wroblewski',
    author_email='wrobell@pld-linux.org',
    packages=find_packages('.'),
    scripts=('bin/gp-mix',),
    include_package_data=True,
    long_description=\
"""\
GasPlan is Python library to find best breathing gas mix (nitrox or trimix)
for a dive depth and best decompression gas mix to switch to during ascent.
""",
    classifiers=[
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
    keywords='diving dive gas mix nitrox trimix',
    license='GPL',
    install_requires=[],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_rtd_theme'],
    },
)

# vim: sw=4:et:ai
