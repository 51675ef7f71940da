#! /usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
#
# Copyright (C) 2026, Arm Limited and contributors.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

import itertools

from setuptools import setup, find_packages


with open('README.rst', 'r') as f:
    long_description = f.read()

with open("jitmap/version.py") as f:
    version_globals = dict()
    exec(f.read(), version_globals)
    jitmap_version = version_globals['__version__']

packages = find_packages(include=['jitmap', 'jitmap.*'])

package_data = {
    'jitmap': ['logging.conf'],
}

extras_require={
    "dev": [
        "pytest",
        "hypothesis >= 6.100",
        "build",
        "twine",
    ],
}

# "all" extra requires all to install all the optional dependencies
extras_require['all'] = sorted(set(
    itertools.chain.from_iterable(extras_require.values())
))

python_requires = '>= 3.8'

if __name__ == "__main__":

    setup(
        name='jitmap',
        license='Apache License 2.0',
        version=jitmap_version,
        maintainer='Arm Ltd.',
        packages=packages,
        description='Parser for the symbol maps emitted by JIT runtimes',
        long_description=long_description,
        python_requires=python_requires,
        install_requires=[
            # Pandas >= 1.0.0 has support for new nullable dtypes
            "pandas >=1.0.0, <3.0",
        ],

        extras_require=extras_require,
        package_data=package_data,
        classifiers=[
            "Programming Language :: Python :: 3 :: Only",
            "Topic :: Software Development :: Debuggers",
            "Intended Audience :: Developers",
        ],
    )

# vim :set tabstop=4 shiftwidth=4 textwidth=80 expandtab
