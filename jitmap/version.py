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
"""
:mod:`jitmap` version identification.
"""

version_tuple = (1, 0, 0)
"""
Version of the package as a tuple of integers.
"""


def format_version(version):
    """
    Format a version tuple as a dotted string.

    :param version: Version to format.
    :type version: tuple(int)
    """
    return '.'.join(map(str, version))


__version__ = format_version(version_tuple)

# vim :set tabstop=4 shiftwidth=4 textwidth=80 expandtab
