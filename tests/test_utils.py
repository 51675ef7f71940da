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

from unittest import TestCase
import logging
import os
import tempfile

from jitmap.utils import Loggable, setup_logging
from jitmap.version import __version__, format_version, version_tuple


class _Foo(Loggable):
    pass


class LoggableTest(TestCase):
    def test_logger_name(self):
        assert _Foo.get_logger().name == f'{__name__}._Foo'
        assert _Foo().logger.name == f'{__name__}._Foo'

    def test_logger_suffix(self):
        assert _Foo.get_logger('bar').name == f'{__name__}._Foo.bar'


class SetupLoggingTest(TestCase):
    def setUp(self):
        root = logging.getLogger()
        self._handlers = list(root.handlers)
        self._level = root.level

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in self._handlers:
            root.addHandler(handler)
        root.setLevel(self._level)
        logging.captureWarnings(False)

    def test_level(self):
        setup_logging(level=logging.DEBUG)
        assert logging.getLogger().level == logging.DEBUG

    def test_default_conf(self):
        setup_logging()
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger('jitmap').level == logging.INFO

    def test_custom_conf(self):
        conf = (
            '[loggers]\n'
            'keys=root\n'
            '[handlers]\n'
            'keys=\n'
            '[formatters]\n'
            'keys=\n'
            '[logger_root]\n'
            'level=WARNING\n'
            'handlers=\n'
        )
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, 'logging.conf')
            with open(path, 'w') as f:
                f.write(conf)

            setup_logging(path)

        assert logging.getLogger().level == logging.WARNING

    def test_missing_conf(self):
        with self.assertRaises(FileNotFoundError):
            setup_logging('/this/does/not/exist.conf')


class VersionTest(TestCase):
    def test_version(self):
        assert __version__ == format_version(version_tuple)
        assert format_version((1, 2, 3)) == '1.2.3'

# vim :set tabstop=4 shiftwidth=4 textwidth=80 expandtab
