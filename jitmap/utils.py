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
Miscellaneous utilities that don't fit anywhere else.
"""

import inspect
import logging
import logging.config
import os
import os.path


JITMAP_PKG_DIR = os.path.dirname(os.path.abspath(__file__))
"""
Folder of the installed :mod:`jitmap` package, which holds the default
``logging.conf``.
"""


class Loggable:
    """
    A simple class for uniformly named loggers
    """

    @property
    def logger(self):
        """
        Convenience short-hand for ``self.get_logger()``.
        """
        return self.get_logger()

    @classmethod
    def get_logger(cls, suffix=None):
        cls_name = cls.__name__
        module = inspect.getmodule(cls)
        if module:
            name = module.__name__ + '.' + cls_name
        else:
            name = cls_name
        if suffix:
            name += '.' + suffix
        return logging.getLogger(name)


def setup_logging(filepath=None, level=None):
    """
    Initialize logging used for all the :mod:`jitmap` modules.

    :param filepath: the relative or absolute path of the logging
        configuration to use. Relative paths are resolved against
        :attr:`JITMAP_PKG_DIR`. Defaults to the ``logging.conf`` shipped with
        the package.
    :type filepath: str or None

    :param level: Override the conf file and force logging level. Defaults to
        ``logging.INFO``.
    :type level: int or str
    """
    resolved_level = logging.INFO if level is None else level
    filepath = filepath or 'logging.conf'

    # Ensure basicConfig will have effects again by getting rid of the existing
    # handlers
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    # Capture the warnings as log entries
    logging.captureWarnings(True)

    if level is not None:
        log_format = '[%(asctime)s][%(name)s] %(levelname)s  %(message)s'
        logging.basicConfig(level=resolved_level, format=log_format)
    else:
        if not os.path.isabs(filepath):
            filepath = os.path.join(JITMAP_PKG_DIR, filepath)

        # Set the level first, so the config file can override with more details
        logging.getLogger().setLevel(resolved_level)

        if os.path.exists(filepath):
            logging.config.fileConfig(filepath, disable_existing_loggers=False)
            logging.info(f'Using jitmap logging configuration: {filepath}')
        else:
            raise FileNotFoundError(f'Logging configuration file not found: {filepath}')

# vim :set tabstop=4 shiftwidth=4 textwidth=80 expandtab
