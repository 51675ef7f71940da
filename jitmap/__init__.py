#! /usr/bin/env python3

########################################################################
# Note: importing the package must stay side-effect free. In particular,
# logging is only configured when an application calls
# jitmap.utils.setup_logging().
########################################################################

import warnings

from jitmap.version import __version__

# Raise an exception when a deprecated API is used from within a jitmap.*
# submodule. This ensures that we don't use any deprecated APIs internally, so
# they are only kept for external backward compatibility purposes.
warnings.filterwarnings(
    action='error',
    category=DeprecationWarning,
    module=fr'{__name__}\..*',
)

# vim :set tabstop=4 shiftwidth=4 textwidth=80 expandtab
