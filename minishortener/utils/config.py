"""Runtime configuration lookups.

The shortener has no configuration surface beyond the fixed constants in
`minishortener.constants`. The one exception is the logging level, which is
read from the `LOG_LEVEL` environment variable.

Functions:
    log_level() -> str
        Return the configured logging level name, `'INFO'` by default.

Example:
    >>> os.environ['LOG_LEVEL'] = 'debug'
    >>> log_level()
    'DEBUG'
"""

import os

from minishortener.constants import ENV


def log_level() -> str:
    return os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper()
