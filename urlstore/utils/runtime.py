"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if the application runs in the local environment, False otherwise.

Example:
    >>> from urlstore.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
"""

import os

from urlstore.constants import ENV


def running_locally() -> bool:
    """Check if the application runs locally (APP_ENV unset or 'local')"""
    return os.getenv(ENV.App.APP_ENV, 'local').lower() == 'local'
