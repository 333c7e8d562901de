"""Numeric process exit codes for scripts that embed aoc-cache.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~aoc_cache.exceptions.AocCacheError` subclass.  A
solution script can ``sys.exit(exc.exit_code)`` and let shell wrappers
tell a rejected cookie apart from a flaky network without parsing stderr.

Example::

    $ python day01.py
    $ echo $?
    3   # EXIT_AUTH_FAILURE -- the session cookie was rejected
"""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The call was made with an empty URL or an unusable cookie."""

EXIT_AUTH_FAILURE = 3
"""The session cookie was rejected (HTTP 400, 401 or 403)."""

EXIT_NOT_FOUND = 4
"""The puzzle input does not exist or is not unlocked yet (HTTP 404)."""

EXIT_HTTP_ERROR = 5
"""The server answered with some other non-success status."""

EXIT_CONNECTION_ERROR = 6
"""A network-level error occurred (timeout, DNS failure, connection refused)."""

EXIT_STORAGE_ERROR = 8
"""The on-disk cache could not be resolved, read or written."""
