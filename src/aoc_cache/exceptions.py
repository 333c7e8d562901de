"""Exception hierarchy for aoc-cache.

All exceptions inherit from :class:`AocCacheError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`aoc_cache.exit_codes`.

Subclass hierarchy::

    AocCacheError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- ConfigError         (exit 1)
    +-- TransportError      (exit 6)
    +-- HttpStatusError     (exit 5)
    |   +-- AuthError       (exit 3)
    |   +-- NotFoundError   (exit 4)
    +-- StorageError        (exit 8)
"""

from __future__ import annotations

from aoc_cache.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONNECTION_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_HTTP_ERROR,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_STORAGE_ERROR,
)


class AocCacheError(Exception):
    """Base exception for all aoc-cache errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`aoc_cache.exit_codes`.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(AocCacheError):
    """Raised for an empty URL, an empty cookie, or a cookie with control characters."""

    exit_code = EXIT_INVALID_USAGE


class ConfigError(AocCacheError):
    """Raised for configuration problems (bad environment values, unresolvable cookie sources)."""

    exit_code = EXIT_GENERIC_FAILURE


class TransportError(AocCacheError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused, bad URL)."""

    exit_code = EXIT_CONNECTION_ERROR


class HttpStatusError(AocCacheError):
    """Raised when the server answers with a non-success status code.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status returned by the server.
        url: The URL that was requested.
    """

    exit_code = EXIT_HTTP_ERROR

    def __init__(self, message: str, status_code: int, url: str):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class AuthError(HttpStatusError):
    """Raised when the session cookie is missing, invalid or expired (HTTP 400/401/403)."""

    exit_code = EXIT_AUTH_FAILURE


class NotFoundError(HttpStatusError):
    """Raised when the puzzle input does not exist or is not unlocked yet (HTTP 404)."""

    exit_code = EXIT_NOT_FOUND


class StorageError(AocCacheError):
    """Raised when the cache directory cannot be resolved, or an entry cannot be read or written."""

    exit_code = EXIT_STORAGE_ERROR
