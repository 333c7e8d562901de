"""Synchronous HTTP client for downloading puzzle inputs.

This module provides :class:`InputClient`, a thin wrapper around
:class:`httpx.Client` that sends the session cookie, performs exactly one
GET per call, and maps failures onto the :mod:`aoc_cache.exceptions`
hierarchy:

- connection, DNS, timeout and URL errors -> :class:`~aoc_cache.exceptions.TransportError`
- 400 / 401 / 403 -> :class:`~aoc_cache.exceptions.AuthError`
- 404 -> :class:`~aoc_cache.exceptions.NotFoundError`
- any other non-2xx (redirects included) -> :class:`~aoc_cache.exceptions.HttpStatusError`

There is no retry and no backoff.  The cookie is only ever placed in the
outgoing ``Cookie`` header; it is never logged or stored.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from aoc_cache.config import Settings
from aoc_cache.exceptions import (
    AuthError,
    HttpStatusError,
    InvalidUsageError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "session"


def build_cookie_header(cookie: str) -> str:
    """Return the ``Cookie`` header value for *cookie*.

    A full ``name=value`` string is sent as-is; a bare token is sent as
    ``session=<token>``.

    Raises:
        InvalidUsageError: If the cookie is empty, contains control
            characters (which would corrupt or inject headers), or is not ASCII.
    """
    value = cookie.strip()
    if not value:
        raise InvalidUsageError("Session cookie is empty")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in value):
        raise InvalidUsageError("Session cookie contains control characters")
    if not value.isascii():
        raise InvalidUsageError("Session cookie contains non-ASCII characters")
    if "=" not in value:
        value = f"{SESSION_COOKIE_NAME}={value}"
    return value


class InputClient:
    """Blocking HTTP client for Advent of Code inputs.

    Can be used as a context manager to reuse one connection pool across
    several fetches; otherwise :meth:`fetch` opens and closes a client per
    call.

    Args:
        settings: Timeout and User-Agent.  Defaults to :class:`Settings()`.
        transport: Optional :class:`httpx.BaseTransport`, mainly for
            :class:`httpx.MockTransport` in tests.

    Example::

        with InputClient() as client:
            text = client.fetch("https://adventofcode.com/2022/day/1/input", "session=abc")
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._settings = settings or Settings()
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> InputClient:
        self._client = self._make_client()
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def fetch(self, url: str, cookie: str) -> str:
        """GET *url* with the session cookie and return the body text.

        The body is fully read before returning, so a caller never sees a
        truncated download.

        Args:
            url: Absolute URL of the puzzle input.
            cookie: Session cookie, ``session=...`` or the bare token.

        Returns:
            The decoded response body, unmodified.

        Raises:
            InvalidUsageError: If the cookie is empty or malformed.
            TransportError: On network failure or an unusable URL.
            HttpStatusError: On any non-2xx status (see subclasses).
        """
        headers = {
            "Cookie": build_cookie_header(cookie),
            "User-Agent": self._settings.user_agent,
        }
        if self._client is not None:
            response = self._send(self._client, url, headers)
        else:
            with self._make_client() as client:
                response = self._send(client, url, headers)

        self._raise_for_status(response, url)
        logger.debug("Fetched %d chars from %s", len(response.text), url)
        return response.text

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _make_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=self._settings.timeout,
            follow_redirects=False,
            transport=self._transport,
        )

    @staticmethod
    def _send(client: httpx.Client, url: str, headers: dict[str, str]) -> httpx.Response:
        try:
            response = client.get(url, headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            raise TransportError(f"Request to {url} failed: {exc}") from exc
        return response

    @staticmethod
    def _raise_for_status(response: httpx.Response, url: str) -> None:
        """Raise a typed exception for non-success HTTP status codes."""
        status = response.status_code
        if response.is_success:
            return

        detail = response.text.strip()[:200] if response.text else ""
        prefix = f"HTTP {status} for {url}"
        msg = f"{prefix}: {detail}" if detail else prefix

        if status in (400, 401, 403):
            raise AuthError(msg, status_code=status, url=url)
        if status == 404:
            raise NotFoundError(msg, status_code=status, url=url)
        raise HttpStatusError(msg, status_code=status, url=url)
