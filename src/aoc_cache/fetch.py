"""Fetch-or-cache entry point.

:func:`get_input` is the only public operation of the package.  It serves a
puzzle input from the on-disk cache when one exists and otherwise downloads
it once, stores it, and returns it.
"""

from __future__ import annotations

import logging
from typing import Optional

from aoc_cache.client import InputClient
from aoc_cache.config import Settings, load_settings
from aoc_cache.exceptions import InvalidUsageError, StorageError
from aoc_cache.keys import derive_key
from aoc_cache.scratch import scratch_path
from aoc_cache.store import CacheStore, DirectoryCacheStore

logger = logging.getLogger(__name__)


def get_input(
    url: str,
    cookie: str,
    *,
    store: Optional[CacheStore] = None,
    client: Optional[InputClient] = None,
    settings: Optional[Settings] = None,
) -> str:
    """Return the puzzle input at *url*, from cache if it was fetched before.

    On a cache hit no request is made and *cookie* is not checked at all.
    On a miss the input is downloaded with *cookie* as the session
    credential, written to the cache, and returned.  Only complete 2xx
    bodies are cached.  A failure to write the cache is logged and does not
    affect the return value.

    Args:
        url: Puzzle input URL, e.g.
            ``https://adventofcode.com/2022/day/1/input``.
        cookie: Session cookie (``session=...`` or the bare token).
        store: Cache store to use.  Defaults to a
            :class:`~aoc_cache.store.DirectoryCacheStore` in the
            ``aoc_cache`` scratch directory.
        client: HTTP client to use on a miss.  Defaults to an
            :class:`~aoc_cache.client.InputClient` built from *settings*.
        settings: Defaults to :func:`~aoc_cache.config.load_settings`.

    Returns:
        The raw body text.

    Raises:
        InvalidUsageError: If *url* is empty, or on a miss if *cookie* is
            empty or malformed.
        StorageError: If the cache cannot be resolved or read (unless
            ``treat_read_errors_as_miss`` is set).
        TransportError: On network failure during a miss.
        HttpStatusError: On a non-2xx response during a miss.

    Example::

        from aoc_cache import get_input

        text = get_input("https://adventofcode.com/2022/day/1/input", "session=abc")
    """
    if not url:
        raise InvalidUsageError("URL is empty")
    # Settings are only loaded when a default collaborator or the read policy needs them.
    if store is None:
        settings = settings or load_settings()
        store = DirectoryCacheStore(provider=lambda: scratch_path(settings=settings))

    key = derive_key(url)
    logger.debug("Cache key for %s is %s", url, key)

    try:
        content = store.read(key)
    except StorageError as exc:
        settings = settings or load_settings()
        if not settings.treat_read_errors_as_miss:
            raise
        logger.warning("Ignoring unreadable cache entry for %s: %s", url, exc)
        content = None

    if content is not None:
        logger.info("Returning content for %s found in cache", url)
        return content

    logger.debug("Content for %s not found in cache, requesting from web", url)
    if client is None:
        settings = settings or load_settings()
        client = InputClient(settings)
    body = client.fetch(url, cookie)

    try:
        store.write(key, body)
    except StorageError as exc:
        logger.warning("Could not cache content for %s: %s", url, exc)

    logger.info("Returning content for %s from web", url)
    return body
