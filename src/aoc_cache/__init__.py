"""aoc-cache -- fetch Advent of Code inputs once, then read them from disk.

The first call for a given URL downloads the input with your session
cookie and stores it in a scratch directory; every later call for the same
URL is answered from that file without touching the network.  This keeps
load off the Advent of Code servers while you iterate on a solution.

Typical use::

    from aoc_cache import get_input, resolve_cookie

    cookie = resolve_cookie("file:~/.config/aoc/session")
    text = get_input("https://adventofcode.com/2022/day/1/input", cookie)

Modules:
    fetch: The :func:`get_input` fetch-or-cache entry point.
    keys: URL to cache-identifier derivation.
    store: Directory-backed cache store.
    scratch: Namespaced scratch directory provider.
    client: httpx-based input downloader.
    config: Settings, cache root resolution, and cookie sources.
    exceptions: Exception hierarchy with exit-code mapping.
"""

__version__ = "0.3.0"

from aoc_cache.config import Settings, resolve_cookie  # noqa: E402
from aoc_cache.exceptions import (  # noqa: E402
    AocCacheError,
    AuthError,
    HttpStatusError,
    InvalidUsageError,
    NotFoundError,
    StorageError,
    TransportError,
)
from aoc_cache.fetch import get_input  # noqa: E402

__all__ = [
    "AocCacheError",
    "AuthError",
    "HttpStatusError",
    "InvalidUsageError",
    "NotFoundError",
    "Settings",
    "StorageError",
    "TransportError",
    "get_input",
    "resolve_cookie",
]
