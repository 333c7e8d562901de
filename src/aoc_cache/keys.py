"""Cache key derivation.

A URL is turned into a file name by hashing it, which sidesteps escaping
rules for ``/``, ``:`` and ``?`` and keeps the name length fixed.
"""

from __future__ import annotations

import hashlib

KEY_ALGORITHM = "sha256"
"""Hash used for cache keys.  Changing it orphans every existing entry."""


def derive_key(url: str) -> str:
    """Return the cache identifier for *url*.

    The identifier is the lowercase hex digest of the UTF-8 encoded URL,
    so it is deterministic across processes and safe to use as a single
    file name on every platform.

    Args:
        url: The request URL.  It is not parsed or normalised.

    Returns:
        A 64-character hex string.
    """
    return hashlib.new(KEY_ALGORITHM, url.encode("utf-8", "surrogatepass")).hexdigest()
