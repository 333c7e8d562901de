"""Scratch directory provider.

A scratch directory is a writable, per-namespace directory that survives
between runs but may be wiped at any time by cleaning the cache root.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from aoc_cache.config import Settings, get_cache_base
from aoc_cache.exceptions import StorageError

logger = logging.getLogger(__name__)

NAMESPACE = "aoc_cache"
"""Namespace used for the input cache directory."""


def scratch_path(namespace: str = NAMESPACE, settings: Optional[Settings] = None) -> Path:
    """Return ``<cache base>/<namespace>``, creating it if necessary.

    Args:
        namespace: Directory name identifying the owner.  Must be a single
            path component.
        settings: Optional settings whose ``cache_dir`` overrides the
            environment / XDG lookup.

    Raises:
        StorageError: If *namespace* is not a plain name or the directory
            cannot be created.
    """
    if not namespace or Path(namespace).name != namespace or namespace in (".", ".."):
        raise StorageError(f"Invalid scratch namespace: {namespace!r}")
    path = get_cache_base(settings) / namespace
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StorageError(f"Cannot create scratch directory {path}: {exc}") from exc
    logger.debug("Scratch directory for '%s': %s", namespace, path)
    return path
