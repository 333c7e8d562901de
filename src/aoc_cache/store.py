"""On-disk storage for fetched puzzle inputs.

:class:`DirectoryCacheStore` keeps one file per entry in a flat scratch
directory.  The file name is the cache identifier from
:func:`aoc_cache.keys.derive_key` and the file content is the exact
response body -- no envelope, no metadata.  Entries are write-once: the
store never deletes or expires anything.

Any object implementing :class:`CacheStore` can be passed to
:func:`aoc_cache.fetch.get_input` in place of the default store.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Optional, Protocol

from aoc_cache.exceptions import StorageError
from aoc_cache.scratch import scratch_path

logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Storage interface consumed by the fetch orchestrator."""

    def resolve_root(self) -> Path: ...

    def read(self, key: str) -> Optional[str]: ...

    def write(self, key: str, content: str) -> None: ...


class DirectoryCacheStore:
    """Cache store backed by a directory of plain text files.

    The root directory is resolved lazily on first use and reused for the
    lifetime of the instance.

    Args:
        root: Explicit directory to use.  When ``None``, the directory is
            obtained from *provider*.
        provider: Zero-argument callable returning the scratch directory.
            Defaults to :func:`aoc_cache.scratch.scratch_path`.

    Example::

        store = DirectoryCacheStore(tmp_path)
        store.write("abc123", "1\\n2\\n3\\n")
        assert store.read("abc123") == "1\\n2\\n3\\n"
    """

    def __init__(
        self,
        root: str | Path | None = None,
        provider: Optional[Callable[[], Path]] = None,
    ) -> None:
        self._root: Optional[Path] = Path(root) if root is not None else None
        self._provider = provider or scratch_path

    def resolve_root(self) -> Path:
        """Return the cache directory, creating it if absent.

        Raises:
            StorageError: If the provider fails or the directory cannot be created.
        """
        if self._root is None:
            try:
                self._root = Path(self._provider())
            except OSError as exc:
                raise StorageError(f"Cannot resolve cache directory: {exc}") from exc
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StorageError(f"Cannot create cache directory {self._root}: {exc}") from exc
        return self._root

    def read(self, key: str) -> Optional[str]:
        """Return the cached content for *key*, or ``None`` if there is no entry.

        Raises:
            StorageError: If the entry exists but cannot be read or is not
                valid UTF-8.
        """
        path = self._entry_path(key)
        try:
            # newline="" keeps "\r\n" intact so reads match what was written.
            with open(path, encoding="utf-8", newline="") as fh:
                content = fh.read()
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            raise StorageError(f"Cannot read cache entry {path}: {exc}") from exc
        logger.debug("Read %d chars from %s", len(content), path)
        return content

    def write(self, key: str, content: str) -> None:
        """Store *content* under *key*, replacing any existing entry.

        The content goes to a temp file in the same directory which is then
        renamed over the entry, so readers never see a partial file.

        Raises:
            StorageError: On any filesystem failure.
        """
        path = self._entry_path(key)
        tmp_path: Optional[str] = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
                encoding="utf-8",
                newline="",
            ) as fh:
                tmp_path = fh.name
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_path, path)
        except (OSError, UnicodeEncodeError) as exc:
            if tmp_path is not None:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass
            raise StorageError(f"Cannot write cache entry {path}: {exc}") from exc
        logger.info("Wrote content (size=%d) to %s", len(content), path)

    def _entry_path(self, key: str) -> Path:
        if not key or Path(key).name != key or key in (".", ".."):
            raise StorageError(f"Invalid cache key: {key!r}")
        return self.resolve_root() / key
