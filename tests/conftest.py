"""Shared test fixtures for aoc-cache.

Provides an isolated cache root, a directory-backed store inside it, and
helpers for building :class:`httpx.MockTransport` based clients.  These
fixtures are automatically discovered by pytest.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import httpx
import pytest

from aoc_cache.client import InputClient
from aoc_cache.config import Settings
from aoc_cache.store import DirectoryCacheStore

AOC_URL = "https://adventofcode.com/2022/day/1/input"


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every cache root lookup at tmp_path and clear AOC_CACHE_* vars.

    Tests never touch the real ``~/.cache``.
    """
    for var in [
        "AOC_CACHE_DIR",
        "AOC_CACHE_TIMEOUT",
        "AOC_CACHE_USER_AGENT",
        "AOC_CACHE_READ_ERRORS_AS_MISS",
    ]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("XDG_CACHE_HOME", str(tmp_path / "xdg-cache"))
    return tmp_path


@pytest.fixture
def store(tmp_path: Path) -> DirectoryCacheStore:
    """A DirectoryCacheStore rooted at tmp_path/store."""
    return DirectoryCacheStore(tmp_path / "store")


# ---------------------------------------------------------------------------
# HTTP fakes
# ---------------------------------------------------------------------------


@pytest.fixture
def make_client() -> Callable[..., InputClient]:
    """Factory returning an InputClient whose transport calls *handler*."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> InputClient:
        return InputClient(Settings(), transport=httpx.MockTransport(handler))

    return _make


@pytest.fixture
def offline_client(make_client) -> InputClient:
    """An InputClient that fails the test if any request is attempted."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise AssertionError(f"unexpected request to {request.url}")

    return make_client(handler)
