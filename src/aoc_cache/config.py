"""Settings, scratch-root resolution, and cookie sources.

* **Settings** -- :class:`Settings` holds the few knobs the library has
  (cache root override, request timeout, User-Agent, read-error policy).
  :func:`load_settings` builds one from ``AOC_CACHE_*`` environment
  variables.
* **Scratch root** -- :func:`get_cache_base` picks the directory under
  which namespaced scratch directories live: ``$AOC_CACHE_DIR`` if set,
  otherwise XDG compliant on Linux/BSD (``~/.cache``) and ``~/.aoc_cache/cache``
  on macOS and Windows.
* **Cookie sources** -- :func:`resolve_cookie` reads the session cookie
  from an environment variable or a file so solution scripts need not
  embed it.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from aoc_cache import __version__
from aoc_cache.exceptions import ConfigError

_APP_NAME = "aoc_cache"

ENV_CACHE_DIR = "AOC_CACHE_DIR"
ENV_TIMEOUT = "AOC_CACHE_TIMEOUT"
ENV_USER_AGENT = "AOC_CACHE_USER_AGENT"
ENV_READ_ERRORS_AS_MISS = "AOC_CACHE_READ_ERRORS_AS_MISS"

DEFAULT_USER_AGENT = f"aoc-cache/{__version__} (+https://pypi.org/project/aoc-cache/)"


class Settings(BaseModel):
    """Runtime settings for :func:`~aoc_cache.fetch.get_input`."""

    cache_dir: Optional[Path] = Field(
        default=None, description="Scratch root override; namespaced directories live below it"
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    treat_read_errors_as_miss: bool = Field(
        default=False,
        description="Refetch instead of failing when a cached entry cannot be read",
    )


def load_settings() -> Settings:
    """Build :class:`Settings` from the environment.

    Unset variables fall back to the model defaults.

    Raises:
        ConfigError: If a variable holds a value the model rejects.
    """
    values: dict[str, str] = {}
    for env_var, field in (
        (ENV_CACHE_DIR, "cache_dir"),
        (ENV_TIMEOUT, "timeout"),
        (ENV_USER_AGENT, "user_agent"),
        (ENV_READ_ERRORS_AS_MISS, "treat_read_errors_as_miss"),
    ):
        value = os.environ.get(env_var, "")
        if value:
            values[field] = value
    try:
        return Settings.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid aoc-cache environment settings: {exc}") from exc


# --- Scratch root ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_cache_base(settings: Optional[Settings] = None) -> Path:
    """Return the directory that scratch namespaces are created under.

    Does not create anything; see :func:`aoc_cache.scratch.scratch_path`.
    """
    if settings is not None and settings.cache_dir is not None:
        return settings.cache_dir.expanduser()
    env_value = os.environ.get(ENV_CACHE_DIR, "")
    if env_value:
        return Path(env_value).expanduser()
    if _is_xdg_platform():
        xdg = os.environ.get("XDG_CACHE_HOME", "")
        # Relative values are invalid per the XDG spec and are ignored.
        if xdg and Path(xdg).is_absolute():
            return Path(xdg)
        return Path.home() / ".cache"
    return Path.home() / f".{_APP_NAME}" / "cache"


# --- Cookie sources ---


def resolve_cookie(source: str) -> str:
    """Resolve a session cookie from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - anything else is returned as the literal cookie

    Raises:
        ConfigError: If the variable is unset or the file can't be read.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(f"Environment variable '{var_name}' is not set (source: {source})")
        return value.strip()

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Cookie file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Cannot read cookie file {path}: {exc}") from exc

    return source
