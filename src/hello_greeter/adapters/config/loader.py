"""Layered configuration loading for the greeter CLI.

Reads the bundled ``defaultconfig.toml`` and every layer above it through
lib_layered_config, caching one Config per ``(profile, start_dir)`` pair.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from hello_greeter import __init__conf__

_DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


def validate_profile(profile: str) -> None:
    """Reject profile names that are unsafe as path segments.

    Raises whatever ``lib_layered_config`` raises for an empty, overlong,
    reserved or path-traversing name; the exception type is its own.

    Example:
        >>> validate_profile("staging-v2")
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH)


def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped inside the package.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_FILE


def _read_layers(profile: str | None, start_dir: str | None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=_DEFAULT_CONFIG_FILE,
        start_dir=start_dir,
    )


class _CachedLoader:
    """Merged configuration: defaults, app, host, user, ``.env``, environment.

    ``profile`` inserts ``profile/<name>/`` into every configuration path;
    ``start_dir`` seeds ``.env`` discovery and defaults to the working
    directory. Each pair is read once until :meth:`cache_clear`.

    Example:
        >>> get_config().get("greeter.greeting", default="Hello")
        'Hello'
    """

    def __init__(self) -> None:
        self._read = lru_cache(maxsize=4)(_read_layers)

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        if profile is not None:
            validate_profile(profile)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget every cached read so the next call sees fresh layers."""
        self._read.cache_clear()


get_config = _CachedLoader()


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
