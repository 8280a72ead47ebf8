"""Callable Protocols the composition root wires adapter functions into.

Adapters are plain module-level functions; each one matches the ``__call__``
signature of its Protocol structurally. ``Config`` and ``GreeterSettings``
are imported for type checking only, keeping the application layer free of
runtime imports from adapters.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.greeter_settings import GreeterSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGreeterSettings(Protocol):
    """Parse the ``[greeter]`` section of a configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreeterSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadGreeterSettings",
]
