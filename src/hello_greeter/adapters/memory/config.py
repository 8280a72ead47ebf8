"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching the
filesystem or lib_layered_config's layer discovery.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.greeter_settings import GreeterSettings


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_greeter_settings_in_memory(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Return default greeter settings regardless of *config_dict*.

    Example:
        >>> load_greeter_settings_in_memory({"greeter": {"name": "ignored"}}).name is None
        True
    """
    return GreeterSettings()


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_greeter_settings_in_memory",
]
