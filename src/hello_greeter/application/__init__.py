"""Application layer - the handle API and port definitions.

Contents:
    * :mod:`.handle_api` - sentinel-returning greeter operations
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .handle_api import (
    clear_error,
    create,
    destroy,
    get_last_error,
    get_name,
    get_version,
    greet,
    has_error,
    set_error,
    set_name,
)
from .ports import DisplayConfig, GetConfig, InitLogging, LoadGreeterSettings

__all__ = [
    # Handle API
    "clear_error",
    "create",
    "destroy",
    "get_last_error",
    "get_name",
    "get_version",
    "greet",
    "has_error",
    "set_error",
    "set_name",
    # Ports
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadGreeterSettings",
]
