"""Greeter library with a C-style handle API and thread-local error reporting.

Routes the public surface through the architectural layers:
- Handle API: sentinel-returning operations plus the per-thread error channel
- Domain exports: the greeter value, its configuration and bounded rendering
- Configuration: the layered configuration loader
- Metadata: package information

Example:
    >>> greeter = create(GreeterConfig(name="Test", greeting="Hi"))
    >>> buffer = bytearray(64)
    >>> greet(greeter, buffer, len(buffer))
    9
    >>> buffer_text(buffer)
    'Hi, Test!'
    >>> destroy(greeter)
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Handle API
from .application.handle_api import (
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

# Configuration
from .adapters.config.loader import get_config

# Domain exports
from .domain.errors import GreeterError
from .domain.formatting import RenderResult, buffer_text
from .domain.greeter import MAX_NAME_LENGTH, Greeter, GreeterConfig

__all__ = [
    "MAX_NAME_LENGTH",
    "Greeter",
    "GreeterConfig",
    "GreeterError",
    "RenderResult",
    "buffer_text",
    "clear_error",
    "create",
    "destroy",
    "get_config",
    "get_last_error",
    "get_name",
    "get_version",
    "greet",
    "has_error",
    "print_info",
    "set_error",
    "set_name",
]
