"""Domain layer - pure greeter logic with no I/O or framework dependencies.

Contents:
    * :mod:`.greeter` - The greeter value, its configuration, and name validation
    * :mod:`.formatting` - Bounded rendering into byte buffers
    * :mod:`.error_channel` - Per-thread last-error state
    * :mod:`.enums` - Domain enumerations (OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OutputFormat
from .error_channel import ERROR_BUFFER_SIZE, clear_error, get_last_error, has_error, set_error
from .errors import (
    AllocationError,
    DestroyedGreeterError,
    FormattingError,
    GreeterError,
    InvalidBufferError,
    InvalidGreetingError,
    InvalidNameError,
    NullHandleError,
)
from .formatting import RenderResult, buffer_text, render_into
from .greeter import DEFAULT_GREETING, DEFAULT_NAME, MAX_NAME_LENGTH, Greeter, GreeterConfig, validate_name

__all__ = [
    # Greeter
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "MAX_NAME_LENGTH",
    "Greeter",
    "GreeterConfig",
    "validate_name",
    # Formatting
    "RenderResult",
    "buffer_text",
    "render_into",
    # Error channel
    "ERROR_BUFFER_SIZE",
    "clear_error",
    "get_last_error",
    "has_error",
    "set_error",
    # Enums
    "OutputFormat",
    # Errors
    "AllocationError",
    "DestroyedGreeterError",
    "FormattingError",
    "GreeterError",
    "InvalidBufferError",
    "InvalidGreetingError",
    "InvalidNameError",
    "NullHandleError",
]
