"""In-memory stand-ins for the application ports.

No filesystem access and a logging runtime that prints nothing, for tests
and doctests that drive the CLI through ``composition.build_testing``.

Contents:
    * :mod:`.config` - empty configuration, default settings, silent display
    * :mod:`.logging` - quiet lib_log_rich runtime
"""

from __future__ import annotations

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_greeter_settings_in_memory,
)
from .logging import init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_greeter_settings_in_memory",
]
