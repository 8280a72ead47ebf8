"""In-memory logging adapter for testing.

Commands bind job context through ``lib_log_rich.runtime.bind``, which needs
an initialised runtime. This adapter starts one that keeps records in the
ring buffer and only prints critical events to the console.
"""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from hello_greeter import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Initialise a quiet lib_log_rich runtime unless one is already running.

    *config* is ignored; test runs never read ``[lib_log_rich]``.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
