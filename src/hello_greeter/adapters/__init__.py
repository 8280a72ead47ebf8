"""Adapters layer - infrastructure and framework integrations.

Connects the greeter library to configuration files, logging and the
command line.

Contents:
    * :mod:`.config` - Configuration loading, display, and greeter settings
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
