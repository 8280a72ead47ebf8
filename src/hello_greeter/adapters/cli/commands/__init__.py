"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Greet command from :mod:`.greet`
    * Examples command from :mod:`.examples`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .examples import cli_examples
from .greet import cli_greet
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_examples",
    "cli_greet",
    "cli_info",
]
