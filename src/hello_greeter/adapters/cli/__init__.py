"""Command-line interface for the greeter.

Contents:
    * :data:`cli` - the root command group from :mod:`.root`
    * :func:`main` - run the group and return an exit code, from :mod:`.main`
    * :class:`CLIContext` - per-run state handed to commands, from :mod:`.context`
    * :class:`TracebackFlags` - ``lib_cli_exit_tools`` traceback flags, from :mod:`.tracebacks`
"""

from __future__ import annotations

from .commands import cli_config, cli_examples, cli_greet, cli_info
from .context import CLIContext, pass_cli_context
from .exit_codes import ExitCode
from .main import main
from .root import cli
from .tracebacks import TracebackFlags, preserved_traceback_flags

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackFlags",
    "cli",
    "cli_config",
    "cli_examples",
    "cli_greet",
    "cli_info",
    "main",
    "pass_cli_context",
    "preserved_traceback_flags",
]
