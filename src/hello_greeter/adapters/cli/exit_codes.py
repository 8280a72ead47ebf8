"""POSIX-conventional exit codes for CLI error paths.

Signals are translated by ``lib_cli_exit_tools`` and never appear here.

Contents:
    * :class:`ExitCode`: IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """POSIX-conventional exit codes for CLI error paths.

    * 0, 1: generic success and failure
    * 22: EINVAL, rejected greeter input
    * 78: EX_CONFIG (sysexits.h), invalid configuration

    Example:
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
        >>> int(ExitCode.INVALID_ARGUMENT)
        22
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
