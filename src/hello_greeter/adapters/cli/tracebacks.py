"""Traceback flags of ``lib_cli_exit_tools`` as a value.

``lib_cli_exit_tools.config`` is process-global; :class:`TracebackFlags`
reads it, writes it and remembers it so one CLI run cannot leak its
``--traceback`` choice into the next.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import lib_cli_exit_tools

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT


@dataclass(frozen=True, slots=True)
class TracebackFlags:
    """Whether failures print a full traceback, and whether it is coloured.

    Example:
        >>> TracebackFlags.requested(True)
        TracebackFlags(enabled=True, force_color=True)
        >>> TracebackFlags().length_limit
        500
    """

    enabled: bool = False
    force_color: bool = False

    @classmethod
    def current(cls) -> TracebackFlags:
        """Read the flags ``lib_cli_exit_tools`` is using right now."""
        settings = lib_cli_exit_tools.config
        return cls(
            enabled=bool(getattr(settings, "traceback", False)),
            force_color=bool(getattr(settings, "traceback_force_color", False)),
        )

    @classmethod
    def requested(cls, enabled: bool) -> TracebackFlags:
        """Flags for a run that passed ``--traceback`` (or did not); colour follows."""
        return cls(enabled=bool(enabled), force_color=bool(enabled))

    @property
    def length_limit(self) -> int:
        """Character budget for the printed exception."""
        return TRACEBACK_VERBOSE_LIMIT if self.enabled else TRACEBACK_SUMMARY_LIMIT

    def install(self) -> None:
        """Make these the flags ``lib_cli_exit_tools`` prints with."""
        lib_cli_exit_tools.config.traceback = self.enabled
        lib_cli_exit_tools.config.traceback_force_color = self.force_color


@contextmanager
def preserved_traceback_flags(restore: bool = True) -> Iterator[TracebackFlags]:
    """Yield the flags in force on entry and reinstall them on exit.

    With ``restore=False`` whatever the block installed stays in place.

    Example:
        >>> with preserved_traceback_flags() as saved:
        ...     TracebackFlags.requested(not saved.enabled).install()
        >>> TracebackFlags.current() == saved
        True
    """
    saved = TracebackFlags.current()
    try:
        yield saved
    finally:
        if restore:
            saved.install()


__all__ = ["TracebackFlags", "preserved_traceback_flags"]
