"""Per-thread last-error state shared by all handle API operations.

Each thread owns an independent channel, so concurrent callers never see
each other's errors. Two failing calls on the same thread share the channel
and the later message replaces the earlier one; read it right after the call
that failed.

Contents:
    * :data:`ERROR_BUFFER_SIZE` - channel capacity in bytes, terminator included.
    * :func:`set_error` / :func:`clear_error` - mutate the calling thread's channel.
    * :func:`get_last_error` / :func:`has_error` - inspect it.
"""

from __future__ import annotations

import threading
from typing import Final

#: Capacity of the channel in UTF-8 bytes, including the C terminator.
ERROR_BUFFER_SIZE: Final[int] = 1024


class _ChannelState(threading.local):
    """Thread-local storage; ``__init__`` runs once per thread on first access."""

    def __init__(self) -> None:
        self.message = ""
        self.has_error = False


_state = _ChannelState()


def _truncate(message: str, limit: int) -> str:
    """Cut *message* to at most *limit* UTF-8 bytes without splitting a character.

    Examples:
        >>> _truncate("abcdef", 3)
        'abc'
        >>> _truncate("h\\u00e9llo", 2)
        'h'
        >>> _truncate("short", 100)
        'short'
    """
    encoded = message.encode("utf-8", errors="replace")
    if len(encoded) <= limit:
        return message
    return encoded[:limit].decode("utf-8", errors="ignore")


def set_error(fmt: str, *args: object) -> None:
    """Record a printf-style message in the calling thread's channel.

    The message is rendered as ``fmt % args`` when arguments are given and
    taken verbatim otherwise. Messages longer than the channel capacity are
    truncated silently. A template that does not match its arguments is
    stored unformatted; this function never raises.

    Args:
        fmt: ``%``-style template.
        *args: Values substituted into the template.

    Example:
        >>> set_error("Name too long (%d chars, max %d)", 300, 255)
        >>> get_last_error()
        'Name too long (300 chars, max 255)'
        >>> clear_error()
    """
    try:
        message = fmt % args if args else fmt
    except (TypeError, ValueError):
        message = fmt
    _state.message = _truncate(str(message), ERROR_BUFFER_SIZE - 1)
    _state.has_error = True


def get_last_error() -> str:
    """Return the current message, or ``""`` when no error is flagged.

    Example:
        >>> clear_error()
        >>> get_last_error()
        ''
    """
    return _state.message if _state.has_error else ""


def has_error() -> bool:
    """Return whether the calling thread's channel holds an error."""
    return _state.has_error


def clear_error() -> None:
    """Reset the calling thread's channel to the no-error state.

    Example:
        >>> set_error("boom")
        >>> clear_error()
        >>> has_error(), get_last_error()
        (False, '')
    """
    _state.has_error = False
    _state.message = ""


__all__ = [
    "ERROR_BUFFER_SIZE",
    "clear_error",
    "get_last_error",
    "has_error",
    "set_error",
]
