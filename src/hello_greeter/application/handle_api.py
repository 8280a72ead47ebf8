"""C-style handle API over the greeter domain.

Every fallible operation reports failure through the calling thread's error
channel and a sentinel return value (``None``, ``False`` or ``-1``) instead
of raising. Successful calls leave the channel untouched, so read it right
after the call that failed and before the next call on the same thread.

Contents:
    * :func:`create` / :func:`destroy` - greeter lifecycle.
    * :func:`greet` - bounded rendering into a caller buffer.
    * :func:`get_name` / :func:`set_name` - name accessors.
    * :func:`get_version` - library version string.
    * Error channel re-exports: :func:`get_last_error`, :func:`has_error`,
      :func:`clear_error`, :func:`set_error`.
"""

from __future__ import annotations

import logging

from hello_greeter import __init__conf__

from ..domain.error_channel import clear_error, get_last_error, has_error, set_error
from ..domain.errors import GreeterError, NullHandleError
from ..domain.greeter import Greeter, GreeterConfig

logger = logging.getLogger(__name__)


def _report(exc: GreeterError) -> None:
    """Publish *exc* on the error channel."""
    logger.debug("Greeter operation failed: %s", exc, extra={"error_type": type(exc).__name__})
    set_error("%s", str(exc))


def _require_handle(greeter: Greeter | None) -> Greeter:
    if greeter is None:
        raise NullHandleError("greeter is NULL")
    return greeter


def create(config: GreeterConfig | None = None) -> Greeter | None:
    """Create a greeter from *config*, or from the defaults when ``None``.

    Returns:
        A fully constructed greeter, or ``None`` with the error channel set.

    Examples:
        >>> greeter = create()
        >>> get_name(greeter)
        'World'
        >>> create(GreeterConfig(name="")) is None
        True
        >>> get_last_error()
        'Name cannot be empty'
        >>> clear_error()
    """
    try:
        greeter = Greeter.from_config(config)
    except GreeterError as exc:
        _report(exc)
        return None
    logger.debug("Created greeter", extra={"greeter_name": greeter.name, "uppercase": greeter.uppercase})
    return greeter


def destroy(greeter: Greeter | None) -> None:
    """Release *greeter*; ``None`` is accepted and ignored."""
    if greeter is None:
        return
    greeter.destroy()
    logger.debug("Destroyed greeter")


def greet(greeter: Greeter | None, buffer: bytearray | None, capacity: int) -> int:
    """Render ``"{greeting}, {name}!"`` into *buffer*.

    Writes at most *capacity* bytes including the NUL terminator. The return
    value is the byte length the full greeting needs, terminator excluded.
    When that length does not fit, the buffer holds a truncated, terminated
    prefix, the error channel describes the shortfall, and the full length is
    still returned so the caller can retry with a larger buffer.

    Args:
        greeter: Live greeter handle.
        buffer: Writable output buffer.
        capacity: Usable bytes of *buffer*, terminator included.

    Returns:
        Required length, or ``-1`` for an invalid handle or buffer or an
        encoding failure.

    Examples:
        >>> buf = bytearray(128)
        >>> greet(create(), buf, len(buf))
        13
        >>> small = bytearray(6)
        >>> greet(create(), small, len(small))
        13
        >>> get_last_error()
        'Buffer too small (need 14, have 6)'
        >>> clear_error()
    """
    try:
        result = _require_handle(greeter).render_into(buffer, capacity)  # type: ignore[arg-type]
    except GreeterError as exc:
        _report(exc)
        return -1

    if result.truncated:
        logger.debug(
            "Greeting truncated",
            extra={"required": result.required, "capacity": result.capacity},
        )
        set_error("Buffer too small (need %d, have %d)", result.required + 1, result.capacity)
    return result.required


def get_name(greeter: Greeter | None) -> str | None:
    """Return the greeter's current name, or ``None`` with the channel set."""
    try:
        return _require_handle(greeter).name
    except GreeterError as exc:
        _report(exc)
        return None


def set_name(greeter: Greeter | None, name: str | None) -> bool:
    """Replace the greeter's name after validating it.

    On failure the greeter keeps its previous name.

    Example:
        >>> greeter = create()
        >>> set_name(greeter, "x" * 300)
        False
        >>> get_name(greeter)
        'World'
        >>> clear_error()
    """
    try:
        _require_handle(greeter).rename(name)  # type: ignore[arg-type]
    except GreeterError as exc:
        _report(exc)
        return False
    return True


def get_version() -> str:
    """Return the library version.

    Example:
        >>> get_version()
        '1.0.0'
    """
    return __init__conf__.version


__all__ = [
    "clear_error",
    "create",
    "destroy",
    "get_last_error",
    "get_name",
    "get_version",
    "greet",
    "has_error",
    "set_error",
    "set_name",
]
