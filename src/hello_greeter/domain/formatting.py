"""Bounded rendering of text into caller-supplied byte buffers.

Follows the ``snprintf`` contract: at most ``capacity`` bytes are written,
the output is always NUL-terminated, and the caller learns how many bytes the
unrestricted rendering needs so it can retry with a larger buffer.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import FormattingError, InvalidBufferError


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Outcome of a bounded render.

    Attributes:
        required: Bytes the full rendering needs, terminator excluded.
        written: Bytes actually written before the terminator.
        capacity: Capacity the caller granted, terminator included.

    Example:
        >>> result = RenderResult(required=13, written=4, capacity=5)
        >>> result.truncated
        True
    """

    required: int
    written: int
    capacity: int

    @property
    def truncated(self) -> bool:
        """True when the buffer could not hold the full rendering."""
        return self.required >= self.capacity


def render_into(text: str, buffer: bytearray, capacity: int, *, uppercase: bool = False) -> RenderResult:
    """Write *text* as UTF-8 into *buffer*, truncating to *capacity*.

    Truncation happens on byte boundaries, as with ``snprintf``; a
    multi-byte character may be cut. With ``uppercase`` the written bytes are
    uppercased in place afterwards (ASCII letters only), including when the
    output was truncated.

    Args:
        text: Fully rendered text.
        buffer: Writable output buffer.
        capacity: Usable bytes in *buffer*, terminator included.
        uppercase: Uppercase the written bytes.

    Returns:
        Sizes of the rendering and of what was written.

    Raises:
        InvalidBufferError: *buffer* is not a bytearray or *capacity* is not
            within ``1..len(buffer)``.
        FormattingError: *text* cannot be encoded.

    Examples:
        >>> buf = bytearray(32)
        >>> render_into("Hello, World!", buf, len(buf))
        RenderResult(required=13, written=13, capacity=32)
        >>> bytes(buf[:14])
        b'Hello, World!\\x00'

        >>> small = bytearray(6)
        >>> render_into("Hello, World!", small, len(small), uppercase=True).truncated
        True
        >>> bytes(small)
        b'HELLO\\x00'
    """
    if not isinstance(buffer, bytearray):
        raise InvalidBufferError("Invalid output buffer")
    if isinstance(capacity, bool) or not isinstance(capacity, int) or not 0 < capacity <= len(buffer):
        raise InvalidBufferError("Invalid output buffer")

    try:
        encoded = text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise FormattingError("Formatting failed") from exc

    required = len(encoded)
    written = min(required, capacity - 1)
    buffer[:written] = encoded[:written]
    buffer[written] = 0

    if uppercase:
        buffer[:written] = buffer[:written].upper()

    return RenderResult(required=required, written=written, capacity=capacity)


def buffer_text(buffer: bytes | bytearray) -> str:
    """Decode the NUL-terminated text held in *buffer*.

    Bytes of a character cut by truncation decode to U+FFFD.

    Examples:
        >>> buffer_text(bytearray(b"Hi, Test!\\x00garbage"))
        'Hi, Test!'
        >>> buffer_text(b"no terminator")
        'no terminator'
    """
    end = buffer.find(0)
    if end < 0:
        end = len(buffer)
    return bytes(buffer[:end]).decode("utf-8", errors="replace")


__all__ = [
    "RenderResult",
    "buffer_text",
    "render_into",
]
