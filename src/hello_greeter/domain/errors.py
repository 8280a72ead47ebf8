"""Domain-specific exceptions for typed error handling at boundaries.

The domain layer raises these; the handle API catches :class:`GreeterError`
and turns it into an error-channel message plus a sentinel return value.
"""

from __future__ import annotations


class GreeterError(Exception):
    """Base class for every failure a greeter operation can report.

    Example:
        >>> err = GreeterError("greeter is NULL")
        >>> str(err)
        'greeter is NULL'
    """


class InvalidNameError(GreeterError, ValueError):
    """Name failed validation (missing, empty, not text, or too long).

    Inherits from ValueError so generic ``except ValueError`` handlers at the
    CLI boundary map it to an invalid-argument exit code.

    Example:
        >>> err = InvalidNameError("Name cannot be empty")
        >>> isinstance(err, ValueError)
        True
    """


class InvalidGreetingError(GreeterError, ValueError):
    """Greeting template is not text.

    Example:
        >>> str(InvalidGreetingError("Greeting must be text, got int"))
        'Greeting must be text, got int'
    """


class NullHandleError(GreeterError):
    """Operation received ``None`` where a greeter handle was required."""


class DestroyedGreeterError(GreeterError):
    """Operation received a handle whose greeter was already destroyed."""


class InvalidBufferError(GreeterError, ValueError):
    """Output buffer is missing, not writable, or has an unusable capacity.

    Example:
        >>> str(InvalidBufferError("Invalid output buffer"))
        'Invalid output buffer'
    """


class FormattingError(GreeterError):
    """Rendering failed for a reason unrelated to buffer size (e.g. encoding)."""


class AllocationError(GreeterError, MemoryError):
    """Copying an owned string failed because memory ran out.

    Example:
        >>> isinstance(AllocationError("Failed to allocate string of length 3"), MemoryError)
        True
    """


__all__ = [
    "AllocationError",
    "DestroyedGreeterError",
    "FormattingError",
    "GreeterError",
    "InvalidBufferError",
    "InvalidGreetingError",
    "InvalidNameError",
    "NullHandleError",
]
