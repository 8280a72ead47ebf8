"""The greeter value: a validated name, a greeting template and a case flag.

Pure domain code: no I/O, no logging, no error channel. Failures raise the
exceptions from :mod:`.errors`; the handle API decides how to report them.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType
from typing import Final

from .errors import (
    AllocationError,
    DestroyedGreeterError,
    InvalidGreetingError,
    InvalidNameError,
)
from .formatting import RenderResult, render_into

DEFAULT_NAME: Final[str] = "World"
DEFAULT_GREETING: Final[str] = "Hello"

#: Names must encode to strictly fewer than this many UTF-8 bytes.
MAX_NAME_LENGTH: Final[int] = 256


@dataclass(frozen=True, slots=True)
class GreeterConfig:
    """Optional overrides for a new greeter.

    ``None`` fields fall back to :data:`DEFAULT_NAME` and
    :data:`DEFAULT_GREETING` independently of each other.

    Example:
        >>> GreeterConfig(name="Test").greeting is None
        True
    """

    name: str | None = None
    greeting: str | None = None
    uppercase: bool = False


def validate_name(name: object) -> str:
    """Return *name* if it is usable as a greeter name.

    Raises:
        InvalidNameError: *name* is ``None``, not text, empty, or has
            :data:`MAX_NAME_LENGTH` or more bytes once encoded as UTF-8.

    Examples:
        >>> validate_name("Ada")
        'Ada'
        >>> validate_name("")
        Traceback (most recent call last):
        ...
        hello_greeter.domain.errors.InvalidNameError: Name cannot be empty
        >>> validate_name("\u00e9" * 128)
        Traceback (most recent call last):
        ...
        hello_greeter.domain.errors.InvalidNameError: Name too long (256 chars, max 255)
    """
    if name is None:
        raise InvalidNameError("Name cannot be NULL")
    if not isinstance(name, str):
        raise InvalidNameError(f"Name must be text, got {type(name).__name__}")
    if not name:
        raise InvalidNameError("Name cannot be empty")
    length = len(name.encode("utf-8", "surrogatepass"))
    if length >= MAX_NAME_LENGTH:
        raise InvalidNameError(f"Name too long ({length} chars, max {MAX_NAME_LENGTH - 1})")
    return name


def _owned_copy(text: str) -> str:
    """Return a plain ``str`` copy of *text* detached from the caller's object."""
    try:
        return str(text)
    except MemoryError as exc:
        raise AllocationError(f"Failed to allocate string of length {len(text)}") from exc


class Greeter:
    """Owns a name and a greeting template and renders ``"{greeting}, {name}!"``.

    A greeter is fully valid from construction until :meth:`destroy`; any
    use afterwards raises :class:`DestroyedGreeterError`. Used as a context
    manager it is destroyed when the block exits.

    Example:
        >>> with Greeter(name="Test", greeting="Hi") as greeter:
        ...     greeter.render()
        'Hi, Test!'
        >>> greeter.destroyed
        True
    """

    __slots__ = ("_destroyed", "_greeting", "_name", "_uppercase")

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        greeting: str = DEFAULT_GREETING,
        *,
        uppercase: bool = False,
    ) -> None:
        validate_name(name)
        if not isinstance(greeting, str):
            raise InvalidGreetingError(f"Greeting must be text, got {type(greeting).__name__}")
        owned_name = _owned_copy(name)
        owned_greeting = _owned_copy(greeting)
        self._name = owned_name
        self._greeting = owned_greeting
        self._uppercase = bool(uppercase)
        self._destroyed = False

    @classmethod
    def from_config(cls, config: GreeterConfig | None = None) -> Greeter:
        """Build a greeter, applying defaults for every field *config* leaves unset.

        Example:
            >>> greeter = Greeter.from_config(GreeterConfig(uppercase=True))
            >>> greeter.name, greeter.greeting, greeter.uppercase
            ('World', 'Hello', True)
        """
        if config is None:
            config = GreeterConfig()
        name = config.name if config.name is not None else DEFAULT_NAME
        greeting = config.greeting if config.greeting is not None else DEFAULT_GREETING
        return cls(name, greeting, uppercase=config.uppercase)

    def _ensure_live(self) -> None:
        if self._destroyed:
            raise DestroyedGreeterError("greeter has been destroyed")

    @property
    def name(self) -> str:
        self._ensure_live()
        return self._name

    @property
    def greeting(self) -> str:
        self._ensure_live()
        return self._greeting

    @property
    def uppercase(self) -> bool:
        self._ensure_live()
        return self._uppercase

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def rename(self, name: str) -> None:
        """Replace the name; on any failure the previous name stays in place."""
        self._ensure_live()
        validate_name(name)
        new_name = _owned_copy(name)
        self._name = new_name

    def render(self) -> str:
        """Return the greeting text without case conversion or size limits."""
        self._ensure_live()
        return f"{self._greeting}, {self._name}!"

    def render_into(self, buffer: bytearray, capacity: int) -> RenderResult:
        """Render into a fixed-capacity buffer, honouring the uppercase flag."""
        self._ensure_live()
        return render_into(self.render(), buffer, capacity, uppercase=self._uppercase)

    def destroy(self) -> None:
        """Release the owned strings; repeated calls are no-ops."""
        if self._destroyed:
            return
        self._name = ""
        self._greeting = ""
        self._destroyed = True

    def __enter__(self) -> Greeter:
        self._ensure_live()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.destroy()

    def __repr__(self) -> str:
        if self._destroyed:
            return "<Greeter destroyed>"
        return f"<Greeter name={self._name!r} greeting={self._greeting!r} uppercase={self._uppercase}>"


__all__ = [
    "DEFAULT_GREETING",
    "DEFAULT_NAME",
    "MAX_NAME_LENGTH",
    "Greeter",
    "GreeterConfig",
    "validate_name",
]
