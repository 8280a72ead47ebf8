"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` so that the CLI banner,
``--version`` output, and configuration discovery all agree on the project
identity.

Contents:
    * Project identity constants (:data:`name`, :data:`version`, ...).
    * ``LAYEREDCONF_*`` identifiers consumed by ``lib_layered_config``.
    * :func:`print_info` - render the metadata block for ``info``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "hello_greeter"
title: Final[str] = "Greeter library with a C-style handle API and thread-local error reporting"
version: Final[str] = "1.0.0"
homepage: Final[str] = "https://github.com/hello-greeter/hello_greeter"
author: Final[str] = "hello-greeter contributors"
author_email: Final[str] = "maintainers@hello-greeter.invalid"
shell_command: Final[str] = "hello-greeter"

#: Vendor segment of the macOS/Windows configuration paths.
LAYEREDCONF_VENDOR: Final[str] = "hello-greeter"
#: Application segment of the macOS/Windows configuration paths.
LAYEREDCONF_APP: Final[str] = "Hello Greeter"
#: Linux configuration slug (``~/.config/<slug>/``).
LAYEREDCONF_SLUG: Final[str] = "hello-greeter"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello_greeter:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
