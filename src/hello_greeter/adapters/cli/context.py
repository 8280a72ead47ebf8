"""State one CLI invocation shares between the root group and its commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import click
from lib_layered_config import Config

from .tracebacks import TracebackFlags

if TYPE_CHECKING:
    from hello_greeter.adapters.config.greeter_settings import GreeterSettings
    from hello_greeter.composition import AppServices


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Wired services plus the configuration they loaded for this run."""

    services: AppServices
    config: Config
    profile: str | None = None
    traceback: bool = False

    @classmethod
    def open(cls, factory: object, *, profile: str | None = None, traceback: bool = False) -> CLIContext:
        """Build the services, read the configuration and start logging.

        *factory* is whatever the caller handed Click as ``obj``.

        Raises:
            RuntimeError: *factory* is not callable, so nothing wired the CLI.

        Example:
            >>> from hello_greeter.composition import build_testing
            >>> CLIContext.open(build_testing, profile="staging").config.as_dict()
            {}
        """
        if not callable(factory):
            raise RuntimeError(f"hello-greeter needs a services factory as Click obj, got {type(factory).__name__}")
        services = cast("Callable[[], AppServices]", factory)()
        config = services.get_config(profile=profile)
        services.init_logging(config)
        TracebackFlags.requested(traceback).install()
        return cls(services=services, config=config, profile=profile, traceback=traceback)

    def greeter_settings(self) -> GreeterSettings:
        """Parse the ``[greeter]`` table of the loaded configuration.

        Raises:
            pydantic.ValidationError: The table holds values of the wrong type.
        """
        return self.services.load_greeter_settings(self.config.as_dict())


#: Hands the nearest :class:`CLIContext` to a command as its first argument.
pass_cli_context = click.make_pass_decorator(CLIContext)


__all__ = ["CLIContext", "pass_cli_context"]
