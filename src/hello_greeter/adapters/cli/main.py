"""Run the CLI once and turn whatever happens into a process exit code.

Contents:
    * :func:`main` - shared by the console script and ``python -m hello_greeter``.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from hello_greeter import __init__conf__

from .exit_codes import ExitCode
from .tracebacks import TracebackFlags, preserved_traceback_flags

if TYPE_CHECKING:
    from hello_greeter.composition import AppServices


def _report_unhandled(exc: BaseException) -> int:
    """Print *exc* through ``lib_cli_exit_tools`` and return the code it maps to.

    ``SystemExit`` from a command keeps its own code; ``KeyboardInterrupt``
    and other signals get the conventional 128+N.
    """
    flags = TracebackFlags.requested(TracebackFlags.current().enabled)
    flags.install()
    lib_cli_exit_tools.print_exception_message(trace_back=flags.enabled, length_limit=flags.length_limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli cannot forward ``obj``, so Click runs non-standalone here.
    from .root import cli

    try:
        outcome = cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_unhandled(exc)
    # Non-standalone Click returns the code of an ``Exit`` it caught itself.
    return outcome if isinstance(outcome, int) else int(ExitCode.SUCCESS)


@contextmanager
def _logging_runtime_closed_afterwards() -> Iterator[None]:
    try:
        yield
    finally:
        # Only the main thread owns the shared lib_log_rich runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run ``hello-greeter`` with *argv* and return its exit code.

    Args:
        argv: Arguments after the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Reinstall the traceback flags that were in force
            before the run.
        services_factory: Builds the AppServices for this run, normally
            ``composition.build_production``.

    Raises:
        ValueError: No *services_factory* was given.
    """
    if services_factory is None:
        raise ValueError("services_factory is required; pass composition.build_production")

    args = list(sys.argv[1:] if argv is None else argv)
    with _logging_runtime_closed_afterwards(), preserved_traceback_flags(restore_traceback):
        return _dispatch(args, services_factory)


__all__ = ["main"]
