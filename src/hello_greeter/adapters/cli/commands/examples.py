"""Scripted usage walkthrough of the handle API.

Contents:
    * :func:`cli_examples` - Run five scenarios and print their results.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_greeter.application import handle_api
from hello_greeter.domain.formatting import buffer_text
from hello_greeter.domain.greeter import Greeter, GreeterConfig

from ..constants import CLICK_CONTEXT_SETTINGS
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_BUFFER_SIZE = 128


def _create_or_exit(config: GreeterConfig | None = None) -> Greeter:
    greeter = handle_api.create(config)
    if greeter is None:
        message = handle_api.get_last_error()
        logger.error("Example greeter could not be created", extra={"error": message})
        click.echo(f"Error: {message}", err=True)
        raise SystemExit(ExitCode.GENERAL_ERROR)
    return greeter


def _greeting_of(greeter: Greeter) -> str:
    buffer = bytearray(_BUFFER_SIZE)
    handle_api.greet(greeter, buffer, len(buffer))
    return buffer_text(buffer)


def _default_greeter() -> None:
    click.echo("Example 1: Default greeter")
    greeter = _create_or_exit()
    try:
        click.echo(f"  {_greeting_of(greeter)}")
    finally:
        handle_api.destroy(greeter)


def _custom_greeter() -> None:
    click.echo("\nExample 2: Custom greeter")
    greeter = _create_or_exit(GreeterConfig(name="Carbide User", greeting="Welcome"))
    try:
        click.echo(f"  {_greeting_of(greeter)}")
    finally:
        handle_api.destroy(greeter)


def _uppercase_greeter() -> None:
    click.echo("\nExample 3: Uppercase greeter")
    greeter = _create_or_exit(GreeterConfig(uppercase=True))
    try:
        click.echo(f"  {_greeting_of(greeter)}")
    finally:
        handle_api.destroy(greeter)


def _changing_name() -> None:
    click.echo("\nExample 4: Changing name")
    greeter = _create_or_exit()
    try:
        click.echo(f'  Before: name = "{handle_api.get_name(greeter)}"')
        click.echo(f"  Greeting: {_greeting_of(greeter)}")
        if handle_api.set_name(greeter, "New Name"):
            click.echo(f'  After: name = "{handle_api.get_name(greeter)}"')
            click.echo(f"  Greeting: {_greeting_of(greeter)}")
    finally:
        handle_api.destroy(greeter)


def _error_handling() -> None:
    click.echo("\nExample 5: Error handling")
    greeter = handle_api.create(GreeterConfig(name=""))
    if greeter is None:
        click.echo(f"  Expected error: {handle_api.get_last_error()}")
        handle_api.clear_error()
    else:
        handle_api.destroy(greeter)


@click.command("examples", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_examples() -> None:
    """Walk through the handle API: defaults, custom config, uppercase, rename, errors.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_greeter.adapters.cli.root import cli
        >>> from hello_greeter.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["examples"], obj=build_testing)
        >>> "Welcome, Carbide User!" in result.output
        True
    """
    with lib_log_rich.runtime.bind(job_id="cli-examples", extra={"command": "examples"}):
        logger.info("Running handle API examples")
        banner = f"Hello Greeter Library v{handle_api.get_version()}"
        click.echo(banner)
        click.echo("=" * len(banner))
        click.echo()

        _default_greeter()
        _custom_greeter()
        _uppercase_greeter()
        _changing_name()
        _error_handling()

        click.echo("\nAll examples completed successfully!")


__all__ = ["cli_examples"]
