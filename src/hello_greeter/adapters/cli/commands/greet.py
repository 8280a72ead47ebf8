"""Greeting CLI command.

Builds a greeter from the ``[greeter]`` configuration section plus command
line options and prints its greeting, going exclusively through the handle
API so the CLI exercises the same contract library callers do.

Contents:
    * :func:`cli_greet` - Print a greeting.
"""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from hello_greeter.adapters.config.greeter_settings import GreeterSettings
from hello_greeter.application import handle_api
from hello_greeter.domain.formatting import buffer_text

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, pass_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _resolve_settings(cli_ctx: CLIContext, **overrides: Any) -> GreeterSettings:
    """Merge command line options over the configured greeter settings.

    Options left unset (``None``) keep the configured value. The merged dict
    is re-validated so option values pass the same checks as file values.

    Raises:
        SystemExit: The configuration holds invalid greeter settings
            (``CONFIG_ERROR``).
    """
    try:
        base = cli_ctx.greeter_settings()
        given = {key: value for key, value in overrides.items() if value is not None}
        if not given:
            return base
        return GreeterSettings.model_validate({**base.model_dump(), **given})
    except ValidationError as exc:
        logger.error("Invalid greeter configuration", extra={"error": str(exc)})
        click.echo(f"\nError: Invalid greeter configuration:\n{exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _fail_with_last_error(summary: str, exit_code: ExitCode) -> NoReturn:
    """Report the calling thread's last error and exit."""
    message = handle_api.get_last_error()
    handle_api.clear_error()
    logger.error(summary, extra={"error": message})
    click.echo(f"Error: {message}", err=True)
    raise SystemExit(exit_code)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", type=str, default=None, help="Name to greet (at most 255 bytes of UTF-8)")
@click.option("--greeting", type=str, default=None, help="Greeting placed before the name")
@click.option("--uppercase/--no-uppercase", default=None, help="Uppercase the rendered greeting")
@click.option(
    "--buffer-size",
    type=click.IntRange(min=1),
    default=None,
    help="Output buffer capacity in bytes, terminator included",
)
@pass_cli_context
def cli_greet(
    cli_ctx: CLIContext,
    name: str | None,
    greeting: str | None,
    uppercase: bool | None,
    buffer_size: int | None,
) -> None:
    """Print a greeting built from configuration and options.

    A buffer too small for the greeting prints the truncated text and a
    warning naming the size that would fit.
    """
    settings = _resolve_settings(
        cli_ctx,
        name=name,
        greeting=greeting,
        uppercase=uppercase,
        buffer_size=buffer_size,
    )

    extra = {"command": "greet", "uppercase": settings.uppercase, "buffer_size": settings.buffer_size}
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra=extra):
        logger.info("Executing greet command")
        greeter = handle_api.create(settings.to_greeter_config())
        if greeter is None:
            _fail_with_last_error("Greeter creation failed", ExitCode.INVALID_ARGUMENT)

        try:
            buffer = bytearray(settings.buffer_size)
            required = handle_api.greet(greeter, buffer, len(buffer))
            if required < 0:
                _fail_with_last_error("Greeting failed", ExitCode.GENERAL_ERROR)
            click.echo(buffer_text(buffer))
            if required >= len(buffer):
                message = handle_api.get_last_error()
                handle_api.clear_error()
                logger.warning("Greeting truncated", extra={"required": required})
                click.echo(f"Warning: {message}; use --buffer-size {required + 1}", err=True)
        finally:
            handle_api.destroy(greeter)


__all__ = ["cli_greet"]
