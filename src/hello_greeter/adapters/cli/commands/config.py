"""``config`` command: print the configuration the greeter would use.

Contents:
    * :func:`cli_config` - Show the merged layers, optionally one table only.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from hello_greeter.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, pass_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([fmt.value for fmt in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Print a readable listing or a JSON document",
)
@click.option("--section", metavar="TABLE", default=None, help="Print only this table, e.g. 'greeter'")
@pass_cli_context
def cli_config(cli_ctx: CLIContext, output_format: str, section: str | None) -> None:
    """Show the configuration after merging every layer.

    Later layers win: defaults, app, host, user, .env, environment. Pick a
    profile with the group's ``--profile`` option.
    """
    fmt = OutputFormat(output_format.lower())
    context = {"command": "config", "format": fmt.value, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=context):
        logger.info("Displaying configuration", extra={"section": section})
        try:
            cli_ctx.services.display_config(cli_ctx.config, output_format=fmt, section=section, profile=cli_ctx.profile)
        except ValueError as exc:
            logger.error("Configuration section unavailable", extra={"section": section})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
