"""The ``hello-greeter`` command group.

Greeter options belong to ``greet``; the group only decides which
configuration profile is read and how failures are printed.
"""

from __future__ import annotations

import rich_click as click

from hello_greeter import __init__conf__

from .commands import cli_config, cli_examples, cli_greet, cli_info
from .constants import CLICK_CONTEXT_SETTINGS
from .context import CLIContext


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    __init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message="%(prog)s version %(version)s",
)
@click.option("--traceback/--no-traceback", default=False, help="Print the full Python traceback when a command fails")
@click.option(
    "--profile",
    metavar="NAME",
    default=None,
    help="Read configuration from the profile/NAME/ directory of every layer",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Swap the services factory in ``ctx.obj`` for a ready :class:`CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from hello_greeter.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["greet", "--name", "Ada"], obj=build_testing)
        >>> "Hello, Ada!" in result.output
        True
    """
    ctx.obj = CLIContext.open(ctx.obj, profile=profile, traceback=traceback)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


for _command in (cli_info, cli_greet, cli_examples, cli_config):
    cli.add_command(_command)


__all__ = ["cli"]
