"""Per-run CLI state: opening a CLIContext and handing it to commands."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
import rich_click as click
from click.testing import CliRunner, Result
from lib_layered_config import Config

from hello_greeter.adapters import cli as cli_mod
from hello_greeter.adapters.cli.context import CLIContext, pass_cli_context
from hello_greeter.adapters.cli.tracebacks import TracebackFlags
from hello_greeter.composition import AppServices, build_testing


def _services_with(config: Config, started: list[Config]) -> Callable[[], AppServices]:
    base = build_testing()

    def _init_logging(loaded: Config) -> None:
        started.append(loaded)

    services = AppServices(
        get_config=lambda **_kwargs: config,
        display_config=base.display_config,
        load_greeter_settings=base.load_greeter_settings,
        init_logging=_init_logging,
    )
    return lambda: services


@pytest.mark.os_agnostic
def test_open_loads_configuration_and_starts_logging_with_it(managed_traceback_state: None) -> None:
    """Logging is configured from the same Config the commands see."""
    config = Config({"greeter": {"name": "Ada"}}, {})
    started: list[Config] = []

    cli_ctx = CLIContext.open(_services_with(config, started), profile="staging", traceback=True)

    assert cli_ctx.config is config
    assert started == [config]
    assert cli_ctx.profile == "staging"
    assert cli_ctx.traceback is True
    assert TracebackFlags.current() == TracebackFlags(enabled=True, force_color=True)


@pytest.mark.os_agnostic
def test_open_rejects_a_ready_object_instead_of_a_factory() -> None:
    """The services must arrive uncalled so each run builds its own."""
    with pytest.raises(RuntimeError, match="needs a services factory"):
        CLIContext.open(build_testing())


@pytest.mark.os_agnostic
def test_greeter_settings_come_from_the_loaded_configuration(config_cli_context: Any) -> None:
    """The greeter table is parsed by the wired settings loader."""
    cli_ctx = CLIContext.open(config_cli_context({"greeter": {"name": "Ada", "buffer_size": 16}}))

    settings = cli_ctx.greeter_settings()

    assert settings.name == "Ada"
    assert settings.buffer_size == 16


@pytest.mark.os_agnostic
def test_cli_context_is_frozen() -> None:
    """Commands read the run state; they never replace parts of it."""
    cli_ctx = CLIContext.open(build_testing)

    with pytest.raises(AttributeError):
        cli_ctx.profile = "other"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_pass_cli_context_needs_the_root_group_to_have_run() -> None:
    """A command invoked on its own finds no CLIContext."""

    @click.command()
    @pass_cli_context
    def lonely(cli_ctx: CLIContext) -> None:
        click.echo(cli_ctx.profile)

    result = CliRunner().invoke(lonely, [])

    assert isinstance(result.exception, RuntimeError)


@pytest.mark.os_agnostic
def test_cli_root_rejects_non_callable_obj(cli_runner: CliRunner) -> None:
    """The root group needs a services factory, not a ready object."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["info"], obj="not_callable")

    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeError)
    assert "got str" in str(result.exception)
