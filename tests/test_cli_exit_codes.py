"""Exit code integration tests: each failure class maps to its documented code."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from hello_greeter.adapters import cli as cli_mod
from hello_greeter.adapters.cli.exit_codes import ExitCode
from hello_greeter.application import handle_api
from hello_greeter.composition import AppServices


@pytest.mark.os_agnostic
def test_exit_code_values_follow_posix_conventions() -> None:
    """The numeric values are part of the CLI contract."""
    assert {code.name: int(code) for code in ExitCode} == {
        "SUCCESS": 0,
        "GENERAL_ERROR": 1,
        "INVALID_ARGUMENT": 22,
        "CONFIG_ERROR": 78,
    }


@pytest.mark.os_agnostic
def test_when_config_section_is_missing_it_exits_with_code_22(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    """config --section for an unknown section is an invalid argument."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["config", "--section", "nonexistent_section_that_does_not_exist"], obj=production_factory
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.stderr


@pytest.mark.os_agnostic
def test_when_greeter_name_is_invalid_it_exits_with_code_22(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """A rejected name is an invalid argument."""
    result = cli_runner.invoke(cli_mod.cli, ["greet", "--name", ""], obj=config_cli_context({}))

    assert result.exit_code == ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_when_greeter_settings_are_invalid_it_exits_with_code_78(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """Settings of the wrong type are a configuration error."""
    factory = config_cli_context({"greeter": {"buffer_size": "plenty"}})

    result = cli_runner.invoke(cli_mod.cli, ["greet"], obj=factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "buffer_size" in result.stderr


@pytest.mark.os_agnostic
def test_when_greeting_cannot_be_rendered_it_exits_with_code_1(
    monkeypatch: pytest.MonkeyPatch,
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """Rendering failures are general errors."""

    def _failing_greet(greeter: object, buffer: object, capacity: int) -> int:
        handle_api.set_error("Formatting failed")
        return -1

    monkeypatch.setattr(handle_api, "greet", _failing_greet)

    result = cli_runner.invoke(cli_mod.cli, ["greet"], obj=config_cli_context({}))

    assert result.exit_code == ExitCode.GENERAL_ERROR
    assert "Error: Formatting failed" in result.stderr


@pytest.mark.os_agnostic
def test_truncated_greeting_still_succeeds(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """Truncation is a warning, not a failure."""
    result = cli_runner.invoke(cli_mod.cli, ["greet", "--buffer-size", "1"], obj=config_cli_context({}))

    assert result.exit_code == ExitCode.SUCCESS
    assert "use --buffer-size 14" in result.stderr
