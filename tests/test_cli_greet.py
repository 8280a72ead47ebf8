"""Greet command stories: configuration, options, truncation, failures."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner

from hello_greeter.adapters.cli.root import cli
from hello_greeter.application import handle_api
from hello_greeter.composition import AppServices

ConfigCliContext = Callable[[dict[str, Any]], Callable[[], AppServices]]


@pytest.mark.os_agnostic
def test_greet_with_empty_configuration_uses_defaults(
    cli_runner: CliRunner,
    config_cli_context: ConfigCliContext,
) -> None:
    """No ``[greeter]`` section means Hello, World!."""
    result = cli_runner.invoke(cli, ["greet"], obj=config_cli_context({}))

    assert result.exit_code == 0
    assert "Hello, World!" in result.stdout.splitlines()


@pytest.mark.os_agnostic
def test_greet_reads_the_greeter_section(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """Configured name and greeting are rendered."""
    factory = config_cli_context({"greeter": {"name": "Test", "greeting": "Hi"}})

    result = cli_runner.invoke(cli, ["greet"], obj=factory)

    assert "Hi, Test!" in result.stdout.splitlines()


@pytest.mark.os_agnostic
def test_options_override_configuration(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """Command line options win over file values."""
    factory = config_cli_context({"greeter": {"name": "Config", "greeting": "Hi"}})

    result = cli_runner.invoke(cli, ["greet", "--name", "Option", "--uppercase"], obj=factory)

    assert "HI, OPTION!" in result.stdout.splitlines()


@pytest.mark.os_agnostic
def test_no_uppercase_option_overrides_configured_uppercase(
    cli_runner: CliRunner,
    config_cli_context: ConfigCliContext,
) -> None:
    """--no-uppercase switches a configured flag off."""
    factory = config_cli_context({"greeter": {"uppercase": True}})

    result = cli_runner.invoke(cli, ["greet", "--no-uppercase"], obj=factory)

    assert "Hello, World!" in result.stdout.splitlines()


@pytest.mark.os_agnostic
def test_numeric_configured_name_is_greeted(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """A TOML or environment layer that yields a number still names the greeter."""
    factory = config_cli_context({"greeter": {"name": 123}})

    result = cli_runner.invoke(cli, ["greet"], obj=factory)

    assert result.exit_code == 0
    assert "Hello, 123!" in result.stdout.splitlines()


@pytest.mark.os_agnostic
def test_empty_configured_greeting_falls_back_to_default(
    cli_runner: CliRunner,
    config_cli_context: ConfigCliContext,
) -> None:
    """An empty greeting in a file counts as not configured."""
    factory = config_cli_context({"greeter": {"greeting": ""}})

    result = cli_runner.invoke(cli, ["greet"], obj=factory)

    assert "Hello, World!" in result.stdout.splitlines()


@pytest.mark.os_agnostic
def test_small_buffer_prints_truncated_text_and_warning(
    cli_runner: CliRunner,
    config_cli_context: ConfigCliContext,
) -> None:
    """Truncation is reported with the size that would fit."""
    result = cli_runner.invoke(cli, ["greet", "--buffer-size", "6"], obj=config_cli_context({}))

    assert result.exit_code == 0
    assert "Hello" in result.stdout.splitlines()
    assert "Warning: Buffer too small (need 14, have 6); use --buffer-size 14" in result.stderr
    assert handle_api.has_error() is False


@pytest.mark.os_agnostic
def test_configured_buffer_size_is_used(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """buffer_size from the file limits the output as well."""
    factory = config_cli_context({"greeter": {"buffer_size": 3, "uppercase": True}})

    result = cli_runner.invoke(cli, ["greet"], obj=factory)

    assert "HE" in result.stdout.splitlines()
    assert "use --buffer-size 14" in result.stderr


@pytest.mark.os_agnostic
def test_empty_name_exits_with_invalid_argument(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """Greeter creation failures exit 22 with the channel message."""
    result = cli_runner.invoke(cli, ["greet", "--name", ""], obj=config_cli_context({}))

    assert result.exit_code == 22
    assert "Hello" not in result.stdout
    assert "Error: Name cannot be empty" in result.stderr


@pytest.mark.os_agnostic
def test_overlong_configured_name_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: ConfigCliContext,
) -> None:
    """A name from the config file is validated like an option value."""
    factory = config_cli_context({"greeter": {"name": "x" * 256}})

    result = cli_runner.invoke(cli, ["greet"], obj=factory)

    assert result.exit_code == 22
    assert "Name too long (256 chars, max 255)" in result.stderr


@pytest.mark.os_agnostic
def test_name_option_is_measured_in_utf8_bytes(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """128 two-byte characters are rejected, 127 plus one ASCII letter are greeted."""
    factory = config_cli_context({})

    rejected = cli_runner.invoke(cli, ["greet", "--name", "\u00e9" * 128], obj=factory)
    accepted = cli_runner.invoke(cli, ["greet", "--name", "\u00e9" * 127 + "a", "--buffer-size", "300"], obj=factory)

    assert rejected.exit_code == 22
    assert "Name too long (256 chars, max 255)" in rejected.stderr
    assert accepted.exit_code == 0
    assert "Hello, " + "\u00e9" * 127 + "a!" in accepted.stdout.splitlines()


@pytest.mark.os_agnostic
def test_invalid_configured_buffer_size_exits_with_config_error(
    cli_runner: CliRunner,
    config_cli_context: ConfigCliContext,
) -> None:
    """Settings that fail validation exit 78."""
    factory = config_cli_context({"greeter": {"buffer_size": 0}})

    result = cli_runner.invoke(cli, ["greet"], obj=factory)

    assert result.exit_code == 78
    assert "Invalid greeter configuration" in result.stderr


@pytest.mark.os_agnostic
def test_buffer_size_option_rejects_zero(cli_runner: CliRunner, config_cli_context: ConfigCliContext) -> None:
    """The option itself enforces a positive size."""
    result = cli_runner.invoke(cli, ["greet", "--buffer-size", "0"], obj=config_cli_context({}))

    assert result.exit_code == 2


@pytest.mark.os_agnostic
def test_greet_with_testing_services_uses_defaults(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """The in-memory wiring greets the world."""
    result = cli_runner.invoke(cli, ["greet"], obj=testing_factory)

    assert result.exit_code == 0
    assert "Hello, World!" in result.stdout.splitlines()
