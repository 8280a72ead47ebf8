"""Examples command: the scripted walkthrough of the handle API."""

from __future__ import annotations

from collections.abc import Callable

import pytest
from click.testing import CliRunner

from hello_greeter.adapters.cli.root import cli
from hello_greeter.application import handle_api
from hello_greeter.composition import AppServices

EXPECTED_OUTPUT = """\
Hello Greeter Library v1.0.0
============================

Example 1: Default greeter
  Hello, World!

Example 2: Custom greeter
  Welcome, Carbide User!

Example 3: Uppercase greeter
  HELLO, WORLD!

Example 4: Changing name
  Before: name = "World"
  Greeting: Hello, World!
  After: name = "New Name"
  Greeting: Hello, New Name!

Example 5: Error handling
  Expected error: Name cannot be empty

All examples completed successfully!
"""


@pytest.mark.os_agnostic
def test_examples_print_the_full_walkthrough(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """Every scenario prints its expected lines in order."""
    result = cli_runner.invoke(cli, ["examples"], obj=testing_factory)

    assert result.exit_code == 0
    assert EXPECTED_OUTPUT in result.stdout


@pytest.mark.os_agnostic
def test_examples_leave_no_error_behind(
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """The expected error in the last scenario is cleared."""
    cli_runner.invoke(cli, ["examples"], obj=testing_factory)

    assert handle_api.has_error() is False


@pytest.mark.os_agnostic
def test_examples_abort_when_a_greeter_cannot_be_created(
    monkeypatch: pytest.MonkeyPatch,
    cli_runner: CliRunner,
    testing_factory: Callable[[], AppServices],
) -> None:
    """A failing create stops the walkthrough with a general error."""

    def _refuse(config: object = None) -> None:
        handle_api.set_error("Failed to allocate string of length 5")

    monkeypatch.setattr(handle_api, "create", _refuse)

    result = cli_runner.invoke(cli, ["examples"], obj=testing_factory)

    assert result.exit_code == 1
    assert "Example 1: Default greeter" in result.stdout
    assert "All examples completed successfully!" not in result.stdout
    assert "Error: Failed to allocate string of length 5" in result.stderr
