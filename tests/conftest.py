"""Fixtures shared by the greeter, CLI and module-entry tests."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config

from hello_greeter.adapters.cli.tracebacks import TracebackFlags, preserved_traceback_flags
from hello_greeter.domain.error_channel import clear_error

if TYPE_CHECKING:
    from hello_greeter.composition import AppServices

# A developer .env beside pyproject.toml may carry HELLO_GREETER_* settings for integration runs.
load_dotenv(Path(__file__).resolve().parents[1] / ".env")

_ANSI_SEQUENCE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture(autouse=True)
def clean_error_channel() -> Iterator[None]:
    """Every test starts and ends with an empty error channel on the main thread."""
    clear_error()
    yield
    clear_error()


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh CliRunner.

    lib_log_rich may write records into the captured streams, so compare
    command output line by line (``result.stdout.splitlines()``).
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    from hello_greeter.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    from hello_greeter.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Remove colour and cursor escapes from rich output."""
    return lambda text: _ANSI_SEQUENCE.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Run with traceback output off; whatever the test installs is undone."""
    with preserved_traceback_flags():
        TracebackFlags().install()
        yield


@pytest.fixture
def clear_config_cache() -> None:
    """Make the next get_config call read every layer again."""
    from hello_greeter.adapters.config.loader import get_config

    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config from plain data, with empty provenance."""
    return lambda data: Config(data, {})


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Turn a configuration dict into a services factory for ``cli``.

    Only loading is replaced; settings parsing, display and logging stay the
    production adapters::

        factory = config_cli_context({"greeter": {"name": "Ada"}})
        result = cli_runner.invoke(cli, ["greet"], obj=factory)
    """
    from hello_greeter.composition import build_production

    def _factory_for(data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(data, {})
        services = dataclasses.replace(build_production(), get_config=lambda **_kwargs: config)
        return lambda: services

    return _factory_for
