"""Composition root: which adapters stand behind the application ports.

:func:`build_production` reads real configuration layers and logs through
lib_log_rich; :func:`build_testing` touches no files and logs nowhere
visible. Either is passed, uncalled, to :func:`hello_greeter.adapters.cli.main`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..application.ports import DisplayConfig, GetConfig, InitLogging, LoadGreeterSettings


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port; pyright checks each against its Protocol."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_greeter_settings: LoadGreeterSettings
    init_logging: InitLogging


def build_production() -> AppServices:
    """Services backed by lib_layered_config and lib_log_rich."""
    from ..adapters.config import display_config, get_config, load_greeter_settings
    from ..adapters.logging import init_logging

    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_greeter_settings=load_greeter_settings,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Services with an empty configuration, default settings and a quiet logger."""
    from ..adapters import memory

    return AppServices(
        get_config=memory.get_config_in_memory,
        display_config=memory.display_config_in_memory,
        load_greeter_settings=memory.load_greeter_settings_in_memory,
        init_logging=memory.init_logging_in_memory,
    )


__all__ = ["AppServices", "build_production", "build_testing"]
