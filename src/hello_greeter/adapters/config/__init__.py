"""Configuration adapters built on lib_layered_config.

Contents:
    * :mod:`.loader` - layered loading with one cached read per profile
    * :mod:`.display` - human and JSON rendering of the merged layers
    * :mod:`.greeter_settings` - the ``[greeter]`` table as a pydantic model
"""

from __future__ import annotations

from .display import display_config
from .greeter_settings import GreeterSettings, load_greeter_settings
from .loader import get_config, get_default_config_path

__all__ = [
    "GreeterSettings",
    "display_config",
    "get_config",
    "get_default_config_path",
    "load_greeter_settings",
]
