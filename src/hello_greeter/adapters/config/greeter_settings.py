"""Greeter settings model and loader.

Provides the GreeterSettings Pydantic model for the ``[greeter]`` section and
the loader function to create it from configuration dictionaries.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hello_greeter.domain.greeter import GreeterConfig


class GreeterSettings(BaseModel):
    """Validated, immutable greeter settings.

    Names are validated by the domain; an invalid configured name is
    reported through the error channel like any other.

    Example:
        >>> settings = GreeterSettings(name="Ada", uppercase=True)
        >>> settings.to_greeter_config()
        GreeterConfig(name='Ada', greeting=None, uppercase=True)
        >>> settings.buffer_size
        128
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    greeting: str | None = None
    uppercase: bool = False
    buffer_size: int = Field(default=128, ge=1)

    @field_validator("name", mode="before")
    @classmethod
    def _stringify_scalar_name(cls, v: Any) -> Any:
        """Read a bare number in a config file as the name it spells.

        Examples:
            >>> GreeterSettings._stringify_scalar_name(123)
            '123'
            >>> GreeterSettings._stringify_scalar_name(True)
            True
        """
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("greeting", mode="before")
    @classmethod
    def _coerce_empty_greeting_to_none(cls, v: Any) -> Any:
        """Treat an empty greeting from a config file as "not configured".

        Examples:
            >>> GreeterSettings._coerce_empty_greeting_to_none("")
            >>> GreeterSettings._coerce_empty_greeting_to_none("Hi")
            'Hi'
        """
        if isinstance(v, str) and not v:
            return None
        return v

    def to_greeter_config(self) -> GreeterConfig:
        """Return the domain configuration these settings describe."""
        return GreeterConfig(name=self.name, greeting=self.greeting, uppercase=self.uppercase)


def load_greeter_settings(config_dict: Mapping[str, Any]) -> GreeterSettings:
    """Load GreeterSettings from a configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    GreeterSettings model. Single-parse validation at the boundary.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config.
            Expected to have a 'greeter' section.

    Returns:
        Greeter settings with defaults for missing values.

    Raises:
        pydantic.ValidationError: When the section holds values of the wrong type.

    Example:
        >>> settings = load_greeter_settings({"greeter": {"name": "Test", "greeting": "Hi"}})
        >>> settings.name, settings.greeting
        ('Test', 'Hi')
        >>> load_greeter_settings({}).name is None
        True
    """
    section: Any = config_dict.get("greeter", {})
    if not isinstance(section, Mapping):
        return GreeterSettings.model_validate(section)
    raw: dict[str, Any] = dict(cast(Mapping[str, Any], section))
    return GreeterSettings.model_validate(raw)


__all__ = [
    "GreeterSettings",
    "load_greeter_settings",
]
