"""OutputFormat enum: values and plain-string comparison."""

from __future__ import annotations

import pytest

from hello_greeter.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize(("member", "value"), [(OutputFormat.HUMAN, "human"), (OutputFormat.JSON, "json")])
def test_output_format_compares_equal_to_its_value(member: OutputFormat, value: str) -> None:
    """Members are usable wherever Click hands over a plain string."""
    assert member.value == value
    assert member == value
    assert OutputFormat(value) is member


@pytest.mark.os_agnostic
def test_output_format_has_only_human_and_json() -> None:
    """Two display formats exist."""
    assert [member.value for member in OutputFormat] == ["human", "json"]
