"""Configuration display wrapper.

The wrapper flushes pending log records and delegates to
lib_layered_config's display_config; rendering details belong to that
library.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from lib_layered_config import Config

from objprinter.adapters.config.display import display_config
from objprinter.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_missing_section(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    """Unknown sections raise ValueError in both formats."""
    with pytest.raises(ValueError, match="not found"):
        display_config(config_factory({"objprinter": {"indent": "\t"}}), output_format=output_format, section="nope")


@pytest.mark.os_agnostic
def test_display_human_renders_sections(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
    strip_ansi: Callable[[str], str],
) -> None:
    """Human output shows section headers and values."""
    display_config(config_factory({"objprinter": {"culture": "ru_RU"}}), output_format=OutputFormat.HUMAN)

    output = strip_ansi(capsys.readouterr().out)
    assert "[objprinter]" in output
    assert 'culture = "ru_RU"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_valid_json(
    config_factory: Callable[[dict[str, Any]], Config],
    capsys: pytest.CaptureFixture[str],
) -> None:
    """JSON output parses back to the configuration data."""
    data = {"objprinter": {"culture": "ru_RU", "detect_cycles": True}}

    display_config(config_factory(data), output_format=OutputFormat.JSON, section="objprinter")

    assert orjson.loads(capsys.readouterr().out) == data
