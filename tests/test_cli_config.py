"""``objprinter config`` stories: formats, sections and profile reloads."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import orjson
import pytest
from click.testing import CliRunner

from objprinter.adapters.cli import cli
from objprinter.adapters.cli.exit_codes import ExitCode
from objprinter.composition import AppServices

CONFIG_DATA: dict[str, Any] = {"objprinter": {"culture": "ru_RU", "indent": "\t"}, "other": {"colour": "blue"}}


@pytest.mark.os_agnostic
def test_config_json_lists_sections(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """JSON output parses and contains every section."""
    result = cli_runner.invoke(cli, ["config", "--format", "json"], obj=config_cli_context(CONFIG_DATA))

    assert result.exit_code == 0
    payload = orjson.loads(result.stdout)
    assert payload["objprinter"]["culture"] == "ru_RU"
    assert payload["other"] == {"colour": "blue"}


@pytest.mark.os_agnostic
def test_config_section_filter(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """--section restricts output to one section."""
    result = cli_runner.invoke(
        cli, ["config", "--format", "json", "--section", "objprinter"], obj=config_cli_context(CONFIG_DATA)
    )

    assert result.exit_code == 0
    assert orjson.loads(result.stdout) == {"objprinter": CONFIG_DATA["objprinter"]}


@pytest.mark.os_agnostic
def test_config_human_output_mentions_section(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
    strip_ansi: Callable[[str], str],
) -> None:
    """The human format shows section headers."""
    result = cli_runner.invoke(cli, ["config"], obj=config_cli_context(CONFIG_DATA))

    assert result.exit_code == 0
    assert "objprinter" in strip_ansi(result.stdout)


@pytest.mark.os_agnostic
def test_config_unknown_section_exits_with_invalid_argument(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """A missing section fails with EINVAL."""
    result = cli_runner.invoke(cli, ["config", "--section", "missing"], obj=config_cli_context(CONFIG_DATA))

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not found" in result.output


@pytest.mark.os_agnostic
def test_config_set_override_is_shown(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], AppServices]],
) -> None:
    """--set values appear in the displayed configuration."""
    result = cli_runner.invoke(
        cli,
        ["--set", "objprinter.culture=de_DE", "config", "--format", "json", "--section", "objprinter"],
        obj=config_cli_context(CONFIG_DATA),
    )

    assert orjson.loads(result.stdout)["objprinter"]["culture"] == "de_DE"


@pytest.mark.os_agnostic
def test_root_profile_is_passed_to_loader(
    cli_runner: CliRunner,
    profile_capturing_context: Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]],
) -> None:
    """--profile on the root group reaches get_config."""
    captured: list[str | None] = []

    cli_runner.invoke(cli, ["--profile", "staging", "config"], obj=profile_capturing_context(CONFIG_DATA, captured))

    assert captured == ["staging"]


@pytest.mark.os_agnostic
def test_subcommand_profile_reloads_configuration(
    cli_runner: CliRunner,
    profile_capturing_context: Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]],
) -> None:
    """config --profile loads again with that profile."""
    captured: list[str | None] = []

    result = cli_runner.invoke(
        cli, ["config", "--profile", "ci"], obj=profile_capturing_context(CONFIG_DATA, captured)
    )

    assert result.exit_code == 0
    assert captured == [None, "ci"]
