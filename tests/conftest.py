"""Shared pytest fixtures for printer, configuration and CLI tests."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from objprinter.composition import AppServices
    from objprinter.domain.samples import Person

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """A fresh CliRunner per test."""
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """The ``build_production`` services factory."""
    from objprinter.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Helper removing ANSI escape sequences from rich output."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start with traceback flags off and restore whatever was there afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Drop cached layered configurations before the test."""
    from objprinter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build real ``Config`` objects from plain dictionaries, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Services factory whose ``get_config`` returns the given data.

    Display, logging and printer-settings adapters stay real; commands bind
    log context, which needs a started lib_log_rich runtime.

    Example:
        def test_demo(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"objprinter": {"culture": "ru_RU"}})
            result = cli_runner.invoke(cli, ["demo"], obj=factory)
    """
    from objprinter.composition import build_production, build_testing

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        prod = build_production()
        services = replace(
            build_testing(config=Config(config_data, {})),
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: services

    return _create


@pytest.fixture
def profile_capturing_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]]:
    """Services factory recording every profile passed to ``get_config``."""
    from objprinter.composition import build_production, build_testing

    def _create(config_data: dict[str, Any], captured: list[str | None]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        services = replace(
            build_testing(), get_config=_capturing_get_config, init_logging=build_production().init_logging
        )
        return lambda: services

    return _create


@pytest.fixture
def alex() -> Person:
    """A person without parent, as used throughout the printing scenarios."""
    from objprinter.domain.samples import Person

    return Person(name="Alex", height=167.8, age=16)


@pytest.fixture
def alex_with_parent(alex: Person) -> Person:
    """``alex`` with parent Peter (191.9 cm, 35 years)."""
    from objprinter.domain.samples import Person

    alex.parent = Person(name="Peter", height=191.9, age=35)
    return alex
