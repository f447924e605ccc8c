"""Composition root: binds adapter functions to the application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.config.settings import load_printer_settings
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadPrinterSettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _assert_display_config: DisplayConfig = display_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_printer_settings: LoadPrinterSettings = load_printer_settings


@dataclass(frozen=True, slots=True)
class AppServices:
    """Port implementations handed to the CLI."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    load_printer_settings: LoadPrinterSettings


def build_production() -> AppServices:
    """Services backed by lib_layered_config and lib_log_rich."""
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        load_printer_settings=load_printer_settings,
    )


def build_testing(*, config: Config | None = None) -> AppServices:
    """Services that never touch the filesystem or the logging runtime.

    Args:
        config: Configuration every ``get_config`` call returns; an empty
            one when ``None``.

    Example:
        >>> from lib_layered_config import Config
        >>> services = build_testing(config=Config({"objprinter": {"culture": "ru_RU"}}, {}))
        >>> services.load_printer_settings(services.get_config()).culture
        'ru_RU'
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_default_config_path_in_memory,
        init_logging_in_memory,
        make_get_config_in_memory,
    )

    return AppServices(
        get_config=make_get_config_in_memory(config),
        get_default_config_path=get_default_config_path_in_memory,
        display_config=display_config_in_memory,
        init_logging=init_logging_in_memory,
        load_printer_settings=load_printer_settings,
    )


__all__ = [
    "AppServices",
    "build_production",
    "build_testing",
    "display_config",
    "get_config",
    "get_default_config_path",
    "init_logging",
    "load_printer_settings",
]
