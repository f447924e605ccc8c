"""Callable Protocols the CLI depends on instead of concrete adapters.

Each Protocol's ``__call__`` mirrors one adapter function, so the
production functions and their in-memory counterparts satisfy it
structurally.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import PrinterSettings


class GetConfig(Protocol):
    """Load the layered configuration."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Return the bundled ``defaultconfig.toml`` path."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Show a configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start the logging runtime from a configuration."""

    def __call__(self, config: Config) -> None: ...


class LoadPrinterSettings(Protocol):
    """Validate the ``[objprinter]`` section into printer settings."""

    def __call__(self, config: Config) -> PrinterSettings: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadPrinterSettings",
]
