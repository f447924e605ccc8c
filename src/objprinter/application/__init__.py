"""Application layer - port definitions the adapters implement.

Contents:
    * :mod:`.ports` - Callable Protocols for configuration, display, logging
      and printer settings.
"""

from __future__ import annotations

from .ports import (
    DisplayConfig,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadPrinterSettings,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadPrinterSettings",
]
