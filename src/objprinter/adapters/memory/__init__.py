"""In-memory adapters used by ``build_testing``.

Contents:
    * :mod:`.config` - Fixed configuration, synthetic paths, silent display
    * :mod:`.logging` - No-op logging start
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_default_config_path_in_memory,
    make_get_config_in_memory,
)
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from objprinter.application.ports import DisplayConfig, GetDefaultConfigPath, InitLogging

    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory

__all__ = [
    "display_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "make_get_config_in_memory",
]
