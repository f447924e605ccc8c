"""Adapters layer - integrations with configuration, logging and the CLI.

Contents:
    * :mod:`.config` - Layered configuration, overrides and printer settings
    * :mod:`.logging` - lib_log_rich runtime setup
    * :mod:`.memory` - In-memory port implementations for tests
    * :mod:`.cli` - rich-click command-line interface
"""

from __future__ import annotations

__all__: list[str] = []
