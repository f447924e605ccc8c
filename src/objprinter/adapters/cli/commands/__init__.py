"""Subcommands registered on the root group.

Contents:
    * :func:`.info.cli_info` - Package metadata
    * :func:`.config.cli_config` - Merged configuration
    * :func:`.demo.cli_demo` - Sample graph rendering
"""

from __future__ import annotations

from .config import cli_config
from .demo import cli_demo
from .info import cli_info

__all__ = [
    "cli_config",
    "cli_demo",
    "cli_info",
]
