"""In-memory configuration adapters.

Satisfy the configuration ports without reading files or environment
variables, so CLI tests control exactly which settings a command sees.
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...application.ports import GetConfig
from ...domain.enums import OutputFormat


def make_get_config_in_memory(config: Config | None = None) -> GetConfig:
    """Return a loader that always yields ``config`` (empty by default).

    Example:
        >>> loader = make_get_config_in_memory(Config({"objprinter": {"indent": "  "}}, {}))
        >>> loader(profile="ci")["objprinter"]["indent"]
        '  '
    """
    fixed = config if config is not None else Config({}, {})

    def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
        return fixed

    return get_config_in_memory


def get_default_config_path_in_memory() -> Path:
    """A path under the temp directory; the file does not exist."""
    return Path(tempfile.gettempdir()) / "objprinter" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Does nothing."""


__all__ = [
    "display_config_in_memory",
    "get_default_config_path_in_memory",
    "make_get_config_in_memory",
]
