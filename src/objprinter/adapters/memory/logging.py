"""In-memory logging adapter."""

from __future__ import annotations

from lib_layered_config import Config


def init_logging_in_memory(config: Config) -> None:
    """Leave the logging runtime untouched."""


__all__ = ["init_logging_in_memory"]
