"""Layered configuration loading for the printer CLI.

Reads ``defaultconfig.toml`` (shipped with the package) and lets app, host,
user, ``.env`` and environment layers override it through
lib_layered_config. Results are cached per ``(profile, start_dir)``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from objprinter import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe as path components.

    Args:
        profile: Profile name, e.g. ``"staging"``.
        max_length: Maximum accepted length; defaults to
            ``DEFAULT_MAX_PROFILE_LENGTH``.

    Raises:
        ValueError: For empty, overlong or path-traversing names.

    Examples:
        >>> validate_profile("ci")

        >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path of the bundled ``defaultconfig.toml``.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load the merged configuration.

    Precedence, lowest first: defaults → app → host → user → dotenv → env.
    A profile inserts ``profile/<name>/`` into every file layer path.

    Args:
        profile: Optional profile name (validated before use).
        start_dir: Directory seeding ``.env`` discovery; current working
            directory when ``None``.

    Returns:
        Immutable configuration with provenance metadata.

    Example:
        >>> config = get_config()
        >>> isinstance(config.as_dict(), dict)
        True
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Drop cached configurations so the next call rereads every layer."""
    _read_layers.cache_clear()


_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "ConfigLoaderProtocol",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
