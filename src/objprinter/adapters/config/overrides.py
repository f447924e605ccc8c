"""Apply ``--set SECTION.KEY=VALUE`` command-line overrides to a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Python values an override string can turn into."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` argument."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Everything before the first ``=`` is the dotted path, its first
    component the section. The value goes through :func:`coerce_value`.

    Raises:
        ValueError: Without ``=``, without a dot in the path, or with an
            empty path component.

    Examples:
        >>> override = parse_override("objprinter.culture=ru_RU")
        >>> override.section, override.key_path, override.value
        ('objprinter', ('culture',), 'ru_RU')

        >>> parse_override("objprinter.max_string_length=3").value
        3

        >>> parse_override("culture=ru_RU")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: Invalid override 'culture=ru_RU': key must contain at least one dot (SECTION.KEY)
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")
    path, value = raw.split("=", maxsplit=1)
    if "." not in path:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *keys = path.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(keys):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")
    return ConfigOverride(section=section, key_path=tuple(keys), value=coerce_value(value))


def coerce_value(raw: str) -> CoercedValue:
    """Interpret ``raw`` as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("false"), coerce_value("12"), coerce_value("null")
        (False, 12, None)
        >>> coerce_value("ru_RU")
        'ru_RU'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target`` as nested dictionaries.

    Example:
        >>> nested: dict[str, dict[str, object]] = {}
        >>> _nest_override(nested, ConfigOverride(section="a", key_path=("b", "c"), value=1))
        >>> nested
        {'a': {'b': {'c': 1}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for key in override.key_path[:-1]:
        child = node.setdefault(key, {})
        if not isinstance(child, dict):
            raise TypeError(f"Expected dict at key {key!r}, got {type(child).__name__}")
        node = cast("dict[str, object]", child)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` value deep-merged on top.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> base = Config({"objprinter": {"culture": ""}}, {})
        >>> apply_overrides(base, ("objprinter.culture=de_DE",))["objprinter"]["culture"]
        'de_DE'
        >>> apply_overrides(base, ()) is base
        True
    """
    if not raw_overrides:
        return config
    merged: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(merged, parse_override(raw))
    return config.with_overrides(merged)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
