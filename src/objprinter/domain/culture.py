"""Culture-aware formatting of numbers and dates via Babel.

A culture is a :class:`babel.Locale`. Numbers keep their shortest
round-trip form (``str(value)``) and only swap in the culture's decimal and
minus symbols, so ``167.8`` reads ``167,8`` under ``ru_RU`` and no digit
grouping is introduced.

Contents:
    * :data:`INVARIANT_CULTURE` - Culture used when none is requested.
    * :data:`NUMERIC_TYPES` - Types that accept a culture override.
    * :func:`resolve_culture` - Coerce identifiers to :class:`babel.Locale`.
    * :func:`format_number` - Culture-aware text for numbers and dates.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Final

from babel import Locale, UnknownLocaleError, default_locale
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from .errors import FormatError

#: Culture with ``.`` as decimal separator and ``-`` as minus sign.
INVARIANT_CULTURE: Final[Locale] = Locale("en")

#: Declared types for which a culture may be registered.
NUMERIC_TYPES: Final[frozenset[type]] = frozenset({int, float, Decimal})

_INVARIANT_NAMES: Final[frozenset[str]] = frozenset({"", "invariant"})
_CURRENT_NAME: Final[str] = "current"

CultureLike = Locale | str | None


def resolve_culture(culture: CultureLike) -> Locale:
    """Return a :class:`babel.Locale` for ``culture``.

    Args:
        culture: A Locale, a locale identifier (``"ru_RU"`` or ``"ru-RU"``),
            ``None``/``""``/``"invariant"`` for :data:`INVARIANT_CULTURE`, or
            ``"current"`` for the process locale (``LANGUAGE``, ``LC_ALL``,
            ``LC_NUMERIC``, ``LANG``), invariant when none is set.

    Raises:
        FormatError: When the identifier is malformed or unknown to Babel.

    Examples:
        >>> resolve_culture("ru-RU")
        Locale('ru', territory='RU')
        >>> resolve_culture(None) is INVARIANT_CULTURE
        True
    """
    if isinstance(culture, Locale):
        return culture
    if culture is None or culture.strip().lower() in _INVARIANT_NAMES:
        return INVARIANT_CULTURE
    if culture.strip().lower() == _CURRENT_NAME:
        return _current_culture()
    try:
        return Locale.parse(culture.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as exc:
        raise FormatError(f"Unknown culture {culture!r}") from exc


def _current_culture() -> Locale:
    identifier = default_locale("LC_NUMERIC")
    if not identifier:
        return INVARIANT_CULTURE
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError) as exc:
        raise FormatError(f"Unknown process locale {identifier!r}") from exc


def is_numeric_type(declared_type: object) -> bool:
    """Tell whether a culture override makes sense for ``declared_type``.

    ``bool`` is excluded even though it subclasses ``int``.

    Examples:
        >>> is_numeric_type(float), is_numeric_type(bool), is_numeric_type(str)
        (True, False, False)
    """
    if not isinstance(declared_type, type) or issubclass(declared_type, bool):
        return False
    return issubclass(declared_type, tuple(NUMERIC_TYPES))


def _format_real(value: int | float | Decimal, culture: Locale) -> str:
    text = str(value)
    if "." in text:
        text = text.replace(".", babel_numbers.get_decimal_symbol(culture))
    if text.startswith("-"):
        text = babel_numbers.get_minus_sign_symbol(culture) + text[1:]
    return text


def format_number(value: object, culture: Locale) -> str:
    """Format ``value`` using the conventions of ``culture``.

    Numbers (``int``, ``float``, ``Decimal``) keep their round-trip digits
    with the culture's decimal and minus symbols. ``datetime``, ``date`` and
    ``time`` values use Babel's medium pattern for the culture.

    Args:
        value: Value to format.
        culture: Target culture.

    Returns:
        Formatted text without trailing newline.

    Raises:
        FormatError: When ``value`` has no culture-aware representation.

    Examples:
        >>> format_number(167.8, Locale.parse("ru_RU"))
        '167,8'
        >>> format_number(167.8, INVARIANT_CULTURE)
        '167.8'
        >>> format_number(16, Locale.parse("de_DE"))
        '16'
    """
    if isinstance(value, bool):
        raise FormatError("bool values have no culture-aware representation")
    if isinstance(value, int | float | Decimal):
        return _format_real(value, culture)
    if isinstance(value, datetime.datetime):
        return babel_dates.format_datetime(value, format="medium", locale=culture)
    if isinstance(value, datetime.date):
        return babel_dates.format_date(value, format="medium", locale=culture)
    if isinstance(value, datetime.time):
        return babel_dates.format_time(value, format="medium", locale=culture)
    raise FormatError(f"{type(value).__name__} value {value!r} cannot be formatted with culture {culture}")


__all__ = [
    "CultureLike",
    "INVARIANT_CULTURE",
    "NUMERIC_TYPES",
    "format_number",
    "is_numeric_type",
    "resolve_culture",
]
