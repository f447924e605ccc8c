"""The printing engine: configuration tables plus the recursive printer.

:class:`PrintingConfig` owns every customisation (excluded types and
properties, formatters, cultures, truncation length) and walks an object
graph, consulting those tables at each member.

Output shape::

    Person
    <indent>name = Alex
    <indent>parent = Person
    <indent><indent>name = Ivan
    <indent><indent>parent = null

Contents:
    * :data:`TERMINAL_TYPES` - Types printed with their own string form.
    * :class:`PrintingConfig` - Fluent configuration and renderer.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Callable, Mapping, Set
from decimal import Decimal
from types import MappingProxyType
from typing import Any, Final, Generic, TypeVar, overload

from babel import Locale

from .culture import CultureLike, format_number, is_numeric_type, resolve_culture
from .errors import ContractViolation, CycleDetectedError, OutOfRangeError
from .members import Member, describe_members, normalize_declared_type
from .property_config import (
    NumericPropertyPrintingConfig,
    PropertyPrintingConfig,
    StringPropertyPrintingConfig,
    create_property_config,
)
from .selectors import Selector, bind_selector

logger = logging.getLogger(__name__)

TOwner = TypeVar("TOwner")
TProp = TypeVar("TProp")
TNumber = TypeVar("TNumber", int, float, Decimal)

DEFAULT_NEWLINE: Final[str] = "\n"
DEFAULT_INDENT: Final[str] = "\t"

#: Matched by exact runtime type; subclasses are printed as composites.
TERMINAL_TYPES: Final[frozenset[type]] = frozenset(
    {
        int,
        float,
        Decimal,
        bool,
        str,
        datetime.datetime,
        datetime.date,
        datetime.time,
        datetime.timedelta,
    }
)

_CULTURE_TERMINALS: Final[frozenset[type]] = frozenset({int, float, Decimal})


class PrintingConfig(Generic[TOwner]):
    r"""Fluent printer configuration bound to a root type.

    Every configuration call mutates this instance and returns it, so calls
    chain. Configure first, then print; mutating while a print is running
    on another thread is not supported.

    Args:
        owner: Root type the printer is written for; selectors are bound
            against its members.
        culture: Culture used for the default text of ``int``, ``float``
            and ``Decimal`` values. Defaults to the invariant culture so
            output does not depend on the machine; pass ``"current"`` for
            the process locale.
        newline: Line terminator appended to every line.
        indent: One indentation unit; repeated once per nesting level.
        detect_cycles: Raise :class:`CycleDetectedError` when an object is
            reached again while it is still being printed.

    Example:
        >>> from objprinter.domain.samples import Person
        >>> config = PrintingConfig(Person).excluding("id").excluding("parent")
        >>> config.print_to_string(Person(name="Alex", height=167.8, age=16)).splitlines()
        ['Person', '\tname = Alex', '\theight = 167.8', '\tage = 16']
    """

    def __init__(
        self,
        owner: type[TOwner],
        *,
        culture: CultureLike = None,
        newline: str = DEFAULT_NEWLINE,
        indent: str = DEFAULT_INDENT,
        detect_cycles: bool = True,
    ) -> None:
        self._owner = owner
        self._culture = resolve_culture(culture)
        self._newline = newline
        self._indent = indent
        self._detect_cycles = detect_cycles
        self._excluded_types: set[Any] = set()
        self._excluded_properties: set[str] = set()
        self._type_formatters: dict[Any, Callable[[Any], object]] = {}
        self._property_formatters: dict[str, Callable[[Any], object]] = {}
        self._type_cultures: dict[Any, Locale] = {}
        self._max_string_length: int | None = None
        self._terminal_types = TERMINAL_TYPES

    # ------------------------------------------------------------------ state

    @property
    def owner(self) -> type[TOwner]:
        return self._owner

    @property
    def culture(self) -> Locale:
        return self._culture

    @property
    def newline(self) -> str:
        return self._newline

    @property
    def indent(self) -> str:
        return self._indent

    @property
    def detect_cycles(self) -> bool:
        return self._detect_cycles

    @property
    def excluded_types(self) -> Set[Any]:
        return frozenset(self._excluded_types)

    @property
    def excluded_properties(self) -> Set[str]:
        return frozenset(self._excluded_properties)

    @property
    def type_formatters(self) -> Mapping[Any, Callable[[Any], object]]:
        return MappingProxyType(self._type_formatters)

    @property
    def property_formatters(self) -> Mapping[str, Callable[[Any], object]]:
        return MappingProxyType(self._property_formatters)

    @property
    def type_cultures(self) -> Mapping[Any, Locale]:
        return MappingProxyType(self._type_cultures)

    @property
    def max_string_length(self) -> int | None:
        return self._max_string_length

    @property
    def terminal_types(self) -> frozenset[type]:
        return self._terminal_types

    # --------------------------------------------------------------- mutators

    def excluding_type(self, excluded: Any) -> PrintingConfig[TOwner]:
        """Skip every member declared with ``excluded``, at any depth."""
        declared = normalize_declared_type(excluded)
        logger.debug("Excluding members of type %r", declared)
        self._excluded_types.add(declared)
        return self

    def excluding(self, selector: Selector) -> PrintingConfig[TOwner]:
        """Skip the selected member.

        Matching is by bare member name: every member with that name is
        skipped at every depth, whichever type declares it.

        Raises:
            ContractViolation: When the selector does not resolve to a
                declared member of the owner type.
        """
        bound = bind_selector(self._owner, selector)
        logger.debug("Excluding property %s", bound.dotted_path)
        self._excluded_properties.add(bound.name)
        return self

    @overload
    def printing_type(self, target: type[str]) -> StringPropertyPrintingConfig[TOwner]: ...

    @overload
    def printing_type(self, target: type[TNumber]) -> NumericPropertyPrintingConfig[TOwner, TNumber]: ...

    @overload
    def printing_type(self, target: type[TProp]) -> PropertyPrintingConfig[TOwner, TProp]: ...

    def printing_type(self, target: Any) -> PropertyPrintingConfig[TOwner, Any]:
        """Start an override for every member declared with ``target``."""
        return create_property_config(self, normalize_declared_type(target))

    @overload
    def printing(self, selector: Callable[[TOwner], str]) -> StringPropertyPrintingConfig[TOwner]: ...

    @overload
    def printing(self, selector: Callable[[TOwner], TNumber]) -> NumericPropertyPrintingConfig[TOwner, TNumber]: ...

    @overload
    def printing(self, selector: Callable[[TOwner], TProp]) -> PropertyPrintingConfig[TOwner, TProp]: ...

    @overload
    def printing(self, selector: str) -> PropertyPrintingConfig[TOwner, Any]: ...

    def printing(self, selector: Selector) -> PropertyPrintingConfig[TOwner, Any]:
        """Start an override for the selected property.

        Raises:
            ContractViolation: When the selector does not resolve to a
                declared member of the owner type.
        """
        bound = bind_selector(self._owner, selector)
        return create_property_config(self, bound.declared_type, bound)

    def add_type_formatter(self, target: Any, formatter: Callable[[Any], object]) -> PrintingConfig[TOwner]:
        """Register ``formatter`` for members declared with ``target``."""
        declared = normalize_declared_type(target)
        logger.debug("Registering formatter for type %r", declared)
        self._type_formatters[declared] = formatter
        return self

    def add_property_formatter(self, name: str, formatter: Callable[[Any], object]) -> PrintingConfig[TOwner]:
        """Register ``formatter`` for members called ``name``."""
        logger.debug("Registering formatter for property %s", name)
        self._property_formatters[name] = formatter
        return self

    def use_culture(self, target: Any, culture: CultureLike) -> PrintingConfig[TOwner]:
        """Format members declared with the numeric type ``target`` under ``culture``.

        Raises:
            ContractViolation: When ``target`` is not ``int``, ``float`` or
                ``Decimal``.
            FormatError: When ``culture`` cannot be resolved.
        """
        declared = normalize_declared_type(target)
        if not is_numeric_type(declared):
            raise ContractViolation(f"Cultures apply to numeric types only, not {declared!r}")
        locale = resolve_culture(culture)
        logger.debug("Using culture %s for type %r", locale, declared)
        self._type_cultures[declared] = locale
        return self

    def set_max_string_length(self, max_length: int | None) -> PrintingConfig[TOwner]:
        """Truncate every printed string to ``max_length`` characters.

        ``None`` disables truncation. The value is checked lazily against
        each printed string.
        """
        logger.debug("Setting max string length to %s", max_length)
        self._max_string_length = max_length
        return self

    # -------------------------------------------------------------- rendering

    def print_to_string(self, obj: TOwner) -> str:
        """Render ``obj`` and its members as an indented text block.

        Raises:
            OutOfRangeError: When a printed string is shorter than the
                truncation length, or the length is negative.
            FormatError: When a culture is applied to a value that cannot
                be formatted with it.
            CycleDetectedError: When cycle detection is on and the graph
                loops back onto an object being printed.
        """
        logger.debug("Printing %s", type(obj).__name__)
        return self._print(obj, 0, ())

    def _print(self, obj: Any, nesting_level: int, ancestors: tuple[int, ...]) -> str:
        if obj is None:
            return "null" + self._newline
        max_length = self._max_string_length
        if isinstance(obj, str) and max_length is not None:
            return _truncate(obj, max_length) + self._newline
        obj_type = type(obj)
        if obj_type in self._terminal_types:
            return self._format_terminal(obj) + self._newline

        if self._detect_cycles:
            if id(obj) in ancestors:
                raise CycleDetectedError(
                    f"{obj_type.__name__} at nesting level {nesting_level} refers back to an object being printed"
                )
            ancestors = (*ancestors, id(obj))

        indentation = self._indent * (nesting_level + 1)
        parts = [obj_type.__name__ + self._newline]
        # Only the root type's annotations must resolve.
        for member in describe_members(obj_type, strict=obj_type is self._owner):
            if member.declared_type in self._excluded_types:
                continue
            if member.name in self._excluded_properties:
                continue
            text = self._print_member(obj, member, nesting_level, ancestors)
            parts.append(f"{indentation}{member.name} = {text}")
        return "".join(parts)

    def _print_member(self, obj: Any, member: Member, nesting_level: int, ancestors: tuple[int, ...]) -> str:
        value = member.get(obj)
        formatter = self._property_formatters.get(member.name)
        if formatter is None:
            formatter = self._type_formatters.get(member.declared_type)
        if formatter is not None:
            return f"{formatter(value)}{self._newline}"
        culture = self._type_cultures.get(member.declared_type)
        if culture is not None:
            return format_number(value, culture) + self._newline
        return self._print(value, nesting_level + 1, ancestors)

    def _format_terminal(self, obj: Any) -> str:
        if type(obj) in _CULTURE_TERMINALS:
            return format_number(obj, self._culture)
        return str(obj)


def _truncate(text: str, max_length: int) -> str:
    if max_length < 0 or max_length > len(text):
        raise OutOfRangeError(f"Cannot trim string of length {len(text)} to {max_length} characters")
    return text[:max_length]


__all__ = [
    "DEFAULT_INDENT",
    "DEFAULT_NEWLINE",
    "TERMINAL_TYPES",
    "PrintingConfig",
]
