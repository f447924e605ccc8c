"""Domain layer - the object printer, with no I/O or framework dependencies.

Contents:
    * :mod:`.printing` - Printing engine (:class:`PrintingConfig`)
    * :mod:`.property_config` - Override builders returned by ``printing*``
    * :mod:`.object_printer` - Entry facade and one-shot helper
    * :mod:`.members` - Reflective member discovery
    * :mod:`.selectors` - Selector binding against declared members
    * :mod:`.culture` - Babel-backed culture formatting
    * :mod:`.samples` - Sample consumer types
    * :mod:`.enums` - Domain enumerations (OutputFormat, MemberType)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .culture import INVARIANT_CULTURE, format_number, resolve_culture
from .enums import MemberType, OutputFormat
from .errors import (
    ConfigurationError,
    ContractViolation,
    CycleDetectedError,
    FormatError,
    ObjectPrintingError,
    OutOfRangeError,
)
from .members import Member, MemberKind, describe_members
from .object_printer import ObjectPrinter, print_to_string
from .printing import TERMINAL_TYPES, PrintingConfig
from .property_config import (
    NumericPropertyPrintingConfig,
    PropertyPrintingConfig,
    StringPropertyPrintingConfig,
)
from .samples import Person, build_sample_person
from .selectors import BoundMember, bind_selector

__all__ = [
    # Engine
    "ObjectPrinter",
    "PrintingConfig",
    "TERMINAL_TYPES",
    "print_to_string",
    # Builders
    "NumericPropertyPrintingConfig",
    "PropertyPrintingConfig",
    "StringPropertyPrintingConfig",
    # Introspection
    "BoundMember",
    "Member",
    "MemberKind",
    "bind_selector",
    "describe_members",
    # Culture
    "INVARIANT_CULTURE",
    "format_number",
    "resolve_culture",
    # Samples
    "Person",
    "build_sample_person",
    # Enums
    "MemberType",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "ContractViolation",
    "CycleDetectedError",
    "FormatError",
    "ObjectPrintingError",
    "OutOfRangeError",
]
