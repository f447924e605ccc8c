"""objprinter - render arbitrary object graphs as indented, configurable text.

Example:
    >>> from objprinter import ObjectPrinter
    >>> from objprinter.domain.samples import Person
    >>> printer = ObjectPrinter.for_(Person).excluding("id").printing_type(float).using_culture("ru_RU")
    >>> "height = 167,8" in printer.print_to_string(Person(name="Alex", height=167.8))
    True
"""

from __future__ import annotations

from .__init__conf__ import print_info
from .adapters.config.settings import PrinterSettings, load_printer_settings, printer_for
from .composition import get_config
from .domain.errors import (
    ConfigurationError,
    ContractViolation,
    CycleDetectedError,
    FormatError,
    ObjectPrintingError,
    OutOfRangeError,
)
from .domain.object_printer import ObjectPrinter, print_to_string
from .domain.printing import PrintingConfig
from .domain.property_config import (
    NumericPropertyPrintingConfig,
    PropertyPrintingConfig,
    StringPropertyPrintingConfig,
)

__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "CycleDetectedError",
    "FormatError",
    "NumericPropertyPrintingConfig",
    "ObjectPrinter",
    "ObjectPrintingError",
    "OutOfRangeError",
    "PrinterSettings",
    "PrintingConfig",
    "PropertyPrintingConfig",
    "StringPropertyPrintingConfig",
    "get_config",
    "load_printer_settings",
    "print_info",
    "print_to_string",
    "printer_for",
]
