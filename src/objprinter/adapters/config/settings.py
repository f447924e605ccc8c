"""Printer settings read from the ``[objprinter]`` configuration section.

Bridges lib_layered_config and the domain: the section is validated once
by a pydantic model and turned into a ready-to-chain
:class:`~objprinter.domain.printing.PrintingConfig`.

Contents:
    * :class:`PrinterSettings` - Validated ``[objprinter]`` section.
    * :func:`load_printer_settings` - Parse the section out of a Config.
    * :func:`printer_for` - Build a printer for a root type from settings.
"""

from __future__ import annotations

from typing import TypeVar, cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from objprinter.domain.culture import resolve_culture
from objprinter.domain.errors import ConfigurationError, FormatError
from objprinter.domain.object_printer import ObjectPrinter
from objprinter.domain.printing import DEFAULT_INDENT, DEFAULT_NEWLINE, PrintingConfig

T = TypeVar("T")

SECTION = "objprinter"


class PrinterSettings(BaseModel):
    """Pydantic model for the ``[objprinter]`` config section.

    Example:
        >>> settings = PrinterSettings.model_validate({"culture": "ru_RU"})
        >>> settings.culture, settings.detect_cycles
        ('ru_RU', True)
        >>> PrinterSettings().max_string_length is None
        True
    """

    culture: str = ""
    newline: str = DEFAULT_NEWLINE
    indent: str = DEFAULT_INDENT
    detect_cycles: bool = True
    max_string_length: int | None = Field(default=None)

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("culture")
    @classmethod
    def _culture_must_be_known(cls, value: str) -> str:
        """Reject identifiers Babel cannot resolve."""
        try:
            resolve_culture(value)
        except FormatError as exc:
            raise ValueError(str(exc)) from exc
        return value


def load_printer_settings(config: Config) -> PrinterSettings:
    """Validate the ``[objprinter]`` section of ``config``.

    Args:
        config: Already-loaded layered configuration.

    Returns:
        Parsed settings; defaults when the section is absent.

    Raises:
        ConfigurationError: When the section holds unknown keys or values
            of the wrong type.

    Example:
        >>> load_printer_settings(Config({"objprinter": {"indent": "  "}}, {})).indent
        '  '
    """
    raw: object = config.get(SECTION, default={})
    try:
        return PrinterSettings.model_validate(cast("dict[str, object]", raw) if raw else {})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid [{SECTION}] configuration: {exc}") from exc


def printer_for(owner: type[T], settings: PrinterSettings) -> PrintingConfig[T]:
    """Create a printer for ``owner`` honouring ``settings``.

    Example:
        >>> from objprinter.domain.samples import Person
        >>> printer = printer_for(Person, PrinterSettings(culture="ru_RU", max_string_length=2))
        >>> printer.max_string_length
        2
    """
    printer = ObjectPrinter.for_(
        owner,
        culture=settings.culture,
        newline=settings.newline,
        indent=settings.indent,
        detect_cycles=settings.detect_cycles,
    )
    if settings.max_string_length is not None:
        printer.set_max_string_length(settings.max_string_length)
    return printer


__all__ = [
    "PrinterSettings",
    "load_printer_settings",
    "printer_for",
]
