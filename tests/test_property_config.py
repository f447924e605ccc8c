"""Override builders: which builder a type gets and what its terminal calls write."""

from __future__ import annotations

from decimal import Decimal
from uuid import UUID

import pytest

from objprinter import ObjectPrinter
from objprinter.domain.errors import ContractViolation
from objprinter.domain.property_config import (
    NumericPropertyPrintingConfig,
    PropertyPrintingConfig,
    StringPropertyPrintingConfig,
)
from objprinter.domain.samples import Person


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("target", "builder_type"),
    [
        (str, StringPropertyPrintingConfig),
        (int, NumericPropertyPrintingConfig),
        (float, NumericPropertyPrintingConfig),
        (Decimal, NumericPropertyPrintingConfig),
        (UUID, PropertyPrintingConfig),
        (bool, PropertyPrintingConfig),
    ],
)
def test_printing_type_returns_builder_matching_type(target: type, builder_type: type) -> None:
    """String and numeric types get their specialised builders."""
    assert type(ObjectPrinter.for_(Person).printing_type(target)) is builder_type


@pytest.mark.os_agnostic
def test_printing_selector_returns_builder_for_member_type() -> None:
    """Selecting name yields a string builder bound to the property."""
    builder = ObjectPrinter.for_(Person).printing(lambda p: p.name)

    assert isinstance(builder, StringPropertyPrintingConfig)
    assert builder.property_name == "name"
    assert builder.declared_type is str


@pytest.mark.os_agnostic
def test_type_builder_has_no_property_name() -> None:
    """Type-level builders are not bound to a property."""
    assert ObjectPrinter.for_(Person).printing_type(int).property_name is None


@pytest.mark.os_agnostic
def test_non_numeric_builders_lack_using_culture() -> None:
    """Culture is only offered where it makes sense."""
    assert not hasattr(ObjectPrinter.for_(Person).printing_type(str), "using_culture")
    assert not hasattr(ObjectPrinter.for_(Person).printing_type(int), "trimmed_to_length")


@pytest.mark.os_agnostic
def test_using_on_type_builder_registers_type_formatter() -> None:
    """using() on a type builder writes into type_formatters."""
    config = ObjectPrinter.for_(Person)
    returned = config.printing_type(int).using(hex)

    assert returned is config
    assert config.type_formatters[int] is hex
    assert not config.property_formatters


@pytest.mark.os_agnostic
def test_using_on_property_builder_registers_property_formatter() -> None:
    """using() on a property builder writes into property_formatters."""
    config = ObjectPrinter.for_(Person).printing(lambda p: p.age).using(hex)

    assert config.property_formatters["age"] is hex
    assert not config.type_formatters


@pytest.mark.os_agnostic
def test_using_culture_registers_culture_for_type() -> None:
    """using_culture() records the Locale under the bound type."""
    config = ObjectPrinter.for_(Person).printing(lambda p: p.height).using_culture("ru_RU")

    assert str(config.type_cultures[float]) == "ru_RU"


@pytest.mark.os_agnostic
def test_trimmed_to_length_sets_engine_length() -> None:
    """trimmed_to_length() stores the length without validating it."""
    config = ObjectPrinter.for_(Person).printing(lambda p: p.name).trimmed_to_length(-5)

    assert config.max_string_length == -5


@pytest.mark.os_agnostic
def test_builder_is_consumed_by_terminal_call() -> None:
    """consumed flips after the first terminal call; a second call fails."""
    builder = ObjectPrinter.for_(Person).printing_type(str)
    assert builder.consumed is False

    builder.trimmed_to_length(1)

    assert builder.consumed is True
    with pytest.raises(ContractViolation):
        builder.using(str)


@pytest.mark.os_agnostic
def test_exposed_tables_are_read_only() -> None:
    """Configuration tables cannot be changed from outside."""
    config = ObjectPrinter.for_(Person).excluding("age")

    with pytest.raises(TypeError):
        config.type_formatters[int] = str  # type: ignore[index]
    with pytest.raises(AttributeError):
        config.excluded_properties.add("name")  # type: ignore[attr-defined]
