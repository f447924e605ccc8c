"""Error hierarchy: one base for printer errors, builtin ancestry kept."""

from __future__ import annotations

import pytest

from objprinter.domain.errors import (
    ConfigurationError,
    ContractViolation,
    CycleDetectedError,
    FormatError,
    ObjectPrintingError,
    OutOfRangeError,
)


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("error_type", "builtin"),
    [
        (OutOfRangeError, ValueError),
        (FormatError, TypeError),
        (ContractViolation, LookupError),
        (CycleDetectedError, RecursionError),
    ],
)
def test_printer_errors_share_a_base_and_keep_builtin_ancestry(error_type: type, builtin: type) -> None:
    """Each error is catchable as ObjectPrintingError and as its builtin."""
    assert issubclass(error_type, ObjectPrintingError)
    assert issubclass(error_type, builtin)


@pytest.mark.os_agnostic
def test_configuration_error_is_separate_from_printer_errors() -> None:
    """Invalid settings are not printing failures."""
    assert not issubclass(ConfigurationError, ObjectPrintingError)


@pytest.mark.os_agnostic
def test_messages_are_preserved() -> None:
    """str() returns the message."""
    assert str(ContractViolation("Person has no declared member 'x'")) == "Person has no declared member 'x'"
