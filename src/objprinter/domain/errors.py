"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or inconsistent printer settings.

    Raised when the ``[objprinter]`` configuration section cannot be turned
    into printer settings. Caught at CLI boundaries to provide a readable
    message and the ``CONFIG_ERROR`` exit code.

    Example:
        >>> from objprinter.domain.errors import ConfigurationError
        >>> str(ConfigurationError("objprinter.indent must be a string"))
        'objprinter.indent must be a string'
    """


class ObjectPrintingError(Exception):
    """Base class for every failure raised by the printing engine.

    Lets callers (and the CLI boundary) catch all printer errors with a
    single ``except`` clause while the concrete subclasses keep their
    builtin ancestry.

    Example:
        >>> from objprinter.domain.errors import ObjectPrintingError
        >>> str(ObjectPrintingError("boom"))
        'boom'
    """


class OutOfRangeError(ObjectPrintingError, ValueError):
    """Truncation length is negative or longer than the printed string.

    Raised lazily while rendering the offending string, never when the
    truncation length is configured.

    Example:
        >>> from objprinter.domain.errors import OutOfRangeError
        >>> err = OutOfRangeError("length 15 exceeds string of length 4")
        >>> isinstance(err, ValueError)
        True
    """


class FormatError(ObjectPrintingError, TypeError):
    """A value cannot be formatted under the requested culture.

    Raised when a culture-aware formatter receives a value that has no
    culture-specific representation (``None``, text, composite objects),
    or when a culture identifier cannot be resolved.

    Example:
        >>> from objprinter.domain.errors import FormatError
        >>> isinstance(FormatError("not a number"), TypeError)
        True
    """


class ContractViolation(ObjectPrintingError, LookupError):
    """A configuration call broke the fluent API contract.

    Raised at configuration time, before anything is rendered: a selector
    that does not resolve to a declared member, an override builder used
    twice, or a capability requested for a type that does not support it.

    Example:
        >>> from objprinter.domain.errors import ContractViolation
        >>> str(ContractViolation("Person has no member 'nickname'"))
        "Person has no member 'nickname'"
    """


class CycleDetectedError(ObjectPrintingError, RecursionError):
    """The object graph references an object that is already being printed.

    Inherits from RecursionError so code written against the unguarded
    traversal keeps catching it.

    Example:
        >>> from objprinter.domain.errors import CycleDetectedError
        >>> isinstance(CycleDetectedError("Person -> parent -> Person"), RecursionError)
        True
    """


__all__ = [
    "ConfigurationError",
    "ContractViolation",
    "CycleDetectedError",
    "FormatError",
    "ObjectPrintingError",
    "OutOfRangeError",
]
