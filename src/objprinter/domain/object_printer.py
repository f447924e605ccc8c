"""Entry facade creating printers and one-shot printing helpers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from .culture import CultureLike
from .printing import DEFAULT_INDENT, DEFAULT_NEWLINE, PrintingConfig

T = TypeVar("T")


class ObjectPrinter:
    """Factory for :class:`PrintingConfig` instances.

    Example:
        >>> from objprinter.domain.samples import Person
        >>> ObjectPrinter.for_(Person).print_to_string(Person(name="Alex")).splitlines()[0]
        'Person'
    """

    @staticmethod
    def for_(
        owner: type[T],
        *,
        culture: CultureLike = None,
        newline: str = DEFAULT_NEWLINE,
        indent: str = DEFAULT_INDENT,
        detect_cycles: bool = True,
    ) -> PrintingConfig[T]:
        """Return a fresh, empty printer configuration for ``owner``.

        Args:
            owner: Root type; selectors are bound against its members.
            culture: Culture for the default text of numbers.
            newline: Line terminator.
            indent: Indentation unit.
            detect_cycles: Guard against object graphs that loop back.
        """
        return PrintingConfig(
            owner,
            culture=culture,
            newline=newline,
            indent=indent,
            detect_cycles=detect_cycles,
        )


def print_to_string(
    obj: T,
    configure: Callable[[PrintingConfig[T]], PrintingConfig[T]] | None = None,
) -> str:
    """Print ``obj`` with a printer created for its runtime type.

    Args:
        obj: Object to print.
        configure: Optional callback receiving the fresh configuration and
            returning it after chaining customisations.

    Example:
        >>> from objprinter.domain.samples import Person
        >>> text = print_to_string(Person(name="Alex", age=19), lambda c: c.excluding("age"))
        >>> "age" in text
        False
    """
    config: PrintingConfig[T] = ObjectPrinter.for_(type(obj))
    if configure is not None:
        config = configure(config)
    return config.print_to_string(obj)


__all__ = [
    "ObjectPrinter",
    "print_to_string",
]
