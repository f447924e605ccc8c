"""Override builders returned by ``PrintingConfig.printing*``.

A builder captures one targeted customisation (a type, or a property bound
by a selector) and writes it into its engine on the terminal call, handing
the engine back for further chaining. Which terminal calls exist depends on
the bound type:

* every builder has :meth:`PropertyPrintingConfig.using`;
* numeric builders add :meth:`NumericPropertyPrintingConfig.using_culture`;
* text builders add :meth:`StringPropertyPrintingConfig.trimmed_to_length`.

Builders are single-use.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from .culture import CultureLike, is_numeric_type
from .errors import ContractViolation
from .selectors import BoundMember

if TYPE_CHECKING:
    from .printing import PrintingConfig

TOwner = TypeVar("TOwner")
TProp = TypeVar("TProp")


class PropertyPrintingConfig(Generic[TOwner, TProp]):
    """Override builder for a type or for one property.

    Args:
        config: Engine the override is written into.
        declared_type: Type the builder is bound to.
        member: Bound property, or ``None`` for a type-level override.
    """

    __slots__ = ("_config", "_consumed", "_declared_type", "_member")

    def __init__(
        self,
        config: PrintingConfig[TOwner],
        declared_type: Any,
        member: BoundMember | None = None,
    ) -> None:
        self._config = config
        self._declared_type = declared_type
        self._member = member
        self._consumed = False

    @property
    def declared_type(self) -> Any:
        """Type this builder is bound to."""
        return self._declared_type

    @property
    def property_name(self) -> str | None:
        """Bound property name, ``None`` for type-level builders."""
        return self._member.name if self._member is not None else None

    @property
    def consumed(self) -> bool:
        """Whether a terminal call already wrote this override."""
        return self._consumed

    def _consume(self) -> PrintingConfig[TOwner]:
        if self._consumed:
            target = self.property_name or getattr(self._declared_type, "__name__", repr(self._declared_type))
            raise ContractViolation(f"Override for {target} was already applied")
        self._consumed = True
        return self._config

    def using(self, formatter: Callable[[TProp], object]) -> PrintingConfig[TOwner]:
        """Print the bound property or type with ``formatter``.

        A property-level formatter takes precedence over a type-level one
        for the same member.

        Example:
            >>> from objprinter.domain.samples import Person
            >>> from objprinter.domain.object_printer import ObjectPrinter
            >>> printer = ObjectPrinter.for_(Person).printing_type(int).using(lambda i: f"{i} year")
            >>> "age = 16 year" in printer.print_to_string(Person(name="Alex", age=16))
            True
        """
        config = self._consume()
        if self._member is not None:
            return config.add_property_formatter(self._member.name, formatter)
        return config.add_type_formatter(self._declared_type, formatter)


class NumericPropertyPrintingConfig(PropertyPrintingConfig[TOwner, TProp]):
    """Builder bound to ``int``, ``float`` or ``Decimal``."""

    __slots__ = ()

    def using_culture(self, culture: CultureLike) -> PrintingConfig[TOwner]:
        """Format every member declared with the bound type under ``culture``.

        The culture is registered for the bound *type*, also when the
        builder was created for a single property.

        Example:
            >>> from objprinter.domain.samples import Person
            >>> from objprinter.domain.object_printer import ObjectPrinter
            >>> printer = ObjectPrinter.for_(Person).printing_type(float).using_culture("ru_RU")
            >>> "height = 167,8" in printer.print_to_string(Person(name="Alex", height=167.8))
            True
        """
        return self._consume().use_culture(self._declared_type, culture)


class StringPropertyPrintingConfig(PropertyPrintingConfig[TOwner, str]):
    """Builder bound to ``str``."""

    __slots__ = ()

    def trimmed_to_length(self, max_length: int) -> PrintingConfig[TOwner]:
        """Cut every printed string to ``max_length`` characters.

        The length applies to all strings printed by the engine, not only
        the bound property. It is validated while printing: a negative
        length, or one longer than the printed string, raises
        :class:`~objprinter.domain.errors.OutOfRangeError` then.
        """
        return self._consume().set_max_string_length(max_length)


def create_property_config(
    config: PrintingConfig[TOwner],
    declared_type: Any,
    member: BoundMember | None = None,
) -> PropertyPrintingConfig[TOwner, Any]:
    """Pick the builder class matching ``declared_type``."""
    if isinstance(declared_type, type) and issubclass(declared_type, str):
        return StringPropertyPrintingConfig(config, declared_type, member)
    if is_numeric_type(declared_type):
        return NumericPropertyPrintingConfig(config, declared_type, member)
    return PropertyPrintingConfig(config, declared_type, member)


__all__ = [
    "NumericPropertyPrintingConfig",
    "PropertyPrintingConfig",
    "StringPropertyPrintingConfig",
    "create_property_config",
]
