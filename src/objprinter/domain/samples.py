"""Sample domain types used by the demo command, documentation and tests.

The printer knows nothing about these types; they only exercise it the way
any consumer would.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import UUID

#: Identifier shared by every sample person so the output is deterministic.
SAMPLE_PERSON_ID = UUID(int=0)


@dataclass
class Person:
    """A person with an optional parent of the same type.

    Attributes:
        id: Opaque identifier; printed as its type name since ``UUID``
            declares no typed members.
        name: Display name.
        height: Height in centimetres.
        age: Age in years.
        parent: Optional parent, used to exercise nesting.
    """

    id: UUID = field(default_factory=lambda: SAMPLE_PERSON_ID)
    name: str | None = None
    height: float = 0.0
    age: int = 0
    parent: Person | None = None


def build_sample_person(*, with_parent: bool = True) -> Person:
    """Return the canonical sample graph printed by the demo command.

    Args:
        with_parent: Attach a parent person one level deep.

    Returns:
        ``Anna`` (17, 178.8 cm), optionally with parent ``Ivan`` (54, 168.9 cm).

    Example:
        >>> build_sample_person().parent.name
        'Ivan'
        >>> build_sample_person(with_parent=False).parent is None
        True
    """
    parent = Person(name="Ivan", height=168.9, age=54) if with_parent else None
    return Person(name="Anna", height=178.8, age=17, parent=parent)


__all__ = [
    "SAMPLE_PERSON_ID",
    "Person",
    "build_sample_person",
]
