"""Member discovery: order, inheritance, properties, type normalisation."""

from __future__ import annotations

import pathlib
from dataclasses import dataclass
from typing import Annotated, ClassVar, Optional
from uuid import UUID

import pytest

from objprinter.domain.errors import ContractViolation
from objprinter.domain.members import MemberKind, describe_members, find_member, normalize_declared_type
from objprinter.domain.samples import Person


@dataclass
class Animal:
    name: str
    legs: int = 4


@dataclass
class Dog(Animal):
    breed: str = ""
    legs: int = 3


class Plain:
    label: str
    counter: ClassVar[int] = 0
    _secret: str = "hidden"

    def __init__(self, label: str) -> None:
        self.label = label


class Unresolvable:
    broken: "MissingType"  # noqa: F821


@pytest.mark.os_agnostic
def test_person_members_follow_declaration_order() -> None:
    """Fields are listed in the order they are written."""
    assert [m.name for m in describe_members(Person)] == ["id", "name", "height", "age", "parent"]


@pytest.mark.os_agnostic
def test_optional_members_are_normalised() -> None:
    """``str | None`` and ``Person | None`` are looked up as their inner type."""
    declared = {m.name: m.declared_type for m in describe_members(Person)}

    assert declared["name"] is str
    assert declared["parent"] is Person
    assert declared["id"] is UUID


@pytest.mark.os_agnostic
def test_inherited_members_keep_base_position_and_take_override() -> None:
    """A redefined field stays where the base declared it."""
    members = describe_members(Dog)

    assert [m.name for m in members] == ["name", "legs", "breed"]
    assert find_member(Dog, "legs") is not None


@pytest.mark.os_agnostic
def test_class_vars_and_private_names_are_skipped() -> None:
    """Only public instance annotations are members."""
    assert [m.name for m in describe_members(Plain)] == ["label"]


@pytest.mark.os_agnostic
def test_types_without_annotations_have_no_members() -> None:
    """UUID and builtins describe as empty."""
    assert describe_members(UUID) == ()
    assert describe_members(int) == ()


@pytest.mark.os_agnostic
def test_property_members_are_marked_as_properties() -> None:
    """Annotated properties carry MemberKind.PROPERTY."""

    class Circle:
        radius: float

        def __init__(self, radius: float) -> None:
            self.radius = radius

        @property
        def diameter(self) -> float:
            return self.radius * 2

    members = describe_members(Circle)

    assert [(m.name, m.kind) for m in members] == [
        ("radius", MemberKind.ATTRIBUTE),
        ("diameter", MemberKind.PROPERTY),
    ]
    assert members[1].get(Circle(1.5)) == 3.0


@pytest.mark.os_agnostic
def test_unassigned_attribute_reads_as_none() -> None:
    """An annotated attribute never assigned reads as None."""

    class Sparse:
        value: int

    member = describe_members(Sparse)[0]

    assert member.get(Sparse()) is None


@pytest.mark.os_agnostic
def test_unresolvable_annotations_raise_contract_violation() -> None:
    """Forward references to unknown names fail loudly."""
    with pytest.raises(ContractViolation, match="Unresolvable"):
        describe_members(Unresolvable)


@pytest.mark.os_agnostic
def test_lenient_lookup_skips_unresolvable_annotations() -> None:
    """strict=False leaves out members whose annotation does not resolve."""
    assert describe_members(Unresolvable, strict=False) == ()


@pytest.mark.os_agnostic
def test_properties_without_python_getters_are_not_members() -> None:
    """pathlib builds properties from operator.attrgetter; they carry no annotations."""
    names = [m.name for m in describe_members(type(pathlib.Path("x")), strict=False)]

    assert "drive" not in names
    assert "root" not in names


@pytest.mark.os_agnostic
def test_find_member_returns_none_for_unknown_names() -> None:
    """Lookups of undeclared names return None."""
    assert find_member(Person, "nickname") is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("annotation", "expected"),
    [
        (Optional[int], int),
        (Annotated[float, "cm"], float),
        (Optional[Annotated[str, "label"]], str),
        (int | None, int),
        (str, str),
    ],
)
def test_normalize_declared_type_unwraps(annotation: object, expected: type) -> None:
    """Optional and Annotated wrappers are removed."""
    assert normalize_declared_type(annotation) is expected


@pytest.mark.os_agnostic
def test_normalize_keeps_real_unions() -> None:
    """A union of two real types is left alone."""
    assert normalize_declared_type(int | str) == int | str
