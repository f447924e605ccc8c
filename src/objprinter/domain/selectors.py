"""Bind member selectors to declared members of an owner type.

A selector names one member of the owner's member tree, either as a
callable (``lambda p: p.parent.name``) or as a dotted string
(``"parent.name"``). Callables are evaluated against a probe that only
allows attribute access to declared members, so a typo fails when the
configuration call is made instead of when something is printed.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .errors import ContractViolation
from .members import Member, find_member

Selector = Callable[[Any], Any] | str


@dataclass(frozen=True, slots=True)
class BoundMember:
    """A selector resolved against the owner's member tree.

    Attributes:
        owner: Root type the selector was written against.
        path: Members walked from the owner to the selected member.
    """

    owner: type
    path: tuple[Member, ...]

    @property
    def name(self) -> str:
        """Bare name of the selected member."""
        return self.path[-1].name

    @property
    def declared_type(self) -> Any:
        """Declared type of the selected member."""
        return self.path[-1].declared_type

    @property
    def dotted_path(self) -> str:
        """``parent.name`` style path from the owner."""
        return ".".join(member.name for member in self.path)


class _MemberProbe:
    """Stand-in for an owner instance that records member access."""

    __slots__ = ("_owner", "_path")

    def __init__(self, owner: type, path: tuple[Member, ...] = ()) -> None:
        object.__setattr__(self, "_owner", owner)
        object.__setattr__(self, "_path", path)

    def __getattr__(self, name: str) -> _MemberProbe:
        current = self._path[-1].declared_type if self._path else self._owner
        return _MemberProbe(self._owner, (*self._path, _step(current, name, self._owner)))

    def __setattr__(self, name: str, value: object) -> None:
        raise ContractViolation("Selectors must not assign to members")


def _step(current: Any, name: str, owner: type) -> Member:
    if not isinstance(current, type):
        raise ContractViolation(f"Cannot select {name!r} below member of type {current!r} in {owner.__name__}")
    member = find_member(current, name)
    if member is None:
        raise ContractViolation(f"{current.__name__} has no declared member {name!r}")
    return member


def _bind_dotted(owner: type, selector: str) -> tuple[Member, ...]:
    parts = selector.split(".")
    if not all(part.strip() for part in parts):
        raise ContractViolation(f"Invalid member path {selector!r}")
    path: list[Member] = []
    current: Any = owner
    for part in parts:
        member = _step(current, part.strip(), owner)
        path.append(member)
        current = member.declared_type
    return tuple(path)


def _bind_callable(owner: type, selector: Callable[[Any], Any]) -> tuple[Member, ...]:
    try:
        result = selector(_MemberProbe(owner))
    except ContractViolation:
        raise
    except (TypeError, AttributeError, ValueError) as exc:
        raise ContractViolation(f"Selector must only access declared members of {owner.__name__}: {exc}") from exc
    if not isinstance(result, _MemberProbe) or not result._path:
        raise ContractViolation(f"Selector must return a member of {owner.__name__}, got {result!r}")
    return result._path


def bind_selector(owner: type, selector: Selector) -> BoundMember:
    """Resolve ``selector`` against the members declared by ``owner``.

    Args:
        owner: Root type the printer was created for.
        selector: Callable taking an owner instance, or dotted member path.

    Returns:
        The bound member with its full path.

    Raises:
        ContractViolation: When the selector touches an undeclared member,
            does anything other than attribute access, or returns something
            that is not a member.

    Examples:
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Box:
        ...     label: str
        ...     inner: "Box | None" = None
        >>> bind_selector(Box, lambda b: b.inner.label).dotted_path
        'inner.label'
        >>> bind_selector(Box, "label").declared_type
        <class 'str'>
    """
    if isinstance(selector, str):
        path = _bind_dotted(owner, selector)
    elif callable(selector):
        path = _bind_callable(owner, selector)
    else:
        raise ContractViolation(f"Unsupported selector {selector!r}")
    return BoundMember(owner=owner, path=path)


__all__ = [
    "BoundMember",
    "Selector",
    "bind_selector",
]
