"""Reflective member discovery for arbitrary composite types.

The printer never knows the types it prints. Everything it needs about a
type (member names, declared types, how to read a value) comes from
:func:`describe_members`, which reads class annotations and annotated
properties the same way for dataclasses, attrs classes and plain annotated
classes.

Contents:
    * :class:`MemberKind` - Where a member value comes from.
    * :class:`Member` - Name, declared type and accessor of one member.
    * :func:`describe_members` - Ordered, cached member table of a type.
    * :func:`normalize_declared_type` - Strip ``Optional``/``Annotated`` wrappers.
"""

from __future__ import annotations

import inspect
import sys
import types
import typing
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Any, ClassVar

from .errors import ContractViolation


class MemberKind(str, Enum):
    """Source of a member value.

    Attributes:
        ATTRIBUTE: Annotated instance attribute (dataclass field, plain annotation).
        PROPERTY: ``property`` whose getter declares a return type.
    """

    ATTRIBUTE = "attribute"
    PROPERTY = "property"


@dataclass(frozen=True, slots=True)
class Member:
    """One public, typed, readable member of a composite type.

    Attributes:
        name: Attribute name as written in the class body.
        declared_type: Normalised declared type used for exclusion and
            formatter lookups.
        kind: Whether the value is read from an attribute or a property.
    """

    name: str
    declared_type: Any
    kind: MemberKind = MemberKind.ATTRIBUTE

    def get(self, obj: object) -> Any:
        """Read this member from ``obj``.

        An annotated attribute that was never assigned reads as ``None``;
        properties are evaluated as-is so their own errors surface.
        """
        if self.kind is MemberKind.PROPERTY:
            return getattr(obj, self.name)
        return getattr(obj, self.name, None)


_NONE_TYPE = type(None)


def normalize_declared_type(annotation: Any) -> Any:
    """Reduce an annotation to the type used for configuration lookups.

    Examples:
        >>> normalize_declared_type(int | None)
        <class 'int'>
        >>> from typing import Annotated, Optional
        >>> normalize_declared_type(Optional[Annotated[str, "label"]])
        <class 'str'>
        >>> normalize_declared_type(int | str)
        int | str
    """
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return normalize_declared_type(typing.get_args(annotation)[0])
    if origin is typing.Union or origin is types.UnionType:
        args = [arg for arg in typing.get_args(annotation) if arg is not _NONE_TYPE]
        if len(args) == 1:
            return normalize_declared_type(args[0])
    return annotation


def _is_class_var(annotation: Any) -> bool:
    return annotation is ClassVar or typing.get_origin(annotation) is ClassVar


def _lenient_hints(klass: type, owner: type) -> dict[str, Any]:
    """Evaluate the annotations of ``klass`` one by one, dropping unresolvable ones."""
    module = sys.modules.get(klass.__module__)
    globalns = dict(vars(module)) if module is not None else {}
    localns = {owner.__name__: owner, klass.__name__: klass}
    resolved: dict[str, Any] = {}
    for name, annotation in inspect.get_annotations(klass).items():
        if isinstance(annotation, str):
            try:
                annotation = eval(annotation, globalns, localns)  # noqa: S307
            except (NameError, AttributeError, SyntaxError, TypeError):
                continue
        resolved[name] = annotation
    return resolved


def _hints_by_class(owner: type, *, strict: bool) -> dict[type, dict[str, Any]]:
    try:
        hints = typing.get_type_hints(owner, localns={owner.__name__: owner}, include_extras=True)
    except (NameError, TypeError) as exc:
        if strict:
            raise ContractViolation(f"Cannot resolve annotations of {owner.__name__}: {exc}") from exc
        return {klass: _lenient_hints(klass, owner) for klass in owner.__mro__}
    return {klass: hints for klass in owner.__mro__}


def _property_type(prop: property, *, strict: bool) -> Any:
    # C-level getters (operator.attrgetter on pathlib.PurePath) carry no annotations.
    if not inspect.isfunction(prop.fget):
        return None
    try:
        hints = typing.get_type_hints(prop.fget, include_extras=True)
    except (NameError, TypeError) as exc:
        if strict:
            raise ContractViolation(
                f"Cannot resolve return annotation of {prop.fget.__qualname__}: {exc}"
            ) from exc
        return None
    return hints.get("return")


@lru_cache(maxsize=256)
def describe_members(owner: type, *, strict: bool = True) -> tuple[Member, ...]:
    """Return the public typed members of ``owner`` in declaration order.

    Walks the MRO from the most generic base down to ``owner``; within one
    class, annotated attributes and annotated properties appear in the
    order they are written. A name redefined lower in the hierarchy keeps
    its first position and takes the newest declared type.

    Args:
        owner: Any class.
        strict: Raise on annotations that do not resolve. With ``False``
            such members are left out, which is what rendering needs for
            types met below the root.

    Returns:
        Tuple of :class:`Member` descriptors. Types without typed members
        (``uuid.UUID``, ``object``, ``pathlib.Path``) yield an empty tuple.

    Raises:
        ContractViolation: In strict mode, when an annotation refers to a
            name that cannot be resolved.

    Example:
        >>> from dataclasses import dataclass
        >>> @dataclass
        ... class Point:
        ...     x: int
        ...     y: float | None = None
        >>> [(m.name, m.declared_type) for m in describe_members(Point)]
        [('x', <class 'int'>), ('y', <class 'float'>)]
    """
    hints_by_class = _hints_by_class(owner, strict=strict)
    collected: dict[str, Member] = {}

    for klass in reversed(owner.__mro__):
        if klass is object:
            continue
        hints = hints_by_class[klass]
        for name in inspect.get_annotations(klass):
            if name.startswith("_") or name not in hints or _is_class_var(hints[name]):
                continue
            collected[name] = Member(name, normalize_declared_type(hints[name]))
        for name, attr in vars(klass).items():
            if name.startswith("_") or not isinstance(attr, property):
                continue
            declared = _property_type(attr, strict=strict)
            if declared is None:
                continue
            collected[name] = Member(name, normalize_declared_type(declared), MemberKind.PROPERTY)

    return tuple(collected.values())


def find_member(owner: type, name: str) -> Member | None:
    """Look up a single member of ``owner`` by name."""
    for member in describe_members(owner):
        if member.name == name:
            return member
    return None


__all__ = [
    "Member",
    "MemberKind",
    "describe_members",
    "find_member",
    "normalize_declared_type",
]
