"""Type-safe domain enums for output formats and demo member types."""

from __future__ import annotations

from enum import Enum
from uuid import UUID


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class MemberType(str, Enum):
    """Declared member types of the sample graph, addressable by name.

    Lets command-line options refer to Python types (``--exclude-type uuid``)
    without evaluating arbitrary names.

    Example:
        >>> MemberType("float").python_type
        <class 'float'>
        >>> MemberType.UUID.python_type.__name__
        'UUID'
    """

    UUID = "uuid"
    STR = "str"
    INT = "int"
    FLOAT = "float"

    @property
    def python_type(self) -> type:
        """The Python type this member type stands for."""
        return _PYTHON_TYPES[self]


_PYTHON_TYPES: dict[MemberType, type] = {
    MemberType.UUID: UUID,
    MemberType.STR: str,
    MemberType.INT: int,
    MemberType.FLOAT: float,
}


__all__ = [
    "MemberType",
    "OutputFormat",
]
