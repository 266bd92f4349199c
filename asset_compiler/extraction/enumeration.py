"""
Enumeration Table

Builds the identifier -> name table used to name each descriptor.

The source may be an Enum class (member value is the identifier, member
name is the display name) or any mapping of identifier -> name.

When several Enum members share a value, the last one defined names it,
the same as a reverse lookup table filled in definition order.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Union

EnumerationSource = Union[type, Mapping[Any, Any]]


class _NotFound:
    """Sentinel returned by lookup_name for unknown identifiers."""

    def __repr__(self):
        return "NOT_FOUND"


NOT_FOUND = _NotFound()


def name_text(value: Any) -> str:
    """
    Textual form of an enumeration value.

    Enum members use their member name, everything else uses str().
    """
    if isinstance(value, Enum):
        return value.name
    return str(value)


def build_enumeration_table(source: EnumerationSource) -> Dict[str, str]:
    """
    Build an explicit identifier -> name table.

    Args:
        source: Enum class or mapping of identifier -> name

    Returns:
        Dictionary keyed by identifier string
    """
    if isinstance(source, type) and issubclass(source, Enum):
        table = {}
        # __members__ includes aliases; later definitions overwrite earlier ones
        for member_name, member in source.__members__.items():
            table[str(member.value)] = member_name
        return table

    if isinstance(source, Mapping):
        return {str(key): name_text(value) for key, value in source.items()}

    raise TypeError(f"Unsupported enumeration source: {type(source).__name__}")


def lookup_name(table: Mapping[str, str], key: str) -> Union[str, _NotFound]:
    """
    Look up the display name of an identifier.

    Returns:
        The name string, or NOT_FOUND if the identifier is unknown
    """
    return table.get(key, NOT_FOUND)
