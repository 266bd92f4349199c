#!/usr/bin/env python3
"""
Sprite Parameter Projector

Joins the sprite parameter table with the enumeration table into one
ordered list of object descriptors.

Each descriptor is built as:
    {"id": <parsed key>, "name": <enumeration name>, **record}

Record fields are copied after id/name, so a record field literally named
"id" or "name" overrides the derived value (later writer wins). The key
keeps its first position in the output object.
"""

from typing import Any, Dict, List, Mapping, Optional

from asset_compiler.utils import logWarning, logDebug
from .errors import MalformedIdentifier, MissingEnumerationEntry
from .identifiers import parse_identifier, is_numeric_identifier
from .enumeration import NOT_FOUND, lookup_name

SpriteDescriptor = Dict[str, Any]


def build_descriptor(sprite_id: Optional[int], name: str,
                     record: Mapping[str, Any]) -> SpriteDescriptor:
    """
    Build one descriptor from its id, name and parameter record.

    Args:
        sprite_id: Parsed identifier (None for a non-numeric key)
        name: Display name from the enumeration table
        record: Sprite parameter fields, copied through unchanged

    Returns:
        New descriptor dictionary
    """
    descriptor: SpriteDescriptor = {}
    descriptor['id'] = sprite_id
    descriptor['name'] = name
    for field_name, value in record.items():
        descriptor[field_name] = value
    return descriptor


def project(parameters: Mapping[str, Mapping[str, Any]],
            enumeration: Mapping[str, str],
            strict_ids: bool = False) -> List[SpriteDescriptor]:
    """
    Project the parameter table into descriptors, in table order.

    Args:
        parameters: Identifier -> sprite parameter record
        enumeration: Identifier -> display name (see build_enumeration_table)
        strict_ids: Raise MalformedIdentifier for non-numeric keys instead
            of emitting a null id

    Returns:
        One descriptor per parameter entry

    Raises:
        MissingEnumerationEntry: A key has no enumeration name
        MalformedIdentifier: A key is non-numeric and strict_ids is set
    """
    descriptors = []

    for key, record in parameters.items():
        sprite_id = parse_identifier(key)
        if sprite_id is None:
            if strict_ids:
                raise MalformedIdentifier(key)
            logWarning(f"Identifier {key!r} is not numeric, emitting null id")
        elif not is_numeric_identifier(key):
            logWarning(f"Identifier {key!r} parsed as {sprite_id}")

        name = lookup_name(enumeration, key)
        if name is NOT_FOUND:
            raise MissingEnumerationEntry(key)

        logDebug(f"{key} -> {name} ({len(record)} fields)")
        descriptors.append(build_descriptor(sprite_id, name, record))

    return descriptors
