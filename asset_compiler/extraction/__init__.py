"""
Extraction Package

Read-only projection of the sprite parameter table into object descriptors.
No file I/O happens here: tables come in, a list of descriptors goes out.
"""

from .errors import (
    ExtractionError,
    MalformedIdentifier,
    MissingEnumerationEntry,
    SerializationFailure,
    TableSourceError,
)
from .identifiers import parse_identifier, is_numeric_identifier
from .enumeration import NOT_FOUND, name_text, build_enumeration_table, lookup_name
from .projector import build_descriptor, project
