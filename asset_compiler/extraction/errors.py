"""
Extraction Errors

Failure conditions raised while projecting the sprite parameter table.
"""

from typing import Optional


class ExtractionError(Exception):
    """Base exception for asset extraction failures."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.key = key


class MalformedIdentifier(ExtractionError):
    """Identifier key has no leading decimal digits."""

    def __init__(self, key: str):
        super().__init__(f"Identifier {key!r} is not a base-10 number", key)


class MissingEnumerationEntry(ExtractionError):
    """Identifier key has no name in the enumeration table."""

    def __init__(self, key: str):
        super().__init__(f"No enumeration entry for identifier {key!r}", key)


class SerializationFailure(ExtractionError):
    """Descriptors could not be serialized to JSON."""
    pass


class TableSourceError(ExtractionError):
    """Parameter or enumeration table could not be loaded."""
    pass
