"""
Identifier Parsing

Converts the numeric-string keys of the sprite parameter table to integer ids.
"""

import re
from typing import Optional

# Optional leading whitespace, optional sign, then the digit run.
# Anything after the first non-digit is ignored.
_LEADING_INT = re.compile(r'\s*([+-]?[0-9]+)')
_PLAIN_INT = re.compile(r'[+-]?[0-9]+')


def parse_identifier(key: str) -> Optional[int]:
    """
    Parse the leading base-10 integer of a key.

    Args:
        key: Identifier string from the parameters table

    Returns:
        The parsed integer, or None if the key has no leading digits
    """
    match = _LEADING_INT.match(key)
    if match is None:
        return None
    return int(match.group(1))


def is_numeric_identifier(key: str) -> bool:
    """True if the whole key is a plain base-10 integer."""
    return _PLAIN_INT.fullmatch(key) is not None
