"""
Descriptor JSON Writer

Serializes the projected descriptors to one compact JSON array and writes
it out. Serialization always completes before anything is written, so a
failure never leaves partial JSON behind.
"""

import json
import sys
from pathlib import Path
from typing import List, Optional

from asset_compiler.constants import JSON_SEPARATORS
from asset_compiler.extraction.errors import SerializationFailure
from asset_compiler.extraction.projector import SpriteDescriptor


def serialize(descriptors: List[SpriteDescriptor]) -> str:
    """
    Serialize descriptors to compact JSON.

    Array order and object key order are preserved. Non-ASCII text is
    written as-is.

    Raises:
        SerializationFailure: A value is not JSON-serializable (including NaN/inf)
    """
    try:
        return json.dumps(descriptors, separators=JSON_SEPARATORS,
                          ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationFailure(f"Cannot serialize descriptors: {e}") from e


def write_output(text: str, output_path: Optional[Path] = None) -> None:
    """
    Write serialized JSON plus a trailing newline.

    Args:
        text: Serialized JSON document
        output_path: Destination file; None writes to stdout
    """
    if output_path is None:
        sys.stdout.write(text + "\n")
        sys.stdout.flush()
        return

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(text + "\n")
