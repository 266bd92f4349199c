"""
Serialization Package

Handles JSON output of the projected object descriptors.
This is the final phase of extraction - nothing is written before the whole
document has been serialized.
"""

from .json_writer import serialize, write_output
