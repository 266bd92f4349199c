#!/usr/bin/env python3
"""
Table Loader

Loads the sprite parameter table and its enumeration from a table source.

Source kinds:
- module: import a Python module and read two attributes from it
- json:   read a JSON file holding {"parameters": {...}, "enumeration": {...}}

The enumeration is returned as found (Enum class or mapping); callers turn
it into a lookup table with build_enumeration_table().
"""

import importlib
import json
from pathlib import Path
from typing import Any, Mapping, Tuple

from asset_compiler.constants import JSON_PARAMETERS_KEY, JSON_ENUMERATION_KEY
from asset_compiler.config import SourceConfig
from asset_compiler.extraction.errors import TableSourceError
from asset_compiler.utils import log


def load_tables(source: SourceConfig) -> Tuple[Mapping[str, Any], Any]:
    """
    Load (parameters, enumeration) from the configured source.

    Raises:
        TableSourceError: The source or one of its tables is missing
    """
    if source.kind == 'module':
        return load_module_tables(source.module, source.parameters, source.enumeration)
    if source.kind == 'json':
        if source.path is None:
            raise TableSourceError("JSON table source has no path")
        return load_json_tables(source.path)
    raise TableSourceError(f"Unknown table source kind: {source.kind}")


def load_module_tables(module_name: str, parameters_attr: str,
                       enumeration_attr: str) -> Tuple[Mapping[str, Any], Any]:
    """Read the two tables from attributes of a Python module."""
    log(f"Table source: module {module_name}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise TableSourceError(f"Cannot import table module {module_name}: {e}") from e

    tables = []
    for attr in (parameters_attr, enumeration_attr):
        if not hasattr(module, attr):
            raise TableSourceError(f"Module {module_name} has no attribute {attr}")
        tables.append(getattr(module, attr))

    parameters, enumeration = tables
    if not isinstance(parameters, Mapping):
        raise TableSourceError(f"{module_name}.{parameters_attr} is not a mapping")

    return parameters, enumeration


def load_json_tables(json_path: Path) -> Tuple[Mapping[str, Any], Any]:
    """Read the two tables from a JSON file."""
    json_path = Path(json_path)
    log(f"Table source: {json_path}")
    if not json_path.exists():
        raise TableSourceError(f"Table file not found: {json_path}")

    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise TableSourceError(f"Invalid JSON in {json_path}: {e}") from e

    if not isinstance(data, dict):
        raise TableSourceError(f"{json_path} does not hold a JSON object")

    for key in (JSON_PARAMETERS_KEY, JSON_ENUMERATION_KEY):
        if not isinstance(data.get(key), dict):
            raise TableSourceError(f"{json_path} has no '{key}' object")

    return data[JSON_PARAMETERS_KEY], data[JSON_ENUMERATION_KEY]
