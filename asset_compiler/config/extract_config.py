#!/usr/bin/env python3
"""
Extraction Configuration

Parser for the optional extraction INI file.

INI Format:
    [source]
    kind = module            ; module | json
    module = asset_compiler.assets.objects
    parameters = SPRITE_PARAMETERS
    enumeration = StrategyBoardObject
    path = tables.json       ; used when kind = json

    [output]
    path = assets.json       ; empty writes to stdout
    log = extract.log        ; empty logs to the console only

    [identifiers]
    strict = false

Every key is optional. A missing file yields the defaults.
"""

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from asset_compiler.constants import (
    DEFAULT_SOURCE_KIND,
    DEFAULT_SOURCE_MODULE,
    DEFAULT_PARAMETERS_ATTR,
    DEFAULT_ENUMERATION_ATTR,
    SOURCE_KINDS,
)
from asset_compiler.utils import logWarning


@dataclass
class SourceConfig:
    """Where the parameter and enumeration tables come from"""
    kind: str = DEFAULT_SOURCE_KIND
    module: str = DEFAULT_SOURCE_MODULE
    parameters: str = DEFAULT_PARAMETERS_ATTR  # Attribute holding the parameter table
    enumeration: str = DEFAULT_ENUMERATION_ATTR  # Attribute holding the enumeration
    path: Optional[Path] = None  # JSON table file

    def __post_init__(self):
        """Validate source configuration"""
        if self.kind not in SOURCE_KINDS:
            raise ValueError(f"Unknown source kind '{self.kind}' (expected one of {', '.join(SOURCE_KINDS)})")

        if self.kind == 'json' and self.path is None:
            raise ValueError("Source kind 'json' requires a path")


@dataclass
class ExtractConfig:
    """Full extraction configuration"""
    source: SourceConfig = field(default_factory=SourceConfig)
    output_path: Optional[Path] = None  # None writes to stdout
    log_path: Optional[Path] = None  # None logs to the console only
    strict_ids: bool = False

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> 'ExtractConfig':
        """
        Load configuration from an INI file.

        Args:
            config_path: Path to the INI file, or None for defaults
        """
        if config_path is None:
            return cls()

        config_path = Path(config_path)
        if not config_path.exists():
            logWarning(f"Config file not found: {config_path}, using defaults")
            return cls()

        parser = configparser.ConfigParser(inline_comment_prefixes=(';', '#'))
        parser.read(config_path, encoding='utf-8')

        base_dir = config_path.parent
        return cls(
            source=_parse_source(parser, base_dir),
            output_path=_optional_path(parser.get('output', 'path', fallback=''), base_dir),
            log_path=_optional_path(parser.get('output', 'log', fallback=''), base_dir),
            strict_ids=parser.getboolean('identifiers', 'strict', fallback=False),
        )


def _parse_source(parser: configparser.ConfigParser, base_dir: Path) -> SourceConfig:
    """Parse the [source] section"""
    return SourceConfig(
        kind=parser.get('source', 'kind', fallback=DEFAULT_SOURCE_KIND).strip().lower(),
        module=parser.get('source', 'module', fallback=DEFAULT_SOURCE_MODULE).strip(),
        parameters=parser.get('source', 'parameters', fallback=DEFAULT_PARAMETERS_ATTR).strip(),
        enumeration=parser.get('source', 'enumeration', fallback=DEFAULT_ENUMERATION_ATTR).strip(),
        path=_optional_path(parser.get('source', 'path', fallback=''), base_dir),
    )


def _optional_path(value: str, base_dir: Path) -> Optional[Path]:
    """Resolve a path relative to the config file, empty means unset"""
    value = value.strip()
    if not value:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return path
