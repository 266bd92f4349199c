#!/usr/bin/env python3
"""
Config module for extraction configuration handling.
"""

from .extract_config import ExtractConfig, SourceConfig

__all__ = ['ExtractConfig', 'SourceConfig']
