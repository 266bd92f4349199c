"""
Assets Package

Bundled strategy board object tables and the loader that reads tables from
a configured source.
"""

from .loader import load_tables, load_module_tables, load_json_tables
