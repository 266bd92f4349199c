"""
Asset Compiler

Build-time extraction of strategy board object metadata.
"""

__version__ = "0.1.0"
