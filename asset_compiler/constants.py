"""
Constants used across the asset compiler modules.

Consolidates the default table source and output settings.
"""

# Default table source: the bundled strategy board object table
DEFAULT_SOURCE_KIND = "module"
DEFAULT_SOURCE_MODULE = "asset_compiler.assets.objects"
DEFAULT_PARAMETERS_ATTR = "SPRITE_PARAMETERS"
DEFAULT_ENUMERATION_ATTR = "StrategyBoardObject"

# Supported table source kinds
SOURCE_KINDS = ("module", "json")

# Keys of the top-level object in a JSON table source
JSON_PARAMETERS_KEY = "parameters"
JSON_ENUMERATION_KEY = "enumeration"

# Compact JSON, matching the asset compiler's expected input
JSON_SEPARATORS = (",", ":")
