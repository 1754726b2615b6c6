"""
Language Reference (langref) Package

Builds cross-language comparison tables for a human-readable reference
manual: "how do I print / loop / open a file / call an API in X?"

ARCHITECTURAL GUARANTEE:
------------------------
The model layer contains ZERO knowledge of:
    - Markdown syntax
    - Input file formats (YAML, JSON, CSV)
    - What the snippets mean or whether they compile

This package defines DOCUMENT STRUCTURE only.

Loading happens in the input layers (serialization, csv_parser).
Validation happens once, in the Entry Store (store).
All backends consume the validated Document unchanged.
"""

__version__ = "0.1.0"
