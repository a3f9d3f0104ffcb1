"""
Token IR types.

Re-exports the tree node types and the flattened token records.
"""

from .tokens import DEFAULT_TOKEN_TYPE, CategoryMap, FlatToken, FontSpec, TextStyle
from .tree import (
    Reference,
    TokenGroup,
    TokenLeaf,
    TokenNode,
    is_reference_string,
    parse_reference,
)

__all__ = [
    # Tree
    "Reference",
    "TokenGroup",
    "TokenLeaf",
    "TokenNode",
    "is_reference_string",
    "parse_reference",
    # Flattened tokens
    "DEFAULT_TOKEN_TYPE",
    "CategoryMap",
    "FlatToken",
    "FontSpec",
    "TextStyle",
]
