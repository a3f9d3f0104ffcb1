"""
dodada-tokens - design token build pipeline.

Merges layered DTCG-style JSON token sources, resolves ``{a.b.c}``
references, and generates Swift, Kotlin, TypeScript, CSS and SCSS sources
plus iOS asset catalogs and resolved theme documents.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import (
    DimensionParseError,
    IdentifierCollisionError,
    ManifestError,
    SourceError,
    ThemeNotFoundError,
    TokenBuildError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokenBuildError",
    "SourceError",
    "ManifestError",
    "IdentifierCollisionError",
    "DimensionParseError",
    "ThemeNotFoundError",
]
