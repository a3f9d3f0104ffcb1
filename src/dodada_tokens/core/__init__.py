"""Core token functionality: IR, loading, merging, resolution, naming, collection, themes."""

from . import ir
from .collector import collect_all, collect_categories, group_by_category
from .errors import (
    DimensionParseError,
    ErrorContext,
    IdentifierCollisionError,
    ManifestError,
    SourceError,
    ThemeNotFoundError,
    TokenBuildError,
)
from .loader import load_source, load_sources
from .manifest import BuildManifest, find_manifest, load_manifest
from .merger import merge, merge_sources, normalize, tree_to_json
from .naming import identifier_for, safe_segment
from .resolver import ReferenceIssue, find_cycles, find_reference_issues, resolve
from .text_styles import collect_text_styles
from .themes import materialize

__all__ = [
    "ir",
    "TokenBuildError",
    "SourceError",
    "ManifestError",
    "IdentifierCollisionError",
    "DimensionParseError",
    "ThemeNotFoundError",
    "ErrorContext",
    "load_source",
    "load_sources",
    "BuildManifest",
    "load_manifest",
    "find_manifest",
    "merge",
    "merge_sources",
    "normalize",
    "tree_to_json",
    "resolve",
    "ReferenceIssue",
    "find_reference_issues",
    "find_cycles",
    "safe_segment",
    "identifier_for",
    "collect_all",
    "group_by_category",
    "collect_categories",
    "collect_text_styles",
    "materialize",
]
