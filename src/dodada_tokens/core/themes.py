"""
Theme materialization.

Resolves a whole theme subtree (e.g. ``theme.main`` with its component
overrides) into plain JSON data where every leaf value is the end of its
reference chain, and flattens component subtrees into named properties.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .errors import ThemeNotFoundError
from .ir.tokens import DEFAULT_TOKEN_TYPE
from .ir.tree import TokenGroup, TokenLeaf, TokenNode
from .merger import leaf_to_json
from .naming import check_unique, identifier_for
from .resolver import resolve

logger = logging.getLogger(__name__)


def _split(theme_path: str | tuple[str, ...]) -> tuple[str, ...]:
    if isinstance(theme_path, str):
        return tuple(p for p in theme_path.split(".") if p)
    return tuple(theme_path)


def _materialize_node(tree: TokenGroup, node: TokenNode) -> dict[str, Any]:
    if isinstance(node, TokenLeaf):
        return leaf_to_json(node, resolve(tree, node.value))
    return {key: _materialize_node(tree, child) for key, child in node.children.items()}


def materialize(tree: TokenGroup, theme_path: str | tuple[str, ...]) -> dict[str, Any]:
    """Resolve a theme subtree into plain data.

    Args:
        tree: Normalized token tree.
        theme_path: Dot path (``"theme.main"``) or segments of the theme root.

    Returns:
        Nested dict with ``{value, type?, comment?}`` leaves, values resolved.

    Raises:
        ThemeNotFoundError: If the path does not exist or is a single token.
    """
    segments = _split(theme_path)
    node = tree.find(segments)
    if not isinstance(node, TokenGroup):
        raise ThemeNotFoundError(f"Theme not found: {'.'.join(segments)}")
    return _materialize_node(tree, node)


@dataclass(frozen=True)
class ThemeProperty:
    """One resolved leaf of a theme component, named by its joined path."""

    name: str
    path: str
    value: Any
    type: str


def _is_leaf_data(node: Any) -> bool:
    return isinstance(node, dict) and "value" in node


def theme_properties(component: dict[str, Any]) -> list[ThemeProperty]:
    """Flatten a materialized component into properties.

    ``{"primary": {"background": {"default": {...}}}}`` yields a property
    named ``primaryBackgroundDefault``.
    """
    props: list[ThemeProperty] = []

    def walk(node: dict[str, Any], segments: tuple[str, ...]) -> None:
        if _is_leaf_data(node):
            props.append(
                ThemeProperty(
                    name=identifier_for(segments),
                    path=".".join(segments),
                    value=node["value"],
                    type=node.get("type") or DEFAULT_TOKEN_TYPE,
                )
            )
            return
        for key, child in node.items():
            if isinstance(child, dict):
                walk(child, (*segments, key))

    walk(component, ())
    check_unique("theme", ((p.name, p.path) for p in props))
    return props


def theme_components(materialized: dict[str, Any]) -> dict[str, list[ThemeProperty]]:
    """Component name → flattened properties, for every group under a theme."""
    components = {}
    for name, node in materialized.items():
        if isinstance(node, dict) and not _is_leaf_data(node):
            props = theme_properties(node)
            if props:
                components[name] = props
    return components
