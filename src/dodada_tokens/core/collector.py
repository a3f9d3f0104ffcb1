"""
Token collection.

Flattens the normalized tree into FlatToken records, one per leaf, and
groups them by category in traversal order. ``font`` and ``typography``
fan out into the virtual categories ``fontFamily``, ``fontWeight``,
``fontSize`` and ``lineHeight``; the ``typography.text`` subtree is left to
the text-style collector.
"""

from __future__ import annotations

import logging

from .ir.tokens import DEFAULT_TOKEN_TYPE, CategoryMap, FlatToken
from .ir.tree import TokenGroup, TokenLeaf, TokenNode
from .naming import check_unique, identifier_for
from .resolver import resolve

logger = logging.getLogger(__name__)

# category -> [(subtree key, virtual category)]
VIRTUAL_CATEGORIES: dict[str, list[tuple[str, str]]] = {
    "font": [("family", "fontFamily"), ("weight", "fontWeight")],
    "typography": [("size", "fontSize"), ("lineHeight", "lineHeight")],
}


def _collect(
    tree: TokenGroup,
    node: TokenNode,
    category: str,
    segments: tuple[str, ...],
    out: list[FlatToken],
) -> None:
    if isinstance(node, TokenLeaf):
        out.append(
            FlatToken(
                category=category,
                path=".".join(segments),
                path_segments=segments,
                identifier=identifier_for(segments),
                value=resolve(tree, node.value),
                type=node.type or DEFAULT_TOKEN_TYPE,
            )
        )
        return
    for key, child in node.children.items():
        _collect(tree, child, category, (*segments, key), out)


def collect_all(tree: TokenGroup) -> list[FlatToken]:
    """Flatten every category of the tree into resolved tokens.

    Args:
        tree: Normalized token tree.

    Returns:
        Tokens in traversal order.
    """
    out: list[FlatToken] = []
    for category, node in tree.children.items():
        if category in VIRTUAL_CATEGORIES:
            if not isinstance(node, TokenGroup):
                logger.warning("Expected '%s' to be a group, skipping", category)
                continue
            for key, virtual in VIRTUAL_CATEGORIES[category]:
                subtree = node.get(key)
                if subtree is not None:
                    _collect(tree, subtree, virtual, (key,), out)
            continue
        if isinstance(node, TokenLeaf):
            logger.warning("Top-level token '%s' has no category, skipping", category)
            continue
        _collect(tree, node, category, (), out)
    return out


def group_by_category(tokens: list[FlatToken]) -> CategoryMap:
    """Group tokens by category, keeping first-seen order."""
    grouped: CategoryMap = {}
    for token in tokens:
        grouped.setdefault(token.category, []).append(token)
    return grouped


def check_identifiers(categories: CategoryMap) -> None:
    """Raise IdentifierCollisionError if any category has duplicate identifiers."""
    for category, tokens in categories.items():
        check_unique(category, ((t.identifier, t.path) for t in tokens))


def collect_categories(tree: TokenGroup) -> CategoryMap:
    """Collect, group, and check identifiers in one step."""
    categories = group_by_category(collect_all(tree))
    check_identifiers(categories)
    logger.debug(
        "Collected %d tokens in %d categories",
        sum(len(t) for t in categories.values()),
        len(categories),
    )
    return categories
