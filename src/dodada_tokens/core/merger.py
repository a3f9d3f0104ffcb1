"""
Token tree merger.

Combines N source documents into one tree (right-biased deep merge), then
normalizes it into TokenLeaf/TokenGroup nodes. Token nodes are recognized
by a ``$value`` (DTCG form) or ``value`` (normalized form) key; every other
object is a container. Keys starting with ``$`` are metadata and are
dropped at every level.

Conflict policy:
- container + container: merged recursively
- leaf + leaf: the later source wins
- leaf + container (either order): the leaf wins, the container is
  discarded with a warning
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable
from typing import Any

from .errors import SourceError
from .ir.tree import Reference, TokenGroup, TokenLeaf, TokenNode, parse_reference

logger = logging.getLogger(__name__)

METADATA_SIGIL = "$"

_UNSET: Any = object()


def _is_leaf(node: Any) -> bool:
    return isinstance(node, dict) and ("$value" in node or "value" in node)


def _is_container(node: Any) -> bool:
    return isinstance(node, dict) and not _is_leaf(node)


def _dotted(path: list[str]) -> str:
    return ".".join(path) or "<root>"


def _merge_into(target: dict[str, Any], source: dict[str, Any], path: list[str]) -> None:
    for key, incoming in source.items():
        if key.startswith(METADATA_SIGIL):
            continue
        key_path = [*path, key]
        existing = target.get(key)

        if _is_container(incoming):
            if _is_container(existing):
                _merge_into(existing, incoming, key_path)
            elif _is_leaf(existing):
                logger.warning(
                    "Merge conflict at %s: token kept, group from later source discarded",
                    _dotted(key_path),
                )
            else:
                target[key] = {}
                _merge_into(target[key], incoming, key_path)
        elif _is_leaf(incoming):
            if _is_container(existing):
                logger.warning(
                    "Merge conflict at %s: group replaced by token from later source",
                    _dotted(key_path),
                )
            elif existing is not None:
                logger.debug("Token %s overridden by later source", _dotted(key_path))
            target[key] = copy.deepcopy(incoming)
        else:
            if _is_container(existing):
                logger.warning(
                    "Ignoring non-token value at %s: group already defined",
                    _dotted(key_path),
                )
                continue
            target[key] = copy.deepcopy(incoming)


def merge_sources(documents: Iterable[dict[str, Any]]) -> dict[str, Any]:
    """Deep-merge raw source documents in order, without normalizing.

    Inputs are not modified.
    """
    merged: dict[str, Any] = {}
    for document in documents:
        _merge_into(merged, document or {}, [])
    return merged


def _normalize_leaf(node: dict[str, Any]) -> TokenLeaf:
    value = node["$value"] if "$value" in node else node["value"]
    reference = parse_reference(value)
    token_type = node.get("$type", node.get("type"))
    comment = node.get("$description", node.get("comment", node.get("description")))
    return TokenLeaf(
        value=reference if reference is not None else value,
        type=token_type,
        comment=comment,
    )


def _normalize_node(node: Any, path: list[str]) -> TokenNode | None:
    if _is_leaf(node):
        return _normalize_leaf(node)
    if isinstance(node, dict):
        group = TokenGroup()
        for key, child in node.items():
            if key.startswith(METADATA_SIGIL):
                continue
            normalized = _normalize_node(child, [*path, key])
            if normalized is not None:
                group.children[key] = normalized
        return group
    logger.warning("Dropping non-token value at %s: %r", _dotted(path), node)
    return None


def normalize(document: dict[str, Any]) -> TokenGroup:
    """Normalize a merged document into a token tree.

    Raises:
        SourceError: If the document is not a group of tokens (e.g. the root
            itself is a single token).
    """
    root = _normalize_node(document, [])
    if not isinstance(root, TokenGroup):
        raise SourceError("Token document root must be a group of tokens, not a single token or value")
    return root


def merge(documents: Iterable[dict[str, Any]]) -> TokenGroup:
    """Merge source documents and normalize the result."""
    return normalize(merge_sources(documents))


def leaf_to_json(leaf: TokenLeaf, value: Any = _UNSET) -> dict[str, Any]:
    """Serialize a leaf as ``{value, type?, comment?}``.

    Args:
        leaf: Leaf to serialize.
        value: Replacement value (e.g. a resolved one). Defaults to the
            leaf's own value.
    """
    raw = leaf.value if value is _UNSET else value
    out: dict[str, Any] = {"value": raw.raw if isinstance(raw, Reference) else raw}
    if leaf.type is not None:
        out["type"] = leaf.type
    if leaf.comment is not None:
        out["comment"] = leaf.comment
    return out


def tree_to_json(node: TokenNode) -> dict[str, Any]:
    """Serialize a normalized tree back to plain JSON data."""
    if isinstance(node, TokenLeaf):
        return leaf_to_json(node)
    return {key: tree_to_json(child) for key, child in node.children.items()}
