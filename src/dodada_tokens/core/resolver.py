"""
Reference resolution.

Follows ``{a.b.c}`` references through the normalized tree until a
non-reference value is reached. Failures never raise: an unresolvable or
cyclic reference resolves to its own literal string, so the broken token
stays visible in every generated file.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .ir.tree import Reference, TokenGroup, TokenLeaf, TokenNode, parse_reference

logger = logging.getLogger(__name__)


class _Unresolved(Exception):
    """Internal signal carrying why a chain stopped."""

    def __init__(self, reason: str, reference: Reference):
        self.reason = reason
        self.reference = reference
        super().__init__(reason)


def _follow(tree: TokenGroup, reference: Reference, visited: set[tuple[str, ...]]) -> Any:
    if reference.path in visited:
        raise _Unresolved("cyclic", reference)
    visited.add(reference.path)

    node = tree.find(reference.path)
    if node is None:
        raise _Unresolved("missing", reference)
    if not isinstance(node, TokenLeaf):
        raise _Unresolved("group", reference)

    if isinstance(node.value, Reference):
        return _follow(tree, node.value, visited)
    return node.value


def _as_reference(value: Any) -> Reference | None:
    if isinstance(value, Reference):
        return value
    return parse_reference(value)


def resolve(tree: TokenGroup, value: Any) -> Any:
    """Resolve ``value`` against ``tree``.

    Args:
        tree: Normalized token tree.
        value: A Reference, a ``{a.b.c}`` string, or any other value.

    Returns:
        The terminal value of the reference chain; non-references are
        returned unchanged. If the chain hits a missing path, a group, or
        a cycle, the original reference string is returned.
    """
    reference = _as_reference(value)
    if reference is None:
        return value

    try:
        return _follow(tree, reference, set())
    except _Unresolved as e:
        if e.reason == "cyclic":
            logger.warning("Cyclic reference %s (cycle at %s)", reference.raw, e.reference.raw)
        else:
            logger.debug("Unresolved reference %s (%s at %s)", reference.raw, e.reason, e.reference.raw)
        return reference.raw


@dataclass(frozen=True)
class ReferenceIssue:
    """A leaf whose reference chain does not resolve."""

    path: str
    reference: str
    reason: str  # "missing", "group" or "cyclic"
    at: str


def iter_leaves(node: TokenNode, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], TokenLeaf]]:
    """Yield ``(path, leaf)`` for every leaf below ``node`` in source order."""
    if isinstance(node, TokenLeaf):
        yield path, node
        return
    for key, child in node.children.items():
        yield from iter_leaves(child, (*path, key))


def find_reference_issues(tree: TokenGroup) -> list[ReferenceIssue]:
    """Report every leaf whose reference chain is broken or cyclic."""
    issues = []
    for path, leaf in iter_leaves(tree):
        reference = leaf.reference
        if reference is None:
            continue
        try:
            _follow(tree, reference, {path})
        except _Unresolved as e:
            issues.append(
                ReferenceIssue(
                    path=".".join(path),
                    reference=reference.raw,
                    reason=e.reason,
                    at=e.reference.raw,
                )
            )
    return issues


def find_cycles(tree: TokenGroup) -> list[ReferenceIssue]:
    """Only the cyclic entries of find_reference_issues."""
    return [issue for issue in find_reference_issues(tree) if issue.reason == "cyclic"]
