"""
Normalized token tree.

A tree node is either a TokenLeaf (a node that carried a value in the
source JSON) or a TokenGroup (an ordered mapping of child nodes). String
values of the form ``{a.b.c}`` are parsed into Reference objects when the
tree is built, so nothing downstream re-matches the reference syntax.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Union

_REFERENCE_RE = re.compile(r"^\{(.+)\}$", re.DOTALL)


@dataclass(frozen=True)
class Reference:
    """A pointer to another token's value, by dot path from the tree root."""

    path: tuple[str, ...]
    source: str | None = field(default=None, compare=False)

    @property
    def raw(self) -> str:
        """The string as written in the source, else the ``{a.b.c}`` form."""
        if self.source is not None:
            return self.source
        return "{" + ".".join(self.path) + "}"

    def __str__(self) -> str:
        return self.raw


def parse_reference(value: Any) -> Reference | None:
    """Parse ``{a.b.c}`` into a Reference; anything else returns None."""
    if not isinstance(value, str):
        return None
    match = _REFERENCE_RE.match(value)
    if not match:
        return None
    inner = match.group(1).strip()
    if not inner:
        return None
    return Reference(tuple(inner.split(".")), source=value)


def is_reference_string(value: Any) -> bool:
    """True if ``value`` is a string in reference syntax."""
    return parse_reference(value) is not None


@dataclass(frozen=True)
class TokenLeaf:
    """A token: value plus optional declared type and comment."""

    value: Any
    type: str | None = None
    comment: str | None = None

    @property
    def reference(self) -> Reference | None:
        return self.value if isinstance(self.value, Reference) else None


@dataclass
class TokenGroup:
    """A container node. Child order is source order."""

    children: dict[str, TokenNode] = field(default_factory=dict)

    def get(self, key: str) -> TokenNode | None:
        return self.children.get(key)

    def find(self, path: tuple[str, ...] | list[str]) -> TokenNode | None:
        """Walk ``path`` from this node. Returns None if any segment is missing."""
        node: TokenNode = self
        for segment in path:
            if not isinstance(node, TokenGroup):
                return None
            child = node.children.get(segment)
            if child is None:
                return None
            node = child
        return node

    def __contains__(self, key: str) -> bool:
        return key in self.children

    def __iter__(self):
        return iter(self.children.items())

    def __len__(self) -> int:
        return len(self.children)


TokenNode = Union[TokenLeaf, TokenGroup]
