"""
Text-style collection.

Builds one TextStyle per ``typography.text.<style>.<variant>`` node. Each
variant provides fontFamily, fontSize, fontWeight and lineHeight, and
optionally letterSpacing and textDecoration; every field goes through the
reference resolver before it is parsed.
"""

from __future__ import annotations

import logging
from typing import Any

from .ir.tokens import FontSpec, TextStyle
from .ir.tree import TokenGroup, TokenLeaf
from .naming import check_unique, identifier_for
from .resolver import resolve
from .values import parse_em, parse_number, parse_px

logger = logging.getLogger(__name__)

TEXT_PATH = ("typography", "text")

_DEFAULTS: dict[str, Any] = {
    "fontFamily": "",
    "fontSize": "0px",
    "fontWeight": 400,
    "lineHeight": 1.5,
}


def _field(tree: TokenGroup, spec: TokenGroup, name: str) -> Any:
    node = spec.get(name)
    if isinstance(node, TokenLeaf) and node.value is not None:
        return resolve(tree, node.value)
    return _DEFAULTS.get(name)


def _build_font(tree: TokenGroup, spec: TokenGroup, path: str, strict: bool) -> FontSpec:
    decoration = spec.get("textDecoration")
    underline = isinstance(decoration, TokenLeaf) and resolve(tree, decoration.value) == "underline"
    return FontSpec(
        family=str(_field(tree, spec, "fontFamily")),
        size=parse_px(_field(tree, spec, "fontSize"), strict=strict, token_path=f"{path}.fontSize"),
        weight=parse_number(
            _field(tree, spec, "fontWeight"), strict=strict, token_path=f"{path}.fontWeight"
        ),
        line_height=parse_number(
            _field(tree, spec, "lineHeight"), strict=strict, token_path=f"{path}.lineHeight"
        ),
        letter_spacing=parse_em(
            _field(tree, spec, "letterSpacing"), strict=strict, token_path=f"{path}.letterSpacing"
        ),
        underline=underline,
    )


def collect_text_styles(tree: TokenGroup, *, strict: bool = True) -> list[TextStyle]:
    """Collect composite font records from ``typography.text``.

    Args:
        tree: Normalized token tree.
        strict: Raise DimensionParseError on unparseable sizes/spacings.

    Returns:
        Text styles in traversal order; empty if there is no text subtree.

    Raises:
        IdentifierCollisionError: If two style/variant pairs share a name.
    """
    text = tree.find(TEXT_PATH)
    if not isinstance(text, TokenGroup):
        return []

    styles: list[TextStyle] = []
    for style_name, variants in text.children.items():
        if not isinstance(variants, TokenGroup):
            continue
        for variant_name, spec in variants.children.items():
            if not isinstance(spec, TokenGroup):
                continue
            path = ".".join((*TEXT_PATH, style_name, variant_name))
            styles.append(
                TextStyle(
                    identifier=identifier_for((style_name, variant_name)),
                    style=style_name,
                    variant=variant_name,
                    font=_build_font(tree, spec, path, strict),
                )
            )

    check_unique("typography.text", ((s.identifier, f"{s.style}.{s.variant}") for s in styles))
    logger.debug("Collected %d text styles", len(styles))
    return styles
