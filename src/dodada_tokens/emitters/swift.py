"""
Swift emitter.

One file per category (enum + typed accessors + protocol/default struct),
``Color`` and ``CGFloat`` convenience extensions, and the typography file.
The ``theme`` category is not emitted here; themes get component accessors
from the theme emitter instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from jinja2 import Environment

from dodada_tokens.core.ir import CategoryMap, FlatToken, TextStyle
from dodada_tokens.core.naming import pascal_case
from dodada_tokens.core.values import format_number, parse_number, parse_px

from .rendering import EmitOptions, create_jinja_env

SKIPPED_CATEGORIES = frozenset({"theme"})

# Output folder per category; anything else uses its PascalCase name.
CATEGORY_DIRS: dict[str, str] = {
    "color": "Color",
    "spacing": "Spacing",
    "radius": "Radius",
    "layout": "Layout",
    "sizing": "Sizing",
    "icon": "Icons",
    "component": "Component",
    "elevation": "Elevation",
    "fontFamily": "Typography",
    "fontSize": "Typography",
    "fontWeight": "Typography",
    "lineHeight": "LineHeight",
}

# Categories that get ``extension CGFloat`` shortcuts, with their name prefix.
CGFLOAT_PREFIXES: dict[str, str] = {
    "spacing": "spacing",
    "radius": "radius",
    "sizing": "sizing",
    "layout": "layout",
    "lineHeight": "",
}

STRING_TYPES = ("fontFamily", "string")


# =============================================================================
# Literals
# =============================================================================


def swift_string(value: Any) -> str:
    """Swift string literal."""
    text = str(value)
    text = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n").replace("\r", "\\r")
    return f'"{text}"'


def swift_float(n: float) -> str:
    """CGFloat literal; NaN marks an unresolved value."""
    if math.isnan(n):
        return "CGFloat.nan"
    return f"CGFloat({format_number(n)})"


def swift_optional_float(n: float | None) -> str:
    return "nil" if n is None else swift_float(n)


def swift_bool(flag: bool) -> str:
    return "true" if flag else "false"


@lru_cache(maxsize=1)
def _env() -> Environment:
    return create_jinja_env(
        {
            "swift_string": swift_string,
            "swift_float": swift_float,
            "swift_optional_float": swift_optional_float,
            "swift_bool": swift_bool,
        }
    )


# =============================================================================
# Accessor planning
# =============================================================================


@dataclass
class Accessor:
    """One ``public var`` on the category enum."""

    name: str
    type: str
    cases: list[tuple[str, str]]
    fallback: str | None = None
    doc: str | None = None


@dataclass
class CategoryPlan:
    """What gets generated for one category."""

    category: str
    enum_name: str
    tokens: list[FlatToken]
    accessors: list[Accessor] = field(default_factory=list)
    is_color: bool = False
    protocol_type: str | None = None
    protocol_member: str | None = None
    protocol_name: str = ""
    protocol_method: str = "value"

    @property
    def import_module(self) -> str:
        return "SwiftUI" if self.is_color else "UIKit"


def enum_name(prefix: str, category: str) -> str:
    return f"{prefix}{pascal_case(category)}Token"


def _token_path(token: FlatToken) -> str:
    return f"{token.category}.{token.path}"


def _numeric(token: FlatToken, strict: bool) -> float:
    if token.type == "dimension":
        return parse_px(token.value, strict=strict, token_path=_token_path(token))
    if token.type in ("number", "fontWeight"):
        return parse_number(token.value, strict=strict, token_path=_token_path(token))
    return 0.0


def plan_category(category: str, tokens: list[FlatToken], options: EmitOptions) -> CategoryPlan:
    """Decide the accessors for a category.

    Precedence: dimension/number → ``value: CGFloat``; else color →
    ``assetName`` + ``toColor()``; else fontFamily/string → ``value: String``;
    else fontWeight → ``value: CGFloat``. Asset tokens add ``assetName``
    unless the color accessor already defines it.
    """
    plan = CategoryPlan(
        category=category,
        enum_name=enum_name(options.prefix, category),
        tokens=tokens,
        protocol_name=f"{options.prefix}Theme{pascal_case(category)}Tokens",
    )

    numeric = any(t.is_numeric for t in tokens)
    colors = [t for t in tokens if t.type == "color"]
    strings = [t for t in tokens if t.type in STRING_TYPES]
    weights = [t for t in tokens if t.type == "fontWeight"]
    assets = [t for t in tokens if t.type == "asset"]

    def partial(subset: list[FlatToken]) -> bool:
        return len(subset) < len(tokens)

    if numeric:
        plan.accessors.append(
            Accessor(
                name="value",
                type="CGFloat",
                cases=[(t.identifier, swift_float(_numeric(t, options.strict))) for t in tokens],
            )
        )
        plan.protocol_type, plan.protocol_member = "CGFloat", "value"
    elif colors:
        plan.is_color = True
        plan.accessors.append(
            Accessor(
                name="assetName",
                type="String",
                cases=[(t.identifier, swift_string(t.identifier)) for t in colors],
                fallback='""' if partial(colors) else None,
                doc="Color name in Colors.xcassets. Usage: Color(assetName)",
            )
        )
        plan.protocol_type, plan.protocol_member = "Color", "toColor()"
        plan.protocol_method = "toColor"
    elif strings:
        plan.accessors.append(
            Accessor(
                name="value",
                type="String",
                cases=[(t.identifier, swift_string(t.value)) for t in strings],
                fallback='""' if partial(strings) else None,
            )
        )
        plan.protocol_type, plan.protocol_member = "String", "value"
    elif weights:
        plan.accessors.append(
            Accessor(
                name="value",
                type="CGFloat",
                cases=[(t.identifier, swift_float(_numeric(t, options.strict))) for t in weights],
                fallback=swift_float(400) if partial(weights) else None,
            )
        )
        plan.protocol_type, plan.protocol_member = "CGFloat", "value"

    if assets and not plan.is_color:
        plan.accessors.append(
            Accessor(
                name="assetName",
                type="String",
                cases=[(t.identifier, swift_string(t.identifier)) for t in assets],
                fallback='""' if partial(assets) else None,
                doc="Image name in Icons.xcassets. Usage: Image(assetName) or UIImage(named: assetName)",
            )
        )
        if plan.protocol_type is None:
            plan.protocol_type, plan.protocol_member = "String", "assetName"
            plan.protocol_method = "assetName"

    return plan


# =============================================================================
# Rendering
# =============================================================================


def category_dir(category: str) -> str:
    return CATEGORY_DIRS.get(category, pascal_case(category))


def render_category(category: str, tokens: list[FlatToken], options: EmitOptions | None = None) -> str:
    """Render the enum file for one category."""
    options = options or EmitOptions()
    plan = plan_category(category, tokens, options)
    return _env().get_template("swift/category.swift.j2").render(plan=plan)


def render_color_extension(tokens: list[FlatToken], options: EmitOptions | None = None) -> str:
    """``extension Color`` with one static property per color token."""
    options = options or EmitOptions()
    return _env().get_template("swift/color_extension.swift.j2").render(
        enum_name=enum_name(options.prefix, "color"),
        tokens=[t for t in tokens if t.type == "color"],
    )


def render_cgfloat_extension(category: str, tokens: list[FlatToken], options: EmitOptions | None = None) -> str:
    """``extension CGFloat`` shortcuts, e.g. ``CGFloat.spacingSm``."""
    options = options or EmitOptions()
    prefix = CGFLOAT_PREFIXES.get(category, category)
    properties = [
        (prefix + pascal_case(t.identifier) if prefix else t.identifier, t.identifier) for t in tokens
    ]
    return _env().get_template("swift/cgfloat_extension.swift.j2").render(
        enum_name=enum_name(options.prefix, category),
        properties=properties,
    )


def render_typography(text_styles: list[TextStyle], options: EmitOptions | None = None) -> str:
    """Font struct, typography enum, protocol and default struct."""
    options = options or EmitOptions()
    return _env().get_template("swift/typography.swift.j2").render(
        prefix=options.prefix,
        styles=text_styles,
    )


def emit_swift(
    categories: CategoryMap,
    text_styles: list[TextStyle],
    options: EmitOptions | None = None,
) -> dict[str, str]:
    """Render all Swift sources.

    Returns:
        Mapping of path (relative to the iOS output dir) to file content.
    """
    options = options or EmitOptions()
    files: dict[str, str] = {}

    for category, tokens in categories.items():
        if category in SKIPPED_CATEGORIES or not tokens:
            continue
        folder = category_dir(category)
        files[f"{folder}/{enum_name(options.prefix, category)}.swift"] = render_category(
            category, tokens, options
        )
        if category == "color" and any(t.type == "color" for t in tokens):
            files[f"{folder}/{options.prefix}+Color.swift"] = render_color_extension(tokens, options)
        if category in CGFLOAT_PREFIXES and any(t.is_numeric for t in tokens):
            label = pascal_case(category)
            files[f"{folder}/{label}+CGFloat.swift"] = render_cgfloat_extension(category, tokens, options)

    if text_styles:
        files[f"Typography/{options.prefix}Typography.swift"] = render_typography(text_styles, options)

    return files
