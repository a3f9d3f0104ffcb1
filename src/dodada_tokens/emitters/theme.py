"""
Theme artifacts.

For a materialized theme: the resolved JSON document, a TypeScript module
exporting it ``as const``, and one Swift protocol + default struct per
component group (e.g. ``button``) with a property per resolved leaf.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any

from jinja2 import Environment

from dodada_tokens.core.naming import identifier_for, pascal_case
from dodada_tokens.core.themes import ThemeProperty, theme_components
from dodada_tokens.core.values import TRANSPARENT, parse_color, parse_number, parse_px

from .rendering import EmitOptions, create_jinja_env
from .swift import swift_float, swift_string

logger = logging.getLogger(__name__)

NUMERIC_TYPES = ("dimension", "number", "fontWeight")


def swift_property_type(prop: ThemeProperty) -> str:
    if prop.type == "color":
        return "Color"
    if prop.type in NUMERIC_TYPES:
        return "CGFloat"
    return "String"


def swift_property_value(prop: ThemeProperty, strict: bool = True) -> str:
    """Right-hand side for one theme property."""
    if prop.type == "color":
        rgba = parse_color(prop.value)
        if rgba is None:
            logger.warning("Theme color %s has unparseable value %r", prop.path, prop.value)
            return "Color.clear"
        if rgba == TRANSPARENT:
            return "Color.clear"
        return f"Color(hex: {swift_string(rgba.to_hex())})"
    if prop.type == "dimension":
        return swift_float(parse_px(prop.value, strict=strict, token_path=prop.path))
    if prop.type in NUMERIC_TYPES:
        return swift_float(parse_number(prop.value, strict=strict, token_path=prop.path))
    return swift_string(prop.value)


def theme_type_word(name: str) -> str:
    """Theme name as a type-name fragment (``high-contrast`` -> ``HighContrast``)."""
    return pascal_case(identifier_for((name,)))


@lru_cache(maxsize=1)
def _env() -> Environment:
    return create_jinja_env()


def theme_document(name: str, materialized: dict[str, Any]) -> str:
    """``{"theme": {"<name>": ...}}`` as indented JSON."""
    return json.dumps({"theme": {name: materialized}}, indent=2, ensure_ascii=False) + "\n"


def theme_typescript(name: str, materialized: dict[str, Any]) -> str:
    body = json.dumps(materialized, indent=2, ensure_ascii=False)
    return _env().get_template("typescript/theme.ts.j2").render(
        const_name=f"theme{theme_type_word(name)}",
        type_name=f"Theme{theme_type_word(name)}",
        body=body,
    )


def component_type_name(component: str, prefix: str, theme: str | None = None) -> str:
    """``<Prefix>[<Theme>]<Component>Theme``; ``theme`` is set for non-default themes."""
    qualifier = theme_type_word(theme) if theme else ""
    return f"{prefix}{qualifier}{pascal_case(component)}Theme"


def theme_component_swift(
    component: str,
    properties: list[ThemeProperty],
    options: EmitOptions | None = None,
    theme: str | None = None,
) -> str:
    options = options or EmitOptions()
    rows = [
        (p.name, swift_property_type(p), swift_property_value(p, options.strict))
        for p in properties
    ]
    return _env().get_template("swift/theme_component.swift.j2").render(
        protocol_name=component_type_name(component, options.prefix, theme),
        rows=rows,
    )


def color_hex_helper() -> str:
    return _env().get_template("swift/color_hex.swift.j2").render()


def emit_theme(
    name: str,
    materialized: dict[str, Any],
    options: EmitOptions | None = None,
    default: bool = True,
) -> dict[str, dict[str, str]]:
    """Render every artifact for one theme.

    Swift types of the default theme are named ``<Prefix><Component>Theme``;
    any other theme adds its own name (``<Prefix>Dark<Component>Theme``) so
    several themes can share one output directory.

    Returns:
        ``{"theme": {...}, "ios": {...}}``: files keyed by output area, each
        mapping a relative path to content.
    """
    options = options or EmitOptions()
    ios: dict[str, str] = {}
    qualifier = None if default else name
    for component, properties in theme_components(materialized).items():
        path = f"Component/{component_type_name(component, options.prefix, qualifier)}.swift"
        ios[path] = theme_component_swift(component, properties, options, qualifier)
    if ios:
        ios["Component/Color+Hex.swift"] = color_hex_helper()

    return {
        "theme": {
            f"theme-{name}.json": theme_document(name, materialized),
            f"theme-{name}.ts": theme_typescript(name, materialized),
        },
        "ios": ios,
    }
