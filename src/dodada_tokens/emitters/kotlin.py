"""
Kotlin (Jetpack Compose) emitter.

One ``enum class`` per category with extension properties for each value
kind present (``value: Dp``, ``colorValue: Color``, ``fontFamilyValue``,
``stringValue``, ``fontWeightValue``, ``assetName``). Every ``when`` has an
``else`` branch so tokens of another kind still get a defined value.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from jinja2 import Environment

from dodada_tokens.core.ir import CategoryMap, FlatToken, TextStyle
from dodada_tokens.core.naming import pascal_case
from dodada_tokens.core.values import format_number, parse_color, parse_number, parse_px

from .rendering import EmitOptions, create_jinja_env


def kotlin_string(value: Any) -> str:
    """Kotlin string literal (``$`` escaped to avoid templates)."""
    text = str(value)
    text = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f'"{text}"'


def kotlin_float(n: float) -> str:
    if math.isnan(n):
        return "Float.NaN"
    return f"{format_number(n)}f"


def kotlin_optional_float(n: float | None) -> str:
    return "null" if n is None else kotlin_float(n)


def kotlin_dp(n: float) -> str:
    if math.isnan(n):
        return "Float.NaN.dp"
    return f"{format_number(n)}.dp"


def kotlin_color(value: Any) -> str:
    """``Color(...)`` from a hex/rgba/transparent value; unknown → ``Color.Unspecified``."""
    rgba = parse_color(value)
    if rgba is None:
        return "Color.Unspecified"
    if rgba.alpha == 0 and rgba.to_255() == (0, 0, 0):
        return "Color.Transparent"
    r, g, b = rgba.to_255()
    args = f"red = {r} / 255f, green = {g} / 255f, blue = {b} / 255f"
    if not rgba.is_opaque:
        args += f", alpha = {format_number(round(rgba.alpha, 4))}f"
    return f"Color({args})"


def kotlin_bool(flag: bool) -> str:
    return "true" if flag else "false"


@lru_cache(maxsize=1)
def _env() -> Environment:
    return create_jinja_env(
        {
            "kotlin_string": kotlin_string,
            "kotlin_float": kotlin_float,
            "kotlin_optional_float": kotlin_optional_float,
            "kotlin_bool": kotlin_bool,
        }
    )


@dataclass
class Extension:
    """One ``val Enum.name: Type get() = when (this) {...}`` property."""

    name: str
    type: str
    cases: list[tuple[str, str]]
    fallback: str


def enum_name(prefix: str, category: str) -> str:
    return f"{prefix}{pascal_case(category)}"


def _token_path(token: FlatToken) -> str:
    return f"{token.category}.{token.path}"


def plan_extensions(tokens: list[FlatToken], options: EmitOptions) -> list[Extension]:
    """Extension properties for a category, one per value kind present."""
    extensions: list[Extension] = []

    numeric = [t for t in tokens if t.is_numeric]
    if numeric:
        cases = []
        for t in numeric:
            if t.type == "dimension":
                n = parse_px(t.value, strict=options.strict, token_path=_token_path(t))
            else:
                n = parse_number(t.value, strict=options.strict, token_path=_token_path(t))
            cases.append((pascal_case(t.identifier), kotlin_dp(n)))
        extensions.append(Extension("value", "Dp", cases, "0.dp"))

    colors = [t for t in tokens if t.type == "color"]
    if colors:
        cases = [(pascal_case(t.identifier), kotlin_color(t.value)) for t in colors]
        extensions.append(Extension("colorValue", "Color", cases, "Color.Unspecified"))

    families = [t for t in tokens if t.type == "fontFamily"]
    if families:
        cases = [(pascal_case(t.identifier), kotlin_string(t.value)) for t in families]
        extensions.append(Extension("fontFamilyValue", "String", cases, '""'))

    strings = [t for t in tokens if t.type == "string"]
    if strings:
        cases = [(pascal_case(t.identifier), kotlin_string(t.value)) for t in strings]
        extensions.append(Extension("stringValue", "String", cases, '""'))

    weights = [t for t in tokens if t.type == "fontWeight"]
    if weights:
        cases = [
            (
                pascal_case(t.identifier),
                kotlin_float(parse_number(t.value, strict=options.strict, token_path=_token_path(t))),
            )
            for t in weights
        ]
        extensions.append(Extension("fontWeightValue", "Float", cases, "400f"))

    assets = [t for t in tokens if t.type == "asset"]
    if assets:
        cases = [(pascal_case(t.identifier), kotlin_string(t.identifier)) for t in assets]
        extensions.append(Extension("assetName", "String", cases, '""'))

    return extensions


def render_category(category: str, tokens: list[FlatToken], options: EmitOptions | None = None) -> str:
    """Render ``<Prefix><Category>.kt``."""
    options = options or EmitOptions()
    return _env().get_template("kotlin/category.kt.j2").render(
        package=options.kotlin_package,
        enum_name=enum_name(options.prefix, category),
        entries=[pascal_case(t.identifier) for t in tokens],
        extensions=plan_extensions(tokens, options),
    )


def render_typography(text_styles: list[TextStyle], options: EmitOptions | None = None) -> str:
    """Render ``<Prefix>Typography.kt``."""
    options = options or EmitOptions()
    return _env().get_template("kotlin/typography.kt.j2").render(
        package=options.kotlin_package,
        prefix=options.prefix,
        styles=text_styles,
    )


def emit_kotlin(
    categories: CategoryMap,
    text_styles: list[TextStyle],
    options: EmitOptions | None = None,
) -> dict[str, str]:
    """Render all Kotlin sources, keyed by path relative to the Android output dir."""
    options = options or EmitOptions()
    files = {
        f"{enum_name(options.prefix, category)}.kt": render_category(category, tokens, options)
        for category, tokens in categories.items()
        if tokens
    }
    if text_styles:
        files[f"{options.prefix}Typography.kt"] = render_typography(text_styles, options)
    return files
