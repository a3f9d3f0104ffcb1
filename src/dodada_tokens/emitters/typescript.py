"""
TypeScript emitter.

``export const <category> = {...} as const`` per category plus a key-union
type, and a ``tokenText`` object for text styles.
"""

from __future__ import annotations

import json
import math
from functools import lru_cache
from typing import Any

from jinja2 import Environment

from dodada_tokens.core.ir import CategoryMap, FlatToken, TextStyle
from dodada_tokens.core.naming import pascal_case
from dodada_tokens.core.values import css_value, format_number

from .rendering import EmitOptions, create_jinja_env

NUMERIC_TYPES = ("number", "fontWeight")


def ts_string(value: Any) -> str:
    """TypeScript string literal (JSON string syntax)."""
    return json.dumps(str(value), ensure_ascii=False)


def ts_number(n: float | None) -> str:
    if n is None:
        return "null"
    if math.isnan(n):
        return "NaN"
    return format_number(n)


def ts_literal(token: FlatToken) -> str:
    """Literal for one token value.

    Dimensions render as CSS strings with their unit (``"8px"``), numbers
    and font weights as numbers, everything else as strings. A numeric
    token whose value is not a number (e.g. an unresolved reference) is
    emitted as its string so it stays visible.
    """
    if token.type == "dimension":
        return ts_string(css_value(token.value, token.type))
    if token.type in NUMERIC_TYPES and _looks_numeric(token.value):
        return ts_number(float(token.value))
    return ts_string(token.value)


def _looks_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError):
        return False


@lru_cache(maxsize=1)
def _env() -> Environment:
    return create_jinja_env(
        {
            "ts_string": ts_string,
            "ts_number": ts_number,
            "ts_literal": ts_literal,
        }
    )


def emit_typescript(
    categories: CategoryMap,
    text_styles: list[TextStyle],
    options: EmitOptions | None = None,
) -> str:
    """Render ``tokens.ts``."""
    options = options or EmitOptions()
    return _env().get_template("typescript/tokens.ts.j2").render(
        prefix=options.prefix,
        categories=[(name, pascal_case(name), tokens) for name, tokens in categories.items() if tokens],
        styles=text_styles,
    )
