"""
CSS and SCSS emitters.

One custom property (``--<category>-<path>``) or SCSS variable
(``$<category>-<path>``) per token. Bare dimension numbers get ``px``.
"""

from __future__ import annotations

from functools import lru_cache

from jinja2 import Environment

from dodada_tokens.core.ir import CategoryMap, FlatToken
from dodada_tokens.core.values import css_value

from .rendering import create_jinja_env


def variable_name(token: FlatToken) -> str:
    """``spacing`` + ``inset.sm`` → ``spacing-inset-sm``."""
    return f"{token.category}-{token.path.replace('.', '-')}"


def css_literal(token: FlatToken) -> str:
    return css_value(token.value, token.type)


@lru_cache(maxsize=1)
def _env() -> Environment:
    return create_jinja_env({"css_name": variable_name, "css_literal": css_literal})


def _all_tokens(categories: CategoryMap) -> list[FlatToken]:
    return [token for tokens in categories.values() for token in tokens]


def emit_css(categories: CategoryMap) -> str:
    """Render ``variables.css`` (a single ``:root`` block)."""
    return _env().get_template("css/variables.css.j2").render(tokens=_all_tokens(categories))


def emit_scss(categories: CategoryMap) -> str:
    """Render ``_variables.scss``."""
    return _env().get_template("css/variables.scss.j2").render(tokens=_all_tokens(categories))
