"""
Template environment shared by the platform emitters.

Every platform renders from ``dodada_tokens/templates/<platform>/``. The
platform module owns its literal filters (string escaping, number syntax)
and passes them in when it creates its environment, so each target's
syntax rules live in exactly one place.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from dodada_tokens.core.naming import pascal_case
from dodada_tokens.core.values import format_number

TEMPLATES_DIR = Path(__file__).parent.parent / "templates"

GENERATED_NOTICE = "Do not edit directly. Generated from design tokens."


@dataclass(frozen=True)
class EmitOptions:
    """Settings shared by all emitters."""

    prefix: str = "Dodada"
    kotlin_package: str = "com.dodada.tokens"
    strict: bool = True


def create_jinja_env(filters: dict[str, Callable[..., Any]] | None = None) -> Environment:
    """Create a Jinja2 environment for code templates.

    Args:
        filters: Platform-specific filters to register on top of the
            common ones (``pascal``, ``number``).
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )
    env.globals["generated_notice"] = GENERATED_NOTICE
    env.filters["pascal"] = pascal_case
    env.filters["number"] = format_number
    if filters:
        env.filters.update(filters)
    return env
