"""
Platform emitters.

Each emitter is a pure function from collected tokens to generated file
contents; nothing here touches the filesystem.
"""

from .assets import emit_asset_catalogs
from .css import emit_css, emit_scss
from .kotlin import emit_kotlin
from .rendering import GENERATED_NOTICE, EmitOptions, create_jinja_env
from .swift import emit_swift
from .theme import emit_theme
from .typescript import emit_typescript

__all__ = [
    "GENERATED_NOTICE",
    "EmitOptions",
    "create_jinja_env",
    "emit_asset_catalogs",
    "emit_css",
    "emit_kotlin",
    "emit_scss",
    "emit_swift",
    "emit_theme",
    "emit_typescript",
]
