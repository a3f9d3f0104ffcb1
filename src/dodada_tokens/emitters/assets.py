"""
iOS asset catalog structures.

Produces the ``Contents.json`` files of ``Colors.xcassets`` (one color set
per color token) and ``Icons.xcassets`` (one image set per icon token,
named by identifier). Copying the icon files themselves is left to the
caller.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from dodada_tokens.core.ir import CategoryMap, FlatToken
from dodada_tokens.core.values import Rgba, parse_color

logger = logging.getLogger(__name__)

COLOR_CATALOG = "Colors.xcassets"
ICON_CATALOG = "Icons.xcassets"
PLACEHOLDER_IMAGE = "placeholder.svg"

_XCODE_INFO = {"author": "xcode", "version": 1}
_BLACK = Rgba(0.0, 0.0, 0.0, 1.0)


def _dump(data: dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


def colorset_contents(color: Rgba) -> dict[str, Any]:
    """Contents.json of one ``.colorset``; components as 3-decimal strings."""
    return {
        "colors": [
            {
                "color": {
                    "color-space": "srgb",
                    "components": {
                        "alpha": f"{color.alpha:.3f}",
                        "blue": f"{color.blue:.3f}",
                        "green": f"{color.green:.3f}",
                        "red": f"{color.red:.3f}",
                    },
                },
                "idiom": "universal",
            }
        ],
        "info": dict(_XCODE_INFO),
    }


def imageset_contents(filename: str) -> dict[str, Any]:
    """Contents.json of one ``.imageset``."""
    return {
        "images": [{"filename": filename, "idiom": "universal"}],
        "info": dict(_XCODE_INFO),
    }


def color_tokens(categories: CategoryMap) -> list[FlatToken]:
    return [t for t in categories.get("color", []) if t.type == "color"]


def icon_tokens(categories: CategoryMap) -> list[FlatToken]:
    return [t for t in categories.get("icon", []) if t.type in ("asset", "string")]


def emit_color_catalog(tokens: list[FlatToken]) -> dict[str, str]:
    files = {f"{COLOR_CATALOG}/Contents.json": _dump({"info": dict(_XCODE_INFO)})}
    for token in tokens:
        color = parse_color(token.value)
        if color is None:
            logger.warning(
                "Color %s.%s has unparseable value %r, using black",
                token.category,
                token.path,
                token.value,
            )
            color = _BLACK
        files[f"{COLOR_CATALOG}/{token.identifier}.colorset/Contents.json"] = _dump(
            colorset_contents(color)
        )
    return files


def emit_icon_catalog(tokens: list[FlatToken]) -> dict[str, str]:
    files = {f"{ICON_CATALOG}/Contents.json": _dump({"info": dict(_XCODE_INFO)})}
    for token in tokens:
        filename = token.value if isinstance(token.value, str) and token.value else PLACEHOLDER_IMAGE
        files[f"{ICON_CATALOG}/{token.identifier}.imageset/Contents.json"] = _dump(
            imageset_contents(filename)
        )
    return files


def emit_asset_catalogs(categories: CategoryMap) -> dict[str, str]:
    """All catalog files, keyed by path relative to the iOS output dir."""
    files: dict[str, str] = {}
    colors = color_tokens(categories)
    if colors:
        files.update(emit_color_catalog(colors))
    icons = icon_tokens(categories)
    if icons:
        files.update(emit_icon_catalog(icons))
    return files
