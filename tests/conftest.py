"""Shared pytest fixtures for dodada-tokens tests."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from dodada_tokens.core.collector import collect_categories
from dodada_tokens.core.ir import CategoryMap, TextStyle, TokenGroup
from dodada_tokens.core.merger import merge
from dodada_tokens.core.text_styles import collect_text_styles

SPACING: dict[str, Any] = {
    "spacing": {
        "$type": "dimension",
        "0": {"$value": 0, "$type": "dimension"},
        "sm": {"$value": 8, "$type": "dimension"},
        "md": {"$value": "16px", "$type": "dimension"},
        "2xl": {"$value": 48, "$type": "dimension"},
    }
}

COLOR: dict[str, Any] = {
    "color": {
        "primary": {
            "500": {"$value": "#ED2124", "$type": "color"},
            "light": {"$value": "{color.primary.500}", "$type": "color"},
        },
        "neutral": {
            "white": {"$value": "#FFFFFF", "$type": "color"},
            "transparent": {"$value": "transparent", "$type": "color"},
        },
    }
}

FONT: dict[str, Any] = {
    "font": {
        "family": {"base": {"$value": "Inter", "$type": "fontFamily"}},
        "weight": {
            "regular": {"$value": 400, "$type": "fontWeight"},
            "bold": {"$value": 700, "$type": "fontWeight"},
        },
    }
}

ICONS: dict[str, Any] = {
    "icon": {
        "arrow-left": {"$value": "arrow_left.svg", "$type": "asset"},
        "close": {"$value": "close.svg", "$type": "asset"},
    }
}

TYPOGRAPHY: dict[str, Any] = {
    "typography": {
        "size": {"md": {"$value": "16px", "$type": "dimension"}},
        "lineHeight": {"normal": {"$value": 1.5, "$type": "number"}},
        "text": {
            "body": {
                "bold": {
                    "fontFamily": {"$value": "{font.family.base}"},
                    "fontSize": {"$value": "{typography.size.md}"},
                    "fontWeight": {"$value": "{font.weight.bold}"},
                    "lineHeight": {"$value": "{typography.lineHeight.normal}"},
                    "letterSpacing": {"$value": "-0.025em"},
                },
                "link": {
                    "fontFamily": {"$value": "{font.family.base}"},
                    "fontSize": {"$value": "{typography.size.md}"},
                    "fontWeight": {"$value": "{font.weight.regular}"},
                    "lineHeight": {"$value": "{typography.lineHeight.normal}"},
                    "textDecoration": {"$value": "underline"},
                },
            }
        },
    }
}

THEME: dict[str, Any] = {
    "theme": {
        "main": {
            "button": {
                "primary": {
                    "background": {
                        "default": {"$value": "{color.primary.500}", "$type": "color"},
                        "disabled": {"$value": "transparent", "$type": "color"},
                    },
                    "cornerRadius": {"$value": "{spacing.sm}", "$type": "dimension"},
                },
                "label": {"$value": "Continue"},
            }
        }
    }
}

SOURCE_FILES: dict[str, dict[str, Any]] = {
    "tokens/core/spacing.json": SPACING,
    "tokens/core/color.json": COLOR,
    "tokens/core/font.json": FONT,
    "tokens/core/icons.json": ICONS,
    "tokens/semantic/typography.json": TYPOGRAPHY,
    "tokens/themes/main.json": THEME,
}


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def write_manifest(root: Path, files: list[str], extra: str = "") -> Path:
    listed = ", ".join(f'"{f}"' for f in files)
    manifest = root / "tokens.toml"
    manifest.write_text(
        f'[project]\nname = "test"\nprefix = "Dodada"\n\n[sources]\nfiles = [{listed}]\n{extra}',
        encoding="utf-8",
    )
    return manifest


@pytest.fixture
def sample_documents() -> list[dict[str, Any]]:
    """Source documents in merge order."""
    return [SPACING, COLOR, FONT, ICONS, TYPOGRAPHY, THEME]


@pytest.fixture
def sample_tree(sample_documents: list[dict[str, Any]]) -> TokenGroup:
    """Merged, normalized tree of the sample sources."""
    return merge(sample_documents)


@pytest.fixture
def sample_categories(sample_tree: TokenGroup) -> CategoryMap:
    return collect_categories(sample_tree)


@pytest.fixture
def sample_text_styles(sample_tree: TokenGroup) -> list[TextStyle]:
    return collect_text_styles(sample_tree)


@pytest.fixture
def project_factory(tmp_path: Path) -> Callable[..., Path]:
    """Write source files (relative path -> document) and a tokens.toml listing them."""

    def make(sources: dict[str, Any], extra: str = "") -> Path:
        for name, data in sources.items():
            write_json(tmp_path / name, data)
        write_manifest(tmp_path, list(sources), extra)
        return tmp_path

    return make


@pytest.fixture
def token_project(project_factory: Callable[..., Path]) -> Path:
    """A project directory with the sample sources and a tokens.toml."""
    return project_factory(SOURCE_FILES)
