"""Tests for the CSS and SCSS emitters."""

from __future__ import annotations

from dodada_tokens.core.ir import CategoryMap
from dodada_tokens.emitters.css import emit_css, emit_scss


class TestEmitCss:
    def test_root_block(self, sample_categories: CategoryMap) -> None:
        css = emit_css(sample_categories)
        assert ":root {\n" in css
        assert css.rstrip().endswith("}")

    def test_dimension_gets_px(self, sample_categories: CategoryMap) -> None:
        css = emit_css(sample_categories)
        assert "  --spacing-sm: 8px;\n" in css
        assert "  --spacing-md: 16px;\n" in css

    def test_nested_path(self, sample_categories: CategoryMap) -> None:
        css = emit_css(sample_categories)
        assert "  --color-primary-500: #ED2124;\n" in css
        assert "  --color-primary-light: #ED2124;\n" in css
        assert "  --fontWeight-weight-bold: 700;\n" in css


class TestEmitScss:
    def test_variables(self, sample_categories: CategoryMap) -> None:
        scss = emit_scss(sample_categories)
        assert "$spacing-sm: 8px;\n" in scss
        assert "$color-neutral-transparent: transparent;\n" in scss
        assert ":root" not in scss
