"""Tests for the TypeScript emitter."""

from __future__ import annotations

import json
import re

import pytest

from dodada_tokens.core.collector import collect_categories
from dodada_tokens.core.ir import CategoryMap, TextStyle
from dodada_tokens.core.merger import merge
from dodada_tokens.emitters.typescript import emit_typescript, ts_literal


@pytest.fixture
def tokens_ts(sample_categories: CategoryMap, sample_text_styles: list[TextStyle]) -> str:
    return emit_typescript(sample_categories, sample_text_styles)


def _object_body(source: str, name: str) -> str:
    match = re.search(rf"export const {name} = \{{\n(.*?)\n\}} as const;", source, re.DOTALL)
    assert match is not None, name
    return match.group(1)


class TestEmitTypescript:
    def test_spacing(self, tokens_ts: str) -> None:
        body = _object_body(tokens_ts, "spacing")
        assert '  sm: "8px",' in body
        assert '  md: "16px",' in body
        assert '  zero: "0px",' in body
        assert "export type SpacingToken = keyof typeof spacing;" in tokens_ts

    def test_numbers(self, tokens_ts: str) -> None:
        assert "  weightBold: 700," in _object_body(tokens_ts, "fontWeight")
        assert "  lineHeightNormal: 1.5," in _object_body(tokens_ts, "lineHeight")

    def test_strings(self, tokens_ts: str) -> None:
        assert '  primaryLight: "#ED2124",' in _object_body(tokens_ts, "color")
        assert '  familyBase: "Inter",' in _object_body(tokens_ts, "fontFamily")
        assert "export type FontFamilyToken = keyof typeof fontFamily;" in tokens_ts

    def test_values_match_tokens(self, sample_categories: CategoryMap, tokens_ts: str) -> None:
        body = _object_body(tokens_ts, "color")
        parsed = json.loads("{" + re.sub(r"^\s*(\w+):", r'"\1":', body.rstrip(","), flags=re.MULTILINE) + "}")
        assert parsed == {t.identifier: t.value for t in sample_categories["color"]}

    def test_text_styles(self, tokens_ts: str) -> None:
        assert "export interface DodadaFont {" in tokens_ts
        assert "  bodyBold: {" in tokens_ts
        assert "    size: 16," in tokens_ts
        assert "    letterSpacing: -0.025," in tokens_ts
        assert "    letterSpacing: null," in tokens_ts
        assert "    underline: true," in tokens_ts
        assert "  } as DodadaFont," in tokens_ts
        assert "export type TokenTextKey = keyof typeof tokenText;" in tokens_ts

    def test_no_text_styles(self, sample_categories: CategoryMap) -> None:
        assert "tokenText" not in emit_typescript(sample_categories, [])


class TestTsLiteral:
    def test_unresolved_number_stays_visible(self) -> None:
        tree = merge([{"opacity": {"x": {"$value": "{does.not.exist}", "$type": "number"}}}])
        [token] = collect_categories(tree)["opacity"]
        assert ts_literal(token) == '"{does.not.exist}"'

    def test_numeric_string(self) -> None:
        tree = merge([{"opacity": {"half": {"$value": "0.5", "$type": "number"}}}])
        [token] = collect_categories(tree)["opacity"]
        assert ts_literal(token) == "0.5"
