"""Tests for dimension, number, color parsing and formatting."""

from __future__ import annotations

import logging
import math

import pytest

from dodada_tokens.core.errors import DimensionParseError
from dodada_tokens.core.values import (
    TRANSPARENT,
    Rgba,
    css_value,
    format_number,
    parse_color,
    parse_em,
    parse_number,
    parse_px,
)


class TestParsePx:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [(8, 8.0), (1.5, 1.5), ("16px", 16.0), ("16", 16.0), (" 4 px ", 4.0), ("-2px", -2.0), (".5px", 0.5)],
    )
    def test_parses(self, value: object, expected: float) -> None:
        assert parse_px(value) == expected

    def test_unresolved_reference_is_nan(self) -> None:
        assert math.isnan(parse_px("{spacing.missing}"))

    def test_strict_raises(self) -> None:
        with pytest.raises(DimensionParseError) as exc_info:
            parse_px("12rem", token_path="spacing.huge")
        assert "12rem" in str(exc_info.value)
        assert "spacing.huge" in str(exc_info.value)

    def test_lenient_defaults_to_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert parse_px("12rem", strict=False, token_path="spacing.huge") == 0.0
        assert "spacing.huge" in caplog.text


class TestParseNumber:
    def test_parses(self) -> None:
        assert parse_number(700) == 700.0
        assert parse_number("1.5") == 1.5

    def test_unit_is_not_a_number(self) -> None:
        with pytest.raises(DimensionParseError):
            parse_number("16px")

    def test_lenient(self) -> None:
        assert parse_number("bold", strict=False) == 0.0

    def test_unresolved_reference_is_nan(self) -> None:
        assert math.isnan(parse_number("{font.weight.missing}"))


class TestParseEm:
    def test_none_stays_none(self) -> None:
        assert parse_em(None) is None

    def test_parses(self) -> None:
        assert parse_em("-0.025em") == -0.025
        assert parse_em(0.1) == 0.1

    def test_strict_raises(self) -> None:
        with pytest.raises(DimensionParseError):
            parse_em("wide")

    def test_lenient_is_none(self) -> None:
        assert parse_em("wide", strict=False) is None

    def test_unresolved_reference_is_nan(self) -> None:
        assert math.isnan(parse_em("{does.not.exist}"))


class TestParseColor:
    def test_six_digit_hex(self) -> None:
        assert parse_color("#ED2124") == Rgba(237 / 255, 33 / 255, 36 / 255, 1.0)

    def test_three_digit_hex(self) -> None:
        assert parse_color("#fff") == Rgba(1.0, 1.0, 1.0, 1.0)

    def test_eight_digit_hex(self) -> None:
        color = parse_color("#FF000080")
        assert color is not None
        assert color.alpha == pytest.approx(128 / 255)
        assert not color.is_opaque

    def test_rgba(self) -> None:
        assert parse_color("rgba(0, 0, 0, 0.5)") == Rgba(0.0, 0.0, 0.0, 0.5)

    def test_rgb(self) -> None:
        assert parse_color("rgb(255, 0, 0)") == Rgba(1.0, 0.0, 0.0, 1.0)

    def test_transparent(self) -> None:
        assert parse_color("transparent") == TRANSPARENT
        assert parse_color("Transparent") == TRANSPARENT

    @pytest.mark.parametrize("value", ["blue", "#12", "{color.missing}", 5, None])
    def test_unrecognized(self, value: object) -> None:
        assert parse_color(value) is None

    def test_to_255_and_hex(self) -> None:
        color = Rgba(237 / 255, 33 / 255, 36 / 255)
        assert color.to_255() == (237, 33, 36)
        assert color.to_hex() == "#ED2124"
        assert Rgba(0.0, 0.0, 0.0, 0.5).to_hex() == "#00000080"


class TestFormatting:
    def test_format_number(self) -> None:
        assert format_number(15.0) == "15"
        assert format_number(1.5) == "1.5"
        assert format_number(-0.025) == "-0.025"
        assert format_number(math.nan) == "nan"

    def test_css_value(self) -> None:
        assert css_value(8, "dimension") == "8px"
        assert css_value("16px", "dimension") == "16px"
        assert css_value(1.5, "number") == "1.5"
        assert css_value(700, "fontWeight") == "700"
        assert css_value(True, "boolean") == "true"
        assert css_value("#fff", "color") == "#fff"
