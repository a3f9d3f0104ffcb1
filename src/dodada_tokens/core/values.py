"""
Token value parsing.

Converts resolved token values into the numbers and colors the platform
emitters need. Unresolved references become NaN so the broken token shows
up in generated code; other unparseable strings raise in strict mode and
fall back to a default (with a warning) in lenient mode.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, NamedTuple

from .errors import DimensionParseError, ErrorContext
from .ir.tree import is_reference_string

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)"
_PX_RE = re.compile(rf"^\s*({_NUMBER})\s*(?:px)?\s*$")
_EM_RE = re.compile(rf"^\s*({_NUMBER})\s*em\s*$")
_PLAIN_RE = re.compile(rf"^\s*({_NUMBER})\s*$")
_RGBA_RE = re.compile(
    rf"^rgba?\(\s*({_NUMBER})\s*,\s*({_NUMBER})\s*,\s*({_NUMBER})\s*(?:,\s*({_NUMBER})\s*)?\)$"
)
_HEX_RE = re.compile(r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fail(kind: str, value: Any, strict: bool, token_path: str | None, default: Any) -> Any:
    message = f"Cannot parse {kind} from {value!r}"
    if strict:
        raise DimensionParseError(message, ErrorContext(token_path=token_path))
    logger.warning("%s%s, using %r", message, f" at {token_path}" if token_path else "", default)
    return default


def parse_px(value: Any, *, strict: bool = True, token_path: str | None = None) -> float:
    """Read a dimension (``16``, ``"16px"``, ``"16"``) as a number of px.

    Args:
        value: Resolved token value.
        strict: Raise on unparseable values instead of returning 0.
        token_path: Token path, for diagnostics.

    Returns:
        The number, or NaN for an unresolved reference.

    Raises:
        DimensionParseError: In strict mode, for any other unparseable value.
    """
    if _is_number(value):
        return float(value)
    if is_reference_string(value):
        return math.nan
    match = _PX_RE.match(str(value))
    if match:
        return float(match.group(1))
    return _fail("px dimension", value, strict, token_path, 0.0)


def parse_number(value: Any, *, strict: bool = True, token_path: str | None = None) -> float:
    """Read a plain number (``700``, ``"1.5"``); same policy as parse_px."""
    if _is_number(value):
        return float(value)
    if is_reference_string(value):
        return math.nan
    match = _PLAIN_RE.match(str(value))
    if match:
        return float(match.group(1))
    return _fail("number", value, strict, token_path, 0.0)


def parse_em(value: Any, *, strict: bool = True, token_path: str | None = None) -> float | None:
    """Read a letter spacing (``"-0.025em"``). None stays None; an unresolved reference is NaN."""
    if value is None:
        return None
    if _is_number(value):
        return float(value)
    if is_reference_string(value):
        return math.nan
    match = _EM_RE.match(str(value))
    if match:
        return float(match.group(1))
    return _fail("em letter spacing", value, strict, token_path, None)


class Rgba(NamedTuple):
    """sRGB color with components in 0..1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @property
    def is_opaque(self) -> bool:
        return self.alpha >= 1.0

    def to_255(self) -> tuple[int, int, int]:
        return (round(self.red * 255), round(self.green * 255), round(self.blue * 255))

    def to_hex(self) -> str:
        """``#RRGGBB``, or ``#RRGGBBAA`` when not opaque."""
        r, g, b = self.to_255()
        text = f"#{r:02X}{g:02X}{b:02X}"
        if not self.is_opaque:
            text += f"{round(self.alpha * 255):02X}"
        return text


TRANSPARENT = Rgba(0.0, 0.0, 0.0, 0.0)


def parse_color(value: Any) -> Rgba | None:
    """Parse ``#RGB``, ``#RRGGBB``, ``#RRGGBBAA``, ``rgb()/rgba()`` or ``transparent``.

    Returns:
        The color, or None if the value is not a recognizable color.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.lower() == "transparent":
        return TRANSPARENT

    match = _HEX_RE.match(text)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        channels = [int(digits[i : i + 2], 16) / 255 for i in range(0, len(digits), 2)]
        return Rgba(*channels)

    match = _RGBA_RE.match(text)
    if match:
        r, g, b, a = match.groups()
        return Rgba(
            float(r) / 255,
            float(g) / 255,
            float(b) / 255,
            float(a) if a is not None else 1.0,
        )
    return None


def format_number(n: float) -> str:
    """Render a number the way the generated sources expect: ``15`` not ``15.0``."""
    if math.isnan(n) or math.isinf(n):
        return str(n)
    if float(n).is_integer():
        return str(int(n))
    return repr(float(n))


def css_value(value: Any, token_type: str) -> str:
    """Render a token value for CSS/SCSS; bare dimension numbers get ``px``."""
    if token_type == "dimension" and _is_number(value):
        return f"{format_number(value)}px"
    if _is_number(value):
        return format_number(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
