"""
Flattened token IR types.

These are the records handed to the platform emitters: one FlatToken per
leaf of the normalized tree, and one TextStyle per typography variant.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TOKEN_TYPE = "string"


class FlatToken(BaseModel):
    """A leaf token addressed within its category."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(description="Category the token is emitted under")
    path: str = Field(description="Dot-joined path from the category root")
    path_segments: tuple[str, ...] = Field(description="Ordered path keys")
    identifier: str = Field(description="Platform-safe lowerCamelCase name")
    value: Any = Field(description="Resolved value, or the literal unresolved reference")
    type: str = Field(default=DEFAULT_TOKEN_TYPE, description="Declared token type")

    @property
    def is_numeric(self) -> bool:
        return self.type in ("dimension", "number")


class FontSpec(BaseModel):
    """Composite font record for one text style."""

    model_config = ConfigDict(frozen=True)

    family: str = ""
    size: float = 0.0
    weight: float = 400.0
    line_height: float = 1.5
    letter_spacing: float | None = None
    underline: bool = False


class TextStyle(BaseModel):
    """A style/variant pair from typography.text, e.g. bodyBold."""

    model_config = ConfigDict(frozen=True)

    identifier: str
    style: str
    variant: str
    font: FontSpec


CategoryMap = dict[str, list[FlatToken]]
