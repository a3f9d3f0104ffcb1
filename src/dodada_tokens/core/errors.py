"""
Error types for token loading, naming, value parsing, and theme output.
"""

from dataclasses import dataclass
from pathlib import Path


class TokenBuildError(Exception):
    """Base exception for all token build errors."""

    def __init__(self, message: str, context: "ErrorContext | None" = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class SourceError(TokenBuildError):
    """
    Raised when a token source file cannot be used.

    Examples:
    - Malformed JSON
    - Top-level value that is not an object
    """

    pass


class ManifestError(TokenBuildError):
    """
    Raised when tokens.toml is invalid.

    Examples:
    - TOML syntax errors
    - Unknown output platform
    - Wrong value types
    """

    pass


class IdentifierCollisionError(TokenBuildError):
    """
    Raised when two tokens derive the same identifier.

    Two paths in one category collapsing to the same platform-safe name
    would make one accessor silently overwrite the other.
    """

    def __init__(self, category: str, identifier: str, first_path: str, second_path: str):
        self.category = category
        self.identifier = identifier
        self.paths = (first_path, second_path)
        super().__init__(
            f"Identifier collision in '{category}': '{first_path}' and '{second_path}' "
            f"both map to '{identifier}'"
        )


class DimensionParseError(TokenBuildError):
    """
    Raised in strict mode when a value cannot be read as a number.

    Examples:
    - "12rem" where px is expected
    - "wide" as a letter spacing
    """

    pass


class ThemeNotFoundError(TokenBuildError):
    """Raised when a configured theme path does not exist in the tree."""

    pass


@dataclass
class ErrorContext:
    """
    Where an error happened.

    Attributes:
        file: Source file involved, if any
        token_path: Dot path of the token involved, if any
    """

    file: Path | None = None
    token_path: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens/core/color.json (color.primary.500)"
        """
        parts: list[str] = []
        if self.file is not None:
            parts.append(str(self.file))
        if self.token_path:
            parts.append(f"({self.token_path})" if parts else self.token_path)
        return " ".join(parts)
