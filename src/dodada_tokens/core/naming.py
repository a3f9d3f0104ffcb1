"""
Platform-safe identifier derivation.

Turns token path segments into one lowerCamelCase identifier that is a
valid bare name in Swift, Kotlin and TypeScript. Segments that start with
a digit or contain symbols are rewritten first; the fixed table below takes
precedence over the fallback rules, so adding a new numeric-prefixed token
name is a data change.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .errors import IdentifierCollisionError

SAFE_SEGMENTS: dict[str, str] = {
    "0": "zero",
    "2xs": "twoXs",
    "2xl": "twoXl",
    "3xl": "threeXl",
    "4xl": "fourXl",
    "5xl": "fiveXl",
    "level_0": "levelZero",
    "level_1": "levelOne",
    "level_2": "levelTwo",
    "level_3": "levelThree",
    "level_4": "levelFour",
}

DIGIT_WORDS: tuple[str, ...] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

# Words that cannot be used as a bare enum case / property name in at
# least one target language.
RESERVED_WORDS: frozenset[str] = frozenset(
    {
        # Swift
        "associatedtype", "break", "case", "catch", "class", "continue", "default",
        "defer", "deinit", "do", "else", "enum", "extension", "fallthrough", "false",
        "fileprivate", "for", "func", "guard", "if", "import", "in", "init", "inout",
        "internal", "is", "let", "nil", "operator", "private", "protocol", "public",
        "repeat", "rethrows", "return", "self", "static", "struct", "subscript",
        "super", "switch", "throw", "throws", "true", "try", "typealias", "var",
        "where", "while",
        # Kotlin
        "as", "fun", "interface", "null", "object", "package", "this", "typeof",
        "val", "when",
        # TypeScript
        "const", "debugger", "delete", "export", "extends", "function", "instanceof",
        "new", "void", "with", "yield",
    }
)

RESERVED_SUFFIX = "Token"

_SYMBOLS_RE = re.compile(r"[^A-Za-z0-9]+")
_LEADING_DIGITS_RE = re.compile(r"^(\d+)(.*)$", re.DOTALL)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def _lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def _spell_number(digits: str) -> str:
    if len(digits) == 1:
        return DIGIT_WORDS[int(digits)]
    return f"value{digits}"


def _rewrite_part(part: str) -> str:
    match = _LEADING_DIGITS_RE.match(part)
    if not match:
        return part
    digits, rest = match.groups()
    return _spell_number(digits) + _capitalize(rest)


def safe_segment(segment: str) -> str:
    """Rewrite one path segment into a bare-identifier-safe word.

    Examples:
        >>> safe_segment("2xl")
        'twoXl'
        >>> safe_segment("7")
        'seven'
        >>> safe_segment("500")
        'value500'
        >>> safe_segment("10xl")
        'value10Xl'
        >>> safe_segment("primary-light")
        'primaryLight'
    """
    if segment in SAFE_SEGMENTS:
        return SAFE_SEGMENTS[segment]

    parts = [p for p in _SYMBOLS_RE.split(segment) if p]
    if not parts:
        return "value"
    head = _rewrite_part(parts[0])
    tail = "".join(_capitalize(_rewrite_part(p)) for p in parts[1:])
    return head + tail


def identifier_for(segments: Sequence[str]) -> str:
    """Derive the cross-platform identifier for a token path.

    The first segment is lower-cased at its first character, later segments
    are capitalized, and a result that is a reserved word in any target
    language gets a ``Token`` suffix.
    """
    words = [safe_segment(s) for s in segments]
    if not words:
        return "value"
    name = _lower_first(words[0]) + "".join(_capitalize(w) for w in words[1:])
    if name in RESERVED_WORDS:
        name += RESERVED_SUFFIX
    return name


def pascal_case(identifier: str) -> str:
    """``bodyBold`` → ``BodyBold`` (Kotlin enum entries, type names)."""
    return _capitalize(identifier)


def check_unique(category: str, entries: Iterable[tuple[str, str]]) -> None:
    """Fail if two paths in one category share an identifier.

    Args:
        category: Category name, for the error message.
        entries: ``(identifier, path)`` pairs.

    Raises:
        IdentifierCollisionError: On the first duplicate identifier.
    """
    seen: dict[str, str] = {}
    for identifier, path in entries:
        if identifier in seen:
            raise IdentifierCollisionError(category, identifier, seen[identifier], path)
        seen[identifier] = path
