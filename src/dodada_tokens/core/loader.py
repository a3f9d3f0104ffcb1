"""
Token source loading.

Reads the JSON token source files in declared order. A missing file is a
warning and contributes an empty document; malformed JSON is fatal.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ErrorContext, SourceError

logger = logging.getLogger(__name__)


def load_source(path: Path) -> dict[str, Any]:
    """Load one token source document.

    Args:
        path: JSON file to read.

    Returns:
        Parsed document, or an empty dict if the file does not exist.

    Raises:
        SourceError: If the file is not valid JSON or is not a JSON object.
    """
    if not path.exists():
        logger.warning("Token source not found, skipping: %s", path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SourceError(
            f"Invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}",
            ErrorContext(file=path),
        ) from e

    if not isinstance(data, dict):
        raise SourceError(
            f"Token source must be a JSON object, got {type(data).__name__}",
            ErrorContext(file=path),
        )
    return data


def load_sources(root: Path, files: list[str]) -> list[dict[str, Any]]:
    """Load every source file relative to ``root``, preserving order."""
    documents = []
    for name in files:
        path = root / name
        logger.debug("Loading token source %s", path)
        documents.append(load_source(path))
    return documents
