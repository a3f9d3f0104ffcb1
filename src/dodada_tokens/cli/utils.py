"""
CLI utilities.

Shared helpers used across CLI modules.
"""

from __future__ import annotations

import logging
import platform
from pathlib import Path

import typer

from dodada_tokens._version import get_version
from dodada_tokens.core.manifest import BuildManifest, default_log_level, find_manifest, load_manifest

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"dodada-tokens {get_version()}")
        typer.echo(f"Python {platform.python_version()} ({platform.python_implementation()})")
        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging; ``verbose`` forces DEBUG."""
    level_name = "DEBUG" if verbose else default_log_level()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        force=True,
    )


def load_project_manifest(manifest: Path | None) -> BuildManifest:
    """Load the given manifest, or ``./tokens.toml`` / defaults when omitted."""
    if manifest is None:
        return find_manifest(Path.cwd())
    return load_manifest(manifest.resolve())
