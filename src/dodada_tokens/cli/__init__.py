"""
dodada-tokens CLI package.

- build.py: the build command
- query.py: resolve / list / check
- utils.py: version, logging and manifest helpers
"""

from __future__ import annotations

from typing import Annotated

import typer

from dodada_tokens._version import get_version

from .build import build_command
from .query import check_command, list_command, resolve_command
from .utils import configure_logging, version_callback

__version__ = get_version()

# =============================================================================
# Main Application
# =============================================================================

app = typer.Typer(
    help="""dodada-tokens - design token build pipeline

Merges the token JSON sources and generates Swift, Kotlin, TypeScript,
CSS/SCSS and iOS asset catalogs.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and environment information",
        ),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """dodada-tokens main callback for global options."""
    configure_logging(verbose)


app.command(name="build")(build_command)
app.command(name="resolve")(resolve_command)
app.command(name="list")(list_command)
app.command(name="check")(check_command)


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    app(standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "version_callback",
]
