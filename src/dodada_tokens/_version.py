"""Version lookup for dodada-tokens."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DISTRIBUTION = "dodada-tokens"

# src/dodada_tokens/_version.py -> repository root
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version(pyproject: Path) -> str | None:
    """Version from a source checkout's pyproject.toml, if it is ours."""
    if not pyproject.is_file():
        return None
    try:
        project = tomllib.loads(pyproject.read_text(encoding="utf-8")).get("project", {})
    except tomllib.TOMLDecodeError:
        return None
    if project.get("name") != DISTRIBUTION:
        return None
    version = project.get("version")
    return version if isinstance(version, str) else None


def get_version() -> str:
    """Checkout version when running from source, else the installed metadata."""
    checkout = _checkout_version(_PYPROJECT)
    if checkout:
        return checkout
    try:
        return _metadata_version(DISTRIBUTION)
    except PackageNotFoundError:
        return "0.0.0"
