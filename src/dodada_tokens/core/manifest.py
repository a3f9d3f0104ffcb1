import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ErrorContext, ManifestError

logger = logging.getLogger(__name__)

MANIFEST_FILE = "tokens.toml"

LOG_LEVEL_ENV = "DODADA_TOKENS_LOG_LEVEL"

# Declared merge order; later files override earlier ones.
DEFAULT_SOURCE_FILES: list[str] = [
    "tokens/core/spacing.json",
    "tokens/core/radius.json",
    "tokens/core/sizing.json",
    "tokens/core/elevation.json",
    "tokens/core/color.json",
    "tokens/core/font.json",
    "tokens/core/icons.json",
    "tokens/semantic/layout.json",
    "tokens/semantic/component.json",
    "tokens/semantic/typography.json",
    "tokens/themes/main.json",
]

PLATFORMS: tuple[str, ...] = ("ios", "android", "web", "css", "scss", "assets")


# =============================================================================
# Manifest Sections
# =============================================================================


@dataclass
class ProjectConfig:
    """Project naming."""

    name: str = "dodada"
    prefix: str = "Dodada"  # Type-name prefix for generated Swift/Kotlin/TS types


@dataclass
class SourcesConfig:
    """Token source files, merged in order."""

    root: Path = Path(".")
    files: list[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_FILES))


@dataclass
class OutputConfig:
    """Where and what to write."""

    build_dir: Path = Path("build")
    dist_dir: Path = Path("dist")
    platforms: list[str] = field(default_factory=lambda: list(PLATFORMS))
    kotlin_package: str = "com.dodada.tokens"


@dataclass
class ThemesConfig:
    """Themes to materialize, by name under ``root``."""

    root: str = "theme"
    names: list[str] = field(default_factory=lambda: ["main"])

    def path_for(self, name: str) -> str:
        return f"{self.root}.{name}" if self.root else name


@dataclass
class BuildOptions:
    """Value-parsing policy."""

    strict: bool = True  # Unparseable dimensions fail the build instead of becoming 0


@dataclass
class BuildManifest:
    """Complete build configuration (tokens.toml).

    Every section is optional; defaults reproduce the standard source list
    and emit every platform.

    Example tokens.toml:

        [project]
        name = "dodada"
        prefix = "Dodada"

        [sources]
        root = "."
        files = ["tokens/core/spacing.json", "tokens/core/color.json"]

        [output]
        dist_dir = "dist"
        platforms = ["ios", "android", "web", "css"]

        [themes]
        names = ["main"]

        [build]
        strict = false
    """

    project: ProjectConfig = field(default_factory=ProjectConfig)
    sources: SourcesConfig = field(default_factory=SourcesConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    themes: ThemesConfig = field(default_factory=ThemesConfig)
    build: BuildOptions = field(default_factory=BuildOptions)
    base_dir: Path = Path(".")

    @property
    def source_root(self) -> Path:
        return self.base_dir / self.sources.root

    @property
    def build_dir(self) -> Path:
        return self.base_dir / self.output.build_dir

    @property
    def dist_dir(self) -> Path:
        return self.base_dir / self.output.dist_dir


# =============================================================================
# Loading
# =============================================================================


def _expect(value: Any, kind: type | tuple[type, ...], key: str, path: Path | None) -> Any:
    if not isinstance(value, kind):
        raise ManifestError(
            f"'{key}' has the wrong type ({type(value).__name__})",
            ErrorContext(file=path),
        )
    return value


def _string_list(value: Any, key: str, path: Path | None) -> list[str]:
    items = _expect(value, list, key, path)
    for item in items:
        _expect(item, str, key, path)
    return list(items)


def parse_manifest(data: dict[str, Any], base_dir: Path, path: Path | None = None) -> BuildManifest:
    """Build a BuildManifest from parsed TOML data.

    Raises:
        ManifestError: On wrong value types or unknown platforms.
    """
    project_data = _expect(data.get("project", {}), dict, "project", path)
    sources_data = _expect(data.get("sources", {}), dict, "sources", path)
    output_data = _expect(data.get("output", {}), dict, "output", path)
    themes_data = _expect(data.get("themes", {}), dict, "themes", path)
    build_data = _expect(data.get("build", {}), dict, "build", path)

    project = ProjectConfig(
        name=_expect(project_data.get("name", "dodada"), str, "project.name", path),
        prefix=_expect(project_data.get("prefix", "Dodada"), str, "project.prefix", path),
    )

    sources = SourcesConfig(
        root=Path(_expect(sources_data.get("root", "."), str, "sources.root", path)),
        files=_string_list(sources_data.get("files", DEFAULT_SOURCE_FILES), "sources.files", path),
    )

    platforms = _string_list(output_data.get("platforms", list(PLATFORMS)), "output.platforms", path)
    unknown = [p for p in platforms if p not in PLATFORMS]
    if unknown:
        raise ManifestError(
            f"Unknown platform(s): {', '.join(unknown)}. Known: {', '.join(PLATFORMS)}",
            ErrorContext(file=path),
        )

    output = OutputConfig(
        build_dir=Path(_expect(output_data.get("build_dir", "build"), str, "output.build_dir", path)),
        dist_dir=Path(_expect(output_data.get("dist_dir", "dist"), str, "output.dist_dir", path)),
        platforms=platforms,
        kotlin_package=_expect(
            output_data.get("kotlin_package", "com.dodada.tokens"), str, "output.kotlin_package", path
        ),
    )

    themes = ThemesConfig(
        root=_expect(themes_data.get("root", "theme"), str, "themes.root", path),
        names=_string_list(themes_data.get("names", ["main"]), "themes.names", path),
    )

    build = BuildOptions(strict=_expect(build_data.get("strict", True), bool, "build.strict", path))

    return BuildManifest(
        project=project,
        sources=sources,
        output=output,
        themes=themes,
        build=build,
        base_dir=base_dir,
    )


def load_manifest(path: Path) -> BuildManifest:
    """Load tokens.toml. Relative paths in it are relative to its directory.

    Raises:
        ManifestError: If the file is missing, is not valid TOML, or has invalid values.
    """
    if not path.exists():
        raise ManifestError(f"Manifest not found: {path}")
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e
    return parse_manifest(data, path.parent, path)


def find_manifest(start: Path, *, use_defaults: bool = True) -> BuildManifest:
    """Load ``start/tokens.toml``, or the default manifest rooted at ``start``."""
    manifest_path = start / MANIFEST_FILE
    if manifest_path.exists():
        return load_manifest(manifest_path)
    if not use_defaults:
        raise ManifestError(f"Manifest not found: {manifest_path}")
    logger.debug("No %s in %s, using defaults", MANIFEST_FILE, start)
    return BuildManifest(base_dir=start)


def default_log_level() -> str:
    """Log level from the environment, INFO if unset."""
    return os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
