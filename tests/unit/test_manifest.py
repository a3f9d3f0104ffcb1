"""Tests for tokens.toml loading."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from dodada_tokens.core.errors import ManifestError
from dodada_tokens.core.manifest import (
    DEFAULT_SOURCE_FILES,
    LOG_LEVEL_ENV,
    PLATFORMS,
    BuildManifest,
    default_log_level,
    find_manifest,
    load_manifest,
    parse_manifest,
)


def _write_toml(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "tokens.toml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


class TestParseManifest:
    def test_defaults(self, tmp_path: Path) -> None:
        manifest = parse_manifest({}, tmp_path)
        assert manifest.project.prefix == "Dodada"
        assert manifest.sources.files == DEFAULT_SOURCE_FILES
        assert manifest.output.platforms == list(PLATFORMS)
        assert manifest.output.kotlin_package == "com.dodada.tokens"
        assert manifest.themes.names == ["main"]
        assert manifest.build.strict is True

    def test_paths_relative_to_base(self, tmp_path: Path) -> None:
        manifest = parse_manifest({"sources": {"root": "design"}, "output": {"dist_dir": "out"}}, tmp_path)
        assert manifest.source_root == tmp_path / "design"
        assert manifest.dist_dir == tmp_path / "out"
        assert manifest.build_dir == tmp_path / "build"

    def test_unknown_platform(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="flutter"):
            parse_manifest({"output": {"platforms": ["ios", "flutter"]}}, tmp_path)

    def test_wrong_type(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="build.strict"):
            parse_manifest({"build": {"strict": "yes"}}, tmp_path)

    def test_files_must_be_strings(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="sources.files"):
            parse_manifest({"sources": {"files": ["a.json", 3]}}, tmp_path)

    def test_theme_path(self, tmp_path: Path) -> None:
        manifest = parse_manifest({"themes": {"root": "theme", "names": ["main", "dark"]}}, tmp_path)
        assert [manifest.themes.path_for(n) for n in manifest.themes.names] == ["theme.main", "theme.dark"]


class TestLoadManifest:
    def test_full_file(self, tmp_path: Path) -> None:
        path = _write_toml(
            tmp_path,
            """\
            [project]
            name = "acme"
            prefix = "Acme"

            [sources]
            files = ["tokens/spacing.json"]

            [output]
            platforms = ["css", "web"]
            kotlin_package = "com.acme.tokens"

            [build]
            strict = false
            """,
        )
        manifest = load_manifest(path)
        assert manifest.project.name == "acme"
        assert manifest.project.prefix == "Acme"
        assert manifest.sources.files == ["tokens/spacing.json"]
        assert manifest.output.platforms == ["css", "web"]
        assert manifest.output.kotlin_package == "com.acme.tokens"
        assert manifest.build.strict is False
        assert manifest.base_dir == tmp_path

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "tokens.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write_toml(tmp_path, "[project\nname = 1\n")
        with pytest.raises(ManifestError, match="Invalid TOML"):
            load_manifest(path)


class TestFindManifest:
    def test_defaults_when_absent(self, tmp_path: Path) -> None:
        manifest = find_manifest(tmp_path)
        assert isinstance(manifest, BuildManifest)
        assert manifest.base_dir == tmp_path

    def test_required(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestError):
            find_manifest(tmp_path, use_defaults=False)

    def test_loads_file(self, tmp_path: Path) -> None:
        _write_toml(tmp_path, '[project]\nprefix = "Acme"\n')
        assert find_manifest(tmp_path).project.prefix == "Acme"


class TestLogLevel:
    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        assert default_log_level() == "INFO"

    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        assert default_log_level() == "DEBUG"
