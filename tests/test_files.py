"""Tests for webtoios.infrastructure.files — the read-only file facade."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from webtoios.infrastructure.files import (
    build_script,
    dependency_version,
    has_dependency,
    is_directory,
    path_exists,
    read_bounded,
    read_json,
    read_manifest,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestReadBounded:
    def test_reads_text(self, tmp_path: Path) -> None:
        f = tmp_path / "a.txt"
        f.write_text("hello")
        assert read_bounded(f) == "hello"

    def test_missing_file_is_none(self, tmp_path: Path) -> None:
        assert read_bounded(tmp_path / "missing.txt") is None

    def test_oversized_file_is_none(self, tmp_path: Path) -> None:
        f = tmp_path / "big.txt"
        f.write_text("x" * 100)
        assert read_bounded(f, max_bytes=10) is None

    def test_file_at_bound_is_read(self, tmp_path: Path) -> None:
        f = tmp_path / "exact.txt"
        f.write_text("x" * 10)
        assert read_bounded(f, max_bytes=10) == "x" * 10

    def test_binary_file_is_none(self, tmp_path: Path) -> None:
        f = tmp_path / "blob.bin"
        f.write_bytes(b"\xff\xfe\x00\x81")
        assert read_bounded(f) is None

    def test_directory_is_none(self, tmp_path: Path) -> None:
        assert read_bounded(tmp_path) is None


class TestReadJson:
    def test_parses_object(self, tmp_path: Path) -> None:
        f = tmp_path / "data.json"
        f.write_text('{"a": 1}')
        assert read_json(f) == {"a": 1}

    def test_invalid_json_is_none(self, tmp_path: Path) -> None:
        f = tmp_path / "broken.json"
        f.write_text("{not json")
        assert read_json(f) is None

    def test_empty_file_is_none(self, tmp_path: Path) -> None:
        f = tmp_path / "empty.json"
        f.write_text("")
        assert read_json(f) is None

    def test_missing_is_none(self, tmp_path: Path) -> None:
        assert read_json(tmp_path / "nope.json") is None

    def test_deeply_nested_json_is_none(self, tmp_path: Path) -> None:
        f = tmp_path / "deep.json"
        f.write_text("[" * 200_000 + "]" * 200_000)
        assert read_json(f) is None


class TestReadManifest:
    def test_reads_package_json(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text(json.dumps({"name": "app"}))
        assert read_manifest(tmp_path) == {"name": "app"}

    def test_missing_manifest(self, tmp_path: Path) -> None:
        assert read_manifest(tmp_path) is None

    def test_non_object_manifest_is_absent(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("[1, 2, 3]")
        assert read_manifest(tmp_path) is None

    def test_deeply_nested_manifest_is_absent(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").write_text("[" * 200_000 + "]" * 200_000)
        assert read_manifest(tmp_path) is None


class TestPaths:
    def test_path_exists(self, tmp_path: Path) -> None:
        (tmp_path / "f").write_text("")
        assert path_exists(tmp_path / "f")
        assert not path_exists(tmp_path / "g")

    def test_is_directory(self, tmp_path: Path) -> None:
        (tmp_path / "d").mkdir()
        (tmp_path / "f").write_text("")
        assert is_directory(tmp_path / "d")
        assert not is_directory(tmp_path / "f")
        assert not is_directory(tmp_path / "missing")


class TestManifestHelpers:
    def test_dependency_version_prod_first(self) -> None:
        manifest = {
            "dependencies": {"vite": "^5.0.0"},
            "devDependencies": {"vite": "^4.0.0"},
        }
        assert dependency_version(manifest, "vite") == "^5.0.0"

    def test_dependency_version_dev(self) -> None:
        manifest = {"devDependencies": {"vite": "^5.0.0"}}
        assert dependency_version(manifest, "vite") == "^5.0.0"

    def test_dependency_version_missing(self) -> None:
        assert dependency_version({"dependencies": {"react": "18"}}, "vite") is None

    def test_malformed_sections_ignored(self) -> None:
        manifest = {"dependencies": ["vite"], "devDependencies": "vite"}
        assert dependency_version(manifest, "vite") is None

    def test_has_dependency_any(self) -> None:
        manifest = {"dependencies": {"react-router": "6"}}
        assert has_dependency(manifest, "react-router-dom", "react-router")
        assert not has_dependency(manifest, "vue-router")

    def test_build_script(self) -> None:
        assert build_script({"scripts": {"build": "tsc && vite build"}}, "vite build") == (
            "tsc && vite build"
        )
        assert build_script({"scripts": {}}, "vite build") == "vite build"
        assert build_script({}, "next build") == "next build"
