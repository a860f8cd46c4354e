"""Shared test fixtures for web-to-ios."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


def write_manifest(
    project: Path,
    *,
    dependencies: dict[str, str] | None = None,
    dev_dependencies: dict[str, str] | None = None,
    scripts: dict[str, str] | None = None,
) -> None:
    """Write a ``package.json`` into *project*."""
    data: dict[str, Any] = {"name": project.name, "version": "1.0.0"}
    if dependencies is not None:
        data["dependencies"] = dependencies
    if dev_dependencies is not None:
        data["devDependencies"] = dev_dependencies
    if scripts is not None:
        data["scripts"] = scripts
    (project / "package.json").write_text(json.dumps(data, indent=2))


def touch(project: Path, relative: str, content: str = "") -> Path:
    """Create a file (and its parent directories) inside *project*."""
    path = project / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture()
def web_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory for a web project directory with a ``package.json``."""

    def _make(
        *,
        dependencies: dict[str, str] | None = None,
        dev_dependencies: dict[str, str] | None = None,
        scripts: dict[str, str] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        project = tmp_path / "web"
        project.mkdir(exist_ok=True)
        write_manifest(
            project,
            dependencies=dependencies,
            dev_dependencies=dev_dependencies,
            scripts=scripts,
        )
        for relative, content in (files or {}).items():
            touch(project, relative, content)
        return project

    return _make
