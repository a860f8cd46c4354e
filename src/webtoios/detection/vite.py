"""Vite project detector."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from webtoios.detection.models import Framework, UiLibrary, ViteProject
from webtoios.infrastructure.files import (
    DEFAULT_MAX_BYTES,
    build_script,
    dependency_version,
    has_dependency,
    path_exists,
    read_bounded,
    read_manifest,
)

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_NAMES = (
    "vite.config.ts",
    "vite.config.js",
    "vite.config.mjs",
    "vite.config.cjs",
)

DEFAULT_OUT_DIR = "dist"

# build: { outDir: 'build' }
_OUT_DIR_RE = re.compile(r"""outDir\s*:\s*['"]([^'"]+)['"]""")

# Checked in order; the first declared library wins.
_UI_LIBRARIES = (
    ("react", UiLibrary.REACT),
    ("vue", UiLibrary.VUE),
    ("svelte", UiLibrary.SVELTE),
    ("@angular/core", UiLibrary.ANGULAR),
)


def detect_ui_library(manifest: dict[str, Any]) -> UiLibrary:
    """Return the UI library declared in the manifest."""
    for package, library in _UI_LIBRARIES:
        if has_dependency(manifest, package):
            return library
    return UiLibrary.UNKNOWN


def find_config(project_dir: Path) -> str | None:
    """Return the name of the first Vite config file present, if any."""
    for name in CONFIG_NAMES:
        if path_exists(project_dir / name):
            return name
    return None


@dataclass(frozen=True)
class ViteDetector:
    """Recognize projects that declare ``vite`` as a dependency."""

    name: ClassVar[str] = Framework.VITE.display_name

    max_read_bytes: int = DEFAULT_MAX_BYTES

    def detect(self, project_dir: Path) -> ViteProject | None:
        manifest = read_manifest(project_dir, self.max_read_bytes)
        if manifest is None:
            return None

        version = dependency_version(manifest, "vite")
        if version is None:
            return None

        config_name = find_config(project_dir)

        return ViteProject(
            version=version,
            build_command=build_script(manifest, "vite build"),
            build_output_dir=self._output_dir(project_dir, config_name),
            ui_library=detect_ui_library(manifest),
            config_file_path=config_name,
            has_react_router=has_dependency(manifest, "react-router-dom", "react-router"),
            has_vue_router=has_dependency(manifest, "vue-router"),
        )

    def _output_dir(self, project_dir: Path, config_name: str | None) -> str:
        """Extract ``build.outDir`` from the config, or the Vite default.

        Only a literal string value is recognized.
        """
        if config_name is None:
            return DEFAULT_OUT_DIR

        content = read_bounded(project_dir / config_name, self.max_read_bytes)
        if not content:
            return DEFAULT_OUT_DIR

        match = _OUT_DIR_RE.search(content)
        if match is None:
            logger.debug("No literal outDir in %s, using %s", config_name, DEFAULT_OUT_DIR)
            return DEFAULT_OUT_DIR
        return match.group(1)
