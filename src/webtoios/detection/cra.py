"""Create React App project detector."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from webtoios.detection.models import CraProject, Framework
from webtoios.infrastructure.files import (
    DEFAULT_MAX_BYTES,
    build_script,
    dependency_version,
    has_dependency,
    read_bounded,
    read_manifest,
)

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

# react-scripts reads BUILD_PATH from the environment; production wins.
ENV_FILE_NAMES = (".env.production", ".env")

DEFAULT_OUT_DIR = "build"

_BUILD_PATH_RE = re.compile(r"""^[ \t]*BUILD_PATH[ \t]*=[ \t]*['"]?([^'"\s#]+)""", re.MULTILINE)


@dataclass(frozen=True)
class CraDetector:
    """Recognize projects that declare ``react-scripts`` as a dependency."""

    name: ClassVar[str] = Framework.CRA.display_name

    max_read_bytes: int = DEFAULT_MAX_BYTES

    def detect(self, project_dir: Path) -> CraProject | None:
        manifest = read_manifest(project_dir, self.max_read_bytes)
        if manifest is None:
            return None

        version = dependency_version(manifest, "react-scripts")
        if version is None:
            return None

        return CraProject(
            version=version,
            build_command=build_script(manifest, "react-scripts build"),
            build_output_dir=self._output_dir(project_dir),
            has_react_router=has_dependency(manifest, "react-router-dom", "react-router"),
        )

    def _output_dir(self, project_dir: Path) -> str:
        for name in ENV_FILE_NAMES:
            content = read_bounded(project_dir / name, self.max_read_bytes)
            if not content:
                continue
            match = _BUILD_PATH_RE.search(content)
            if match is not None:
                return match.group(1)
        logger.debug("No BUILD_PATH in %s, using %s", project_dir, DEFAULT_OUT_DIR)
        return DEFAULT_OUT_DIR
