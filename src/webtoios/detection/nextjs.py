"""Next.js project detector.

Router type, API routes and static export are derived by independent checks:

- router type: ``app/`` (or ``src/app/``) wins over ``pages/`` when both exist.
- API routes: ``pages/api/`` for the pages router; any ``route.ts`` or
  ``route.js`` below ``app/`` for the app router, at any depth.
- static export: a literal ``output: 'export'`` in the first ``next.config.*``
  that contains one. A value computed at runtime is not seen, so detection can
  miss a real static export but never reports one that is not written down.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar

from webtoios.detection.models import Framework, NextJsProject, RouterType
from webtoios.infrastructure.files import (
    DEFAULT_MAX_BYTES,
    build_script,
    dependency_version,
    is_directory,
    read_bounded,
    read_manifest,
)

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_NAMES = (
    "next.config.js",
    "next.config.mjs",
    "next.config.ts",
)

STATIC_OUT_DIR = "out"
SERVER_OUT_DIR = ".next"

ROUTE_FILE_NAMES = frozenset({"route.ts", "route.js"})

# output: 'export' or output:"export"
_STATIC_EXPORT_RE = re.compile(r"""output\s*:\s*['"]export['"]""")


def _roots(project_dir: Path, name: str) -> tuple[Path, Path]:
    return project_dir / name, project_dir / "src" / name


def detect_router_type(project_dir: Path) -> RouterType:
    if any(is_directory(p) for p in _roots(project_dir, "app")):
        return RouterType.APP
    if any(is_directory(p) for p in _roots(project_dir, "pages")):
        return RouterType.PAGES
    return RouterType.UNKNOWN


def has_route_files(directory: Path) -> bool:
    """Return ``True`` if *directory* contains an app-router route handler."""
    if not is_directory(directory):
        return False
    try:
        return any(
            f.name in ROUTE_FILE_NAMES and f.is_file() for f in directory.rglob("route.*")
        )
    except OSError:
        logger.debug("Could not scan %s for route handlers", directory)
        return False


def detect_api_routes(project_dir: Path, router_type: RouterType) -> bool:
    if router_type is RouterType.PAGES:
        return any(is_directory(p / "api") for p in _roots(project_dir, "pages"))
    if router_type is RouterType.APP:
        return any(has_route_files(p) for p in _roots(project_dir, "app"))
    return False


@dataclass(frozen=True)
class NextJsDetector:
    """Recognize projects that declare ``next`` as a dependency."""

    name: ClassVar[str] = Framework.NEXTJS.display_name

    max_read_bytes: int = DEFAULT_MAX_BYTES

    def detect(self, project_dir: Path) -> NextJsProject | None:
        manifest = read_manifest(project_dir, self.max_read_bytes)
        if manifest is None:
            return None

        version = dependency_version(manifest, "next")
        if version is None:
            return None

        router_type = detect_router_type(project_dir)
        is_static_export = self.detect_static_export(project_dir)

        return NextJsProject(
            version=version,
            build_command=build_script(manifest, "next build"),
            build_output_dir=STATIC_OUT_DIR if is_static_export else SERVER_OUT_DIR,
            router_type=router_type,
            has_api_routes=detect_api_routes(project_dir, router_type),
            is_static_export=is_static_export,
        )

    def detect_static_export(self, project_dir: Path) -> bool:
        for name in CONFIG_NAMES:
            content = read_bounded(project_dir / name, self.max_read_bytes)
            if not content:
                continue
            if _STATIC_EXPORT_RE.search(content):
                return True
            logger.debug("No literal static export in %s", name)
        return False
