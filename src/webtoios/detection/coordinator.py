"""Detection coordinator: run detectors in priority order, first match wins."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from webtoios.detection.cra import CraDetector
from webtoios.detection.models import (
    CraProject,
    DetectionResult,
    NextJsProject,
    ProjectModel,
    RouterType,
    ViteProject,
)
from webtoios.detection.nextjs import NextJsDetector
from webtoios.detection.vite import ViteDetector
from webtoios.infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

logger = logging.getLogger(__name__)


class Detector(Protocol):
    """Tests one framework hypothesis against a project directory."""

    name: str

    def detect(self, project_dir: Path) -> ProjectModel | None: ...


_PRECONDITIONS = (
    "package.json exists in the project root",
    "The framework is installed in dependencies or devDependencies",
)


def default_detectors(settings: Settings | None = None) -> list[Detector]:
    """Return the detectors in priority order.

    Order only matters for trees that satisfy more than one detector.
    """
    max_bytes = (settings or Settings()).max_read_bytes
    return [
        ViteDetector(max_read_bytes=max_bytes),
        NextJsDetector(max_read_bytes=max_bytes),
        CraDetector(max_read_bytes=max_bytes),
    ]


def detect_project(
    project_dir: Path,
    detectors: Sequence[Detector] | None = None,
) -> DetectionResult:
    """Detect the framework of the project at *project_dir*.

    Returns a successful result with the first matching model, or a failed
    result listing the supported frameworks and the preconditions for
    detection.
    """
    if detectors is None:
        detectors = default_detectors(load_settings(project_dir))

    for detector in detectors:
        project = detector.detect(project_dir)
        if project is not None:
            logger.info("Detected %s %s in %s", detector.name, project.version, project_dir)
            return DetectionResult(success=True, project=project)
        logger.debug("%s detector declined %s", detector.name, project_dir)

    names = [d.name for d in detectors]
    return DetectionResult(
        success=False,
        error=f"No supported framework detected in: {project_dir}",
        suggestions=(*names, *_PRECONDITIONS),
    )


def supported_frameworks(detectors: Sequence[Detector] | None = None) -> list[str]:
    return [d.name for d in (detectors or default_detectors())]


def is_capacitor_ready(project: ProjectModel) -> bool:
    """Return ``True`` when the build output can be wrapped by Capacitor as-is.

    Next.js needs a static export and no API routes; Vite and CRA always
    produce static assets.
    """
    if isinstance(project, NextJsProject):
        return project.is_static_export and not project.has_api_routes
    return True


_ROUTER_LABELS = {
    RouterType.APP: "App Router (app/)",
    RouterType.PAGES: "Pages Router (pages/)",
    RouterType.UNKNOWN: "Unknown",
}


def format_detection(result: DetectionResult) -> str:
    """Render a detection result as a Markdown report."""
    project = result.project
    if not result.success or project is None:
        frameworks = [s for s in result.suggestions if s not in _PRECONDITIONS]
        lines = [f"❌ {result.error}", "", "Supported frameworks:"]
        lines.extend(f"- {name}" for name in frameworks)
        lines.extend(["", "Please ensure:"])
        lines.extend(f"- {item}" for item in _PRECONDITIONS)
        return "\n".join(lines)

    lines = [
        f"✓ Framework detected: **{project.framework.value.upper()}**",
        "",
        f"**Version:** {project.version}",
        f"**Build Command:** `{project.build_command}`",
        f"**Build Output:** `{project.build_output_dir}`",
        "",
    ]

    if isinstance(project, ViteProject):
        lines.append(f"**UI Library:** {project.ui_library.value}")
        lines.append(f"**Vite Config:** {project.config_file_path or 'Not found'}")
        if project.has_react_router:
            lines.append("**React Router:** Yes")
        if project.has_vue_router:
            lines.append("**Vue Router:** Yes")

    elif isinstance(project, NextJsProject):
        lines.append(f"**Router Type:** {_ROUTER_LABELS[project.router_type]}")
        lines.append(f"**API Routes:** {'Yes ⚠️' if project.has_api_routes else 'No'}")
        lines.append(
            "**Static Export:** "
            f"{'Enabled ✓' if project.is_static_export else 'Not configured ⚠️'}"
        )
        if not project.is_static_export:
            lines.append("")
            lines.append("> ⚠️ **Important:** Next.js requires static export for Capacitor.")
            lines.append("> Add `output: 'export'` to next.config.js")
        if project.has_api_routes:
            lines.append("")
            lines.append(
                "> ⚠️ **Warning:** API routes detected. These won't work with static export."
            )
            lines.append("> Consider moving to external backend (Supabase, Firebase, etc.)")

    elif isinstance(project, CraProject):
        lines.append(f"**React Router:** {'Yes' if project.has_react_router else 'No'}")

    ready = "✓ Ready" if is_capacitor_ready(project) else "⚠️ Needs configuration"
    lines.extend(["", f"**Capacitor Compatibility:** {ready}"])
    return "\n".join(lines)
