"""Detection domain: framework detectors, project models, coordinator."""

from webtoios.detection.coordinator import (
    Detector,
    default_detectors,
    detect_project,
    format_detection,
    is_capacitor_ready,
    supported_frameworks,
)
from webtoios.detection.cra import CraDetector
from webtoios.detection.models import (
    CapacitorConfigOptions,
    CraProject,
    DetectionResult,
    Framework,
    GenerateSpecOptions,
    NextJsProject,
    ProjectModel,
    RouterType,
    UiLibrary,
    UnknownFrameworkError,
    ViteProject,
)
from webtoios.detection.nextjs import NextJsDetector
from webtoios.detection.vite import ViteDetector

__all__ = [
    "CapacitorConfigOptions",
    "CraDetector",
    "CraProject",
    "DetectionResult",
    "Detector",
    "Framework",
    "GenerateSpecOptions",
    "NextJsDetector",
    "NextJsProject",
    "ProjectModel",
    "RouterType",
    "UiLibrary",
    "UnknownFrameworkError",
    "ViteDetector",
    "ViteProject",
    "default_detectors",
    "detect_project",
    "format_detection",
    "is_capacitor_ready",
    "supported_frameworks",
]
