"""Project models produced by detectors, and the options consumed by generators.

A project model is a tagged union: exactly one of :class:`ViteProject`,
:class:`NextJsProject` or :class:`CraProject`, each carrying the shared build
fields plus its own framework-specific attributes.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Union


class UnknownFrameworkError(ValueError):
    """Raised when a caller names a framework that is not supported."""


class Framework(enum.Enum):
    """Build frameworks the detectors recognize."""

    VITE = "vite"
    NEXTJS = "nextjs"
    CRA = "cra"

    @classmethod
    def parse(cls, value: str) -> Framework:
        try:
            return cls(value.lower())
        except ValueError:
            choices = ", ".join(f.value for f in cls)
            msg = f"Unsupported framework '{value}' (expected one of: {choices})"
            raise UnknownFrameworkError(msg) from None

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Framework.VITE: "Vite",
    Framework.NEXTJS: "Next.js",
    Framework.CRA: "Create React App",
}


class UiLibrary(enum.Enum):
    """UI library used by a Vite project."""

    REACT = "react"
    VUE = "vue"
    SVELTE = "svelte"
    ANGULAR = "angular"
    UNKNOWN = "unknown"


class RouterType(enum.Enum):
    """Next.js routing convention."""

    APP = "app"
    PAGES = "pages"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class _ProjectBase:
    """Fields shared by every project model."""

    framework: ClassVar[Framework]

    version: str
    build_command: str
    build_output_dir: str

    def __post_init__(self) -> None:
        if not self.build_output_dir:
            msg = f"{type(self).__name__} requires a non-empty build_output_dir"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the camelCase keys of the tool protocol."""
        return {
            "framework": self.framework.value,
            "version": self.version,
            "buildCommand": self.build_command,
            "buildOutputDir": self.build_output_dir,
        }


@dataclass(frozen=True)
class ViteProject(_ProjectBase):
    """A Vite (bundler-based) project."""

    framework: ClassVar[Framework] = Framework.VITE

    ui_library: UiLibrary
    config_file_path: str | None
    has_react_router: bool
    has_vue_router: bool

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "uiLibrary": self.ui_library.value,
                "viteConfigPath": self.config_file_path,
                "hasReactRouter": self.has_react_router,
                "hasVueRouter": self.has_vue_router,
            }
        )
        return data


@dataclass(frozen=True)
class NextJsProject(_ProjectBase):
    """A Next.js (meta-framework) project.

    ``is_static_export`` and ``has_api_routes`` are detected independently;
    reconciling them is left to the renderers.
    """

    framework: ClassVar[Framework] = Framework.NEXTJS

    router_type: RouterType
    has_api_routes: bool
    is_static_export: bool

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update(
            {
                "routerType": self.router_type.value,
                "hasApiRoutes": self.has_api_routes,
                "isStaticExport": self.is_static_export,
            }
        )
        return data


@dataclass(frozen=True)
class CraProject(_ProjectBase):
    """A Create React App (legacy toolchain) project."""

    framework: ClassVar[Framework] = Framework.CRA

    has_react_router: bool

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["hasReactRouter"] = self.has_react_router
        return data


ProjectModel = Union[ViteProject, NextJsProject, CraProject]


@dataclass(frozen=True)
class GenerateSpecOptions:
    """Caller-supplied naming for the migration document."""

    project_path: str
    app_name: str
    bundle_id: str
    primary_color: str | None = None


@dataclass(frozen=True)
class CapacitorConfigOptions:
    """Caller-supplied values for the generated Capacitor config."""

    app_name: str
    app_id: str
    web_dir: str
    framework: Framework
    primary_color: str | None = None


@dataclass(frozen=True)
class DetectionResult:
    """Outcome of running the detection coordinator over a project."""

    success: bool
    project: ProjectModel | None = None
    error: str | None = None
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"success": self.success}
        if self.project is not None:
            data["projectInfo"] = self.project.to_dict()
        if self.error is not None:
            data["error"] = self.error
        if self.suggestions:
            data["suggestions"] = list(self.suggestions)
        return data
