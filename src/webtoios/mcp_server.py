"""MCP server: stdio-based tool server exposing detection and generation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import mcp
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.types import Resource, TextContent

from webtoios import __version__
from webtoios.detection.coordinator import (
    detect_project,
    format_detection,
    supported_frameworks,
)
from webtoios.detection.models import (
    CapacitorConfigOptions,
    Framework,
    GenerateSpecOptions,
)
from webtoios.generation.capacitor_config import format_config_bundle, render_capacitor_config
from webtoios.generation.spec_writer import render_migration_spec
from webtoios.infrastructure.config import Settings
from webtoios.resources import GUIDES, guide_for_uri, load_guide

logger = logging.getLogger(__name__)


# --- Tool handler functions (sync, testable without transport) ---


def handle_detect_framework(*, project_path: str) -> str:
    """Detect the framework of a project and return a Markdown report."""
    result = detect_project(Path(project_path))
    return format_detection(result)


def handle_generate_spec(
    *,
    project_path: str,
    app_name: str,
    bundle_id: str,
    primary_color: str | None = None,
) -> str:
    """Detect the project and render its iOS migration document."""
    result = detect_project(Path(project_path))
    if result.project is None:
        frameworks = ", ".join(supported_frameworks())
        return (
            f"❌ Could not detect a supported framework in: {project_path}\n\n"
            f"Supported frameworks: {frameworks}\n\n"
            "Please ensure the project has a valid package.json with framework dependencies."
        )

    options = GenerateSpecOptions(
        project_path=project_path,
        app_name=app_name,
        bundle_id=bundle_id,
        primary_color=primary_color or None,
    )
    return render_migration_spec(result.project, options)


def handle_generate_config(
    *,
    app_name: str,
    app_id: str,
    web_dir: str,
    framework: str,
    primary_color: str | None = None,
    settings: Settings | None = None,
) -> str:
    """Render the Capacitor config bundle as Markdown."""
    settings = settings or Settings()
    options = CapacitorConfigOptions(
        app_name=app_name,
        app_id=app_id,
        web_dir=web_dir,
        framework=Framework.parse(framework),
        primary_color=primary_color or None,
    )
    bundle = render_capacitor_config(options, splash_color=settings.default_splash_color)
    return format_config_bundle(bundle)


# --- MCP Server creation ---

_TOOLS = [
    mcp.Tool(
        name="detect_web_framework",
        description=(
            "Detect the web framework used in a project (Vite, Next.js, CRA). "
            "Returns framework type, version, and build configuration."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "projectPath": {
                    "type": "string",
                    "description": "Absolute path to the web project directory",
                },
            },
            "required": ["projectPath"],
        },
    ),
    mcp.Tool(
        name="generate_ios_migration_spec",
        description=(
            "Generate a detailed iOS migration specification document "
            "based on the detected framework."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "projectPath": {
                    "type": "string",
                    "description": "Absolute path to the web project directory",
                },
                "appName": {
                    "type": "string",
                    "description": 'Name of the iOS app (e.g., "Spark Vault")',
                },
                "bundleId": {
                    "type": "string",
                    "description": 'Bundle identifier (e.g., "com.example.sparkvault")',
                },
                "primaryColor": {
                    "type": "string",
                    "description": 'Optional: Primary color in hex format (e.g., "#8b5cf6")',
                },
            },
            "required": ["projectPath", "appName", "bundleId"],
        },
    ),
    mcp.Tool(
        name="generate_capacitor_config",
        description=(
            "Generate a Capacitor configuration file (capacitor.config.ts) "
            "optimized for the detected framework."
        ),
        inputSchema={
            "type": "object",
            "properties": {
                "appName": {"type": "string", "description": "Name of the app"},
                "appId": {"type": "string", "description": "Bundle identifier"},
                "webDir": {
                    "type": "string",
                    "description": 'Build output directory (e.g., "dist", "out", "build")',
                },
                "framework": {
                    "type": "string",
                    "description": "Framework type (vite, nextjs, cra)",
                    "enum": [f.value for f in Framework],
                },
                "primaryColor": {
                    "type": "string",
                    "description": "Optional: Primary color in hex format",
                },
            },
            "required": ["appName", "appId", "webDir", "framework"],
        },
    ),
]

_ERROR_PREFIXES = {
    "detect_web_framework": "Error detecting framework",
    "generate_ios_migration_spec": "Error generating specification",
    "generate_capacitor_config": "Error generating config",
}


def _require(args: dict[str, Any], key: str) -> str:
    value = args.get(key)
    if not isinstance(value, str) or not value:
        msg = f"Missing required argument: {key}"
        raise ValueError(msg)
    return value


def _dispatch_tool(name: str, args: dict[str, Any]) -> str:
    """Route tool call to the appropriate handler."""
    if name == "detect_web_framework":
        return handle_detect_framework(project_path=_require(args, "projectPath"))

    if name == "generate_ios_migration_spec":
        return handle_generate_spec(
            project_path=_require(args, "projectPath"),
            app_name=_require(args, "appName"),
            bundle_id=_require(args, "bundleId"),
            primary_color=args.get("primaryColor"),
        )

    if name == "generate_capacitor_config":
        return handle_generate_config(
            app_name=_require(args, "appName"),
            app_id=_require(args, "appId"),
            web_dir=_require(args, "webDir"),
            framework=_require(args, "framework"),
            primary_color=args.get("primaryColor"),
        )

    msg = f"Unknown tool: {name}"
    raise ValueError(msg)


def call_tool(name: str, arguments: dict[str, Any] | None) -> str:
    """Run a tool and return its text; failures become an error message."""
    args = arguments or {}
    try:
        return _dispatch_tool(name, args)
    except Exception as exc:
        logger.exception("Tool %s failed", name)
        prefix = _ERROR_PREFIXES.get(name, "Error")
        return f"❌ {prefix}: {exc}"


def list_resources() -> list[Resource]:
    return [
        Resource(
            uri=guide.uri,
            name=guide.name,
            description=guide.description,
            mimeType=guide.mime_type,
        )
        for guide in GUIDES.values()
    ]


def read_resource(uri: str) -> str:
    """Return the Markdown text of the guide at *uri*."""
    return load_guide(guide_for_uri(uri))


def read_resource_contents(uri: str) -> list[ReadResourceContents]:
    """Return the guide at *uri* tagged with its advertised MIME type."""
    guide = guide_for_uri(uri)
    return [ReadResourceContents(content=load_guide(guide), mime_type=guide.mime_type)]


def create_server() -> Server:
    """Create and configure the MCP server."""
    server = Server(
        name="web-to-ios",
        version=__version__,
        instructions=(
            "Detects Vite, Next.js and Create React App projects and generates "
            "Capacitor iOS migration documents and configuration."
        ),
    )

    @server.list_tools()  # type: ignore[no-untyped-call,untyped-decorator]
    async def _list_tools() -> list[mcp.Tool]:
        return _TOOLS

    @server.call_tool()  # type: ignore[untyped-decorator]
    async def _call_tool(
        name: str,
        arguments: dict[str, Any] | None,
    ) -> list[TextContent]:
        return [TextContent(type="text", text=call_tool(name, arguments))]

    @server.list_resources()  # type: ignore[no-untyped-call,untyped-decorator]
    async def _list_resources() -> list[Resource]:
        return list_resources()

    @server.read_resource()  # type: ignore[no-untyped-call,untyped-decorator]
    async def _read_resource(uri: Any) -> list[ReadResourceContents]:
        return read_resource_contents(str(uri))

    return server
