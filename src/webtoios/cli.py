"""web-to-ios CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from webtoios import __version__
from webtoios.detection.models import Framework
from webtoios.resources import GUIDES


@click.group()
@click.version_option(version=__version__, prog_name="webtoios")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Minimal output (errors only).")
@click.pass_context
def main(ctx: click.Context, *, verbose: bool, quiet: bool) -> None:
    """web-to-ios - detect web frameworks and plan Capacitor iOS migrations."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    level = logging.WARNING
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


_project_option = click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Web project root (default: current directory).",
)


@main.command()
@_project_option
@click.option("--json", "output_json", is_flag=True, help="Output as JSON.")
def detect(*, project: Path | None, output_json: bool) -> None:
    """Detect the web framework of a project."""
    from webtoios.detection import detect_project, format_detection, is_capacitor_ready

    project_root = project or Path.cwd()
    result = detect_project(project_root)

    if output_json:
        data = result.to_dict()
        if result.project is not None:
            data["capacitorReady"] = is_capacitor_ready(result.project)
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        if not result.success:
            sys.exit(1)
        return

    if result.project is None:
        click.echo(format_detection(result), err=True)
        sys.exit(1)

    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    console = Console()
    info = result.project
    ready = is_capacitor_ready(info)

    console.print(Panel(
        f"Version {info.version}",
        title=f"{info.framework.display_name} project",
        border_style="green" if ready else "yellow",
    ))

    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column("field", style="cyan")
    table.add_column("value")
    for key, value in info.to_dict().items():
        if key in {"framework", "version"}:
            continue
        table.add_row(key, "-" if value is None else str(value))
    console.print(table)
    console.print()

    if ready:
        console.print("Capacitor compatibility: [green]ready[/]")
    else:
        console.print("Capacitor compatibility: [yellow]needs configuration[/]")
        console.print("Run `webtoios spec` for the required changes.")


@main.command()
@click.option("--app-name", required=True, help='iOS app name (e.g. "Spark Vault").')
@click.option("--bundle-id", required=True, help="Bundle identifier (e.g. com.example.app).")
@click.option("--primary-color", default=None, help="Primary color in hex (e.g. #8b5cf6).")
@_project_option
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the document to a file instead of stdout.",
)
def spec(
    *,
    app_name: str,
    bundle_id: str,
    primary_color: str | None,
    project: Path | None,
    output: Path | None,
) -> None:
    """Generate an iOS migration specification for a project."""
    from webtoios.detection import GenerateSpecOptions, detect_project, format_detection
    from webtoios.generation import render_migration_spec

    project_root = project or Path.cwd()
    result = detect_project(project_root)
    if result.project is None:
        click.echo(format_detection(result), err=True)
        sys.exit(1)

    options = GenerateSpecOptions(
        project_path=str(project_root),
        app_name=app_name,
        bundle_id=bundle_id,
        primary_color=primary_color,
    )
    document = render_migration_spec(result.project, options)

    if output is None:
        click.echo(document)
        return

    try:
        output.write_text(document + "\n", encoding="utf-8")
    except OSError as exc:
        click.echo(f"Error: cannot write {output}: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Wrote {output}")


@main.command()
@click.option("--app-name", required=True, help="App name.")
@click.option("--app-id", required=True, help="Bundle identifier.")
@click.option("--web-dir", required=True, help="Build output directory (dist, out, build).")
@click.option(
    "--framework",
    type=click.Choice([f.value for f in Framework]),
    required=True,
    help="Framework type.",
)
@click.option("--primary-color", default=None, help="Splash screen color in hex.")
@click.option(
    "--project",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project root to read .webtoios/config.yml from.",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON.")
def config(
    *,
    app_name: str,
    app_id: str,
    web_dir: str,
    framework: str,
    primary_color: str | None,
    project: Path | None,
    output_json: bool,
) -> None:
    """Generate capacitor.config.ts and companion files."""
    from webtoios.detection import CapacitorConfigOptions
    from webtoios.generation import format_config_bundle, render_capacitor_config
    from webtoios.infrastructure import load_settings

    settings = load_settings(project)
    options = CapacitorConfigOptions(
        app_name=app_name,
        app_id=app_id,
        web_dir=web_dir,
        framework=Framework.parse(framework),
        primary_color=primary_color,
    )
    bundle = render_capacitor_config(options, splash_color=settings.default_splash_color)

    if output_json:
        data = {
            "configText": bundle.config_text,
            "scripts": bundle.scripts,
            "permissionsTemplate": bundle.permissions_template,
            "gitignoreEntries": bundle.gitignore_entries,
            "setupGuide": bundle.setup_guide,
        }
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    click.echo(format_config_bundle(bundle))


@main.command()
@click.argument("name", type=click.Choice(sorted(GUIDES)))
def guide(*, name: str) -> None:
    """Print a bundled migration guide."""
    from webtoios.resources import load_guide

    click.echo(load_guide(GUIDES[name]))


@main.command("mcp-serve")
def mcp_serve() -> None:
    """Run the web-to-ios MCP server (stdio transport)."""
    import anyio

    from webtoios.mcp_server import create_server

    server = create_server()

    async def _run() -> None:
        from mcp import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )

    anyio.run(_run)
