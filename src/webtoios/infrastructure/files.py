"""Read-only file access: bounded reads and JSON parsing that never raise."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# 10 MiB: anything larger is not a manifest or a config file.
DEFAULT_MAX_BYTES = 10 * 1024 * 1024

MANIFEST_NAME = "package.json"


def path_exists(path: Path) -> bool:
    """Return ``True`` if *path* exists (file or directory)."""
    try:
        return path.exists()
    except OSError:
        return False


def is_directory(path: Path) -> bool:
    """Return ``True`` if *path* is an existing directory."""
    try:
        return path.is_dir()
    except OSError:
        return False


def read_bounded(path: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> str | None:
    """Read *path* as UTF-8 text.

    Returns ``None`` when the file is missing, unreadable, not valid UTF-8,
    or larger than *max_bytes*.
    """
    try:
        size = path.stat().st_size
    except OSError:
        return None

    if size > max_bytes:
        logger.warning("File too large: %s (%d bytes)", path, size)
        return None

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Could not read %s", path)
        return None


def read_json(path: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> Any | None:
    """Read and parse a JSON file, returning ``None`` on any failure."""
    content = read_bounded(path, max_bytes)
    if not content:
        return None

    try:
        return json.loads(content)
    except (ValueError, RecursionError):
        logger.debug("Failed to parse JSON: %s", path)
        return None


def read_manifest(project_dir: Path, max_bytes: int = DEFAULT_MAX_BYTES) -> dict[str, Any] | None:
    """Read ``package.json`` from *project_dir*.

    A manifest whose top level is not a JSON object is treated as absent.
    """
    data = read_json(project_dir / MANIFEST_NAME, max_bytes)
    if isinstance(data, dict):
        return data
    return None


def _section(manifest: dict[str, Any], key: str) -> dict[str, Any]:
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def dependency_version(manifest: dict[str, Any], name: str) -> str | None:
    """Return the declared version of *name* from dependencies or devDependencies."""
    for key in ("dependencies", "devDependencies"):
        version = _section(manifest, key).get(name)
        if version:
            return str(version)
    return None


def has_dependency(manifest: dict[str, Any], *names: str) -> bool:
    """Return ``True`` if any of *names* is declared in the manifest."""
    return any(dependency_version(manifest, name) for name in names)


def build_script(manifest: dict[str, Any], default: str) -> str:
    """Return ``scripts.build`` from the manifest, or *default*."""
    script = _section(manifest, "scripts").get("build")
    if isinstance(script, str) and script:
        return script
    return default
