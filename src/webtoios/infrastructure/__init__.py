"""Infrastructure: read-only file access and settings."""

from webtoios.infrastructure.config import Settings, load_settings
from webtoios.infrastructure.files import (
    DEFAULT_MAX_BYTES,
    build_script,
    dependency_version,
    has_dependency,
    is_directory,
    path_exists,
    read_bounded,
    read_json,
    read_manifest,
)

__all__ = [
    "DEFAULT_MAX_BYTES",
    "Settings",
    "build_script",
    "dependency_version",
    "has_dependency",
    "is_directory",
    "load_settings",
    "path_exists",
    "read_bounded",
    "read_json",
    "read_manifest",
]
