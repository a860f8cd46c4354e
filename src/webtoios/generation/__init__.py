"""Generation domain: migration document and Capacitor config rendering."""

from webtoios.generation.capacitor_config import (
    ConfigBundle,
    build_config,
    format_config_bundle,
    render_capacitor_config,
)
from webtoios.generation.spec_writer import render_migration_spec

__all__ = [
    "ConfigBundle",
    "build_config",
    "format_config_bundle",
    "render_capacitor_config",
    "render_migration_spec",
]
