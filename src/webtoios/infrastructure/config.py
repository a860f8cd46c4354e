"""Settings loaded from an optional ``.webtoios/config.yml``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import yaml

from webtoios.infrastructure.files import DEFAULT_MAX_BYTES

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = ".webtoios"
CONFIG_FILE = "config.yml"

DEFAULT_SPLASH_COLOR = "#8b5cf6"


@dataclass(frozen=True)
class Settings:
    """Tunables for detection and generation.

    Configurable via ``.webtoios/config.yml``::

        max_read_bytes: 1048576
        default_splash_color: "#000000"
    """

    max_read_bytes: int = DEFAULT_MAX_BYTES
    default_splash_color: str = DEFAULT_SPLASH_COLOR


def load_settings(project_root: Path | None = None) -> Settings:
    """Load settings from ``<project_root>/.webtoios/config.yml``.

    Falls back to defaults for missing keys, a missing file, unreadable YAML
    or values of the wrong type.
    """
    if project_root is None:
        return Settings()

    config_path = project_root / CONFIG_DIR / CONFIG_FILE
    if not config_path.is_file():
        return Settings()

    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError):
        logger.warning("Failed to read %s, using default settings", config_path)
        return Settings()

    if not isinstance(data, dict):
        return Settings()

    defaults = Settings()

    max_read_bytes = data.get("max_read_bytes", defaults.max_read_bytes)
    valid = isinstance(max_read_bytes, int) and not isinstance(max_read_bytes, bool)
    if not valid or max_read_bytes <= 0:
        logger.warning("Invalid max_read_bytes in %s, using default", config_path)
        max_read_bytes = defaults.max_read_bytes

    splash_color = data.get("default_splash_color", defaults.default_splash_color)
    if not isinstance(splash_color, str) or not splash_color:
        logger.warning("Invalid default_splash_color in %s, using default", config_path)
        splash_color = defaults.default_splash_color

    return Settings(max_read_bytes=max_read_bytes, default_splash_color=splash_color)
