"""Capacitor configuration generator.

Builds the ``capacitor.config.ts`` value object, serializes it to TypeScript
object-literal syntax, and bundles it with the static companion catalogs
(npm scripts, Info.plist permissions, ``.gitignore`` entries).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from webtoios.infrastructure.config import DEFAULT_SPLASH_COLOR

if TYPE_CHECKING:
    from webtoios.detection.models import CapacitorConfigOptions

INDENT = "  "

SCRIPTS: dict[str, str] = {
    "cap:sync": "cap sync ios",
    "cap:open": "cap open ios",
    "cap:build": "npm run build && cap sync ios",
    "ios": "npm run build && cap sync ios && cap open ios",
}

GITIGNORE_ENTRIES = "\n".join(
    [
        "# Capacitor",
        "ios/App/Pods",
        "ios/App/App/public",
        "ios/App/App/capacitor.config.json",
        "ios/App/App/config.xml",
        "ios/DerivedData",
        "*.xcuserstate",
    ]
)

_PERMISSIONS = (
    ("NSCameraUsageDescription", "This app uses the camera to take photos."),
    ("NSPhotoLibraryUsageDescription", "This app accesses your photo library to select images."),
    ("NSPhotoLibraryAddUsageDescription", "This app saves photos to your photo library."),
    ("NSLocationWhenInUseUsageDescription", "This app uses your location to show nearby content."),
    ("NSMicrophoneUsageDescription", "This app uses the microphone to record audio."),
    ("NSFaceIDUsageDescription", "This app uses Face ID to secure your account."),
)

PERMISSIONS_TEMPLATE = "\n".join(
    [
        "Add only the permissions your app actually uses to `ios/App/App/Info.plist`:",
        "",
        "```xml",
        *(f"<key>{key}</key>\n<string>{text}</string>" for key, text in _PERMISSIONS),
        "```",
    ]
)


@dataclass(frozen=True)
class ConfigBundle:
    """Everything the config tool hands back to the caller."""

    config_text: str
    scripts: dict[str, str]
    permissions_template: str
    gitignore_entries: str
    setup_guide: str


def build_config(
    options: CapacitorConfigOptions,
    *,
    splash_color: str = DEFAULT_SPLASH_COLOR,
) -> dict[str, Any]:
    """Return the Capacitor config value object.

    The splash background uses ``options.primary_color`` when given, else
    *splash_color*. No other key depends on the color. Key names and nesting
    are read by the Capacitor CLI.
    """
    return {
        "appId": options.app_id,
        "appName": options.app_name,
        "webDir": options.web_dir,
        "bundledWebRuntime": False,
        "server": {
            "androidScheme": "https",
            "iosScheme": "https",
        },
        "ios": {
            "contentInset": "automatic",
            "scrollEnabled": True,
        },
        "plugins": {
            "SplashScreen": {
                "launchShowDuration": 2000,
                "launchAutoHide": True,
                "backgroundColor": options.primary_color or splash_color,
                "showSpinner": False,
                "iosSpinnerStyle": "small",
            },
            "StatusBar": {
                "style": "DEFAULT",
                "overlaysWebView": False,
            },
        },
    }


def _ts_literal(value: Any, depth: int = 0) -> str:
    """Serialize *value* as a TypeScript literal, preserving key order."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    if isinstance(value, dict):
        if not value:
            return "{}"
        pad = INDENT * (depth + 1)
        items = [f"{pad}{key}: {_ts_literal(item, depth + 1)}," for key, item in value.items()]
        return "{\n" + "\n".join(items) + "\n" + INDENT * depth + "}"
    msg = f"Cannot serialize {type(value).__name__} to TypeScript"
    raise TypeError(msg)


def render_config_text(config: dict[str, Any]) -> str:
    """Render the full ``capacitor.config.ts`` source."""
    return "\n".join(
        [
            "import type { CapacitorConfig } from '@capacitor/cli';",
            "",
            f"const config: CapacitorConfig = {_ts_literal(config)};",
            "",
            "export default config;",
        ]
    )


def render_scripts_block(scripts: dict[str, str]) -> str:
    """Render *scripts* as a ``package.json`` fragment."""
    return json.dumps({"scripts": scripts}, indent=2)


def render_setup_guide(config_text: str, scripts: dict[str, str], web_dir: str) -> str:
    return "\n".join(
        [
            "### 1. Install dependencies",
            "",
            "```bash",
            "npm install @capacitor/core @capacitor/cli @capacitor/ios",
            "npm install @capacitor/splash-screen @capacitor/status-bar",
            "```",
            "",
            "### 2. Create `capacitor.config.ts` in the project root",
            "",
            "```typescript",
            config_text,
            "```",
            "",
            "### 3. Add scripts to `package.json`",
            "",
            "```json",
            render_scripts_block(scripts),
            "```",
            "",
            "### 4. Build and add the iOS platform",
            "",
            f"Make sure your build writes to `{web_dir}`, then run:",
            "",
            "```bash",
            "npm run build",
            "npx cap add ios",
            "npm run ios",
            "```",
        ]
    )


def render_capacitor_config(
    options: CapacitorConfigOptions,
    *,
    splash_color: str = DEFAULT_SPLASH_COLOR,
) -> ConfigBundle:
    """Generate the Capacitor config and its companion artifacts."""
    config_text = render_config_text(build_config(options, splash_color=splash_color))
    scripts = dict(SCRIPTS)
    return ConfigBundle(
        config_text=config_text,
        scripts=scripts,
        permissions_template=PERMISSIONS_TEMPLATE,
        gitignore_entries=GITIGNORE_ENTRIES,
        setup_guide=render_setup_guide(config_text, scripts, options.web_dir),
    )


def format_config_bundle(bundle: ConfigBundle) -> str:
    """Render a :class:`ConfigBundle` as the Markdown returned to callers."""
    return "\n".join(
        [
            "# Capacitor Configuration Generated",
            "",
            "## 1. capacitor.config.ts",
            "",
            "```typescript",
            bundle.config_text,
            "```",
            "",
            "## 2. Add these scripts to package.json",
            "",
            "```json",
            render_scripts_block(bundle.scripts),
            "```",
            "",
            "## 3. Update .gitignore",
            "",
            "```",
            bundle.gitignore_entries,
            "```",
            "",
            "## 4. iOS Permissions Template",
            "",
            bundle.permissions_template,
            "",
            "---",
            "",
            "## Setup Guide",
            "",
            bundle.setup_guide,
        ]
    )
