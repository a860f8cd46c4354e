"""Tests for webtoios.generation.capacitor_config."""

from __future__ import annotations

import json

import pytest

from webtoios.detection.models import CapacitorConfigOptions, Framework
from webtoios.generation.capacitor_config import (
    GITIGNORE_ENTRIES,
    PERMISSIONS_TEMPLATE,
    SCRIPTS,
    build_config,
    format_config_bundle,
    render_capacitor_config,
    render_config_text,
)
from webtoios.infrastructure.config import DEFAULT_SPLASH_COLOR


def _options(**overrides: object) -> CapacitorConfigOptions:
    fields: dict[str, object] = {
        "app_name": "Spark Vault",
        "app_id": "com.example.sparkvault",
        "web_dir": "dist",
        "framework": Framework.VITE,
    }
    fields.update(overrides)
    return CapacitorConfigOptions(**fields)  # type: ignore[arg-type]


class TestBuildConfig:
    def test_shape(self) -> None:
        config = build_config(_options())
        assert list(config) == [
            "appId",
            "appName",
            "webDir",
            "bundledWebRuntime",
            "server",
            "ios",
            "plugins",
        ]
        assert config["appId"] == "com.example.sparkvault"
        assert config["appName"] == "Spark Vault"
        assert config["webDir"] == "dist"
        assert config["bundledWebRuntime"] is False
        assert config["server"] == {"androidScheme": "https", "iosScheme": "https"}
        assert config["ios"] == {"contentInset": "automatic", "scrollEnabled": True}
        assert set(config["plugins"]) == {"SplashScreen", "StatusBar"}

    def test_splash_falls_back_to_brand_color(self) -> None:
        config = build_config(_options())
        assert config["plugins"]["SplashScreen"]["backgroundColor"] == DEFAULT_SPLASH_COLOR

    def test_only_splash_depends_on_color(self) -> None:
        plain = build_config(_options())
        colored = build_config(_options(primary_color="#112233"))
        assert colored["plugins"]["SplashScreen"]["backgroundColor"] == "#112233"
        colored["plugins"]["SplashScreen"]["backgroundColor"] = DEFAULT_SPLASH_COLOR
        assert colored == plain

    def test_configured_splash_color(self) -> None:
        config = build_config(_options(), splash_color="#000000")
        assert config["plugins"]["SplashScreen"]["backgroundColor"] == "#000000"

    @pytest.mark.parametrize("framework", list(Framework))
    def test_framework_invariant(self, framework: Framework) -> None:
        assert build_config(_options(framework=framework)) == build_config(_options())


class TestRenderConfigText:
    def test_typescript_literal(self) -> None:
        text = render_config_text(build_config(_options()))
        assert text.startswith("import type { CapacitorConfig } from '@capacitor/cli';")
        assert "const config: CapacitorConfig = {\n  appId: 'com.example.sparkvault'," in text
        assert "  bundledWebRuntime: false," in text
        assert "  server: {\n    androidScheme: 'https',\n    iosScheme: 'https',\n  }," in text
        assert "    contentInset: 'automatic',\n    scrollEnabled: true," in text
        assert "      launchShowDuration: 2000," in text
        assert text.endswith("export default config;")

    def test_key_order_is_stable(self) -> None:
        text = render_config_text(build_config(_options()))
        keys = ["appId", "appName", "webDir", "bundledWebRuntime", "server", "ios", "plugins"]
        positions = [text.index(f"\n  {key}:") for key in keys]
        assert positions == sorted(positions)
        assert render_config_text(build_config(_options())) == text

    def test_quotes_escaped(self) -> None:
        text = render_config_text(build_config(_options(app_name="Bob's App")))
        assert "appName: 'Bob\\'s App'," in text

    def test_unsupported_value(self) -> None:
        with pytest.raises(TypeError, match="Cannot serialize"):
            render_config_text({"bad": [1, 2]})


class TestBundle:
    def test_static_catalogs(self) -> None:
        a = render_capacitor_config(_options())
        b = render_capacitor_config(_options(framework=Framework.NEXTJS, web_dir="out"))
        assert a.scripts == b.scripts == SCRIPTS
        assert a.permissions_template == b.permissions_template == PERMISSIONS_TEMPLATE
        assert a.gitignore_entries == b.gitignore_entries == GITIGNORE_ENTRIES

    def test_scripts_not_shared(self) -> None:
        bundle = render_capacitor_config(_options())
        bundle.scripts["extra"] = "x"
        assert "extra" not in SCRIPTS

    def test_setup_guide_embeds_config_and_scripts(self) -> None:
        bundle = render_capacitor_config(_options(web_dir="www"))
        assert bundle.config_text in bundle.setup_guide
        assert json.dumps({"scripts": SCRIPTS}, indent=2) in bundle.setup_guide
        assert "`www`" in bundle.setup_guide

    def test_permissions_template(self) -> None:
        assert "<key>NSCameraUsageDescription</key>" in PERMISSIONS_TEMPLATE

    def test_gitignore(self) -> None:
        assert "ios/App/Pods" in GITIGNORE_ENTRIES.splitlines()

    def test_markdown_envelope(self) -> None:
        text = format_config_bundle(render_capacitor_config(_options()))
        assert text.startswith("# Capacitor Configuration Generated")
        for heading in (
            "## 1. capacitor.config.ts",
            "## 2. Add these scripts to package.json",
            "## 3. Update .gitignore",
            "## 4. iOS Permissions Template",
            "## Setup Guide",
        ):
            assert heading in text
