"""Tests for per-theme builds."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tokenbuild.core.builder import build_all, build_theme, clean_theme, resolve_themes
from tokenbuild.core.discovery import discover_themes
from tokenbuild.core.errors import ConfigError, ThemeNameError, TokenSourceError
from tokenbuild.core.ir.config import ProjectConfig
from tokenbuild.core.registry import default_registry

EXPECTED_LIGHT_FILES = {
    "build/scss/_light-variables.scss",
    "build/less/_light-variables.less",
    "build/css/_light-variables.css",
    "build/json/light.json",
    "build/ios/light/StyleDictionaryColor.h",
    "build/ios/light/StyleDictionaryColor.m",
    "build/ios/light/StyleDictionarySize.h",
    "build/ios/light/StyleDictionarySize.m",
    "build/ios-swift/light/StyleDictionary.swift",
    "build/ios-swift/light/StyleDictionaryColor.swift",
    "build/ios-swift/light/StyleDictionarySize.swift",
}


def _build(project: Path, theme: str = "light", **kwargs):
    return build_theme(theme, ProjectConfig(), default_registry(), project_root=project, **kwargs)


class TestDiscovery:
    def test_discovers_json_stems(self, token_project: Path):
        assert discover_themes(token_project / "tokens") == ["dark", "light"]

    def test_other_extension(self, token_project: Path):
        assert discover_themes(token_project / "tokens", ".txt") == ["notes"]

    def test_extension_without_dot(self, token_project: Path):
        config = ProjectConfig(source_extension="txt")
        assert resolve_themes(config, token_project, None) == ["notes"]

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(TokenSourceError):
            discover_themes(tmp_path / "tokens")


class TestBuildTheme:
    def test_writes_every_platform(self, token_project: Path):
        results = _build(token_project)
        written = {str(r.path.relative_to(token_project)) for r in results}
        assert written == EXPECTED_LIGHT_FILES
        assert all((token_project / p).exists() for p in written)

    def test_json_flat_output(self, token_project: Path):
        _build(token_project, platforms=["json-flat"])
        data = json.loads((token_project / "build/json/light.json").read_text(encoding="utf-8"))
        assert data == {
            "Light": {
                "palette": {
                    "background": {"primary": "#FFFFFF", "secondary": "#000000"},
                    "text": {"primary": "#101828"},
                    "brand": {"ink": "#101828"},
                },
                "typography": {"body": "Inter"},
                "size": {
                    "spacing": {"small": 8, "none": 0},
                    "opacity": {"disabled": 40},
                },
            }
        }

    def test_css_output(self, token_project: Path):
        _build(token_project, platforms=["css"])
        css = (token_project / "build/css/_light-variables.css").read_text(encoding="utf-8")
        assert css.startswith(":root {\n")
        assert "  --color-background-primary: #FFFFFF;" in css
        assert "  --color-background-secondary: #00000080;" in css
        assert "  --color-text-primary: #101828;" in css
        assert "  --size-spacing-small: 8px;" in css
        assert "  --size-spacing-none: 0;" in css
        assert "  --size-opacity-disabled: 40%;" in css

    def test_css_filter_drops_untyped_tokens(self, token_project: Path, light_tokens: dict):
        light_tokens["components"] = {"button": {"radius": {"value": 4, "type": "borderRadius"}}}
        (token_project / "tokens" / "light.json").write_text(json.dumps(light_tokens), encoding="utf-8")
        _build(token_project, platforms=["css", "scss"])
        css = (token_project / "build/css/_light-variables.css").read_text(encoding="utf-8")
        scss = (token_project / "build/scss/_light-variables.scss").read_text(encoding="utf-8")
        assert "components-button-radius" not in css
        assert "$components-button-radius: 4;" in scss

    def test_ios_size_file_holds_numbers(self, token_project: Path):
        _build(token_project, platforms=["ios"])
        impl = (token_project / "build/ios/light/StyleDictionarySize.m").read_text(encoding="utf-8")
        assert "const float SizeOpacityDisabled = 40.00;" in impl
        assert "const float GridColumnsDefault = 12.00;" in impl
        assert "ColorBackgroundPrimary" not in impl

    def test_explicit_theme_name(self, token_project: Path):
        _build(token_project, platforms=["json-flat"], theme_name="Daylight")
        data = json.loads((token_project / "build/json/light.json").read_text(encoding="utf-8"))
        assert list(data) == ["Daylight"]

    def test_missing_marker_fails_json(self, token_project: Path, light_tokens: dict):
        del light_tokens["FONTTHEMENAMEVARIABLE"]
        (token_project / "tokens" / "light.json").write_text(json.dumps(light_tokens), encoding="utf-8")
        with pytest.raises(ThemeNameError) as excinfo:
            _build(token_project, platforms=["json-flat"])
        assert excinfo.value.context.platform == "json-flat"

    def test_dry_run_writes_nothing(self, token_project: Path):
        results = _build(token_project, dry_run=True)
        assert len(results) == len(EXPECTED_LIGHT_FILES)
        assert not any(r.written for r in results)
        assert not (token_project / "build").exists()

    def test_unknown_platform(self, token_project: Path):
        with pytest.raises(ConfigError, match="Unknown platform"):
            _build(token_project, platforms=["android"])

    def test_missing_theme_source(self, token_project: Path):
        with pytest.raises(TokenSourceError):
            _build(token_project, theme="sepia")


class TestBuildAll:
    def test_themes_are_independent(self, token_project: Path):
        results = build_all(ProjectConfig(), default_registry(), project_root=token_project)
        assert {r.theme for r in results} == {"dark", "light"}
        light = json.loads((token_project / "build/json/light.json").read_text(encoding="utf-8"))
        dark = json.loads((token_project / "build/json/dark.json").read_text(encoding="utf-8"))
        assert light["Light"]["palette"]["background"]["primary"] == "#FFFFFF"
        assert dark["Dark"]["palette"]["background"]["primary"] == "#000000"

    def test_clean_removes_outputs(self, token_project: Path):
        _build(token_project)
        removed = clean_theme("light", ProjectConfig(), project_root=token_project)
        assert len(removed) == len(EXPECTED_LIGHT_FILES)
        assert not any(p.exists() for p in removed)
