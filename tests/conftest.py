"""Shared pytest fixtures for tokenbuild tests."""

import copy
import json
from pathlib import Path

import pytest

LIGHT_TOKENS = {
    "FONTTHEMENAMEVARIABLE": {"value": "Light", "type": "string", "description": "Light"},
    "color": {
        "background": {
            "primary": {"value": "#FFFFFF", "type": "color"},
            "secondary": {"value": "rgba(0, 0, 0, 0.5)", "type": "color"},
        },
        "text": {"primary": {"value": "{color.brand.ink}", "type": "color"}},
        "brand": {"ink": {"value": "#101828", "type": "color"}},
    },
    "font": {"typography": {"body": {"value": "Inter", "type": "string"}}},
    "size": {
        "spacing": {
            "small": {"value": 8, "type": "dimension"},
            "none": {"value": 0, "type": "dimension"},
        },
        "opacity": {"disabled": {"value": 40, "type": "number", "unit": "percent"}},
    },
    "grid": {"columns": {"default": {"value": 12, "type": "number"}}},
    "effect": {"shadow": {"card": {"value": "0 1px 2px #000", "type": "string"}}},
}


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


@pytest.fixture
def light_tokens() -> dict:
    """A fresh copy of the light theme token tree."""
    return copy.deepcopy(LIGHT_TOKENS)


@pytest.fixture
def token_project(tmp_path: Path, light_tokens: dict) -> Path:
    """Project directory with a light and a dark theme."""
    _write_json(tmp_path / "tokens" / "light.json", light_tokens)
    dark = copy.deepcopy(light_tokens)
    dark["FONTTHEMENAMEVARIABLE"]["description"] = "Dark"
    dark["color"]["background"]["primary"]["value"] = "#000000"
    _write_json(tmp_path / "tokens" / "dark.json", dark)
    (tmp_path / "tokens" / "notes.txt").write_text("not a theme", encoding="utf-8")
    return tmp_path
