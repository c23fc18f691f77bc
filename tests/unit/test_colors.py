"""Tests for color parsing helpers."""

import pytest

from tokenbuild.core.colors import RGBA, parse_color, to_hex, to_unit_floats


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("#fff", RGBA(255, 255, 255, 1.0)),
        ("#102030", RGBA(16, 32, 48, 1.0)),
        ("#10203080", RGBA(16, 32, 48, 0.502)),
        ("rgb(1, 2, 3)", RGBA(1, 2, 3, 1.0)),
        ("rgba(0, 0, 0, 0.5)", RGBA(0, 0, 0, 0.5)),
        ("rgb(100% 0% 0% / 50%)", RGBA(255, 0, 0, 0.5)),
    ],
)
def test_parse_color(text: str, expected: RGBA):
    assert parse_color(text) == expected


@pytest.mark.parametrize("text", ["Inter", "12px", "#12", "rgb(1, 2)"])
def test_parse_rejects_non_colors(text: str):
    assert parse_color(text) is None


def test_to_hex_alpha_only_when_requested():
    color = RGBA(255, 0, 0, 0.5)
    assert to_hex(color) == "#ff0000"
    assert to_hex(color, include_alpha=True) == "#ff000080"


def test_unit_floats_trim_alpha():
    assert to_unit_floats(RGBA(255, 0, 0, 0.5)) == ("1.000", "0.000", "0.000", "0.5")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("rgb(150%, 0%, -10%)", RGBA(255, 0, 0, 1.0)),
        ("rgba(300, -5, 20, 2)", RGBA(255, 0, 20, 1.0)),
        ("rgb(0% 0% 0% / 150%)", RGBA(0, 0, 0, 1.0)),
        ("rgb(0% 0% 0% / -20%)", RGBA(0, 0, 0, 0.0)),
    ],
)
def test_out_of_range_channels_clamped(text: str, expected: RGBA):
    assert parse_color(text) == expected


def test_clamped_percent_color_is_valid_hex():
    assert to_hex(parse_color("rgb(150%, 0%, -10%)")) == "#ff0000"
