"""
Color literal parsing and formatting.

Handles the color shapes design-tool exports produce: #rgb, #rgba,
#rrggbb, #rrggbbaa and rgb()/rgba() functional notation.
"""

from __future__ import annotations

import re
from typing import NamedTuple

_HEX_RE = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_RE = re.compile(r"^rgba?\(\s*([^)]*)\)$", re.IGNORECASE)


class RGBA(NamedTuple):
    """Color with 0-255 channels and 0-1 alpha."""

    r: int
    g: int
    b: int
    a: float = 1.0


def is_color(value: object) -> bool:
    return isinstance(value, str) and parse_color(value) is not None


def parse_color(value: str) -> RGBA | None:
    """Parse a color literal.

    Returns:
        RGBA, or None if the string is not a recognised color.
    """
    text = value.strip()
    if _HEX_RE.match(text):
        return _parse_hex(text)
    match = _FUNC_RE.match(text)
    if match:
        return _parse_functional(match.group(1))
    return None


def _parse_hex(text: str) -> RGBA:
    hx = text.lstrip("#")
    if len(hx) in (3, 4):
        hx = "".join(c * 2 for c in hx)
    r = int(hx[0:2], 16)
    g = int(hx[2:4], 16)
    b = int(hx[4:6], 16)
    a = int(hx[6:8], 16) / 255 if len(hx) == 8 else 1.0
    return RGBA(r, g, b, round(a, 4))


def _parse_functional(body: str) -> RGBA | None:
    parts = [p.strip() for p in re.split(r"[,\s/]+", body.strip()) if p.strip()]
    if len(parts) not in (3, 4):
        return None
    try:
        channels = [_channel(p) for p in parts[:3]]
        alpha = _alpha(parts[3]) if len(parts) == 4 else 1.0
    except ValueError:
        return None
    return RGBA(*channels, alpha)


def _channel(part: str) -> int:
    if part.endswith("%"):
        value = float(part[:-1]) * 255 / 100
    else:
        value = float(part)
    return max(0, min(255, round(value)))


def _alpha(part: str) -> float:
    value = float(part[:-1]) / 100 if part.endswith("%") else float(part)
    return max(0.0, min(1.0, value))


def to_hex(color: RGBA, *, include_alpha: bool = False) -> str:
    """Format as #rrggbb, or #rrggbbaa when alpha is requested and below 1."""
    base = f"#{color.r:02x}{color.g:02x}{color.b:02x}"
    if include_alpha and color.a < 1.0:
        return f"{base}{round(color.a * 255):02x}"
    return base


def to_unit_floats(color: RGBA) -> tuple[str, str, str, str]:
    """Channels as 0-1 floats with three decimals, alpha trimmed."""
    r = f"{color.r / 255:.3f}"
    g = f"{color.g / 255:.3f}"
    b = f"{color.b / 255:.3f}"
    a = f"{color.a:.3f}".rstrip("0").rstrip(".") if color.a < 1.0 else "1"
    return r, g, b, a
