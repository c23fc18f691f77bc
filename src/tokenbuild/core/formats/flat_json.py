"""
Nested theme JSON format (json/flat).

Reshapes the flat property list of one theme into a single document keyed
by theme name, laid out the way MUI-style theme objects expect:

    {"Light": {"palette": {...}, "typography": {...}, "size": {...}}}

Color tokens land under palette.<type>.<item>, font tokens under
typography.<item>, and every other category under <category>.<type>.<item>.
Typography groups, component, grid and effect tokens are not exported.

The theme name comes from an explicit argument (file option "themeName")
or from the description of the single FONTTHEMENAMEVARIABLE marker token.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import ErrorContext, ThemeNameError, make_malformed_token_error
from ..ir.config import FileSpec, PlatformSpec
from ..ir.tokens import Dictionary, Property

logger = logging.getLogger(__name__)

THEME_NAME_VARIABLE = "FONTTHEMENAMEVARIABLE"

EXCLUDED_CATEGORIES: frozenset[str] = frozenset({"typography", "components", "grid", "effect"})

_SEPARATOR_RE = re.compile(r"[^A-Za-z0-9]")


def is_theme_name_property(prop: Property) -> bool:
    """True for the marker token, whatever name transform produced its name."""
    return _SEPARATOR_RE.sub("", prop.name).upper() == THEME_NAME_VARIABLE


def resolve_theme_name(properties: Iterable[Property]) -> str:
    """Read the theme name from the marker token's description.

    Raises:
        ThemeNameError: If there is not exactly one marker or its
            description is empty.
    """
    markers = [p for p in properties if is_theme_name_property(p)]
    if not markers:
        raise ThemeNameError(
            f"No {THEME_NAME_VARIABLE} token found; cannot determine the theme name"
        )
    if len(markers) > 1:
        names = ", ".join(p.dotted_path for p in markers)
        raise ThemeNameError(f"Expected one {THEME_NAME_VARIABLE} token, found {len(markers)}: {names}")

    marker = markers[0]
    theme_name = (marker.description or "").strip()
    if not theme_name:
        raise ThemeNameError(
            f"{THEME_NAME_VARIABLE} has an empty description",
            ErrorContext(file=marker.file_path, token=marker.dotted_path),
        )
    return theme_name


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Union of two trees without mutating either.

    Mappings merge recursively, lists concatenate, and any other collision
    takes the value from source.
    """
    merged = dict(target)
    for key, value in source.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(existing, value)
        elif isinstance(existing, list) and isinstance(value, list):
            merged[key] = [*existing, *value]
        else:
            merged[key] = value
    return merged


def _nest(path: tuple[str, ...], value: Any) -> dict[str, Any]:
    node: Any = value
    for segment in reversed(path):
        node = {segment: node}
    return node


def _require(prop: Property, *keys: str) -> tuple[str, ...]:
    segments: list[str] = []
    for key in keys:
        segment = getattr(prop.attributes, key)
        if not segment:
            raise make_malformed_token_error(
                f"Token in category {prop.attributes.category!r} has no attributes.{key}",
                prop.dotted_path,
                prop.file_path,
            )
        segments.append(segment)
    return tuple(segments)


def theme_path(prop: Property) -> tuple[str, ...] | None:
    """Where a property lands inside the theme object, or None if excluded."""
    category = prop.attributes.category
    if category == "color":
        return ("palette", *_require(prop, "type", "item"))
    if category == "font":
        # The type segment is always "typography" here and would nest twice.
        return ("typography", *_require(prop, "item"))
    if category in EXCLUDED_CATEGORIES:
        return None
    if not category:
        raise make_malformed_token_error(
            "Token has no attributes.category", prop.dotted_path, prop.file_path
        )
    return (category, *_require(prop, "type", "item"))


def flatten_theme(properties: Iterable[Property], theme_name: str | None = None) -> dict[str, Any]:
    """Build the nested theme document for one theme."""
    properties = list(properties)
    if theme_name is None:
        theme_name = resolve_theme_name(properties)

    document: dict[str, Any] = {theme_name: {}}
    skipped = 0
    for prop in properties:
        if is_theme_name_property(prop):
            continue
        path = theme_path(prop)
        if path is None:
            skipped += 1
            continue
        document = deep_merge(document, _nest((theme_name, *path), prop.value))

    if skipped:
        logger.debug(f"Skipped {skipped} non-exportable token(s) for theme {theme_name!r}")
    return document


def format_flat_json(properties: Iterable[Property], theme_name: str | None = None) -> str:
    """Serialise the theme document as 2-space indented JSON."""
    return json.dumps(flatten_theme(properties, theme_name), indent=2, ensure_ascii=False)


def json_flat(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    """json/flat format entry point."""
    return format_flat_json(dictionary.all_properties, file.option("themeName"))
