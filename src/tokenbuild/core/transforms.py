"""
Token transforms.

A transform rewrites one aspect of a Property: its attributes, its name, or
its value. Transforms are plain objects registered in a Registry and applied
in the order a transform group lists them.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .colors import parse_color, to_hex, to_unit_floats
from .ir.config import PlatformSpec
from .ir.tokens import Property, TokenAttributes


class TransformKind(StrEnum):
    """What part of a property a transform rewrites."""

    ATTRIBUTE = "attribute"
    NAME = "name"
    VALUE = "value"


Matcher = Callable[[Property], bool]
Transformer = Callable[[Property, PlatformSpec], Any]


@dataclass(frozen=True)
class Transform:
    """A named, registrable property transform."""

    name: str
    kind: TransformKind
    transformer: Transformer
    matcher: Matcher | None = None

    def matches(self, prop: Property) -> bool:
        return self.matcher is None or self.matcher(prop)

    def apply(self, prop: Property, platform: PlatformSpec) -> Property:
        if not self.matches(prop):
            return prop
        result = self.transformer(prop, platform)
        if self.kind is TransformKind.ATTRIBUTE:
            merged = {**result.model_dump(exclude_none=True), **prop.attributes.model_dump(exclude_none=True)}
            return prop.model_copy(update={"attributes": TokenAttributes(**merged)})
        if self.kind is TransformKind.NAME:
            return prop.model_copy(update={"name": result})
        return prop.model_copy(update={"value": result})


def apply_transforms(
    properties: list[Property],
    transforms: list[Transform],
    platform: PlatformSpec,
) -> list[Property]:
    """Apply transforms to every property.

    Attribute transforms run first so name and value transforms can read
    the derived category/type/item.
    """
    ordered = [t for t in transforms if t.kind is TransformKind.ATTRIBUTE]
    ordered += [t for t in transforms if t.kind is not TransformKind.ATTRIBUTE]
    result: list[Property] = []
    for prop in properties:
        for transform in ordered:
            prop = transform.apply(prop, platform)
        result.append(prop)
    return result


# =============================================================================
# Attribute
# =============================================================================

_CTI_KEYS = ("category", "type", "item", "subitem", "state")


def _attribute_cti(prop: Property, platform: PlatformSpec) -> TokenAttributes:
    return TokenAttributes(**dict(zip(_CTI_KEYS, prop.path[: len(_CTI_KEYS)], strict=False)))


# =============================================================================
# Name
# =============================================================================

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def _words(prop: Property, platform: PlatformSpec) -> list[str]:
    parts = [platform.prefix] if platform.prefix else []
    parts.extend(prop.path or (prop.name,))
    words: list[str] = []
    for part in parts:
        words.extend(_WORD_RE.findall(part))
    return words


def _name_kebab(prop: Property, platform: PlatformSpec) -> str:
    return "-".join(w.lower() for w in _words(prop, platform))


def _name_snake(prop: Property, platform: PlatformSpec) -> str:
    return "_".join(w.lower() for w in _words(prop, platform))


def _name_camel(prop: Property, platform: PlatformSpec) -> str:
    words = _words(prop, platform)
    if not words:
        return ""
    return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])


def _name_pascal(prop: Property, platform: PlatformSpec) -> str:
    return "".join(w[:1].upper() + w[1:].lower() for w in _words(prop, platform))


# =============================================================================
# Value: color
# =============================================================================


def _is_color_prop(prop: Property) -> bool:
    if prop.type == "color" or prop.attributes.category == "color":
        return isinstance(prop.value, str) and parse_color(prop.value) is not None
    return False


def _color_css(prop: Property, platform: PlatformSpec) -> str:
    value = prop.value.strip()
    if value.startswith("#"):
        return value
    color = parse_color(value)
    return to_hex(color, include_alpha=True)


def _color_hex(prop: Property, platform: PlatformSpec) -> str:
    value = prop.value.strip()
    if value.startswith("#") and len(value) == 7:
        return value
    return to_hex(parse_color(value))


def _color_uicolor(prop: Property, platform: PlatformSpec) -> str:
    r, g, b, a = to_unit_floats(parse_color(prop.value))
    return f"[UIColor colorWithRed:{r}f green:{g}f blue:{b}f alpha:{a}f]"


def _color_uicolor_swift(prop: Property, platform: PlatformSpec) -> str:
    r, g, b, a = to_unit_floats(parse_color(prop.value))
    return f"UIColor(red: {r}, green: {g}, blue: {b}, alpha: {a})"


# =============================================================================
# Value: size
# =============================================================================


def _is_nonzero(value: Any) -> bool:
    return value != 0 and value != "0"


def _size_px_matcher(prop: Property) -> bool:
    if prop.unit == "percent":
        return False
    return (prop.unit == "pixel" or prop.type == "dimension") and _is_nonzero(prop.value)


def _size_px(prop: Property, platform: PlatformSpec) -> str:
    return f"{prop.value}px"


def _size_percent_matcher(prop: Property) -> bool:
    return prop.unit == "percent" and _is_nonzero(prop.value)


def _size_percent(prop: Property, platform: PlatformSpec) -> str:
    return f"{prop.value}%"


# =============================================================================
# Catalogues
# =============================================================================


def builtin_transforms() -> list[Transform]:
    """Transforms shipped with the engine."""
    return [
        Transform("attribute/cti", TransformKind.ATTRIBUTE, _attribute_cti),
        Transform("name/cti/kebab", TransformKind.NAME, _name_kebab),
        Transform("name/cti/snake", TransformKind.NAME, _name_snake),
        Transform("name/cti/camel", TransformKind.NAME, _name_camel),
        Transform("name/cti/pascal", TransformKind.NAME, _name_pascal),
        Transform("color/css", TransformKind.VALUE, _color_css, _is_color_prop),
        Transform("color/hex", TransformKind.VALUE, _color_hex, _is_color_prop),
        Transform("color/UIColor", TransformKind.VALUE, _color_uicolor, _is_color_prop),
        Transform("color/UIColorSwift", TransformKind.VALUE, _color_uicolor_swift, _is_color_prop),
    ]


def unit_transforms() -> list[Transform]:
    """Unit-suffix transforms for values exported without units."""
    return [
        Transform("size/px", TransformKind.VALUE, _size_px, _size_px_matcher),
        Transform("size/percent", TransformKind.VALUE, _size_percent, _size_percent_matcher),
    ]


BUILTIN_TRANSFORM_GROUPS: dict[str, list[str]] = {
    "css": ["attribute/cti", "name/cti/kebab", "color/css"],
    "scss": ["attribute/cti", "name/cti/kebab", "color/css"],
    "less": ["attribute/cti", "name/cti/kebab", "color/css"],
    "js": ["attribute/cti", "name/cti/pascal", "color/hex"],
    "ios": ["attribute/cti", "name/cti/pascal", "color/UIColor"],
    "ios-swift": ["attribute/cti", "name/cti/camel", "color/UIColorSwift"],
    "ios-swift-separate": ["attribute/cti", "name/cti/camel", "color/UIColorSwift"],
}
