"""
Explicit registry of transforms, transform groups, filters and formats.

Each build receives a Registry instance; nothing is registered globally.
default_registry() returns a fresh registry with the engine built-ins and
the project's own extensions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .errors import RegistryError
from .filters import Filter, Predicate, mapping_filter, valid_token_filter
from .formats import Format, builtin_formats
from .formats.flat_json import json_flat
from .transforms import BUILTIN_TRANSFORM_GROUPS, Transform, builtin_transforms, unit_transforms

logger = logging.getLogger(__name__)

UNIT_TRANSFORMS: tuple[str, ...] = ("size/px", "size/percent")


class Registry:
    """Named extension points consulted during a build."""

    def __init__(self) -> None:
        self._transforms: dict[str, Transform] = {}
        self._groups: dict[str, list[str]] = {}
        self._filters: dict[str, Filter] = {}
        self._formats: dict[str, Format] = {}

    # -- registration --

    def register_transform(self, transform: Transform) -> None:
        if transform.name in self._transforms:
            logger.debug(f"Replacing transform {transform.name}")
        self._transforms[transform.name] = transform

    def register_transform_group(self, name: str, transforms: list[str]) -> None:
        missing = [t for t in transforms if t not in self._transforms]
        if missing:
            raise RegistryError(
                f"Transform group {name!r} references unknown transform(s): {', '.join(missing)}"
            )
        self._groups[name] = list(transforms)

    def register_filter(self, flt: Filter) -> None:
        self._filters[flt.name] = flt

    def register_format(self, fmt: Format) -> None:
        self._formats[fmt.name] = fmt

    def extend_transform_group(self, name: str, base: str, extra: list[str]) -> None:
        """Register name as base's transforms followed by extra."""
        self.register_transform_group(name, [*self.get_transform_group(base), *extra])

    # -- lookup --

    def get_transform(self, name: str) -> Transform:
        try:
            return self._transforms[name]
        except KeyError:
            raise RegistryError(f"Unknown transform: {name}") from None

    def get_transform_group(self, name: str) -> list[str]:
        try:
            return list(self._groups[name])
        except KeyError:
            raise RegistryError(f"Unknown transform group: {name}") from None

    def resolve_transform_group(self, name: str) -> list[Transform]:
        return [self.get_transform(t) for t in self.get_transform_group(name)]

    def get_format(self, name: str) -> Format:
        try:
            return self._formats[name]
        except KeyError:
            raise RegistryError(f"Unknown format: {name}") from None

    def get_filter(self, name: str) -> Filter:
        try:
            return self._filters[name]
        except KeyError:
            raise RegistryError(f"Unknown filter: {name}") from None

    def resolve_filter(self, spec: str | Mapping[str, Any] | None) -> Predicate | None:
        """Turn a file's filter entry into a predicate (None admits all)."""
        if spec is None:
            return None
        if isinstance(spec, str):
            return self.get_filter(spec)
        return mapping_filter(spec)

    # -- introspection --

    @property
    def transforms(self) -> list[str]:
        return sorted(self._transforms)

    @property
    def transform_groups(self) -> dict[str, list[str]]:
        return {name: list(items) for name, items in sorted(self._groups.items())}

    @property
    def filters(self) -> list[str]:
        return sorted(self._filters)

    @property
    def formats(self) -> list[str]:
        return sorted(self._formats)

    def __repr__(self) -> str:
        return (
            f"Registry(transforms={len(self._transforms)}, groups={len(self._groups)}, "
            f"filters={len(self._filters)}, formats={len(self._formats)})"
        )


def engine_registry() -> Registry:
    """Registry holding only the engine built-ins."""
    registry = Registry()
    for transform in builtin_transforms():
        registry.register_transform(transform)
    for name, transforms in BUILTIN_TRANSFORM_GROUPS.items():
        registry.register_transform_group(name, transforms)
    for fmt in builtin_formats():
        registry.register_format(fmt)
    return registry


def register_project_extensions(registry: Registry) -> Registry:
    """Add unit transforms, custom/* groups, validToken and json/flat."""
    for transform in unit_transforms():
        registry.register_transform(transform)
    for base in ("css", "less", "scss"):
        registry.extend_transform_group(f"custom/{base}", base, list(UNIT_TRANSFORMS))
    registry.register_filter(valid_token_filter())
    registry.register_format(Format("json/flat", json_flat))
    return registry


def default_registry() -> Registry:
    """Fresh registry with built-ins and project extensions."""
    return register_project_extensions(engine_registry())
