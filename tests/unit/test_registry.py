"""Tests for the explicit build registry."""

from __future__ import annotations

import pytest

from tokenbuild.core.errors import RegistryError
from tokenbuild.core.formats import Format
from tokenbuild.core.registry import Registry, default_registry, engine_registry


class TestDefaultRegistry:
    def test_custom_groups_extend_builtins(self):
        registry = default_registry()
        for base in ("css", "less", "scss"):
            group = registry.get_transform_group(f"custom/{base}")
            assert group == [*registry.get_transform_group(base), "size/px", "size/percent"]

    def test_project_extensions_registered(self):
        registry = default_registry()
        assert "json/flat" in registry.formats
        assert "validToken" in registry.filters
        assert "size/px" in registry.transforms

    def test_engine_registry_has_no_project_extensions(self):
        registry = engine_registry()
        assert "json/flat" not in registry.formats
        with pytest.raises(RegistryError):
            registry.get_transform_group("custom/css")

    def test_registries_are_independent(self):
        first = default_registry()
        second = default_registry()
        first.register_format(Format("text/names", lambda d, p, f: ""))
        assert "text/names" in first.formats
        assert "text/names" not in second.formats


class TestLookups:
    def test_unknown_format(self):
        with pytest.raises(RegistryError, match="Unknown format"):
            default_registry().get_format("nope")

    def test_unknown_group(self):
        with pytest.raises(RegistryError, match="Unknown transform group"):
            default_registry().resolve_transform_group("nope")

    def test_group_with_unknown_transform(self):
        with pytest.raises(RegistryError, match="unknown transform"):
            Registry().register_transform_group("broken", ["attribute/cti"])

    def test_resolve_group_order(self):
        names = [t.name for t in default_registry().resolve_transform_group("custom/css")]
        assert names == ["attribute/cti", "name/cti/kebab", "color/css", "size/px", "size/percent"]
