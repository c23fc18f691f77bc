"""
Token IR types.

A Property is one resolved design token as it flows through transforms and
formats. Models are frozen; transforms return updated copies.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TokenAttributes(BaseModel):
    """Category/type/item classification derived from the token path."""

    model_config = ConfigDict(frozen=True)

    category: str | None = Field(default=None, description="First path segment (color, size, font)")
    type: str | None = Field(default=None, description="Second path segment")
    item: str | None = Field(default=None, description="Third path segment")
    subitem: str | None = Field(default=None, description="Fourth path segment")
    state: str | None = Field(default=None, description="Fifth path segment")


class Property(BaseModel):
    """One design token."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: tuple[str, ...] = ()
    value: Any = None
    original_value: Any = None
    type: str | None = Field(default=None, description="Token type (color, dimension, ...)")
    unit: str | None = Field(default=None, description="Source unit (pixel, percent, ...)")
    description: str | None = None
    attributes: TokenAttributes = Field(default_factory=TokenAttributes)
    file_path: Path | None = None

    @property
    def dotted_path(self) -> str:
        return ".".join(self.path) if self.path else self.name

    def get_field(self, key: str) -> Any:
        """Look up a top-level field, falling back to attributes."""
        if key in Property.model_fields:
            return getattr(self, key)
        if key in TokenAttributes.model_fields:
            return getattr(self.attributes, key)
        return None


class Dictionary(BaseModel):
    """The full property list handed to a format."""

    model_config = ConfigDict(frozen=True)

    all_properties: list[Property] = Field(default_factory=list)

    @property
    def properties(self) -> dict[str, Any]:
        """Nested tree of properties keyed by path segment."""
        tree: dict[str, Any] = {}
        for prop in self.all_properties:
            if not prop.path:
                tree[prop.name] = prop
                continue
            node = tree
            for segment in prop.path[:-1]:
                child = node.get(segment)
                if not isinstance(child, dict):
                    child = {}
                    node[segment] = child
                node = child
            node[prop.path[-1]] = prop
        return tree

    def filtered(self, properties: list[Property]) -> Dictionary:
        return Dictionary(all_properties=properties)

    def __len__(self) -> int:
        return len(self.all_properties)
