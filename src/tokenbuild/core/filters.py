"""
Property filters.

A filter decides which properties reach a given output file. Files name a
registered filter, give an attribute mapping, or omit the filter entirely.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from .ir.tokens import Property

Predicate = Callable[[Property], bool]

VALID_TOKEN_TYPES: frozenset[str] = frozenset({"dimension", "string", "number", "color"})


@dataclass(frozen=True)
class Filter:
    """A named, registrable property filter."""

    name: str
    matcher: Predicate

    def __call__(self, prop: Property) -> bool:
        return self.matcher(prop)


def _valid_token(prop: Property) -> bool:
    return prop.type in VALID_TOKEN_TYPES


def valid_token_filter() -> Filter:
    """Admit only tokens with a type CSS variables can carry."""
    return Filter("validToken", _valid_token)


def mapping_filter(criteria: Mapping[str, Any]) -> Predicate:
    """Build a predicate matching every key against property fields.

    Keys resolve against top-level Property fields first, then attributes.
    A nested mapping under "attributes" matches attribute fields. An empty
    mapping admits everything.
    """
    items = dict(criteria)

    def _matches(prop: Property) -> bool:
        for key, expected in items.items():
            if key == "attributes" and isinstance(expected, Mapping):
                if any(getattr(prop.attributes, k, None) != v for k, v in expected.items()):
                    return False
                continue
            if prop.get_field(key) != expected:
                return False
        return True

    return _matches


def apply_filter(properties: list[Property], predicate: Predicate | None) -> list[Property]:
    if predicate is None:
        return list(properties)
    return [p for p in properties if predicate(p)]
