"""
Token source loading.

Reads theme token files exported from a design tool, merges multiple
sources, resolves {alias.references}, and flattens the tree into an
ordered list of Property objects.

A token is any object carrying a "value" (or DTCG "$value") key; every
other object is a group.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .errors import ErrorContext, TokenReferenceError, make_source_error
from .ir.tokens import Property

logger = logging.getLogger(__name__)

_VALUE_KEYS = ("value", "$value")
_TYPE_KEYS = ("type", "$type")
_DESCRIPTION_KEYS = ("description", "$description")
_REFERENCE_RE = re.compile(r"\{([^{}]+)\}")


def load_source_file(path: Path) -> dict[str, Any]:
    """Read one token JSON file.

    Raises:
        TokenSourceError: If the file is missing, not JSON, or not an object.
    """
    if not path.exists():
        raise make_source_error("Token source not found", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise make_source_error(f"Invalid JSON: {e}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise make_source_error(f"Unable to read: {e}", path) from e
    if not isinstance(data, dict):
        raise make_source_error("Expected a JSON object at the top level", path)
    return data


def merge_sources(paths: list[Path]) -> tuple[dict[str, Any], dict[tuple[str, ...], Path]]:
    """Deep-merge several source files, later files winning.

    Returns:
        The merged tree and a map of token path to the file it came from.
    """
    merged: dict[str, Any] = {}
    origins: dict[tuple[str, ...], Path] = {}
    for path in paths:
        data = load_source_file(path)
        _merge_tree(merged, data, (), path, origins)
    return merged, origins


def _merge_tree(
    target: dict[str, Any],
    source: dict[str, Any],
    prefix: tuple[str, ...],
    path: Path,
    origins: dict[tuple[str, ...], Path],
) -> None:
    for key, value in source.items():
        here = (*prefix, key)
        existing = target.get(key)
        if _is_group(value) and _is_group(existing):
            _merge_tree(existing, value, here, path, origins)
            continue
        if existing is not None:
            logger.debug(f"Token collision at {'.'.join(here)}: {path} overrides {origins.get(here)}")
            for stale in [p for p in origins if p[: len(here)] == here]:
                del origins[stale]
        target[key] = value
        if isinstance(value, dict) and _is_token(value):
            origins[here] = path
        elif isinstance(value, dict):
            for token_path, _ in _iter_tokens(value, here):
                origins[token_path] = path


def _is_group(node: Any) -> bool:
    return isinstance(node, dict) and not _is_token(node)


def _is_token(node: dict[str, Any]) -> bool:
    return any(key in node for key in _VALUE_KEYS)


def _first(node: dict[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in node:
            return node[key]
    return None


def _iter_tokens(
    node: dict[str, Any], prefix: tuple[str, ...]
) -> Iterator[tuple[tuple[str, ...], dict[str, Any]]]:
    for key, value in node.items():
        if key.startswith("$") or not isinstance(value, dict):
            continue
        here = (*prefix, key)
        if _is_token(value):
            yield here, value
        else:
            yield from _iter_tokens(value, here)


def flatten_tokens(
    tree: dict[str, Any],
    origins: dict[tuple[str, ...], Path] | None = None,
) -> list[Property]:
    """Flatten a token tree into properties, resolving aliases.

    Properties come back in document order with unresolved names (path
    joined by "-"); name transforms rewrite them later.
    """
    origins = origins or {}
    raw = dict(_iter_tokens(tree, ()))
    resolver = _ReferenceResolver(raw, origins)

    properties: list[Property] = []
    for token_path, node in raw.items():
        original = _first(node, _VALUE_KEYS)
        description = _first(node, _DESCRIPTION_KEYS)
        properties.append(
            Property(
                name="-".join(token_path),
                path=token_path,
                value=resolver.resolve(token_path),
                original_value=original,
                type=_first(node, _TYPE_KEYS),
                unit=node.get("unit"),
                description=str(description) if description is not None else None,
                file_path=origins.get(token_path),
            )
        )
    return properties


def load_properties(paths: list[Path]) -> list[Property]:
    """Load, merge and flatten token sources."""
    tree, origins = merge_sources(paths)
    properties = flatten_tokens(tree, origins)
    logger.debug(f"Loaded {len(properties)} tokens from {len(paths)} source(s)")
    return properties


class _ReferenceResolver:
    """Resolves {dotted.path} references with cycle detection."""

    def __init__(
        self,
        raw: dict[tuple[str, ...], dict[str, Any]],
        origins: dict[tuple[str, ...], Path],
    ) -> None:
        self._raw = raw
        self._origins = origins
        self._resolved: dict[tuple[str, ...], Any] = {}
        self._stack: list[tuple[str, ...]] = []

    def resolve(self, token_path: tuple[str, ...]) -> Any:
        if token_path in self._resolved:
            return self._resolved[token_path]
        if token_path in self._stack:
            chain = " -> ".join(".".join(p) for p in [*self._stack, token_path])
            raise TokenReferenceError(
                f"Circular reference: {chain}",
                ErrorContext(file=self._origins.get(token_path), token=".".join(token_path)),
            )
        self._stack.append(token_path)
        try:
            value = self._resolve_value(_first(self._raw[token_path], _VALUE_KEYS), token_path)
        finally:
            self._stack.pop()
        self._resolved[token_path] = value
        return value

    def _resolve_value(self, value: Any, owner: tuple[str, ...]) -> Any:
        if isinstance(value, str):
            return self._resolve_string(value, owner)
        if isinstance(value, list):
            return [self._resolve_value(v, owner) for v in value]
        if isinstance(value, dict):
            return {k: self._resolve_value(v, owner) for k, v in value.items()}
        return value

    def _resolve_string(self, value: str, owner: tuple[str, ...]) -> Any:
        whole = _REFERENCE_RE.fullmatch(value.strip())
        if whole:
            return self.resolve(self._lookup(whole.group(1), owner))

        def _replace(match: re.Match[str]) -> str:
            return str(self.resolve(self._lookup(match.group(1), owner)))

        return _REFERENCE_RE.sub(_replace, value)

    def _lookup(self, reference: str, owner: tuple[str, ...]) -> tuple[str, ...]:
        target = tuple(reference.strip().split("."))
        if target and target[-1] in _VALUE_KEYS:
            target = target[:-1]
        if target not in self._raw:
            raise TokenReferenceError(
                f"Unknown reference {{{reference}}}",
                ErrorContext(file=self._origins.get(owner), token=".".join(owner)),
            )
        return target
