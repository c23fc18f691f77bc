"""
Per-theme platform builds.

Each theme is built independently: its source is loaded once, then every
platform applies its transform group to the loaded properties, filters
them per file, renders the file with its format, and writes it under the
platform build path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .discovery import discover_themes
from .errors import ConfigError, ErrorContext, TokenBuildError
from .filters import apply_filter
from .ir.config import PlatformSpec, ProjectConfig, ThemeBuildConfig
from .ir.tokens import Dictionary, Property
from .registry import Registry
from .source_loader import load_properties
from .transforms import apply_transforms

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildResult:
    """One file produced (or planned, for dry runs) by a build."""

    theme: str
    platform: str
    path: Path
    format: str
    token_count: int
    written: bool


def _select_platforms(
    config: ThemeBuildConfig, platforms: list[str] | None
) -> dict[str, PlatformSpec]:
    if not platforms:
        return dict(config.platforms)
    unknown = [p for p in platforms if p not in config.platforms]
    if unknown:
        raise ConfigError(
            f"Unknown platform(s): {', '.join(unknown)}. "
            f"Configured: {', '.join(config.platforms)}"
        )
    return {name: config.platforms[name] for name in platforms}


def _output_path(project_root: Path, platform: PlatformSpec, destination: str) -> Path:
    return project_root / platform.build_path / destination


def build_platform(
    name: str,
    platform: PlatformSpec,
    properties: list[Property],
    registry: Registry,
    *,
    theme: str,
    project_root: Path,
    theme_name: str | None = None,
    dry_run: bool = False,
) -> list[BuildResult]:
    """Transform, filter, format and write every file of one platform."""
    transforms = registry.resolve_transform_group(platform.transform_group)
    transformed = apply_transforms(properties, transforms, platform)

    results: list[BuildResult] = []
    for file in platform.files:
        if theme_name and file.format == "json/flat" and "themeName" not in file.options:
            file = file.model_copy(update={"options": {**file.options, "themeName": theme_name}})

        selected = apply_filter(transformed, registry.resolve_filter(file.filter))
        fmt = registry.get_format(file.format)
        try:
            content = fmt(Dictionary(all_properties=selected), platform, file)
        except TokenBuildError as e:
            if e.context is not None:
                raise
            context = ErrorContext(file=Path(file.destination), platform=name)
            raise type(e)(e.message, context) from e

        path = _output_path(project_root, platform, file.destination)
        if not dry_run:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
            logger.info(f"[{theme}/{name}] wrote {path} ({len(selected)} tokens)")
        results.append(
            BuildResult(
                theme=theme,
                platform=name,
                path=path,
                format=file.format,
                token_count=len(selected),
                written=not dry_run,
            )
        )
    return results


def build_theme(
    theme: str,
    config: ProjectConfig,
    registry: Registry,
    *,
    project_root: Path,
    platforms: list[str] | None = None,
    theme_name: str | None = None,
    dry_run: bool = False,
) -> list[BuildResult]:
    """Build all (or the selected) platforms for one theme.

    Args:
        theme: Theme id (source file stem).
        config: Project configuration.
        registry: Registry supplying transforms, filters and formats.
        project_root: Directory sources and build paths are relative to.
        platforms: Optional subset of platform names.
        theme_name: Explicit display name for json/flat output.
        dry_run: If True, render everything but write nothing.

    Returns:
        One BuildResult per output file.
    """
    theme_config = config.for_theme(theme)
    selected = _select_platforms(theme_config, platforms)
    sources = [project_root / s for s in theme_config.source]
    properties = load_properties(sources)

    logger.info(f"Building theme {theme!r}: {len(properties)} tokens, {len(selected)} platform(s)")
    results: list[BuildResult] = []
    for name, platform in selected.items():
        results.extend(
            build_platform(
                name,
                platform,
                properties,
                registry,
                theme=theme,
                project_root=project_root,
                theme_name=theme_name,
                dry_run=dry_run,
            )
        )
    return results


def clean_theme(
    theme: str,
    config: ProjectConfig,
    *,
    project_root: Path,
    platforms: list[str] | None = None,
) -> list[Path]:
    """Delete the files a build of this theme would write.

    Returns:
        Paths that were removed.
    """
    theme_config = config.for_theme(theme)
    removed: list[Path] = []
    for platform in _select_platforms(theme_config, platforms).values():
        for file in platform.files:
            path = _output_path(project_root, platform, file.destination)
            if path.exists():
                path.unlink()
                removed.append(path)
                logger.info(f"[{theme}] removed {path}")
    return removed


def resolve_themes(config: ProjectConfig, project_root: Path, themes: list[str] | None) -> list[str]:
    """Requested themes, or every theme found in the tokens directory."""
    if themes:
        return list(themes)
    return discover_themes(project_root / config.tokens_dir, config.source_extension)


def build_all(
    config: ProjectConfig,
    registry: Registry,
    *,
    project_root: Path,
    themes: list[str] | None = None,
    platforms: list[str] | None = None,
    dry_run: bool = False,
) -> list[BuildResult]:
    """Build every discovered (or requested) theme in turn."""
    results: list[BuildResult] = []
    for theme in resolve_themes(config, project_root, themes):
        results.extend(
            build_theme(
                theme,
                config,
                registry,
                project_root=project_root,
                platforms=platforms,
                dry_run=dry_run,
            )
        )
    return results
