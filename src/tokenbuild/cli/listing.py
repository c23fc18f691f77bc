"""
Inspection commands for the tokenbuild CLI.

Commands:
- themes: List themes discovered in the tokens directory
- registry: List registered transforms, groups, filters and formats
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tokenbuild.cli.build import ConfigOption, ProjectOption, load_config_or_exit
from tokenbuild.core.discovery import discover_themes
from tokenbuild.core.errors import TokenBuildError
from tokenbuild.core.registry import default_registry

console = Console()


def themes_command(
    project_dir: ProjectOption = Path("."),
    config_path: ConfigOption = None,
) -> None:
    """List themes found in the tokens directory."""
    config = load_config_or_exit(project_dir, config_path)
    tokens_dir = project_dir / config.tokens_dir
    try:
        themes = discover_themes(tokens_dir, config.source_extension)
    except TokenBuildError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from e

    if not themes:
        console.print(f"No themes found in {tokens_dir}")
        return
    for theme in themes:
        console.print(f"  {theme}  [dim]{config.source_for(theme)}[/dim]")


def registry_command(
    section: Annotated[
        str | None,
        typer.Argument(help="One of: transforms, groups, filters, formats"),
    ] = None,
) -> None:
    """Show what the build registry provides."""
    registry = default_registry()
    sections = {
        "transforms": registry.transforms,
        "groups": [f"{name}: {', '.join(items)}" for name, items in registry.transform_groups.items()],
        "filters": registry.filters,
        "formats": registry.formats,
    }
    if section is not None and section not in sections:
        console.print(f"[red]Unknown section {section!r}[/red]; choose from {', '.join(sections)}")
        raise typer.Exit(1)

    table = Table(title="Registry")
    table.add_column("Kind", style="cyan")
    table.add_column("Name")
    for kind, names in sections.items():
        if section and kind != section:
            continue
        for name in names:
            table.add_row(kind, name)
    console.print(table)
