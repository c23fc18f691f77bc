"""
Build commands for the tokenbuild CLI.

Commands:
- build: Build platform artifacts for every (or the selected) theme
- clean: Remove generated artifacts
- init: Write the default tokenbuild.yaml
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tokenbuild.cli.utils import configure_logging
from tokenbuild.core.builder import BuildResult, build_theme, clean_theme, resolve_themes
from tokenbuild.core.config_loader import (
    CONFIG_FILE,
    get_config_path,
    load_project_config,
    save_project_config,
)
from tokenbuild.core.errors import TokenBuildError
from tokenbuild.core.ir.config import ProjectConfig
from tokenbuild.core.registry import default_registry

console = Console()

ProjectOption = Annotated[
    Path,
    typer.Option(
        "--project",
        "-p",
        help="Project directory containing the tokens directory",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help=f"Config file (default: <project>/{CONFIG_FILE})"),
]
ThemeOption = Annotated[
    list[str] | None,
    typer.Option("--theme", "-t", help="Theme id to process (repeatable; default: all)"),
]
PlatformOption = Annotated[
    list[str] | None,
    typer.Option("--platform", "-P", help="Platform to process (repeatable; default: all)"),
]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Enable debug logging")]


def load_config_or_exit(project_dir: Path, config_path: Path | None) -> ProjectConfig:
    try:
        return load_project_config(project_dir, config_path=config_path)
    except TokenBuildError as e:
        console.print(f"[red]Config error:[/red] {e}")
        raise typer.Exit(1) from e


def _results_table(results: list[BuildResult], project_dir: Path) -> Table:
    table = Table(title="Build Output")
    table.add_column("Theme", style="cyan")
    table.add_column("Platform")
    table.add_column("Format", style="dim")
    table.add_column("Tokens", justify="right")
    table.add_column("File")
    for result in results:
        try:
            shown = result.path.relative_to(project_dir)
        except ValueError:
            shown = result.path
        table.add_row(
            result.theme, result.platform, result.format, str(result.token_count), str(shown)
        )
    return table


def build_command(
    project_dir: ProjectOption = Path("."),
    config_path: ConfigOption = None,
    themes: ThemeOption = None,
    platforms: PlatformOption = None,
    theme_name: Annotated[
        str | None,
        typer.Option("--theme-name", help="Display name for json/flat (single theme only)"),
    ] = None,
    dry_run: Annotated[
        bool, typer.Option("--dry-run", "-n", help="Render without writing files")
    ] = False,
    verbose: VerboseOption = False,
) -> None:
    """
    Build per-theme platform artifacts.

    Every tokens/<theme>.json file becomes one theme; each configured
    platform writes its files under its build path.

    Example:
        tokenbuild build --theme light --platform css
    """
    configure_logging(verbose)
    project_dir = project_dir.resolve()
    config = load_config_or_exit(project_dir, config_path)
    registry = default_registry()

    try:
        selected = resolve_themes(config, project_dir, themes)
        if theme_name and len(selected) != 1:
            console.print("[red]--theme-name requires exactly one theme[/red]")
            raise typer.Exit(1)
        if not selected:
            console.print(f"[yellow]No themes found in {config.tokens_dir}/[/yellow]")
            return

        results: list[BuildResult] = []
        for theme in selected:
            with console.status(f"Building {theme}..."):
                results.extend(
                    build_theme(
                        theme,
                        config,
                        registry,
                        project_root=project_dir,
                        platforms=platforms,
                        theme_name=theme_name,
                        dry_run=dry_run,
                    )
                )
    except TokenBuildError as e:
        console.print(f"[red]Build failed:[/red] {e}")
        raise typer.Exit(1) from e

    console.print(_results_table(results, project_dir))
    verb = "Planned" if dry_run else "Wrote"
    console.print(f"[green]{verb} {len(results)} file(s) for {len(selected)} theme(s)[/green]")


def clean_command(
    project_dir: ProjectOption = Path("."),
    config_path: ConfigOption = None,
    themes: ThemeOption = None,
    platforms: PlatformOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Remove generated artifacts for the selected themes."""
    configure_logging(verbose)
    project_dir = project_dir.resolve()
    config = load_config_or_exit(project_dir, config_path)

    try:
        removed: list[Path] = []
        for theme in resolve_themes(config, project_dir, themes):
            removed.extend(
                clean_theme(theme, config, project_root=project_dir, platforms=platforms)
            )
    except TokenBuildError as e:
        console.print(f"[red]Clean failed:[/red] {e}")
        raise typer.Exit(1) from e

    for path in removed:
        console.print(f"  removed {path}")
    console.print(f"[green]Removed {len(removed)} file(s)[/green]")


def init_command(
    project_dir: ProjectOption = Path("."),
    force: Annotated[
        bool, typer.Option("--force", "-f", help="Overwrite an existing config")
    ] = False,
) -> None:
    """Write the default tokenbuild.yaml into the project."""
    path = get_config_path(project_dir)
    if path.exists() and not force:
        console.print(f"Config exists: {path}")
        console.print("Use --force to overwrite.")
        raise typer.Exit(1)
    save_project_config(project_dir, ProjectConfig())
    console.print(f"[green]Created[/green] {path}")
