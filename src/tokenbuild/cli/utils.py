"""
tokenbuild CLI utilities.

Shared helpers used across CLI modules.
"""

import logging
import platform
from pathlib import Path

import typer

from tokenbuild._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import tokenbuild

            install_location = Path(tokenbuild.__file__).parent.parent.parent
        except Exception:
            install_location = Path.cwd()

        install_method = "unknown"
        try:
            from importlib.metadata import distribution

            dist = distribution("tokenbuild")
            if dist.read_text("direct_url.json"):
                install_method = "pip (editable)"
            else:
                install_method = "pip"
        except Exception:
            if (install_location / "pyproject.toml").exists():
                install_method = "development"

        typer.echo(f"tokenbuild {get_version()}")
        typer.echo(f"Python {python_version} ({python_impl})")
        typer.echo(f"Installed via {install_method} at {install_location}")
        raise typer.Exit()


def configure_logging(verbose: bool) -> None:
    """Route library logging to stderr; DEBUG when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
