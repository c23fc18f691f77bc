"""
tokenbuild CLI package.

- build.py: build, clean and init commands
- listing.py: themes and registry listings
- utils.py: shared helpers
"""

import typer

from tokenbuild.cli.build import build_command, clean_command, init_command
from tokenbuild.cli.listing import registry_command, themes_command
from tokenbuild.cli.utils import version_callback

app = typer.Typer(
    help="""tokenbuild - design tokens to per-theme platform files

Reads tokens/<theme>.json and writes CSS, SCSS, LESS, JSON and iOS
sources for every theme.
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """tokenbuild CLI main callback for global options."""
    pass


app.command(name="build")(build_command)
app.command(name="clean")(clean_command)
app.command(name="init")(init_command)
app.command(name="themes")(themes_command)
app.command(name="registry")(registry_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main"]
