"""Version lookup for tokenbuild."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PROJECT = "tokenbuild"
_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def _checkout_version() -> str | None:
    """Version declared by the source checkout this module runs from, if any."""
    if not _PYPROJECT.is_file():
        return None
    with _PYPROJECT.open("rb") as fh:
        project = tomllib.load(fh).get("project", {})
    if project.get("name") != _PROJECT:
        return None
    return project.get("version")


def get_version() -> str:
    """Prefer the checkout's pyproject.toml, then installed metadata."""
    checkout = _checkout_version()
    if checkout:
        return checkout
    try:
        return _metadata_version(_PROJECT)
    except PackageNotFoundError:
        return "0.0.0"
