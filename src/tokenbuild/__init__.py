"""
tokenbuild - design token builds for per-theme platform artifacts.

Turns theme token files exported from a design tool into CSS, SCSS, LESS,
JSON and iOS sources.
"""

from __future__ import annotations

from ._version import get_version
from .core.errors import (
    ConfigError,
    MalformedTokenError,
    RegistryError,
    ThemeNameError,
    TokenBuildError,
    TokenReferenceError,
    TokenSourceError,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "TokenBuildError",
    "ConfigError",
    "TokenSourceError",
    "TokenReferenceError",
    "MalformedTokenError",
    "ThemeNameError",
    "RegistryError",
]
