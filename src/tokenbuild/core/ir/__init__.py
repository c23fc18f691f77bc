"""
tokenbuild IR types.

Token models flowing through the pipeline and the build configuration
models describing platform outputs.
"""

from .config import (
    THEME_PLACEHOLDER,
    FileSpec,
    PlatformSpec,
    ProjectConfig,
    ThemeBuildConfig,
    default_platforms,
)
from .tokens import Dictionary, Property, TokenAttributes

__all__ = [
    # Tokens
    "Dictionary",
    "Property",
    "TokenAttributes",
    # Config
    "THEME_PLACEHOLDER",
    "FileSpec",
    "PlatformSpec",
    "ProjectConfig",
    "ThemeBuildConfig",
    "default_platforms",
]
