"""
Output formats.

A format renders a Dictionary of transformed properties into the text of
one output file. Formats receive the platform and file specs so they can
read class names, declared types and per-file options.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..ir.config import FileSpec, PlatformSpec
from ..ir.tokens import Dictionary

Formatter = Callable[[Dictionary, PlatformSpec, FileSpec], str]


@dataclass(frozen=True)
class Format:
    """A named, registrable output format."""

    name: str
    formatter: Formatter

    def __call__(self, dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
        return self.formatter(dictionary, platform, file)


def builtin_formats() -> list[Format]:
    """Variable-file and iOS formats shipped with the engine."""
    from .ios import (
        ios_colors_h,
        ios_colors_m,
        ios_static_h,
        ios_static_m,
        swift_class,
        swift_enum,
    )
    from .variables import css_variables, less_variables, scss_variables

    return [
        Format("css/variables", css_variables),
        Format("scss/variables", scss_variables),
        Format("less/variables", less_variables),
        Format("ios/colors.h", ios_colors_h),
        Format("ios/colors.m", ios_colors_m),
        Format("ios/static.h", ios_static_h),
        Format("ios/static.m", ios_static_m),
        Format("ios-swift/class.swift", swift_class),
        Format("ios-swift/enum.swift", swift_enum),
    ]


__all__ = ["Format", "Formatter", "builtin_formats"]
