"""
Build configuration IR types.

Mirrors the per-theme platform layout: each platform names a transform
group, an output directory, and the files to write. Keys accept both the
camelCase spelling used in token tooling and snake_case.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

THEME_PLACEHOLDER = "{theme}"


def _substitute(value: str, theme: str) -> str:
    return value.replace(THEME_PLACEHOLDER, theme)


class FileSpec(BaseModel):
    """One output file within a platform."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    destination: str = Field(description="File name relative to the platform build path")
    format: str = Field(description="Registered format name")
    filter: str | dict[str, Any] | None = Field(
        default=None, description="Registered filter name or attribute mapping"
    )
    options: dict[str, Any] = Field(default_factory=dict)
    class_name: str | None = Field(default=None, alias="className")
    type: str | None = Field(default=None, description="Declared type for iOS outputs")

    def option(self, key: str, default: Any = None) -> Any:
        return self.options.get(key, default)

    def for_theme(self, theme: str) -> FileSpec:
        return self.model_copy(update={"destination": _substitute(self.destination, theme)})


class PlatformSpec(BaseModel):
    """One output platform (css, scss, ios, ...)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    transform_group: str = Field(alias="transformGroup")
    build_path: str = Field(alias="buildPath")
    prefix: str | None = None
    files: list[FileSpec] = Field(default_factory=list)

    def for_theme(self, theme: str) -> PlatformSpec:
        return self.model_copy(
            update={
                "build_path": _substitute(self.build_path, theme),
                "files": [f.for_theme(theme) for f in self.files],
            }
        )


def _color_and_size_files(class_prefix: str) -> list[FileSpec]:
    color_class = f"{class_prefix}Color"
    size_class = f"{class_prefix}Size"
    return [
        FileSpec(
            destination=f"{color_class}.h",
            format="ios/colors.h",
            className=color_class,
            type=f"{color_class}Name",
            filter={"type": "color"},
        ),
        FileSpec(
            destination=f"{color_class}.m",
            format="ios/colors.m",
            className=color_class,
            type=f"{color_class}Name",
            filter={"type": "color"},
        ),
        FileSpec(
            destination=f"{size_class}.h",
            format="ios/static.h",
            className=size_class,
            type="float",
            filter={"type": "number"},
        ),
        FileSpec(
            destination=f"{size_class}.m",
            format="ios/static.m",
            className=size_class,
            type="float",
            filter={"type": "number"},
        ),
    ]


def default_platforms() -> dict[str, PlatformSpec]:
    """Platform layout for a design-tool theme export."""
    return {
        "scss": PlatformSpec(
            transformGroup="custom/scss",
            buildPath="build/scss/",
            files=[FileSpec(destination="_{theme}-variables.scss", format="scss/variables")],
        ),
        "less": PlatformSpec(
            transformGroup="custom/less",
            buildPath="build/less/",
            files=[FileSpec(destination="_{theme}-variables.less", format="less/variables")],
        ),
        "css": PlatformSpec(
            transformGroup="custom/css",
            buildPath="build/css/",
            files=[
                FileSpec(
                    destination="_{theme}-variables.css",
                    format="css/variables",
                    filter="validToken",
                    options={"showFileHeader": False},
                )
            ],
        ),
        "json-flat": PlatformSpec(
            transformGroup="js",
            buildPath="build/json/",
            files=[FileSpec(destination="{theme}.json", format="json/flat")],
        ),
        "ios": PlatformSpec(
            transformGroup="ios",
            buildPath="build/ios/{theme}/",
            files=_color_and_size_files("StyleDictionary"),
        ),
        "ios-swift": PlatformSpec(
            transformGroup="ios-swift",
            buildPath="build/ios-swift/{theme}/",
            files=[
                FileSpec(
                    destination="StyleDictionary.swift",
                    format="ios-swift/class.swift",
                    className="StyleDictionary",
                    filter={},
                )
            ],
        ),
        "ios-swift-separate-enums": PlatformSpec(
            transformGroup="ios-swift-separate",
            buildPath="build/ios-swift/{theme}/",
            files=[
                FileSpec(
                    destination="StyleDictionaryColor.swift",
                    format="ios-swift/enum.swift",
                    className="StyleDictionaryColor",
                    filter={"type": "color"},
                ),
                FileSpec(
                    destination="StyleDictionarySize.swift",
                    format="ios-swift/enum.swift",
                    className="StyleDictionarySize",
                    type="float",
                    filter={"type": "number"},
                ),
            ],
        ),
    }


class ProjectConfig(BaseModel):
    """Top-level build configuration (tokenbuild.yaml)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    tokens_dir: str = Field(default="tokens", alias="tokensDir")
    source_extension: str = Field(default=".json", alias="sourceExtension")
    platforms: dict[str, PlatformSpec] = Field(default_factory=default_platforms)

    @field_validator("source_extension")
    @classmethod
    def validate_source_extension(cls, v: str) -> str:
        """Ensure the extension carries its leading dot."""
        return v if v.startswith(".") else f".{v}"

    def source_for(self, theme: str) -> str:
        return f"{self.tokens_dir}/{theme}{self.source_extension}"

    def for_theme(self, theme: str) -> ThemeBuildConfig:
        return ThemeBuildConfig(
            theme=theme,
            source=[self.source_for(theme)],
            platforms={name: p.for_theme(theme) for name, p in self.platforms.items()},
        )


class ThemeBuildConfig(BaseModel):
    """Fully substituted configuration for one theme build."""

    model_config = ConfigDict(frozen=True)

    theme: str
    source: list[str]
    platforms: dict[str, PlatformSpec]
