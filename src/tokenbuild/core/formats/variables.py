"""CSS, SCSS and LESS variable formats."""

from __future__ import annotations

import json
from typing import Any

from ..ir.config import FileSpec, PlatformSpec
from ..ir.tokens import Dictionary, Property

HEADER_LINES = ("Do not edit directly", "Generated by tokenbuild")


def file_header(file: FileSpec, *, comment: str = "block") -> str:
    """Leading comment for generated files, honouring showFileHeader."""
    if not file.option("showFileHeader", True):
        return ""
    if comment == "line":
        return "".join(f"// {line}\n" for line in HEADER_LINES) + "\n"
    body = "".join(f" * {line}\n" for line in HEADER_LINES)
    return f"/**\n{body} */\n\n"


def render_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def _lines(properties: list[Property], template: str, indent: str = "") -> list[str]:
    return [indent + template.format(name=p.name, value=render_value(p.value)) for p in properties]


def css_variables(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    selector = file.option("selector", ":root")
    body = "\n".join(_lines(dictionary.all_properties, "--{name}: {value};", "  "))
    return f"{file_header(file)}{selector} {{\n{body}\n}}\n"


def scss_variables(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    body = "\n".join(_lines(dictionary.all_properties, "${name}: {value};"))
    return f"{file_header(file)}{body}\n"


def less_variables(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    body = "\n".join(_lines(dictionary.all_properties, "@{name}: {value};"))
    return f"{file_header(file)}{body}\n"
