"""Objective-C and Swift formats."""

from __future__ import annotations

import json
from typing import Any

from ..errors import ConfigError
from ..ir.config import FileSpec, PlatformSpec
from ..ir.tokens import Dictionary, Property
from .variables import file_header


def _class_name(file: FileSpec) -> str:
    if not file.class_name:
        raise ConfigError(f"Format {file.format!r} requires className ({file.destination})")
    return file.class_name


def _objc_header(file: FileSpec) -> str:
    header = file_header(file, comment="line")
    if not header:
        return ""
    return f"//\n// {file.destination}\n//\n{header}"


def _objc_literal(prop: Property, declared_type: str | None) -> str:
    value = prop.value
    if isinstance(value, bool):
        return "YES" if value else "NO"
    if isinstance(value, (int, float)):
        if declared_type in ("float", "CGFloat", "double"):
            return f"{float(value):.2f}"
        return str(value)
    if isinstance(value, str) and value.startswith("[UIColor"):
        return value
    return "@" + json.dumps(str(value))


def _swift_literal(prop: Property) -> str:
    value: Any = prop.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str) and value.startswith("UIColor("):
        return value
    return json.dumps(str(value))


def ios_colors_h(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    class_name = _class_name(file)
    enum_type = file.type or f"{class_name}Name"
    names = ",\n".join(p.name for p in dictionary.all_properties)
    return (
        f"{_objc_header(file)}"
        "#import <UIKit/UIKit.h>\n\n"
        f"typedef NS_ENUM(NSInteger, {enum_type}) {{\n{names}\n}};\n\n"
        f"@interface {class_name} : NSObject\n"
        "+ (NSArray *)values;\n"
        f"+ (UIColor *)color:({enum_type})color;\n"
        "@end\n"
    )


def ios_colors_m(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    class_name = _class_name(file)
    enum_type = file.type or f"{class_name}Name"
    values = ",\n".join(_objc_literal(p, None) for p in dictionary.all_properties)
    return (
        f"{_objc_header(file)}"
        f'#import "{class_name}.h"\n\n'
        f"@implementation {class_name}\n\n"
        f"+ (UIColor *)color:({enum_type})colorEnum{{\n"
        "  return [[self values] objectAtIndex:colorEnum];\n"
        "}\n\n"
        "+ (NSArray *)values {\n"
        "  static NSArray* colorArray;\n"
        "  static dispatch_once_t onceToken;\n\n"
        "  dispatch_once(&onceToken, ^{\n"
        f"    colorArray = @[\n{values}\n    ];\n"
        "  });\n\n"
        "  return colorArray;\n"
        "}\n\n"
        "@end\n"
    )


def ios_static_h(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    declared = file.type or "float"
    decls = "\n".join(f"extern const {declared} {p.name};" for p in dictionary.all_properties)
    return f"{_objc_header(file)}#import <Foundation/Foundation.h>\n\n{decls}\n"


def ios_static_m(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    class_name = _class_name(file)
    declared = file.type or "float"
    defs = "\n".join(
        f"const {declared} {p.name} = {_objc_literal(p, declared)};" for p in dictionary.all_properties
    )
    return f'{_objc_header(file)}#import "{class_name}.h"\n\n{defs}\n'


def _swift_body(dictionary: Dictionary) -> str:
    return "\n".join(
        f"    public static let {p.name} = {_swift_literal(p)}" for p in dictionary.all_properties
    )


def swift_class(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    class_name = _class_name(file)
    return (
        f"{_objc_header(file)}import UIKit\n\n"
        f"public class {class_name} {{\n{_swift_body(dictionary)}\n}}\n"
    )


def swift_enum(dictionary: Dictionary, platform: PlatformSpec, file: FileSpec) -> str:
    class_name = _class_name(file)
    return (
        f"{_objc_header(file)}import UIKit\n\n"
        f"public enum {class_name} {{\n{_swift_body(dictionary)}\n}}\n"
    )
