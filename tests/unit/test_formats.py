"""Tests for variable-file and iOS formats."""

from __future__ import annotations

import pytest

from tokenbuild.core.errors import ConfigError
from tokenbuild.core.ir.config import FileSpec, PlatformSpec
from tokenbuild.core.ir.tokens import Dictionary, Property
from tokenbuild.core.registry import default_registry

PLATFORM = PlatformSpec(transformGroup="css", buildPath="build/")


def _dictionary(*pairs: tuple[str, object]) -> Dictionary:
    return Dictionary(all_properties=[Property(name=n, value=v) for n, v in pairs])


def _render(format_name: str, dictionary: Dictionary, **file_kwargs) -> str:
    file = FileSpec(destination="out", format=format_name, **file_kwargs)
    return default_registry().get_format(format_name)(dictionary, PLATFORM, file)


class TestVariables:
    def test_css_without_header(self):
        output = _render(
            "css/variables",
            _dictionary(("color-bg", "#fff"), ("size-sm", "4px")),
            options={"showFileHeader": False},
        )
        assert output == ":root {\n  --color-bg: #fff;\n  --size-sm: 4px;\n}\n"

    def test_css_header_by_default(self):
        output = _render("css/variables", _dictionary(("a", 1)))
        assert output.startswith("/**\n * Do not edit directly\n")

    def test_css_selector_option(self):
        output = _render(
            "css/variables",
            _dictionary(("a", 1)),
            options={"showFileHeader": False, "selector": "[data-theme=dark]"},
        )
        assert output.startswith("[data-theme=dark] {")

    def test_scss(self):
        output = _render("scss/variables", _dictionary(("a", "1px")), options={"showFileHeader": False})
        assert output == "$a: 1px;\n"

    def test_less(self):
        output = _render("less/variables", _dictionary(("a", True)), options={"showFileHeader": False})
        assert output == "@a: true;\n"


class TestIOS:
    def test_colors_h(self):
        output = _render(
            "ios/colors.h",
            _dictionary(("ColorBg", "[UIColor x]"), ("ColorFg", "[UIColor y]")),
            className="DSColor",
            type="DSColorName",
        )
        assert "#import <UIKit/UIKit.h>" in output
        assert "typedef NS_ENUM(NSInteger, DSColorName) {\nColorBg,\nColorFg\n};" in output
        assert "@interface DSColor : NSObject" in output

    def test_colors_m(self):
        output = _render(
            "ios/colors.m",
            _dictionary(("ColorBg", "[UIColor x]")),
            className="DSColor",
            type="DSColorName",
        )
        assert '#import "DSColor.h"' in output
        assert "colorArray = @[\n[UIColor x]\n    ];" in output

    def test_static_files(self):
        dictionary = _dictionary(("SizeSm", 4), ("FontBody", "Inter"))
        header = _render("ios/static.h", dictionary, className="DSSize", type="float")
        impl = _render("ios/static.m", dictionary, className="DSSize", type="float")
        assert "extern const float SizeSm;" in header
        assert "const float SizeSm = 4.00;" in impl
        assert 'const float FontBody = @"Inter";' in impl

    def test_swift_class_and_enum(self):
        dictionary = _dictionary(("colorBg", "UIColor(red: 1)"), ("fontBody", "Inter"), ("sizeSm", 4))
        cls = _render("ios-swift/class.swift", dictionary, className="DS")
        enum = _render("ios-swift/enum.swift", dictionary, className="DS")
        assert "public class DS {" in cls
        assert "    public static let colorBg = UIColor(red: 1)" in cls
        assert '    public static let fontBody = "Inter"' in cls
        assert "public enum DS {" in enum
        assert "    public static let sizeSm = 4" in enum

    def test_header_names_destination(self):
        output = _render("ios-swift/class.swift", _dictionary(), className="DS")
        assert output.startswith("//\n// out\n//\n// Do not edit directly\n")

    def test_class_name_required(self):
        with pytest.raises(ConfigError, match="className"):
            _render("ios/colors.h", _dictionary(("a", 1)))
