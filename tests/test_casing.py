"""
Tests for cssjss.casing: property name conversions.
"""

from __future__ import annotations

import pytest

from cssjss.casing import camel_case, format_prop, kebab_case, words


class TestCamelCase:
    """camel_case drops separators and capitalizes every word after the first."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("color", "color"),
            ("background-color", "backgroundColor"),
            ("border-top-left-radius", "borderTopLeftRadius"),
            ("-webkit-transform", "webkitTransform"),
            ("--main-color", "mainColor"),
            ("font_size", "fontSize"),
            ("Font Size", "fontSize"),
            ("backgroundColor", "backgroundColor"),
            ("XMLHttpRequest", "xmlHttpRequest"),
            ("h1-title", "h1Title"),
            ("", ""),
        ],
    )
    def test_camel_case(self, text: str, expected: str) -> None:
        assert camel_case(text) == expected

    def test_words(self) -> None:
        assert words("-moz-user-select") == ["moz", "user", "select"]
        assert words("XMLHttpRequest") == ["XML", "Http", "Request"]


class TestKebabCase:
    """kebab_case splits before capitals and lowercases."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("color", "color"),
            ("backgroundColor", "background-color"),
            ("borderTopLeftRadius", "border-top-left-radius"),
            ("WebkitTransform", "webkit-transform"),
            ("msFlex", "ms-flex"),
            ("fontSizeXL", "font-size-x-l"),
            ("already-dashed", "already-dashed"),
            ("", ""),
        ],
    )
    def test_kebab_case(self, key: str, expected: str) -> None:
        assert kebab_case(key) == expected


class TestFormatProp:
    """format_prop names CSS properties for JSS."""

    def test_camel_cased(self) -> None:
        assert format_prop("background-color") == "backgroundColor"

    def test_vendor_prefix_capitalized(self) -> None:
        assert format_prop("-webkit-transform") == "WebkitTransform"
        assert format_prop("-moz-user-select") == "MozUserSelect"
        assert format_prop("-ms-flex") == "MsFlex"

    def test_custom_property_not_capitalized(self) -> None:
        assert format_prop("--main-color") == "mainColor"

    def test_dashes_pass_through(self) -> None:
        assert format_prop("-webkit-transform", dashes=True) == "-webkit-transform"
        assert format_prop("background-color", dashes=True) == "background-color"

    def test_vendor_round_trip_is_lossy(self) -> None:
        assert kebab_case(format_prop("-webkit-transform")) == "webkit-transform"
