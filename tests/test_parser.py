"""
Tests for cssjss.css.parser: shaping CSS text into the stylesheet tree.
"""

from __future__ import annotations

import pytest

from cssjss.css import Parse, ParseError, parse
from cssjss.css.rules import *


def decls(rule) -> list[tuple[str, str]]:
    return [(d.property, d.value) for d in rule.declarations if isinstance(d, Declaration)]


class TestRules:
    """Plain rules keep their selectors and declarations in order."""

    def test_selectors_split_on_commas(self) -> None:
        (rule,) = parse(".a, .b > p,\n  #c { color: red; }").rules
        assert isinstance(rule, Rule)
        assert rule.selectors == [".a", ".b > p", "#c"]

    def test_commas_inside_functions_do_not_split(self) -> None:
        (rule,) = parse(":is(.a, .b) span { color: red }").rules
        assert rule.selectors == [":is(.a, .b) span"]

    def test_declarations_in_order(self) -> None:
        (rule,) = parse(".a { color: red; margin: 0  auto; width: 10px }").rules
        assert decls(rule) == [("color", "red"), ("margin", "0  auto"), ("width", "10px")]

    def test_value_kept_verbatim(self) -> None:
        """Values are cut from the source, quotes and escapes included."""
        (rule,) = parse('.i:before { content: "\\f101"; font-family: "Foo Bar", sans-serif }').rules
        assert decls(rule) == [
            ("content", '"\\f101"'),
            ("font-family", '"Foo Bar", sans-serif'),
        ]

    def test_important(self) -> None:
        (rule,) = parse(".a { color: red !important }").rules
        (decl,) = rule.declarations
        assert decl.important
        assert decl.value == "red !important"

    def test_vendor_property_name(self) -> None:
        (rule,) = parse(".a { -webkit-transform: none }").rules
        assert decls(rule) == [("-webkit-transform", "none")]


class TestComments:
    """Comments become nodes at rule and declaration level and are cut out of values."""

    def test_comment_nodes(self) -> None:
        sheet = parse("/* top */ .a { /* in */ color: red /* after */; }")
        comment, rule = sheet.rules
        assert isinstance(comment, CommentNode)
        assert comment.text == " top "
        assert isinstance(rule.declarations[0], CommentNode)
        assert decls(rule) == [("color", "red")]

    def test_comment_inside_value(self) -> None:
        (rule,) = parse(".a { margin: 0 /* x */ auto }").rules
        assert decls(rule) == [("margin", "0  auto")]

    def test_comment_inside_function_value(self) -> None:
        (rule,) = parse(".a { color: rgb(/*x*/1,2,3); margin: calc(1px + (/* y */2px)) }").rules
        assert decls(rule) == [("color", "rgb(1,2,3)"), ("margin", "calc(1px + (2px))")]

    def test_comment_inside_selector(self) -> None:
        (rule,) = parse(".a:not(/*x*/.b), [data-x/* y */] { color: red }").rules
        assert rule.selectors == [".a:not(.b)", "[data-x]"]

    def test_comment_inside_media_query(self) -> None:
        (media,) = parse("@media screen and (/*x*/max-width: 600px) { .a { color: red } }").rules
        assert media.media == "screen and (max-width: 600px)"


class TestAtRules:
    """@media, @font-face and @keyframes have their own nodes."""

    def test_media(self) -> None:
        (media,) = parse("@media screen and (max-width:  600px) { .a { color: red } .b { color: blue } }").rules
        assert isinstance(media, MediaRule)
        assert media.media == "screen and (max-width: 600px)"
        assert [r.selectors for r in media.rules] == [[".a"], [".b"]]

    def test_font_face(self) -> None:
        (face,) = parse('@font-face { font-family: "Foo"; src: url(foo.woff) }').rules
        assert isinstance(face, FontFaceRule)
        assert decls(face) == [("font-family", '"Foo"'), ("src", "url(foo.woff)")]

    def test_keyframes(self) -> None:
        (frames,) = parse("@keyframes fade { 0%, 50% { opacity: 0 } to { opacity: 1 } }").rules
        assert isinstance(frames, KeyframesRule)
        assert frames.name == "fade"
        assert frames.vendor == ""
        assert [k.values for k in frames.keyframes] == [["0%", "50%"], ["to"]]
        assert decls(frames.keyframes[1]) == [("opacity", "1")]

    def test_vendor_keyframes(self) -> None:
        (frames,) = parse("@-webkit-keyframes spin { from { opacity: 0 } }").rules
        assert isinstance(frames, KeyframesRule)
        assert frames.vendor == "-webkit-"
        assert frames.name == "spin"

    def test_other_at_rules(self) -> None:
        imports, supports = parse('@import url("a.css"); @supports (display: grid) { .a { color: red } }').rules
        assert isinstance(imports, AtStatement)
        assert imports.name == "import"
        assert imports.prelude == 'url("a.css")'
        assert isinstance(supports, AtStatement)
        assert supports.name == "supports"


class TestErrors:
    """Malformed CSS is recorded, or raised with strict."""

    def test_missing_colon_skips_declaration(self) -> None:
        sheet = parse(".a { color red; margin: 0 }")
        assert decls(sheet.rules[0]) == [("margin", "0")]
        assert len(sheet.errors) == 1
        assert sheet.errors[0].message == "Expected a colon"

    def test_unclosed_block_still_parsed(self) -> None:
        sheet = parse(".a { color: red")
        assert decls(sheet.rules[0]) == [("color", "red")]
        assert len(sheet.errors) > 0

    def test_strict_raises(self) -> None:
        with pytest.raises(ParseError, match="Expected a colon at 1:6"):
            parse(".a { color red }", strict=True)

    def test_empty(self) -> None:
        sheet = parse("  \n ")
        assert sheet.rules == []
        assert sheet.errors == []


class TestParseHelpers:
    """Entry points on Parse."""

    def test_parse_decl_list(self) -> None:
        result = Parse.parse_decl_list("color: red; width: 10px")
        assert [(d.property, d.value) for d in result] == [("color", "red"), ("width", "10px")]

    def test_parse_comma_separated(self) -> None:
        assert Parse.parse_comma_separated("a, b ,  c d") == ["a", "b", "c d"]

    def test_parse_rule_list(self) -> None:
        rules = Parse.parse_rule_list("/* c */ .a { color: red } @media print { .b { color: blue } }")
        assert [type(rule) for rule in rules] == [CommentNode, Rule, MediaRule]
