"""CSS -> JSS

Parses CSS source and rebuilds it as a JSS style object, emitted as the
argument of a Material-UI `makeStyles` hook.

    .foo { width: 10px; display: -webkit-box; display: flex; }

    {
      "foo": {
        "width": 10,
        "display": "flex",
        "fallbacks": [
          {
            "display": "-webkit-box"
          }
        ]
      }
    }

(`width` becomes a number with `unit="px"`.)
"""

from __future__ import annotations
import json
import logging
import re
from typing import Any, TypedDict

from cssjss.casing import format_prop
from cssjss.css import parse
from cssjss.css.rules import *
from cssjss.style import FallbackList, Nested, Number, Scalar, StyleValue, to_native

__all__ = [
    "Params",
    "OptionalParams",
    "DEFAULTS",
    "TEMPLATE",
    "default_params",
    "strip_unit",
    "to_jss",
    "to_object",
    "convert",
]

logger = logging.getLogger(__name__)

class Params(TypedDict):
    code: str
    unit: str | None
    dashes: bool
    strict: bool
    wrap: bool

class OptionalParams(TypedDict, total=False):
    code: str
    unit: str | None
    dashes: bool
    strict: bool
    wrap: bool

DEFAULTS: OptionalParams = {
    "code": "",
    "unit": None,
    "dashes": False,
    "strict": False,
    "wrap": True,
}

TEMPLATE = """
import {{ makeStyles }} from "@material-ui/core/styles";

export const useStyles = makeStyles((theme) =>
({styles}));
"""

def default_params(origin: OptionalParams | dict) -> Params:
    """Fill in the options missing from `origin`. `origin` is left untouched."""
    params = dict(origin)
    for key, value in DEFAULTS.items():
        params[key] = params.get(key, value)
    return params

COMPOUND = re.compile(r"\s|,")
LEADING_NUMBER = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

def strip_unit(value: str, unit: str | None) -> str | int | float:
    """`10px` -> `10` when `unit` is `px`.

    Compound values (anything with whitespace or a comma) and values that do not
    end with the unit or do not start with a number are returned unchanged.
    """
    if not unit or COMPOUND.search(value):
        return value
    if value[-len(unit):] != unit:
        return value
    match = LEADING_NUMBER.match(value)
    if match is None:
        return value
    number = float(match.group(0))
    if number.is_integer():
        return int(number)
    return number

def _value_(value: str, params: Params) -> StyleValue:
    stripped = strip_unit(value, params["unit"])
    if isinstance(stripped, str):
        return Scalar(stripped)
    return Number(stripped)

def _declarations_(decls: Declarations) -> list[Declaration]:
    return [decl for decl in decls if not isinstance(decl, CommentNode)]

def add_rule(rule: Node, rules: Nested, params: Params):
    """Add a plain rule under its selector key, collecting repeated properties as fallbacks."""
    if not isinstance(rule, Rule):
        if not isinstance(rule, CommentNode):
            logger.debug("Skipping nested %s rule", rule.type)
        return
    key = ", ".join(rule.selectors)
    # kick the class dot or id hash
    if key[:1] in (".", "#"):
        key = key[1:]
    style = rules.child(key)
    for decl in _declarations_(rule.declarations):
        prop = format_prop(decl.property, params["dashes"])
        if prop in style:
            fallbacks = style.get("fallbacks")
            if not isinstance(fallbacks, FallbackList):
                fallbacks = style["fallbacks"] = FallbackList()
            fallbacks.push(prop, style[prop])
        value = _value_(decl.value, params)
        if isinstance(value, Scalar):
            value.value = value.value.replace("\\", "\\\\")
        style[prop] = value

def add_media(rule: MediaRule, rules: Nested, params: Params):
    value = rules.child(f"@media {rule.media}")
    for child in rule.rules:
        add_rule(child, value, params)

def add_font_face(rule: FontFaceRule, rules: Nested, params: Params):
    value = rules.child("@font-face")
    for decl in _declarations_(rule.declarations):
        value[format_prop(decl.property, params["dashes"])] = Scalar(decl.value)

def add_keyframes(rule: KeyframesRule, rules: Nested, params: Params):
    value = rules.child(f"@keyframes {rule.name}")
    for keyframe in rule.keyframes:
        if isinstance(keyframe, CommentNode):
            continue
        frame = value.child(", ".join(keyframe.values))
        for decl in _declarations_(keyframe.declarations):
            frame[format_prop(decl.property, params["dashes"])] = _value_(decl.value, params)

def to_jss(stylesheet: Stylesheet, params: OptionalParams | dict | None = None) -> Nested:
    """Walk the stylesheet's rules into a JSS style object.

    Rule kinds without a JSS counterpart (`@import`, `@supports`, ...) and
    comments are dropped.
    """
    params = default_params(params or {})
    jss = Nested()
    for rule in stylesheet.rules:
        if isinstance(rule, Rule):
            add_rule(rule, jss, params)
        elif isinstance(rule, MediaRule):
            add_media(rule, jss, params)
        elif isinstance(rule, FontFaceRule):
            add_font_face(rule, jss, params)
        elif isinstance(rule, KeyframesRule):
            add_keyframes(rule, jss, params)
        elif not isinstance(rule, CommentNode):
            logger.debug("Skipping unsupported %s rule", rule.type)
    return jss

def to_object(params: OptionalParams | dict) -> dict[str, Any]:
    """Convert `params["code"]` into plain python data.

    Malformed CSS raises `ParseError` only when `params["strict"]` is set.
    """
    params = default_params(params)
    return to_native(to_jss(parse(params["code"], strict=params["strict"]), params))

def convert(params: OptionalParams | dict) -> str:
    """Convert css to jss.

    Args:
        params: `code` is the CSS source. `unit` is stripped from single
            values to leave numbers, `dashes` keeps property names as written,
            `strict` raises on malformed CSS and `wrap=False` returns the bare
            object literal instead of the `makeStyles` module.

    Returns:
        The generated source, or an empty string when the CSS has no rules.

    Raises:
        ParseError: Malformed CSS with `strict` set. Without it the problems
            are logged as a warning and the broken declarations or rules are
            left out of the result.
    """
    params = default_params(params)
    stylesheet = parse(params["code"], strict=params["strict"])
    if len(stylesheet.errors) > 0:
        logger.warning("%d problem(s) found while parsing css, first: %s", len(stylesheet.errors), stylesheet.errors[0])
    if len(stylesheet.rules) == 0:
        return ""
    styles = json.dumps(to_native(to_jss(stylesheet, params)), indent=2, ensure_ascii=False)
    if not params["wrap"]:
        return styles
    return TEMPLATE.format(styles=styles)
