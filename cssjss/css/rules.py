"""The stylesheet tree handed to the converters.

Stylesheet
    Rule            selectors + declarations
    MediaRule       media query + nested rules
    FontFaceRule    declarations
    KeyframesRule   name + keyframes
        Keyframe    values + declarations
    AtStatement     any other at-rule (@import, @charset, @supports, ...)
    CommentNode     may appear anywhere a rule or declaration may
"""

from __future__ import annotations
from typing import Union

__all__ = [
    "Node",
    "CommentNode",
    "Declaration",
    "Declarations",
    "Rule",
    "MediaRule",
    "FontFaceRule",
    "Keyframe",
    "KeyframesRule",
    "AtStatement",
    "Stylesheet",
]

class Node:
    type: str = "node"

class CommentNode(Node):
    type = "comment"
    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"CommentNode({self.text!r})"

class Declaration(Node):
    type = "declaration"
    def __init__(self, property: str, value: str, important: bool = False) -> None:
        self.property = property
        self.value = value
        self.important = important

    def __repr__(self) -> str:
        return f"Declaration({'!, ' if self.important else ''}{self.property!r}, {self.value!r})"

Declarations = list[Union[Declaration, CommentNode]]

class Rule(Node):
    type = "rule"
    def __init__(self, selectors: list[str], declarations: Declarations | None = None) -> None:
        self.selectors = selectors
        self.declarations = declarations or []

    def __repr__(self) -> str:
        return f"Rule({self.selectors!r}, {self.declarations!r})"

class MediaRule(Node):
    type = "media"
    def __init__(self, media: str, rules: list[Node] | None = None) -> None:
        self.media = media
        self.rules = rules or []

    def __repr__(self) -> str:
        return f"MediaRule({self.media!r}, rules=[...{len(self.rules)}])"

class FontFaceRule(Node):
    type = "font-face"
    def __init__(self, declarations: Declarations | None = None) -> None:
        self.declarations = declarations or []

    def __repr__(self) -> str:
        return f"FontFaceRule({self.declarations!r})"

class Keyframe(Node):
    type = "keyframe"
    def __init__(self, values: list[str], declarations: Declarations | None = None) -> None:
        self.values = values
        self.declarations = declarations or []

    def __repr__(self) -> str:
        return f"Keyframe({self.values!r}, {self.declarations!r})"

class KeyframesRule(Node):
    type = "keyframes"
    def __init__(self, name: str, keyframes: list[Keyframe | CommentNode] | None = None, vendor: str = "") -> None:
        self.name = name
        self.vendor = vendor
        self.keyframes = keyframes or []

    def __repr__(self) -> str:
        return f"KeyframesRule({self.vendor}{self.name!r}, keyframes=[...{len(self.keyframes)}])"

class AtStatement(Node):
    type = "at-rule"
    def __init__(self, name: str, prelude: str = "") -> None:
        self.name = name
        self.prelude = prelude

    def __repr__(self) -> str:
        return f"AtStatement({self.name!r}, {self.prelude!r})"

class Stylesheet:
    def __init__(self, rules: list[Node] | None = None, errors: list[Exception] | None = None) -> None:
        self.rules = rules or []
        self.errors = errors or []

    def __repr__(self) -> str:
        sep = "\n  "
        return f"""Stylesheet(
  {sep.join(repr(rule) for rule in self.rules)}
)"""
