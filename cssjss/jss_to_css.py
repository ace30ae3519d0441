"""JSS -> CSS

Writes a JSS style object back out as CSS text. Keys holding objects become
`.key { ... }` blocks, everything else becomes a declaration. Numbers are
given a `px` suffix.

    {"foo": {"width": 10, "color": "red"}}

    .foo {
      width:10px;
    color:red;
    }

Keys are used verbatim and `fallbacks` lists are not expanded back into
repeated declarations, they are written like any other object.
"""

from __future__ import annotations
import logging
from typing import Any

from cssjss.casing import kebab_case
from cssjss.style import FallbackList, Nested, Number, StyleValue, entries, from_native, is_object

__all__ = ["is_leaf_level", "declaration", "declarations", "rules", "convert"]

logger = logging.getLogger(__name__)

def is_leaf_level(node: StyleValue) -> bool:
    """Whether none of the node's own values is an object.

    A leaf level object is written as flat declarations, anything else is
    written as nested blocks. Values that are not objects count as leaves.
    """
    if not is_object(node):
        return True
    return not any(is_object(value) for _, value in entries(node))

def declaration(key: str, value: StyleValue) -> str:
    """`fontSize`, `Number(12)` -> `font-size:12px;\\n`"""
    if isinstance(value, Number):
        return f"{kebab_case(key)}:{value}px;\n"
    return f"{kebab_case(key)}:{value};\n"

def declarations(node: Nested | FallbackList) -> str:
    return "".join(declaration(key, value) for key, value in entries(node))

def nested(node: Nested | FallbackList) -> str:
    if is_leaf_level(node):
        return declarations(node)
    return rules(node)

def rules(node: Nested | FallbackList) -> str:
    result = ""
    for key, value in entries(node):
        if is_object(value):
            result += f"\n.{key} {{\n  {nested(value)}}}"
        else:
            result += declaration(key, value)
    return result

def convert(json: Any) -> str:
    """Convert a JSS style object into CSS.

    Args:
        json: A mapping as produced by `json.loads`, or a `Nested` style value.
    """
    node = from_native(json)
    if not is_object(node):
        logger.debug("Top level value is not an object, nothing to write")
        return ""
    return rules(node)
