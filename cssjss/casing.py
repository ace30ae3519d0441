"""Property name casing between CSS and JSS.

css -> jss    `background-color` -> `backgroundColor`
              `-webkit-transform` -> `WebkitTransform`
jss -> css    `backgroundColor`   -> `background-color`
              `WebkitTransform`   -> `webkit-transform` (the leading dash is not restored)
"""

from __future__ import annotations
import re

__all__ = ["words", "camel_case", "kebab_case", "format_prop"]

# An acronym ahead of a capitalized word, a capitalized or lowercase word,
# a run of capitals, or a run of digits.
WORDS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|[0-9]+")
UPPER = re.compile(r"(?<!^)(?=[A-Z])")

def words(text: str) -> list[str]:
    """Split text into words on separators and case or digit boundaries.

    Examples:
        >>> words("-webkit-transform")
        ['webkit', 'transform']
        >>> words("XMLHttpRequest")
        ['XML', 'Http', 'Request']
    """
    return WORDS.findall(text)

def camel_case(text: str) -> str:
    """`background-color` -> `backgroundColor`. Every separator is dropped, the
    first word is lowercased and the rest are capitalized.
    """
    parts = words(text)
    if len(parts) == 0:
        return ""
    return parts[0].lower() + "".join(part.capitalize() for part in parts[1:])

def kebab_case(key: str) -> str:
    """Split before every uppercase letter, join with `-` and lowercase.

    Consecutive capitals each get their own dash, `fontSizeXL` -> `font-size-x-l`.
    """
    return UPPER.sub("-", key).lower()

def format_prop(prop: str, dashes: bool = False) -> str:
    """Name a CSS property the way JSS expects it.

    With `dashes` the property is returned untouched. Otherwise it is camel
    cased and a vendor prefix (`-webkit-`, `-moz-`, ...) gets a capital first
    letter. Custom properties (`--name`) are not vendor prefixed.
    """
    if dashes:
        return prop
    name = camel_case(prop)
    if prop.startswith("-") and not prop.startswith("--"):
        name = name[:1].upper() + name[1:]
    return name
