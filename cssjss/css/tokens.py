from __future__ import annotations
from typing import Literal

__all__ = [
    "Token",
    "Ident",
    "Function",
    "AtKeyword",
    "Hash",
    "String",
    "BadString",
    "Url",
    "BadUrl",

    "Delim",
    "Colon",
    "Semicolon",
    "Comma",

    "LCurlyBracket",
    "LSquareBracket",
    "LParantheses",
    "RCurlyBracket",
    "RSquareBracket",
    "RParantheses",

    "Number",
    "Percentage",
    "Dimension",

    "Comment",
    "Whitespace",
    "CDC",
    "CDO",
    "EOF"
]

class Token:
    """A lexed token. `start` and `end` are offsets into the lexer's normalized text."""
    raw: str
    start: int
    end: int
    def __init__(self, raw: str = ''):
        self.raw = raw
        self.start = 0
        self.end = 0

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self.raw!r})'

class Ident(Token): pass
class Function(Token): pass
class AtKeyword(Token): pass
class Hash(Token):
    def __init__(self, raw: str = '', *, type: Literal['id', 'unrestricted'] = 'unrestricted'):
        self.type = type
        super().__init__(raw)
    def __repr__(self) -> str:
        return f'Hash({"id, " if self.type == "id" else ""}{self.raw!r})'
class String(Token): pass
class BadString(Token): pass
class Url(Token): pass
class BadUrl(Token): pass

class Delim(Token):
    def __init__(self, raw: str):
        if len(raw) > 1:
            raise ValueError("Delimiters may only be one codepoint long")
        super().__init__(raw)

class Colon(Delim): pass
class Semicolon(Delim): pass
class Comma(Delim): pass

class LCurlyBracket(Token):
    @property
    def alt(self) -> type:
        return RCurlyBracket
class RCurlyBracket(Token): pass
class LSquareBracket(Token):
    @property
    def alt(self) -> type:
        return RSquareBracket
class RSquareBracket(Token): pass
class LParantheses(Token):
    @property
    def alt(self) -> type:
        return RParantheses
class RParantheses(Token): pass

class Number(Token):
    value: int | float
    type: Literal['integer', 'number']
    def __init__(self, value: int | float, type: Literal['integer', 'number'], raw: str):
        self.value = value
        self.type = type
        super().__init__(raw)

    def __repr__(self) -> str:
        return f"Number({self.raw!r})"

class Percentage(Number):
    def __repr__(self) -> str:
        return f"Percentage({self.raw!r}%)"

class Dimension(Number):
    unit: str
    def __init__(self, value: int | float, type: Literal['integer', 'number'], raw: str, unit: str = ''):
        self.unit = unit
        super().__init__(value, type, raw)

    def __repr__(self) -> str:
        return f"Dimension({self.raw!r}{self.unit})"

class Comment(Token):
    @property
    def text(self) -> str:
        return self.raw[2:-2] if self.raw.endswith("*/") else self.raw[2:]

class Whitespace(Token): pass
class CDO(Token): pass
class CDC(Token): pass
class EOF(Token): pass
