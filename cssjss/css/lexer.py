""" CSS LEXING
https://www.w3.org/TR/css-syntax-3/#tokenizing-and-parsing

Tokens keep the offsets of the text they were read from so that the parser
can hand back declaration values and selectors exactly as they were written.
"""

from __future__ import annotations
import re
from typing import Literal
from cssjss.css.tokens import *
REPLACEMENT_CHAR = '\uFFFD'
MAX_CODE_POINT = 0x10FFFF

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current.isalpha()

    @staticmethod
    def non_ascii(current: str | None) -> bool:
        return current is not None and ord(current) >= ord('\u0080')

    @staticmethod
    def ident_start(current: str | None) -> bool:
        return current is not None and (Check.letter(current) or Check.non_ascii(current) or current == "_")

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in '0123456789'

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current in '\t\n '

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current in '0123456789abcdefABCDEF'

    @staticmethod
    def ident(current: str | None) -> bool:
        return current is not None and (Check.ident_start(current) or Check.digit(current) or current == "-")

    @staticmethod
    def escape(current: str | None, next: str | None) -> bool:
        return current == "\\" and next is not None and next != "\n"

    @staticmethod
    def non_printable(current: str | None) -> bool:
        if current is None:
            return False
        o = ord(current)
        return o <= 0x08 or o == 0x0B or 0x0E <= o <= 0x1F or o == 0x7F

    @staticmethod
    def starts_with_ident(first: str | None, second: str | None, third: str | None) -> bool:
        if first == "-":
            return Check.ident_start(second) or second == "-" or Check.escape(second, third)
        elif Check.ident_start(first):
            return True
        elif first == "\\":
            return Check.escape(first, second)
        return False

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if first is None:
            return False
        if first in "+-":
            if Check.digit(second):
                return True
            return second == "." and Check.digit(third)
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)


class ParseError(Exception):
    """A problem found while reading CSS, with the `line:column` it was found at."""

    def __init__(self, message: str, line: int = 0, column: int = 0) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} at {line}:{column}" if line else message)


RETURNS = re.compile("\r\n|\f|\r")
class Lexer:
    def __init__(self, source: str) -> None:
        self.text: str = RETURNS.sub("\n", source).replace('\u0000', REPLACEMENT_CHAR)
        self.index = 0
        self.errors: list[ParseError] = []

    @staticmethod
    def get_css(path: str) -> str:
        """Read a stylesheet from disk, decoding it with the charset named by a
        leading `@charset "...";` rule (utf-8 otherwise). The `@charset` rule itself
        is dropped from the returned text.
        """
        with open(path, "rb") as f:
            if (chrst := f.read(8)) == b'@charset':
                chrst = b''
                while (byte := f.read(1)) not in (b";", b""):
                    chrst += byte
                chrst = chrst.decode("ascii").strip().strip('"\'').lower()
                return f.read().decode(chrst).strip()
            return (chrst + f.read()).decode("utf-8-sig").strip()

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        token = self.consume()
        if isinstance(token, EOF):
            raise StopIteration
        return token

    def process(self) -> list[Token]:
        """Tokenize the entire source at once."""
        return [token for token in self]

    def peek(self, amount: int = 1) -> str | None:
        """The code point `amount` positions ahead without consuming it."""
        index = self.index + amount - 1
        if index < len(self.text):
            return self.text[index]
        return None

    def next(self) -> str | None:
        if self.index < len(self.text):
            self.index += 1
            return self.text[self.index - 1]
        return None

    def reconsume(self):
        self.index -= 1

    def location(self, index: int) -> tuple[int, int]:
        """Line and column (both 1 based) of an offset in the normalized text."""
        line = self.text.count("\n", 0, index) + 1
        return line, index - (self.text.rfind("\n", 0, index) + 1) + 1

    def error(self, message: str, index: int | None = None):
        self.errors.append(ParseError(message, *self.location(self.index if index is None else index)))

    def _consume_comment_(self) -> Comment:
        start = self.index - 1
        self.next()
        while True:
            current = self.next()
            if current is None:
                self.error("Comment not closed", start)
                break
            if current == "*" and self.peek() == "/":
                self.next()
                break
        return Comment(self.text[start:self.index])

    def _consume_whitespace_(self, current: str) -> Whitespace:
        whitespace = Whitespace(current)
        while Check.whitespace(self.peek()):
            whitespace.raw += self.next()
        return whitespace

    def _consume_string_(self, ending: str) -> String | BadString:
        string = String()
        while True:
            current = self.next()
            if current is None:
                self.error("String was not closed")
                return string
            elif current == ending:
                return string
            elif current == "\n":
                self.error("String literal not closed")
                self.reconsume()
                return BadString(string.raw)
            elif current == "\\":
                if self.peek() is None:
                    continue
                elif self.peek() == "\n":
                    self.next()
                else:
                    string.raw += self._consume_escape_()
            else:
                string.raw += current

    def _consume_escape_(self) -> str:
        """Consume an escaped code point, the backslash having already been consumed."""
        current = self.next()
        if current is None:
            return REPLACEMENT_CHAR
        if Check.hex(current):
            digits = current
            while Check.hex(self.peek()) and len(digits) < 6:
                digits += self.next()
            if Check.whitespace(self.peek()):
                self.next()
            value = int(digits, 16)
            if value == 0 or 0xD800 <= value <= 0xDFFF or value > MAX_CODE_POINT:
                return REPLACEMENT_CHAR
            return chr(value)
        return current

    def _consume_ident_(self) -> str:
        result = ''
        while (current := self.next()) is not None:
            if Check.ident(current):
                result += current
            elif Check.escape(current, self.peek()):
                result += self._consume_escape_()
            else:
                self.reconsume()
                break
        return result

    def _consume_hash_(self, current: str) -> Hash | Delim:
        if Check.ident(self.peek()) or Check.escape(self.peek(), self.peek(2)):
            hasht = Hash()
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                hasht.type = "id"
            hasht.raw = self._consume_ident_()
            return hasht
        return Delim(current)

    def _consume_number_(self) -> tuple[int | float, Literal['integer', 'number'], str]:
        """Consume a number from the code points. Returning a numeric value, a type
        of either integer or number and the text it was read from.
        """
        _type: Literal['integer', 'number'] = 'integer'
        raw = ''
        if (peek := self.peek()) is not None and peek in "-+":
            raw += self.next()

        while Check.digit(self.peek()):
            raw += self.next()

        if self.peek() == "." and Check.digit(self.peek(2)):
            raw += self.next() + self.next()
            _type = "number"
            while Check.digit(self.peek()):
                raw += self.next()

        if (peek := self.peek()) is not None and peek in "Ee" and (
            Check.digit(self.peek(2))
            or (self.peek(2) in ("-", "+") and Check.digit(self.peek(3)))
        ):
            _type = "number"
            raw += self.next() + self.next()
            while Check.digit(self.peek()):
                raw += self.next()

        if _type == "integer":
            return int(raw), _type, raw
        return float(raw), _type, raw

    def _consume_numeric_(self) -> Number | Percentage | Dimension:
        """Consume code points a produce a Number, Percentage, or Dimension token."""
        number = self._consume_number_()
        if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
            return Dimension(*number, unit=self._consume_ident_())
        elif self.peek() == "%":
            self.next()
            return Percentage(*number)
        return Number(*number)

    def _consume_remnant_bad_url_(self):
        while (current := self.next()) is not None:
            if current == ")":
                return
            elif Check.escape(current, self.peek()):
                self._consume_escape_()

    def _consume_url_(self) -> Url | BadUrl:
        url = Url()
        while Check.whitespace(self.peek()):
            self.next()

        while True:
            current = self.next()
            if current is None:
                self.error("Url not closed")
                return url
            elif current == ")":
                return url
            elif Check.whitespace(current):
                while Check.whitespace(self.peek()):
                    self.next()
                if self.peek() is None:
                    self.error("Url not closed")
                    return url
                elif self.peek() == ")":
                    self.next()
                    return url
                self._consume_remnant_bad_url_()
                return BadUrl()
            elif current in '\'"(' or Check.non_printable(current):
                self.error("Unexpected character in url")
                self._consume_remnant_bad_url_()
                return BadUrl()
            elif current == "\\":
                if Check.escape(current, self.peek()):
                    url.raw += self._consume_escape_()
                else:
                    self.error("Invalid backslash in url")
                    self._consume_remnant_bad_url_()
                    return BadUrl()
            else:
                url.raw += current

    def _consume_ident_like_(self) -> Ident | Function | Url | BadUrl:
        ident = self._consume_ident_()
        if ident.lower() == "url" and self.peek() == "(":
            self.next()
            while Check.whitespace(self.peek()) and Check.whitespace(self.peek(2)):
                self.next()
            if (
                (self.peek() or '') in ('"', "'")
                or (Check.whitespace(self.peek()) and (self.peek(2) or '') in ('"', "'"))
            ):
                return Function(ident)
            return self._consume_url_()
        elif self.peek() == "(":
            self.next()
            return Function(ident)
        return Ident(ident)

    def consume(self) -> Token:
        """Consume code points and return the next token."""
        start = self.index
        token = self._consume_token_()
        token.start = start
        token.end = self.index
        return token

    def _consume_token_(self) -> Token:
        current = self.next()
        if current is None:
            return EOF()
        elif current == "/" and self.peek() == "*":
            return self._consume_comment_()
        elif current in '"\'':
            return self._consume_string_(current)
        elif current == '#':
            return self._consume_hash_(current)
        elif current == "+":
            if Check.starts_with_number(current, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            return Delim(current)
        elif current == "-":
            if Check.starts_with_number(current, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            elif self.peek() == "-" and self.peek(2) == ">":
                self.next()
                self.next()
                return CDC('-->')
            elif Check.starts_with_ident(current, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_ident_like_()
            return Delim(current)
        elif current == ".":
            if Check.starts_with_number(current, self.peek(), self.peek(2)):
                self.reconsume()
                return self._consume_numeric_()
            return Delim(current)
        elif current == "<":
            if (self.peek() or '') + (self.peek(2) or '') + (self.peek(3) or '') == "!--":
                self.next()
                self.next()
                self.next()
                return CDO('<!--')
            return Delim(current)
        elif current == "@":
            if Check.starts_with_ident(self.peek(), self.peek(2), self.peek(3)):
                return AtKeyword(self._consume_ident_())
            return Delim(current)
        elif current == "\\":
            if Check.escape(current, self.peek()):
                self.reconsume()
                return self._consume_ident_like_()
            self.error("Invalid backslash")
            return Delim(current)
        elif Check.digit(current):
            self.reconsume()
            return self._consume_numeric_()
        elif Check.ident_start(current):
            self.reconsume()
            return self._consume_ident_like_()
        elif Check.whitespace(current):
            return self._consume_whitespace_(current)
        elif current == "(":
            return LParantheses(current)
        elif current == ")":
            return RParantheses(current)
        elif current == "[":
            return LSquareBracket(current)
        elif current == "]":
            return RSquareBracket(current)
        elif current == "{":
            return LCurlyBracket(current)
        elif current == "}":
            return RCurlyBracket(current)
        elif current == ",":
            return Comma(current)
        elif current == ":":
            return Colon(current)
        elif current == ";":
            return Semicolon(current)
        return Delim(current)
