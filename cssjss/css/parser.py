""" CSS Parser
https://www.w3.org/TR/css-syntax-3/#parsing

Tokens are consumed into component values (blocks and functions) and rules,
which are then shaped into the tree from `cssjss.css.rules`. Values and
selectors are cut straight out of the source text so nothing is re-serialized.
"""

from __future__ import annotations
import logging
import re
from typing import Iterator
from cssjss.css.lexer import Lexer, ParseError
from cssjss.css.rules import *
from cssjss.css.tokens import *

logger = logging.getLogger(__name__)

class FunctionBlock:
    name: str
    value: list[Component]
    def __init__(self, function: Function) -> None:
        self.name = function.raw
        self.value = []
        self.start = function.start
        self.end = function.end

    def __repr__(self) -> str:
        return f"FunctionBlock({self.name!r}, {self.value})"

class Block:
    token: LCurlyBracket | LSquareBracket | LParantheses
    value: list[Component]
    def __init__(self, token: LCurlyBracket | LSquareBracket | LParantheses) -> None:
        self.token = token
        self.value = []
        self.start = token.start
        self.end = token.end

    def __repr__(self) -> str:
        return f"Block({self.token.raw!r}, {self.value})"

Component = Token | FunctionBlock | Block

class QualifiedRule:
    prelude: list[Component]
    block: Block | None
    def __init__(self, prelude: list[Component] | None = None, block: Block | None = None) -> None:
        self.prelude = prelude or []
        self.block = block

    def __repr__(self) -> str:
        return f"QualifiedRule(prelude={self.prelude}, block={{...}})"

class AtRule:
    name: str
    prelude: list[Component]
    block: Block | None
    def __init__(self, name: str, prelude: list | None = None, block: Block | None = None) -> None:
        self.name = name
        self.prelude = prelude or []
        self.block = block

    def __repr__(self) -> str:
        block = "None" if self.block is None else "{...}"
        return f"AtRule({self.name!r}, prelude={self.prelude}, block={block})"

Tokens = list[Token] | str | list[Component]

def nested_comments(component: Component) -> Iterator[Comment]:
    """Every comment inside a block or function, in source order."""
    if isinstance(component, (Block, FunctionBlock)):
        for value in component.value:
            if isinstance(value, Comment):
                yield value
            else:
                yield from nested_comments(value)

WHITESPACE = re.compile(r"\s+")

def collapse(text: str) -> str:
    """Trim and squash whitespace runs into single spaces."""
    return WHITESPACE.sub(" ", text).strip()

class Parse:
    @staticmethod
    def parse_stylesheet(source: str, strict: bool = False) -> Stylesheet:
        """Parse CSS text into a `Stylesheet`.

        Malformed input is collected into `Stylesheet.errors`. With `strict`
        the first of those errors is raised instead.
        """
        parser = Parser(source)
        stylesheet = parser.consume_stylesheet()
        for error in stylesheet.errors:
            logger.debug("CSS parse error: %s", error)
        if strict and len(stylesheet.errors) > 0:
            raise stylesheet.errors[0]
        return stylesheet

    @staticmethod
    def parse_rule_list(source: Tokens) -> list[Node]:
        parser = Parser(source)
        return parser.build_all(parser.consume_rule_list(True))

    @staticmethod
    def parse_decl_list(source: Tokens) -> Declarations:
        return Parser(source).consume_decl_list()

    @staticmethod
    def parse_comma_separated(source: Tokens) -> list[str]:
        parser = Parser(source)
        return [
            text
            for group in parser.consume_comma_separated()
            if (text := collapse(parser.source(group))) != ""
        ]


class Parser:
    # A string is tokenized first. Lists of tokens or component values are used
    # as they are, in which case `text` must be the source they were lexed from.
    def __init__(self, tokens: Tokens, text: str = '', errors: list[ParseError] | None = None) -> None:
        if isinstance(tokens, str):
            lexer = Lexer(tokens)
            self.tokens: list[Token] | list[Component] = lexer.process()
            self.text = lexer.text
            self.errors: list[ParseError] = lexer.errors if errors is None else errors + lexer.errors
            self._lexer_ = lexer
        elif isinstance(tokens, list):
            self.tokens = tokens
            self.text = text
            self.errors = [] if errors is None else errors
            self._lexer_ = Lexer(text)
        else:
            raise TypeError(
                "Unexpected input to parse. Expected string, list of tokens, or list of component values."
            )
        self.index = 0

    def sub(self, components: list[Component]) -> Parser:
        """A parser over nested component values sharing this parser's text and errors."""
        return Parser(components, self.text, self.errors)

    def peek(self, amount: int = 1) -> Token | Component:
        index = self.index + amount - 1
        if index < len(self.tokens):
            return self.tokens[index]
        return EOF()

    def reconsume(self):
        self.index -= 1

    def next(self) -> Token | Component:
        if self.index < len(self.tokens):
            self.index += 1
            return self.tokens[self.index - 1]
        return EOF()

    def error(self, message: str, at: Token | Component | None = None):
        index = at.start if at is not None and not isinstance(at, EOF) else len(self.text)
        self.errors.append(ParseError(message, *self._lexer_.location(index)))

    def source(self, components: list[Component]) -> str:
        """The original text of a run of component values, comments removed.

        Comments nested in blocks and functions are cut out of the slice too.
        """
        parts = []
        for component in components:
            if isinstance(component, Comment):
                continue
            start = component.start
            for comment in nested_comments(component):
                parts.append(self.text[start:comment.start])
                start = comment.end
            parts.append(self.text[start:component.end])
        return "".join(parts)

    def skip_whitespace(self):
        while isinstance(self.peek(), Whitespace):
            self.next()

    def consume_block(self, opening: LCurlyBracket | LSquareBracket | LParantheses) -> Block:
        block = Block(opening)
        while True:
            next = self.next()
            if isinstance(next, opening.alt):
                block.end = next.end
                return block
            elif isinstance(next, EOF):
                self.error("Block was not closed", opening)
                if len(block.value) > 0:
                    block.end = block.value[-1].end
                return block
            else:
                self.reconsume()
                block.value.append(self.consume_component_value())

    def consume_function(self, function: Function) -> FunctionBlock:
        fblock = FunctionBlock(function)
        while True:
            next = self.next()
            if isinstance(next, RParantheses):
                fblock.end = next.end
                return fblock
            elif isinstance(next, EOF):
                self.error("Function was not closed", function)
                if len(fblock.value) > 0:
                    fblock.end = fblock.value[-1].end
                return fblock
            else:
                self.reconsume()
                fblock.value.append(self.consume_component_value())

    def consume_component_value(self) -> Component:
        next = self.next()
        if isinstance(next, (LCurlyBracket, LSquareBracket, LParantheses)):
            return self.consume_block(next)
        elif isinstance(next, Function):
            return self.consume_function(next)
        return next

    def consume_at_rule(self) -> AtRule:
        keyword = self.next()
        at_rule = AtRule(keyword.raw)

        while True:
            next = self.next()
            if isinstance(next, Semicolon):
                return at_rule
            elif isinstance(next, EOF):
                self.error("At rule missing semi-colon", keyword)
                return at_rule
            elif isinstance(next, LCurlyBracket):
                at_rule.block = self.consume_block(next)
                return at_rule
            elif isinstance(next, Block) and isinstance(next.token, LCurlyBracket):
                at_rule.block = next
                return at_rule
            else:
                self.reconsume()
                at_rule.prelude.append(self.consume_component_value())

    def consume_qualified_rule(self) -> QualifiedRule | None:
        qrule = QualifiedRule()
        while True:
            next = self.next()
            if isinstance(next, EOF):
                self.error("Qualified rule is not closed", qrule.prelude[0] if qrule.prelude else None)
                return None
            elif isinstance(next, LCurlyBracket):
                qrule.block = self.consume_block(next)
                return qrule
            elif isinstance(next, Block) and isinstance(next.token, LCurlyBracket):
                qrule.block = next
                return qrule
            else:
                self.reconsume()
                qrule.prelude.append(self.consume_component_value())

    def consume_rule_list(self, top_level: bool = False) -> list[QualifiedRule | AtRule | CommentNode]:
        rules = []
        while True:
            next = self.next()
            if isinstance(next, Whitespace):
                continue
            elif isinstance(next, EOF):
                return rules
            elif isinstance(next, Comment):
                rules.append(CommentNode(next.text))
            elif isinstance(next, (CDO, CDC)):
                if top_level: continue
                self.reconsume()
                if (rule := self.consume_qualified_rule()) is not None:
                    rules.append(rule)
            elif isinstance(next, AtKeyword):
                self.reconsume()
                rules.append(self.consume_at_rule())
            else:
                self.reconsume()
                if (rule := self.consume_qualified_rule()) is not None:
                    rules.append(rule)

    def consume_comma_separated(self) -> list[list[Component]]:
        result = []
        current = []
        while True:
            next = self.consume_component_value()
            if isinstance(next, EOF):
                if len(current) > 0:
                    result.append(current)
                return result
            elif isinstance(next, Comma):
                if len(current) > 0:
                    result.append(current)
                    current = []
            else:
                current.append(next)

    def consume_declaration(self) -> Declaration | None:
        name = self.next()
        self.skip_whitespace()

        if not isinstance(self.peek(), Colon):
            self.error("Expected a colon", name)
            return None
        self.next()

        value = []
        while not isinstance(self.peek(), EOF):
            value.append(self.consume_component_value())
        while len(value) > 0 and isinstance(value[-1], (Whitespace, Comment)):
            value.pop()

        text = self.source(value).strip()
        if text == "":
            self.error("Declaration is missing a value", name)
            return None

        significant = [v for v in value if not isinstance(v, (Whitespace, Comment))]
        important = (
            len(significant) >= 2
            and isinstance(significant[-2], Delim) and significant[-2].raw == "!"
            and isinstance(significant[-1], Ident) and significant[-1].raw.lower() == "important"
        )
        return Declaration(self.text[name.start:name.end], text, important)

    def consume_decl_list(self) -> Declarations:
        decls = []
        while True:
            next = self.next()
            if isinstance(next, (Whitespace, Semicolon)):
                continue
            elif isinstance(next, EOF):
                return decls
            elif isinstance(next, Comment):
                decls.append(CommentNode(next.text))
            elif isinstance(next, Ident):
                temp: list = [next]
                while not isinstance(self.peek(), (Semicolon, EOF)):
                    temp.append(self.consume_component_value())
                if (decl := self.sub(temp).consume_declaration()) is not None:
                    decls.append(decl)
            else:
                self.error("Invalid declaration list", next)
                self.reconsume()
                while not isinstance(self.peek(), (Semicolon, EOF)):
                    self.consume_component_value()

    def consume_stylesheet(self) -> Stylesheet:
        rules = self.build_all(self.consume_rule_list(True))
        return Stylesheet(rules, self.errors)

    def build_all(self, rules: list[QualifiedRule | AtRule | CommentNode]) -> list[Node]:
        return [node for rule in rules if (node := self.build(rule)) is not None]

    def build(self, rule: QualifiedRule | AtRule | CommentNode) -> Node | None:
        """Shape a consumed rule into its stylesheet tree node."""
        if isinstance(rule, CommentNode):
            return rule
        elif isinstance(rule, QualifiedRule):
            return Rule(self.selectors(rule.prelude), self.declarations(rule.block))

        name = rule.name.lower()
        if rule.block is None or (name not in ("media", "font-face") and not name.endswith("keyframes")):
            return AtStatement(name, collapse(self.source(rule.prelude)))
        elif name == "media":
            return MediaRule(
                collapse(self.source(rule.prelude)),
                self.build_all(self.sub(rule.block.value).consume_rule_list()),
            )
        elif name == "font-face":
            return FontFaceRule(self.declarations(rule.block))

        keyframes = []
        for frame in self.sub(rule.block.value).consume_rule_list():
            if isinstance(frame, CommentNode):
                keyframes.append(frame)
            elif isinstance(frame, QualifiedRule):
                keyframes.append(Keyframe(self.selectors(frame.prelude), self.declarations(frame.block)))
            else:
                self.error(f"Unexpected @{frame.name} inside @{rule.name}")
        return KeyframesRule(
            collapse(self.source(rule.prelude)),
            keyframes,
            vendor=name[:-len("keyframes")],
        )

    def selectors(self, prelude: list[Component]) -> list[str]:
        parser = self.sub(prelude)
        return [
            text
            for group in parser.consume_comma_separated()
            if (text := collapse(self.source(group))) != ""
        ]

    def declarations(self, block: Block | None) -> Declarations:
        if block is None:
            return []
        return self.sub(block.value).consume_decl_list()

parse = Parse.parse_stylesheet
