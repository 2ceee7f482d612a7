# parser.py
from __future__ import annotations

from typing import List, Sequence

from ..errors import ParseError
from .nodes import ArrayNode, IdentifierNode, Leaf, ModuleNode, PropertyNode, StringNode, Value
from .tokens import PROPERTY_KEYWORDS, Token, TokenKind


class Parser:
    """
    Recursive-descent parser for one .build file.

    Grammar:
        module   := 'module' IDENT '{' property* '}'
        property := (keyword | IDENT) '=' value
        value    := STRING | IDENT | array
        array    := '[' (elem (','? elem)*)? ','? ']'
        elem     := STRING | IDENT

    Fails on the first error (ParseError); no recovery, no partial tree.
    """

    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].kind is not TokenKind.END_OF_FILE:
            raise ValueError("token sequence must end with END_OF_FILE")
        self.tokens = tokens
        self.pos = 0

    def parse(self) -> ModuleNode:
        return self._parse_module()

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    def _parse_module(self) -> ModuleNode:
        keyword = self._expect(TokenKind.MODULE)
        name = self._expect(TokenKind.IDENTIFIER)
        self._expect(TokenKind.LEFT_BRACE)

        properties: List[PropertyNode] = []
        while not self._check(TokenKind.RIGHT_BRACE) and not self._check(TokenKind.END_OF_FILE):
            properties.append(self._parse_property())

        self._expect(TokenKind.RIGHT_BRACE)
        return ModuleNode(
            line=keyword.line,
            column=keyword.column,
            name=name.text,
            properties=tuple(properties),
        )

    def _parse_property(self) -> PropertyNode:
        tok = self._current()
        if tok.kind not in PROPERTY_KEYWORDS and tok.kind is not TokenKind.IDENTIFIER:
            raise self._error(f"Expected property name, got {tok.kind}", tok)

        self._advance()
        self._expect(TokenKind.EQUALS)
        value = self._parse_value()
        return PropertyNode(line=tok.line, column=tok.column, name=tok.text, value=value)

    def _parse_value(self) -> Value:
        tok = self._current()
        if tok.kind is TokenKind.LEFT_BRACKET:
            return self._parse_array()
        if tok.kind in (TokenKind.STRING, TokenKind.IDENTIFIER):
            return self._leaf(self._advance())
        raise self._error(f"Expected value, got {tok.kind}", tok)

    def _parse_array(self) -> ArrayNode:
        start = self._expect(TokenKind.LEFT_BRACKET)
        elements: List[Leaf] = []

        while not self._check(TokenKind.RIGHT_BRACKET) and not self._check(TokenKind.END_OF_FILE):
            elements.append(self._parse_array_element())
            # separators are optional: consume one if present, keep going otherwise
            if self._check(TokenKind.COMMA):
                self._advance()

        self._expect(TokenKind.RIGHT_BRACKET)
        return ArrayNode(line=start.line, column=start.column, elements=tuple(elements))

    def _parse_array_element(self) -> Leaf:
        tok = self._current()
        if tok.kind in (TokenKind.STRING, TokenKind.IDENTIFIER):
            return self._leaf(self._advance())
        raise self._error(f"Expected array element, got {tok.kind}", tok)

    # ------------------------------------------------------------------
    # Token cursor
    # ------------------------------------------------------------------

    @staticmethod
    def _leaf(tok: Token) -> Leaf:
        if tok.kind is TokenKind.STRING:
            return StringNode(line=tok.line, column=tok.column, value=tok.text)
        return IdentifierNode(line=tok.line, column=tok.column, value=tok.text)

    def _current(self) -> Token:
        # past the end we keep returning END_OF_FILE
        if self.pos >= len(self.tokens):
            return self.tokens[-1]
        return self.tokens[self.pos]

    def _check(self, kind: TokenKind) -> bool:
        return self._current().kind is kind

    def _advance(self) -> Token:
        tok = self._current()
        if self.pos < len(self.tokens):
            self.pos += 1
        return tok

    def _expect(self, kind: TokenKind) -> Token:
        tok = self._current()
        if tok.kind is not kind:
            raise self._error(f"Expected {kind}, got {tok.kind}", tok)
        return self._advance()

    @staticmethod
    def _error(message: str, tok: Token) -> ParseError:
        return ParseError(message=message, line=tok.line, column=tok.column)


def parse_tokens(tokens: Sequence[Token]) -> ModuleNode:
    return Parser(tokens).parse()
