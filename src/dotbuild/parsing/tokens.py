# tokens.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Token kinds of the .build language. Values are the display names used in errors."""

    # reserved keywords
    MODULE = "Module"
    TYPE = "Type"
    SOURCES = "Sources"
    PUBLIC_INCLUDES = "PublicIncludes"
    PRIVATE_INCLUDES = "PrivateIncludes"
    DEFINES = "Defines"
    DEPS = "Deps"

    IDENTIFIER = "Identifier"
    STRING = "String"

    # punctuation
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    EQUALS = "Equals"
    COMMA = "Comma"

    END_OF_FILE = "EndOfFile"
    INVALID = "Invalid"

    def __str__(self) -> str:
        return self.value


# exact, case-sensitive match
KEYWORDS = {
    "module": TokenKind.MODULE,
    "type": TokenKind.TYPE,
    "sources": TokenKind.SOURCES,
    "public_includes": TokenKind.PUBLIC_INCLUDES,
    "private_includes": TokenKind.PRIVATE_INCLUDES,
    "defines": TokenKind.DEFINES,
    "deps": TokenKind.DEPS,
}

PROPERTY_KEYWORDS = frozenset(KEYWORDS.values()) - {TokenKind.MODULE}

PUNCTUATION = {
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    "=": TokenKind.EQUALS,
    ",": TokenKind.COMMA,
}


@dataclass(frozen=True)
class Token:
    """A single lexed token; line and column are 1-based and point at its first character."""
    kind: TokenKind
    text: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"[{self.kind}] '{self.text}' at ({self.line},{self.column})"
