# lexer.py
from __future__ import annotations

from typing import Iterator, List

from ..errors import UnterminatedComment, UnterminatedString
from .tokens import KEYWORDS, PUNCTUATION, Token, TokenKind


class Lexer:
    """
    Turns the text of one .build file into positioned tokens.

    All state lives on the instance, so one Lexer per file is safe to run
    from any number of worker threads at once.

    Usage:
        tokens = Lexer(source).tokenize()
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Return the next token; END_OF_FILE once input is exhausted (repeatedly)."""
        self._skip_whitespace_and_comments()

        if self.pos >= len(self.source):
            return Token(TokenKind.END_OF_FILE, "", self.line, self.column)

        start_line, start_column = self.line, self.column
        ch = self.source[self.pos]

        if ch.isalpha() or ch == "_":
            return self._read_identifier(start_line, start_column)
        if ch == '"':
            return self._read_string(start_line, start_column)
        return self._read_symbol(start_line, start_column)

    def tokenize(self) -> List[Token]:
        """Lex the whole input. The result always ends with exactly one END_OF_FILE."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.kind is TokenKind.END_OF_FILE:
                return

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self.pos + offset
        return self.source[idx] if idx < len(self.source) else ""

    def _bump(self) -> str:
        ch = self.source[self.pos]
        self.pos += 1
        if ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def _skip_whitespace_and_comments(self) -> None:
        while self.pos < len(self.source):
            ch = self.source[self.pos]

            if ch.isspace():
                self._bump()
                continue

            if ch == "/":
                nxt = self._peek(1)
                if nxt == "/":
                    self._skip_line_comment()
                    continue
                if nxt == "*":
                    self._skip_block_comment()
                    continue

            break

    def _skip_line_comment(self) -> None:
        # stops on the newline; the whitespace pass consumes it
        while self.pos < len(self.source) and self.source[self.pos] != "\n":
            self._bump()

    def _skip_block_comment(self) -> None:
        self._bump()
        self._bump()

        while self.pos + 1 < len(self.source):
            if self.source[self.pos] == "*" and self.source[self.pos + 1] == "/":
                self._bump()
                self._bump()
                return
            self._bump()

        raise UnterminatedComment(line=self.line, column=self.column)

    def _read_identifier(self, line: int, column: int) -> Token:
        start = self.pos
        while self.pos < len(self.source):
            ch = self.source[self.pos]
            if not (ch.isalnum() or ch == "_"):
                break
            self._bump()

        text = self.source[start:self.pos]
        return Token(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, line, column)

    def _read_string(self, line: int, column: int) -> Token:
        self._bump()  # opening quote
        start = self.pos

        while self.pos < len(self.source) and self.source[self.pos] != '"':
            if self.source[self.pos] == "\n":
                raise UnterminatedString(line=line, column=column)
            self._bump()

        if self.pos >= len(self.source):
            raise UnterminatedString(line=line, column=column)

        text = self.source[start:self.pos]
        self._bump()  # closing quote
        return Token(TokenKind.STRING, text, line, column)

    def _read_symbol(self, line: int, column: int) -> Token:
        ch = self._bump()
        return Token(PUNCTUATION.get(ch, TokenKind.INVALID), ch, line, column)


def tokenize(source: str) -> List[Token]:
    """Convenience: lex a whole source string."""
    return Lexer(source).tokenize()
