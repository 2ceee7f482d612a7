from __future__ import annotations

import pytest

from dotbuild.errors import LexError, UnterminatedComment, UnterminatedString
from dotbuild.parsing.lexer import Lexer, tokenize
from dotbuild.parsing.tokens import TokenKind as K


def kinds(source: str) -> list[K]:
    return [t.kind for t in tokenize(source)]


def test_well_formed_module_token_count():
    src = 'module M { type = executable sources = ["a.cpp", "b.cpp"] }'
    assert kinds(src) == [
        K.MODULE, K.IDENTIFIER, K.LEFT_BRACE,
        K.TYPE, K.EQUALS, K.IDENTIFIER,
        K.SOURCES, K.EQUALS, K.LEFT_BRACKET, K.STRING, K.COMMA, K.STRING, K.RIGHT_BRACKET,
        K.RIGHT_BRACE,
        K.END_OF_FILE,
    ]


def test_all_keywords_and_punctuation():
    src = "module type sources public_includes private_includes defines deps { } [ ] = ,"
    assert kinds(src) == [
        K.MODULE, K.TYPE, K.SOURCES, K.PUBLIC_INCLUDES, K.PRIVATE_INCLUDES, K.DEFINES, K.DEPS,
        K.LEFT_BRACE, K.RIGHT_BRACE, K.LEFT_BRACKET, K.RIGHT_BRACKET, K.EQUALS, K.COMMA,
        K.END_OF_FILE,
    ]


def test_keywords_are_case_sensitive():
    toks = tokenize("Module DEPS deps_extra _private x1")
    assert [t.kind for t in toks[:-1]] == [K.IDENTIFIER] * 5
    assert [t.text for t in toks[:-1]] == ["Module", "DEPS", "deps_extra", "_private", "x1"]


def test_positions_across_lines():
    toks = tokenize("module M {\n  deps = [A]\n}")
    pos = [(t.kind, t.line, t.column) for t in toks]
    assert pos == [
        (K.MODULE, 1, 1),
        (K.IDENTIFIER, 1, 8),
        (K.LEFT_BRACE, 1, 10),
        (K.DEPS, 2, 3),
        (K.EQUALS, 2, 8),
        (K.LEFT_BRACKET, 2, 10),
        (K.IDENTIFIER, 2, 11),
        (K.RIGHT_BRACKET, 2, 12),
        (K.RIGHT_BRACE, 3, 1),
        (K.END_OF_FILE, 3, 2),
    ]


def test_string_text_excludes_quotes():
    toks = tokenize('"Include/Public"')
    assert toks[0].kind is K.STRING
    assert toks[0].text == "Include/Public"
    assert (toks[0].line, toks[0].column) == (1, 1)


def test_comments_are_skipped_and_tracked():
    toks = tokenize("// header\n/* a\nb */ module")
    assert toks[0].kind is K.MODULE
    assert (toks[0].line, toks[0].column) == (3, 6)


def test_comment_markers_inside_strings_are_text():
    toks = tokenize('"a//b/*c*/"')
    assert toks[0].text == "a//b/*c*/"
    assert toks[1].kind is K.END_OF_FILE


def test_invalid_character_becomes_token_not_error():
    toks = tokenize("module @ /")
    assert [(t.kind, t.text) for t in toks] == [
        (K.MODULE, "module"),
        (K.INVALID, "@"),
        (K.INVALID, "/"),
        (K.END_OF_FILE, ""),
    ]


def test_unterminated_string_reports_opening_quote():
    with pytest.raises(UnterminatedString) as exc:
        tokenize('module M { sources = ["a.cpp }')
    assert (exc.value.line, exc.value.column) == (1, 23)


def test_newline_inside_string_is_unterminated():
    with pytest.raises(UnterminatedString) as exc:
        tokenize('module M {\n  sources = "a\n" }')
    assert (exc.value.line, exc.value.column) == (2, 13)
    assert isinstance(exc.value, LexError)


def test_unterminated_block_comment():
    with pytest.raises(UnterminatedComment) as exc:
        tokenize("module M {\n/* never\nclosed")
    assert exc.value.line == 3
    assert "Unterminated block comment" in str(exc.value)


def test_empty_input_is_single_eof():
    toks = tokenize("  \n\t ")
    assert len(toks) == 1
    assert toks[0].kind is K.END_OF_FILE
    assert toks[0].line == 2


def test_next_token_after_eof_keeps_returning_eof():
    lexer = Lexer("x")
    assert lexer.next_token().kind is K.IDENTIFIER
    assert lexer.next_token().kind is K.END_OF_FILE
    assert lexer.next_token().kind is K.END_OF_FILE
