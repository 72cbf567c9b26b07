"""Tests for comment stripping and line classification."""

from __future__ import annotations

from textwrap import dedent

from yini import TokenType, YiniLexer
from yini.lexer import count_depth_markers, strip_block_comments, strip_line_comment


def _tokens(text: str):
    return [token for token in YiniLexer(text).tokenize() if token.type != TokenType.EOF]


def test_block_comment_removed_as_literal_span():
    cleaned, _ = strip_block_comments("a = 1 /* one */ b /* two */")
    assert cleaned == "a = 1  b "


def test_block_comment_is_not_nesting_aware():
    cleaned, _ = strip_block_comments("x /* outer /* inner */ tail */ y")
    assert cleaned == "x  tail */ y"


def test_unterminated_block_comment_truncates():
    cleaned, _ = strip_block_comments("a = 1\n/* unterminated\nb = 2")
    assert cleaned == "a = 1\n"


def test_block_comment_opener_and_closer_do_not_overlap():
    cleaned, _ = strip_block_comments("a/*/b")
    assert cleaned == "a"


def test_line_origins_survive_multiline_comments():
    text = "a = 1\n/* one\ntwo\nthree */\nb = 2\n"
    cleaned, origins = strip_block_comments(text)
    assert cleaned.split("\n")[2] == "b = 2"
    assert origins[2] == 5


def test_line_comment_ignores_quotes():
    assert strip_line_comment("url = 'http://example.com'") == "url = 'http:"
    assert strip_line_comment("no comment here") == "no comment here"


def test_count_depth_markers():
    assert count_depth_markers("^^^ name") == 3
    assert count_depth_markers("key = ^") == 0
    assert count_depth_markers("^ ^ spaced") == 1


def test_tokenize_classifies_lines():
    src = dedent(
        """
        // heading comment
        name = 'test'
        ^ server
            ^^ connection   // trailing
            host = 'localhost'
        """
    )
    tokens = _tokens(src)
    assert [(t.type, t.depth) for t in tokens] == [
        (TokenType.ASSIGNMENT, 0),
        (TokenType.HEADER, 1),
        (TokenType.HEADER, 2),
        (TokenType.ASSIGNMENT, 0),
    ]
    assert [t.value for t in tokens] == ["name = 'test'", "^ server", "^^ connection", "host = 'localhost'"]
    assert [t.line for t in tokens] == [3, 4, 5, 6]


def test_tokenize_trims_carriage_returns():
    tokens = _tokens("a = 1\r\n\r\nb = 2\r\n")
    assert [t.value for t in tokens] == ["a = 1", "b = 2"]
    assert [t.line for t in tokens] == [1, 3]


def test_tokenize_ends_with_eof():
    tokens = YiniLexer("").tokenize()
    assert [t.type for t in tokens] == [TokenType.EOF]
