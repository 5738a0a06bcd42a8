"""Tests for turning raw lines into tokens."""

import pytest

from analyzer.errors import TokenizerError
from analyzer.markup.tokens.tokenizer import tokenize
from analyzer.markup.tokens.tokens import Token, TokenKind, close_tag, open_tag, text


class TestTokenize:
    def test_nested_document(self) -> None:
        lines = ["<a>", "<b>", "hello", "</b>", "</a>"]

        assert tokenize(lines) == [
            open_tag("a"),
            open_tag("b"),
            text("hello"),
            close_tag("b"),
            close_tag("a"),
        ]

    def test_empty_input_gives_no_tokens(self) -> None:
        assert tokenize([]) == []

    def test_blank_lines_are_skipped(self) -> None:
        lines = ["", "   ", "<a>", "\t", "x", "</a>", "\n"]

        assert [t.kind for t in tokenize(lines)] == [
            TokenKind.OPEN_TAG,
            TokenKind.TEXT,
            TokenKind.CLOSE_TAG,
        ]

    def test_lines_are_trimmed(self) -> None:
        tokens = tokenize(["    <body>\r\n", "   some words here  ", "\t</body>"])

        assert tokens[0] == open_tag("body")
        assert tokens[1] == text("some words here")
        assert tokens[2] == close_tag("body")

    def test_text_keeps_inner_content_verbatim(self) -> None:
        tokens = tokenize(["a > b and c/d"])

        assert tokens == [Token(TokenKind.TEXT, "a > b and c/d")]

    def test_tag_literal_has_no_delimiters(self) -> None:
        for tok in tokenize(["<title>", "</title>"]):
            assert tok.literal == "title"
            assert "<" not in tok.literal and ">" not in tok.literal and "/" not in tok.literal


class TestMalformedTags:
    @pytest.mark.parametrize("line", ["<a", "</a", "<", "</", "  <  "])
    def test_missing_closing_delimiter(self, line: str) -> None:
        with pytest.raises(TokenizerError, match="missing closing delimiter"):
            tokenize([line])

    @pytest.mark.parametrize("line", ["<>", "</>"])
    def test_empty_tag_name(self, line: str) -> None:
        with pytest.raises(TokenizerError, match="empty tag name"):
            tokenize([line])

    def test_content_after_tag(self) -> None:
        with pytest.raises(TokenizerError, match="unexpected content"):
            tokenize(["<a>text"])

    def test_error_reports_line_number(self) -> None:
        with pytest.raises(TokenizerError, match="line 3"):
            tokenize(["<a>", "", "<b", "</a>"])

    def test_error_summary(self) -> None:
        with pytest.raises(TokenizerError) as excinfo:
            tokenize(["<a"])

        assert excinfo.value.summary == "malformed HTML"


class TestToken:
    def test_token_is_immutable(self) -> None:
        tok = open_tag("a")

        with pytest.raises(AttributeError):
            tok.literal = "b"  # type: ignore[misc]

    def test_str_renders_markup(self) -> None:
        assert str(open_tag("a")) == "<a>"
        assert str(close_tag("a")) == "</a>"
        assert str(text("hi")) == "hi"
