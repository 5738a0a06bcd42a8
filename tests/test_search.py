"""Tests for the deepest-text search."""

from analyzer.markup.parser import parse
from analyzer.markup.search import find_deepest, find_deepest_match
from analyzer.markup.tokens.tokenizer import tokenize
from analyzer.markup.tokens.tokens import close_tag, open_tag, text
from analyzer.markup.tree import Node, TagPayload, TextPayload


def tree(*lines: str) -> Node:
    return parse(tokenize(lines))


class TestFindDeepest:
    def test_literal_example(self) -> None:
        match = find_deepest_match(tree("<a>", "<b>", "hello", "</b>", "</a>"))

        assert match is not None
        assert match.literal == "hello"
        assert match.depth == 3

    def test_first_text_wins_a_tie(self) -> None:
        root = tree("<a>", "<b>", "x", "</b>", "<c>", "y", "</c>", "</a>")

        assert find_deepest(root).literal == "x"

    def test_deeper_later_text_wins(self) -> None:
        root = tree(
            "<html>",
            "shallow",
            "<body>",
            "<div>",
            "deep",
            "</div>",
            "</body>",
            "</html>",
        )

        match = find_deepest_match(root)
        assert match.literal == "deep"
        assert match.depth == 4

    def test_shallower_text_after_deep_text_is_ignored(self) -> None:
        root = tree("<a>", "<b>", "<c>", "deep", "</c>", "</b>", "top", "</a>")

        assert find_deepest(root).literal == "deep"

    def test_no_text(self) -> None:
        assert find_deepest(tree("<a>", "<b>", "</b>", "</a>")) is None
        assert find_deepest_match(tree("<a>", "</a>")) is None

    def test_text_root_has_depth_one(self) -> None:
        root = Node.text(TextPayload(text("alone")))

        match = find_deepest_match(root)

        assert match.depth == 1
        assert match.literal == "alone"

    def test_search_is_repeatable(self) -> None:
        root = tree("<a>", "<b>", "x", "</b>", "<c>", "<d>", "y", "</d>", "</c>", "</a>")

        first = find_deepest_match(root)
        second = find_deepest_match(root)

        assert first == second
        assert first.literal == "y"
        assert [c.name for c in root.children] == ["b", "c"]

    def test_handles_nesting_beyond_recursion_limit(self) -> None:
        root = Node.text(TextPayload(text("bottom")))
        for _ in range(5000):
            root = Node.tag(TagPayload(open_tag("x"), close_tag("x")), [root])

        match = find_deepest_match(root)

        assert match.depth == 5001
        assert match.literal == "bottom"
