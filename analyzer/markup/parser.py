from typing import Optional, Sequence
from analyzer.errors import NestingTooDeepError, UnexpectedTokenError, UnmatchedTagError
from .tokens.tokens import Token, TokenKind
from .tree import Node, TagPayload, TextPayload
import logging

# No nesting limit unless one is configured
DEFAULT_MAX_DEPTH: Optional[int] = None


class _OpenTag:
    __slots__ = ("token", "children")

    def __init__(self, token: Token) -> None:
        self.token = token
        self.children: list[Node] = []


class Parser:
    """
    Parser for the token stream grammar:

        document ::= tag
        tag      ::= OpenTag content CloseTag
        content  ::= (text | tag)*
        text     ::= TextContent

    One token of lookahead, no backtracking. Every closing tag must carry the
    same name as the tag it closes. Open tags are kept on an explicit stack so
    nesting depth is bounded by memory, not by the interpreter's call stack.
    """

    def __init__(
        self,
        tokens: Sequence[Token],
        strict: bool = False,
        max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
    ) -> None:
        self.tokens = tokens
        self.strict = strict
        self.max_depth = max_depth
        self.pos = 0

    def peek(self) -> Optional[Token]:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def parse(self) -> Node:
        root = self.document()
        if self.strict and self.pos < len(self.tokens):
            raise UnexpectedTokenError(
                f"unexpected token {self.tokens[self.pos]} after closing tag of "
                f"<{root.name}> ({len(self.tokens) - self.pos} left over)"
            )
        logging.getLogger(__name__).debug(
            f"Parsed <{root.name}> using {self.pos} of {len(self.tokens)} tokens"
        )
        return root

    def document(self) -> Node:
        first = self.peek()
        if first is None:
            raise UnexpectedTokenError("expected an opening tag, got end of input")
        if first.kind is not TokenKind.OPEN_TAG:
            raise UnexpectedTokenError(f"expected an opening tag, got {first}")
        return self.tag()

    def open_tag(self, stack: list[_OpenTag]) -> None:
        if self.max_depth is not None and len(stack) >= self.max_depth:
            raise NestingTooDeepError(
                f"tags nested deeper than {self.max_depth} levels at token {self.pos + 1}"
            )
        stack.append(_OpenTag(self.advance()))

    def close_tag(self, current: _OpenTag) -> Node:
        close_tok = self.peek()
        if close_tok is None:
            raise UnmatchedTagError(f"<{current.token.literal}> is never closed")
        if close_tok.literal != current.token.literal:
            raise UnmatchedTagError(
                f"<{current.token.literal}> closed by {close_tok} at token {self.pos + 1}"
            )
        self.advance()
        return Node.tag(TagPayload(current.token, close_tok), current.children)

    def tag(self) -> Node:
        stack: list[_OpenTag] = []
        self.open_tag(stack)

        while True:
            current = stack[-1]
            tok = self.peek()
            if tok is not None and tok.kind is TokenKind.TEXT:
                current.children.append(Node.text(TextPayload(self.advance())))
            elif tok is not None and tok.kind is TokenKind.OPEN_TAG:
                self.open_tag(stack)
            else:
                # content ends on a closing tag or at end of input
                node = self.close_tag(current)
                stack.pop()
                if not stack:
                    return node
                stack[-1].children.append(node)


def parse(
    tokens: Sequence[Token],
    strict: bool = False,
    max_depth: Optional[int] = DEFAULT_MAX_DEPTH,
) -> Node:
    return Parser(tokens, strict=strict, max_depth=max_depth).parse()
