from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Union
from .tokens.tokens import Token, TokenKind


@dataclass(frozen=True, slots=True)
class TagPayload:
    open: Token
    close: Token

    def __post_init__(self) -> None:
        if self.open.kind is not TokenKind.OPEN_TAG or self.close.kind is not TokenKind.CLOSE_TAG:
            raise ValueError(f"Tag payload needs an open/close pair, got {self.open!r}, {self.close!r}")
        if self.open.literal != self.close.literal:
            raise ValueError(f"Tag payload literals differ: {self.open.literal!r} != {self.close.literal!r}")

    @property
    def name(self) -> str:
        return self.open.literal


@dataclass(frozen=True, slots=True)
class TextPayload:
    token: Token

    @property
    def literal(self) -> str:
        return self.token.literal

    def __str__(self) -> str:
        return self.token.literal


Payload = Union[TagPayload, TextPayload]


@dataclass(frozen=True, slots=True)
class Node:
    payload: Payload
    # None for text nodes, a (possibly empty) tuple for tag nodes
    children: Optional[tuple[Node, ...]] = field(default=None)

    @classmethod
    def tag(cls, payload: TagPayload, children: Iterable[Node] = ()) -> "Node":
        return cls(payload, tuple(children))

    @classmethod
    def text(cls, payload: TextPayload) -> "Node":
        return cls(payload, None)

    @property
    def is_text(self) -> bool:
        return isinstance(self.payload, TextPayload)

    @property
    def name(self) -> Optional[str]:
        return self.payload.name if isinstance(self.payload, TagPayload) else None


def iter_nodes(root: Node) -> Iterator[tuple[Node, int]]:
    """Pre-order walk yielding ``(node, depth)``, root at depth 1."""
    stack: list[tuple[Node, int]] = [(root, 1)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        if node.children:
            stack.extend((child, depth + 1) for child in reversed(node.children))


def count_nodes(root: Node) -> int:
    return sum(1 for _ in iter_nodes(root))


def render_tree(root: Node, indent: str = "  ") -> str:
    lines: list[str] = []
    for node, depth in iter_nodes(root):
        pad = indent * (depth - 1)
        payload = node.payload
        if isinstance(payload, TagPayload):
            lines.append(f"{pad}Node(tag={payload.name})")
        elif isinstance(payload, TextPayload):
            lines.append(f'{pad}Text: "{payload.literal}"')
        else:
            raise TypeError(f"Unknown node payload: {payload!r}")
    return "\n".join(lines)
