from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    OPEN_TAG = "open"
    CLOSE_TAG = "close"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    literal: str

    def __str__(self) -> str:
        if self.kind is TokenKind.OPEN_TAG:
            return f"<{self.literal}>"
        if self.kind is TokenKind.CLOSE_TAG:
            return f"</{self.literal}>"
        return self.literal


def open_tag(name: str) -> Token:
    return Token(TokenKind.OPEN_TAG, name)


def close_tag(name: str) -> Token:
    return Token(TokenKind.CLOSE_TAG, name)


def text(literal: str) -> Token:
    return Token(TokenKind.TEXT, literal)
