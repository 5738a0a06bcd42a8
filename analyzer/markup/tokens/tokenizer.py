from typing import Iterable
from analyzer.errors import TokenizerError
from .tokens import Token, TokenKind
import logging

TAG_OPEN = "<"
TAG_CLOSE = ">"
END_MARK = "/"


def tokenize(lines: Iterable[str]) -> list[Token]:
    """
    Turn raw markup lines into tokens, one per non-blank line.

    A line starting with ``<`` is a tag (``</`` for a closing one) and must end
    with ``>``; anything else is kept verbatim as text content.
    """
    tokens: list[Token] = []

    def tag_token(line: str, lineno: int) -> Token:
        start = 1
        kind = TokenKind.OPEN_TAG
        if line[start:start + 1] == END_MARK:
            start += 1
            kind = TokenKind.CLOSE_TAG

        end = line.find(TAG_CLOSE, start)
        if end == -1:
            raise TokenizerError(
                f"line {lineno}: malformed tag {line!r}: missing closing delimiter"
            )
        if end == start:
            raise TokenizerError(f"line {lineno}: malformed tag {line!r}: empty tag name")
        if end != len(line) - 1:
            raise TokenizerError(
                f"line {lineno}: malformed tag {line!r}: unexpected content after '{TAG_CLOSE}'"
            )
        return Token(kind, line[start:end])

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue

        if line.startswith(TAG_OPEN):
            tokens.append(tag_token(line, lineno))
        else:
            tokens.append(Token(TokenKind.TEXT, line))

    logging.getLogger(__name__).debug(f"Tokenized {len(tokens)} tokens")
    return tokens
