"""Token types produced by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Token category."""

    LPAREN = "LParen"
    RPAREN = "RParen"
    NUMBER = "Number"
    OPERATOR = "Operator"
    IDENTIFIER = "Identifier"


@dataclass(frozen=True)
class Token:
    """Single scanned token; `value` is only set for numbers."""

    kind: TokenKind
    text: str
    offset: int = 0
    value: int | None = None

    @property
    def is_atom(self) -> bool:
        """True for tokens that can start an application argument."""

        return self.kind in (TokenKind.IDENTIFIER, TokenKind.NUMBER, TokenKind.LPAREN)
