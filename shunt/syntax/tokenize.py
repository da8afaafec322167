"""Tokenizer turning a single input line into a token sequence."""

from __future__ import annotations

import string

from shunt.core.errors import TokenizeError
from shunt.core.numbers import parse_decimal
from shunt.core.operators import OPERATOR_ALPHABET
from shunt.core.tokens import Token, TokenKind


_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_IDENT_TAIL = _LETTERS | _DIGITS | {"_"}


def tokenize(text: str) -> list[Token]:
    """Tokenize `text` left to right, each rule consuming a maximal run.

    Raises TokenizeError on the first character that starts no token.
    """

    out: list[Token] = []
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if ch.isspace():
            i += 1
            continue
        if ch == "(":
            out.append(Token(TokenKind.LPAREN, ch, i))
            i += 1
            continue
        if ch == ")":
            out.append(Token(TokenKind.RPAREN, ch, i))
            i += 1
            continue
        if ch in _DIGITS:
            j = _scan(text, i, _DIGITS)
            out.append(Token(TokenKind.NUMBER, text[i:j], i, parse_decimal(text[i:j])))
            i = j
            continue
        if ch in OPERATOR_ALPHABET:
            j = _scan(text, i, OPERATOR_ALPHABET)
            out.append(Token(TokenKind.OPERATOR, text[i:j], i))
            i = j
            continue
        if ch in _LETTERS:
            j = _scan(text, i + 1, _IDENT_TAIL)
            out.append(Token(TokenKind.IDENTIFIER, text[i:j], i))
            i = j
            continue
        raise TokenizeError(ch, i)
    return out


def _scan(text: str, start: int, allowed: frozenset[str]) -> int:
    j = start
    while j < len(text) and text[j] in allowed:
        j += 1
    return j
