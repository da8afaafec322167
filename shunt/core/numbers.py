"""Decimal conversion for number literals of any length.

`int(str)` and `str(int)` refuse values past the interpreter's digit limit
(4300 by default), so long literals are converted in fixed-size chunks.
"""

from __future__ import annotations


_CHUNK_DIGITS = 1000
_CHUNK_BASE = 10**_CHUNK_DIGITS


def parse_decimal(digits: str) -> int:
    """Convert a run of ASCII decimal digits to an int."""

    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    value = 0
    for start in range(0, len(digits), _CHUNK_DIGITS):
        chunk = digits[start : start + _CHUNK_DIGITS]
        value = value * 10 ** len(chunk) + int(chunk)
    return value


def format_decimal(value: int) -> str:
    """Render a non-negative int in decimal."""

    if value < _CHUNK_BASE:
        return str(value)
    chunks: list[int] = []
    while value:
        value, rem = divmod(value, _CHUNK_BASE)
        chunks.append(rem)
    head = str(chunks.pop())
    return head + "".join(f"{chunk:0{_CHUNK_DIGITS}d}" for chunk in reversed(chunks))
