"""Tokenizer and shunting-yard parser."""

from shunt.syntax.parser import parse, parse_from, parse_text
from shunt.syntax.tokenize import tokenize

__all__ = [
    "tokenize",
    "parse",
    "parse_from",
    "parse_text",
]
