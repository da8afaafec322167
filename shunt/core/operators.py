"""Operator table mapping operator spellings to precedence and associativity."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


OPERATOR_ALPHABET = frozenset("!.^*/+-:=<>&|$#¤%?@£€¥~§½¶")


class Associativity(str, Enum):
    """Grouping rule for chains of equal-precedence operators."""

    LEFT = "left"
    RIGHT = "right"
    NON_ASSOC = "nonassoc"


@dataclass(frozen=True, slots=True)
class OperatorDefinition:
    """Binding strength and grouping of a binary operator."""

    precedence: int
    associativity: Associativity

    def reduces_before(self, incoming: OperatorDefinition) -> bool:
        """Return True when a pending operator must be reduced before `incoming` is pushed.

        NonAssoc ties are deferred exactly like Right ties.
        """

        if self.precedence > incoming.precedence:
            return True
        return (
            incoming.associativity is Associativity.LEFT
            and self.precedence == incoming.precedence
        )


FALLBACK_DEFINITION = OperatorDefinition(precedence=10, associativity=Associativity.LEFT)


class OperatorRegistry:
    """Immutable lookup table from operator spelling to definition."""

    def __init__(
        self,
        definitions: dict[str, OperatorDefinition],
        *,
        fallback: OperatorDefinition = FALLBACK_DEFINITION,
    ) -> None:
        for spelling in definitions:
            if not spelling or any(ch not in OPERATOR_ALPHABET for ch in spelling):
                raise ValueError(f"Invalid operator spelling: {spelling!r}")
        self._by_spelling: dict[str, OperatorDefinition] = dict(definitions)
        self._fallback = fallback

    def lookup(self, spelling: str) -> OperatorDefinition:
        """Lookup an operator definition; unknown spellings get the fallback."""

        return self._by_spelling.get(spelling, self._fallback)

    def contains(self, spelling: str) -> bool:
        """Return True when `spelling` has its own table entry."""

        return spelling in self._by_spelling

    def spellings(self) -> set[str]:
        """Return all spellings with explicit table entries."""

        return set(self._by_spelling.keys())


def _fixity(precedence: int, assoc: str) -> OperatorDefinition:
    return OperatorDefinition(
        precedence=precedence,
        associativity={"L": Associativity.LEFT, "R": Associativity.RIGHT, "N": Associativity.NON_ASSOC}[assoc],
    )


# Haskell 98 fixity declarations for the Prelude operators.
DEFAULT_REGISTRY = OperatorRegistry(
    {
        "!!": _fixity(9, "L"),
        ".": _fixity(9, "R"),
        "^": _fixity(8, "R"),
        "^^": _fixity(8, "R"),
        "**": _fixity(8, "R"),
        "*": _fixity(7, "L"),
        "/": _fixity(7, "L"),
        "+": _fixity(6, "L"),
        "-": _fixity(6, "L"),
        ":": _fixity(5, "R"),
        "++": _fixity(5, "R"),
        "==": _fixity(4, "N"),
        "!=": _fixity(4, "N"),
        "/=": _fixity(4, "N"),
        "<": _fixity(4, "N"),
        "<=": _fixity(4, "N"),
        ">": _fixity(4, "N"),
        ">=": _fixity(4, "N"),
        "&&": _fixity(3, "R"),
        "||": _fixity(2, "R"),
        ">>": _fixity(1, "L"),
        ">>=": _fixity(1, "L"),
        "$": _fixity(0, "R"),
        "$!": _fixity(0, "R"),
    }
)


def lookup(spelling: str) -> OperatorDefinition:
    """Lookup `spelling` in the default table."""

    return DEFAULT_REGISTRY.lookup(spelling)
