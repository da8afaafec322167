"""Error kinds raised while tokenizing and parsing."""

from __future__ import annotations


class ShuntError(Exception):
    """Base error with a machine-readable kind and a user-facing message."""

    kind = "shunt"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class TokenizeError(ShuntError):
    """Input character that matches no token shape."""

    kind = "tokenize"

    def __init__(self, char: str, offset: int) -> None:
        self.char = char
        self.offset = offset
        super().__init__(f"Could not tokenize input beginning with {char!r} at offset {offset}")


class ExpectedClosingParenthesis(ShuntError):
    """A `)` was required but something else (or nothing) was found."""

    kind = "expected_closing_parenthesis"

    def __init__(self, found: str) -> None:
        self.found = found
        super().__init__(f"Expected closing parenthesis but found {found}")


class UnbalancedExpression(ShuntError):
    """Operands and operators do not combine into exactly one tree."""

    kind = "unbalanced_expression"

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unbalanced expression: {detail}")


class NonAssociativeChain(ShuntError):
    """Two non-associative operators of equal precedence chained without parentheses."""

    kind = "non_associative_chain"

    def __init__(self, left_op: str, right_op: str) -> None:
        self.left_op = left_op
        self.right_op = right_op
        super().__init__(
            f"Cannot chain non-associative operators {left_op!r} and {right_op!r} "
            "of equal precedence without parentheses"
        )
