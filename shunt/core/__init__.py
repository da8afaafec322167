"""Core shunt data model: operators, tokens, expression trees and errors."""

from shunt.core.errors import (
    ExpectedClosingParenthesis,
    NonAssociativeChain,
    ShuntError,
    TokenizeError,
    UnbalancedExpression,
)
from shunt.core.operators import (
    DEFAULT_REGISTRY,
    Associativity,
    OperatorDefinition,
    OperatorRegistry,
)
from shunt.core.tokens import Token, TokenKind

__all__ = [
    "DEFAULT_REGISTRY",
    "Associativity",
    "OperatorDefinition",
    "OperatorRegistry",
    "Token",
    "TokenKind",
    "ShuntError",
    "TokenizeError",
    "ExpectedClosingParenthesis",
    "UnbalancedExpression",
    "NonAssociativeChain",
]
