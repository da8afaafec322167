"""CLI package for shunt tools."""

__all__ = [
    "show",
]
