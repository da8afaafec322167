"""Operator-precedence expression parser with ML-style application."""

__version__ = "0.1.0"
