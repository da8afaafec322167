"""Deterministic single-line renderings of expression trees."""

from __future__ import annotations

from shunt.core.ast import Application, BinaryOp, Expr, Identifier, NumberLit, Parenthesized
from shunt.core.numbers import format_decimal


def render_precedence(expr: Expr) -> str:
    """Render with every application and operator application wrapped in `{ }`."""

    if isinstance(expr, NumberLit):
        return format_decimal(expr.value)
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, Application):
        args = " ".join(render_precedence(arg) for arg in expr.args)
        return f"{{{render_precedence(expr.callee)} {args}}}"
    if isinstance(expr, Parenthesized):
        return f"({render_precedence(expr.inner)})"
    if isinstance(expr, BinaryOp):
        return f"{{{render_precedence(expr.left)}{expr.op}{render_precedence(expr.right)}}}"

    raise TypeError(f"Unsupported expression node: {expr.__class__.__name__}")


def render_plain(expr: Expr) -> str:
    """Render as plain infix text that re-parses to the same tree."""

    if isinstance(expr, NumberLit):
        return format_decimal(expr.value)
    if isinstance(expr, Identifier):
        return expr.name
    if isinstance(expr, Application):
        args = " ".join(render_plain(arg) for arg in expr.args)
        return f"{render_plain(expr.callee)} {args}"
    if isinstance(expr, Parenthesized):
        return f"({render_plain(expr.inner)})"
    if isinstance(expr, BinaryOp):
        return f"{render_plain(expr.left)} {expr.op} {render_plain(expr.right)}"

    raise TypeError(f"Unsupported expression node: {expr.__class__.__name__}")
