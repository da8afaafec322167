"""Depth-stratified rendering: one line per nesting sweep, aligned under the plain form.

Every line has the same width as `render_plain(expr)`. On sweep `d` only the pieces
assigned to that sweep are printed; everything else is blanked with spaces.

- Leaves rendered at depth `k` appear on sweep `k - 1`.
- Operator glyphs and parentheses appear on the sweep equal to their own depth.
- Application callee/arguments and operator operands sit one level deeper than their
  parent; a parenthesized inner expression stays at the parentheses' depth.
"""

from __future__ import annotations

from shunt.core.ast import Application, BinaryOp, Expr, Identifier, NumberLit, Parenthesized
from shunt.render.text import render_plain


DEPTH_SWEEPS = 12


def _blank(text: str) -> str:
    return " " * len(text)


def _render_at(expr: Expr, sweep: int, depth: int) -> str:
    next_depth = depth + 1
    if isinstance(expr, (NumberLit, Identifier)):
        text = render_plain(expr)
        return text if depth == sweep + 1 else _blank(text)
    if isinstance(expr, Application):
        callee = _render_at(expr.callee, sweep, next_depth)
        args = " ".join(_render_at(arg, sweep, next_depth) for arg in expr.args)
        return f"{callee} {args}"
    if isinstance(expr, Parenthesized):
        shown = depth == sweep
        inner = _render_at(expr.inner, sweep, depth)
        return ("(" if shown else " ") + inner + (")" if shown else " ")
    if isinstance(expr, BinaryOp):
        op = expr.op if depth == sweep else _blank(expr.op)
        left = _render_at(expr.left, sweep, next_depth)
        right = _render_at(expr.right, sweep, next_depth)
        return f"{left} {op} {right}"

    raise TypeError(f"Unsupported expression node: {expr.__class__.__name__}")


def render_depth_line(expr: Expr, sweep: int) -> str:
    """Render the single line for `sweep`, starting the root at depth 0."""

    return _render_at(expr, sweep, 0)


def render_depth_view(expr: Expr, sweeps: int = DEPTH_SWEEPS) -> list[str]:
    """Render sweeps `0..sweeps-1`, top to bottom."""

    return [render_depth_line(expr, sweep) for sweep in range(sweeps)]
