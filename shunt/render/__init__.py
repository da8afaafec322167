"""Textual renderings of expression trees."""

from shunt.render.depth import DEPTH_SWEEPS, render_depth_line, render_depth_view
from shunt.render.text import render_plain, render_precedence

__all__ = [
    "DEPTH_SWEEPS",
    "render_depth_line",
    "render_depth_view",
    "render_plain",
    "render_precedence",
]
