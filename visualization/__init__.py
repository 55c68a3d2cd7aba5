"""
Visualization Tools

Provides drawing utilities for:
- Candidate lines
- The upper envelope of a line container
"""

from .draw_envelope import (
    Window,
    draw_lines,
    draw_envelope,
    draw_axes,
    render_envelope,
)

__all__ = [
    "Window",
    "draw_lines",
    "draw_envelope",
    "draw_axes",
    "render_envelope",
]
