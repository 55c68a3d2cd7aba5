"""
Visualization utilities for rendering a line container.

This module provides:
    • draw_lines(img, lines, window, color, thickness)
    • draw_envelope(img, container, window, color, thickness)
    • render_envelope(container, x_range, y_range, size)

Everything is drawn into in-memory numpy images; nothing is written
to disk.
"""

from typing import Iterable, Optional, Tuple

import cv2
import numpy as np

from models.line import Line
from hull.errors import EmptyEnvelopeError
from config import (
    CANVAS_SIZE,
    CANVAS_MARGIN,
    COLOR_ENVELOPE,
    COLOR_LINE,
    COLOR_AXIS,
    LINE_THICKNESS,
    ENVELOPE_THICKNESS,
)


# ---------------------------------------------------------------------
#  WORLD -> PIXEL MAPPING
# ---------------------------------------------------------------------

class Window:
    """
    Maps world coordinates (x, y) in [x_lo, x_hi] x [y_lo, y_hi]
    onto a (height, width) pixel grid, y pointing up.
    """

    def __init__(self, x_range, y_range, shape_hw):
        self.x_lo, self.x_hi = float(x_range[0]), float(x_range[1])
        self.y_lo, self.y_hi = float(y_range[0]), float(y_range[1])
        self.h, self.w = shape_hw

        if self.x_hi <= self.x_lo or self.y_hi <= self.y_lo:
            raise ValueError("window ranges must be non-empty")

    def to_pixel(self, x, y) -> Tuple[int, int]:
        col = (x - self.x_lo) / (self.x_hi - self.x_lo) * (self.w - 1)
        row = (self.y_hi - y) / (self.y_hi - self.y_lo) * (self.h - 1)
        return int(round(col)), int(round(row))

    def clip(self, line: Line, start, end):
        """
        Shrinks [start, end] to the part where the line stays within the
        window's y-range, so far-away values never reach OpenCV's int
        coordinates. Returns None if nothing is visible.
        """
        start, end = max(float(start), self.x_lo), min(float(end), self.x_hi)
        k, m = float(line.slope), float(line.intercept)

        if k == 0:
            if not self.y_lo <= m <= self.y_hi:
                return None
        else:
            xa = (self.y_lo - m) / k
            xb = (self.y_hi - m) / k
            start = max(start, min(xa, xb))
            end = min(end, max(xa, xb))

        if end < start:
            return None
        return start, end

    def segment_pixels(self, line: Line, start, end):
        clipped = self.clip(line, start, end)
        if clipped is None:
            return None
        a, b = clipped
        return self.to_pixel(a, line.value_at(a)), self.to_pixel(b, line.value_at(b))


# ---------------------------------------------------------------------
#  BASIC: Draw full lines across the window
# ---------------------------------------------------------------------

def draw_lines(
    image,
    lines: Iterable[Line],
    window: Window,
    color: Tuple[int, int, int] = COLOR_LINE,
    thickness: int = LINE_THICKNESS
):
    """
    Draws the visible part of each line across the window.
    """
    for ln in lines:
        pts = window.segment_pixels(ln, window.x_lo, window.x_hi)
        if pts is not None:
            cv2.line(image, pts[0], pts[1], color, thickness)
    return image


# ---------------------------------------------------------------------
#  HIGH-LEVEL: Draw only the active envelope pieces
# ---------------------------------------------------------------------

def draw_envelope(
    image,
    container,
    window: Window,
    color: Tuple[int, int, int] = COLOR_ENVELOPE,
    thickness: int = ENVELOPE_THICKNESS
):
    """
    Draws the maximum of the container's lines: one segment per piece
    returned by container.segments().
    """
    for ln, start, end in container.segments(window.x_lo, window.x_hi):
        pts = window.segment_pixels(ln, start, end)
        if pts is not None:
            cv2.line(image, pts[0], pts[1], color, thickness)
    return image


def draw_axes(image, window: Window, color=COLOR_AXIS):
    if window.x_lo <= 0 <= window.x_hi:
        cv2.line(image, window.to_pixel(0, window.y_lo), window.to_pixel(0, window.y_hi), color, 1)
    if window.y_lo <= 0 <= window.y_hi:
        cv2.line(image, window.to_pixel(window.x_lo, 0), window.to_pixel(window.x_hi, 0), color, 1)
    return image


# ---------------------------------------------------------------------
#  ONE-SHOT RENDER
# ---------------------------------------------------------------------

def _envelope_y_range(container, x_range):
    """
    Vertical extent of the envelope over x_range, padded by CANVAS_MARGIN.
    The envelope is convex, so its extremes lie at piece endpoints.
    """
    values = []
    for ln, start, end in container.segments(x_range[0], x_range[1]):
        values.append(ln.value_at(start))
        values.append(ln.value_at(end))

    lo, hi = float(min(values)), float(max(values))
    pad = (hi - lo) * CANVAS_MARGIN or 1.0
    return lo - pad, hi + pad


def render_envelope(
    container,
    x_range: Tuple[float, float],
    y_range: Optional[Tuple[float, float]] = None,
    size: Tuple[int, int] = CANVAS_SIZE,
    show_lines: bool = True,
    show_axes: bool = True
) -> np.ndarray:
    """
    Renders the container into a fresh BGR canvas of shape (h, w, 3):
        axes     → white
        lines    → grey   (every surviving line, full width)
        envelope → green  (active pieces only)

    y_range defaults to the envelope's extent over x_range.
    """
    if not len(container):
        raise EmptyEnvelopeError("nothing to render: the container is empty")
    if not x_range[0] < x_range[1]:
        raise ValueError("window ranges must be non-empty")

    if y_range is None:
        y_range = _envelope_y_range(container, x_range)

    h, w = size
    canvas = np.zeros((h, w, 3), dtype=np.uint8)
    window = Window(x_range, y_range, (h, w))

    if show_axes:
        draw_axes(canvas, window)
    if show_lines:
        draw_lines(canvas, container.lines(), window)
    draw_envelope(canvas, container, window)

    return canvas
