"""
Line container: dynamic upper envelope of lines y = k x + m.

This module provides:
    • LineContainer      (maximum of lines)
    • MinLineContainer   (minimum of lines, by negation)

Lines may be inserted in any slope order. Insertion is amortized
O(log n): every line is created once and removed at most once by the
repair steps. A query is a single O(log n) search over breakpoints.

Not thread-safe: breakpoints are rewritten during insert while also
serving as search keys for query.
"""

from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from config import get_active_params
from models.line import Line
from utils.geometry import line_intersect
from hull.dominance import intersect
from hull.errors import EmptyEnvelopeError
from hull.ordered_set import OrderedLineSet


class LineContainer:
    """
    Keeps only the lines that are the maximum somewhere.

    Read in ascending slope order, the survivors have strictly ascending
    breakpoints, and each one is the maximum on (previous breakpoint,
    own breakpoint]. At most one line per slope survives.
    """

    def __init__(self, domain: Optional[str] = None):
        self.params = get_active_params(domain)
        self.domain = self.params["DOMAIN"]

        self._lines = OrderedLineSet()
        self._snapshot = None

        # instrumentation
        self.inserted_count = 0
        self.removed_count = 0

    # ------------------------------------------------------------------
    # Size & iteration
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def lines(self) -> List[Line]:
        """Surviving lines in ascending slope order."""
        return list(self._lines)

    def breakpoints(self) -> list:
        return [ln.breakpoint for ln in self._lines]

    def __repr__(self):
        return f"{type(self).__name__}(domain={self.domain!r}, lines={len(self)})"

    # ------------------------------------------------------------------
    # Insert
    # ------------------------------------------------------------------

    def insert(self, k, m):
        """
        Adds the line y = k x + m and removes every line it makes obsolete.
        """
        coerce = self.params["COERCE"]
        z = Line(coerce(k), coerce(m))

        self._lines.add(z)
        self._snapshot = None
        self.inserted_count += 1

        # 1. purge successors that z now dominates
        y = self._lines.successor(z)
        while intersect(self._lines, z, y, self.params):
            self._remove(y)
            y = self._lines.successor(z)

        x = self._lines.predecessor(z)
        if x is None:
            return

        # 2. z itself may be dominated by x and what lies beyond it
        if intersect(self._lines, x, z, self.params):
            self._remove(z)
            intersect(self._lines, x, self._lines.successor(x), self.params)
            return

        # 3. walk left: x's breakpoint moved, so lines before it may be dominated
        current = x
        while True:
            w = self._lines.predecessor(current)
            if w is None:
                # an equal-slope loser with nothing to its left
                if current.breakpoint == self.params["NEGATIVE_INFINITY"]:
                    self._remove(current)
                break
            if w.breakpoint < current.breakpoint:
                break
            self._remove(current)
            intersect(self._lines, w, self._lines.successor(w), self.params)
            current = w

    def _remove(self, line: Line):
        self._lines.discard(line)
        self.removed_count += 1

    # ------------------------------------------------------------------
    # Query
    # ------------------------------------------------------------------

    def query(self, x):
        """
        Returns max over all inserted lines of k*x + m.

        Raises EmptyEnvelopeError if nothing was inserted.
        """
        if not self._lines:
            raise EmptyEnvelopeError()

        x = self.params["COERCE"](x)
        line = self._lines.ceiling(x)
        return line.value_at(x)

    def query_many(self, xs: Sequence) -> np.ndarray:
        """
        Vectorised query: one binary search per x over an array snapshot
        of the envelope. The snapshot is reused until the next insert.
        """
        if not self._lines:
            raise EmptyEnvelopeError()

        slopes, intercepts, breakpoints = self._array_view()
        coerce = self.params["COERCE"]
        xs = np.array([coerce(x) for x in xs], dtype=slopes.dtype)

        idx = np.searchsorted(breakpoints, xs, side="left")
        return slopes[idx] * xs + intercepts[idx]

    def _array_view(self):
        if self._snapshot is None:
            # Python ints stay exact in object arrays
            dtype = object if self.domain == "integer" else np.float64
            lines = self.lines()
            self._snapshot = (
                np.array([ln.slope for ln in lines], dtype=dtype),
                np.array([ln.intercept for ln in lines], dtype=dtype),
                np.array([ln.breakpoint for ln in lines], dtype=dtype),
            )
        return self._snapshot

    # ------------------------------------------------------------------
    # Envelope pieces
    # ------------------------------------------------------------------

    def segments(self, x_lo, x_hi) -> List[Tuple[Line, float, float]]:
        """
        Pieces of the envelope inside [x_lo, x_hi], left to right:
            (line, start, end)
        where `line` is the maximum for every real x between start and end.

        Boundaries are the exact crossings of neighbouring lines, not the
        stored breakpoints (those are floored in the integer domain).
        """
        lines = self.lines()
        pieces = []
        start = x_lo
        for ln, nxt in zip(lines, lines[1:] + [None]):
            if nxt is None:
                crossing = self.params["POSITIVE_INFINITY"]
            else:
                crossing = line_intersect(ln.slope, ln.intercept, nxt.slope, nxt.intercept)
            end = min(crossing, x_hi)
            if end > start:
                pieces.append((ln, start, end))
                start = end
            if start >= x_hi:
                break
        return pieces


class MinLineContainer(LineContainer):
    """
    Minimum of lines: stores (-k, -m) and negates every answer.
    Breakpoints and lines() refer to the negated lines.
    """

    def insert(self, k, m):
        coerce = self.params["COERCE"]
        super().insert(-coerce(k), -coerce(m))

    def query(self, x):
        return -super().query(x)

    def query_many(self, xs: Sequence) -> np.ndarray:
        return -super().query_many(xs)
