"""
Ordered storage for the live lines of a container.

This module provides:
    • OrderedLineSet

Lines are kept in two sorted indexes:
    - by slope       (neighbour lookup during insertion / removal)
    - by breakpoint  (query lookup: smallest breakpoint >= x)

A line's breakpoint is part of a sort key, so it is never changed while
the line sits in the breakpoint index: set_breakpoint() takes the line
out, updates it and puts it back.
"""

from operator import attrgetter
from typing import Iterator, Optional

from sortedcontainers import SortedKeyList

from models.line import Line


class OrderedLineSet:

    def __init__(self):
        self._by_slope = SortedKeyList(key=attrgetter("slope"))
        self._by_breakpoint = SortedKeyList(key=attrgetter("breakpoint"))

    # ------------------------------------------------------------------
    # Size & iteration (ascending slope)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._by_slope)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._by_slope)

    def __contains__(self, line) -> bool:
        return self._position(line) is not None

    # ------------------------------------------------------------------
    # Insertion & removal
    # ------------------------------------------------------------------

    def add(self, line: Line):
        """
        Inserts a line at its slope position.

        Equal slopes may coexist for the duration of one insert; the new
        line is placed after existing lines of the same slope.
        """
        self._by_slope.add(line)
        if line.breakpoint is not None:
            self._by_breakpoint.add(line)

    def discard(self, line: Line):
        """Removes a line from both indexes."""
        self._by_slope.remove(line)
        if line.breakpoint is not None:
            self._by_breakpoint.remove(line)

    def set_breakpoint(self, line: Line, breakpoint):
        if line.breakpoint is not None:
            self._by_breakpoint.remove(line)
        line.breakpoint = breakpoint
        self._by_breakpoint.add(line)

    # ------------------------------------------------------------------
    # Neighbour lookup (by slope)
    # ------------------------------------------------------------------

    def _position(self, line: Line) -> Optional[int]:
        # Several lines may share a slope; scan that run for this object.
        lo = self._by_slope.bisect_key_left(line.slope)
        hi = self._by_slope.bisect_key_right(line.slope)
        for idx in range(lo, hi):
            if self._by_slope[idx] is line:
                return idx
        return None

    def predecessor(self, line: Line) -> Optional[Line]:
        idx = self._position(line)
        if idx is None:
            raise KeyError(line)
        return self._by_slope[idx - 1] if idx > 0 else None

    def successor(self, line: Line) -> Optional[Line]:
        idx = self._position(line)
        if idx is None:
            raise KeyError(line)
        return self._by_slope[idx + 1] if idx + 1 < len(self._by_slope) else None

    # ------------------------------------------------------------------
    # Query lookup (by breakpoint)
    # ------------------------------------------------------------------

    def ceiling(self, x) -> Optional[Line]:
        """
        Returns the line with the smallest breakpoint >= x,
        or None if every breakpoint is below x.
        """
        idx = self._by_breakpoint.bisect_key_left(x)
        if idx == len(self._by_breakpoint):
            return None
        return self._by_breakpoint[idx]
