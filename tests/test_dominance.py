# tests/test_dominance.py
"""
Tests for the dominance evaluator and the arithmetic helpers it uses.
"""

import math

import pytest

from config import get_active_params
from hull.dominance import compute_breakpoint, intersect
from hull.ordered_set import OrderedLineSet
from models.line import Line
from utils.geometry import floor_div, true_div, line_intersect


INT = get_active_params("integer")
FLT = get_active_params("float")


class TestFloorDiv:

    @pytest.mark.parametrize("a, b, expected", [
        (7, 2, 3),
        (-7, 2, -4),
        (7, -2, -4),
        (-7, -2, 3),
        (6, 3, 2),
        (-6, 3, -2),
        (0, -5, 0),
        (-1, 10**20, -1),
    ])
    def test_rounds_toward_negative_infinity(self, a, b, expected):
        assert floor_div(a, b) == expected

    def test_true_div(self):
        assert true_div(-1, 2) == -0.5

    def test_line_intersect(self):
        assert line_intersect(1, 0, -1, 0) == 0
        assert line_intersect(0, 5, 1, 0, divide=floor_div) == 5
        assert line_intersect(2, 1, 2, 3) is None


class TestComputeBreakpoint:

    def test_no_successor(self):
        assert compute_breakpoint(Line(1, 1), None, INT) == math.inf

    def test_tie_left_wins(self):
        assert compute_breakpoint(Line(2, 9), Line(2, 1), INT) == math.inf

    def test_tie_left_loses(self):
        assert compute_breakpoint(Line(2, 1), Line(2, 9), INT) == -math.inf

    def test_tie_equal_intercepts_loses(self):
        assert compute_breakpoint(Line(2, 1), Line(2, 1), INT) == -math.inf

    def test_integer_crossing_floored(self):
        # y = 0 and y = 2x + 1 cross at -0.5
        assert compute_breakpoint(Line(0, 0), Line(2, 1), INT) == -1

    def test_float_crossing_exact(self):
        assert compute_breakpoint(Line(0.0, 0.0), Line(2.0, 1.0), FLT) == -0.5


class TestIntersect:

    def _pair(self, left, right):
        s = OrderedLineSet()
        s.add(left)
        s.add(right)
        return s

    def test_end_of_set_never_removes(self):
        left = Line(0, 0)
        s = OrderedLineSet()
        s.add(left)
        assert intersect(s, left, None, INT) is False
        assert left.breakpoint == math.inf

    def test_reports_dominated_right(self):
        left, right = Line(0, 10), Line(1, 0)
        s = self._pair(left, right)
        s.set_breakpoint(right, 5)
        # left stays on top until x = 10, past right's window
        assert intersect(s, left, right, INT) is True
        assert left.breakpoint == 10

    def test_keeps_right(self):
        left, right = Line(0, 0), Line(1, 0)
        s = self._pair(left, right)
        s.set_breakpoint(right, math.inf)
        assert intersect(s, left, right, INT) is False
        assert s.ceiling(0) is left
        assert s.ceiling(1) is right

    def test_tie_marks_right_for_removal(self):
        left, right = Line(4, 3), Line(4, 1)
        s = self._pair(left, right)
        s.set_breakpoint(right, math.inf)
        assert intersect(s, left, right, INT) is True
