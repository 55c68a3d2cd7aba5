"""
Dominance evaluator.

This module provides:
    • compute_breakpoint(left, right, params)
    • intersect(line_set, left, right, params)

Given two slope-adjacent lines (left.slope <= right.slope), the left
line's breakpoint is the last x at which it is still >= the right one.
"""

from models.line import Line
from utils.geometry import line_intersect


def compute_breakpoint(left: Line, right, params):
    """
    Breakpoint of `left` against its successor `right`:

        right is None        -> +inf   (never superseded)
        equal slopes         -> +inf if left has the larger intercept,
                                -inf otherwise (never the maximum)
        otherwise            -> (right.m - left.m) / (left.k - right.k),
                                with the domain's division (floored for ints)
    """
    if right is None:
        return params["POSITIVE_INFINITY"]

    if left.is_parallel(right):
        if left.intercept > right.intercept:
            return params["POSITIVE_INFINITY"]
        return params["NEGATIVE_INFINITY"]

    return line_intersect(
        left.slope, left.intercept,
        right.slope, right.intercept,
        divide=params["DIVIDE"],
    )


def intersect(line_set, left: Line, right, params) -> bool:
    """
    Stores left's new breakpoint in the set and reports whether `right`
    is now dominated (left reaches at least as far as right does).
    """
    line_set.set_breakpoint(left, compute_breakpoint(left, right, params))

    if right is None:
        return False
    return left.breakpoint >= right.breakpoint
