"""
Utility Functions

Provides the arithmetic helpers used by the dominance evaluator and the
brute-force reference envelope used for verification.
"""

from .geometry import floor_div, true_div, line_intersect
from .brute_force import max_of_lines, min_of_lines

__all__ = [
    "floor_div",
    "true_div",
    "line_intersect",
    "max_of_lines",
    "min_of_lines",
]
