"""
Reference (brute-force) envelope evaluation.

This module provides:
    • max_of_lines(slopes, intercepts, xs)
    • min_of_lines(slopes, intercepts, xs)

A plain O(n·q) linear scan over every line, used as an oracle by the
tests and by main.py's self-check.
"""

from typing import Sequence

import numpy as np


def _evaluate_all(slopes: Sequence, intercepts: Sequence, xs: Sequence) -> np.ndarray:
    """
    Returns an (n_lines, n_xs) table of k*x + m.

    dtype=object keeps Python ints exact, so large integer inputs
    are compared without int64 wrap-around or float rounding.
    """
    k = np.asarray(slopes, dtype=object).reshape(-1, 1)
    m = np.asarray(intercepts, dtype=object).reshape(-1, 1)
    x = np.asarray(xs, dtype=object).reshape(1, -1)

    if k.shape[0] == 0:
        raise ValueError("at least one line is required")
    if k.shape[0] != m.shape[0]:
        raise ValueError("slopes and intercepts must have the same length")

    return k * x + m


def max_of_lines(slopes: Sequence, intercepts: Sequence, xs: Sequence) -> np.ndarray:
    """
    For each x in xs: max over all lines of (k*x + m).
    """
    return _evaluate_all(slopes, intercepts, xs).max(axis=0)


def min_of_lines(slopes: Sequence, intercepts: Sequence, xs: Sequence) -> np.ndarray:
    """
    For each x in xs: min over all lines of (k*x + m).
    """
    return _evaluate_all(slopes, intercepts, xs).min(axis=0)
