# tests/conftest.py
"""
Shared fixtures and helpers for the line-container tests.
"""

import random

import pytest

from hull.line_container import LineContainer


def build(lines, domain="integer", cls=LineContainer):
    """Container holding the given (k, m) pairs, inserted in order."""
    hull = cls(domain)
    for k, m in lines:
        hull.insert(k, m)
    return hull


def brute_max(lines, x):
    return max(k * x + m for k, m in lines)


def brute_min(lines, x):
    return min(k * x + m for k, m in lines)


def random_lines(rng, n, limit=50):
    """Integer lines; a small range so equal slopes come up often."""
    return [(rng.randint(-limit, limit), rng.randint(-limit, limit)) for _ in range(n)]


def assert_envelope_valid(hull):
    """
    Survivors read by slope: strictly ascending slopes and breakpoints,
    and only the last one is +inf.
    """
    lines = hull.lines()
    slopes = [ln.slope for ln in lines]
    breakpoints = [ln.breakpoint for ln in lines]

    assert all(a < b for a, b in zip(slopes, slopes[1:])), slopes
    assert all(a < b for a, b in zip(breakpoints, breakpoints[1:])), breakpoints
    if lines:
        assert breakpoints[-1] == float("inf")
        assert all(p != float("inf") for p in breakpoints[:-1])
        assert all(p != float("-inf") for p in breakpoints)


@pytest.fixture
def rng():
    return random.Random(12345)


@pytest.fixture
def three_lines():
    return build([(1, 0), (-1, 0), (0, 5)])
