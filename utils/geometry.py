"""
This module provides:
    - floor_div
    - true_div
    - line_intersect
"""


# ----------------------------------------------------------------------
#  DIVISION (ONE PER NUMERIC DOMAIN)
# ----------------------------------------------------------------------

def floor_div(a, b):
    """
    Integer division rounded toward negative infinity.

    Python's // already floors for negative quotients, e.g.
        floor_div(-7, 2) -> -4     (truncation would give -3)

    Operands are converted with int() first so numpy integers never wrap.
    """
    return int(a) // int(b)


def true_div(a, b):
    """Real division for the floating-point domain."""
    return a / b


# ----------------------------------------------------------------------
#  LINE INTERSECTION
# ----------------------------------------------------------------------

def line_intersect(k1, m1, k2, m2, divide=true_div):
    """
    x-coordinate where
        y = k1 x + m1
        y = k2 x + m2
    meet, computed with the given division.

    Returns:
        x or None if parallel (k1 == k2)
    """
    if k1 == k2:
        return None
    return divide(m2 - m1, k1 - k2)

