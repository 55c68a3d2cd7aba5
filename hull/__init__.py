"""
Line Container Package

Dynamic upper envelope of lines ("convex hull trick"):
- Ordered line storage (by slope and by breakpoint)
- Dominance evaluation between neighbouring lines
- Insert / query engine, plus the minimum-of-lines variant
"""

from .errors import HullError, EmptyEnvelopeError
from .ordered_set import OrderedLineSet
from .dominance import compute_breakpoint, intersect
from .line_container import LineContainer, MinLineContainer

__all__ = [
    "HullError",
    "EmptyEnvelopeError",
    "OrderedLineSet",
    "compute_breakpoint",
    "intersect",
    "LineContainer",
    "MinLineContainer",
]
