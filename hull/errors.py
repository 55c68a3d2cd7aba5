"""
Exceptions raised by the line container.

Equal slopes are not an error: they are resolved by the dominance
evaluator's tie-break. Numeric overflow is not detected.
"""


class HullError(Exception):
    """Base class for line-container errors."""


class EmptyEnvelopeError(HullError, AssertionError):
    """
    Raised when a container with no lines is queried.

    There is no meaningful maximum over an empty set, so this is treated
    as a broken precondition (it is also an AssertionError).
    """

    def __init__(self, message="query on an empty line container"):
        super().__init__(message)
