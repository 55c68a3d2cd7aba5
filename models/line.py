class Line:
    """
    A single linear function y = k x + m held by a line container.

    Supports:
      - slope / intercept (fixed once created)
      - breakpoint: the largest x at which this line is still the maximum
        among its neighbours (set by the container, None until computed)
      - evaluation at x
    """

    id_num = 0

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, slope, intercept):
        Line.id_num += 1
        self.id = Line.id_num

        self.slope = slope
        self.intercept = intercept

        # context-dependent, rewritten whenever a neighbour changes
        self.breakpoint = None

    # ------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------
    def value_at(self, x):
        """y = k x + m"""
        return self.slope * x + self.intercept

    def is_parallel(self, other):
        return self.slope == other.slope

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return f"Line(id={self.id}, k={self.slope}, m={self.intercept}, p={self.breakpoint})"
