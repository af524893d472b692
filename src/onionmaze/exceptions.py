"""Exception hierarchy for Onionmaze.

Geometric edge cases (too few points, collinear input, edges too short for a
margined gap) never raise; they resolve to empty or degenerate results.
Exceptions are reserved for requests that cannot be satisfied at all.
"""


class OnionMazeError(Exception):
    """Base exception for all Onionmaze errors."""

    pass


class SamplingError(OnionMazeError):
    """A point sampling request that cannot be satisfied."""

    def __init__(self, n: int, reason: str) -> None:
        self.n = n
        self.reason = reason
        super().__init__(f"Cannot sample {n} points: {reason}")


class PointCountError(SamplingError):
    """Requested point count is outside the configured bounds."""

    def __init__(self, n: int, minimum: int, maximum: int) -> None:
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(n, f"point count must be between {minimum} and {maximum}")
