"""Hull construction records.

A Gift Wrapping run produces the final hull plus two traces: one Step per
finalized edge, and one CheckStep per candidate comparison. Consumers replay
the traces to animate the construction.
"""

from dataclasses import dataclass
from typing import Any

from onionmaze.domain.point import Point


@dataclass(frozen=True, slots=True)
class Step:
    """A finalized hull edge in construction order.

    Attributes:
        edge: (current vertex, next vertex)
        hull_so_far: Hull vertices found so far, including the next vertex
        step_number: Zero-based position in the construction order
        message: Human-readable description of the step
    """

    edge: tuple[Point, Point]
    hull_so_far: tuple[Point, ...]
    step_number: int
    message: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "edge": [p.to_dict() for p in self.edge],
            "hull_so_far": [p.to_dict() for p in self.hull_so_far],
            "step_number": self.step_number,
            "message": self.message,
        }


@dataclass(frozen=True, slots=True)
class CheckStep:
    """One candidate comparison of the inner Gift Wrapping search.

    Attributes:
        from_point: Current hull vertex
        to_point: Point being tested
        candidate: Best next vertex before this comparison
        current_hull: Snapshot of the hull at the time of the comparison
        step_number: Zero-based position across the whole run
    """

    from_point: Point
    to_point: Point
    candidate: Point
    current_hull: tuple[Point, ...]
    step_number: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "from": self.from_point.to_dict(),
            "to": self.to_point.to_dict(),
            "candidate": self.candidate.to_dict(),
            "current_hull": [p.to_dict() for p in self.current_hull],
            "step_number": self.step_number,
        }


@dataclass(frozen=True, slots=True)
class HullResult:
    """Result of one convex hull computation.

    Attributes:
        hull_points: Hull vertices, counter-clockwise from the leftmost-lowest point
        steps: One Step per hull edge
        all_steps: Every candidate comparison, in order
        degenerate: True if the input had no proper (area > 0) hull
    """

    hull_points: tuple[Point, ...]
    steps: tuple[Step, ...] = ()
    all_steps: tuple[CheckStep, ...] = ()
    degenerate: bool = False

    def to_dict(self, include_checks: bool = False) -> dict[str, Any]:
        """Serialize to dictionary.

        Args:
            include_checks: Include the (large) candidate comparison trace

        Returns:
            Dictionary representation of the hull result
        """
        data: dict[str, Any] = {
            "hull_points": [p.to_dict() for p in self.hull_points],
            "steps": [s.to_dict() for s in self.steps],
            "check_count": len(self.all_steps),
            "degenerate": self.degenerate,
        }
        if include_checks:
            data["all_steps"] = [s.to_dict() for s in self.all_steps]
        return data
