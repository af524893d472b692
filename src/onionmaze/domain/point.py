"""Core geometric types for hull and maze representation.

This module defines the fundamental geometric types used throughout onionmaze:
- Point: A 2D point with an optional sampling label
- Edge: A directed boundary segment of a maze layer
- CurveSegment: A quadratic Bezier piece of a smoothed layer boundary
"""

import math
from dataclasses import dataclass, field
from typing import Any

EPSILON = 1e-9


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts. Equality and hashing use the
    coordinates only; the sampling label is ignored.

    Attributes:
        x: X coordinate in canvas units
        y: Y coordinate in canvas units
        id: Assignment-order index from the sampler, None for derived points
    """

    x: float
    y: float
    id: int | None = field(default=None, compare=False)

    def coincides(self, other: "Point", epsilon: float = EPSILON) -> bool:
        """Check whether two points share coordinates within a tolerance.

        Args:
            other: Point to compare with
            epsilon: Maximum per-axis difference

        Returns:
            True if both coordinates differ by less than epsilon
        """
        return abs(self.x - other.x) < epsilon and abs(self.y - other.y) < epsilon

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x, y, and id fields
        """
        return {"x": self.x, "y": self.y, "id": self.id}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x, y, and optional id fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"], id=data.get("id"))


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed segment of a layer boundary.

    Attributes:
        from_point: Segment start
        to_point: Segment end
        layer_index: Layer the edge belongs to (0 = outermost)
        edge_index: Position of the edge in the layer's gap-modified cycle
        is_gap: True if the edge is an opening rather than a wall
    """

    from_point: Point
    to_point: Point
    layer_index: int
    edge_index: int
    is_gap: bool = False

    @property
    def length(self) -> float:
        """Euclidean length of the edge."""
        return math.hypot(self.to_point.x - self.from_point.x, self.to_point.y - self.from_point.y)

    @property
    def midpoint(self) -> Point:
        """Point halfway along the edge."""
        return Point(
            (self.from_point.x + self.to_point.x) / 2,
            (self.from_point.y + self.to_point.y) / 2,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the edge
        """
        return {
            "from": self.from_point.to_dict(),
            "to": self.to_point.to_dict(),
            "layer_index": self.layer_index,
            "edge_index": self.edge_index,
            "is_gap": self.is_gap,
        }


@dataclass(frozen=True, slots=True)
class CurveSegment:
    """A quadratic Bezier segment rounding one corner of a polygon.

    The segment runs between the midpoints of the two edges meeting at the
    control vertex.

    Attributes:
        start: Midpoint of the incoming edge
        control: The polygon vertex being rounded
        end: Midpoint of the outgoing edge
        segment_index: Index of the control vertex in the polygon
        is_open: True if the incoming or outgoing edge is a passage, so
            renderers skip it
    """

    start: Point
    control: Point
    end: Point
    segment_index: int
    is_open: bool = False

    def point_at(self, t: float) -> Point:
        """Evaluate the curve at parameter t.

        Args:
            t: Curve parameter in [0, 1]

        Returns:
            Point on the curve
        """
        u = 1.0 - t
        return Point(
            u * u * self.start.x + 2 * u * t * self.control.x + t * t * self.end.x,
            u * u * self.start.y + 2 * u * t * self.control.y + t * t * self.end.y,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the segment
        """
        return {
            "start": self.start.to_dict(),
            "control": self.control.to_dict(),
            "end": self.end.to_dict(),
            "segment_index": self.segment_index,
            "is_open": self.is_open,
        }
