"""Geometric primitives for hull construction and layer peeling.

This module provides core mathematical utilities for:
- Orientation tests (cross product with an epsilon for collinearity)
- Distances (point to point, point to segment)
- Interpolation (midpoints, linear interpolation along a segment)
- Convex hull membership (sign-consistency test, vertex coincidence)
- Centroid, polar angle, and signed area

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence
from enum import Enum

from onionmaze.domain import EPSILON, Point


class Orientation(Enum):
    """Turn direction of an ordered point triple."""

    COLLINEAR = 0
    CLOCKWISE = 1
    COUNTER_CLOCKWISE = 2


def cross_product(o: Point, a: Point, b: Point) -> float:
    """Calculate the cross product of vectors OA and OB.

    Args:
        o: Common origin
        a: End of the first vector
        b: End of the second vector

    Returns:
        Positive if O->A->B turns counter-clockwise, negative if clockwise,
        zero if the three points are collinear

    Examples:
        >>> cross_product(Point(0, 0), Point(1, 0), Point(0, 1))
        1
    """
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def orientation(p: Point, q: Point, r: Point, epsilon: float = EPSILON) -> Orientation:
    """Classify the turn p -> q -> r.

    Args:
        p: First point
        q: Second point
        r: Third point
        epsilon: Cross products with magnitude below this are collinear

    Returns:
        Orientation of the triple
    """
    value = cross_product(p, q, r)
    if abs(value) < epsilon:
        return Orientation.COLLINEAR
    return Orientation.COUNTER_CLOCKWISE if value > 0 else Orientation.CLOCKWISE


def distance_squared(p1: Point, p2: Point) -> float:
    """Calculate the squared Euclidean distance between two points."""
    return (p2.x - p1.x) ** 2 + (p2.y - p1.y) ** 2


def distance(p1: Point, p2: Point) -> float:
    """Calculate the Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def nearest_point_on_segment(point: Point, seg_start: Point, seg_end: Point) -> tuple[Point, float]:
    """Find the closest point on a line segment to a given point.

    Projects the point onto the infinite line, then clamps the projection
    parameter to [0, 1] to stay within the segment.

    Args:
        point: The point to project
        seg_start: Start point of line segment
        seg_end: End point of line segment

    Returns:
        Tuple of (nearest_point, distance)

    Examples:
        >>> nearest, dist = nearest_point_on_segment(Point(1, 1), Point(0, 0), Point(2, 0))
        >>> (nearest.x, nearest.y, dist)
        (1.0, 0.0, 1.0)
    """
    dx = seg_end.x - seg_start.x
    dy = seg_end.y - seg_start.y

    segment_length_sq = dx * dx + dy * dy
    if segment_length_sq == 0:
        return seg_start, distance(point, seg_start)

    t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / segment_length_sq
    t = max(0.0, min(1.0, t))

    nearest = Point(seg_start.x + t * dx, seg_start.y + t * dy)
    return nearest, distance(point, nearest)


def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
    """Calculate the minimum distance from a point to a line segment."""
    _, dist = nearest_point_on_segment(point, seg_start, seg_end)
    return dist


def midpoint(p1: Point, p2: Point) -> Point:
    """Calculate the point halfway between two points."""
    return Point((p1.x + p2.x) / 2, (p1.y + p2.y) / 2)


def lerp(p1: Point, p2: Point, t: float) -> Point:
    """Linearly interpolate between two points.

    Args:
        p1: Point at t = 0
        p2: Point at t = 1
        t: Interpolation parameter

    Returns:
        p1 + t * (p2 - p1)
    """
    return Point(p1.x + t * (p2.x - p1.x), p1.y + t * (p2.y - p1.y))


def polar_angle(origin: Point, p: Point) -> float:
    """Calculate the polar angle of p around origin, in radians."""
    return math.atan2(p.y - origin.y, p.x - origin.x)


def centroid(points: Sequence[Point]) -> Point:
    """Calculate the arithmetic mean of a set of points.

    Args:
        points: Points to average

    Returns:
        Mean point, or the origin for an empty sequence
    """
    if not points:
        return Point(0.0, 0.0)

    sum_x = sum(p.x for p in points)
    sum_y = sum(p.y for p in points)
    return Point(sum_x / len(points), sum_y / len(points))


def signed_area(points: Sequence[Point]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    The sign of the area indicates winding direction:
    - Positive area: counter-clockwise winding
    - Negative area: clockwise winding

    Args:
        points: List of points forming the polygon boundary

    Returns:
        Signed area in square units. Returns 0.0 for degenerate polygons.

    Examples:
        >>> square = [Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)]
        >>> signed_area(square)
        1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i].x * points[j].y
        area -= points[j].x * points[i].y

    return area / 2.0


def point_in_hull(point: Point, hull: Sequence[Point], epsilon: float = EPSILON) -> bool:
    """Determine if a point lies inside or on a convex polygon.

    Walks the hull edges and checks that the point is on the same side of
    every edge. Edges the point is collinear with are ignored, so boundary
    points count as inside.

    Args:
        point: The point to test
        hull: Convex polygon vertices, in either winding order
        epsilon: Cross products below this count as on the edge line

    Returns:
        True if point is inside or on the hull, False otherwise
    """
    n = len(hull)
    if n < 3:
        return False

    sign: bool | None = None
    for i in range(n):
        cross = cross_product(hull[i], hull[(i + 1) % n], point)
        if abs(cross) < epsilon:
            continue
        if sign is None:
            sign = cross > 0
        elif (cross > 0) != sign:
            return False

    return True


def point_strictly_in_hull(point: Point, hull: Sequence[Point], epsilon: float = EPSILON) -> bool:
    """Determine if a point lies in the interior of a convex polygon.

    Args:
        point: The point to test
        hull: Convex polygon vertices, in either winding order
        epsilon: Cross products below this count as on the boundary

    Returns:
        True if point is inside and not on any edge line
    """
    n = len(hull)
    if n < 3:
        return False

    winding = signed_area(hull) > 0
    for i in range(n):
        cross = cross_product(hull[i], hull[(i + 1) % n], point)
        if abs(cross) < epsilon or (cross > 0) != winding:
            return False

    return True


def point_on_hull_boundary(point: Point, hull: Sequence[Point], epsilon: float = EPSILON) -> bool:
    """Check whether a point coincides with one of the hull vertices.

    Args:
        point: The point to test
        hull: Hull vertices
        epsilon: Coordinate tolerance

    Returns:
        True if the point matches a hull vertex
    """
    return any(point.coincides(vertex, epsilon) for vertex in hull)
