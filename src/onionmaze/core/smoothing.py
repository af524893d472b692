"""Corner rounding of polygons with quadratic Bezier segments.

Each polygon vertex becomes the control point of a quadratic Bezier running
between the midpoints of its two adjacent edges. The segments join at edge
midpoints and form a closed, smooth loop that bulges toward every vertex.
"""

from collections.abc import Collection, Sequence

from onionmaze.core._bezier import flatten_quadratic
from onionmaze.core.geometry import midpoint
from onionmaze.domain import CurveSegment, Point


def smooth_hull(
    vertices: Sequence[Point],
    open_edges: Collection[int] = frozenset(),
) -> tuple[CurveSegment, ...]:
    """Convert a closed polygon into quadratic Bezier segments.

    Segment i uses vertex i as control point and runs from the midpoint of
    edge (i-1, i) to the midpoint of edge (i, i+1), so it covers the back half
    of its incoming edge and the front half of its outgoing edge. A segment is
    flagged open when either of those edges is a passage; an open edge j
    therefore opens segments j and j+1. Segment indices stay aligned with
    vertex indices of the polygon.

    Args:
        vertices: Polygon vertices in order (at least 3)
        open_edges: Indices of edges (i, i+1) that are passages

    Returns:
        One segment per vertex, or an empty tuple for fewer than 3 vertices

    Examples:
        >>> square = [Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10)]
        >>> first = smooth_hull(square)[0]
        >>> (first.start.to_tuple(), first.control.to_tuple(), first.end.to_tuple())
        ((0.0, 5.0), (0, 0), (5.0, 0.0))
    """
    n = len(vertices)
    if n < 3:
        return ()

    segments: list[CurveSegment] = []
    for i in range(n):
        p0 = vertices[i - 1]
        p1 = vertices[i]
        p2 = vertices[(i + 1) % n]

        segments.append(
            CurveSegment(
                start=midpoint(p0, p1),
                control=p1,
                end=midpoint(p1, p2),
                segment_index=i,
                is_open=i in open_edges or (i - 1) % n in open_edges,
            )
        )

    return tuple(segments)


def flatten_curves(
    segments: Sequence[CurveSegment],
    tolerance: float = 1.0,
    include_open: bool = False,
) -> list[list[Point]]:
    """Approximate smoothed boundaries with polylines.

    Consecutive drawable segments are chained into one polyline. Open segments
    split the loop unless include_open is set, in which case a single closed
    polyline is returned.

    Args:
        segments: Segments of one closed boundary, in order
        tolerance: Maximum distance between polyline and curve
        include_open: Draw open segments too

    Returns:
        List of polylines, each a list of points

    Raises:
        ValueError: If tolerance is not positive
    """
    if tolerance <= 0:
        raise ValueError(f"Flattening tolerance must be positive, got {tolerance}")

    if not segments:
        return []

    open_flags = [s.is_open and not include_open for s in segments]
    if not any(open_flags):
        ordered = list(segments)
    else:
        # Rotate so the walk begins right after an open segment
        first_open = open_flags.index(True)
        ordered = list(segments[first_open + 1 :]) + list(segments[: first_open + 1])

    polylines: list[list[Point]] = []
    current: list[Point] = []

    for segment in ordered:
        if segment.is_open and not include_open:
            if current:
                polylines.append(current)
                current = []
            continue

        flattened = flatten_quadratic([segment.start, segment.control, segment.end], tolerance)
        if current:
            current.extend(flattened[1:])
        else:
            current.extend(flattened)

    if current:
        polylines.append(current)

    return polylines
