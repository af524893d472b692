"""Convex hull construction with the Gift Wrapping (Jarvis March) algorithm.

Starting from the leftmost-lowest point, the algorithm repeatedly wraps to the
point that has every other point on its left, until it returns to the start.
Every finalized edge is recorded as a Step and every candidate comparison as a
CheckStep, so consumers can replay the construction.

The resulting hull winds counter-clockwise (positive signed area) in y-up
axes. Among collinear candidates the farthest one wins, so intermediate
collinear points never become hull vertices.
"""

import logging
from collections.abc import Sequence

from onionmaze.core.geometry import Orientation, distance_squared, orientation
from onionmaze.domain import EPSILON, CheckStep, HullResult, Point, Step

logger = logging.getLogger(__name__)


def _format_coordinate(value: float) -> str:
    return f"{value:g}"


def _edge_message(p1: Point, p2: Point) -> str:
    return (
        f"Added edge from ({_format_coordinate(p1.x)}, {_format_coordinate(p1.y)}) "
        f"to ({_format_coordinate(p2.x)}, {_format_coordinate(p2.y)})"
    )


def leftmost_index(points: Sequence[Point]) -> int:
    """Find the index of the point with minimum x, ties broken by minimum y.

    Args:
        points: Non-empty point sequence

    Returns:
        Index of the leftmost-lowest point (first occurrence)
    """
    best = 0
    for i in range(1, len(points)):
        p, q = points[i], points[best]
        if p.x < q.x or (p.x == q.x and p.y < q.y):
            best = i
    return best


def compute_hull(points: Sequence[Point], epsilon: float = EPSILON) -> HullResult:
    """Compute the convex hull of a point set with Gift Wrapping.

    Fewer than 3 points are returned unchanged with empty traces. Collinear
    input, or input where the wrap fails to close within one pass per point,
    yields a degenerate two-point hull spanning the extreme points.

    Args:
        points: Input points
        epsilon: Cross products below this are treated as collinear

    Returns:
        HullResult with hull vertices, edge steps, and comparison steps
    """
    pts = tuple(points)
    n = len(pts)

    if n < 3:
        return HullResult(hull_points=pts)

    start = leftmost_index(pts)
    hull: list[Point] = []
    steps: list[Step] = []
    checks: list[CheckStep] = []

    current = start
    closed = False

    # Each pass adds one vertex, so a proper hull closes within n passes
    for _ in range(n):
        hull.append(pts[current])
        origin = pts[current]
        candidate = (current + 1) % n

        for i in range(n):
            if i == current:
                continue

            checks.append(
                CheckStep(
                    from_point=origin,
                    to_point=pts[i],
                    candidate=pts[candidate],
                    current_hull=tuple(hull),
                    step_number=len(checks),
                )
            )

            turn = orientation(origin, pts[candidate], pts[i], epsilon)
            if turn is Orientation.CLOCKWISE:
                # i lies right of origin->candidate, so candidate is not a hull edge
                candidate = i
            elif turn is Orientation.COLLINEAR and distance_squared(origin, pts[i]) > distance_squared(
                origin, pts[candidate]
            ):
                candidate = i

        steps.append(
            Step(
                edge=(origin, pts[candidate]),
                hull_so_far=(*hull, pts[candidate]),
                step_number=len(steps),
                message=_edge_message(origin, pts[candidate]),
            )
        )

        current = candidate
        if current == start:
            closed = True
            break

    if not closed:
        logger.warning("Gift wrapping did not close after %d passes, using extreme points", n)
        return _extreme_segment(pts, start, tuple(checks))

    if len(hull) < 3:
        logger.warning("Hull of %d points is degenerate (%d vertices)", n, len(hull))
        return HullResult(
            hull_points=tuple(hull),
            steps=tuple(steps),
            all_steps=tuple(checks),
            degenerate=True,
        )

    logger.debug("Hull of %d points has %d vertices after %d checks", n, len(hull), len(checks))
    return HullResult(hull_points=tuple(hull), steps=tuple(steps), all_steps=tuple(checks))


def _extreme_segment(pts: tuple[Point, ...], start: int, checks: tuple[CheckStep, ...]) -> HullResult:
    """Build the two-point hull from the start vertex to the farthest point."""
    first = pts[start]
    far = max(
        (i for i in range(len(pts)) if i != start),
        key=lambda i: distance_squared(first, pts[i]),
    )
    second = pts[far]

    steps = (
        Step(
            edge=(first, second),
            hull_so_far=(first, second),
            step_number=0,
            message=_edge_message(first, second),
        ),
        Step(
            edge=(second, first),
            hull_so_far=(first, second, first),
            step_number=1,
            message=_edge_message(second, first),
        ),
    )
    return HullResult(hull_points=(first, second), steps=steps, all_steps=checks, degenerate=True)
