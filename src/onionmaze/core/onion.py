"""Onion decomposition of a point set into nested convex hull layers.

The decomposer repeatedly computes the convex hull of the remaining points,
records it as a layer, and removes its vertices. Points lying within a
proximity threshold of any edge of the new hull are discarded too, so that
consecutive layers keep a visible distance from each other. Peeling stops
when fewer than 3 points remain.
"""

import logging
import random
from collections.abc import Sequence

from onionmaze.core.geometry import centroid as mean_point
from onionmaze.core.geometry import distance_to_segment, point_on_hull_boundary
from onionmaze.core.hull import compute_hull
from onionmaze.core.maze import build_maze
from onionmaze.domain import EPSILON, Layer, OnionResult, Point

logger = logging.getLogger(__name__)


def near_hull_edge(point: Point, hull: Sequence[Point], threshold: float) -> bool:
    """Check whether a point lies closer than threshold to any hull edge.

    Args:
        point: The point to test
        hull: Closed polygon vertices
        threshold: Distance limit (exclusive)

    Returns:
        True if some edge is closer than threshold
    """
    n = len(hull)
    return any(distance_to_segment(point, hull[i], hull[(i + 1) % n]) < threshold for i in range(n))


def decompose(
    points: Sequence[Point],
    edge_proximity_threshold: float = 15.0,
    *,
    gap_size: float = 20.0,
    edge_margin: float = 30.0,
    end_position: Point | None = None,
    rng: random.Random | None = None,
    epsilon: float = EPSILON,
) -> OnionResult:
    """Peel a point set into nested convex hull layers and build a maze.

    Args:
        points: Input points
        edge_proximity_threshold: Points closer than this to a peeled hull edge
            are removed along with the hull. With 0, points lying on a hull
            edge survive and can reappear on the next layer's boundary, so
            layers are no longer strictly nested
        gap_size: Passed to the maze builder
        edge_margin: Passed to the maze builder
        end_position: Maze exit passed to the maze builder
        rng: Random source for the maze builder
        epsilon: Tolerance for hull orientation and vertex matching

    Returns:
        OnionResult with layers, leftovers, removed points, centroid, and maze
    """
    if len(points) < 3:
        return OnionResult(
            layers=(),
            inner_points=tuple(points),
            centroid=None,
            maze_data=None,
            removed_points_count=0,
            removed_points=(),
            all_hull_points=(),
        )

    layers: list[Layer] = []
    remaining: list[Point] = list(points)
    removed_points: list[Point] = []
    all_hull_points: list[Point] = []

    while len(remaining) >= 3:
        hull_result = compute_hull(remaining, epsilon)
        hull = hull_result.hull_points

        if len(hull) < 3 or hull_result.degenerate:
            logger.debug("Stopping decomposition with %d collinear points left", len(remaining))
            break

        layers.append(Layer(hull=hull, layer_index=len(layers)))
        all_hull_points.extend(hull)

        kept: list[Point] = []
        removed_here = 0
        for point in remaining:
            if point_on_hull_boundary(point, hull, epsilon):
                continue
            if near_hull_edge(point, hull, edge_proximity_threshold):
                removed_points.append(point)
                removed_here += 1
            else:
                kept.append(point)

        logger.debug(
            "Peeled layer %d: %d vertices, %d points too close to its edges, %d left",
            len(layers) - 1,
            len(hull),
            removed_here,
            len(kept),
        )
        remaining = kept

    if layers:
        center = mean_point(layers[-1].hull)
    else:
        center = mean_point(remaining)

    maze_data = build_maze(
        layers,
        center,
        gap_size,
        edge_margin,
        end_position=end_position,
        rng=rng,
    )

    return OnionResult(
        layers=tuple(layers),
        inner_points=tuple(remaining),
        centroid=center,
        maze_data=maze_data,
        removed_points_count=len(removed_points),
        removed_points=tuple(removed_points),
        all_hull_points=tuple(all_hull_points),
    )
