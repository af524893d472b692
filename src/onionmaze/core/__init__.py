"""Core algorithms for onionmaze.

This module contains the engine stages:

- Geometry primitives (orientation, distances, hull membership)
- Point sampling (distinct integer points in a padded box)
- Convex hull construction (Gift Wrapping with step traces)
- Onion decomposition (nested hull layers with a proximity filter)
- Maze structuring (one passage per layer, smoothed boundaries)

All stages are pure functions of their inputs apart from an injected
random source.

Key functions:
- generate_points: Sample distinct random points
- compute_hull: Gift Wrapping convex hull
- decompose: Onion decomposition plus maze
- build_maze: Maze from existing layers
- smooth_hull: Quadratic Bezier corner rounding

Key classes:
- MazeBuilder: Carves passages into layers
- MazeGenerator: Runs all stages from settings
"""

from onionmaze.core.geometry import (
    Orientation,
    centroid,
    cross_product,
    distance_to_segment,
    orientation,
    point_in_hull,
    point_on_hull_boundary,
    point_strictly_in_hull,
    polar_angle,
    signed_area,
)
from onionmaze.core.hull import compute_hull
from onionmaze.core.maze import DEFAULT_END_POSITION, MazeBuilder, build_maze
from onionmaze.core.onion import decompose
from onionmaze.core.pipeline import GenerationReport, MazeGenerator
from onionmaze.core.sampler import generate_points
from onionmaze.core.smoothing import flatten_curves, smooth_hull

__all__ = [
    "DEFAULT_END_POSITION",
    # Pipeline classes
    "GenerationReport",
    # Maze classes
    "MazeBuilder",
    "MazeGenerator",
    "Orientation",
    # Engine functions
    "build_maze",
    "centroid",
    "compute_hull",
    # Geometry functions
    "cross_product",
    "decompose",
    "distance_to_segment",
    "flatten_curves",
    "generate_points",
    "orientation",
    "point_in_hull",
    "point_on_hull_boundary",
    "point_strictly_in_hull",
    "polar_angle",
    "signed_area",
    "smooth_hull",
]
