"""Domain models for onionmaze.

This module contains the value types exchanged between the engine stages and
handed to renderers. All models are:

- Immutable (frozen dataclasses, tuples for sequences)
- Serializable to plain dictionaries for JSON output
- Free of any rendering concerns

Key classes:
- Point: A 2D point with a sampling label
- Step / CheckStep / HullResult: Gift Wrapping output and traces
- Layer / OnionResult: Onion decomposition output
- Edge / Gap / Passage / CurveSegment / LayerCurves / MazeData: Maze output
"""

from onionmaze.domain.hull import CheckStep, HullResult, Step
from onionmaze.domain.maze import (
    Gap,
    GapType,
    Layer,
    LayerCurves,
    MazeData,
    OnionResult,
    Passage,
)
from onionmaze.domain.point import EPSILON, CurveSegment, Edge, Point

__all__: list[str] = [
    "EPSILON",
    # Enums
    "GapType",
    # Core types
    "Point",
    "Edge",
    "CurveSegment",
    # Hull
    "Step",
    "CheckStep",
    "HullResult",
    # Onion and maze
    "Layer",
    "Gap",
    "Passage",
    "LayerCurves",
    "MazeData",
    "OnionResult",
]
