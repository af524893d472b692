"""Onion layers and maze structures.

This module defines the outputs of the layer decomposer and the maze
structurer: nested hull layers, carved gaps, smoothed layer boundaries, and
the maze that ties them together.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from onionmaze.domain.point import CurveSegment, Edge, Point


class GapType(str, Enum):
    """How a layer was opened.

    - SMALL: a short sub-segment was cut out of a long edge
    - COMPLETE: the whole edge was removed because it was too short
    """

    SMALL = "small"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class Layer:
    """One convex hull of the onion decomposition.

    Attributes:
        hull: Hull vertices in counter-clockwise order
        layer_index: Nesting depth, 0 for the outermost layer
    """

    hull: tuple[Point, ...]
    layer_index: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "hull": [p.to_dict() for p in self.hull],
            "layer_index": self.layer_index,
        }


@dataclass(frozen=True, slots=True)
class Gap:
    """The opening carved into one layer.

    Attributes:
        layer_index: Layer the gap was carved into
        edge_index: Index of the opened edge in the layer's original hull
        gap_start: Start of the opening
        gap_end: End of the opening
        gap_type: Sub-segment or whole-edge opening
    """

    layer_index: int
    edge_index: int
    gap_start: Point
    gap_end: Point
    gap_type: GapType

    @property
    def midpoint(self) -> Point:
        """Center of the opening."""
        return Point((self.gap_start.x + self.gap_end.x) / 2, (self.gap_start.y + self.gap_end.y) / 2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "layer_index": self.layer_index,
            "edge_index": self.edge_index,
            "gap_start": self.gap_start.to_dict(),
            "gap_end": self.gap_end.to_dict(),
            "gap_type": self.gap_type.value,
            "midpoint": self.midpoint.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Passage:
    """Marker for drawing an opening, pointing from start to end."""

    start: Point
    end: Point
    layer_index: int
    edge_index: int

    @property
    def midpoint(self) -> Point:
        """Center of the passage, where renderers put the arrow."""
        return Point((self.start.x + self.end.x) / 2, (self.start.y + self.end.y) / 2)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "from": self.start.to_dict(),
            "to": self.end.to_dict(),
            "layer_index": self.layer_index,
            "edge_index": self.edge_index,
            "midpoint": self.midpoint.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class LayerCurves:
    """Smoothed boundary of one layer.

    Attributes:
        layer_index: Layer the curves belong to
        curves: One quadratic Bezier per vertex of the modified hull
        modified_hull: Hull vertices with the gap endpoints inserted
        gap_edge_index: Index of the opened edge in the original hull
    """

    layer_index: int
    curves: tuple[CurveSegment, ...]
    modified_hull: tuple[Point, ...]
    gap_edge_index: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "layer_index": self.layer_index,
            "curves": [c.to_dict() for c in self.curves],
            "modified_hull": [p.to_dict() for p in self.modified_hull],
            "gap_edge_index": self.gap_edge_index,
        }


@dataclass(frozen=True, slots=True)
class MazeData:
    """A maze built from onion layers.

    Attributes:
        edges_to_keep: Wall edges of every layer
        edges_to_remove: Gap edges of every layer
        passages: One passage marker per layer
        smooth_curves: Smoothed boundary per layer
        start_position: Maze entry (center of the innermost layer)
        end_position: Maze exit, None when there are no layers
        gaps: One gap record per layer
    """

    edges_to_keep: tuple[Edge, ...]
    edges_to_remove: tuple[Edge, ...]
    passages: tuple[Passage, ...]
    smooth_curves: tuple[LayerCurves, ...]
    start_position: Point | None
    end_position: Point | None
    gaps: tuple[Gap, ...]

    def edges_for_layer(self, layer_index: int) -> list[Edge]:
        """Get all edges of one layer in cycle order.

        Args:
            layer_index: Layer to collect

        Returns:
            Kept and removed edges of the layer, sorted by edge index
        """
        edges = [e for e in self.edges_to_keep if e.layer_index == layer_index]
        edges.extend(e for e in self.edges_to_remove if e.layer_index == layer_index)
        return sorted(edges, key=lambda e: e.edge_index)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "edges_to_keep": [e.to_dict() for e in self.edges_to_keep],
            "edges_to_remove": [e.to_dict() for e in self.edges_to_remove],
            "passages": [p.to_dict() for p in self.passages],
            "smooth_curves": [c.to_dict() for c in self.smooth_curves],
            "start_position": self.start_position.to_dict() if self.start_position else None,
            "end_position": self.end_position.to_dict() if self.end_position else None,
            "gaps": [g.to_dict() for g in self.gaps],
        }


@dataclass(frozen=True, slots=True)
class OnionResult:
    """Result of an onion decomposition.

    Attributes:
        layers: Nested hulls, outermost first
        inner_points: Points left over once fewer than 3 remained
        centroid: Center of the innermost layer, None for fewer than 3 input points
        maze_data: Maze built from the layers, None for fewer than 3 input points
        removed_points_count: Number of points dropped by the proximity filter
        removed_points: Points dropped by the proximity filter
        all_hull_points: Vertices of every layer, outermost first
    """

    layers: tuple[Layer, ...]
    inner_points: tuple[Point, ...]
    centroid: Point | None
    maze_data: MazeData | None
    removed_points_count: int
    removed_points: tuple[Point, ...]
    all_hull_points: tuple[Point, ...]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "layers": [layer.to_dict() for layer in self.layers],
            "inner_points": [p.to_dict() for p in self.inner_points],
            "centroid": self.centroid.to_dict() if self.centroid else None,
            "maze_data": self.maze_data.to_dict() if self.maze_data else None,
            "removed_points_count": self.removed_points_count,
            "removed_points": [p.to_dict() for p in self.removed_points],
            "all_hull_points": [p.to_dict() for p in self.all_hull_points],
        }
