"""Maze synthesis from onion layers.

Every layer gets exactly one opening on a randomly chosen edge:

- Long edges (longer than 2 * edge_margin + gap_size) get a short gap of
  gap_size, placed at least edge_margin away from both endpoints. The gap
  endpoints are inserted into the layer's vertex cycle so the gap becomes its
  own micro-edge.
- Short edges are opened completely.

The gap-modified cycles are then split into wall and gap edges and smoothed
into Bezier boundaries. Both curve segments covering half of a gap edge are
flagged open, so a drawn boundary never crosses the opening. The maze starts at
the center of the innermost layer and exits at a fixed point near the
bottom-left canvas corner.
"""

import logging
import random
from collections.abc import Sequence

from onionmaze.core.geometry import distance, lerp
from onionmaze.core.smoothing import smooth_hull
from onionmaze.domain import (
    Edge,
    Gap,
    GapType,
    Layer,
    LayerCurves,
    MazeData,
    Passage,
    Point,
)

logger = logging.getLogger(__name__)

# Exit for the default 900x600 canvas: 70px from the left, 50px from the bottom
DEFAULT_END_POSITION = Point(70.0, 550.0)


class MazeBuilder:
    """Carves passages into onion layers and assembles the maze.

    The builder holds only its parameters and random source; each call to
    build() returns a fresh MazeData.
    """

    def __init__(
        self,
        gap_size: float = 20.0,
        edge_margin: float = 30.0,
        end_position: Point | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            gap_size: Length of a carved sub-segment gap
            edge_margin: Minimum distance between a gap and the edge endpoints
            end_position: Maze exit, DEFAULT_END_POSITION if None
            rng: Random source for edge and offset selection
        """
        self.gap_size = gap_size
        self.edge_margin = edge_margin
        self.end_position = end_position if end_position is not None else DEFAULT_END_POSITION
        self.rng = rng if rng is not None else random.Random()

    def build(self, layers: Sequence[Layer], centroid: Point | None) -> MazeData:
        """Build the maze for a sequence of layers.

        Args:
            layers: Onion layers, outermost first
            centroid: Center of the innermost layer (maze start)

        Returns:
            MazeData with walls, gaps, passages, and smoothed boundaries
        """
        if not layers:
            return MazeData(
                edges_to_keep=(),
                edges_to_remove=(),
                passages=(),
                smooth_curves=(),
                start_position=centroid,
                end_position=None,
                gaps=(),
            )

        edges_to_keep: list[Edge] = []
        edges_to_remove: list[Edge] = []
        passages: list[Passage] = []
        smooth_curves: list[LayerCurves] = []
        gaps: list[Gap] = []

        for layer in layers:
            if len(layer.hull) < 3:
                logger.warning(
                    "Skipping layer %d with %d vertices", layer.layer_index, len(layer.hull)
                )
                continue

            gap, modified_hull, gap_micro_index = self._carve_gap(layer)
            gaps.append(gap)
            passages.append(
                Passage(
                    start=gap.gap_start,
                    end=gap.gap_end,
                    layer_index=layer.layer_index,
                    edge_index=gap.edge_index,
                )
            )

            smooth_curves.append(
                LayerCurves(
                    layer_index=layer.layer_index,
                    curves=smooth_hull(modified_hull, open_edges={gap_micro_index}),
                    modified_hull=modified_hull,
                    gap_edge_index=gap.edge_index,
                )
            )

            m = len(modified_hull)
            for j in range(m):
                edge = Edge(
                    from_point=modified_hull[j],
                    to_point=modified_hull[(j + 1) % m],
                    layer_index=layer.layer_index,
                    edge_index=j,
                    is_gap=j == gap_micro_index,
                )
                if edge.is_gap:
                    edges_to_remove.append(edge)
                else:
                    edges_to_keep.append(edge)

        return MazeData(
            edges_to_keep=tuple(edges_to_keep),
            edges_to_remove=tuple(edges_to_remove),
            passages=tuple(passages),
            smooth_curves=tuple(smooth_curves),
            start_position=centroid,
            end_position=self.end_position,
            gaps=tuple(gaps),
        )

    def _carve_gap(self, layer: Layer) -> tuple[Gap, tuple[Point, ...], int]:
        """Open one randomly chosen edge of a layer.

        Args:
            layer: Layer to open

        Returns:
            Tuple of (gap record, gap-modified vertex cycle, index of the gap
            micro-edge in that cycle)
        """
        hull = layer.hull
        n = len(hull)
        i = self.rng.randrange(n)
        current = hull[i]
        following = hull[(i + 1) % n]
        length = distance(current, following)

        if length > 2 * self.edge_margin + self.gap_size:
            min_t = self.edge_margin / length
            max_t = (length - self.edge_margin - self.gap_size) / length
            start_t = self.rng.uniform(min_t, max_t)
            end_t = start_t + self.gap_size / length

            gap = Gap(
                layer_index=layer.layer_index,
                edge_index=i,
                gap_start=lerp(current, following, start_t),
                gap_end=lerp(current, following, end_t),
                gap_type=GapType.SMALL,
            )
            modified = (*hull[: i + 1], gap.gap_start, gap.gap_end, *hull[i + 1 :])
            gap_micro_index = i + 1
        else:
            # Too short for a margined gap, open the whole edge
            gap = Gap(
                layer_index=layer.layer_index,
                edge_index=i,
                gap_start=current,
                gap_end=following,
                gap_type=GapType.COMPLETE,
            )
            modified = tuple(hull)
            gap_micro_index = i

        logger.debug(
            "Carved %s gap in layer %d on edge %d (length %.1f)",
            gap.gap_type.value,
            layer.layer_index,
            i,
            length,
        )
        return gap, modified, gap_micro_index


def build_maze(
    layers: Sequence[Layer],
    centroid: Point | None,
    gap_size: float = 20.0,
    edge_margin: float = 30.0,
    *,
    end_position: Point | None = None,
    rng: random.Random | None = None,
) -> MazeData:
    """Build a maze by opening one passage per onion layer.

    Args:
        layers: Onion layers, outermost first
        centroid: Center of the innermost layer (maze start)
        gap_size: Length of a carved sub-segment gap
        edge_margin: Minimum distance between a gap and the edge endpoints
        end_position: Maze exit, DEFAULT_END_POSITION if None
        rng: Random source for edge and offset selection

    Returns:
        MazeData for the layers
    """
    builder = MazeBuilder(
        gap_size=gap_size,
        edge_margin=edge_margin,
        end_position=end_position,
        rng=rng,
    )
    return builder.build(layers, centroid)
