"""Unit tests for onion decomposition.

Tests cover:
- Layer peeling and the edge proximity filter
- Point conservation and strict nesting on random input
- Degenerate leftovers that stop peeling
"""

import random

import pytest

from onionmaze.core.geometry import point_strictly_in_hull
from onionmaze.core.hull import compute_hull
from onionmaze.core.onion import decompose, near_hull_edge
from onionmaze.core.sampler import generate_points
from onionmaze.domain import GapType, OnionResult, Point


def _pts(*coords: tuple[float, float]) -> list[Point]:
    return [Point(x, y, id=i) for i, (x, y) in enumerate(coords)]


@pytest.fixture
def nested_squares() -> list[Point]:
    """Two concentric squares around a center point."""
    return _pts(
        (0, 0), (100, 0), (100, 100), (0, 100),
        (30, 30), (70, 30), (70, 70), (30, 70),
        (50, 50),
    )  # fmt: skip


@pytest.fixture(params=[3, 11, 2024])
def random_result(request: pytest.FixtureRequest) -> tuple[list[Point], OnionResult]:
    """Decomposition of a random point set."""
    rng = random.Random(request.param)
    points = list(generate_points(80, 900, 600, 50, rng=rng))
    return points, decompose(points, rng=rng)


class TestDecompose:
    """Test layer peeling on hand-built inputs."""

    def test_square_with_center(self):
        """One layer, one leftover point, and a maze through the square."""
        points = _pts((0, 0), (10, 0), (10, 10), (0, 10), (5, 5))
        result = decompose(points, edge_proximity_threshold=1, rng=random.Random(0))

        assert len(result.layers) == 1
        assert result.layers[0].hull == (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))
        assert result.inner_points == (Point(5, 5),)
        assert result.removed_points_count == 0
        assert result.centroid == Point(5.0, 5.0)

        maze = result.maze_data
        assert maze is not None
        assert len(maze.gaps) == 1
        assert maze.gaps[0].gap_type is GapType.COMPLETE
        assert len(maze.edges_to_keep) == 3
        assert len(maze.edges_to_remove) == 1

    def test_nested_layers(self, nested_squares: list[Point]):
        result = decompose(nested_squares, rng=random.Random(0))

        assert [len(layer.hull) for layer in result.layers] == [4, 4]
        assert [layer.layer_index for layer in result.layers] == [0, 1]
        assert result.layers[1].hull[0] == Point(30, 30)
        assert result.inner_points == (Point(50, 50),)
        assert result.centroid == Point(50.0, 50.0)

    def test_points_near_edges_removed(self):
        points = _pts(
            (0, 0), (100, 0), (100, 100), (0, 100),
            (50, 5),
            (40, 40), (60, 40), (50, 60),
        )  # fmt: skip
        result = decompose(points, edge_proximity_threshold=15, rng=random.Random(0))

        assert result.removed_points == (Point(50, 5),)
        assert result.removed_points_count == 1
        assert len(result.layers) == 2
        assert set(result.layers[1].hull) == {Point(40, 40), Point(60, 40), Point(50, 60)}
        assert result.inner_points == ()

    def test_zero_threshold_keeps_everything(self, nested_squares: list[Point]):
        result = decompose(nested_squares, edge_proximity_threshold=0, rng=random.Random(0))
        assert result.removed_points_count == 0

    def test_zero_threshold_lets_edge_point_reappear(self):
        """A point on a peeled edge survives and lands on the next boundary."""
        points = _pts(
            (0, 0), (100, 0), (100, 100), (0, 100),
            (50, 0),
            (40, 40), (60, 40), (50, 60),
        )  # fmt: skip
        result = decompose(points, edge_proximity_threshold=0, rng=random.Random(0))

        assert len(result.layers) == 2
        assert Point(50, 0) in result.layers[1].hull
        assert not point_strictly_in_hull(Point(50, 0), result.layers[0].hull)

    def test_all_hull_points_in_layer_order(self, nested_squares: list[Point]):
        result = decompose(nested_squares, rng=random.Random(0))
        expected = [p for layer in result.layers for p in layer.hull]
        assert list(result.all_hull_points) == expected

    def test_centroid_is_maze_start(self, nested_squares: list[Point]):
        result = decompose(nested_squares, rng=random.Random(0))
        assert result.maze_data is not None
        assert result.maze_data.start_position == result.centroid

    def test_custom_end_position(self, nested_squares: list[Point]):
        result = decompose(nested_squares, end_position=Point(1, 2), rng=random.Random(0))
        assert result.maze_data is not None
        assert result.maze_data.end_position == Point(1, 2)


class TestDegenerateDecomposition:
    """Test inputs that produce no layers."""

    @pytest.mark.parametrize("count", [0, 1, 2])
    def test_too_few_points(self, count: int):
        points = _pts((1, 1), (2, 5))[:count]
        result = decompose(points)

        assert result.layers == ()
        assert list(result.inner_points) == points
        assert result.centroid is None
        assert result.maze_data is None

    def test_collinear_points(self):
        """Collinear input stays in inner_points and averages to the centroid."""
        points = _pts((0, 0), (10, 10), (20, 20), (30, 30))
        result = decompose(points, rng=random.Random(0))

        assert result.layers == ()
        assert len(result.inner_points) == 4
        assert result.centroid == Point(15.0, 15.0)
        assert result.maze_data is not None
        assert result.maze_data.end_position is None

    def test_collinear_remainder_stops_peeling(self):
        """Peeling stops when the leftovers are collinear."""
        points = _pts(
            (0, 0), (200, 0), (200, 200), (0, 200),
            (60, 100), (100, 100), (140, 100),
        )  # fmt: skip
        result = decompose(points, rng=random.Random(0))

        assert len(result.layers) == 1
        assert len(result.inner_points) == 3
        assert result.centroid == Point(100.0, 100.0)


class TestDecompositionProperties:
    """Test guarantees on random point sets."""

    def test_conservation(self, random_result: tuple[list[Point], OnionResult]):
        """Every input point ends up in exactly one bucket."""
        points, result = random_result
        layered = sum(len(layer.hull) for layer in result.layers)

        assert layered + len(result.inner_points) + result.removed_points_count == len(points)
        buckets = list(result.all_hull_points) + list(result.inner_points) + list(result.removed_points)
        assert set(buckets) == set(points)

    def test_layers_nest(self, random_result: tuple[list[Point], OnionResult]):
        """Every vertex of a layer lies strictly inside the layer around it."""
        _, result = random_result
        for outer, inner in zip(result.layers, result.layers[1:]):
            for vertex in inner.hull:
                assert point_strictly_in_hull(vertex, outer.hull)

    def test_terminates_with_few_leftovers(self, random_result: tuple[list[Point], OnionResult]):
        """Peeling stops only when the leftovers have no proper hull."""
        _, result = random_result
        assert len(result.layers) >= 1
        leftovers = result.inner_points
        assert len(leftovers) < 3 or compute_hull(leftovers).degenerate

    def test_one_gap_per_layer(self, random_result: tuple[list[Point], OnionResult]):
        _, result = random_result
        assert result.maze_data is not None
        assert len(result.maze_data.gaps) == len(result.layers)

    def test_leftovers_keep_distance_from_layers(
        self, random_result: tuple[list[Point], OnionResult]
    ):
        _, result = random_result
        for point in result.inner_points:
            for layer in result.layers:
                assert not near_hull_edge(point, layer.hull, 15.0)


class TestNearHullEdge:
    """Test edge proximity checks."""

    def test_near_and_far(self):
        square = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
        assert near_hull_edge(Point(50, 10), square, 15)
        assert not near_hull_edge(Point(50, 50), square, 15)

    def test_threshold_is_exclusive(self):
        square = [Point(0, 0), Point(100, 0), Point(100, 100), Point(0, 100)]
        assert not near_hull_edge(Point(50, 15), square, 15)
