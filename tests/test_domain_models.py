"""Tests for domain models to verify they work correctly."""

import pytest

from onionmaze.domain import (
    CurveSegment,
    Edge,
    Gap,
    GapType,
    HullResult,
    Layer,
    MazeData,
    OnionResult,
    Passage,
    Point,
    Step,
)


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(100.0, 200.0, id=3)
        assert p.x == 100.0
        assert p.y == 200.0
        assert p.id == 3

    def test_derived_point_has_no_id(self) -> None:
        """Points built without a label have id None."""
        assert Point(1.0, 2.0).id is None

    def test_equality_ignores_id(self) -> None:
        """Points are compared by coordinates only."""
        assert Point(5, 5, id=0) == Point(5, 5, id=7)
        assert Point(5, 5) != Point(5, 6)

    def test_hash_ignores_id(self) -> None:
        """Equal coordinates hash the same regardless of label."""
        assert len({Point(1, 2, id=0), Point(1, 2, id=1)}) == 1

    def test_coincides_within_epsilon(self) -> None:
        """Coordinates closer than epsilon coincide."""
        assert Point(1.0, 1.0).coincides(Point(1.0 + 1e-12, 1.0 - 1e-12))
        assert not Point(1.0, 1.0).coincides(Point(1.0 + 1e-6, 1.0))
        assert Point(1.0, 1.0).coincides(Point(1.05, 1.0), epsilon=0.1)

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(100.0, 200.0).to_tuple() == (100.0, 200.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.0, 200.0, id=4)
        p2 = Point.from_dict(p1.to_dict())

        assert p2 == p1
        assert p2.id == 4

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(100.0, 200.0)
        with pytest.raises(AttributeError):
            p.x = 300.0  # type: ignore


class TestEdge:
    """Tests for Edge class."""

    def test_length_and_midpoint(self) -> None:
        """Edge length and midpoint follow its endpoints."""
        edge = Edge(Point(0, 0), Point(6, 8), layer_index=0, edge_index=2)
        assert edge.length == pytest.approx(10.0)
        assert edge.midpoint == Point(3.0, 4.0)
        assert edge.is_gap is False

    def test_edge_serialization(self) -> None:
        """Edge dictionaries carry endpoints and flags."""
        data = Edge(Point(0, 0), Point(1, 0), layer_index=1, edge_index=3, is_gap=True).to_dict()
        assert data["from"] == {"x": 0, "y": 0, "id": None}
        assert data["layer_index"] == 1
        assert data["edge_index"] == 3
        assert data["is_gap"] is True


class TestCurveSegment:
    """Tests for CurveSegment class."""

    @pytest.fixture
    def segment(self) -> CurveSegment:
        """Create a segment rounding the corner at the origin."""
        return CurveSegment(
            start=Point(0.0, 5.0),
            control=Point(0.0, 0.0),
            end=Point(5.0, 0.0),
            segment_index=0,
        )

    def test_point_at_endpoints(self, segment: CurveSegment) -> None:
        """The curve starts at start and ends at end."""
        assert segment.point_at(0.0) == segment.start
        assert segment.point_at(1.0) == segment.end

    def test_point_at_midpoint(self, segment: CurveSegment) -> None:
        """At t=0.5 the curve is a weighted average of its three points."""
        mid = segment.point_at(0.5)
        assert mid.x == pytest.approx(1.25)
        assert mid.y == pytest.approx(1.25)

    def test_default_closed(self, segment: CurveSegment) -> None:
        """Segments are drawn unless flagged open."""
        assert segment.is_open is False


class TestGapAndPassage:
    """Tests for gap records and passage markers."""

    def test_gap_midpoint(self) -> None:
        """Gap midpoint is halfway between its endpoints."""
        gap = Gap(0, 1, Point(30, 0), Point(50, 0), GapType.SMALL)
        assert gap.midpoint == Point(40.0, 0.0)

    def test_gap_serialization(self) -> None:
        """Gap type serializes to its string value."""
        data = Gap(2, 0, Point(0, 0), Point(10, 0), GapType.COMPLETE).to_dict()
        assert data["gap_type"] == "complete"
        assert data["midpoint"] == {"x": 5.0, "y": 0.0, "id": None}

    def test_passage_midpoint(self) -> None:
        """Passage midpoint marks where renderers draw the arrow."""
        passage = Passage(Point(0, 0), Point(0, 20), layer_index=0, edge_index=0)
        assert passage.midpoint == Point(0.0, 10.0)


class TestHullResult:
    """Tests for HullResult class."""

    def test_defaults(self) -> None:
        """A bare result has no traces and is not degenerate."""
        result = HullResult(hull_points=(Point(0, 0), Point(1, 1)))
        assert result.steps == ()
        assert result.all_steps == ()
        assert result.degenerate is False

    def test_serialization_summarizes_checks(self) -> None:
        """Check steps are counted unless explicitly included."""
        step = Step(
            edge=(Point(0, 0), Point(1, 0)),
            hull_so_far=(Point(0, 0), Point(1, 0)),
            step_number=0,
            message="Added edge from (0, 0) to (1, 0)",
        )
        result = HullResult(hull_points=(Point(0, 0),), steps=(step,))

        data = result.to_dict()
        assert data["check_count"] == 0
        assert "all_steps" not in data
        assert data["steps"][0]["message"] == "Added edge from (0, 0) to (1, 0)"
        assert "all_steps" in result.to_dict(include_checks=True)


class TestMazeData:
    """Tests for MazeData class."""

    def test_edges_for_layer_merges_in_cycle_order(self) -> None:
        """Kept and removed edges of a layer come back sorted by index."""
        a, b, c = Point(0, 0), Point(10, 0), Point(0, 10)
        maze = MazeData(
            edges_to_keep=(Edge(a, b, 0, 0), Edge(c, a, 0, 2), Edge(a, b, 1, 0)),
            edges_to_remove=(Edge(b, c, 0, 1, is_gap=True),),
            passages=(),
            smooth_curves=(),
            start_position=Point(3, 3),
            end_position=None,
            gaps=(),
        )

        edges = maze.edges_for_layer(0)
        assert [e.edge_index for e in edges] == [0, 1, 2]
        assert edges[1].is_gap

    def test_serialization_without_end(self) -> None:
        """A maze without exit serializes end_position as None."""
        maze = MazeData((), (), (), (), Point(1, 1), None, ())
        data = maze.to_dict()
        assert data["end_position"] is None
        assert data["start_position"] == {"x": 1, "y": 1, "id": None}


class TestOnionResult:
    """Tests for OnionResult class."""

    def test_serialization(self) -> None:
        """Layers and counts survive serialization."""
        square = (Point(0, 0), Point(10, 0), Point(10, 10), Point(0, 10))
        result = OnionResult(
            layers=(Layer(hull=square, layer_index=0),),
            inner_points=(Point(5, 5),),
            centroid=Point(5.0, 5.0),
            maze_data=None,
            removed_points_count=0,
            removed_points=(),
            all_hull_points=square,
        )

        data = result.to_dict()
        assert len(data["layers"]) == 1
        assert data["layers"][0]["layer_index"] == 0
        assert data["maze_data"] is None
        assert data["inner_points"] == [{"x": 5, "y": 5, "id": None}]
