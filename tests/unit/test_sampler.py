"""Unit tests for random point sampling."""

import random

import pytest

from onionmaze.core.sampler import generate_points, sampling_capacity
from onionmaze.exceptions import OnionMazeError, SamplingError


class TestGeneratePoints:
    """Test point generation on a padded canvas."""

    def test_count_and_ids(self):
        """Exactly n points labelled 0..n-1 in order."""
        points = generate_points(40, 900, 600, 50, rng=random.Random(1))
        assert len(points) == 40
        assert [p.id for p in points] == list(range(40))

    def test_points_are_distinct(self):
        points = generate_points(100, 900, 600, 50, rng=random.Random(2))
        assert len({p.to_tuple() for p in points}) == 100

    def test_points_within_padding(self):
        """All coordinates are integers inside [padding, size - padding]."""
        points = generate_points(100, 900, 600, 50, rng=random.Random(3))
        for p in points:
            assert 50 <= p.x <= 850
            assert 50 <= p.y <= 550
            assert float(p.x).is_integer()
            assert float(p.y).is_integer()

    def test_reproducible_with_seed(self):
        first = generate_points(25, 900, 600, 50, rng=random.Random(42))
        second = generate_points(25, 900, 600, 50, rng=random.Random(42))
        assert first == second

    def test_different_seeds_differ(self):
        first = generate_points(25, 900, 600, 50, rng=random.Random(1))
        second = generate_points(25, 900, 600, 50, rng=random.Random(2))
        assert first != second

    def test_zero_points(self):
        assert generate_points(0, 900, 600) == ()

    def test_unseeded(self):
        """Without an rng a fresh source is used."""
        assert len(generate_points(5, 900, 600)) == 5

    def test_fills_tiny_canvas(self):
        """A box with exactly n positions yields all of them."""
        points = generate_points(9, 10, 10, 4, rng=random.Random(0))
        assert {p.to_tuple() for p in points} == {(x, y) for x in (4, 5, 6) for y in (4, 5, 6)}


class TestSamplingErrors:
    """Test rejection of impossible requests."""

    def test_negative_count(self):
        with pytest.raises(SamplingError, match="must not be negative"):
            generate_points(-1, 900, 600)

    def test_capacity_exceeded(self):
        with pytest.raises(SamplingError) as exc_info:
            generate_points(10, 10, 10, 4, rng=random.Random(0))
        assert exc_info.value.n == 10
        assert "only 9 distinct positions" in str(exc_info.value)

    def test_error_hierarchy(self):
        """Sampling errors are catchable as the package base error."""
        with pytest.raises(OnionMazeError):
            generate_points(-5, 900, 600)


class TestSamplingCapacity:
    """Test counting of available positions."""

    def test_default_canvas(self):
        assert sampling_capacity(900, 600, 50) == 801 * 501

    def test_padding_swallows_canvas(self):
        assert sampling_capacity(100, 100, 60) == 0
