"""Random point sampling.

Points are drawn with integer coordinates inside a padded box and
deduplicated by coordinate, so every sampled point is geometrically distinct.
"""

import logging
import math
import random

from onionmaze.domain import Point
from onionmaze.exceptions import SamplingError

logger = logging.getLogger(__name__)


def sampling_capacity(width: float, height: float, padding: float) -> int:
    """Count the distinct integer positions available for sampling.

    Args:
        width: Canvas width
        height: Canvas height
        padding: Distance kept from every border

    Returns:
        Number of integer (x, y) pairs in the padded box
    """
    x_count = math.floor(width - padding) - math.ceil(padding) + 1
    y_count = math.floor(height - padding) - math.ceil(padding) + 1
    return max(0, x_count) * max(0, y_count)


def generate_points(
    n: int,
    width: float,
    height: float,
    padding: float = 50,
    rng: random.Random | None = None,
) -> tuple[Point, ...]:
    """Generate n distinct random points within the padded canvas.

    Args:
        n: Number of points to generate
        width: Canvas width
        height: Canvas height
        padding: Distance kept from every border
        rng: Random source, a fresh unseeded one if None

    Returns:
        Points with ids 0..n-1 in generation order

    Raises:
        SamplingError: If n is negative or the box cannot hold n distinct points
    """
    if n < 0:
        raise SamplingError(n, "point count must not be negative")

    capacity = sampling_capacity(width, height, padding)
    if n > capacity:
        raise SamplingError(
            n, f"only {capacity} distinct positions fit in a {width}x{height} canvas with padding {padding}"
        )

    if rng is None:
        rng = random.Random()

    x_min, x_max = math.ceil(padding), math.floor(width - padding)
    y_min, y_max = math.ceil(padding), math.floor(height - padding)

    points: list[Point] = []
    seen: set[tuple[int, int]] = set()
    draws = 0

    while len(points) < n:
        x = rng.randint(x_min, x_max)
        y = rng.randint(y_min, y_max)
        draws += 1

        if (x, y) in seen:
            continue

        seen.add((x, y))
        points.append(Point(x, y, id=len(points)))

    logger.debug("Sampled %d points in %d draws", n, draws)
    return tuple(points)
