"""Orchestration of the sampling, hull, and maze stages.

This module wires the engine stages together from application settings:
- MazeGenerator: samples points, computes the hull, and builds the onion maze
- GenerationReport: everything one generation run produced
"""

import random
import time
from dataclasses import dataclass
from typing import Any

from onionmaze.config import OnionMazeSettings
from onionmaze.core.hull import compute_hull
from onionmaze.core.onion import decompose
from onionmaze.core.sampler import generate_points
from onionmaze.domain import HullResult, OnionResult, Point
from onionmaze.exceptions import PointCountError
from onionmaze.utils import GenerationStats, RunLogger, configure_logging


@dataclass(frozen=True)
class GenerationReport:
    """Output of one generation run.

    Attributes:
        seed: Seed of the run's random source (None if unseeded)
        points: Sampled points
        hull: Convex hull of all sampled points
        onion: Onion decomposition and maze
        stats: Run statistics
    """

    seed: int | None
    points: tuple[Point, ...]
    hull: HullResult
    onion: OnionResult
    stats: GenerationStats

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "seed": self.seed,
            "points": [p.to_dict() for p in self.points],
            "hull": self.hull.to_dict(),
            "onion": self.onion.to_dict(),
        }


class MazeGenerator:
    """Runs the engine stages with a single set of settings.

    Example:
        generator = MazeGenerator(OnionMazeSettings())
        report = generator.generate(40, seed=7)
        print(len(report.onion.layers))
    """

    def __init__(self, config: OnionMazeSettings, quiet: bool = False) -> None:
        """Initialize the generator and configure logging.

        Args:
            config: Application settings
            quiet: Suppress console log output except errors
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.run_logger = RunLogger(self.logger)

    def sample(self, num_points: int, rng: random.Random) -> tuple[Point, ...]:
        """Sample points on the configured canvas.

        Args:
            num_points: Number of points
            rng: Random source

        Returns:
            Sampled points

        Raises:
            PointCountError: If num_points is outside the configured bounds
        """
        sampling = self.config.sampling
        if not sampling.min_points <= num_points <= sampling.max_points:
            raise PointCountError(num_points, sampling.min_points, sampling.max_points)

        canvas = self.config.canvas
        return generate_points(num_points, canvas.width, canvas.height, canvas.padding, rng=rng)

    def hull(self, points: tuple[Point, ...]) -> HullResult:
        """Compute the convex hull of points with the configured tolerance."""
        start = time.perf_counter()
        result = compute_hull(points, self.config.geometry.epsilon)
        self.run_logger.log_hull_computed(result, (time.perf_counter() - start) * 1000)
        return result

    def generate(self, num_points: int | None = None, seed: int | None = None) -> GenerationReport:
        """Sample points, compute their hull, and build the onion maze.

        One random source, seeded once, drives both sampling and gap carving,
        so equal seeds give equal reports.

        Args:
            num_points: Number of points (configured default if None)
            seed: Seed for the random source (unseeded if None)

        Returns:
            GenerationReport for the run

        Raises:
            PointCountError: If num_points is outside the configured bounds
        """
        if num_points is None:
            num_points = self.config.sampling.default_points

        self.run_logger = RunLogger(self.logger)
        stats = self.run_logger.stats
        stats.start_time = time.time()
        rng = random.Random(seed)

        points = self.sample(num_points, rng)
        self.run_logger.log_points_sampled(len(points), seed)

        hull = self.hull(points)

        start = time.perf_counter()
        maze = self.config.maze
        onion = decompose(
            points,
            self.config.geometry.edge_proximity_threshold,
            gap_size=maze.gap_size,
            edge_margin=maze.edge_margin,
            end_position=maze.end_position(self.config.canvas),
            rng=rng,
            epsilon=self.config.geometry.epsilon,
        )
        duration_ms = (time.perf_counter() - start) * 1000

        for layer in onion.layers:
            self.run_logger.log_layer_peeled(layer)
        if onion.maze_data is not None:
            for gap in onion.maze_data.gaps:
                self.run_logger.log_gap_carved(gap)
        self.run_logger.log_decomposition(
            onion.removed_points_count, len(onion.inner_points), duration_ms
        )

        stats.end_time = time.time()
        return GenerationReport(seed=seed, points=points, hull=hull, onion=onion, stats=stats)
