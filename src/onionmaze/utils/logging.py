"""Logging utilities for Onionmaze."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

from onionmaze.domain import Gap, GapType, HullResult, Layer

_FILE_HANDLER_NAME = "onionmaze-file"
_CONSOLE_HANDLER_NAME = "onionmaze-console"


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    point_count: int = 0
    hull_vertices: int = 0
    hull_checks: int = 0
    layer_count: int = 0
    removed_count: int = 0
    inner_count: int = 0
    small_gaps: int = 0
    complete_gaps: int = 0
    degenerate_hulls: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces the handlers installed by a previous call
    for handler in list(root_logger.handlers):
        if handler.get_name() in (_FILE_HANDLER_NAME, _CONSOLE_HANDLER_NAME):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER_NAME)
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.set_name(_CONSOLE_HANDLER_NAME)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("onionmaze")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class RunLogger:
    """Logger for tracking a generation run and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_points_sampled(self, count: int, seed: int | None) -> None:
        """Log point sampling."""
        self._logger.info("Points sampled", count=count, seed=seed)
        self._stats.point_count = count

    def log_hull_computed(self, result: HullResult, duration_ms: float) -> None:
        """Log a completed hull computation."""
        self._logger.info(
            "Hull computed",
            vertices=len(result.hull_points),
            steps=len(result.steps),
            checks=len(result.all_steps),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.hull_vertices = len(result.hull_points)
        self._stats.hull_checks = len(result.all_steps)
        if result.degenerate:
            self.log_degenerate_hull(len(result.hull_points))

    def log_degenerate_hull(self, vertex_count: int) -> None:
        """Log a hull that collapsed to a segment or less."""
        self._logger.warning("Degenerate hull", vertices=vertex_count)
        self._stats.degenerate_hulls += 1

    def log_layer_peeled(self, layer: Layer) -> None:
        """Log one onion layer."""
        self._logger.debug(
            "Layer peeled",
            layer=layer.layer_index,
            vertices=len(layer.hull),
        )
        self._stats.layer_count += 1

    def log_gap_carved(self, gap: Gap) -> None:
        """Log the opening carved into a layer."""
        self._logger.debug(
            "Gap carved",
            layer=gap.layer_index,
            edge=gap.edge_index,
            gap_type=gap.gap_type.value,
        )
        if gap.gap_type is GapType.SMALL:
            self._stats.small_gaps += 1
        else:
            self._stats.complete_gaps += 1

    def log_decomposition(self, removed: int, inner: int, duration_ms: float) -> None:
        """Log the decomposition summary."""
        self._logger.info(
            "Decomposition complete",
            layers=self._stats.layer_count,
            removed=removed,
            inner=inner,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.removed_count = removed
        self._stats.inner_count = inner

    @property
    def stats(self) -> GenerationStats:
        """Get current run statistics."""
        return self._stats
