"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

import json
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from onionmaze.domain import HullResult, OnionResult, Point

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_ARROW = "→"  # Hull chain


def format_point(point: Point | None) -> str:
    """Format a point as rounded (x, y)."""
    if point is None:
        return "-"
    return f"({round(point.x)}, {round(point.y)})"


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Onionmaze[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_sampling_info(count: int, width: int, height: int, seed: int | None) -> None:
    """Print sampling parameters.

    Args:
        count: Number of sampled points
        width: Canvas width
        height: Canvas height
        seed: Random seed, None if unseeded
    """
    seed_str = str(seed) if seed is not None else "random"
    console.print(f"  {count} points {SYM_DOT} {width}x{height} canvas {SYM_DOT} seed {seed_str}")


def print_hull_summary(point_count: int, result: HullResult, show_steps: bool) -> None:
    """Print hull statistics and the hull chain.

    Args:
        point_count: Number of input points
        result: Hull computation result
        show_steps: Also list every construction step
    """
    console.print(
        f"  {point_count} points {SYM_DOT} {len(result.hull_points)} hull vertices "
        f"{SYM_DOT} {len(result.steps)} steps {SYM_DOT} {len(result.all_steps)} checks"
    )
    if result.degenerate:
        console.print("  [yellow]Degenerate hull (collinear input)[/yellow]")

    chain = Text("  ")
    chain.append(f" {SYM_ARROW} ".join(format_point(p) for p in result.hull_points))
    console.print(chain)

    if show_steps:
        for step in result.steps:
            console.print(f"  {step.step_number + 1:>3}. {step.message}")


def print_onion_summary(result: OnionResult) -> None:
    """Print the layer table and maze endpoints.

    Args:
        result: Onion decomposition result
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Layer", justify="right")
    table.add_column("Vertices", justify="right")
    table.add_column("Gap")
    table.add_column("Edge", justify="right")
    table.add_column("Opening")

    gaps = {g.layer_index: g for g in result.maze_data.gaps} if result.maze_data else {}
    for layer in result.layers:
        gap = gaps.get(layer.layer_index)
        table.add_row(
            str(layer.layer_index),
            str(len(layer.hull)),
            gap.gap_type.value if gap else "-",
            str(gap.edge_index) if gap else "-",
            f"{format_point(gap.gap_start)} {SYM_ARROW} {format_point(gap.gap_end)}" if gap else "-",
        )

    console.print(table)
    console.print(
        f"\n  {len(result.layers)} layers {SYM_DOT} {result.removed_points_count} removed "
        f"{SYM_DOT} {len(result.inner_points)} inner points"
    )

    maze = result.maze_data
    if maze is not None:
        console.print(
            f"  start {format_point(maze.start_position)} {SYM_DOT} "
            f"end {format_point(maze.end_position)}"
        )


def print_json(data: dict[str, Any]) -> None:
    """Print data as JSON on stdout without Rich markup."""
    print(json.dumps(data, indent=2))


def print_success(duration_s: float) -> None:
    """Print completion message.

    Args:
        duration_s: Run duration in seconds
    """
    if duration_s < 1:
        time_str = f"{duration_s * 1000:.0f}ms"
    else:
        time_str = f"{duration_s:.1f}s"
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
