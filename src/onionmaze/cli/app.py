"""CLI application entry point for onionmaze.

This module provides the main CLI interface using Typer.
"""

import random
from collections.abc import Callable
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from onionmaze import __version__
from onionmaze.cli.output import (
    console,
    print_error,
    print_header,
    print_hull_summary,
    print_json,
    print_onion_summary,
    print_sampling_info,
    print_step,
    print_success,
)
from onionmaze.config import (
    CanvasConfig,
    GeometryConfig,
    LoggingConfig,
    MazeConfig,
    OnionMazeSettings,
)
from onionmaze.core import MazeGenerator
from onionmaze.exceptions import OnionMazeError

# Create the Typer app
app = typer.Typer(
    name="onionmaze",
    help="Compute convex hulls with Gift Wrapping and build mazes from onion layers.",
    add_completion=False,
    no_args_is_help=True,
)

PointsOption = Annotated[
    int,
    typer.Option("--points", "-n", help="Number of random points (3-100)"),
]
SeedOption = Annotated[
    int | None,
    typer.Option("--seed", "-s", help="Random seed for reproducible output"),
]
WidthOption = Annotated[int, typer.Option("--width", help="Canvas width")]
HeightOption = Annotated[int, typer.Option("--height", help="Canvas height")]
PaddingOption = Annotated[int, typer.Option("--padding", help="Distance kept from the canvas border")]
JsonOption = Annotated[bool, typer.Option("--json", help="Print the full result as JSON")]
LogFileOption = Annotated[Path | None, typer.Option("--log-file", help="Write detailed logs to file")]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOption = Annotated[bool, typer.Option("--quiet", "-q", help="Minimal console output")]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Onionmaze[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Compute convex hulls with Gift Wrapping and build mazes from onion layers."""


def _build_generator(settings_factory: Callable[[], OnionMazeSettings], quiet: bool) -> MazeGenerator:
    """Create a generator, turning invalid settings into a CLI error."""
    try:
        settings = settings_factory()
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        print_error("Invalid option", details=f"{location}: {first['msg']}")
        raise typer.Exit(code=1) from None
    return MazeGenerator(settings, quiet=quiet)


@app.command()
def hull(
    points: PointsOption = 30,
    seed: SeedOption = None,
    width: WidthOption = 900,
    height: HeightOption = 600,
    padding: PaddingOption = 50,
    steps: Annotated[bool, typer.Option("--steps", help="List every construction step")] = False,
    as_json: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Sample random points and compute their convex hull.

    Example:
        onionmaze hull -n 20 --seed 7 --steps
    """
    quiet = quiet or as_json
    generator = _build_generator(
        lambda: OnionMazeSettings(
            canvas=CanvasConfig(width=width, height=height, padding=padding),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        ),
        quiet,
    )

    try:
        sampled = generator.sample(points, random.Random(seed))
        result = generator.hull(sampled)
    except OnionMazeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if as_json:
        print_json(
            {
                "seed": seed,
                "points": [p.to_dict() for p in sampled],
                "hull": result.to_dict(),
            }
        )
        return

    if not quiet:
        print_header(__version__)
        print_step("Sampling points")
        print_sampling_info(len(sampled), width, height, seed)
        print_step("Gift wrapping")
    print_hull_summary(len(sampled), result, show_steps=steps)


@app.command()
def maze(
    points: PointsOption = 30,
    seed: SeedOption = None,
    width: WidthOption = 900,
    height: HeightOption = 600,
    padding: PaddingOption = 50,
    threshold: Annotated[
        float,
        typer.Option("--threshold", "-t", help="Drop points closer than this to a peeled hull edge"),
    ] = 15.0,
    gap_size: Annotated[float, typer.Option("--gap-size", help="Width of a carved passage")] = 20.0,
    edge_margin: Annotated[
        float,
        typer.Option("--edge-margin", help="Minimum distance between a passage and edge endpoints"),
    ] = 30.0,
    as_json: JsonOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Sample random points, peel them into hull layers, and build a maze.

    Example:
        onionmaze maze -n 40 --seed 7
    """
    quiet = quiet or as_json
    generator = _build_generator(
        lambda: OnionMazeSettings(
            canvas=CanvasConfig(width=width, height=height, padding=padding),
            geometry=GeometryConfig(edge_proximity_threshold=threshold),
            maze=MazeConfig(gap_size=gap_size, edge_margin=edge_margin),
            logging=LoggingConfig(log_file=log_file, log_level=log_level),
        ),
        quiet,
    )

    try:
        report = generator.generate(points, seed)
    except OnionMazeError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from None

    if as_json:
        print_json(report.to_dict())
        return

    if not quiet:
        print_header(__version__)
        print_step("Sampling points")
        print_sampling_info(len(report.points), width, height, seed)
        print_step("Peeling layers")
    print_onion_summary(report.onion)
    if not quiet:
        print_success(report.stats.duration_seconds)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
