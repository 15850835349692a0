"""CLI application entry point for digitopo.

This module provides the main CLI interface using Typer.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer

from digitopo import __version__
from digitopo.cli.output import (
    console,
    print_bitmap_info,
    print_contours,
    print_error,
    print_header,
    print_step,
    print_success,
    print_surfaces,
)
from digitopo.config import (
    DigitopoSettings,
    LoggingConfig,
    TrackingConfig,
    TraversalConfig,
    TraversalStrategy,
)
from digitopo.core import BoundaryExtractor
from digitopo.domain import DigitalSet, FreemanChain
from digitopo.exceptions import BitmapError, DigitopoError
from digitopo.io import BitmapReader

# Create the Typer app
app = typer.Typer(
    name="digitopo",
    help="Extract contours and surfaces of digital shapes given as text bitmaps.",
    add_completion=False,
    no_args_is_help=True,
)

BitmapArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to a text bitmap ('#' foreground, '.' background; blank lines separate slices)",
        show_default=False,
    ),
]
ExteriorOption = Annotated[
    bool,
    typer.Option(
        "--exterior",
        "-e",
        help="Link bels through the exterior (8/18-connected foreground)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]digitopo[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
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
    """Extract contours and surfaces of digital shapes given as text bitmaps."""


def _settings(
    exterior: bool,
    log_file: Path | None,
    log_level: str,
    quiet: bool,
    strategy: TraversalStrategy = TraversalStrategy.BREADTH_FIRST,
) -> DigitopoSettings:
    return DigitopoSettings(
        tracking=TrackingConfig(interior_to_exterior=not exterior),
        traversal=TraversalConfig(strategy=strategy),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )


def _load(bitmap: Path, quiet: bool, volume: bool | None = None) -> DigitalSet:
    """Read a bitmap file, reporting it unless quiet."""
    if not bitmap.exists():
        print_error(
            f"Input file not found: {bitmap}",
            details=f"The file '{bitmap}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)
    if not quiet:
        print_step("Loading bitmap")
    with BitmapReader(bitmap) as reader:
        digital_set = reader.read(volume=volume)
    if not quiet:
        print_bitmap_info(
            str(bitmap), digital_set.domain.extent().to_tuple(), len(digital_set)
        )
    return digital_set


@app.command()
def contours(
    bitmap: BitmapArgument,
    exterior: ExteriorOption = False,
    freeman: Annotated[
        bool,
        typer.Option(
            "--freeman",
            "-f",
            help="Print the Freeman chain code of each contour",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print contours as JSON (implies --quiet)",
        ),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Extract every closed contour of a 2D bitmap.

    Outer borders are listed counter-clockwise, borders of holes clockwise.

    Example:
        digitopo contours shape.txt --freeman
    """
    quiet = quiet or json_output
    if not quiet:
        print_header(__version__)

    try:
        digital_set = _load(bitmap, quiet, volume=False)
        extractor = BoundaryExtractor(_settings(exterior, log_file, log_level, quiet))
        if not quiet:
            print_step("Tracking contours")
        start = time.time()
        extracted = extractor.extract_contours(digital_set)
        elapsed = time.time() - start
    except BitmapError as e:
        print_error(f"Could not load bitmap: {e}")
        raise typer.Exit(code=1)
    except DigitopoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if json_output:
        payload = []
        for contour in extracted:
            entry = contour.to_dict()
            if freeman:
                entry["freeman"] = str(FreemanChain.from_points(contour.points))
            payload.append(entry)
        typer.echo(json.dumps({"contours": payload}))
        return

    if not extracted:
        if not quiet:
            console.print("\nNo foreground points. Nothing to track.")
        return

    print_contours(extracted, freeman=freeman)
    if not quiet:
        holes = sum(1 for c in extracted if c.signed_area() < 0)
        print_success(
            elapsed,
            f"{len(extracted)} contours ({len(extracted) - holes} outer, {holes} holes)",
        )


@app.command()
def surface(
    bitmap: BitmapArgument,
    strategy: Annotated[
        TraversalStrategy,
        typer.Option(
            "--strategy",
            "-s",
            help="Traversal order of each surface",
            case_sensitive=False,
        ),
    ] = TraversalStrategy.BREADTH_FIRST,
    exterior: ExteriorOption = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Extract the boundary surfaces of a bitmap or volume and walk each one.

    Example:
        digitopo surface volume.txt --strategy depth
    """
    if not quiet:
        print_header(__version__)

    try:
        digital_set = _load(bitmap, quiet)
        extractor = BoundaryExtractor(
            _settings(exterior, log_file, log_level, quiet, strategy)
        )
        if not quiet:
            print_step("Extracting surfaces")
        start = time.time()
        surfaces = extractor.extract_surfaces(digital_set)
        visited = [len(extractor.traverse(s)) for s in surfaces]
        elapsed = time.time() - start
    except BitmapError as e:
        print_error(f"Could not load bitmap: {e}")
        raise typer.Exit(code=1)
    except DigitopoError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not surfaces:
        if not quiet:
            console.print("\nNo foreground points. Nothing to track.")
        return

    print_surfaces([s.size() for s in surfaces], visited, strategy.value)
    if not quiet:
        print_success(elapsed, f"{sum(visited)} surfels visited")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
