"""CLI application entry point for polytree.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer

from polytree import __version__
from polytree.cli.output import (
    console,
    print_boundary_info,
    print_error,
    print_header,
    print_results,
    print_step,
    print_tree_summary,
)
from polytree.config import LoggingConfig, PolyTreeSettings, TreeConfig
from polytree.core import PolygonTree, TreeBuilder
from polytree.exceptions import PolyFileError, PolyTreeError
from polytree.io import PolyFileReader
from polytree.utils import BuildLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="polytree",
    help="Fast point-in-polygon checks against .poly boundary files.",
    add_completion=False,
    no_args_is_help=True,
)

LeafThreshold = Annotated[
    int,
    typer.Option(
        "--leaf-threshold",
        "-l",
        help="Maximum points per leaf node",
        min=6,
    ),
]
SliceCoef = Annotated[
    float,
    typer.Option(
        "--slice-coef",
        "-s",
        help="Grid cell count coefficient",
        min=0.01,
    ),
]
LogFile = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevel = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]polytree[/bold blue] v{__version__}")
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
    """Fast point-in-polygon checks against .poly boundary files."""


def _build_tree(boundary: Path, settings: PolyTreeSettings, quiet: bool) -> PolygonTree:
    """Load a boundary file and build its tree.

    Raises:
        typer.Exit: If the file is missing or cannot be indexed
    """
    if not boundary.is_file():
        print_error(
            f"Boundary file not found: {boundary}",
            details=f"The file '{boundary}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    build_logger = BuildLogger()
    if settings.logging.log_file is not None:
        configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
        build_logger = BuildLogger(structlog.get_logger("polytree.build"))

    try:
        with PolyFileReader(boundary) as reader:
            if not quiet:
                print_step("Loading boundary")
                print_boundary_info(
                    path=str(boundary),
                    name=reader.name,
                    contours=reader.contour_count,
                    points=reader.point_count,
                )
            contours = reader.contours

        if not quiet:
            print_step("Building tree")
        builder = TreeBuilder(config=settings.tree, logger=build_logger)
        return builder.build(*contours)
    except PolyFileError as e:
        print_error(f"Could not read boundary: {e.reason}")
        raise typer.Exit(code=1)
    except PolyTreeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _settings(
    leaf_threshold: int, slice_coef: float, log_file: Path | None, log_level: str
) -> PolyTreeSettings:
    return PolyTreeSettings(
        tree=TreeConfig(leaf_threshold=leaf_threshold, slice_coef=slice_coef),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def _parse_point(text: str) -> tuple[float, float]:
    """Parse an "X,Y" argument."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(text)
    return float(parts[0]), float(parts[1])


@app.command()
def info(
    boundary: Annotated[
        Path,
        typer.Argument(help="Path to a .poly boundary file", show_default=False),
    ],
    leaf_threshold: LeafThreshold = 16,
    slice_coef: SliceCoef = 2.0,
    log_file: LogFile = None,
    log_level: LogLevel = "WARNING",
) -> None:
    """Build the tree for a boundary file and show its shape."""
    print_header(__version__)
    settings = _settings(leaf_threshold, slice_coef, log_file, log_level)
    tree = _build_tree(boundary, settings, quiet=False)
    print_tree_summary(tree.bbox(), tree.stats, tree.depth())


@app.command()
def check(
    boundary: Annotated[
        Path,
        typer.Argument(help="Path to a .poly boundary file", show_default=False),
    ],
    points: Annotated[
        list[str],
        typer.Argument(
            help="Points as X,Y (put '--' before negative coordinates)",
            show_default=False,
        ),
    ],
    leaf_threshold: LeafThreshold = 16,
    slice_coef: SliceCoef = 2.0,
    log_file: LogFile = None,
    log_level: LogLevel = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print one result per line (1, 0 or -1)",
        ),
    ] = False,
) -> None:
    """Check whether points are inside a boundary.

    Example:
        polytree check boundary.poly 30.5,50.1 31,49.8
    """
    try:
        coords = [_parse_point(p) for p in points]
    except ValueError as e:
        print_error(f"Invalid point: {e}", details="Points are written as X,Y")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)
    settings = _settings(leaf_threshold, slice_coef, log_file, log_level)
    tree = _build_tree(boundary, settings, quiet=quiet)

    results = [(x, y, tree.contains((x, y))) for x, y in coords]
    if quiet:
        for _, _, result in results:
            typer.echo(str(result))
    else:
        print_step("Results")
        print_results(results)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
