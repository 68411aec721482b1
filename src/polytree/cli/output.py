"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from polytree.domain import BBox
from polytree.utils import BuildStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info

RESULT_LABELS = {
    1: "[green]inside[/green]",
    0: "[dim]outside[/dim]",
    -1: "[yellow]boundary[/yellow]",
}


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]polytree[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_boundary_info(path: str, name: str | None, contours: int, points: int) -> None:
    """Print boundary file information.

    Args:
        path: Path to the boundary file
        name: Boundary name from the file header
        contours: Number of outer contours
        points: Total number of points
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(path)
    if name:
        line1.append(f" ({name})")
    console.print(line1)
    console.print(f"  {contours:,} contours {SYM_DOT} {points:,} points")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_tree_summary(bbox: BBox, stats: BuildStats, depth: int) -> None:
    """Print the shape of a built tree.

    Args:
        bbox: Overall bounding box
        stats: Build statistics
        depth: Number of branch levels
    """
    console.print(
        f"\n[bold green]{SYM_OK} Built[/bold green] in {_format_time(stats.duration_seconds)}"
    )
    xmin, ymin, xmax, ymax = bbox.to_tuple()
    console.print(f"  bbox {xmin:g} {ymin:g} {SYM_DOT} {xmax:g} {ymax:g}")
    console.print(
        f"  {stats.node_count} nodes {SYM_DOT} {stats.branches} branches {SYM_DOT} "
        f"{stats.leaves} leaves {SYM_DOT} depth {depth}"
    )
    console.print(
        f"  {stats.clip_calls} cells {SYM_DOT} {stats.empty_cells} empty {SYM_DOT} "
        f"{stats.full_cells} full"
    )


def print_results(results: list[tuple[float, float, int]]) -> None:
    """Print containment results as a table.

    Args:
        results: (x, y, result) triples
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("x", justify="right")
    table.add_column("y", justify="right")
    table.add_column("result")
    for x, y, result in results:
        table.add_row(f"{x:g}", f"{y:g}", RESULT_LABELS[result])
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
