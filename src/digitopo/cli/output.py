"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from digitopo.domain import Contour, FreemanChain

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]digitopo[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_bitmap_info(bitmap_path: str, extent: tuple[int, ...], foreground: int) -> None:
    """Print bitmap information.

    Args:
        bitmap_path: Path to the bitmap file
        extent: Size along each axis
        foreground: Number of foreground points
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(bitmap_path)
    line.append(f" ({'x'.join(str(e) for e in extent)})")
    console.print(line)
    console.print(f"  {foreground:,} foreground points")


def print_contours(contours: list[Contour], freeman: bool = False) -> None:
    """Print one table row per contour, optionally with its Freeman chain.

    Args:
        contours: Extracted contours
        freeman: Also print each contour's chain code
    """
    table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
    table.add_column("#", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Area", justify="right")
    table.add_column("Direction")
    for index, contour in enumerate(contours):
        winding = contour.winding()
        table.add_row(
            str(index),
            str(len(contour)),
            f"{abs(contour.signed_area()):g}",
            winding.name.lower() if winding else "-",
        )
    console.print(table)
    if freeman:
        for index, contour in enumerate(contours):
            chain = FreemanChain.from_points(contour.points)
            console.print(f"  {index}: {chain}", soft_wrap=True, highlight=False)


def print_surfaces(sizes: list[int], visited: list[int], strategy: str) -> None:
    """Print one line per surface with its traversal result.

    Args:
        sizes: Surfel count of each surface
        visited: Surfels reached by the traversal of each surface
        strategy: Traversal strategy used
    """
    console.print(f"  {len(sizes)} surfaces {SYM_DOT} {strategy}-first traversal")
    for index, (size, count) in enumerate(zip(sizes, visited)):
        style = "green" if size == count else "red"
        console.print(
            f"  {index}: {size} surfels {SYM_DOT} [{style}]{count} visited[/{style}]"
        )


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


def print_success(total_time_s: float, summary: str) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total extraction time in seconds
        summary: One-line summary of the results
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    console.print(f"  {summary}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
