"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from stretchpath.domain import Bounds, SliceSet

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for resizing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Stretchpath[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_path_info(
    source: str,
    segment_count: int,
    bounds: Bounds,
    control_bounds: Bounds | None = None,
) -> None:
    """Print source path information.

    Args:
        source: Path to the SVG file
        segment_count: Number of decomposed segments
        bounds: Tight bounds of the source path
        control_bounds: Control point bounds, shown when given
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(
        f"  {segment_count:,} segments {SYM_DOT} "
        f"{bounds.width:g} × {bounds.height:g} "
        f"at ({bounds.min_x:g}, {bounds.min_y:g})"
    )
    if control_bounds is not None and control_bounds != bounds:
        console.print(
            f"  control points {control_bounds.width:g} × {control_bounds.height:g} "
            f"at ({control_bounds.min_x:g}, {control_bounds.min_y:g})",
            style="dim",
        )


def print_slices(vertical: SliceSet, horizontal: SliceSet, verbose: bool) -> None:
    """Print the retained slices of both axes.

    Args:
        vertical: Slices stretching X
        horizontal: Slices stretching Y
        verbose: Whether to list every slice
    """
    console.print(
        f"  {len(vertical)} vertical ({vertical.total_stretchable:g} stretchable) {SYM_DOT} "
        f"{len(horizontal)} horizontal ({horizontal.total_stretchable:g} stretchable)"
    )
    if verbose:
        for axis, slices in (("x", vertical), ("y", horizontal)):
            for s in slices:
                console.print(f"  {axis}: {s.start:g} → {s.end:g}")


def print_dry_run(rows: list[tuple[str, str, str]]) -> None:
    """Print the stretch factors computed for each size.

    Args:
        rows: (size, stretch x, stretch y) strings per requested size
    """
    table = Table(box=None, padding=(0, 2))
    table.add_column("Size")
    table.add_column("Stretch X", justify="right")
    table.add_column("Stretch Y", justify="right")
    for row in rows:
        table.add_row(*row)
    console.print()
    console.print(table)
    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no files written")


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


def print_success(
    outputs: list[str],
    total_time_s: float,
    resized: int,
    errors: int,
) -> None:
    """Print success message with summary.

    Args:
        outputs: Written output files
        total_time_s: Total processing time in seconds
        resized: Number of sizes written
        errors: Number of sizes that failed
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    for output in outputs:
        line = Text("  ")
        line.append(output, style="bold")
        console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {resized} sizes {SYM_DOT} [{error_style}]{errors} errors[/{error_style}]"
    )


def print_resize_errors(errors: list[tuple[str, str]]) -> None:
    """Print the sizes that could not be produced."""
    for size, message in errors:
        console.print(f"  [red]{SYM_ERR}[/red] {size}: {message}")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
