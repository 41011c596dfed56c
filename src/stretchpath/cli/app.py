"""CLI application entry point for stretchpath.

This module provides the main CLI interface using Typer.
"""

import math
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from stretchpath import __version__
from stretchpath.cli.output import (
    console,
    create_progress,
    print_dry_run,
    print_error,
    print_header,
    print_path_info,
    print_resize_errors,
    print_slices,
    print_step,
    print_success,
)
from stretchpath.config import LoggingConfig, OutputConfig, StretchPathSettings
from stretchpath.core import PathResizer
from stretchpath.core.processor import PathProcessor
from stretchpath.domain import Slice, Slices, SliceSet
from stretchpath.exceptions import (
    PathLoadError,
    PathSaveError,
    ResizeError,
    SliceError,
    StretchPathError,
)
from stretchpath.io import PathReader

# Create the Typer app
app = typer.Typer(
    name="stretchpath",
    help="Resize SVG paths by stretching designated regions, nine-patch style.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Stretchpath[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def stretch(
    input_svg: Annotated[
        Path,
        typer.Argument(
            help="Path to input SVG file",
            show_default=False,
        ),
    ],
    size: Annotated[
        list[str] | None,
        typer.Option(
            "--size",
            "-s",
            help="Target size as WIDTHxHEIGHT (repeat for several sizes)",
        ),
    ] = None,
    rect: Annotated[
        str | None,
        typer.Option(
            "--rect",
            "-r",
            help="Single stretch region as LEFT,TOP,RIGHT,BOTTOM",
        ),
    ] = None,
    vertical: Annotated[
        str | None,
        typer.Option(
            "--vertical",
            help="Vertical slices (stretch X) as START:END[,START:END...]",
        ),
    ] = None,
    horizontal: Annotated[
        str | None,
        typer.Option(
            "--horizontal",
            help="Horizontal slices (stretch Y) as START:END[,START:END...]",
        ),
    ] = None,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}-{W}x{H}.svg)",
        ),
    ] = None,
    precision: Annotated[
        int,
        typer.Option(
            "--precision",
            help="Decimal places for written coordinates (0-8)",
            min=0,
            max=8,
        ),
    ] = 3,
    fill: Annotated[
        str,
        typer.Option(
            "--fill",
            help="Fill color of the written path",
        ),
    ] = "black",
    padding: Annotated[
        float,
        typer.Option(
            "--padding",
            help="Space around the path in the written viewBox",
            min=0.0,
        ),
    ] = 0.0,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Show bounds and stretch factors without writing files",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Resize the path of an SVG file, stretching only the given regions.

    Give either one rectangle with --rect, or explicit slice lists with
    --vertical and --horizontal.

    Example:
        stretchpath bubble.svg --rect 9,7,15,13 --size 68x32

    This will create bubble-68x32.svg.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if not input_svg.exists():
        print_error(
            f"Input file not found: {input_svg}",
            details=f"The file '{input_svg}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_svg.is_file():
        print_error(
            f"Input path is not a file: {input_svg}",
            details="Please provide a path to an SVG file.",
        )
        raise typer.Exit(code=1)

    try:
        slices = _parse_slices(rect, vertical, horizontal)
        sizes = [_parse_size(value) for value in size or []]
    except (SliceError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not sizes:
        print_error("At least one --size is required", details="Example: --size 68x32")
        raise typer.Exit(code=1)

    try:
        settings = StretchPathSettings(
            output=OutputConfig(precision=precision, fill=fill, padding=padding),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        print_error(f"Invalid setting {field}: {error['msg']}")
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    try:
        if dry_run:
            _handle_dry_run(input_svg, slices, sizes, quiet, verbose)
            raise typer.Exit(code=0)

        processor = PathProcessor(settings, quiet=quiet)

        if not quiet:
            print_step("Loading path")

        resizer = processor.load(input_svg, slices)

        if not quiet:
            print_path_info(
                str(input_svg),
                len(resizer.segments),
                resizer.bounds,
                resizer.control_bounds if verbose else None,
            )
            print_slices(slices.vertical, slices.horizontal, verbose)
            print_step(f"Resizing to {len(sizes)} size{'s' if len(sizes) != 1 else ''}")

        if not quiet:
            with create_progress() as progress:
                task_id = progress.add_task("Resizing", total=len(sizes))

                def update_progress(completed: int, *_: object) -> None:
                    progress.update(task_id, completed=completed)

                stats = processor.resize_all(
                    resizer,
                    input_svg,
                    sizes,
                    output_path=output,
                    progress_callback=update_progress,
                )
        else:
            stats = processor.resize_all(resizer, input_svg, sizes, output_path=output)

        if not quiet:
            print_resize_errors(stats.errors)
            print_success(
                outputs=[str(p) for p in stats.outputs],
                total_time_s=stats.duration_seconds,
                resized=stats.resized_count,
                errors=stats.error_count,
            )

        if stats.error_count:
            raise typer.Exit(code=1)

    except PathLoadError as e:
        print_error(f"Could not load path: {e.reason}")
        raise typer.Exit(code=1)
    except PathSaveError as e:
        print_error(f"Could not save path: {e.reason}")
        raise typer.Exit(code=1)
    except StretchPathError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _handle_dry_run(
    input_svg: Path,
    slices: Slices,
    sizes: list[tuple[float, float]],
    quiet: bool,
    verbose: bool,
) -> None:
    """Handle --dry-run mode.

    Args:
        input_svg: Path to SVG file
        slices: Stretch regions
        sizes: Requested target sizes
        quiet: Suppress output
        verbose: Show verbose output
    """
    if not quiet:
        print_step("Loading path")

    try:
        with PathReader(input_svg) as reader:
            resizer = PathResizer(reader.path, slices.vertical, slices.horizontal)
    except Exception as e:
        print_error(f"Could not analyze path: {e}")
        raise typer.Exit(code=1)

    if quiet:
        return

    print_path_info(
        str(input_svg),
        len(resizer.segments),
        resizer.bounds,
        resizer.control_bounds if verbose else None,
    )
    print_slices(slices.vertical, slices.horizontal, verbose)

    rows: list[tuple[str, str, str]] = []
    for width, height in sizes:
        label = f"{width:g}x{height:g}"
        try:
            stretch_x, stretch_y = resizer.stretch_factors(width, height)
        except ResizeError as e:
            rows.append((label, "[red]error[/red]", str(e) if verbose else ""))
        else:
            rows.append((label, f"{stretch_x:.4g}", f"{stretch_y:.4g}"))

    print_dry_run(rows)


def _parse_size(value: str) -> tuple[float, float]:
    """Parse a WIDTHxHEIGHT string.

    Raises:
        ValueError: If the value is not two numbers separated by 'x'
    """
    parts = value.lower().split("x")
    if len(parts) != 2:
        raise ValueError(f"Invalid size '{value}', expected WIDTHxHEIGHT")
    try:
        width, height = float(parts[0]), float(parts[1])
    except ValueError:
        raise ValueError(f"Invalid size '{value}', expected WIDTHxHEIGHT") from None
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"Invalid size '{value}', width and height must be finite")
    return width, height


def _parse_slice_list(value: str) -> list[Slice]:
    """Parse START:END[,START:END...] into slices.

    Raises:
        ValueError: If a pair is malformed
        InvalidSliceError: If a slice starts after its end
    """
    slices: list[Slice] = []
    for pair in value.split(","):
        if not pair.strip():
            continue
        bounds = pair.split(":")
        if len(bounds) != 2:
            raise ValueError(f"Invalid slice '{pair}', expected START:END")
        try:
            start, end = float(bounds[0]), float(bounds[1])
        except ValueError:
            raise ValueError(f"Invalid slice '{pair}', expected START:END") from None
        slices.append(Slice(start, end))
    return slices


def _parse_slices(
    rect: str | None,
    vertical: str | None,
    horizontal: str | None,
) -> Slices:
    """Build the slice pair from the CLI options.

    Raises:
        ValueError: If the options are missing, mixed or malformed
        SliceError: If the slices themselves are invalid
    """
    if rect is not None:
        if vertical is not None or horizontal is not None:
            raise ValueError("Use either --rect or --vertical/--horizontal, not both")
        parts = rect.split(",")
        if len(parts) != 4:
            raise ValueError(f"Invalid rect '{rect}', expected LEFT,TOP,RIGHT,BOTTOM")
        try:
            left, top, right, bottom = (float(p) for p in parts)
        except ValueError:
            raise ValueError(
                f"Invalid rect '{rect}', expected LEFT,TOP,RIGHT,BOTTOM"
            ) from None
        return SliceSet.from_rect(left, top, right, bottom)

    if vertical is None or horizontal is None:
        raise ValueError("Stretch regions required: --rect, or both --vertical and --horizontal")

    return Slices.from_lists(_parse_slice_list(vertical), _parse_slice_list(horizontal))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
