"""Batch resizing of an SVG path to several target sizes.

This module coordinates the full workflow: load an SVG file, build one
PathResizer for it, resize to every requested size and write each result
to its own SVG file.

Key components:
- PathProcessor: Main orchestrator class for SVG processing
"""

import time
from collections.abc import Callable, Sequence
from pathlib import Path as FilePath

from stretchpath.config import StretchPathSettings
from stretchpath.core.resizer import PathResizer
from stretchpath.domain import Slices
from stretchpath.exceptions import PathLoadError, PathSaveError, ResizeError
from stretchpath.io.reader import PathReader
from stretchpath.io.writer import PathWriter
from stretchpath.utils import ResizeLogger, ResizeStats, configure_logging


class PathProcessor:
    """Orchestrates resizing one SVG path to many sizes.

    Manages the complete workflow:
    1. Load the SVG file
    2. Decompose it once into a PathResizer
    3. Resize to each requested size
    4. Write each resized path and update statistics

    Example:
        processor = PathProcessor(StretchPathSettings())
        stats = processor.process(
            input_path=FilePath("bubble.svg"),
            slices=SliceSet.from_rect(9, 7, 15, 13),
            sizes=[(30, 24), (68, 32)],
        )
    """

    def __init__(self, config: StretchPathSettings, quiet: bool = False) -> None:
        """Initialize the processor with configuration.

        Args:
            config: Stretchpath settings containing output and logging config
            quiet: Suppress console log output
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.resize_logger = ResizeLogger(self.logger)

    def load(self, input_path: FilePath, slices: Slices) -> PathResizer:
        """Load an SVG file and prepare it for resizing.

        Args:
            input_path: Path to the SVG file
            slices: Vertical and horizontal stretch regions

        Returns:
            PathResizer for the file's outline

        Raises:
            PathLoadError: If the file cannot be read or holds no path
        """
        try:
            with PathReader(input_path) as reader:
                path = reader.path
        except Exception as e:
            raise PathLoadError(str(input_path), str(e)) from e

        if path.is_empty():
            raise PathLoadError(str(input_path), "no path geometry found")

        resizer = PathResizer(path, slices.vertical, slices.horizontal)
        self.resize_logger.log_source(str(input_path), len(resizer.segments), resizer.bounds)
        self.resize_logger.log_slices("vertical", slices.vertical)
        self.resize_logger.log_slices("horizontal", slices.horizontal)
        return resizer

    def process(
        self,
        input_path: FilePath,
        slices: Slices,
        sizes: Sequence[tuple[float, float]],
        output_path: FilePath | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
    ) -> ResizeStats:
        """Resize an SVG path to every requested size.

        A size that cannot be produced (smaller than the source, or growing
        an axis without stretchable extent) is logged and counted as an
        error; the remaining sizes are still processed.

        Args:
            input_path: Path to the SVG file
            slices: Vertical and horizontal stretch regions
            sizes: Target (width, height) pairs
            output_path: Output file for a single size; for several sizes
                the size is appended to its name. Derived from input_path
                when None.
            progress_callback: Optional callback(completed, total)

        Returns:
            ResizeStats with counts, outputs, timing and error details

        Raises:
            PathLoadError: If the SVG file cannot be loaded
            PathSaveError: If an output file cannot be written
        """
        start_time = time.time()
        resizer = self.load(input_path, slices)
        return self.resize_all(
            resizer,
            input_path,
            sizes,
            output_path=output_path,
            progress_callback=progress_callback,
            start_time=start_time,
        )

    def resize_all(
        self,
        resizer: PathResizer,
        input_path: FilePath,
        sizes: Sequence[tuple[float, float]],
        output_path: FilePath | None = None,
        progress_callback: Callable[[int, int], None] | None = None,
        start_time: float | None = None,
    ) -> ResizeStats:
        """Resize an already loaded path to every requested size.

        Arguments match process(); start_time defaults to now.

        Raises:
            PathSaveError: If an output file cannot be written
        """
        stats = self.resize_logger.reset()
        stats.segment_count = len(resizer.segments)
        stats.start_time = start_time if start_time is not None else time.time()

        self.logger.info("Starting resize", sizes=len(sizes))

        for index, (width, height) in enumerate(sizes, start=1):
            target = self._output_for(input_path, output_path, width, height, len(sizes))
            start = time.time()

            try:
                resized = resizer.resize(width, height)
            except ResizeError as e:
                self.resize_logger.log_resize_error(width, height, e)
            else:
                try:
                    PathWriter(target).write(resized, self.config.output)
                except OSError as e:
                    raise PathSaveError(str(target), str(e)) from e
                self.resize_logger.log_resize_complete(
                    width, height, target, (time.time() - start) * 1000
                )

            if progress_callback:
                progress_callback(index, len(sizes))

        stats.end_time = time.time()
        self.logger.info(
            "Resize complete",
            resized=stats.resized_count,
            errors=stats.error_count,
            duration_s=round(stats.duration_seconds, 3),
        )
        return stats

    @staticmethod
    def _output_for(
        input_path: FilePath,
        output_path: FilePath | None,
        width: float,
        height: float,
        size_count: int,
    ) -> FilePath:
        """Pick the output file for one target size."""
        if output_path is None:
            return PathWriter.get_resized_path(input_path, width, height)
        if size_count == 1:
            return output_path
        return PathWriter.get_resized_path(output_path, width, height)
