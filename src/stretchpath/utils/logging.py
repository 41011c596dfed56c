"""Logging utilities for Stretchpath.

Log records from every ``stretchpath.*`` logger go to the handlers installed
on the ``stretchpath`` logger. Reconfiguring replaces those handlers, so
several processors in one interpreter do not duplicate output.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

from stretchpath.domain import Bounds, SliceSet

LOGGER_NAME = "stretchpath"

_FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


@dataclass
class ResizeStats:
    """Statistics from a resize run."""

    resized_count: int = 0
    error_count: int = 0
    segment_count: int = 0
    outputs: list[Path] = field(default_factory=list)
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Elapsed time between start and end, 0.0 while running."""
        if self.start_time is None or self.end_time is None:
            return 0.0
        return self.end_time - self.start_time


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging to the console and an optional file.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger

    Raises:
        ValueError: If a level name is unknown
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = []
    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(_level(file_level))
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT))
        handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(_level(console_level))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    for handler in handlers:
        package_logger.addHandler(handler)

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

    logger = structlog.get_logger(LOGGER_NAME)
    logger.debug(
        "Logging configured",
        log_file=str(log_file) if log_file else None,
        console_level=None if quiet else console_level,
        file_level=file_level if log_file else None,
    )
    return logger


class ResizeLogger:
    """Logger for tracking resize progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = ResizeStats()

    def log_source(self, source: str, segment_count: int, bounds: Bounds) -> None:
        """Log the loaded source path."""
        self._logger.info(
            "Source path loaded",
            source=source,
            segments=segment_count,
            bounds=bounds.to_tuple(),
        )
        self._stats.segment_count = segment_count

    def log_slices(self, axis: str, slices: SliceSet) -> None:
        """Log the retained slices of one axis."""
        self._logger.debug(
            "Slices",
            axis=axis,
            count=len(slices),
            total=slices.total_stretchable,
            slices=slices.to_dict()["slices"],
        )
        if slices.is_degenerate:
            self._logger.warning("Axis has no stretchable extent", axis=axis)

    def log_resize_complete(
        self,
        width: float,
        height: float,
        output: Path,
        duration_ms: float,
    ) -> None:
        """Log a successful resize."""
        self._logger.info(
            "Path resized",
            width=width,
            height=height,
            output=str(output),
            duration_ms=round(duration_ms, 2),
        )
        self._stats.resized_count += 1
        self._stats.outputs.append(output)

    def log_resize_error(self, width: float, height: float, error: Exception) -> None:
        """Log a failed resize."""
        size = f"{width:g}x{height:g}"
        self._logger.error(
            "Resize failed",
            size=size,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.error_count += 1
        self._stats.errors.append((size, str(error)))

    @property
    def stats(self) -> ResizeStats:
        """Get current resize statistics."""
        return self._stats

    def reset(self) -> ResizeStats:
        """Start a new run with empty statistics."""
        self._stats = ResizeStats()
        return self._stats
