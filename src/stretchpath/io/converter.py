"""Converters between SVG path data and domain models.

This module handles the conversion between SVG ``d`` attribute strings and
our domain Path, going through fontTools pens in both directions.
"""

from collections.abc import Callable

from fontTools.pens.svgPathPen import SVGPathPen
from fontTools.svgLib.path import parse_path

from stretchpath.core.geometry import SegmentPen
from stretchpath.domain import Path


def svg_path_to_domain(path_data: str) -> Path:
    """Convert SVG path data to a domain Path.

    Relative commands and smooth curves are resolved to absolute
    coordinates, elliptical arcs are converted to cubic curves.

    Args:
        path_data: Contents of an SVG ``d`` attribute

    Returns:
        Domain Path

    Raises:
        ValueError: If the path data cannot be parsed
    """
    pen = SegmentPen()
    parse_path(path_data, pen)
    return Path(pen.segments)


def domain_to_svg_path(path: Path, precision: int = 3) -> str:
    """Convert a domain Path to SVG path data.

    Args:
        path: Domain Path
        precision: Decimal places kept for coordinates

    Returns:
        SVG path data string
    """
    pen = SVGPathPen(None, ntos=_number_formatter(precision))
    path.draw(pen)
    return pen.getCommands()


def _number_formatter(precision: int) -> Callable[[float], str]:
    """Build a formatter that rounds and strips trailing zeros."""

    def ntos(value: float) -> str:
        text = f"{value:.{precision}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        if text == "-0":
            text = "0"
        return text

    return ntos
