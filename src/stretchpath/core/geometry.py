"""Path decomposition and bounds built on fontTools pens.

This module is the geometry collaborator of the resizer:
- SegmentPen: records any drawing into domain Segments
- decompose: flatten a drawable into its ordered segment list
- compute_tight_bounds: curve-aware bounds (curve extrema included)
- compute_control_bounds: bounds of all control points

A "drawable" is anything with a fontTools style ``draw(pen)`` method: a
domain Path, a fontTools SVGPath, or a glyph from a font's glyph set.
"""

from typing import Any

from fontTools.pens.basePen import BasePen
from fontTools.pens.boundsPen import BoundsPen, ControlBoundsPen

from stretchpath.domain import Bounds, Path, Point, Segment, SegmentType


class SegmentPen(BasePen):
    """fontTools pen that records drawing commands as Segments.

    BasePen takes care of the TrueType specifics before the segment hooks
    are reached: qCurveTo runs with several off-curve points are split into
    single quadratics, contours made only of off-curve points get their
    implied start point, and curveTo runs with more than two off-curve
    points are split into single cubics.

    Example:
        pen = SegmentPen()
        glyph.draw(pen)
        segments = pen.segments
    """

    def __init__(self, glyphSet: Any = None) -> None:  # noqa: N803
        super().__init__(glyphSet)
        self.segments: list[Segment] = []

    def _moveTo(self, pt: tuple[float, float]) -> None:
        self.segments.append(Segment(SegmentType.MOVE, (Point(*pt),)))

    def _lineTo(self, pt: tuple[float, float]) -> None:
        self.segments.append(Segment(SegmentType.LINE, (Point(*pt),)))

    def _qCurveToOne(self, pt1: tuple[float, float], pt2: tuple[float, float]) -> None:
        self.segments.append(Segment(SegmentType.QUADRATIC, (Point(*pt1), Point(*pt2))))

    def _curveToOne(
        self,
        pt1: tuple[float, float],
        pt2: tuple[float, float],
        pt3: tuple[float, float],
    ) -> None:
        self.segments.append(
            Segment(SegmentType.CUBIC, (Point(*pt1), Point(*pt2), Point(*pt3)))
        )

    def _closePath(self) -> None:
        self.segments.append(Segment(SegmentType.CLOSE))

    def _endPath(self) -> None:
        self.segments.append(Segment(SegmentType.END))


def decompose(drawable: Any) -> list[Segment]:
    """Decompose a drawable into its ordered segments.

    Args:
        drawable: Object with a fontTools style draw(pen) method

    Returns:
        Segments in drawing order; never contains anything but MOVE, LINE,
        QUADRATIC, CUBIC, CLOSE and END segments
    """
    if isinstance(drawable, Path):
        return list(drawable.segments)

    pen = SegmentPen()
    drawable.draw(pen)
    return pen.segments


def to_path(drawable: Any) -> Path:
    """Record a drawable into a domain Path."""
    return Path(decompose(drawable))


def compute_tight_bounds(drawable: Any) -> Bounds:
    """Calculate the bounds of the rendered geometry.

    Curve extrema are taken into account, so off-curve control points that
    lie outside the curve do not widen the box.

    Args:
        drawable: Object with a fontTools style draw(pen) method

    Returns:
        Tight bounds, or Bounds(0, 0, 0, 0) for an empty path
    """
    pen = BoundsPen(None)
    drawable.draw(pen)
    if pen.bounds is None:
        return Bounds(0.0, 0.0, 0.0, 0.0)
    return Bounds(*pen.bounds)


def compute_control_bounds(drawable: Any) -> Bounds:
    """Calculate the bounds of all on- and off-curve points.

    Args:
        drawable: Object with a fontTools style draw(pen) method

    Returns:
        Control point bounds, or Bounds(0, 0, 0, 0) for an empty path
    """
    pen = ControlBoundsPen(None)
    drawable.draw(pen)
    if pen.bounds is None:
        return Bounds(0.0, 0.0, 0.0, 0.0)
    return Bounds(*pen.bounds)
