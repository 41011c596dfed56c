"""Nine-patch style resizing of vector paths.

The PathResizer decomposes a source path once and can then produce any
number of resized variants. Only the slices of each axis grow; geometry
outside the slices is translated but keeps its shape.

Curves are moved as a rigid unit: the displacement of a quadratic or cubic
segment is computed from its end point and applied to every control point.
"""

import logging
from typing import Any

from stretchpath.core.geometry import compute_control_bounds, compute_tight_bounds, decompose
from stretchpath.core.stretch import stretch_factor, stretch_offset
from stretchpath.domain import Bounds, Path, Segment, SegmentType, Slices, SliceSet

logger = logging.getLogger(__name__)


class PathResizer:
    """Resizes a path by stretching designated regions.

    Bounds, segments and stretchable extents are computed once at
    construction. The instance is immutable afterwards and resize() keeps
    no scratch state on it, so concurrent resize() calls are safe.

    Example:
        vertical, horizontal = SliceSet.from_rect(9, 7, 15, 13)
        resizer = PathResizer(path, vertical, horizontal)
        wide = resizer.resize(68, 32)
    """

    def __init__(self, path: Any, vertical: SliceSet, horizontal: SliceSet) -> None:
        """Initialize the resizer.

        Args:
            path: Source path, any object with a fontTools style draw(pen)
            vertical: Slices stretching X coordinates
            horizontal: Slices stretching Y coordinates
        """
        self._bounds = compute_tight_bounds(path)
        self._segments: tuple[Segment, ...] = tuple(decompose(path))
        self._vertical = vertical
        self._horizontal = horizontal
        self._stretchable_width = vertical.total_stretchable
        self._stretchable_height = horizontal.total_stretchable

    @property
    def bounds(self) -> Bounds:
        """Tight bounds of the source path."""
        return self._bounds

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Decomposed segments of the source path."""
        return self._segments

    @property
    def vertical_slices(self) -> SliceSet:
        return self._vertical

    @property
    def horizontal_slices(self) -> SliceSet:
        return self._horizontal

    @property
    def stretchable_width(self) -> float:
        return self._stretchable_width

    @property
    def stretchable_height(self) -> float:
        return self._stretchable_height

    @property
    def control_bounds(self) -> Bounds:
        """Bounds of every on- and off-curve point of the source path."""
        return compute_control_bounds(Path(self._segments))

    def stretch_factors(self, width: float, height: float) -> tuple[float, float]:
        """Calculate the per-axis stretch factors for a target size.

        Args:
            width: Target width
            height: Target height

        Returns:
            Tuple of (stretch_x, stretch_y)

        Raises:
            UndersizedTargetError: If the target is smaller than the source
            DegenerateStretchError: If an axis must grow but has no slices
        """
        stretch_x = stretch_factor(width, self._bounds.width, self._stretchable_width, "width")
        stretch_y = stretch_factor(
            height, self._bounds.height, self._stretchable_height, "height"
        )
        return stretch_x, stretch_y

    def resize(self, width: float, height: float, dst: Path | None = None) -> Path:
        """Produce a copy of the source path stretched to the given size.

        Args:
            width: Target width, must be >= bounds.width
            height: Target height, must be >= bounds.height
            dst: Path to write into; it is reset first. A new Path is
                created when None.

        Returns:
            The resized path (dst when given)

        Raises:
            UndersizedTargetError: If the target is smaller than the source.
                dst is left untouched.
            DegenerateStretchError: If an axis must grow but has no slices.
                dst is left untouched.
        """
        stretch_x, stretch_y = self.stretch_factors(width, height)

        if dst is None:
            dst = Path()
        dst.reset()

        for segment in self._segments:
            end = segment.end_point
            if end is None:
                dst.append(segment)
                continue

            dx = stretch_offset(end.x, self._vertical, stretch_x)
            dy = stretch_offset(end.y, self._horizontal, stretch_y)
            p = [point.translated(dx, dy) for point in segment.points]

            if segment.type == SegmentType.MOVE:
                dst.move_to(p[0].x, p[0].y)
            elif segment.type == SegmentType.LINE:
                dst.line_to(p[0].x, p[0].y)
            elif segment.type == SegmentType.QUADRATIC:
                dst.quad_to(p[0].x, p[0].y, p[1].x, p[1].y)
            elif segment.type == SegmentType.CUBIC:
                dst.cubic_to(p[0].x, p[0].y, p[1].x, p[1].y, p[2].x, p[2].y)

        logger.debug(
            "Resized path to %sx%s (stretch %s, %s, %d segments)",
            width,
            height,
            stretch_x,
            stretch_y,
            len(self._segments),
        )
        return dst


def slice_path(path: Any, slices: Slices) -> PathResizer:
    """Create a PathResizer for a path and a vertical/horizontal slice pair."""
    return PathResizer(path, slices.vertical, slices.horizontal)
