"""Path representation produced by the resizer.

A Path is an ordered list of segments. It doubles as the path-building sink
the resizer writes into, and it can replay itself into any fontTools pen, so
a resized path can be measured, written out or resized again.
"""

from collections.abc import Iterable, Iterator
from typing import Any

from stretchpath.domain.segment import Point, Segment, SegmentType


class Path:
    """An ordered sequence of drawing commands.

    Example:
        path = Path()
        path.move_to(0, 0)
        path.line_to(10, 0)
        path.line_to(10, 10)
        path.close()
    """

    def __init__(self, segments: Iterable[Segment] = ()) -> None:
        self._segments: list[Segment] = list(segments)

    @property
    def segments(self) -> tuple[Segment, ...]:
        """Recorded segments in drawing order."""
        return tuple(self._segments)

    def move_to(self, x: float, y: float) -> None:
        self._segments.append(Segment(SegmentType.MOVE, (Point(x, y),)))

    def line_to(self, x: float, y: float) -> None:
        self._segments.append(Segment(SegmentType.LINE, (Point(x, y),)))

    def quad_to(self, cx: float, cy: float, x: float, y: float) -> None:
        self._segments.append(Segment(SegmentType.QUADRATIC, (Point(cx, cy), Point(x, y))))

    def cubic_to(
        self,
        c1x: float,
        c1y: float,
        c2x: float,
        c2y: float,
        x: float,
        y: float,
    ) -> None:
        self._segments.append(
            Segment(SegmentType.CUBIC, (Point(c1x, c1y), Point(c2x, c2y), Point(x, y)))
        )

    def close(self) -> None:
        self._segments.append(Segment(SegmentType.CLOSE))

    def end(self) -> None:
        """End the current contour without closing it."""
        self._segments.append(Segment(SegmentType.END))

    def reset(self) -> None:
        """Clear all recorded segments so the path can be reused."""
        self._segments.clear()

    def append(self, segment: Segment) -> None:
        """Append an already built segment."""
        self._segments.append(segment)

    def is_empty(self) -> bool:
        """Check if the path has no segments."""
        return not self._segments

    def draw(self, pen: Any) -> None:
        """Replay the path into a fontTools pen.

        Args:
            pen: Any object implementing the fontTools AbstractPen protocol
        """
        for segment in self._segments:
            points = [p.to_tuple() for p in segment.points]
            if segment.type == SegmentType.MOVE:
                pen.moveTo(points[0])
            elif segment.type == SegmentType.LINE:
                pen.lineTo(points[0])
            elif segment.type == SegmentType.QUADRATIC:
                pen.qCurveTo(*points)
            elif segment.type == SegmentType.CUBIC:
                pen.curveTo(*points)
            elif segment.type == SegmentType.CLOSE:
                pen.closePath()
            elif segment.type == SegmentType.END:
                pen.endPath()

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self._segments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._segments == other._segments

    def __repr__(self) -> str:
        return f"Path(segments={len(self._segments)})"
