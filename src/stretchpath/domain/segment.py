"""Core geometric types for path segments.

This module defines the fundamental types a decomposed path is made of:
- Point: A 2D point
- SegmentType: Enum for the drawing command of a segment
- Segment: One drawing command with exactly the points it needs
- Bounds: An axis-aligned bounding box
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from stretchpath.exceptions import SegmentError


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def translated(self, dx: float, dy: float) -> "Point":
        """Return a copy of this point moved by (dx, dy)."""
        return Point(self.x + dx, self.y + dy)


class SegmentType(Enum):
    """Drawing command of a path segment.

    - MOVE: Start a new contour at one point
    - LINE: Straight line to one point
    - QUADRATIC: Quadratic Bezier (control point, end point)
    - CUBIC: Cubic Bezier (two control points, end point)
    - CLOSE: Close the current contour
    - END: End the current contour without closing it
    """

    MOVE = auto()
    LINE = auto()
    QUADRATIC = auto()
    CUBIC = auto()
    CLOSE = auto()
    END = auto()


POINT_COUNTS: dict[SegmentType, int] = {
    SegmentType.MOVE: 1,
    SegmentType.LINE: 1,
    SegmentType.QUADRATIC: 2,
    SegmentType.CUBIC: 3,
    SegmentType.CLOSE: 0,
    SegmentType.END: 0,
}


@dataclass(frozen=True, slots=True)
class Segment:
    """One drawing command of a decomposed path.

    The start point of a segment is implicit: it is the end point of the
    previous segment.

    Attributes:
        type: Drawing command
        points: Control points followed by the end point

    Raises:
        SegmentError: If the number of points does not match the type
    """

    type: SegmentType
    points: tuple[Point, ...] = ()

    def __post_init__(self) -> None:
        expected = POINT_COUNTS[self.type]
        if len(self.points) != expected:
            raise SegmentError(
                f"{self.type.name} segment needs {expected} point(s), got {len(self.points)}"
            )

    @property
    def end_point(self) -> Point | None:
        """Point the segment ends on, None for CLOSE and END."""
        return self.points[-1] if self.points else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the command name and point tuples
        """
        return {
            "type": self.type.name,
            "points": [p.to_tuple() for p in self.points],
        }


@dataclass(frozen=True, slots=True)
class Bounds:
    """Axis-aligned bounding box.

    Attributes:
        min_x: Left edge
        min_y: Top edge (bottom in y-up coordinate systems)
        max_x: Right edge
        max_y: Bottom edge (top in y-up coordinate systems)
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def to_tuple(self) -> tuple[float, float, float, float]:
        """Convert to (min_x, min_y, max_x, max_y) tuple."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)
