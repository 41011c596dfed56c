"""Domain models for stretchpath.

This module contains the domain models representing stretch regions and
path geometry. All value types are immutable frozen dataclasses, independent
of fontTools implementation details.

Key classes:
- Slice: One stretchable interval on an axis
- SliceSet: Filtered, sorted slices of one axis
- Slices: Vertical/horizontal SliceSet pair
- Point: A 2D point
- Segment: One drawing command with its points
- Bounds: Axis-aligned bounding box
- Path: Ordered segments, also used as path-building sink
"""

from stretchpath.domain.path import Path
from stretchpath.domain.segment import Bounds, Point, Segment, SegmentType
from stretchpath.domain.slice import Slice, Slices, SliceSet

__all__: list[str] = [
    # Enums
    "SegmentType",
    # Core types
    "Bounds",
    "Path",
    "Point",
    "Segment",
    "Slice",
    "SliceSet",
    "Slices",
]
