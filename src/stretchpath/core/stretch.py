"""Per-axis stretch computations.

A point is displaced by every slice on its axis:
- slices that start at or after the point contribute nothing
- the slice the point sits inside contributes in proportion to how far
  into the slice the point is
- slices fully behind the point contribute their whole growth

All functions are pure and stateless.
"""

from stretchpath.domain import SliceSet
from stretchpath.exceptions import DegenerateStretchError, UndersizedTargetError


def stretch_factor(target: float, source: float, stretchable: float, axis: str) -> float:
    """Growth per unit of slice size along one axis.

    Args:
        target: Requested size on this axis
        source: Size of the source path on this axis
        stretchable: Total size of the slices on this axis
        axis: Axis name used in error messages ("width" or "height")

    Returns:
        (target - source) / stretchable, or 0.0 when the axis has no
        stretchable extent and does not need to grow

    Raises:
        UndersizedTargetError: If target >= source does not hold (NaN included)
        DegenerateStretchError: If the axis must grow but has no stretchable extent
    """
    if not target >= source:
        raise UndersizedTargetError(axis, target, source)

    if stretchable == 0:
        if target != source:
            raise DegenerateStretchError(axis, target, source)
        return 0.0

    return (target - source) / stretchable


def stretch_offset(position: float, slices: SliceSet, stretch: float) -> float:
    """Displacement of a coordinate caused by the slices of its axis.

    Overlapping slices are not merged, their contributions add up.

    Args:
        position: Original coordinate
        slices: Slice set of the coordinate's axis
        stretch: Stretch factor of the axis

    Returns:
        Amount to add to the coordinate
    """
    offset = 0.0
    for s in slices:
        if position > s.start:
            growth = s.size * stretch
            if position <= s.end:
                growth *= (position - s.start) / s.size
            offset += growth
    return offset


def offset_position(position: float, slices: SliceSet, stretch: float) -> float:
    """Return the stretched coordinate."""
    return position + stretch_offset(position, slices, stretch)
