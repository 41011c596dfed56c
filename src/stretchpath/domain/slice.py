"""Stretch regions along one axis of a path.

This module defines the slice data model:
- Slice: one stretchable interval on a single axis
- SliceSet: the validated, filtered and sorted slices of one axis
- Slices: the vertical/horizontal SliceSet pair used by the resizer

Vertical slices are delimited by vertical lines and therefore stretch X
coordinates. Horizontal slices stretch Y coordinates.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple

from stretchpath.exceptions import EmptySliceListError, InvalidSliceError


@dataclass(frozen=True, slots=True)
class Slice:
    """A stretchable interval [start, end] on one axis.

    Immutable and hashable. Equality is exact on both bounds.

    Attributes:
        start: First coordinate of the stretch region
        end: Last coordinate of the stretch region

    Raises:
        InvalidSliceError: If start > end
    """

    start: float
    end: float

    def __post_init__(self) -> None:
        if not self.start <= self.end:
            raise InvalidSliceError(self.start, self.end)

    @property
    def size(self) -> float:
        """Length of the stretch region, always >= 0."""
        return self.end - self.start

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with start and end fields
        """
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True, slots=True)
class SliceSet:
    """All stretch regions of one axis.

    Zero-size slices are dropped and the remaining slices are sorted by
    start. Overlapping or adjacent slices are kept as given; their offsets
    compound when a path is resized.

    Attributes:
        slices: Retained slices, ascending by start
        axis: Axis label used in error messages
        total_stretchable: Sum of the sizes of the retained slices

    Raises:
        EmptySliceListError: If no slice is given
    """

    slices: tuple[Slice, ...]
    axis: str = field(default="", compare=False, repr=False)
    total_stretchable: float = field(init=False)

    def __post_init__(self) -> None:
        given = tuple(self.slices)
        if not given:
            raise EmptySliceListError(self.axis)

        retained = tuple(sorted((s for s in given if s.size > 0), key=lambda s: s.start))
        object.__setattr__(self, "slices", retained)
        object.__setattr__(self, "total_stretchable", sum(s.size for s in retained))

    @property
    def is_degenerate(self) -> bool:
        """True when no slice on this axis has a positive size."""
        return self.total_stretchable == 0

    def __len__(self) -> int:
        return len(self.slices)

    def __iter__(self) -> Iterator[Slice]:
        return iter(self.slices)

    def __getitem__(self, index: int) -> Slice:
        return self.slices[index]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the retained slices and their total size
        """
        return {
            "slices": [s.to_dict() for s in self.slices],
            "total_stretchable": self.total_stretchable,
        }

    @classmethod
    def from_rect(
        cls,
        left: float,
        top: float,
        right: float,
        bottom: float,
    ) -> "Slices":
        """Create the classic single-region nine-patch.

        Integer coordinates are converted to floats.

        Args:
            left: Start of the vertical slice
            top: Start of the horizontal slice
            right: End of the vertical slice
            bottom: End of the horizontal slice

        Returns:
            Slices with one vertical slice [left, right] and one
            horizontal slice [top, bottom]
        """
        return Slices.from_lists(
            [Slice(float(left), float(right))],
            [Slice(float(top), float(bottom))],
        )


class Slices(NamedTuple):
    """Vertical and horizontal slice sets for a path.

    Unpacks as ``vertical, horizontal``.
    """

    vertical: SliceSet
    horizontal: SliceSet

    @classmethod
    def from_lists(
        cls,
        vertical: Iterable[Slice],
        horizontal: Iterable[Slice],
    ) -> "Slices":
        """Build both slice sets from plain slice lists."""
        return cls(
            SliceSet(tuple(vertical), axis="vertical"),
            SliceSet(tuple(horizontal), axis="horizontal"),
        )

    @classmethod
    def from_rect(cls, left: float, top: float, right: float, bottom: float) -> "Slices":
        """Build a single-region pair from a rectangle."""
        return SliceSet.from_rect(left, top, right, bottom)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "vertical": self.vertical.to_dict(),
            "horizontal": self.horizontal.to_dict(),
        }
