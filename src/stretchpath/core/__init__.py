"""Core algorithms for stretchpath.

This module contains the core algorithms for:

- Path decomposition and bounds (fontTools pens)
- Per-axis stretch offsets
- Nine-patch style path resizing

All functions are stateless and a PathResizer is immutable after
construction, so one instance can serve concurrent resize calls.

Key functions:
- decompose: Flatten a drawable into its ordered segments
- compute_tight_bounds: Curve-aware bounds of a drawable
- compute_control_bounds: Control point bounds of a drawable
- stretch_factor: Growth per unit of slice size on one axis
- stretch_offset: Displacement of a coordinate by its axis' slices
- offset_position: Stretched coordinate
- slice_path: Create a PathResizer from a path and a Slices pair

Key classes:
- SegmentPen: fontTools pen recording domain Segments
- PathResizer: Resizes a path by stretching its slices

The batch PathProcessor lives in stretchpath.core.processor.
"""

from stretchpath.core.geometry import (
    SegmentPen,
    compute_control_bounds,
    compute_tight_bounds,
    decompose,
    to_path,
)
from stretchpath.core.resizer import PathResizer, slice_path
from stretchpath.core.stretch import offset_position, stretch_factor, stretch_offset

__all__ = [
    # Resizer classes
    "PathResizer",
    # Geometry
    "SegmentPen",
    "compute_control_bounds",
    "compute_tight_bounds",
    "decompose",
    "offset_position",
    "slice_path",
    "stretch_factor",
    "stretch_offset",
    "to_path",
]
