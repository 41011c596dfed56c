"""Exception hierarchy for Stretchpath."""


class StretchPathError(Exception):
    """Base exception for all Stretchpath errors."""

    pass


class SliceError(StretchPathError, ValueError):
    """Errors related to stretch slice definitions."""

    pass


class InvalidSliceError(SliceError):
    """Slice start lies after its end."""

    def __init__(self, start: float, end: float) -> None:
        self.start = start
        self.end = end
        super().__init__(
            f"Invalid slice, start must be <= end: start = {start}, end = {end}"
        )


class EmptySliceListError(SliceError):
    """No slices were given for an axis."""

    def __init__(self, axis: str = "") -> None:
        self.axis = axis
        label = f"{axis} " if axis else ""
        super().__init__(f"At least 1 {label}slice is required")


class ResizeError(StretchPathError, ValueError):
    """Errors related to resizing a path."""

    pass


class UndersizedTargetError(ResizeError):
    """Target size is smaller than the source path on one axis."""

    def __init__(self, axis: str, target: float, source: float) -> None:
        self.axis = axis
        self.target = target
        self.source = source
        super().__init__(
            f"The destination {axis} must be >= original path {axis}: "
            f"destination {axis} = {target}, source path {axis} = {source}"
        )


class DegenerateStretchError(ResizeError):
    """Axis has no stretchable extent but the target asks it to grow."""

    def __init__(self, axis: str, target: float, source: float) -> None:
        self.axis = axis
        self.target = target
        self.source = source
        super().__init__(
            f"Cannot stretch {axis} from {source} to {target}: "
            f"all {axis} slices have zero size"
        )


class PathError(StretchPathError):
    """Errors related to path data or path files."""

    pass


class SegmentError(PathError):
    """Segment carries the wrong number of points for its type."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PathLoadError(PathError):
    """Error loading a path file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load path '{path}': {reason}")


class PathSaveError(PathError):
    """Error saving a path file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save path '{path}': {reason}")
