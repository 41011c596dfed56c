"""Path reader for loading SVG files.

This module provides the PathReader class for loading SVG documents and
extracting their outline into a domain Path.
"""

from pathlib import Path as FilePath

from fontTools.svgLib import SVGPath

from stretchpath.core.geometry import to_path
from stretchpath.domain import Path
from stretchpath.io.converter import svg_path_to_domain


class PathReader:
    """Loads SVG files and extracts their path geometry.

    All path elements of the document are drawn, in document order, into a
    single domain Path.

    Example:
        with PathReader(FilePath("icon.svg")) as reader:
            print(reader.segment_count)
            path = reader.path
    """

    def __init__(self, svg_path: FilePath) -> None:
        """Initialize the path reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._path: Path | None = None

    def load(self) -> None:
        """Load the SVG file.

        Raises:
            FileNotFoundError: If the SVG file does not exist
            Exception: If the file is not a valid SVG document
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        self._path = to_path(SVGPath(str(self._svg_path)))

    @property
    def path(self) -> Path:
        """Return the loaded outline.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._path is None:
            raise RuntimeError("SVG not loaded. Call load() first.")

        return self._path

    @property
    def segment_count(self) -> int:
        """Return the number of segments in the loaded outline.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        return len(self.path)

    @staticmethod
    def from_path_data(path_data: str) -> Path:
        """Build a Path from raw SVG path data instead of a file."""
        return svg_path_to_domain(path_data)

    def close(self) -> None:
        """Release the loaded outline."""
        self._path = None

    def __enter__(self) -> "PathReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
