"""SVG writer for saving resized paths.

This module provides the PathWriter class for writing a domain Path as a
standalone SVG document.
"""

from pathlib import Path as FilePath
from xml.etree import ElementTree

from stretchpath.config import OutputConfig
from stretchpath.core.geometry import compute_tight_bounds
from stretchpath.domain import Path
from stretchpath.io.converter import _number_formatter, domain_to_svg_path

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def build_svg_document(path: Path, config: OutputConfig) -> str:
    """Build an SVG document holding a single path.

    The viewBox is the tight bounds of the path grown by the configured
    padding on every side.

    Args:
        path: Path to embed
        config: Output settings (precision, fill, padding)

    Returns:
        SVG document as a string
    """
    ntos = _number_formatter(config.precision)
    bounds = compute_tight_bounds(path)
    pad = config.padding
    width = bounds.width + 2 * pad
    height = bounds.height + 2 * pad

    root = ElementTree.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "width": ntos(width),
            "height": ntos(height),
            "viewBox": " ".join(
                ntos(v) for v in (bounds.min_x - pad, bounds.min_y - pad, width, height)
            ),
        },
    )
    ElementTree.SubElement(
        root,
        "path",
        {
            "d": domain_to_svg_path(path, config.precision),
            "fill": config.fill,
        },
    )
    return ElementTree.tostring(root, encoding="unicode") + "\n"


class PathWriter:
    """Writes resized paths as SVG files.

    Example:
        writer = PathWriter(FilePath("icon-68x32.svg"))
        writer.write(resized_path)
    """

    def __init__(self, output_path: FilePath) -> None:
        """Initialize the path writer.

        Args:
            output_path: Path where the SVG will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> FilePath:
        return self._output_path

    def write(self, path: Path, config: OutputConfig | None = None) -> None:
        """Save the path to the output file.

        Args:
            path: Path to write
            config: Output settings (defaults when None)

        Raises:
            OSError: If the file cannot be written
        """
        document = build_svg_document(path, config or OutputConfig())
        self._output_path.write_text(document, encoding="utf-8")

    @staticmethod
    def get_resized_path(input_path: FilePath, width: float, height: float) -> FilePath:
        """Generate output path with the target size in its name.

        Converts: icon.svg -> icon-68x32.svg
                  bubble.svg (30.5 x 24) -> bubble-30.5x24.svg

        Args:
            input_path: Original SVG file path
            width: Target width
            height: Target height

        Returns:
            Path with -{width}x{height} suffix before the extension
        """
        suffix = input_path.suffix or ".svg"
        return input_path.parent / f"{input_path.stem}-{width:g}x{height:g}{suffix}"
