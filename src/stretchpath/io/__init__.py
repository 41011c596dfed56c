"""SVG I/O layer for stretchpath.

This module handles reading and writing SVG files using fontTools' svgLib
and pens. It provides a clean abstraction layer between SVG markup and the
domain models.

Key responsibilities:
- Load SVG documents and raw path data
- Convert between SVG path data and domain Paths
- Write resized paths with size-suffixed naming convention

Key classes:
- PathReader: Load SVG files and extract their outline
- PathWriter: Save resized paths as SVG files
"""

from stretchpath.io.converter import domain_to_svg_path, svg_path_to_domain
from stretchpath.io.reader import PathReader
from stretchpath.io.writer import PathWriter, build_svg_document

__all__ = [
    "PathReader",
    "PathWriter",
    "build_svg_document",
    "domain_to_svg_path",
    "svg_path_to_domain",
]
