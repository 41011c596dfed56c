"""Stretchpath - Nine-patch style resizing for vector paths.

Stretchpath resizes a vector path (move/line/quadratic/cubic/close commands) to
an arbitrary target size while only deforming designated stretch regions on
each axis. Corner radii, icon strokes and other fixed detail keep their shape
while backgrounds and borders grow.

Example:
    $ stretchpath bubble.svg --rect 9,7,15,13 --size 68x32

This will create bubble-68x32.svg with the region between x=9..15 and
y=7..13 stretched to reach the requested size.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
