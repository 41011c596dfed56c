"""Tests for fontTools pen based decomposition and bounds."""

import pytest

from stretchpath.core.geometry import (
    SegmentPen,
    compute_control_bounds,
    compute_tight_bounds,
    decompose,
    to_path,
)
from stretchpath.domain import Bounds, Path, Point, SegmentType


class Drawing:
    """Minimal drawable replaying fontTools pen calls."""

    def __init__(self, *calls: tuple[str, tuple]) -> None:
        self.calls = calls

    def draw(self, pen) -> None:
        for method, args in self.calls:
            getattr(pen, method)(*args)


class TestSegmentPen:
    """Tests for SegmentPen and decompose."""

    def test_records_basic_commands(self) -> None:
        """Test each pen command becomes one segment."""
        drawing = Drawing(
            ("moveTo", ((0, 0),)),
            ("lineTo", ((10, 0),)),
            ("curveTo", ((12, 0), (14, 2), (14, 4))),
            ("qCurveTo", ((14, 10), (10, 10))),
            ("closePath", ()),
        )
        segments = decompose(drawing)
        assert [s.type for s in segments] == [
            SegmentType.MOVE,
            SegmentType.LINE,
            SegmentType.CUBIC,
            SegmentType.QUADRATIC,
            SegmentType.CLOSE,
        ]
        assert segments[2].points == (Point(12, 0), Point(14, 2), Point(14, 4))

    def test_truetype_quadratic_run_split(self) -> None:
        """Test several off-curve points become single quadratics."""
        drawing = Drawing(
            ("moveTo", ((0, 0),)),
            ("qCurveTo", ((0, 10), (10, 10), (10, 0))),
            ("closePath", ()),
        )
        segments = decompose(drawing)
        quads = [s for s in segments if s.type == SegmentType.QUADRATIC]
        assert len(quads) == 2
        # Implied on-curve point halfway between the two off-curve points
        assert quads[0].points == (Point(0, 10), Point(5.0, 10.0))
        assert quads[1].points == (Point(10, 10), Point(10, 0))

    def test_open_contour(self) -> None:
        """Test endPath is kept as an END segment."""
        drawing = Drawing(
            ("moveTo", ((0, 0),)),
            ("lineTo", ((5, 5),)),
            ("endPath", ()),
        )
        assert decompose(drawing)[-1].type == SegmentType.END

    def test_pen_is_reusable_for_several_contours(self) -> None:
        """Test one pen collects every contour in order."""
        pen = SegmentPen()
        for offset in (0, 10):
            pen.moveTo((offset, 0))
            pen.lineTo((offset + 5, 0))
            pen.closePath()
        assert len(pen.segments) == 6

    def test_domain_path_passthrough(self) -> None:
        """Test a domain Path decomposes to its own segments."""
        path = Path()
        path.move_to(1, 2)
        path.line_to(3, 4)
        assert decompose(path) == list(path.segments)
        assert to_path(path) == path


class TestBounds:
    """Tests for tight and control bounds."""

    def test_tight_bounds_of_curve(self) -> None:
        """Test tight bounds stop at the curve extremum."""
        drawing = Drawing(
            ("moveTo", ((0, 0),)),
            ("qCurveTo", ((12, 24), (24, 0))),
            ("closePath", ()),
        )
        assert compute_tight_bounds(drawing) == Bounds(0, 0, 24, 12)
        assert compute_control_bounds(drawing) == Bounds(0, 0, 24, 24)

    def test_tight_bounds_of_cubic(self) -> None:
        """Test cubic extrema are included."""
        path = Path()
        path.move_to(0, 0)
        path.cubic_to(0, 8, 8, 8, 8, 0)
        path.close()
        bounds = compute_tight_bounds(path)
        assert bounds.max_y == pytest.approx(6.0)
        assert bounds.width == pytest.approx(8.0)

    def test_empty_path(self) -> None:
        """Test an empty path has zero bounds."""
        assert compute_tight_bounds(Path()) == Bounds(0.0, 0.0, 0.0, 0.0)
        assert compute_control_bounds(Path()) == Bounds(0.0, 0.0, 0.0, 0.0)
