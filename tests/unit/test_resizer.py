"""Tests for the PathResizer."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from stretchpath.core import PathResizer, slice_path
from stretchpath.domain import Bounds, Path, Point, SegmentType, Slice, Slices, SliceSet
from stretchpath.exceptions import DegenerateStretchError, UndersizedTargetError


@pytest.fixture
def square() -> Path:
    """24x24 square with extra on-edge points at the slice boundaries."""
    path = Path()
    path.move_to(0, 0)
    path.line_to(9, 0)
    path.line_to(15, 0)
    path.line_to(24, 0)
    path.line_to(24, 24)
    path.line_to(0, 24)
    path.close()
    return path


@pytest.fixture
def slices() -> Slices:
    """Single region from (9, 7) to (15, 13)."""
    return SliceSet.from_rect(9, 7, 15, 13)


def _xs(path: Path) -> list[float]:
    return [s.end_point.x for s in path if s.end_point is not None]


def _ys(path: Path) -> list[float]:
    return [s.end_point.y for s in path if s.end_point is not None]


class TestConstruction:
    """Tests for PathResizer construction."""

    def test_bounds_and_extents(self, square: Path, slices: Slices) -> None:
        """Test bounds and stretchable extents are cached."""
        resizer = PathResizer(square, *slices)
        assert resizer.bounds == Bounds(0, 0, 24, 24)
        assert resizer.stretchable_width == 6.0
        assert resizer.stretchable_height == 6.0
        assert len(resizer.segments) == len(square)
        assert resizer.vertical_slices is slices.vertical
        assert resizer.horizontal_slices is slices.horizontal

    def test_slice_path(self, square: Path, slices: Slices) -> None:
        """Test the Slices pair shortcut."""
        resizer = slice_path(square, slices)
        assert resizer.stretchable_width == 6.0

    def test_control_bounds(self, slices: Slices) -> None:
        """Test control bounds include off-curve points."""
        path = Path()
        path.move_to(0, 0)
        path.quad_to(12, 24, 24, 0)
        path.close()

        resizer = PathResizer(path, *slices)
        assert resizer.control_bounds == Bounds(0, 0, 24, 24)
        assert resizer.bounds.height == pytest.approx(12.0)

    def test_tight_bounds_ignore_control_points(self, slices: Slices) -> None:
        """Test bounds follow the curve, not its control points."""
        path = Path()
        path.move_to(0, 0)
        path.quad_to(12, 24, 24, 0)
        path.close()

        resizer = PathResizer(path, *slices)
        assert resizer.bounds.height == pytest.approx(12.0)
        # Allowed because the rendered curve is only 12 units tall
        resizer.resize(24, 12)


class TestResize:
    """Tests for PathResizer.resize."""

    def test_scenario_width(self, square: Path, slices: Slices) -> None:
        """Test the worked example: stretch X by 1, Y untouched."""
        resized = PathResizer(square, *slices).resize(30, 24)
        assert _xs(resized) == pytest.approx([0, 9, 21, 30, 30, 0])
        assert _ys(resized) == pytest.approx([0, 0, 0, 0, 24, 24])

    def test_scenario_height(self, square: Path, slices: Slices) -> None:
        """Test stretching Y only."""
        resized = PathResizer(square, *slices).resize(24, 36)
        assert _xs(resized) == pytest.approx([0, 9, 15, 24, 24, 0])
        assert _ys(resized) == pytest.approx([0, 0, 0, 0, 36, 36])

    def test_resized_bounds(self, square: Path, slices: Slices) -> None:
        """Test the result has the requested size."""
        resized = PathResizer(square, *slices).resize(68, 32)
        resized_bounds = PathResizer(resized, *slices).bounds
        assert resized_bounds.width == pytest.approx(68)
        assert resized_bounds.height == pytest.approx(32)

    def test_identity(self, square: Path, slices: Slices) -> None:
        """Test resizing to the source size reproduces the path."""
        resizer = PathResizer(square, *slices)
        assert resizer.resize(24, 24) == square

    def test_command_sequence_preserved(self, square: Path, slices: Slices) -> None:
        """Test segment types are replayed in order."""
        resized = PathResizer(square, *slices).resize(40, 40)
        assert [s.type for s in resized] == [s.type for s in square]

    def test_undersized_width(self, square: Path, slices: Slices) -> None:
        """Test shrinking the width is rejected."""
        with pytest.raises(UndersizedTargetError, match="width"):
            PathResizer(square, *slices).resize(23.9, 24)

    def test_undersized_height(self, square: Path, slices: Slices) -> None:
        """Test shrinking the height is rejected."""
        with pytest.raises(UndersizedTargetError, match="height"):
            PathResizer(square, *slices).resize(24, 10)

    def test_nan_target_rejected(self, square: Path, slices: Slices) -> None:
        """Test a NaN size is rejected and dst is left untouched."""
        dst = Path()
        resizer = PathResizer(square, *slices)
        with pytest.raises(UndersizedTargetError, match="width"):
            resizer.resize(float("nan"), 24, dst)
        with pytest.raises(UndersizedTargetError, match="height"):
            resizer.resize(24, float("nan"), dst)
        assert dst.is_empty()

    def test_dst_untouched_on_error(self, square: Path, slices: Slices) -> None:
        """Test validation happens before the destination is reset."""
        dst = Path()
        dst.move_to(1, 1)
        with pytest.raises(UndersizedTargetError):
            PathResizer(square, *slices).resize(10, 10, dst)
        assert len(dst) == 1

    def test_dst_reused(self, square: Path, slices: Slices) -> None:
        """Test the destination is reset and returned."""
        resizer = PathResizer(square, *slices)
        dst = Path()
        first = resizer.resize(30, 30, dst)
        second = resizer.resize(40, 40, dst)
        assert first is dst
        assert second is dst
        assert len(dst) == len(square)
        assert _xs(dst)[3] == pytest.approx(40)

    def test_left_invariance(self, square: Path, slices: Slices) -> None:
        """Test points before the first slice never move."""
        resizer = PathResizer(square, *slices)
        for width in (24, 30, 50, 200):
            resized = resizer.resize(width, 24)
            for original, moved in zip(_xs(square), _xs(resized), strict=True):
                if original <= 9:
                    assert moved == original

    def test_monotonic_in_width(self, square: Path, slices: Slices) -> None:
        """Test growing the target never moves points backwards."""
        resizer = PathResizer(square, *slices)
        previous = _xs(resizer.resize(24, 24))
        for width in range(25, 60, 5):
            current = _xs(resizer.resize(width, 24))
            for original, before, after in zip(_xs(square), previous, current, strict=True):
                if original >= 9:
                    assert after >= before
            previous = current

    def test_multiple_slices(self) -> None:
        """Test two slices share the extra width evenly."""
        path = Path()
        path.move_to(0, 0)
        path.line_to(12, 0)
        path.line_to(24, 0)
        path.line_to(24, 24)
        path.close()

        slices = Slices.from_lists(
            [Slice(9, 10), Slice(14, 15)],
            [Slice(5, 6), Slice(18, 19)],
        )
        resized = PathResizer(path, *slices).resize(44, 24)
        # stretch_x = 20 / 2 = 10 per unit; x=12 is past the first slice only
        assert _xs(resized) == pytest.approx([0, 22, 44, 44])


class TestCurves:
    """Tests for curve-consistent transformation."""

    @pytest.fixture
    def frame(self) -> Path:
        """24x24 frame to pin the bounds."""
        path = Path()
        path.move_to(0, 0)
        path.line_to(24, 0)
        path.line_to(24, 24)
        path.line_to(0, 24)
        path.close()
        return path

    def test_cubic_moves_rigidly(self, frame: Path, slices: Slices) -> None:
        """Test cubic control points move with the end point."""
        frame.move_to(2, 2)
        frame.cubic_to(20, 2, 5, 20, 12, 20)
        frame.close()

        resized = PathResizer(frame, *slices).resize(30, 24)
        cubic = [s for s in resized if s.type == SegmentType.CUBIC][0]
        # End point at x=12 is halfway into the slice: dx = 3
        assert cubic.points == (Point(23, 2), Point(8, 20), Point(15, 20))

    def test_quadratic_moves_rigidly(self, frame: Path, slices: Slices) -> None:
        """Test quadratic control point moves with the end point."""
        frame.move_to(2, 2)
        frame.quad_to(20, 2, 20, 20)
        frame.close()

        resized = PathResizer(frame, *slices).resize(30, 30)
        quad = [s for s in resized if s.type == SegmentType.QUADRATIC][0]
        # End point (20, 20) is past both slices: dx = dy = 6
        assert quad.points == (Point(26, 8), Point(26, 26))

    def test_line_start_not_reoffset(self, frame: Path, slices: Slices) -> None:
        """Test a line only moves its own end point."""
        frame.move_to(2, 2)
        frame.line_to(20, 2)
        frame.end()

        resized = PathResizer(frame, *slices).resize(30, 24)
        tail = list(resized)[-3:]
        assert tail[0].points == (Point(2, 2),)
        assert tail[1].points == (Point(26, 2),)
        assert tail[2].type == SegmentType.END


class TestDegenerateAxis:
    """Tests for axes without stretchable extent."""

    def test_same_size_allowed(self, square: Path) -> None:
        """Test a degenerate axis works when it does not need to grow."""
        slices = Slices.from_lists([Slice(5, 5)], [Slice(7, 13)])
        resized = PathResizer(square, *slices).resize(24, 30)
        assert _xs(resized) == _xs(square)

    def test_growth_rejected(self, square: Path) -> None:
        """Test a degenerate axis cannot grow."""
        slices = Slices.from_lists([Slice(5, 5)], [Slice(7, 13)])
        dst = Path()
        with pytest.raises(DegenerateStretchError, match="width"):
            PathResizer(square, *slices).resize(30, 24, dst)
        assert dst.is_empty()


class TestConcurrency:
    """Tests for concurrent resize calls on one instance."""

    def test_concurrent_resizes_are_independent(self, square: Path, slices: Slices) -> None:
        """Test parallel resizes match sequential results."""
        resizer = PathResizer(square, *slices)
        sizes = [(24 + i, 24 + 2 * i) for i in range(40)]
        expected = [resizer.resize(w, h) for w, h in sizes]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda size: resizer.resize(*size), sizes))

        assert results == expected
