"""
Unit tests for spline evaluation.

Tests the Hermite segment and the CatmullRomSpline evaluate / derivative methods.
"""

import numpy as np
import pytest

from gondola import CatmullRomSpline, hermite


class TestHermite:
    """Test suite for a single Hermite segment"""

    def test_interpolates_start_point(self) -> None:
        """Test that s = 0 returns p0 exactly"""
        p0 = np.array([1.0, 2.0])
        p1 = np.array([4.0, -3.0])
        v0 = np.array([0.5, 0.5])
        v1 = np.array([-1.0, 2.0])

        result = hermite(p0, v0, 2.0, p1, v1, 3.0, 2.0)

        assert np.array_equal(result, p0)

    def test_interpolates_end_point(self) -> None:
        """Test that s = 1 returns p1"""
        p0 = np.array([1.0, 2.0])
        p1 = np.array([4.0, -3.0])
        v0 = np.array([0.5, 0.5])
        v1 = np.array([-1.0, 2.0])

        result = hermite(p0, v0, 2.0, p1, v1, 3.0, 3.0)

        assert result == pytest.approx(p1)

    def test_zero_tangents_give_midpoint(self) -> None:
        """Test that with zero tangents the curve passes the midpoint at s = 0.5"""
        p0 = np.array([0.0, 0.0])
        p1 = np.array([2.0, 4.0])
        zero = np.zeros(2)

        result = hermite(p0, zero, 0.0, p1, zero, 1.0, 0.5)

        assert result == pytest.approx([1.0, 2.0])


class TestCatmullRomSpline:
    """Test suite for spline construction and evaluation"""

    @pytest.fixture
    def spline(self) -> CatmullRomSpline:
        """Create a spline through (0,0), (1,-1), (2,0)"""
        spline = CatmullRomSpline()
        for point in [(0.0, 0.0), (1.0, -1.0), (2.0, 0.0)]:
            spline.add_control_point(point)
        return spline

    def test_knots_follow_insertion_index(self) -> None:
        """Test that after N additions the knots are 0, 1, ..., N-1"""
        spline = CatmullRomSpline()
        for i in range(6):
            knot = spline.add_control_point((float(i), float(i * i)))
            assert knot == float(i)

        assert list(spline.knots) == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
        assert len(spline) == 6

    def test_empty_spline_returns_origin(self) -> None:
        """Test that evaluating an empty spline returns the origin"""
        spline = CatmullRomSpline()

        assert np.array_equal(spline.evaluate(0.0), [0.0, 0.0])

    @pytest.mark.parametrize("t", [-3.0, 0.0, 0.5, 1.0, 10.0])
    def test_single_point_returns_origin(self, t: float) -> None:
        """Test that a spline with one control point returns the origin for any t"""
        spline = CatmullRomSpline()
        spline.add_control_point((3.0, 4.0))

        assert np.array_equal(spline.evaluate(t), [0.0, 0.0])

    def test_interpolates_control_points(self, spline: CatmullRomSpline) -> None:
        """Test that the curve passes through every control point at its knot"""
        assert spline.evaluate(0.0) == pytest.approx([0.0, 0.0])
        assert spline.evaluate(1.0) == pytest.approx([1.0, -1.0])
        assert spline.evaluate(2.0) == pytest.approx([2.0, 0.0])

    def test_two_point_endpoints(self) -> None:
        """Test endpoint interpolation with exactly two control points"""
        spline = CatmullRomSpline()
        spline.add_control_point((-2.0, 3.0))
        spline.add_control_point((5.0, 1.0))

        assert spline.evaluate(0.0) == pytest.approx([-2.0, 3.0])
        assert spline.evaluate(1.0) == pytest.approx([5.0, 1.0])

    def test_below_range_returns_first_point(self, spline: CatmullRomSpline) -> None:
        """Test that parameters before the first knot are not extrapolated"""
        assert np.array_equal(spline.evaluate(-5.0), [0.0, 0.0])

    def test_above_range_returns_last_point(self, spline: CatmullRomSpline) -> None:
        """Test that parameters after the last knot are not extrapolated"""
        assert np.array_equal(spline.evaluate(7.5), [2.0, 0.0])

    def test_symmetric_track_is_symmetric(self, spline: CatmullRomSpline) -> None:
        """Test that a mirror-symmetric control polygon gives a mirror-symmetric curve"""
        left = spline.evaluate(0.7)
        right = spline.evaluate(1.3)

        assert left[0] == pytest.approx(2.0 - right[0])
        assert left[1] == pytest.approx(right[1])

    def test_control_points_snapshot_is_copy(self, spline: CatmullRomSpline) -> None:
        """Test that modifying the returned points does not change the spline"""
        points = spline.control_points
        points[0] = [100.0, 100.0]

        assert spline.evaluate(0.0) == pytest.approx([0.0, 0.0])

    def test_derivative_of_straight_segment(self) -> None:
        """Test finite-difference derivative on a two-point segment"""
        spline = CatmullRomSpline()
        spline.add_control_point((0.0, 0.0))
        spline.add_control_point((2.0, 0.0))

        # x(s) = 2 (3s² - 2s³), x'(0.5) = 3
        assert spline.derivative(0.5) == pytest.approx([3.0, 0.0], abs=1e-4)

    def test_second_derivative_of_straight_segment(self) -> None:
        """Test finite-difference second derivative on a two-point segment"""
        spline = CatmullRomSpline()
        spline.add_control_point((0.0, 0.0))
        spline.add_control_point((2.0, 0.0))

        # x''(s) = 2 (6 - 12s), x''(0.25) = 6
        assert spline.second_derivative(0.25) == pytest.approx([6.0, 0.0], abs=1e-4)

    def test_interior_tangent_is_centered_difference(self) -> None:
        """Test that the tangent at an interior knot is (P[i+1] - P[i-1]) / 2"""
        spline = CatmullRomSpline()
        for point in [(0.0, 0.0), (1.0, 1.0), (2.0, 0.0)]:
            spline.add_control_point(point)

        assert spline.derivative(1.0) == pytest.approx([1.0, 0.0], abs=1e-2)

    def test_end_tangents_are_zero(self, spline: CatmullRomSpline) -> None:
        """Test that the curve leaves the first point with zero velocity"""
        assert np.linalg.norm(spline.derivative(0.001)) < 0.05

    def test_sample_count_and_endpoints(self, spline: CatmullRomSpline) -> None:
        """Test that sampling returns segments + 1 points spanning the knot range"""
        samples = spline.sample(100)

        assert samples.shape == (101, 2)
        assert samples[0] == pytest.approx([0.0, 0.0])
        assert samples[-1] == pytest.approx([2.0, 0.0])

    def test_sample_requires_two_points(self) -> None:
        """Test that sampling fewer than two points returns an empty polyline"""
        spline = CatmullRomSpline()
        spline.add_control_point((1.0, 1.0))

        assert spline.sample(100).shape == (0, 2)
