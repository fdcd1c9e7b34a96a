"""
Catmull-Rom spline built from cubic Hermite segments
"""

import logging
from typing import List, Sequence

import numpy as np

logger = logging.getLogger(__name__)


def hermite(
    p0: np.ndarray,
    v0: np.ndarray,
    t0: float,
    p1: np.ndarray,
    v1: np.ndarray,
    t1: float,
    t: float,
) -> np.ndarray:
    """
    Evaluate one cubic Hermite segment

    Args:
        p0: Start position of the segment
        v0: Tangent at p0
        t0: Knot of p0
        p1: End position of the segment
        v1: Tangent at p1
        t1: Knot of p1
        t: Parameter to evaluate at

    Returns:
        Interpolated 2D position
    """
    dt = t1 - t0
    s = (t - t0) / dt
    a0 = p0
    a1 = v0
    a2 = (p1 - p0) * 3.0 / dt / dt - (v1 + 2.0 * v0) / dt
    a3 = (p0 - p1) * 2.0 / dt**3 + (v1 + v0) / dt**2
    return ((a3 * s + a2) * s + a1) * s + a0


class CatmullRomSpline:
    """2D Catmull-Rom spline through user-supplied control points"""

    def __init__(self) -> None:
        self._points: List[np.ndarray] = []
        self._knots: List[float] = []

    def __len__(self) -> int:
        return len(self._points)

    @property
    def control_points(self) -> np.ndarray:
        """Control points as an N x 2 array (copy)"""
        if not self._points:
            return np.zeros((0, 2))
        return np.array(self._points)

    @property
    def knots(self) -> np.ndarray:
        """Knot values, one per control point (copy)"""
        return np.array(self._knots, dtype=float)

    def add_control_point(self, point: Sequence[float]) -> float:
        """
        Append a control point

        The knot is 0 for the first point and the previous knot + 1 otherwise.

        Args:
            point: World-space (x, y)

        Returns:
            Knot assigned to the new point
        """
        knot = 0.0 if not self._knots else self._knots[-1] + 1.0
        self._points.append(np.array(point, dtype=float))
        self._knots.append(knot)
        logger.debug("Control point (%.3f, %.3f) added at knot %.1f", point[0], point[1], knot)
        return knot

    def _tangent(self, i: int) -> np.ndarray:
        # Centered difference; zero at the ends
        if i <= 0 or i >= len(self._points) - 1:
            return np.zeros(2)
        return (self._points[i + 1] - self._points[i - 1]) / (
            self._knots[i + 1] - self._knots[i - 1]
        )

    def evaluate(self, t: float) -> np.ndarray:
        """
        Evaluate the spline at parameter t

        Segments are closed intervals scanned in order, so a value exactly on
        a shared knot belongs to the earlier segment. Values outside the knot
        range are clamped to the first or last control point.

        Args:
            t: Knot-space parameter

        Returns:
            2D point, or the origin if fewer than two control points exist
        """
        if len(self._points) < 2:
            return np.zeros(2)

        for i in range(len(self._points) - 1):
            t0 = self._knots[i]
            t1 = self._knots[i + 1]
            if t0 <= t <= t1:
                return hermite(
                    self._points[i], self._tangent(i), t0,
                    self._points[i + 1], self._tangent(i + 1), t1,
                    t,
                )

        if t < self._knots[0]:
            return self._points[0].copy()
        return self._points[-1].copy()

    def derivative(self, t: float, h: float = 0.001) -> np.ndarray:
        """
        First derivative by symmetric finite differences

        Args:
            t: Knot-space parameter
            h: Difference step

        Returns:
            Approximate tangent vector
        """
        return (self.evaluate(t + h) - self.evaluate(t - h)) / (2.0 * h)

    def second_derivative(self, t: float, h: float = 0.001) -> np.ndarray:
        """
        Second derivative by symmetric finite differences

        Args:
            t: Knot-space parameter
            h: Difference step

        Returns:
            Approximate second derivative vector
        """
        return (
            self.evaluate(t + h) - 2.0 * self.evaluate(t) + self.evaluate(t - h)
        ) / (h * h)

    def sample(self, segments: int = 100) -> np.ndarray:
        """
        Evaluate evenly spaced points over the knot range

        Args:
            segments: Number of polyline segments

        Returns:
            (segments + 1) x 2 array, empty if fewer than two control points
        """
        if len(self._points) < 2:
            return np.zeros((0, 2))

        t_min = self._knots[0]
        t_max = self._knots[-1]
        ts = t_min + (t_max - t_min) * np.arange(segments + 1) / segments
        return np.array([self.evaluate(t) for t in ts])
