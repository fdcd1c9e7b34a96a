"""
Interactively grown track geometry
"""

import logging
from typing import Iterable, Optional, Sequence, Tuple

import numpy as np

from gondola.params import GondolaParams
from gondola.spline import CatmullRomSpline

logger = logging.getLogger(__name__)


class Track:
    """Track made of user-placed control points and a dense display polyline"""

    def __init__(self, params: Optional[GondolaParams] = None) -> None:
        """
        Initialize an empty track

        Args:
            params: Simulation parameters (sampling density, derivative step)
        """
        self.params = params if params is not None else GondolaParams()
        self.spline = CatmullRomSpline()
        self._samples = np.zeros((0, 2))

    @classmethod
    def from_points(
        cls, points: Iterable[Sequence[float]], params: Optional[GondolaParams] = None
    ) -> "Track":
        """Build a track by adding the given points in order"""
        track = cls(params)
        for point in points:
            track.add_control_point(point)
        return track

    def __len__(self) -> int:
        return len(self.spline)

    @property
    def control_points(self) -> np.ndarray:
        """Control points in insertion order (N x 2)"""
        return self.spline.control_points

    @property
    def knots(self) -> np.ndarray:
        """Knot of each control point"""
        return self.spline.knots

    @property
    def samples(self) -> np.ndarray:
        """Dense curve samples for display (M x 2)"""
        return self._samples.copy()

    def add_control_point(self, point: Sequence[float]) -> float:
        """
        Extend the track with a new control point

        Args:
            point: World-space (x, y)

        Returns:
            Knot assigned to the point

        Raises:
            ValueError: If point is not a finite 2D coordinate
        """
        coords = np.asarray(point, dtype=float)
        if coords.shape != (2,):
            raise ValueError(f"Control point must have 2 coordinates, got shape {coords.shape}")
        if not np.all(np.isfinite(coords)):
            raise ValueError(f"Control point must be finite, got {tuple(coords)}")

        knot = self.spline.add_control_point(coords)
        self.update()
        return knot

    def update(self) -> None:
        """Regenerate the display polyline"""
        self._samples = self.spline.sample(self.params.curve_samples)
        logger.debug(
            "Track rebuilt: %d control points, %d samples", len(self), len(self._samples)
        )

    def knot_range(self) -> Tuple[float, float]:
        """
        Valid parameter range of the track

        Returns:
            Tuple of (first_knot, last_knot), (0.0, 0.0) when empty
        """
        knots = self.spline.knots
        if len(knots) == 0:
            return 0.0, 0.0
        return float(knots[0]), float(knots[-1])

    def evaluate(self, t: float) -> np.ndarray:
        """Point on the curve at parameter t"""
        return self.spline.evaluate(t)

    def derivative(self, t: float) -> np.ndarray:
        """Tangent at parameter t"""
        return self.spline.derivative(t, self.params.derivative_step)

    def second_derivative(self, t: float) -> np.ndarray:
        """Second derivative at parameter t"""
        return self.spline.second_derivative(t, self.params.derivative_step)
