"""
Gondola dynamics equations
"""

from typing import TYPE_CHECKING, Tuple

import numpy as np

if TYPE_CHECKING:
    from gondola.params import GondolaParams


class Dynamics:
    """Energy and force balance of a body rolling on a curve"""

    def __init__(self, params: "GondolaParams") -> None:
        """
        Initialize dynamics calculator

        Args:
            params: Simulation parameters
        """
        self.params = params

    @staticmethod
    def frame(tangent: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """
        Moving frame of the curve

        Args:
            tangent: Curve first derivative (non-zero)

        Returns:
            Tuple of (unit_tangent, left_normal)
        """
        unit_tangent = tangent / np.linalg.norm(tangent)
        normal = np.array([-unit_tangent[1], unit_tangent[0]])
        return unit_tangent, normal

    @staticmethod
    def curvature(tangent: np.ndarray, second: np.ndarray) -> float:
        """
        Signed curvature from first and second derivatives

        Positive when the curve turns counter-clockwise.
        """
        tangent_length = np.linalg.norm(tangent)
        cross = tangent[0] * second[1] - tangent[1] * second[0]
        return float(cross / tangent_length**3)

    def speed(self, initial_height: float, current_height: float) -> float:
        """
        Speed from energy conservation: v = sqrt(g * (h0 - h))

        A body above its starting height has no real speed; the radicand is
        passed through unchanged, so numpy yields NaN with a RuntimeWarning.
        """
        return float(np.sqrt(self.params.gravity * (initial_height - current_height)))

    def radial_force(self, curvature: float, speed: float, normal: np.ndarray) -> float:
        """
        Net force pressing the body onto the track (per unit mass)

        Negative means the track can no longer hold the body.
        """
        return curvature * speed * speed + self.params.gravity * float(normal[1])
