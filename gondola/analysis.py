"""
Run analysis functions
"""

from typing import Any, Dict

import numpy as np
from scipy.integrate import trapezoid

from gondola.params import GondolaParams
from gondola.simulator import Gondola
from gondola.state import GondolaState


class RunAnalyzer:
    """Summarises a recorded gondola run"""

    def __init__(self, params: GondolaParams) -> None:
        """
        Initialize run analyzer

        Args:
            params: Simulation parameters
        """
        self.params = params

    def analyze(self, t: np.ndarray, history: np.ndarray, gondola: Gondola) -> Dict[str, Any]:
        """
        Analyze a run recorded by Gondola.simulate

        Args:
            t: Time array
            history: State history [N x 5] with [parameter, x, y, rotation_angle, velocity]
            gondola: The gondola after the run

        Returns:
            Dictionary with analysis results
        """
        parameter = history[:, 0]
        rotation = history[:, 3]
        velocity = history[:, 4]

        # Speed is NaN where the body would sit above its start height
        finite = np.isfinite(velocity)
        max_speed = float(np.max(velocity[finite])) if np.any(finite) else 0.0
        mean_speed = float(np.mean(velocity[finite])) if np.any(finite) else 0.0
        distance = float(trapezoid(np.where(finite, velocity, 0.0), t)) if len(t) > 1 else 0.0
        # Height the body had fallen below its start when it was fastest
        max_drop = max_speed**2 / self.params.gravity if self.params.gravity > 0 else 0.0

        first_knot, last_knot = gondola.track.knot_range()
        span = last_knot - first_knot
        final_parameter = float(parameter[-1])
        progress = (final_parameter - first_knot) / span if span > 0 else 0.0

        fell = gondola.state == GondolaState.FALLEN
        return {
            "duration": float(t[-1]) if len(t) > 0 else 0.0,
            "steps": len(t) - 1,
            "max_speed": max_speed,
            "mean_speed": mean_speed,
            "distance": distance,
            "max_drop": float(max_drop),
            "final_parameter": final_parameter,
            "progress": float(min(progress, 1.0)),
            "total_rotation": float(rotation[-1] - rotation[0]),
            "fell": fell,
            "fall_reason": gondola.fall_reason.value if gondola.fall_reason else None,
        }
