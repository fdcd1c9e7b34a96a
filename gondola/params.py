"""
Gondola physical and numerical parameters
"""

from dataclasses import dataclass


@dataclass
class GondolaParams:
    """Physical and numerical parameters of the simulation"""

    gravity: float = 40.0  # world units/s², drives both speed and radial force
    body_radius: float = 1.0  # world units, offset of the body from the curve
    derivative_step: float = 0.001  # finite-difference step in knot space
    epsilon: float = 0.001  # minimum tangent length for a valid step
    curve_samples: int = 100  # segments in the display polyline
    start_offset: float = 0.01  # knot offset past the first control point
    time_step: float = 0.01  # sub-step used when advancing an interval
    start_energy_bias: float = 0.5  # added to the informal start energy

    def __post_init__(self) -> None:
        """Validate parameters"""
        if self.body_radius <= 0:
            raise ValueError(f"body_radius must be positive, got {self.body_radius}")
        if self.derivative_step <= 0:
            raise ValueError(f"derivative_step must be positive, got {self.derivative_step}")
        if self.time_step <= 0:
            raise ValueError(f"time_step must be positive, got {self.time_step}")
        if self.curve_samples < 1:
            raise ValueError(f"curve_samples must be at least 1, got {self.curve_samples}")
