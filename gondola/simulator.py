"""
Gondola riding along a track
"""

import logging
from typing import Optional, Tuple

import numpy as np

from gondola.dynamics import Dynamics
from gondola.params import GondolaParams
from gondola.state import BodySnapshot, FallReason, GondolaState
from gondola.track import Track

logger = logging.getLogger(__name__)


class Gondola:
    """Simulates a round body rolling along a track under gravity"""

    def __init__(self, track: Track, params: Optional[GondolaParams] = None) -> None:
        """
        Initialize gondola

        Args:
            track: Track to ride on (not owned)
            params: Simulation parameters, defaults to the track's parameters
        """
        self.track = track
        self.params = params if params is not None else track.params
        self.dynamics = Dynamics(self.params)

        self.parameter = 0.0
        self.velocity = 0.0
        self.energy = 0.0
        self.position = np.zeros(2)
        self.rotation_angle = 0.0
        self.state = GondolaState.IDLE
        self.fall_reason: Optional[FallReason] = None

    @property
    def radius(self) -> float:
        """Body radius"""
        return self.params.body_radius

    def start(self) -> None:
        """
        Place the gondola at the start of the track and set it running

        Does nothing unless the gondola is idle. The gondola stays idle while
        the track has fewer than two control points.
        """
        if self.state != GondolaState.IDLE:
            return
        if len(self.track) < 2:
            logger.warning("Cannot start: track has %d control point(s)", len(self.track))
            return

        first_knot, _ = self.track.knot_range()
        self.parameter = first_knot + self.params.start_offset
        self.velocity = 0.0

        point = self.track.evaluate(self.parameter)
        tangent = self.track.derivative(self.parameter)
        if np.linalg.norm(tangent) < self.params.epsilon:
            normal = np.array([0.0, 1.0])
        else:
            _, normal = self.dynamics.frame(tangent)

        self.position = point + normal * self.radius
        self.rotation_angle = 0.0
        self.energy = self.params.gravity * float(point[1]) + self.params.start_energy_bias
        self.state = GondolaState.RUNNING
        logger.info("Gondola started at parameter %.3f", self.parameter)

    def step(self, dt: float) -> None:
        """
        Advance the gondola by one time step

        Args:
            dt: Time step (s)
        """
        if self.state != GondolaState.RUNNING:
            return

        point = self.track.evaluate(self.parameter)
        tangent = self.track.derivative(self.parameter)
        second = self.track.second_derivative(self.parameter)
        tangent_length = float(np.linalg.norm(tangent))
        if tangent_length < self.params.epsilon:
            logger.debug("Degenerate tangent at parameter %.4f, step skipped", self.parameter)
            return

        _, normal = self.dynamics.frame(tangent)

        # Both heights use the current normal, so the offset cancels
        first_knot, last_knot = self.track.knot_range()
        current_height = float((point + normal * self.radius)[1])
        initial_height = float((self.track.evaluate(first_knot) + normal * self.radius)[1])
        self.velocity = self.dynamics.speed(initial_height, current_height)

        curvature = self.dynamics.curvature(tangent, second)
        total_force = self.dynamics.radial_force(curvature, self.velocity, normal)
        if total_force < 0:
            self._fall(FallReason.LOST_CONTACT)
            return

        self.parameter += (self.velocity * dt) / tangent_length
        self.position = point + normal * self.radius
        self.rotation_angle -= (self.velocity / self.radius) * dt

        if self.parameter > last_knot:
            self._fall(FallReason.END_OF_TRACK)

    def _fall(self, reason: FallReason) -> None:
        self.state = GondolaState.FALLEN
        self.fall_reason = reason
        logger.info(
            "Gondola fell (%s) at parameter %.3f, speed %.3f",
            reason.value, self.parameter, self.velocity,
        )

    def advance(self, start_time: float, end_time: float, dt: Optional[float] = None) -> int:
        """
        Advance over an animation interval in fixed sub-steps

        The last sub-step is shortened so the interval is covered exactly.

        Args:
            start_time: Interval start (s)
            end_time: Interval end (s)
            dt: Sub-step, defaults to params.time_step

        Returns:
            Number of sub-steps taken
        """
        dt = self.params.time_step if dt is None else dt
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        steps = 0
        t = start_time
        while t < end_time:
            self.step(min(dt, end_time - t))
            t += dt
            steps += 1
        return steps

    def simulate(
        self, duration: float = 10.0, dt: Optional[float] = None
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Run until the gondola falls or the duration elapses

        Args:
            duration: Maximum simulated time (s)
            dt: Time step (s), defaults to params.time_step

        Returns:
            Tuple of (time_array, history) where history rows are
            [parameter, x, y, rotation_angle, velocity]
        """
        dt = self.params.time_step if dt is None else dt
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")

        self.start()

        times = [0.0]
        rows = [self._row()]
        if self.state != GondolaState.RUNNING:
            return np.array(times), np.array(rows)

        n_steps = int(round(duration / dt))
        for i in range(1, n_steps + 1):
            self.step(dt)
            times.append(i * dt)
            rows.append(self._row())
            if self.state == GondolaState.FALLEN:
                break

        return np.array(times), np.array(rows)

    def _row(self) -> list:
        return [
            self.parameter,
            float(self.position[0]),
            float(self.position[1]),
            self.rotation_angle,
            self.velocity,
        ]

    def snapshot(self) -> BodySnapshot:
        """Current state for renderers"""
        return BodySnapshot(
            state=self.state,
            parameter=self.parameter,
            x=float(self.position[0]),
            y=float(self.position[1]),
            rotation_angle=self.rotation_angle,
            velocity=self.velocity,
            fall_reason=self.fall_reason,
        )
