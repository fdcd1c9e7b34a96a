"""
Gondola lifecycle state representation
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GondolaState(Enum):
    """Lifecycle of the gondola"""

    IDLE = "idle"
    RUNNING = "running"
    FALLEN = "fallen"  # Terminal


class FallReason(Enum):
    """Why a gondola entered the FALLEN state"""

    LOST_CONTACT = "lost_contact"  # Net radial force became negative
    END_OF_TRACK = "end_of_track"  # Parameter ran past the last knot


@dataclass(frozen=True)
class BodySnapshot:
    """Read-only view of the gondola for renderers"""

    state: GondolaState
    parameter: float  # Position along the track (knot space)
    x: float  # World position (m)
    y: float
    rotation_angle: float  # Heading (rad)
    velocity: float  # Speed along the track
    fall_reason: Optional[FallReason] = None
