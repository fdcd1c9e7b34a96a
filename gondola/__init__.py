"""
Gondola Spline Simulation

This package grows a Catmull-Rom spline from user-placed control points and
simulates a gondola rolling along it under gravity until it loses contact
with the track or runs off its end.
"""

from gondola.params import GondolaParams
from gondola.state import BodySnapshot, FallReason, GondolaState
from gondola.spline import CatmullRomSpline, hermite
from gondola.track import Track
from gondola.camera import Camera
from gondola.simulator import Gondola
from gondola.scene import MouseButton, Scene
from gondola.analysis import RunAnalyzer
from gondola.track_analysis import run_track_analysis

__all__ = [
    "GondolaParams",
    "BodySnapshot",
    "FallReason",
    "GondolaState",
    "CatmullRomSpline",
    "hermite",
    "Track",
    "Camera",
    "Gondola",
    "MouseButton",
    "Scene",
    "RunAnalyzer",
    "run_track_analysis",
]
