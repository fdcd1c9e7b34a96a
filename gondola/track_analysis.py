"""
Track comparison functions
"""

from typing import Any, Dict, Optional, Sequence

from gondola.analysis import RunAnalyzer
from gondola.params import GondolaParams
from gondola.simulator import Gondola
from gondola.track import Track


def run_track_analysis(
    tracks: Dict[str, Sequence[Sequence[float]]],
    duration: float = 10.0,
    dt: Optional[float] = None,
    params: Optional[GondolaParams] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Run a gondola down each track

    Args:
        tracks: Control points per track name
        duration: Maximum simulation duration in seconds
        dt: Time step in seconds, defaults to params.time_step
        params: Simulation parameters shared by every run

    Returns:
        Dictionary with results for each track
    """
    params = params if params is not None else GondolaParams()
    analyzer = RunAnalyzer(params)
    results: Dict[str, Dict[str, Any]] = {}

    for name, points in tracks.items():
        track = Track.from_points(points, params)
        gondola = Gondola(track, params)

        t, history = gondola.simulate(duration=duration, dt=dt)
        analysis = analyzer.analyze(t, history, gondola)

        results[name] = {
            "time": t,
            "history": history,
            "track": track,
            "analysis": analysis,
            "gondola": gondola,
        }

    return results
