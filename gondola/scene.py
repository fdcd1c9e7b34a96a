"""
Scene wiring input events to one track and one gondola
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Sequence

from gondola.camera import Camera
from gondola.params import GondolaParams
from gondola.simulator import Gondola
from gondola.track import Track

logger = logging.getLogger(__name__)

START_KEY = " "


class MouseButton(Enum):
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"


class Scene:
    """Owns the camera, the track and the gondola riding it"""

    def __init__(
        self,
        params: Optional[GondolaParams] = None,
        camera: Optional[Camera] = None,
        window_size: Sequence[float] = (600, 600),
    ) -> None:
        self.params = params if params is not None else GondolaParams()
        self.camera = camera if camera is not None else Camera()
        self.window_size = tuple(window_size)
        self.track = Track(self.params)
        self.gondola = Gondola(self.track, self.params)

    def on_mouse_pressed(self, button: MouseButton, px: float, py: float) -> None:
        """Left click adds a control point under the cursor"""
        if button != MouseButton.LEFT:
            return
        world = self.camera.pixel_to_world((px, py), self.window_size)
        logger.debug("Click at pixel (%s, %s) -> world (%.3f, %.3f)", px, py, world[0], world[1])
        self.track.add_control_point(world)

    def on_keyboard(self, key: str) -> None:
        """Space starts the gondola"""
        if key == START_KEY:
            self.gondola.start()

    def on_time_elapsed(self, start_time: float, end_time: float) -> None:
        """Advance the gondola over an animation frame"""
        self.gondola.advance(start_time, end_time, self.params.time_step)

    def snapshot(self) -> Dict[str, Any]:
        """Everything a renderer needs for one frame"""
        return {
            "control_points": self.track.control_points,
            "samples": self.track.samples,
            "gondola": self.gondola.snapshot(),
        }
