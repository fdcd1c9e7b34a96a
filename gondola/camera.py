"""
2D camera mapping between device pixels and world coordinates
"""

from typing import Sequence

import numpy as np


def translate(dx: float, dy: float) -> np.ndarray:
    """4x4 translation matrix"""
    m = np.eye(4)
    m[0, 3] = dx
    m[1, 3] = dy
    return m


def scale(sx: float, sy: float) -> np.ndarray:
    """4x4 scaling matrix (z unchanged)"""
    return np.diag([sx, sy, 1.0, 1.0])


class Camera:
    """Axis-aligned 2D camera viewing a rectangle of the world"""

    def __init__(
        self, center: Sequence[float] = (0.0, 0.0), size: Sequence[float] = (20.0, 20.0)
    ) -> None:
        """
        Initialize camera

        Args:
            center: World-space center of the view
            size: World-space width and height of the view
        """
        self.center = np.asarray(center, dtype=float)
        self.size = np.asarray(size, dtype=float)
        if np.any(self.size <= 0):
            raise ValueError(f"Camera size must be positive, got {tuple(self.size)}")

    def view_matrix(self) -> np.ndarray:
        """World to camera space, moving the view center to the origin"""
        return translate(-self.center[0], -self.center[1])

    def projection_matrix(self) -> np.ndarray:
        """Camera space to normalized device coordinates in [-1, 1]"""
        return scale(2.0 / self.size[0], 2.0 / self.size[1])

    def view_matrix_inverse(self) -> np.ndarray:
        """Camera space back to world space"""
        return translate(self.center[0], self.center[1])

    def projection_matrix_inverse(self) -> np.ndarray:
        """Normalized device coordinates back to camera space"""
        return scale(self.size[0] / 2.0, self.size[1] / 2.0)

    def view_projection_matrix(self) -> np.ndarray:
        """World to normalized device coordinates"""
        return self.projection_matrix() @ self.view_matrix()

    def pixel_to_world(self, pixel: Sequence[float], window_size: Sequence[float]) -> np.ndarray:
        """
        Convert a pixel position into world coordinates

        Pixel y grows downwards, world y grows upwards.

        Args:
            pixel: (px, py) in window pixels
            window_size: (width, height) of the window in pixels

        Returns:
            World-space (x, y)
        """
        ndc_x = 2.0 * pixel[0] / window_size[0] - 1.0
        ndc_y = 1.0 - 2.0 * pixel[1] / window_size[1]
        clip = np.array([ndc_x, ndc_y, 0.0, 1.0])
        world = self.view_matrix_inverse() @ self.projection_matrix_inverse() @ clip
        return world[:2]
