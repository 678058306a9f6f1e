"""
Camera Module

Orbit camera that circles a target, optionally rotating on its own.
"""

import math

import numpy as np
from pyrr import Matrix44, Vector3

from ..config.settings import (
    DEFAULT_FOV,
    NEAR_PLANE,
    FAR_PLANE,
    ORBIT_AUTO_ROTATE,
    ORBIT_AUTO_ROTATE_SPEED,
)


class OrbitCamera:
    """
    Camera orbiting a target at fixed distance and height.

    Features:
    - Auto-rotation around the vertical axis (speed 1.0 = one orbit per minute)
    - Pan and zoom are locked; only the azimuth changes
    """

    def __init__(
        self,
        position: Vector3,
        target: Vector3 = None,
        auto_rotate: bool = ORBIT_AUTO_ROTATE,
        auto_rotate_speed: float = ORBIT_AUTO_ROTATE_SPEED,
    ):
        """
        Initialize camera.

        Args:
            position: Starting camera position in world space
            target: Point to orbit (origin if None)
            auto_rotate: Circle the target automatically
            auto_rotate_speed: Orbits per minute
        """
        self.target = Vector3(target) if target is not None else Vector3([0.0, 0.0, 0.0])
        self.auto_rotate = auto_rotate
        self.auto_rotate_speed = auto_rotate_speed

        offset = np.array(position, dtype=float) - np.array(self.target, dtype=float)
        self.radius = float(math.hypot(offset[0], offset[2]))
        self.height = float(offset[1])
        self.azimuth = math.atan2(offset[2], offset[0])

        self.position = Vector3(position)
        self._update_position()

    def _update_position(self):
        self.position = Vector3([
            self.target[0] + self.radius * math.cos(self.azimuth),
            self.target[1] + self.height,
            self.target[2] + self.radius * math.sin(self.azimuth),
        ])

    def update(self, delta_time: float):
        """
        Advance auto-rotation.

        Args:
            delta_time: Seconds since the last frame
        """
        if self.auto_rotate and delta_time > 0.0:
            self.azimuth += (2.0 * math.pi / 60.0) * self.auto_rotate_speed * delta_time
            self.azimuth %= 2.0 * math.pi
        self._update_position()

    def set_target(self, target):
        """Re-center the orbit, keeping radius, height and azimuth."""
        self.target = Vector3(target)
        self._update_position()

    def get_view_matrix(self) -> Matrix44:
        """
        Get the camera view matrix.

        Returns:
            4x4 view matrix for camera transformation
        """
        return Matrix44.look_at(
            self.position,
            self.target,
            Vector3([0.0, 1.0, 0.0])
        )

    def get_projection_matrix(self, aspect_ratio: float, fov: float = DEFAULT_FOV) -> Matrix44:
        """
        Get the camera projection matrix.

        Args:
            aspect_ratio: Viewport width / height
            fov: Field of view in degrees

        Returns:
            4x4 projection matrix
        """
        return Matrix44.perspective_projection(
            fov,
            aspect_ratio,
            NEAR_PLANE,
            FAR_PLANE
        )
