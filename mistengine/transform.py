"""Position, rotation and scale of an entity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from . import mathutils as mu


@dataclass(eq=False)
class Transform:
    """Position, rotation quaternion ``(w, x, y, z)`` and per-axis scale."""

    position: np.ndarray = field(default_factory=lambda: mu.vec3(0.0, 0.0, 0.0))
    rotation: np.ndarray = field(default_factory=mu.quat_identity)
    scale: np.ndarray = field(default_factory=lambda: mu.vec3(1.0, 1.0, 1.0))

    def __post_init__(self) -> None:
        self.position = np.array(self.position, dtype=float)
        self.rotation = np.array(self.rotation, dtype=float)
        self.scale = np.array(self.scale, dtype=float)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return (
            np.array_equal(self.position, other.position)
            and np.array_equal(self.rotation, other.rotation)
            and np.array_equal(self.scale, other.scale)
        )

    def rotate(self, angle, axis) -> None:
        """Rotate by ``angle`` radians about ``axis`` in local space."""
        self.rotation = mu.quat_multiply(
            self.rotation, mu.quat_angle_axis(angle, mu.normalize(axis))
        )

    @staticmethod
    def euler_to_quat(degrees):
        """Convert (pitch, yaw, roll) in degrees to a quaternion."""
        return mu.quat_from_euler(np.radians(np.asarray(degrees, dtype=float)))

    @staticmethod
    def quat_to_euler(quaternion):
        """Convert a quaternion to (pitch, yaw, roll) in degrees."""
        return np.degrees(mu.quat_to_euler(quaternion))

    def _direction(self, x: float, y: float, z: float) -> np.ndarray:
        return mu.quat_rotate(self.rotation, mu.vec3(x, y, z))

    def left(self):
        return self._direction(1.0, 0.0, 0.0)

    def right(self):
        return self._direction(-1.0, 0.0, 0.0)

    def up(self):
        return self._direction(0.0, 1.0, 0.0)

    def down(self):
        return self._direction(0.0, -1.0, 0.0)

    def forward(self):
        return self._direction(0.0, 0.0, 1.0)

    def backward(self):
        return self._direction(0.0, 0.0, -1.0)

    def local_to_world_matrix(self):
        """Return the model matrix: translate, then rotate, then scale."""
        model = mu.translate(np.eye(4), self.position)
        model = model @ mu.quat_to_mat4(self.rotation)
        return mu.scale(model, self.scale)

    def world_to_local_matrix(self):
        """Return the inverse of the model matrix."""
        translation = mu.translate(np.eye(4), -self.position)
        rotation = mu.quat_to_mat4(mu.quat_inverse(self.rotation))
        scaling = mu.scale(np.eye(4), 1.0 / self.scale)
        return scaling @ rotation @ translation


__all__ = ["Transform", "math"]