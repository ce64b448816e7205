"""Camera component with perspective and orthographic projections."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from . import mathutils as mu
from .transform import Transform


class CameraType(Enum):
    PERSPECTIVE = "perspective"
    ORTHOGRAPHIC = "orthographic"


@dataclass(eq=False)
class Camera:
    """A camera that looks along the forward direction of its transform.

    ``flip_y`` negates the vertical scale of the projection, as needed by
    renderers whose clip space points Y down.
    """

    transform: Transform
    type: CameraType = CameraType.PERSPECTIVE
    width: float = 1.0
    height: float = 1.0
    aspect: float = 1.0
    size: float = 10.0
    orthographic_near_plane: float = 0.1
    orthographic_far_plane: float = 1000.0
    fov: float = 45.0
    perspective_near_plane: float = 0.1
    perspective_far_plane: float = 1000.0
    flip_y: bool = True
    projection_matrix: np.ndarray = field(default_factory=lambda: np.eye(4))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Camera):
            return NotImplemented
        return (
            self.type == other.type
            and np.array_equal(self.projection_matrix, other.projection_matrix)
            and self.transform == other.transform
            and self.width == other.width
            and self.height == other.height
            and self.aspect == other.aspect
            and self.size == other.size
            and self.orthographic_near_plane == other.orthographic_near_plane
            and self.orthographic_far_plane == other.orthographic_far_plane
            and self.fov == other.fov
            and self.perspective_near_plane == other.perspective_near_plane
            and self.perspective_far_plane == other.perspective_far_plane
        )

    def recreate(self) -> None:
        """Rebuild the projection matrix from the current settings."""
        if self.type is CameraType.ORTHOGRAPHIC:
            half_width = self.size * self.aspect * 0.5
            half_height = self.size * 0.5
            projection = mu.ortho(
                -half_width,
                half_width,
                -half_height,
                half_height,
                self.orthographic_near_plane,
                self.orthographic_far_plane,
            )
        else:
            projection = mu.perspective(
                math.radians(self.fov),
                self.aspect,
                self.perspective_near_plane,
                self.perspective_far_plane,
            )
        if self.flip_y:
            projection[1, 1] *= -1
        self.projection_matrix = projection

    def view_matrix(self):
        position = self.transform.position
        return mu.look_at(position, position + self.transform.forward(), self.transform.up())

    def view_projection_matrix(self):
        return self.projection_matrix @ self.view_matrix()

    def set_viewport_size(self, width, height) -> None:
        self.width = float(width)
        self.height = float(height)
        self.aspect = self.width / self.height
        self.recreate()

    def set_perspective(self, width, height, fov=45.0, near_plane=0.1, far_plane=1000.0) -> None:
        """Switch to a perspective projection; ``fov`` is in degrees."""
        self.width = float(width)
        self.height = float(height)
        self.aspect = self.width / self.height
        self.fov = float(fov)
        self.perspective_near_plane = float(near_plane)
        self.perspective_far_plane = float(far_plane)
        self.type = CameraType.PERSPECTIVE
        self.recreate()

    def set_orthographic(self, width, height, size=10.0, near_plane=0.1, far_plane=1000.0) -> None:
        """Switch to an orthographic projection ``size`` units tall."""
        self.width = float(width)
        self.height = float(height)
        self.aspect = self.width / self.height
        self.size = float(size)
        self.orthographic_near_plane = float(near_plane)
        self.orthographic_far_plane = float(far_plane)
        self.type = CameraType.ORTHOGRAPHIC
        self.recreate()