"""Collider shapes, rigid bodies and collision results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import numpy as np

from . import mathutils as mu


@dataclass
class SphereCollider:
    """A sphere of ``radius``, scaled by the largest axis of its transform."""

    radius: float


@dataclass(eq=False)
class BoxCollider:
    """An oriented box given by its half extents along each local axis."""

    half_extents: np.ndarray

    def __post_init__(self) -> None:
        self.half_extents = np.array(self.half_extents, dtype=float)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoxCollider):
            return NotImplemented
        return np.array_equal(self.half_extents, other.half_extents)


@dataclass(eq=False)
class PlaneCollider:
    """The plane of points ``p`` with ``dot(p, normal) + distance == 0``."""

    normal: np.ndarray
    distance: float = 0.0

    def __post_init__(self) -> None:
        self.normal = np.array(self.normal, dtype=float)
        self.distance = float(self.distance)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlaneCollider):
            return NotImplemented
        return np.array_equal(self.normal, other.normal) and self.distance == other.distance


Shape = Union[SphereCollider, BoxCollider, PlaneCollider]
_SHAPES = (SphereCollider, BoxCollider, PlaneCollider)


@dataclass
class Collider:
    """Component wrapping one collider shape."""

    data: Shape

    def __post_init__(self) -> None:
        if not isinstance(self.data, _SHAPES):
            raise TypeError(f"unsupported collider shape: {type(self.data).__name__}")


@dataclass(eq=False)
class Rigidbody:
    """Mass, restitution and linear velocity of a simulated body."""

    mass: float = 1.0
    bounce: float = 0.5
    velocity: np.ndarray = field(default_factory=lambda: mu.vec3(0.0, 0.0, 0.0))

    def __post_init__(self) -> None:
        self.mass = float(self.mass)
        self.bounce = float(self.bounce)
        self.velocity = np.array(self.velocity, dtype=float)


@dataclass(frozen=True, eq=False)
class IntersectData:
    """Whether two colliders overlap and the vector that separates them."""

    is_intersecting: bool
    minimum_translation_vector: np.ndarray

    def __bool__(self) -> bool:
        return bool(self.is_intersecting)


@dataclass(frozen=True, eq=False)
class CollisionEvent:
    """A collision with ``colliding_entity`` and its separating vector."""

    colliding_entity: int
    minimum_translation_vector: np.ndarray