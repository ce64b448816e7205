"""Collision detection and impulse-based resolution."""

from __future__ import annotations

from itertools import combinations

import numpy as np

from . import mathutils as mu
from .colliders import (
    BoxCollider,
    Collider,
    CollisionEvent,
    IntersectData,
    PlaneCollider,
    Rigidbody,
    SphereCollider,
)
from .transform import Transform

CORRECTION_PERCENT = 0.2

_BOX_CORNER_SIGNS = np.array([
    [-1, -1, -1],
    [1, -1, -1],
    [1, 1, -1],
    [-1, 1, -1],
    [-1, -1, 1],
    [1, -1, 1],
    [1, 1, 1],
    [-1, 1, 1],
], dtype=float)


def _miss() -> IntersectData:
    return IntersectData(False, np.zeros(3))


def _normalize(v) -> np.ndarray:
    with np.errstate(invalid="ignore", divide="ignore"):
        return mu.normalize(v)


def integrate(transform: Transform, rigidbody: Rigidbody, delta: float) -> None:
    """Advance ``transform`` by the body's velocity over ``delta`` seconds."""
    transform.position = transform.position + rigidbody.velocity * delta


def project_obb(transform: Transform, collider: BoxCollider, axis):
    """Return ``(min, max)`` of the box's corners projected onto ``axis``."""
    rotation = mu.quat_to_mat3(transform.rotation)
    scaled = collider.half_extents * transform.scale
    corners = transform.position + (_BOX_CORNER_SIGNS * scaled) @ rotation.T
    projections = corners @ np.asarray(axis, dtype=float)
    return float(projections.min()), float(projections.max())


def scaled_sphere_radius(transform: Transform, collider: SphereCollider) -> float:
    return float(collider.radius * np.max(transform.scale))


def sphere_intersect(transform_a, collider_a, transform_b, collider_b) -> IntersectData:
    radius_sum = scaled_sphere_radius(transform_a, collider_a) + scaled_sphere_radius(
        transform_b, collider_b
    )
    direction = transform_b.position - transform_a.position
    distance_sqr = float(np.dot(direction, direction))
    if distance_sqr > radius_sum * radius_sum:
        return _miss()
    distance = np.sqrt(distance_sqr)
    with np.errstate(invalid="ignore", divide="ignore"):
        mtv = (direction / distance) * (radius_sum - distance)
    return IntersectData(True, mtv)


def sphere_box_intersect(sphere_transform, sphere_collider, box_transform, box_collider,
                         invert) -> IntersectData:
    radius = scaled_sphere_radius(sphere_transform, sphere_collider)
    extents = box_collider.half_extents * box_transform.scale
    inverse = mu.quat_inverse(box_transform.rotation)
    local_center = mu.quat_rotate(inverse, sphere_transform.position - box_transform.position)
    closest = np.clip(local_center, -extents, extents)
    offset = local_center - closest
    distance_sqr = float(np.dot(offset, offset))
    if distance_sqr >= radius * radius:
        return _miss()
    depth = radius - np.sqrt(distance_sqr)
    mtv = mu.quat_rotate(box_transform.rotation, _normalize(offset) * depth)
    return IntersectData(True, mtv if invert else -mtv)


def sphere_plane_intersect(sphere_transform, sphere_collider, plane_transform, plane_collider,
                           invert) -> IntersectData:
    radius = scaled_sphere_radius(sphere_transform, sphere_collider)
    distance = float(np.dot(sphere_transform.position, plane_collider.normal)) + plane_collider.distance
    if abs(distance) > radius:
        return _miss()
    penetration = radius - abs(distance)
    mtv = plane_collider.normal * (-penetration if distance > 0 else penetration)
    return IntersectData(True, -mtv if invert else mtv)


def box_intersect(transform_a, collider_a, transform_b, collider_b) -> IntersectData:
    """Separating-axis test between two oriented boxes."""
    rotation_a = mu.quat_to_mat3(transform_a.rotation)
    rotation_b = mu.quat_to_mat3(transform_b.rotation)
    axes_a = [rotation_a[:, i] * transform_a.scale[i] for i in range(3)]
    axes_b = [rotation_b[:, i] * transform_b.scale[i] for i in range(3)]
    axes = axes_a + axes_b + [np.cross(a, b) for a in axes_a for b in axes_b]

    min_overlap = float("inf")
    mtv_axis = np.zeros(3)
    for candidate in axes:
        if np.linalg.norm(candidate) < 1e-6:
            continue
        axis = mu.normalize(candidate)
        min_a, max_a = project_obb(transform_a, collider_a, axis)
        min_b, max_b = project_obb(transform_b, collider_b, axis)
        if max_a < min_b or max_b < min_a:
            return _miss()
        overlap = min(max_a, max_b) - max(min_a, min_b)
        if overlap < min_overlap:
            min_overlap = overlap
            mtv_axis = axis

    if np.dot(mtv_axis, transform_b.position - transform_a.position) < 0.0:
        mtv_axis = -mtv_axis
    return IntersectData(True, mtv_axis * min_overlap)


def box_plane_intersect(box_transform, box_collider, plane_transform, plane_collider,
                        invert) -> IntersectData:
    inverse = mu.quat_inverse(box_transform.rotation)
    local_point = mu.quat_rotate(inverse, plane_transform.position - box_transform.position)
    local_normal = mu.quat_rotate(inverse, plane_collider.normal)
    distance = float(np.dot(local_normal, -local_point))
    extent = float(np.sum(box_collider.half_extents * box_transform.scale * np.abs(local_normal)))
    depth = extent - distance
    mtv = -plane_collider.normal * depth
    return IntersectData(depth >= 0, -mtv if invert else mtv)


def plane_intersect(transform_a, collider_a, transform_b, collider_b) -> IntersectData:
    """Planes intersect here only when they coincide."""
    if abs(float(np.dot(collider_a.normal, collider_b.normal))) < 0.999:
        return _miss()
    point_on_a = collider_a.normal * collider_a.distance
    distance_to_b = float(np.dot(point_on_a, collider_b.normal)) + collider_b.distance
    return IntersectData(abs(distance_to_b) < 1e-6, np.zeros(3))


def detect_collision(transform_a, collider_a: Collider, transform_b, collider_b: Collider) -> IntersectData:
    """Dispatch to the intersection test for the two collider shapes."""
    a, b = collider_a.data, collider_b.data
    if isinstance(a, SphereCollider):
        if isinstance(b, SphereCollider):
            return sphere_intersect(transform_a, a, transform_b, b)
        if isinstance(b, BoxCollider):
            return sphere_box_intersect(transform_a, a, transform_b, b, False)
        if isinstance(b, PlaneCollider):
            return sphere_plane_intersect(transform_a, a, transform_b, b, False)
    elif isinstance(a, BoxCollider):
        if isinstance(b, SphereCollider):
            return sphere_box_intersect(transform_b, b, transform_a, a, True)
        if isinstance(b, BoxCollider):
            return box_intersect(transform_a, a, transform_b, b)
        if isinstance(b, PlaneCollider):
            return box_plane_intersect(transform_a, a, transform_b, b, False)
    elif isinstance(a, PlaneCollider):
        if isinstance(b, SphereCollider):
            return sphere_plane_intersect(transform_b, b, transform_a, a, True)
        if isinstance(b, BoxCollider):
            return box_plane_intersect(transform_b, b, transform_a, a, True)
        if isinstance(b, PlaneCollider):
            return plane_intersect(transform_a, a, transform_b, b)
    raise TypeError(
        f"no collision test for {type(a).__name__} and {type(b).__name__}"
    )


class Physics:
    """Steps every rigid body of a scene and resolves their collisions."""

    def simulate(self, scene, delta: float) -> None:
        for _entity, transform, rigidbody in scene.view(Transform, Rigidbody):
            integrate(transform, rigidbody, delta)

        bodies = list(scene.view(Transform, Rigidbody, Collider))
        collisions: dict[int, list[CollisionEvent]] = {}
        for (a, transform_a, _ra, collider_a), (b, transform_b, _rb, collider_b) in combinations(bodies, 2):
            data = detect_collision(transform_a, collider_a, transform_b, collider_b)
            if data.is_intersecting:
                collisions.setdefault(a, []).append(
                    CollisionEvent(b, data.minimum_translation_vector)
                )

        for entity, events in collisions.items():
            rigidbody = scene.get(entity, Rigidbody)
            transform = scene.get(entity, Transform)
            for event in events:
                other = scene.get(event.colliding_entity, Rigidbody)
                other_transform = scene.get(event.colliding_entity, Transform)
                normal = _normalize(event.minimum_translation_vector)

                relative = other.velocity - rigidbody.velocity
                velocity_along_normal = float(np.dot(relative, normal))
                if velocity_along_normal < 0:
                    j = -(1.0 + min(rigidbody.bounce, other.bounce)) * velocity_along_normal
                    j /= 1.0 / rigidbody.mass + 1.0 / other.mass
                    impulse = j * normal
                    rigidbody.velocity = rigidbody.velocity - impulse / rigidbody.mass
                    other.velocity = other.velocity + impulse / other.mass

                correction = event.minimum_translation_vector * CORRECTION_PERCENT
                total_mass = rigidbody.mass + other.mass
                transform.position = transform.position + correction * (other.mass / total_mass)
                other_transform.position = other_transform.position - correction * (
                    rigidbody.mass / total_mass
                )