"""Vector, quaternion and matrix helpers.

Quaternions are arrays ``(w, x, y, z)``. Matrices are 4x4 arrays that act on
column vectors, so ``matrix @ point`` transforms a homogeneous point.
Projections follow the right-handed, -1..1 depth convention.
"""

from __future__ import annotations

import math

import numpy as np

_EPSILON = float(np.finfo(np.float32).eps)


def vec3(x, y, z):
    """Return a float 3-vector."""
    return np.array([x, y, z], dtype=float)


def normalize(v):
    """Return ``v`` scaled to unit length."""
    v = np.asarray(v, dtype=float)
    return v / np.linalg.norm(v)


def quat_identity():
    """Return the identity rotation."""
    return np.array([1.0, 0.0, 0.0, 0.0])


def quat_multiply(a, b):
    """Return the Hamilton product ``a * b`` (apply ``b`` first, then ``a``)."""
    aw, ax, ay, az = np.asarray(a, dtype=float)
    bw, bx, by, bz = np.asarray(b, dtype=float)
    return np.array([
        aw * bw - ax * bx - ay * by - az * bz,
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
    ])


def quat_inverse(q):
    """Return the multiplicative inverse of ``q``."""
    q = np.asarray(q, dtype=float)
    conjugate = q * np.array([1.0, -1.0, -1.0, -1.0])
    return conjugate / np.dot(q, q)


def quat_rotate(q, v):
    """Rotate the 3-vector ``v`` by the unit quaternion ``q``."""
    q = np.asarray(q, dtype=float)
    v = np.asarray(v, dtype=float)
    w, u = q[0], q[1:]
    uv = np.cross(u, v)
    uuv = np.cross(u, uv)
    return v + (uv * w + uuv) * 2.0


def quat_from_euler(radians):
    """Build a quaternion from (pitch, yaw, roll) angles in radians."""
    angles = np.asarray(radians, dtype=float) * 0.5
    cx, cy, cz = np.cos(angles)
    sx, sy, sz = np.sin(angles)
    return np.array([
        cx * cy * cz + sx * sy * sz,
        sx * cy * cz - cx * sy * sz,
        cx * sy * cz + sx * cy * sz,
        cx * cy * sz - sx * sy * cz,
    ])


def quat_to_euler(q):
    """Return the (pitch, yaw, roll) angles in radians of ``q``."""
    w, x, y, z = np.asarray(q, dtype=float)
    pitch_y = 2.0 * (y * z + w * x)
    pitch_x = w * w - x * x - y * y + z * z
    if abs(pitch_x) <= _EPSILON and abs(pitch_y) <= _EPSILON:
        pitch = 2.0 * math.atan2(x, w)
    else:
        pitch = math.atan2(pitch_y, pitch_x)
    yaw = math.asin(min(1.0, max(-1.0, -2.0 * (x * z - w * y))))
    roll = math.atan2(2.0 * (x * y + w * z), w * w + x * x - y * y - z * z)
    return np.array([pitch, yaw, roll])


def quat_angle_axis(angle, axis):
    """Return the rotation of ``angle`` radians about the unit vector ``axis``."""
    axis = np.asarray(axis, dtype=float)
    half = angle * 0.5
    return np.concatenate(([math.cos(half)], axis * math.sin(half)))


def quat_to_mat3(q):
    """Return the 3x3 rotation matrix of a unit quaternion."""
    w, x, y, z = np.asarray(q, dtype=float)
    return np.array([
        [1 - 2 * (y * y + z * z), 2 * (x * y - w * z), 2 * (x * z + w * y)],
        [2 * (x * y + w * z), 1 - 2 * (x * x + z * z), 2 * (y * z - w * x)],
        [2 * (x * z - w * y), 2 * (y * z + w * x), 1 - 2 * (x * x + y * y)],
    ])


def quat_to_mat4(q):
    """Return the 4x4 homogeneous rotation matrix of a unit quaternion."""
    result = np.eye(4)
    result[:3, :3] = quat_to_mat3(q)
    return result


def translate(matrix, offset):
    """Return ``matrix`` followed by a translation by ``offset`` in its local space."""
    translation = np.eye(4)
    translation[:3, 3] = np.asarray(offset, dtype=float)
    return np.asarray(matrix, dtype=float) @ translation


def scale(matrix, factors):
    """Return ``matrix`` followed by a per-axis scale in its local space."""
    scaling = np.diag(np.append(np.asarray(factors, dtype=float), 1.0))
    return np.asarray(matrix, dtype=float) @ scaling


def perspective(fovy, aspect, near, far):
    """Return a perspective projection; ``fovy`` is in radians."""
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def ortho(left, right, bottom, top, near, far):
    """Return an orthographic projection."""
    result = np.eye(4)
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


def look_at(eye, center, up):
    """Return a view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    result = np.eye(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result