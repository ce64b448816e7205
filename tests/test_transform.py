import math

import numpy as np
import pytest

from mistengine import mathutils as mu
from mistengine.transform import Transform


def test_defaults_are_identity():
    t = Transform()
    assert np.array_equal(t.position, np.zeros(3))
    assert np.array_equal(t.rotation, mu.quat_identity())
    assert np.array_equal(t.scale, np.ones(3))
    assert np.allclose(t.local_to_world_matrix(), np.eye(4))


def test_identity_directions():
    t = Transform()
    assert np.allclose(t.forward(), [0.0, 0.0, 1.0])
    assert np.allclose(t.up(), [0.0, 1.0, 0.0])
    assert np.allclose(t.left(), [1.0, 0.0, 0.0])


def test_opposite_directions_are_negated():
    t = Transform(rotation=mu.quat_from_euler([0.3, 1.1, -0.4]))
    assert np.allclose(t.left(), -t.right())
    assert np.allclose(t.up(), -t.down())
    assert np.allclose(t.forward(), -t.backward())


def test_directions_are_mutually_orthogonal_unit_vectors():
    t = Transform(rotation=mu.quat_from_euler([0.7, -0.2, 0.9]))
    dirs = [t.left(), t.up(), t.forward()]
    for d in dirs:
        assert np.linalg.norm(d) == pytest.approx(1.0)
    assert np.dot(dirs[0], dirs[1]) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(dirs[1], dirs[2]) == pytest.approx(0.0, abs=1e-12)


def test_rotate_and_rotate_back_restores_rotation():
    t = Transform(rotation=mu.quat_from_euler([0.1, 0.2, 0.3]))
    original = t.rotation.copy()
    t.rotate(0.8, [1.0, 2.0, 3.0])
    assert not np.allclose(t.rotation, original)
    t.rotate(-0.8, [1.0, 2.0, 3.0])
    assert np.allclose(t.rotation, original)


def test_rotate_normalizes_axis():
    a = Transform()
    b = Transform()
    a.rotate(1.2, [0.0, 0.0, 5.0])
    b.rotate(1.2, [0.0, 0.0, 1.0])
    assert np.allclose(a.rotation, b.rotation)


def test_rotation_about_up_keeps_up():
    t = Transform()
    t.rotate(math.pi / 3, [0.0, 1.0, 0.0])
    assert np.allclose(t.up(), Transform().up())


def test_euler_quat_round_trip_in_degrees():
    degrees = np.array([20.0, -35.0, 70.0])
    q = Transform.euler_to_quat(degrees)
    assert np.allclose(Transform.quat_to_euler(q), degrees)


def test_world_to_local_inverts_local_to_world():
    t = Transform(
        position=[1.0, -2.0, 3.0],
        rotation=mu.quat_from_euler([0.4, 0.5, -0.6]),
        scale=[2.0, 0.5, 3.0],
    )
    product = t.world_to_local_matrix() @ t.local_to_world_matrix()
    assert np.allclose(product, np.eye(4))


def test_local_origin_maps_to_position():
    t = Transform(position=[4.0, 5.0, 6.0], rotation=mu.quat_from_euler([1.0, 0.2, 0.3]))
    world = t.local_to_world_matrix() @ np.array([0.0, 0.0, 0.0, 1.0])
    assert np.allclose(world[:3], t.position)


def test_equality_compares_all_fields():
    a = Transform(position=[1.0, 2.0, 3.0])
    b = Transform(position=[1.0, 2.0, 3.0])
    assert a == b
    b.scale = np.array([2.0, 2.0, 2.0])
    assert not (a == b)