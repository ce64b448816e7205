import math

import numpy as np
import pytest

from mistengine import mathutils as mu
from mistengine.camera import Camera, CameraType
from mistengine.transform import Transform


def _camera(position=(0.0, 0.0, -10.0), flip_y=True):
    return Camera(Transform(position=position), flip_y=flip_y)


def test_set_perspective_stores_settings_and_projection():
    cam = _camera()
    cam.set_perspective(800, 600, 60.0, 0.1, 100.0)
    assert cam.type is CameraType.PERSPECTIVE
    assert cam.aspect == pytest.approx(800 / 600)
    expected = mu.perspective(math.radians(60.0), 800 / 600, 0.1, 100.0)
    expected[1, 1] *= -1
    assert np.allclose(cam.projection_matrix, expected)


def test_flip_y_negates_vertical_scale_only():
    flipped = _camera(flip_y=True)
    plain = _camera(flip_y=False)
    flipped.set_perspective(1280, 720)
    plain.set_perspective(1280, 720)
    assert flipped.projection_matrix[1, 1] == pytest.approx(-plain.projection_matrix[1, 1])
    mask = np.ones((4, 4), dtype=bool)
    mask[1, 1] = False
    assert np.allclose(flipped.projection_matrix[mask], plain.projection_matrix[mask])


def test_set_orthographic_uses_size_and_aspect():
    cam = _camera(flip_y=False)
    cam.set_orthographic(400, 200, 6.0, 0.5, 20.0)
    assert cam.type is CameraType.ORTHOGRAPHIC
    half_w = 6.0 * (400 / 200) * 0.5
    expected = mu.ortho(-half_w, half_w, -3.0, 3.0, 0.5, 20.0)
    assert np.allclose(cam.projection_matrix, expected)


def test_set_viewport_size_rebuilds_projection():
    cam = _camera()
    cam.set_perspective(100, 100)
    before = cam.projection_matrix.copy()
    cam.set_viewport_size(200, 100)
    assert cam.aspect == pytest.approx(2.0)
    assert cam.type is CameraType.PERSPECTIVE
    assert not np.allclose(before, cam.projection_matrix)
    assert cam.projection_matrix[0, 0] == pytest.approx(before[0, 0] / 2)


def test_view_matrix_puts_camera_at_origin_looking_forward():
    cam = _camera(position=(0.0, 0.0, -10.0))
    view = cam.view_matrix()
    pos = np.append(cam.transform.position, 1.0)
    assert np.allclose((view @ pos)[:3], 0.0)
    ahead = np.append(cam.transform.position + cam.transform.forward(), 1.0)
    assert (view @ ahead)[2] < 0


def test_view_projection_is_product():
    cam = _camera()
    cam.set_perspective(1280, 720)
    assert np.allclose(cam.view_projection_matrix(), cam.projection_matrix @ cam.view_matrix())


def test_equality():
    a = _camera()
    b = _camera()
    a.set_perspective(1280, 720)
    b.set_perspective(1280, 720)
    assert a == b
    b.set_perspective(1280, 720, fov=90.0)
    assert not (a == b)