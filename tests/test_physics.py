import numpy as np
import pytest

from mistengine.colliders import (
    BoxCollider,
    Collider,
    PlaneCollider,
    Rigidbody,
    SphereCollider,
)
from mistengine.physics import (
    Physics,
    box_intersect,
    box_plane_intersect,
    detect_collision,
    integrate,
    plane_intersect,
    project_obb,
    scaled_sphere_radius,
    sphere_intersect,
)
from mistengine.scene import Scene
from mistengine.transform import Transform


def at(x, y=0.0, z=0.0):
    return Transform(position=(x, y, z))


def test_integrate_moves_by_velocity():
    transform = at(0.0)
    integrate(transform, Rigidbody(velocity=(2.0, 0.0, 0.0)), 0.5)
    assert np.allclose(transform.position, [1.0, 0.0, 0.0])


def test_scaled_sphere_radius_uses_largest_scale():
    transform = Transform(scale=(1.0, 3.0, 2.0))
    assert scaled_sphere_radius(transform, SphereCollider(1.0)) == pytest.approx(3.0)


def test_project_obb_on_axis():
    low, high = project_obb(at(0.0), BoxCollider((1, 1, 1)), np.array([1.0, 0.0, 0.0]))
    assert low == pytest.approx(-1.0)
    assert high == pytest.approx(1.0)


def test_spheres_overlap_and_are_antisymmetric():
    a, b = at(0.0), at(1.5)
    sphere = SphereCollider(1.0)
    ab = sphere_intersect(a, sphere, b, sphere)
    ba = sphere_intersect(b, sphere, a, sphere)
    assert ab.is_intersecting and ba.is_intersecting
    assert np.allclose(ab.minimum_translation_vector, -ba.minimum_translation_vector)
    assert ab.minimum_translation_vector[0] > 0


def test_spheres_apart_do_not_intersect():
    result = sphere_intersect(at(0.0), SphereCollider(1.0), at(5.0), SphereCollider(1.0))
    assert not result.is_intersecting
    assert np.array_equal(result.minimum_translation_vector, np.zeros(3))


def test_sphere_box_order_negates_mtv():
    sphere = Collider(SphereCollider(1.0))
    box = Collider(BoxCollider((1, 1, 1)))
    first = detect_collision(at(1.5), sphere, at(0.0), box)
    second = detect_collision(at(0.0), box, at(1.5), sphere)
    assert first.is_intersecting and second.is_intersecting
    assert np.allclose(first.minimum_translation_vector, -second.minimum_translation_vector)
    assert np.allclose(first.minimum_translation_vector[1:], [0.0, 0.0])


def test_sphere_box_far_apart():
    result = detect_collision(at(10.0), Collider(SphereCollider(1.0)), at(0.0), Collider(BoxCollider((1, 1, 1))))
    assert not result.is_intersecting


def test_sphere_plane_touching_and_far():
    plane = Collider(PlaneCollider((0, 1, 0), 0))
    sphere = Collider(SphereCollider(1.0))
    near = detect_collision(at(0.0, 0.5), sphere, at(0.0), plane)
    swapped = detect_collision(at(0.0), plane, at(0.0, 0.5), sphere)
    far = detect_collision(at(0.0, 5.0), sphere, at(0.0), plane)
    assert near.is_intersecting
    assert np.allclose(near.minimum_translation_vector, -swapped.minimum_translation_vector)
    assert not far.is_intersecting


def test_boxes_overlap_points_from_a_to_b():
    box = BoxCollider((1, 1, 1))
    result = box_intersect(at(0.0), box, at(1.5), box)
    assert result.is_intersecting
    assert result.minimum_translation_vector[0] > 0
    assert np.allclose(result.minimum_translation_vector[1:], [0.0, 0.0])


def test_boxes_apart():
    box = BoxCollider((1, 1, 1))
    assert not box_intersect(at(0.0), box, at(3.0), box).is_intersecting


def test_box_plane():
    box = BoxCollider((1, 1, 1))
    plane = PlaneCollider((0, 1, 0), 0)
    assert box_plane_intersect(at(0.0, 0.5), box, at(0.0), plane, False).is_intersecting
    assert not box_plane_intersect(at(0.0, 5.0), box, at(0.0), plane, False).is_intersecting


def test_box_plane_invert_negates():
    box = BoxCollider((1, 1, 1))
    plane = PlaneCollider((0, 1, 0), 0)
    plain = box_plane_intersect(at(0.0, 0.5), box, at(0.0), plane, False)
    inverted = box_plane_intersect(at(0.0, 0.5), box, at(0.0), plane, True)
    assert np.allclose(plain.minimum_translation_vector, -inverted.minimum_translation_vector)


def test_plane_intersect_cases():
    origin = at(0.0)
    assert plane_intersect(origin, PlaneCollider((0, 1, 0), 0), origin, PlaneCollider((0, 1, 0), 0)).is_intersecting
    assert not plane_intersect(origin, PlaneCollider((0, 1, 0), 0), origin, PlaneCollider((1, 0, 0), 0)).is_intersecting
    assert not plane_intersect(origin, PlaneCollider((0, 1, 0), 0), origin, PlaneCollider((0, 1, 0), 3)).is_intersecting


def _scene_with(*bodies):
    scene = Scene()
    entities = []
    for position, velocity, shape in bodies:
        entity = scene.create()
        scene.add_component(entity, Transform(position=position))
        scene.add_component(entity, Rigidbody(1.0, 0.5, velocity))
        if shape is not None:
            scene.add_component(entity, Collider(shape))
        entities.append(entity)
    return scene, entities


def test_simulate_bounces_approaching_spheres():
    scene, (a, b) = _scene_with(
        ((-0.5, 0, 0), (1, 0, 0), SphereCollider(1.0)),
        ((0.5, 0, 0), (-1, 0, 0), SphereCollider(1.0)),
    )
    Physics().simulate(scene, 0.0)
    va = scene.get(a, Rigidbody).velocity
    vb = scene.get(b, Rigidbody).velocity
    assert va[0] < 0 < vb[0]
    assert np.allclose(va + vb, np.zeros(3))


def test_simulate_correction_keeps_centre_of_mass():
    scene, (a, b) = _scene_with(
        ((-0.5, 0, 0), (0, 0, 0), SphereCollider(1.0)),
        ((0.5, 0, 0), (0, 0, 0), SphereCollider(1.0)),
    )
    Physics().simulate(scene, 0.0)
    pa = scene.get(a, Transform).position
    pb = scene.get(b, Transform).position
    assert np.allclose(pa + pb, np.zeros(3))
    assert not np.allclose(pa, [-0.5, 0.0, 0.0])


def test_simulate_without_contact_only_integrates():
    scene, (a, b) = _scene_with(
        ((0, 0, 0), (1, 0, 0), SphereCollider(1.0)),
        ((10, 0, 0), (0, 0, 0), None),
    )
    Physics().simulate(scene, 1.0)
    assert np.allclose(scene.get(a, Transform).position, [1.0, 0.0, 0.0])
    assert np.allclose(scene.get(a, Rigidbody).velocity, [1.0, 0.0, 0.0])
    assert np.allclose(scene.get(b, Transform).position, [10.0, 0.0, 0.0])