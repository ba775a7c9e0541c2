import math

import numpy as np
import pytest

from toyrender.camera import (
    FLT_EPSILON,
    MIN_RADIUS,
    Camera,
    look_at_lh,
    perspective_fov_lh,
)


def _make_camera(radius=5.0):
    return Camera(1600, 900, radius, math.pi / 4, 1.0, 1000.0, (0.0, 1.0, 0.0), (0.0, 0.0, 0.0, 1.0))


def _project_depth(matrix, z):
    clip = np.array([0.0, 0.0, z, 1.0]) @ matrix
    return clip[2] / clip[3]


def test_perspective_maps_near_and_far_to_unit_depth():
    proj = perspective_fov_lh(math.pi / 3, 16 / 9, 0.5, 200.0)
    assert _project_depth(proj, 0.5) == pytest.approx(0.0, abs=1e-9)
    assert _project_depth(proj, 200.0) == pytest.approx(1.0)


def test_perspective_structure():
    aspect = 1.75
    proj = perspective_fov_lh(math.pi / 2, aspect, 1.0, 100.0)
    assert proj[1, 1] == pytest.approx(1.0)
    assert proj[0, 0] * aspect == pytest.approx(proj[1, 1])
    assert proj[2, 3] == 1.0
    assert proj[3, 3] == 0.0


@pytest.mark.parametrize(
    "args",
    [
        (math.pi / 4, 1.0, 0.0, 10.0),
        (math.pi / 4, 1.0, 5.0, 5.0),
        (0.0, 1.0, 1.0, 10.0),
        (math.pi / 4, 0.0, 1.0, 10.0),
    ],
)
def test_perspective_rejects_degenerate_input(args):
    with pytest.raises(ValueError):
        perspective_fov_lh(*args)


def test_look_at_moves_eye_to_origin_and_target_onto_z():
    eye = (3.0, 4.0, -2.0)
    target = (1.0, 0.0, 2.0)
    view = look_at_lh(eye, target, (0.0, 1.0, 0.0))
    eye_in_view = np.array([*eye, 1.0]) @ view
    target_in_view = np.array([*target, 1.0]) @ view
    distance = np.linalg.norm(np.subtract(target, eye))
    assert np.allclose(eye_in_view, [0.0, 0.0, 0.0, 1.0])
    assert np.allclose(target_in_view, [0.0, 0.0, distance, 1.0])


def test_look_at_rotation_is_orthonormal():
    view = look_at_lh((2.0, 1.0, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    rotation = view[:3, :3]
    assert np.allclose(rotation @ rotation.T, np.identity(3))
    assert np.linalg.det(rotation) == pytest.approx(1.0)


def test_look_at_rejects_degenerate_input():
    with pytest.raises(ValueError):
        look_at_lh((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), (0.0, 1.0, 0.0))
    with pytest.raises(ValueError):
        look_at_lh((0.0, 0.0, 0.0), (0.0, 5.0, 0.0), (0.0, 1.0, 0.0))


def test_camera_initial_state():
    camera = _make_camera()
    assert camera.aspect_ratio == pytest.approx(1600 / 900)
    assert camera.viewport == (0.0, 0.0, 1600.0, 900.0, 0.0, 1.0)
    assert camera.scissor_rect == (0, 0, 1600, 900)
    assert np.allclose(camera.projection, perspective_fov_lh(math.pi / 4, 1600 / 900, 1.0, 1000.0))


def test_on_update_returns_view_and_projection():
    camera = _make_camera(radius=5.0)
    view, proj = camera.on_update()
    assert np.allclose(camera.eye_position, [5.0, 0.0, 0.0])
    target_in_view = np.array([0.0, 0.0, 0.0, 1.0]) @ view
    assert np.allclose(target_in_view, [0.0, 0.0, 5.0, 1.0])
    assert np.allclose(proj, camera.projection)


def test_on_update_follows_target():
    camera = Camera(800, 600, 2.0, math.pi / 4, 1.0, 100.0, (0.0, 1.0, 0.0), (1.0, 2.0, 3.0, 1.0))
    view, _ = camera.on_update()
    eye_in_view = np.array([*camera.eye_position, 1.0]) @ view
    assert np.allclose(eye_in_view, [0.0, 0.0, 0.0, 1.0])
    assert np.linalg.norm(camera.eye_position - np.array([1.0, 2.0, 3.0])) == pytest.approx(2.0)


def test_on_zoom_changes_radius_and_clamps():
    camera = _make_camera(radius=5.0)
    camera.on_zoom(10)
    assert camera.radius == pytest.approx(4.0)
    camera.on_zoom(-10)
    assert camera.radius == pytest.approx(5.0)
    camera.on_zoom(1000)
    assert camera.radius == MIN_RADIUS


def test_mouse_move_without_button_only_tracks():
    camera = _make_camera()
    camera.on_mouse_move(300, 200, False)
    assert (camera.phi, camera.theta) == (0.0, 0.0)
    camera.on_mouse_move(304, 200, True)
    assert camera.theta == pytest.approx(math.pi / 180)
    assert camera.phi == 0.0


def test_mouse_move_is_reversible():
    camera = _make_camera()
    camera.on_mouse_move(100, 100, True)
    first_theta, first_phi = camera.theta, camera.phi
    camera.on_mouse_move(200, 200, True)
    assert camera.theta == pytest.approx(2 * first_theta)
    assert camera.phi == pytest.approx(2 * first_phi)
    camera.on_mouse_move(0, 0, True)
    assert camera.theta == pytest.approx(0.0, abs=1e-12)
    assert camera.phi == pytest.approx(0.0, abs=1e-12)


def test_pitch_is_clamped():
    camera = _make_camera()
    camera.on_mouse_move(0, 10000, True)
    assert camera.phi == pytest.approx(math.pi / 2 - FLT_EPSILON)
    camera.on_mouse_move(0, -30000, True)
    assert camera.phi == pytest.approx(-math.pi / 2 + FLT_EPSILON)


def test_on_resize_updates_projection_only():
    camera = _make_camera()
    camera.on_resize(1000, 500)
    assert camera.aspect_ratio == pytest.approx(2.0)
    assert camera.projection[0, 0] * 2.0 == pytest.approx(camera.projection[1, 1])
    assert (camera.width, camera.height) == (1600, 900)