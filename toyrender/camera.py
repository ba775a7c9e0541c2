"""Orbit camera and left-handed view/projection matrices (row-vector convention)."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

FLT_EPSILON = 1.1920929e-07
ZOOM_SENSE = 0.1
MOUSE_SENSE = 0.25
MIN_RADIUS = 0.1

_NEAR_EQUAL = 0.00001


def perspective_fov_lh(fov: float, aspect_ratio: float, near_z: float, far_z: float) -> np.ndarray:
    """Left-handed perspective projection mapping depth ``near_z..far_z`` to ``0..1``."""
    if near_z <= 0.0 or far_z <= 0.0:
        raise ValueError("near_z and far_z must be positive")
    if abs(fov) <= 2 * _NEAR_EQUAL:
        raise ValueError("field of view must not be zero")
    if abs(aspect_ratio) <= 2 * _NEAR_EQUAL:
        raise ValueError("aspect ratio must not be zero")
    if abs(far_z - near_z) <= _NEAR_EQUAL:
        raise ValueError("near_z and far_z must differ")

    half = 0.5 * fov
    height = math.cos(half) / math.sin(half)
    width = height / aspect_ratio
    depth_range = far_z / (far_z - near_z)
    return np.array(
        [
            [width, 0.0, 0.0, 0.0],
            [0.0, height, 0.0, 0.0],
            [0.0, 0.0, depth_range, 1.0],
            [0.0, 0.0, -depth_range * near_z, 0.0],
        ]
    )


def _unit(vector: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0 or not math.isfinite(length):
        raise ValueError(f"{what} must be a non-zero finite vector")
    return vector / length


def look_at_lh(eye: Sequence[float], target: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Left-handed view matrix looking from ``eye`` towards ``target``."""
    eye_v = np.asarray(eye, dtype=float)[:3]
    target_v = np.asarray(target, dtype=float)[:3]
    up_v = np.asarray(up, dtype=float)[:3]
    _unit(up_v, "up")

    forward = _unit(target_v - eye_v, "view direction")
    right = _unit(np.cross(up_v, forward), "up crossed with view direction")
    true_up = np.cross(forward, right)

    view = np.identity(4)
    view[:3, 0] = right
    view[:3, 1] = true_up
    view[:3, 2] = forward
    view[3, :3] = [-float(np.dot(axis, eye_v)) for axis in (right, true_up, forward)]
    return view


class Camera:
    """Camera orbiting a target point on a sphere, driven by mouse and wheel."""

    def __init__(
        self,
        width: int,
        height: int,
        radius: float,
        fov: float,
        near_z: float,
        far_z: float,
        up: Sequence[float],
        target: Sequence[float],
    ) -> None:
        self.width = width
        self.height = height
        self.radius = radius
        self.fov = fov
        self.near_z = near_z
        self.far_z = far_z
        self.up = np.asarray(up, dtype=float)[:3]
        self.look_at_target = np.asarray(target, dtype=float)
        self.phi = 0.0  # elevation
        self.theta = 0.0  # angle in the xz plane
        self.aspect_ratio = width / height
        self.view = np.identity(4)
        self.projection = perspective_fov_lh(fov, self.aspect_ratio, near_z, far_z)
        # (top_left_x, top_left_y, width, height, min_depth, max_depth)
        self.viewport = (0.0, 0.0, float(width), float(height), 0.0, 1.0)
        # (left, top, right, bottom)
        self.scissor_rect = (0, 0, width, height)
        self._last_mouse_pos = (0.0, 0.0)

    @property
    def eye_position(self) -> np.ndarray:
        """Current camera position in world space."""
        cos_phi = math.cos(self.phi)
        offset = np.array(
            [
                self.radius * cos_phi * math.cos(self.theta),
                self.radius * math.sin(self.phi),
                -self.radius * cos_phi * math.sin(self.theta),
            ]
        )
        return offset + self.look_at_target[:3]

    def on_update(self) -> tuple[np.ndarray, np.ndarray]:
        """Recompute the view matrix; return ``(view, projection)``."""
        self.view = look_at_lh(self.eye_position, self.look_at_target, self.up)
        return self.view.copy(), self.projection.copy()

    def on_resize(self, width: int, height: int) -> None:
        """Recompute the projection for a new aspect ratio."""
        self.aspect_ratio = width / height
        self.projection = perspective_fov_lh(self.fov, self.aspect_ratio, self.near_z, self.far_z)

    def on_zoom(self, delta: int) -> None:
        """Move towards or away from the target by a wheel ``delta``."""
        self.radius = max(self.radius - delta * ZOOM_SENSE, MIN_RADIUS)

    def on_mouse_move(self, x_pos: int, y_pos: int, update_pos: bool) -> None:
        """Rotate around the target while ``update_pos``; always track the cursor."""
        if update_pos:
            last_x, last_y = self._last_mouse_pos
            self.theta += math.radians(MOUSE_SENSE * (x_pos - last_x))
            self.phi += math.radians(MOUSE_SENSE * (y_pos - last_y))
            half_pi = math.pi / 2
            if self.phi > half_pi:
                self.phi = half_pi - FLT_EPSILON
            if self.phi < -half_pi:
                self.phi = -half_pi + FLT_EPSILON
        self._last_mouse_pos = (float(x_pos), float(y_pos))