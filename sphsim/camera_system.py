"""Keeps each camera's view-projection matrix in step with its transform."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from sphsim.components import CameraComponent, TransformComponent
from sphsim.registry import Registry

_FORWARD = np.array([0.0, 0.0, -1.0])
_UP = np.array([0.0, 1.0, 0.0])


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed perspective projection mapping depth to [-1, 1].

    ``fovy`` is in radians. The matrix acts on column vectors.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    tan_half = np.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[3, 2] = -1.0
    result[2, 3] = -(2.0 * far * near) / (far - near)
    return result.astype(np.float32)


def _normalize(vector: np.ndarray, what: str) -> np.ndarray:
    length = np.linalg.norm(vector)
    if length == 0:
        raise ValueError(f"{what} has zero length")
    return vector / length


def look_at(eye: Sequence[float], center: Sequence[float], up: Sequence[float]) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``."""
    eye_v = np.asarray(eye, dtype=np.float64)
    f = _normalize(np.asarray(center, dtype=np.float64) - eye_v, "view direction")
    s = _normalize(np.cross(f, np.asarray(up, dtype=np.float64)), "side vector")
    u = np.cross(s, f)
    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye_v)
    result[1, 3] = -np.dot(u, eye_v)
    result[2, 3] = np.dot(f, eye_v)
    return result.astype(np.float32)


def rotate_vector(quaternion: Sequence[float], vector: Sequence[float]) -> np.ndarray:
    """Rotate a 3-vector by a quaternion given as ``(w, x, y, z)``."""
    w, *axis = np.asarray(quaternion, dtype=np.float64)
    q = np.array(axis)
    v = np.asarray(vector, dtype=np.float64)
    uv = np.cross(q, v)
    uuv = np.cross(q, uv)
    return v + (uv * w + uuv) * 2.0


class CameraSystem:
    """Updates the projection and view-projection of every camera."""

    def update(self, registry: Registry) -> None:
        for _entity, camera, transform in registry.view(CameraComponent, TransformComponent):
            if camera.is_dirty:
                camera.projection_matrix = perspective(
                    camera.fov, camera.aspect_ratio, camera.near, camera.far
                )
                camera.is_dirty = False

            forward = rotate_vector(transform.rotation, _FORWARD)
            up = rotate_vector(transform.rotation, _UP)
            position = np.asarray(transform.position, dtype=np.float64)
            view = look_at(position, position + forward, up)
            camera.view_projection = (camera.projection_matrix @ view).astype(np.float32)