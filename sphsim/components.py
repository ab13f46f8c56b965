"""Component types attached to entities of the simulation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np


def _vector(values: Iterable[float], size: int, name: str) -> np.ndarray:
    array = np.array(values, dtype=np.float32).reshape(-1)
    if array.shape != (size,):
        raise ValueError(f"{name} needs {size} values, got {array.size}")
    return array


def _identity() -> np.ndarray:
    return np.identity(4, dtype=np.float32)


@dataclass(eq=False)
class CameraComponent:
    """Perspective camera settings and the matrices derived from them.

    ``fov`` is the vertical field of view in radians.
    """

    fov: float = 45.0
    aspect_ratio: float = 16.0 / 9.0
    near: float = 0.1
    far: float = 100.0
    projection_matrix: np.ndarray = field(default_factory=_identity)
    view_projection: np.ndarray = field(default_factory=_identity)
    is_dirty: bool = True

    def __post_init__(self) -> None:
        self.projection_matrix = np.array(self.projection_matrix, dtype=np.float32).reshape(4, 4)
        self.view_projection = np.array(self.view_projection, dtype=np.float32).reshape(4, 4)


@dataclass
class InstanceComponent:
    """Marks an entity as drawn through instanced rendering."""


@dataclass
class MeshComponent:
    """Graphics handles and size of a drawable mesh."""

    vao: int = 0
    vbo: int = 0
    shader_program: int = 0
    radius: float = 0.0


@dataclass(eq=False)
class SphereComponent:
    """A sphere packed as ``(x, y, z, radius)``."""

    position_and_radius: np.ndarray = field(
        default_factory=lambda: np.zeros(4, dtype=np.float32)
    )

    def __post_init__(self) -> None:
        self.position_and_radius = _vector(self.position_and_radius, 4, "position_and_radius")

    @property
    def position(self) -> np.ndarray:
        """View of the centre; writes go through to the packed vector."""
        return self.position_and_radius[:3]

    @property
    def radius(self) -> float:
        return float(self.position_and_radius[3])


@dataclass(eq=False)
class TransformComponent:
    """Position, rotation quaternion ``(w, x, y, z)`` and scale of an entity."""

    position: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float32))
    rotation: np.ndarray = field(
        default_factory=lambda: np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float32)
    )
    scale: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float32))
    transform: np.ndarray = field(default_factory=_identity)
    is_dirty: bool = True

    def __post_init__(self) -> None:
        self.position = _vector(self.position, 3, "position")
        self.rotation = _vector(self.rotation, 4, "rotation")
        self.scale = _vector(self.scale, 3, "scale")
        self.transform = np.array(self.transform, dtype=np.float32).reshape(4, 4)


@dataclass(eq=False)
class AABB:
    """Axis-aligned box in the plane, given by its two corners."""

    min: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float32))
    max: np.ndarray = field(default_factory=lambda: np.zeros(2, dtype=np.float32))

    def __post_init__(self) -> None:
        self.min = _vector(self.min, 2, "min")
        self.max = _vector(self.max, 2, "max")