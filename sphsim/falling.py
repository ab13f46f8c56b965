"""A system that moves spheres downward each step."""

from __future__ import annotations

import numpy as np

from sphsim.components import InstanceComponent, SphereComponent
from sphsim.registry import Registry

FALL_STEP = np.float32(0.1)


class FallingSpheresSystem:
    """Lowers every instanced sphere by ``FALL_STEP`` along y per update."""

    def update(self, registry: Registry) -> None:
        view = registry.view(InstanceComponent, SphereComponent)
        spheres = registry.pool(SphereComponent)
        for entity in view.smallest_dense():
            if not spheres.has_component(entity):
                continue
            spheres.get_component(entity).position_and_radius[1] -= FALL_STEP