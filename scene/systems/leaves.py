"""Storm leaves blown by the wind.

A leaf leaving the surface by more than its own size on any side wraps to
the opposite edge.
"""

from typing import Optional

from scene.constants import LEAF_SPIN_WIND_FACTOR, LEAF_WIND_FACTOR
from scene.state import SceneState, Weather
from scene.systems.base import BaseSystem, SystemResult


class LeafSystem(BaseSystem):
    def __init__(self, state: SceneState) -> None:
        super().__init__(state, "Leaves")

    def is_active(self) -> bool:
        return self.state.config.weather is Weather.STORMY

    def _do_update(self, frame: int) -> Optional[SystemResult]:
        wind = self.state.config.wind_speed
        width = self.state.width
        height = self.state.height
        recycled = 0
        for leaf in self.state.leaves:
            leaf.pos.x += leaf.vel.x + wind * LEAF_WIND_FACTOR
            leaf.pos.y += leaf.vel.y
            leaf.rotation += leaf.rotation_speed + wind * LEAF_SPIN_WIND_FACTOR

            size = leaf.size
            wrapped = True
            if leaf.pos.x < -size:
                leaf.pos.x = width + size
            elif leaf.pos.x > width + size:
                leaf.pos.x = -size
            else:
                wrapped = False
            if leaf.pos.y < -size:
                leaf.pos.y = height + size
                wrapped = True
            elif leaf.pos.y > height + size:
                leaf.pos.y = -size
                wrapped = True
            recycled += int(wrapped)
        return SystemResult(entities_affected=len(self.state.leaves), entities_recycled=recycled)
