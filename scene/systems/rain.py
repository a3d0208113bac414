"""Falling rain. Drops that leave the bottom respawn above the top."""

from typing import Optional

from scene.state import Layer, SceneState
from scene.systems.base import BaseSystem, SystemResult


class RainSystem(BaseSystem):
    def __init__(self, state: SceneState) -> None:
        super().__init__(state, "Rain")

    def is_active(self) -> bool:
        return self.state.config.weather.has_rain and self.state.is_visible(Layer.RAIN)

    def _do_update(self, frame: int) -> Optional[SystemResult]:
        width = self.state.width
        height = self.state.height
        rng = self.state.rng
        recycled = 0
        for drop in self.state.raindrops:
            drop.pos.y += drop.speed
            if drop.pos.y > height:
                drop.pos.y = -drop.length
                drop.pos.x = rng.random() * width
                recycled += 1
        return SystemResult(
            entities_affected=len(self.state.raindrops), entities_recycled=recycled
        )
