"""Cloud drift.

Tracked clouds only drift while they are on screen: the cloud layer is
visible and the weather shows individual clouds (cloudy or rainy). Sunny
skies hide them and stormy skies replace them with a dense cover.
"""

from typing import Optional

from scene.constants import CLOUD_WIND_FACTOR
from scene.state import Layer, SceneState, Weather
from scene.systems.base import BaseSystem, SystemResult

_DRIFTING_WEATHER = (Weather.CLOUDY, Weather.RAINY)


class CloudSystem(BaseSystem):
    def __init__(self, state: SceneState) -> None:
        super().__init__(state, "Clouds")

    def is_active(self) -> bool:
        return (
            self.state.is_visible(Layer.CLOUDS)
            and self.state.config.weather in _DRIFTING_WEATHER
        )

    def _do_update(self, frame: int) -> Optional[SystemResult]:
        wind = self.state.config.wind_speed * CLOUD_WIND_FACTOR
        width = self.state.width
        recycled = 0
        for cloud in self.state.clouds:
            cloud.pos.x += cloud.speed + wind
            if cloud.pos.x > width + cloud.size:
                cloud.pos.x = -cloud.size
                recycled += 1
        return SystemResult(entities_affected=len(self.state.clouds), entities_recycled=recycled)
