"""Bird flight.

Birds only fly (and are only drawn) during the day. They bounce off the
sides of the surface and stay between a fixed ceiling and 70% of the
height. A bounce points the velocity back inside rather than flipping it
blindly, so a bird that overshot by more than one step cannot get stuck
flipping back and forth outside the bounds.
"""

from typing import Optional

from scene.constants import BIRD_MAX_Y_FRACTION, BIRD_MIN_Y
from scene.state import Layer, SceneState
from scene.systems.base import BaseSystem, SystemResult


class BirdSystem(BaseSystem):
    def __init__(self, state: SceneState) -> None:
        super().__init__(state, "Birds")

    def is_active(self) -> bool:
        return self.state.is_daytime() and self.state.is_visible(Layer.BIRDS)

    def _do_update(self, frame: int) -> Optional[SystemResult]:
        width = self.state.width
        max_y = self.state.height * BIRD_MAX_Y_FRACTION
        bounced = 0
        for bird in self.state.birds:
            bird.pos.add_inplace(bird.vel)
            bird.wing_phase += bird.wing_speed

            if bird.pos.x < 0:
                bird.vel.x = abs(bird.vel.x)
                bounced += 1
            elif bird.pos.x > width:
                bird.vel.x = -abs(bird.vel.x)
                bounced += 1
            if bird.pos.y < BIRD_MIN_Y:
                bird.vel.y = abs(bird.vel.y)
                bounced += 1
            elif bird.pos.y > max_y:
                bird.vel.y = -abs(bird.vel.y)
                bounced += 1
        return SystemResult(
            entities_affected=len(self.state.birds), details={"bounces": bounced}
        )
