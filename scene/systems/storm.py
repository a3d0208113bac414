"""Lightning and thunder.

While the weather is stormy, each frame has an independent chance of a
strike: the lightning flash starts at full intensity with a short
countdown and a longer thunder rumble starts alongside it. Both decay
every frame until their countdowns run out. Decay continues after the
storm passes so an in-flight flash still fades out; new strikes only
happen while stormy.
"""

import logging
from typing import Optional

from scene.constants import (
    LIGHTNING_CHANCE,
    LIGHTNING_DECAY,
    LIGHTNING_FRAMES,
    LIGHTNING_INTENSITY,
    THUNDER_DECAY,
    THUNDER_FRAMES,
    THUNDER_VOLUME,
)
from scene.state import SceneState, Weather
from scene.systems.base import BaseSystem, SystemResult

logger = logging.getLogger(__name__)


class StormSystem(BaseSystem):
    """Triggers and decays the storm effects."""

    def __init__(self, state: SceneState, strike_chance: float = LIGHTNING_CHANCE) -> None:
        super().__init__(state, "Storm")
        self.strike_chance = strike_chance

    def is_active(self) -> bool:
        storm = self.state.storm
        return (
            self.state.config.weather is Weather.STORMY
            or storm.lightning.active
            or storm.thunder.active
        )

    def trigger_strike(self) -> None:
        """Start a lightning flash and its thunder."""
        lightning = self.state.storm.lightning
        lightning.active = True
        lightning.intensity = LIGHTNING_INTENSITY
        lightning.remaining_frames = LIGHTNING_FRAMES

        thunder = self.state.storm.thunder
        thunder.remaining_frames = THUNDER_FRAMES
        thunder.volume = THUNDER_VOLUME
        logger.debug("Lightning strike at frame %d", self.state.frame)

    def _do_update(self, frame: int) -> Optional[SystemResult]:
        triggered = False
        if (
            self.state.config.weather is Weather.STORMY
            and self.state.rng.random() < self.strike_chance
        ):
            self.trigger_strike()
            triggered = True

        lightning = self.state.storm.lightning
        if lightning.active:
            lightning.remaining_frames -= 1
            lightning.intensity = max(0.0, lightning.intensity - LIGHTNING_DECAY)
            if lightning.remaining_frames <= 0:
                lightning.active = False
                lightning.intensity = 0.0

        thunder = self.state.storm.thunder
        if thunder.remaining_frames > 0:
            thunder.remaining_frames -= 1
            thunder.volume = max(0.0, thunder.volume - THUNDER_DECAY)

        return SystemResult(
            details={
                "lightning_triggered": triggered,
                "lightning_active": lightning.active,
                "thunder_active": thunder.active,
            }
        )
