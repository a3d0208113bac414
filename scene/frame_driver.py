"""Frame driver: update then render, once per frame.

The driver owns nothing platform-specific. The window app calls ``step``
from its pygame loop; headless runs call ``run_frames`` on an offscreen
surface. Every entity collection finishes its update before any layer is
drawn.
"""

import logging
from typing import Any, Dict, Protocol

from scene.state import SceneState
from scene.systems import SystemResult
from scene.updater import EntityUpdater

logger = logging.getLogger(__name__)


class Renderer(Protocol):
    def render(self, surface: Any, state: SceneState) -> None:
        ...


class FrameDriver:
    """Advances and paints a scene.

    Attributes:
        state: The scene
        updater: Entity updater bound to the scene
        renderer: Anything with ``render(surface, state)``
        paused: When True, frames are drawn but entities do not move
    """

    def __init__(self, state: SceneState, renderer: Renderer) -> None:
        self.state = state
        self.updater = EntityUpdater(state)
        self.renderer = renderer
        self.paused: bool = False

    def update(self, dt: float = 0.0) -> Dict[str, SystemResult]:
        if self.paused:
            return {}
        return self.updater.update(dt)

    def render(self, surface: Any) -> None:
        self.renderer.render(surface, self.state)

    def step(self, surface: Any, dt: float = 0.0) -> Dict[str, SystemResult]:
        """Run one full frame: update every collection, then draw."""
        results = self.update(dt)
        self.render(surface)
        return results

    def run_frames(self, surface: Any, count: int, dt: float = 1.0 / 60.0) -> None:
        """Run ``count`` frames back to back (headless runs and tests)."""
        for _ in range(count):
            self.step(surface, dt)
        logger.info("Ran %d frames (scene frame %d)", count, self.state.frame)
