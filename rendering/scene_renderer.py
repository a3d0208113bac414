"""Layer renderer: paints every visible layer in a fixed order.

Layers are plain functions ``draw(surface, state)``. They only read the
state, so the same state can be rendered any number of times. The scene is
drawn unscaled to an offscreen surface and then zoomed about the centre of
the target surface.
"""

import logging
from typing import Callable, Dict, Optional, Tuple

import pygame

from rendering.birds import draw_birds
from rendering.landscape import draw_hills, draw_trees
from rendering.sky import draw_moon, draw_sky, draw_stars, draw_sun
from rendering.weather import draw_clouds, draw_leaves, draw_rain, draw_rainbow
from scene.constants import CLEAR_COLOR
from scene.state import LAYER_ORDER, Layer, SceneState

logger = logging.getLogger(__name__)

LayerFn = Callable[[pygame.Surface, SceneState], None]

LAYER_DRAWERS: Dict[Layer, LayerFn] = {
    Layer.SKY: draw_sky,
    Layer.STARS: draw_stars,
    Layer.SUN: draw_sun,
    Layer.MOON: draw_moon,
    Layer.CLOUDS: draw_clouds,
    Layer.RAIN: draw_rain,
    Layer.LEAVES: draw_leaves,
    Layer.HILLS: draw_hills,
    Layer.RAINBOW: draw_rainbow,
    Layer.TREES: draw_trees,
    Layer.BIRDS: draw_birds,
}


def screen_to_scene(state: SceneState, x: float, y: float) -> Tuple[float, float]:
    """Undo the zoom so a click lands where it appears on screen."""
    zoom = state.config.zoom
    cx, cy = state.width / 2, state.height / 2
    return (cx + (x - cx) / zoom, cy + (y - cy) / zoom)


class SceneRenderer:
    """Renders a SceneState onto a pygame surface.

    Attributes:
        drawn_layers: Layers drawn in the last frame, in order
    """

    def __init__(self) -> None:
        self._canvas: Optional[pygame.Surface] = None
        self.drawn_layers: Tuple[Layer, ...] = ()

    def _scene_canvas(self, size: Tuple[int, int]) -> pygame.Surface:
        if self._canvas is None or self._canvas.get_size() != size:
            self._canvas = pygame.Surface(size, 0, 32)
        return self._canvas

    def render_layers(self, canvas: pygame.Surface, state: SceneState) -> None:
        """Draw every visible layer straight onto ``canvas``."""
        canvas.fill(CLEAR_COLOR)
        drawn = []
        for layer in LAYER_ORDER:
            if not state.is_visible(layer):
                continue
            LAYER_DRAWERS[layer](canvas, state)
            drawn.append(layer)
        self.drawn_layers = tuple(drawn)

    def render(self, surface: pygame.Surface, state: SceneState) -> None:
        """Clear ``surface`` and draw the scene at the current zoom."""
        size = surface.get_size()
        if size != (state.width, state.height):
            logger.debug("Surface %s differs from scene %sx%s", size, state.width, state.height)

        zoom = state.config.zoom
        if zoom == 1.0:
            self.render_layers(surface, state)
            return

        canvas = self._scene_canvas(size)
        self.render_layers(canvas, state)

        scaled_size = (max(1, int(size[0] * zoom)), max(1, int(size[1] * zoom)))
        scaled = pygame.transform.smoothscale(canvas, scaled_size)
        surface.fill(CLEAR_COLOR)
        surface.blit(
            scaled,
            ((size[0] - scaled_size[0]) // 2, (size[1] - scaled_size[1]) // 2),
        )
