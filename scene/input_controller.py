"""Input controller: named operations that UI events map onto.

The window adapter (rainbow_scene.py) translates pygame events into these
calls; anything else that drives the scene (tests, a different front end)
can call them directly. No operation raises for out-of-range input:
values are clamped and actions that make no sense right now (a bird at
night) are ignored.
"""

import logging
from typing import Optional, Union

from scene.constants import (
    CLOUD_GRAB_HALF_HEIGHT,
    CLOUD_GRAB_HALF_WIDTH,
    ZOOM_SCROLL_FACTOR,
)
from scene.entities import Cloud
from scene.exceptions import InvalidWeatherError
from scene.math_utils import Vector2
from scene.state import CLICK_MODE_CYCLE, ClickMode, Layer, SceneState, Weather

logger = logging.getLogger(__name__)


class InputController:
    """Maps pointer, keyboard and slider events to scene mutations.

    Attributes:
        state: The scene being controlled
        pointer: Last known pointer position
        pointer_down: Whether the primary button is held
        dragged_cloud: Cloud being dragged, if any
    """

    def __init__(self, state: SceneState) -> None:
        self.state = state
        self.pointer: Vector2 = Vector2()
        self.pointer_down: bool = False
        self.dragged_cloud: Optional[Cloud] = None

    # ------------------------------------------------------------------
    # Sliders and buttons
    # ------------------------------------------------------------------

    def set_time_of_day(self, hour: float) -> None:
        self.state.set_time_of_day(hour)

    def set_weather(self, weather: Union[Weather, str]) -> Weather:
        """Switch weather; an unknown name is ignored with a warning.

        Returns:
            The weather now in effect
        """
        try:
            return self.state.set_weather(weather)
        except InvalidWeatherError as e:
            logger.warning("Ignoring weather change: %s", e)
            return self.state.config.weather

    def set_rainbow_intensity(self, value: float) -> None:
        self.state.set_rainbow_intensity(value)

    def set_rainbow_position(self, value: float) -> None:
        self.state.set_rainbow_position(value)

    def set_wind(self, value: float) -> None:
        self.state.set_wind_speed(value)

    def set_hilliness(self, value: float) -> None:
        self.state.set_hilliness(value)

    def toggle_layer(self, name: Union[Layer, str]) -> Optional[bool]:
        """Flip a layer's visibility.

        Returns:
            The new visibility, or None when the name matches no layer
        """
        layer = Layer.from_name(name)
        if layer is None:
            logger.warning("Ignoring toggle for unknown layer %r", name)
            return None
        visible = not self.state.is_visible(layer)
        self.state.set_layer_visible(layer, visible)
        logger.debug("Layer %s %s", layer.value, "shown" if visible else "hidden")
        return visible

    def cycle_click_mode(self) -> ClickMode:
        """Advance to the next click mode, wrapping after the last."""
        index = CLICK_MODE_CYCLE.index(self.state.click_mode)
        self.state.click_mode = CLICK_MODE_CYCLE[(index + 1) % len(CLICK_MODE_CYCLE)]
        return self.state.click_mode

    def click_mode_label(self) -> str:
        return self.state.click_mode.label

    # ------------------------------------------------------------------
    # Pointer
    # ------------------------------------------------------------------

    def find_cloud_at(self, x: float, y: float) -> Optional[Cloud]:
        """First cloud whose grab box contains the point."""
        for cloud in self.state.clouds:
            if (
                abs(cloud.pos.x - x) < CLOUD_GRAB_HALF_WIDTH
                and abs(cloud.pos.y - y) < CLOUD_GRAB_HALF_HEIGHT
            ):
                return cloud
        return None

    def on_pointer_down(self, x: float, y: float) -> None:
        """Grab a cloud under the pointer, or run the click-mode action."""
        self.pointer_down = True
        self.pointer.update(x, y)

        cloud = self.find_cloud_at(x, y)
        if cloud is not None:
            self.dragged_cloud = cloud
            return

        mode = self.state.click_mode
        if mode is ClickMode.BIRD:
            if self.state.is_daytime():
                self.state.add_bird(x, y)
            else:
                logger.debug("Ignoring bird at night (%.2fh)", self.state.config.time_of_day)
        elif mode is ClickMode.TREE:
            self.state.add_tree(x, y)
        elif mode is ClickMode.STAR:
            self.state.add_star(x, y)
        elif mode is ClickMode.RAIN:
            self.state.add_raindrop(x, y)
        elif mode is ClickMode.CLOUD:
            self.state.add_cloud(x, y)

    def on_pointer_move(self, x: float, y: float) -> None:
        self.pointer.update(x, y)
        if self.dragged_cloud is not None and self.pointer_down:
            self.dragged_cloud.pos.update(x, y)

    def on_pointer_up(self) -> None:
        self.pointer_down = False
        self.dragged_cloud = None

    def on_scroll(self, delta_y: float) -> None:
        """Zoom by scroll delta (browser-style pixels), clamped."""
        self.state.set_zoom(self.state.config.zoom + delta_y * ZOOM_SCROLL_FACTOR)
