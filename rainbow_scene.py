"""Pygame window and headless runner for the rainbow scene.

Translates pygame events into InputController calls, drives the FrameDriver
from the clock-ticked loop and draws the debug readout on top.
"""

import logging
import os
from typing import Callable, Dict, Optional

import pygame

from rendering.scene_renderer import SceneRenderer, screen_to_scene
from rendering.ui_renderer import UIRenderer
from scene.config.app_config import AppConfig
from scene.constants import WHEEL_NOTCH_DELTA
from scene.frame_driver import FrameDriver
from scene.input_controller import InputController
from scene.state import LAYER_ORDER, SceneState

logger = logging.getLogger(__name__)

TIME_STEP_HOURS = 0.25
WIND_STEP = 0.5
RAINBOW_INTENSITY_STEP = 0.1
RAINBOW_POSITION_STEP = 0.05
HILLINESS_STEP = 0.1

LAYER_KEYS = (
    pygame.K_F1,
    pygame.K_F2,
    pygame.K_F3,
    pygame.K_F4,
    pygame.K_F5,
    pygame.K_F6,
    pygame.K_F7,
    pygame.K_F8,
    pygame.K_F9,
    pygame.K_F10,
    pygame.K_F11,
)


def build_key_bindings(controller: InputController) -> Dict[int, Callable[[], object]]:
    """Keyboard stand-ins for the sliders and buttons of the control panel."""
    state = controller.state
    cfg = state.config

    bindings: Dict[int, Callable[[], object]] = {
        pygame.K_1: lambda: controller.set_weather("sunny"),
        pygame.K_2: lambda: controller.set_weather("rainy"),
        pygame.K_3: lambda: controller.set_weather("cloudy"),
        pygame.K_4: lambda: controller.set_weather("stormy"),
        pygame.K_LEFT: lambda: controller.set_time_of_day(cfg.time_of_day - TIME_STEP_HOURS),
        pygame.K_RIGHT: lambda: controller.set_time_of_day(cfg.time_of_day + TIME_STEP_HOURS),
        pygame.K_DOWN: lambda: controller.set_wind(cfg.wind_speed - WIND_STEP),
        pygame.K_UP: lambda: controller.set_wind(cfg.wind_speed + WIND_STEP),
        pygame.K_LEFTBRACKET: lambda: controller.set_rainbow_intensity(
            cfg.rainbow_intensity - RAINBOW_INTENSITY_STEP
        ),
        pygame.K_RIGHTBRACKET: lambda: controller.set_rainbow_intensity(
            cfg.rainbow_intensity + RAINBOW_INTENSITY_STEP
        ),
        pygame.K_SEMICOLON: lambda: controller.set_rainbow_position(
            cfg.rainbow_vertical_position - RAINBOW_POSITION_STEP
        ),
        pygame.K_QUOTE: lambda: controller.set_rainbow_position(
            cfg.rainbow_vertical_position + RAINBOW_POSITION_STEP
        ),
        pygame.K_MINUS: lambda: controller.set_hilliness(cfg.hilliness - HILLINESS_STEP),
        pygame.K_EQUALS: lambda: controller.set_hilliness(cfg.hilliness + HILLINESS_STEP),
        pygame.K_m: controller.cycle_click_mode,
    }
    for key, layer in zip(LAYER_KEYS, LAYER_ORDER):
        bindings[key] = lambda layer=layer: controller.toggle_layer(layer)
    return bindings


def create_scene(config: AppConfig) -> SceneState:
    """Build the starting scene from the app configuration."""
    state = SceneState.create(
        config.display.screen_width, config.display.screen_height, seed=config.seed
    )
    if config.time_of_day is not None:
        state.set_time_of_day(config.time_of_day)
    if config.weather is not None:
        state.set_weather(config.weather)
    return state


class RainbowSceneApp:
    """The interactive scene in a resizable pygame window.

    Attributes:
        config: Application configuration
        state: Scene state
        driver: Frame driver (update then render)
        controller: Input controller the events are routed to
        screen: Pygame display surface
        clock: Pygame clock for frame rate
        ui_renderer: Debug readout renderer
        show_debug: Whether the readout is drawn
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config: AppConfig = (config or AppConfig()).validate()
        self.state: SceneState = create_scene(self.config)
        self.driver: FrameDriver = FrameDriver(self.state, SceneRenderer())
        self.controller: InputController = InputController(self.state)
        self.key_bindings = build_key_bindings(self.controller)
        self.clock: pygame.time.Clock = pygame.time.Clock()
        self.screen: Optional[pygame.Surface] = None
        self.ui_renderer: Optional[UIRenderer] = None
        self.show_debug: bool = self.config.show_debug

    def setup(self) -> bool:
        """Open the window. Returns False when no display is available."""
        size = (self.state.width, self.state.height)
        try:
            self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
            pygame.display.set_caption("Rainbow Scene")
        except pygame.error as e:
            logger.error("Couldn't set the display mode: %s", e)
            return False

        self.ui_renderer = UIRenderer(self.screen, pygame.font.Font(None, 22))
        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Route one event. Returns False when the app should quit."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key == pygame.K_d:
                self.show_debug = not self.show_debug
            elif event.key == pygame.K_p:
                self.driver.paused = not self.driver.paused
            else:
                action = self.key_bindings.get(event.key)
                if action is not None:
                    action()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.controller.on_pointer_down(*screen_to_scene(self.state, *event.pos))
        elif event.type == pygame.MOUSEMOTION:
            self.controller.on_pointer_move(*screen_to_scene(self.state, *event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.controller.on_pointer_up()
        elif event.type == pygame.MOUSEWHEEL:
            # Wheel up is negative delta in browser terms (zoom out)
            self.controller.on_scroll(-event.y * WHEEL_NOTCH_DELTA)
        elif event.type == pygame.VIDEORESIZE:
            self.state.resize(event.w, event.h)
            self.screen = pygame.display.get_surface()
            if self.ui_renderer is not None:
                self.ui_renderer.screen = self.screen
        return True

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False
        return True

    def render(self) -> None:
        if self.screen is None:
            return
        self.driver.render(self.screen)
        if self.show_debug and self.ui_renderer is not None:
            self.ui_renderer.draw_debug_panel(self.state.debug_snapshot())
        pygame.display.flip()

    def run(self) -> None:
        """Run until the window is closed or ESC is pressed."""
        if not self.setup():
            return

        logger.info("Controls: 1-4 weather, arrows time/wind, [ ] rainbow, ; ' rainbow height")
        logger.info("          - = hills, M click mode, F1-F11 layers, D debug, P pause, ESC quit")

        frame_rate = self.config.display.frame_rate
        while self.handle_events():
            dt = self.clock.tick(frame_rate) / 1000.0
            self.driver.update(dt)
            self.render()

        logger.info("Closed after %d frames", self.state.frame)


def run_headless(config: AppConfig) -> SceneState:
    """Render frames offscreen, optionally saving the last one as a PNG."""
    config.validate()
    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    try:
        state = create_scene(config)
        surface = pygame.Surface((state.width, state.height), 0, 32)
        driver = FrameDriver(state, SceneRenderer())
        driver.run_frames(surface, config.max_frames, 1.0 / config.display.frame_rate)

        if config.screenshot:
            pygame.image.save(surface, config.screenshot)
            logger.info("Saved screenshot to %s", config.screenshot)
        return state
    finally:
        pygame.quit()


def main(config: Optional[AppConfig] = None) -> None:
    """Entry point for the windowed scene."""
    pygame.init()
    app = RainbowSceneApp(config)
    try:
        app.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
