"""Tests for the command-line entry point and the window app's event routing."""

import pytest

from main import build_parser, config_from_args, main
from scene.config.app_config import AppConfig, DisplayConfig
from scene.exceptions import ConfigurationError
from scene.state import ClickMode, Layer, Weather


class TestArgs:
    def test_defaults(self):
        config = config_from_args(build_parser().parse_args([]))
        assert not config.headless
        assert config.max_frames == 600
        assert config.display.screen_width == 1280
        assert config.display.screen_height == 720
        assert config.show_debug

    def test_flags(self):
        args = build_parser().parse_args(
            ["--headless", "--max-frames", "5", "--weather", "stormy", "--time", "21.5",
             "--seed", "3", "--width", "320", "--height", "240", "--no-debug"]
        )
        config = config_from_args(args)
        assert config.headless
        assert config.max_frames == 5
        assert config.weather == "stormy"
        assert config.time_of_day == 21.5
        assert config.seed == 3
        assert (config.display.screen_width, config.display.screen_height) == (320, 240)
        assert not config.show_debug

    def test_rejects_unknown_weather(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--weather", "foggy"])


class TestValidate:
    @pytest.mark.parametrize(
        "config",
        [
            AppConfig(display=DisplayConfig(screen_width=0)),
            AppConfig(display=DisplayConfig(frame_rate=0)),
            AppConfig(headless=True, max_frames=0),
        ],
    )
    def test_invalid(self, config):
        with pytest.raises(ConfigurationError):
            config.validate()

    def test_valid_returns_self(self):
        config = AppConfig()
        assert config.validate() is config

    def test_main_reports_bad_config(self):
        assert main(["--headless", "--width", "-5"]) == 2


class TestHeadless:
    def test_renders_and_saves_screenshot(self, tmp_path):
        shot = tmp_path / "scene.png"
        code = main(
            ["--headless", "--max-frames", "3", "--seed", "1", "--width", "160",
             "--height", "120", "--weather", "rainy", "--screenshot", str(shot)]
        )
        assert code == 0
        assert shot.exists()
        assert shot.stat().st_size > 0

    def test_run_headless_returns_state(self):
        from rainbow_scene import run_headless

        state = run_headless(
            AppConfig(headless=True, max_frames=4, seed=2, weather="stormy", time_of_day=22,
                      display=DisplayConfig(screen_width=200, screen_height=150))
        )
        assert state.frame == 4
        assert state.config.weather is Weather.STORMY
        assert state.config.time_of_day == 22
        assert len(state.leaves) == 50


class TestWindowEvents:
    """Event routing, exercised without opening a window."""

    @pytest.fixture
    def app(self, pygame_headless):
        from rainbow_scene import RainbowSceneApp

        return RainbowSceneApp(
            AppConfig(seed=5, display=DisplayConfig(screen_width=320, screen_height=240))
        )

    def key(self, pygame, key):
        return pygame.event.Event(pygame.KEYDOWN, key=key)

    def test_weather_keys(self, app, pygame_headless):
        pg = pygame_headless
        assert app.handle_event(self.key(pg, pg.K_4))
        assert app.state.config.weather is Weather.STORMY
        app.handle_event(self.key(pg, pg.K_1))
        assert app.state.config.weather is Weather.SUNNY

    def test_time_and_mode_keys(self, app, pygame_headless):
        pg = pygame_headless
        app.handle_event(self.key(pg, pg.K_RIGHT))
        assert app.state.config.time_of_day == pytest.approx(12.25)
        app.handle_event(self.key(pg, pg.K_m))
        assert app.state.click_mode is ClickMode.TREE

    def test_function_keys_toggle_layers(self, app, pygame_headless):
        pg = pygame_headless
        app.handle_event(self.key(pg, pg.K_F1))
        assert not app.state.is_visible(Layer.SKY)
        app.handle_event(self.key(pg, pg.K_F11))
        assert not app.state.is_visible(Layer.BIRDS)

    def test_hud_and_pause(self, app, pygame_headless):
        pg = pygame_headless
        app.handle_event(self.key(pg, pg.K_d))
        assert not app.show_debug
        app.handle_event(self.key(pg, pg.K_p))
        assert app.driver.paused

    def test_escape_and_quit(self, app, pygame_headless):
        pg = pygame_headless
        assert not app.handle_event(self.key(pg, pg.K_ESCAPE))
        assert not app.handle_event(pg.event.Event(pg.QUIT))

    def test_wheel_zooms(self, app, pygame_headless):
        pg = pygame_headless
        app.handle_event(pg.event.Event(pg.MOUSEWHEEL, x=0, y=1))
        assert app.state.config.zoom == pytest.approx(0.9)

    def test_click_places_tree(self, app, pygame_headless):
        pg = pygame_headless
        app.state.clouds.clear()
        app.state.click_mode = ClickMode.TREE
        app.handle_event(pg.event.Event(pg.MOUSEBUTTONDOWN, button=1, pos=(100, 50)))
        app.handle_event(pg.event.Event(pg.MOUSEBUTTONUP, button=1, pos=(100, 50)))
        assert len(app.state.trees) == 1
        assert app.state.trees[0].pos.x == 100
        assert not app.controller.pointer_down
