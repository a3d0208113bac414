"""Tests for the layer renderer and the individual layer helpers."""

import pytest

from rendering.landscape import hill_outline, tree_positions
from rendering.scene_renderer import LAYER_DRAWERS, SceneRenderer, screen_to_scene
from rendering.ui_renderer import UIRenderer, debug_lines
from rendering.weather import rainbow_bands, rainbow_visible, storm_cover
from scene.state import LAYER_ORDER, Layer


class TestSceneRenderer:
    def test_every_layer_has_a_drawer(self):
        assert set(LAYER_DRAWERS) == set(Layer)

    def test_draws_all_visible_layers_in_order(self, scene, surface):
        renderer = SceneRenderer()
        renderer.render(surface, scene)
        assert renderer.drawn_layers == LAYER_ORDER

    def test_hidden_layers_are_skipped(self, scene, surface):
        scene.set_layer_visible(Layer.TREES, False)
        scene.set_layer_visible(Layer.SKY, False)
        renderer = SceneRenderer()
        renderer.render(surface, scene)
        assert Layer.TREES not in renderer.drawn_layers
        assert Layer.SKY not in renderer.drawn_layers
        assert renderer.drawn_layers[0] is Layer.STARS

    def test_all_hidden_leaves_clear_colour(self, blank_scene, surface):
        for layer in Layer:
            blank_scene.set_layer_visible(layer, False)
        SceneRenderer().render(surface, blank_scene)
        assert tuple(surface.get_at((400, 300)))[:3] == (0, 0, 0)

    @pytest.mark.parametrize("weather", ["sunny", "rainy", "cloudy", "stormy"])
    @pytest.mark.parametrize("hour", [3.0, 6.0, 12.0, 18.0, 21.0])
    def test_renders_every_weather_and_time(self, scene, surface, weather, hour):
        scene.set_weather(weather)
        scene.set_time_of_day(hour)
        scene.storm.lightning.active = weather == "stormy"
        scene.storm.lightning.intensity = 0.5
        scene.add_star(100, 100)
        scene.add_tree(300)
        SceneRenderer().render(surface, scene)
        assert surface.get_size() == (800, 600)

    def test_zoomed_out_leaves_border(self, blank_scene, surface):
        blank_scene.set_zoom(0.5)
        SceneRenderer().render(surface, blank_scene)
        assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)
        assert tuple(surface.get_at((400, 200)))[:3] != (0, 0, 0)

    def test_zoomed_in_renders(self, scene, surface):
        scene.set_zoom(2.0)
        renderer = SceneRenderer()
        renderer.render(surface, scene)
        assert renderer.drawn_layers == LAYER_ORDER


class TestScreenToScene:
    def test_identity_at_zoom_one(self, blank_scene):
        assert screen_to_scene(blank_scene, 123, 45) == (123, 45)

    def test_zoom_about_centre(self, blank_scene):
        blank_scene.set_zoom(2.0)
        assert screen_to_scene(blank_scene, 400, 300) == (400, 300)
        assert screen_to_scene(blank_scene, 600, 400) == (500, 350)


class TestRainbow:
    def test_only_in_daytime_rain(self, blank_scene):
        assert not rainbow_visible(blank_scene)
        blank_scene.set_weather("rainy")
        assert rainbow_visible(blank_scene)
        blank_scene.set_time_of_day(20)
        assert not rainbow_visible(blank_scene)

    def test_zero_intensity_hides(self, blank_scene):
        blank_scene.set_weather("rainy")
        blank_scene.set_rainbow_intensity(0)
        assert not rainbow_visible(blank_scene)

    def test_bands_shrink_inward(self, blank_scene):
        bands = rainbow_bands(blank_scene)
        assert len(bands) == 7
        assert [radius for _, radius, _ in bands] == [300 - 20 * i for i in range(7)]
        assert bands[0][0] == (255, 0, 0)
        assert bands[0][2] == pytest.approx(0.8 * 0.8)
        assert all(0.0 <= alpha <= 1.0 for _, _, alpha in bands)


class TestLandscape:
    def test_flat_hills_when_hilliness_zero(self, blank_scene):
        blank_scene.set_hilliness(0)
        outline = hill_outline(blank_scene, 1)
        assert outline[0] == (0.0, 600.0)
        assert outline[-1] == (800.0, 600.0)
        assert all(y == pytest.approx(600 * 0.75) for _, y in outline[1:-1])

    def test_tree_layout_culled_at_right_edge(self, blank_scene):
        assert len(tree_positions(blank_scene)) == 6
        blank_scene.add_tree(50)
        blank_scene.add_tree(blank_scene.width + 150)
        positions = tree_positions(blank_scene)
        assert len(positions) == 7
        assert positions[-1] == (50, 480)

    def test_storm_cover_is_stable_between_frames(self, blank_scene):
        assert storm_cover(blank_scene) == storm_cover(blank_scene)
        assert len(storm_cover(blank_scene)) == 20


class TestDebugReadout:
    def test_lines_reflect_snapshot(self, scene):
        scene.set_weather("stormy")
        scene.storm.lightning.active = True
        lines = debug_lines(scene.debug_snapshot())
        assert lines[0] == "Weather: stormy"
        assert "Click Mode: Bird Mode" in lines
        assert "Time: 12:00 (Day)" in lines
        assert lines[-2][0] == "Lightning: on"
        assert lines[-1] == "Thunder: quiet"

    def test_panel_draws(self, scene, surface, pygame_headless):
        font = pygame_headless.font.Font(None, 22)
        UIRenderer(surface, font).draw_debug_panel(scene.debug_snapshot())
