"""Tests for the per-frame scene systems and the entity updater."""

import pytest

from scene.entities import Bird, Cloud, Leaf, Raindrop
from scene.math_utils import Vector2
from scene.state import Layer, Weather
from scene.systems import (
    BirdSystem,
    CloudSystem,
    LeafSystem,
    RainSystem,
    StormSystem,
)
from scene.updater import EntityUpdater


def make_bird(x, y, vx, vy):
    return Bird(pos=Vector2(x, y), vel=Vector2(vx, vy), wing_phase=0.0, wing_speed=0.3)


class TestBirdSystem:
    def test_moves_and_flaps(self, blank_scene):
        bird = make_bird(100, 100, 1.5, -0.5)
        blank_scene.birds.append(bird)
        BirdSystem(blank_scene).update(1)
        assert (bird.pos.x, bird.pos.y) == (101.5, 99.5)
        assert bird.wing_phase == pytest.approx(0.3)

    def test_right_edge_bounce_then_moves_left(self, blank_scene):
        bird = make_bird(blank_scene.width - 0.5, 100, 2.0, 0.0)
        blank_scene.birds.append(bird)
        system = BirdSystem(blank_scene)

        result = system.update(1)
        assert result.details["bounces"] == 1
        assert bird.vel.x < 0
        previous = bird.pos.x
        for frame in range(2, 6):
            system.update(frame)
            assert bird.pos.x < previous
            previous = bird.pos.x

    def test_far_outside_does_not_oscillate(self, blank_scene):
        bird = make_bird(-50, 100, -2.0, 0.0)
        blank_scene.birds.append(bird)
        system = BirdSystem(blank_scene)
        for frame in range(1, 5):
            system.update(frame)
            assert bird.vel.x > 0

    def test_vertical_bounds(self, blank_scene):
        low = make_bird(100, blank_scene.height * 0.7, 0.0, 1.0)
        high = make_bird(100, 50, 0.0, -1.0)
        blank_scene.birds.extend([low, high])
        BirdSystem(blank_scene).update(1)
        assert low.vel.y < 0
        assert high.vel.y > 0

    def test_grounded_at_night(self, blank_scene):
        bird = make_bird(100, 100, 1.0, 1.0)
        blank_scene.birds.append(bird)
        blank_scene.set_time_of_day(22)
        result = BirdSystem(blank_scene).update(1)
        assert result.skipped
        assert (bird.pos.x, bird.pos.y) == (100, 100)

    def test_hidden_layer_freezes_birds(self, blank_scene):
        blank_scene.birds.append(make_bird(100, 100, 1.0, 1.0))
        blank_scene.set_layer_visible(Layer.BIRDS, False)
        assert BirdSystem(blank_scene).update(1).skipped


class TestCloudSystem:
    def test_drifts_with_wind(self, blank_scene):
        blank_scene.set_weather("cloudy")
        cloud = Cloud(pos=Vector2(100, 100), size=80, speed=1.0, opacity=0.5)
        blank_scene.clouds.append(cloud)
        CloudSystem(blank_scene).update(1)
        assert cloud.pos.x == pytest.approx(101.0 + 3.0 * 0.1)

    def test_wraps_past_right_edge(self, blank_scene):
        blank_scene.set_weather("rainy")
        cloud = Cloud(pos=Vector2(blank_scene.width + 79.9, 100), size=80, speed=1.0, opacity=0.5)
        blank_scene.clouds.append(cloud)
        result = CloudSystem(blank_scene).update(1)
        assert cloud.pos.x == -80
        assert result.entities_recycled == 1

    @pytest.mark.parametrize("weather", ["sunny", "stormy"])
    def test_still_when_not_shown(self, blank_scene, weather):
        blank_scene.set_weather(weather)
        cloud = Cloud(pos=Vector2(100, 100), size=80, speed=1.0, opacity=0.5)
        blank_scene.clouds.append(cloud)
        assert CloudSystem(blank_scene).update(1).skipped
        assert cloud.pos.x == 100


class TestRainSystem:
    def test_falls_and_respawns_above(self, blank_scene):
        blank_scene.set_weather("rainy")
        drop = Raindrop(pos=Vector2(50, blank_scene.height - 1), speed=5.0, length=20.0)
        blank_scene.raindrops = [drop]
        result = RainSystem(blank_scene).update(1)
        assert drop.pos.y == -20.0
        assert 0 <= drop.pos.x < blank_scene.width
        assert result.entities_recycled == 1

    def test_stays_on_screen_after_many_frames(self, blank_scene):
        blank_scene.set_weather("stormy")
        system = RainSystem(blank_scene)
        for frame in range(300):
            system.update(frame)
        for drop in blank_scene.raindrops:
            assert -drop.length <= drop.pos.y <= blank_scene.height

    def test_paused_when_layer_hidden(self, blank_scene):
        blank_scene.set_weather("rainy")
        blank_scene.set_layer_visible(Layer.RAIN, False)
        before = [d.pos.y for d in blank_scene.raindrops]
        RainSystem(blank_scene).update(1)
        assert [d.pos.y for d in blank_scene.raindrops] == before

    def test_clicked_drops_fall_only_in_rain(self, blank_scene):
        drop = blank_scene.add_raindrop(10, 10)
        assert RainSystem(blank_scene).update(1).skipped
        assert drop.pos.y == 10


class TestLeafSystem:
    def _leaf(self, x, y, vx=0.0, vy=0.0):
        return Leaf(pos=Vector2(x, y), vel=Vector2(vx, vy), rotation=0.0,
                    rotation_speed=0.02, size=10.0)

    def test_blown_by_wind(self, blank_scene):
        blank_scene.set_weather("stormy")
        leaf = self._leaf(100, 400, vx=1.0, vy=0.5)
        blank_scene.leaves = [leaf]
        blank_scene.set_wind_speed(4)
        LeafSystem(blank_scene).update(1)
        assert leaf.pos.x == pytest.approx(100 + 1.0 + 4 * 0.5)
        assert leaf.pos.y == pytest.approx(400.5)
        assert leaf.rotation == pytest.approx(0.02 + 4 * 0.01)

    def test_wraps_each_axis(self, blank_scene):
        blank_scene.set_weather("stormy")
        blank_scene.set_wind_speed(0)
        left = self._leaf(-10.5, 300, vx=-1.0)
        bottom = self._leaf(300, blank_scene.height + 10.5, vy=1.0)
        blank_scene.leaves = [left, bottom]
        result = LeafSystem(blank_scene).update(1)
        assert left.pos.x == blank_scene.width + 10
        assert bottom.pos.y == -10
        assert result.entities_recycled == 2

    def test_only_in_storms(self, blank_scene):
        blank_scene.leaves = [self._leaf(100, 100, vx=1.0)]
        assert LeafSystem(blank_scene).update(1).skipped


class TestStormSystem:
    def test_strike_and_decay(self, blank_scene):
        blank_scene.set_weather("stormy")
        system = StormSystem(blank_scene, strike_chance=1.0)
        result = system.update(1)

        lightning = blank_scene.storm.lightning
        thunder = blank_scene.storm.thunder
        assert result.details["lightning_triggered"]
        assert lightning.active
        assert lightning.remaining_frames == 4
        assert lightning.intensity == pytest.approx(0.7)
        assert thunder.remaining_frames == 29
        assert thunder.volume == pytest.approx(0.78)

        system.strike_chance = 0.0
        for frame in range(2, 6):
            system.update(frame)
        assert not lightning.active
        assert lightning.intensity == 0.0
        assert thunder.active
        assert thunder.remaining_frames == 25

    def test_decay_continues_after_storm_but_no_new_strikes(self, blank_scene):
        blank_scene.set_weather("stormy")
        system = StormSystem(blank_scene, strike_chance=1.0)
        system.update(1)
        blank_scene.set_weather("sunny")

        assert system.is_active()
        for frame in range(2, 40):
            result = system.update(frame)
            assert not result.details.get("lightning_triggered", False)
        assert not blank_scene.storm.lightning.active
        assert not blank_scene.storm.thunder.active
        assert not system.is_active()

    def test_never_strikes_in_fair_weather(self, blank_scene):
        system = StormSystem(blank_scene, strike_chance=1.0)
        assert system.update(1).skipped
        assert not blank_scene.storm.lightning.active

    def test_thunder_never_negative(self, blank_scene):
        blank_scene.set_weather("stormy")
        system = StormSystem(blank_scene, strike_chance=0.0)
        system.trigger_strike()
        for frame in range(100):
            system.update(frame)
        assert blank_scene.storm.thunder.remaining_frames == 0
        assert blank_scene.storm.thunder.volume >= 0.0


class TestEntityUpdater:
    def test_advances_frame_and_clock(self, scene):
        updater = EntityUpdater(scene)
        results = updater.update(0.5)
        updater.update(0.25)
        assert scene.frame == 2
        assert scene.elapsed == pytest.approx(0.75)
        assert list(results) == ["Storm", "Clouds", "Rain", "Leaves", "Birds"]

    def test_get_system(self, scene):
        updater = EntityUpdater(scene)
        assert updater.get_system("Storm") is updater.storm_system
        with pytest.raises(KeyError):
            updater.get_system("Fog")

    def test_disabled_system_is_skipped(self, scene):
        updater = EntityUpdater(scene)
        updater.get_system("Birds").enabled = False
        before = [b.pos.copy() for b in scene.birds]
        results = updater.update()
        assert results["Birds"].skipped
        assert [b.pos for b in scene.birds] == before

    def test_weather_counts_hold_across_frames(self, scene):
        scene.set_weather(Weather.STORMY)
        updater = EntityUpdater(scene)
        for _ in range(120):
            updater.update(1 / 60)
        assert len(scene.raindrops) == 200
        assert len(scene.leaves) == 50

    def test_debug_info(self, scene):
        updater = EntityUpdater(scene)
        updater.update()
        info = updater.get_system("Rain").get_debug_info()
        assert info == {"name": "Rain", "enabled": True, "active": False, "update_count": 0}
        assert updater.get_system("Birds").get_debug_info()["update_count"] == 1
