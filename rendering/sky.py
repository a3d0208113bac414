"""Sky, stars, sun and moon layers."""

import math
from typing import List, Optional, Tuple

import pygame

from rendering.primitives import (
    GradientStops,
    alpha_byte,
    draw_glow,
    fill_overlay,
    fill_vertical_gradient,
    normalize_stops,
)
from scene.color import lerp_color, to_rgb
from scene.constants import (
    ARC_HORIZON_FRACTION,
    ARC_HORIZONTAL_SPAN,
    ARC_PEAK_FRACTION,
    DAY_SKY_BOTTOM,
    DAY_SKY_MIDDLE,
    DAY_SKY_TOP,
    GLOW_STOPS,
    MOON_CORE_COLOR,
    MOON_CORE_RADIUS,
    MOON_GLOW_COLOR,
    MOON_GLOW_RADIUS,
    MOON_GLOW_STOPS,
    NIGHT_SKY_BOTTOM,
    NIGHT_SKY_MIDDLE,
    NIGHT_SKY_TOP,
    NIGHT_TRANSITION_EASING,
    STAR_ALPHA,
    STAR_COLOR,
    STAR_FIELD_COUNT,
    STAR_FIELD_HEIGHT_FRACTION,
    STORM_SKY_STOPS,
    SUN_CORE_COLOR,
    SUN_CORE_RADIUS,
    SUN_GLOW_COLOR,
    SUN_GLOW_RADIUS,
)
from scene.math_utils import arc_position
from scene.state import SceneState, Weather
from scene.time_of_day import day_progress, is_daytime, night_progress

_STORM_STOPS = normalize_stops(STORM_SKY_STOPS)


def sky_gradient_stops(state: SceneState) -> GradientStops:
    """Gradient for the current time and weather, top to bottom.

    Daytime interpolates linearly from morning to evening colours. At night
    the progress is eased (power 0.7) so the colours change more slowly
    near the day/night boundary. Storms use a fixed grey gradient.
    """
    if state.config.weather is Weather.STORMY:
        return _STORM_STOPS

    hour = state.config.time_of_day
    if is_daytime(hour):
        progress = day_progress(hour)
        top = lerp_color(*DAY_SKY_TOP, progress)
        middle = lerp_color(*DAY_SKY_MIDDLE, progress)
        bottom = to_rgb(DAY_SKY_BOTTOM)
    else:
        eased = night_progress(hour) ** NIGHT_TRANSITION_EASING
        top = lerp_color(*NIGHT_SKY_TOP, eased)
        middle = lerp_color(*NIGHT_SKY_MIDDLE, eased)
        bottom = to_rgb(NIGHT_SKY_BOTTOM)
    return ((0.0, top), (0.5, middle), (1.0, bottom))


def draw_sky(surface: pygame.Surface, state: SceneState) -> None:
    fill_vertical_gradient(surface, sky_gradient_stops(state))

    lightning = state.storm.lightning
    if state.config.weather is Weather.STORMY and lightning.active:
        fill_overlay(surface, (255, 255, 255), lightning.intensity)


def star_field(state: SceneState) -> List[Tuple[Tuple[float, float], float]]:
    """Procedural background stars as ((x, y), radius)."""
    width = max(1, state.width)
    band = max(1.0, state.height * STAR_FIELD_HEIGHT_FRACTION)
    t = state.elapsed
    return [
        (((i * 37) % width, (i * 73) % band), math.sin(t + i) * 0.5 + 1.0)
        for i in range(STAR_FIELD_COUNT)
    ]


def draw_stars(surface: pygame.Surface, state: SceneState) -> None:
    """Stars only come out at night; placed stars twinkle by their own phase."""
    if is_daytime(state.config.time_of_day):
        return

    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for (x, y), radius in star_field(state):
        color = (*STAR_COLOR, alpha_byte(STAR_ALPHA * min(1.0, radius)))
        pygame.draw.circle(layer, color, (x, y), max(1, round(radius)))

    for star in state.stars:
        twinkle = 0.75 + 0.25 * math.sin(state.elapsed * 2.0 + star.twinkle_phase)
        color = (*STAR_COLOR, alpha_byte(STAR_ALPHA * twinkle))
        pygame.draw.circle(layer, color, star.pos.as_int_tuple(), max(1, round(star.size * twinkle)))

    surface.blit(layer, (0, 0))


def _arc(state: SceneState, progress: float) -> Tuple[float, float]:
    return arc_position(
        progress,
        state.width,
        state.height,
        ARC_HORIZONTAL_SPAN,
        ARC_HORIZON_FRACTION,
        ARC_PEAK_FRACTION,
    )


def sun_position(state: SceneState) -> Optional[Tuple[float, float]]:
    """Where the sun is, or None when it is below the horizon."""
    hour = state.config.time_of_day
    if not is_daytime(hour):
        return None
    return _arc(state, day_progress(hour))


def moon_position(state: SceneState) -> Optional[Tuple[float, float]]:
    """Where the moon is, or None during the day."""
    hour = state.config.time_of_day
    if is_daytime(hour):
        return None
    return _arc(state, night_progress(hour))


def draw_sun(surface: pygame.Surface, state: SceneState) -> None:
    position = sun_position(state)
    if position is None:
        return
    draw_glow(surface, position, SUN_GLOW_RADIUS, SUN_GLOW_COLOR, GLOW_STOPS)
    pygame.draw.circle(surface, to_rgb(SUN_CORE_COLOR), position, SUN_CORE_RADIUS)


def draw_moon(surface: pygame.Surface, state: SceneState) -> None:
    position = moon_position(state)
    if position is None:
        return
    draw_glow(surface, position, MOON_GLOW_RADIUS, MOON_GLOW_COLOR, MOON_GLOW_STOPS)
    pygame.draw.circle(surface, to_rgb(MOON_CORE_COLOR), position, MOON_CORE_RADIUS)
