"""Clouds, rain, storm leaves and the rainbow."""

import math
from typing import List, Tuple

import pygame

from rendering.primitives import (
    alpha_byte,
    arc_band_polygon,
    draw_rotated_ellipse,
    draw_translucent_circles,
)
from scene.color import to_rgb, with_alpha
from scene.constants import (
    CLOUD_COLOR,
    CLOUD_LOBES,
    LEAF_ALPHA,
    LEAF_ASPECT,
    LEAF_COLOR,
    RAIN_ALPHA,
    RAIN_DAY_COLOR,
    RAIN_LINE_WIDTH,
    RAIN_NIGHT_COLOR,
    RAINBOW_BAND_WIDTH,
    RAINBOW_COLORS,
    RAINBOW_RADIUS_FRACTION,
    STORM_CLOUD_ALPHA,
    STORM_CLOUD_COLOR,
    STORM_CLOUD_SPACING,
)
from scene.state import SceneState, Weather
from scene.time_of_day import is_daytime


def cloud_lobes(x: float, y: float, size: float) -> List[Tuple[Tuple[float, float], float]]:
    """The five overlapping circles that make up one cloud."""
    return [((x + dx * size, y + dy * size), r * size) for dx, dy, r in CLOUD_LOBES]


def storm_cover(state: SceneState) -> List[Tuple[float, float, float]]:
    """(x, y, size) of each cloud in the dense storm cover."""
    width = max(1, state.width)
    return [
        ((i * STORM_CLOUD_SPACING) % width, 50 + math.sin(i * 0.5) * 30, size)
        for i, size in enumerate(state.storm_cloud_sizes)
    ]


def draw_clouds(surface: pygame.Surface, state: SceneState) -> None:
    weather = state.config.weather
    if weather is Weather.SUNNY:
        return

    if weather is Weather.STORMY:
        for x, y, size in storm_cover(state):
            draw_translucent_circles(
                surface, STORM_CLOUD_COLOR, STORM_CLOUD_ALPHA, cloud_lobes(x, y, size)
            )
        return

    for cloud in state.clouds:
        draw_translucent_circles(
            surface, CLOUD_COLOR, cloud.opacity, cloud_lobes(cloud.pos.x, cloud.pos.y, cloud.size)
        )


def rain_color(state: SceneState) -> Tuple[int, int, int]:
    return RAIN_DAY_COLOR if is_daytime(state.config.time_of_day) else RAIN_NIGHT_COLOR


def draw_rain(surface: pygame.Surface, state: SceneState) -> None:
    if not state.config.weather.has_rain or not state.raindrops:
        return

    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    color = with_alpha(rain_color(state), RAIN_ALPHA)
    for drop in state.raindrops:
        x, y = drop.pos
        pygame.draw.line(layer, color, (x, y), (x, y + drop.length), RAIN_LINE_WIDTH)
    surface.blit(layer, (0, 0))


def draw_leaves(surface: pygame.Surface, state: SceneState) -> None:
    if state.config.weather is not Weather.STORMY:
        return
    for leaf in state.leaves:
        draw_rotated_ellipse(
            surface,
            LEAF_COLOR,
            LEAF_ALPHA,
            (leaf.pos.x, leaf.pos.y),
            leaf.size,
            leaf.size * LEAF_ASPECT,
            leaf.rotation,
        )


def rainbow_visible(state: SceneState) -> bool:
    """Rainbows need rain, some intensity and daylight."""
    return (
        state.config.weather is Weather.RAINY
        and state.config.rainbow_intensity > 0
        and is_daytime(state.config.time_of_day)
    )


def rainbow_bands(state: SceneState) -> List[Tuple[Tuple[int, int, int], float, float]]:
    """(colour, radius, alpha) for each band, outermost (red) first.

    Each band's opacity shimmers around the base intensity with its own
    phase offset.
    """
    base_radius = min(state.width, state.height) * RAINBOW_RADIUS_FRACTION
    intensity = state.config.rainbow_intensity
    t = state.elapsed
    bands = []
    for i, color in enumerate(RAINBOW_COLORS):
        radius = base_radius - i * RAINBOW_BAND_WIDTH
        alpha = intensity * (0.8 + 0.2 * math.sin(t + i))
        bands.append((to_rgb(color), radius, max(0.0, min(1.0, alpha))))
    return bands


def rainbow_center(state: SceneState) -> Tuple[float, float]:
    return (state.width * 0.5, state.height * state.config.rainbow_vertical_position)


def draw_rainbow(surface: pygame.Surface, state: SceneState) -> None:
    if not rainbow_visible(state):
        return

    center = rainbow_center(state)
    half_band = RAINBOW_BAND_WIDTH / 2
    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    for color, radius, alpha in rainbow_bands(state):
        outer = radius + half_band
        if outer <= 0:
            continue
        inner = max(0.0, radius - half_band)
        pygame.draw.polygon(layer, (*color, alpha_byte(alpha)), arc_band_polygon(center, outer, inner))
    surface.blit(layer, (0, 0))
