"""Hills and trees."""

import math
from functools import lru_cache
from typing import List, Tuple

import pygame

from scene.color import to_rgb
from scene.constants import (
    FOLIAGE_CIRCLES,
    FOLIAGE_COLOR,
    HILL_LAYERS,
    HILL_RISE_AMPLITUDE,
    HILL_STEP,
    HILL_SWAY_AMPLITUDE,
    TREE_CULL_MARGIN,
    TREE_LAYOUT,
    TRUNK_COLOR,
    TRUNK_HEIGHT,
    TRUNK_WIDTH,
)
from scene.state import SceneState

Point = Tuple[float, float]


def hill_outline(state: SceneState, index: int) -> List[Point]:
    """Closed outline of one hill layer.

    The top edge is sampled every few pixels and perturbed by two sine
    terms scaled by hilliness; the phase of the horizontal term depends on
    the layer index so the layers do not line up.
    """
    base_fraction, _ = HILL_LAYERS[index]
    width, height = state.width, state.height
    base_y = height * base_fraction
    hilliness = state.config.hilliness

    points: List[Point] = [(0.0, float(height))]
    for x in range(0, width + 1, HILL_STEP):
        hill_x = x + math.sin(x * 0.01 + index * 0.5) * HILL_SWAY_AMPLITUDE * hilliness
        hill_y = base_y + math.sin(x * 0.005) * HILL_RISE_AMPLITUDE * hilliness
        points.append((hill_x, hill_y))
    points.append((float(width), float(height)))
    return points


def draw_hills(surface: pygame.Surface, state: SceneState) -> None:
    for index, (_, color) in enumerate(HILL_LAYERS):
        pygame.draw.polygon(surface, to_rgb(color), hill_outline(state, index))


@lru_cache(maxsize=8)
def base_tree_positions(height: int) -> Tuple[Point, ...]:
    """The fixed tree layout for a surface height (computed once per size)."""
    return tuple((float(x), height * fraction) for x, fraction in TREE_LAYOUT)


def tree_positions(state: SceneState) -> List[Point]:
    """Base layout plus placed trees, skipping those well past the right edge."""
    positions = list(base_tree_positions(state.height))
    positions.extend((tree.pos.x, tree.pos.y) for tree in state.trees)
    limit = state.width + TREE_CULL_MARGIN
    return [(x, y) for x, y in positions if x < limit]


def draw_tree(surface: pygame.Surface, x: float, y: float) -> None:
    """Trunk from the given point down, with foliage clustered above it."""
    trunk = pygame.Rect(int(x - TRUNK_WIDTH / 2), int(y), TRUNK_WIDTH, TRUNK_HEIGHT)
    pygame.draw.rect(surface, to_rgb(TRUNK_COLOR), trunk)

    foliage = to_rgb(FOLIAGE_COLOR)
    for dx, dy, radius in FOLIAGE_CIRCLES:
        pygame.draw.circle(surface, foliage, (x + dx, y + dy), radius)


def draw_trees(surface: pygame.Surface, state: SceneState) -> None:
    for x, y in tree_positions(state):
        draw_tree(surface, x, y)
