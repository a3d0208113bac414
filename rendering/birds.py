"""Bird sprites.

Each bird is drawn onto a small sprite facing right and mirrored when it
flies left. The wings sit above and below the body, offset by the flap
phase.
"""

import math

import pygame

from scene.constants import (
    BIRD_BEAK_COLOR,
    BIRD_BODY_COLOR,
    BIRD_OUTLINE_COLOR,
    BIRD_WING_LIFT,
)
from scene.entities import Bird
from scene.state import SceneState
from scene.time_of_day import is_daytime

# Sprite canvas; the bird's origin sits at its centre
SPRITE_SIZE = (28, 20)
_OX, _OY = SPRITE_SIZE[0] // 2, SPRITE_SIZE[1] // 2


def _ellipse(sprite: pygame.Surface, cx: float, cy: float, rx: float, ry: float) -> None:
    rect = pygame.Rect(0, 0, max(1, round(rx * 2)), max(1, round(ry * 2)))
    rect.center = (round(_OX + cx), round(_OY + cy))
    pygame.draw.ellipse(sprite, BIRD_BODY_COLOR, rect)
    pygame.draw.ellipse(sprite, BIRD_OUTLINE_COLOR, rect, 1)


def wing_offset(bird: Bird) -> float:
    return math.sin(bird.wing_phase) * BIRD_WING_LIFT


def faces_right(bird: Bird) -> bool:
    return bird.vel.x > 0


def bird_sprite(bird: Bird) -> pygame.Surface:
    sprite = pygame.Surface(SPRITE_SIZE, pygame.SRCALPHA)
    wing_y = wing_offset(bird)

    _ellipse(sprite, 0, 0, 6, 3)  # body
    _ellipse(sprite, -3, wing_y, 8, 1.5)
    _ellipse(sprite, -3, -wing_y, 8, 1.5)

    head = (_OX + 6, _OY)
    pygame.draw.circle(sprite, BIRD_BODY_COLOR, head, 2)
    pygame.draw.circle(sprite, BIRD_OUTLINE_COLOR, head, 2, 1)

    beak = [(_OX + 8, _OY), (_OX + 10, _OY - 1), (_OX + 10, _OY + 1)]
    pygame.draw.polygon(sprite, BIRD_BEAK_COLOR, beak)

    if not faces_right(bird):
        sprite = pygame.transform.flip(sprite, True, False)
    return sprite


def draw_birds(surface: pygame.Surface, state: SceneState) -> None:
    """Birds roost at night."""
    if not is_daytime(state.config.time_of_day):
        return
    for bird in state.birds:
        x, y = bird.pos.as_int_tuple()
        surface.blit(bird_sprite(bird), (x - _OX, y - _OY))
