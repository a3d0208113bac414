"""Scene entities and their factories.

Entities are plain dataclasses. They hold no behaviour beyond their data;
the systems in scene/systems advance them once per frame and the
renderers read them.

Every factory takes the scene RNG explicitly (see scene/util/rng.py).
"""

import random
from dataclasses import dataclass, field
from typing import Optional

from scene.constants import (
    BIRD_VX_RANGE,
    BIRD_VY_RANGE,
    BIRD_WING_SPEED_RANGE,
    CLOUD_OPACITY_RANGE,
    CLOUD_SIZE_RANGE,
    CLOUD_SPEED_RANGE,
    LEAF_MIN_Y_FRACTION,
    LEAF_ROTATION_SPEED_RANGE,
    LEAF_SIZE_RANGE,
    LEAF_VX_RANGE,
    LEAF_VY_RANGE,
    PHASE_RANGE,
    RAINDROP_LENGTH_RANGE,
    RAINDROP_SPEED_RANGE,
    STAR_SIZE_RANGE,
)
from scene.math_utils import Vector2
from scene.util.rng import require_rng_param


@dataclass
class Bird:
    pos: Vector2
    vel: Vector2
    wing_phase: float
    wing_speed: float


@dataclass
class Cloud:
    pos: Vector2
    size: float
    speed: float
    opacity: float


@dataclass
class Raindrop:
    pos: Vector2
    speed: float
    length: float


@dataclass
class Leaf:
    pos: Vector2
    vel: Vector2
    rotation: float
    rotation_speed: float
    size: float


@dataclass
class Star:
    pos: Vector2
    size: float
    twinkle_phase: float


@dataclass
class TreeMarker:
    pos: Vector2 = field(default_factory=Vector2)


def spawn_bird(x: float, y: float, rng: Optional[random.Random] = None) -> Bird:
    """Create a bird at (x, y) with a random heading and wing beat."""
    _rng = require_rng_param(rng, "spawn_bird")
    return Bird(
        pos=Vector2(x, y),
        vel=Vector2(_rng.uniform(*BIRD_VX_RANGE), _rng.uniform(*BIRD_VY_RANGE)),
        wing_phase=_rng.uniform(*PHASE_RANGE),
        wing_speed=_rng.uniform(*BIRD_WING_SPEED_RANGE),
    )


def spawn_cloud(x: float, y: float, rng: Optional[random.Random] = None) -> Cloud:
    _rng = require_rng_param(rng, "spawn_cloud")
    return Cloud(
        pos=Vector2(x, y),
        size=_rng.uniform(*CLOUD_SIZE_RANGE),
        speed=_rng.uniform(*CLOUD_SPEED_RANGE),
        opacity=_rng.uniform(*CLOUD_OPACITY_RANGE),
    )


def spawn_raindrop(x: float, y: float, rng: Optional[random.Random] = None) -> Raindrop:
    _rng = require_rng_param(rng, "spawn_raindrop")
    return Raindrop(
        pos=Vector2(x, y),
        speed=_rng.uniform(*RAINDROP_SPEED_RANGE),
        length=_rng.uniform(*RAINDROP_LENGTH_RANGE),
    )


def spawn_falling_raindrop(width: float, height: float,
                           rng: Optional[random.Random] = None) -> Raindrop:
    """Create a raindrop somewhere in the band just above the surface.

    x is in [0, width) and y in [-height, 0), so a fresh shower enters the
    screen gradually instead of all at once.
    """
    _rng = require_rng_param(rng, "spawn_falling_raindrop")
    return spawn_raindrop(_rng.random() * width, _rng.random() * height - height, _rng)


def spawn_leaf(width: float, height: float, rng: Optional[random.Random] = None) -> Leaf:
    """Create a storm leaf somewhere in the lower half of the surface."""
    _rng = require_rng_param(rng, "spawn_leaf")
    return Leaf(
        pos=Vector2(
            _rng.random() * width,
            height * LEAF_MIN_Y_FRACTION + _rng.random() * height * (1.0 - LEAF_MIN_Y_FRACTION),
        ),
        vel=Vector2(_rng.uniform(*LEAF_VX_RANGE), _rng.uniform(*LEAF_VY_RANGE)),
        rotation=_rng.uniform(*PHASE_RANGE),
        rotation_speed=_rng.uniform(*LEAF_ROTATION_SPEED_RANGE),
        size=_rng.uniform(*LEAF_SIZE_RANGE),
    )


def spawn_star(x: float, y: float, rng: Optional[random.Random] = None) -> Star:
    _rng = require_rng_param(rng, "spawn_star")
    return Star(
        pos=Vector2(x, y),
        size=_rng.uniform(*STAR_SIZE_RANGE),
        twinkle_phase=_rng.uniform(*PHASE_RANGE),
    )
