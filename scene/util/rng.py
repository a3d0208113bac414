"""RNG utilities for reproducible scenes.

Entity factories never reach for the global ``random`` module. The scene
owns one ``random.Random`` and hands it to every spawn call, so a seeded
scene replays identically (handy for tests and headless screenshots).
"""

import random
from typing import Optional

from scene.exceptions import SceneError


class MissingRNGError(SceneError, RuntimeError):
    """Raised when an RNG is required but was not passed in.

    This indicates a bug in the caller: spawning code must receive the
    scene's RNG explicitly.
    """


def require_rng_param(rng: Optional[random.Random], context: str) -> random.Random:
    """Validate that an RNG parameter was provided, failing loudly if not.

    Args:
        rng: The RNG that should have been provided
        context: Description of where this is called from (for error messages)

    Returns:
        The validated RNG

    Raises:
        MissingRNGError: If rng is None

    Example:
        def spawn_cloud(x, y, rng=None):
            _rng = require_rng_param(rng, "spawn_cloud")
            size = _rng.uniform(50, 150)
    """
    if rng is None:
        raise MissingRNGError(f"RNG required: {context}. Pass the scene RNG explicitly.")
    return rng


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create the scene RNG, seeded when a seed is given."""
    return random.Random(seed)
