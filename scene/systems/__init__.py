"""Per-frame scene systems.

Execution order within a frame (see scene/updater.py):

    StormSystem -> CloudSystem -> RainSystem -> LeafSystem -> BirdSystem

Systems only touch their own collection, so the order only matters for
the storm effect, which the sky reads when it is drawn afterwards.
"""

from scene.systems.base import BaseSystem, SystemResult
from scene.systems.birds import BirdSystem
from scene.systems.clouds import CloudSystem
from scene.systems.leaves import LeafSystem
from scene.systems.rain import RainSystem
from scene.systems.storm import StormSystem

__all__ = [
    "BaseSystem",
    "SystemResult",
    "BirdSystem",
    "CloudSystem",
    "LeafSystem",
    "RainSystem",
    "StormSystem",
]
