"""Entity updater: one integration step per frame for every collection."""

from typing import Dict, List

from scene.state import SceneState
from scene.systems import (
    BaseSystem,
    BirdSystem,
    CloudSystem,
    LeafSystem,
    RainSystem,
    StormSystem,
    SystemResult,
)


class EntityUpdater:
    """Runs the scene systems in a fixed order.

    Attributes:
        state: The scene being advanced
        systems: Systems in execution order
    """

    def __init__(self, state: SceneState) -> None:
        self.state = state
        self.storm_system = StormSystem(state)
        self.systems: List[BaseSystem] = [
            self.storm_system,
            CloudSystem(state),
            RainSystem(state),
            LeafSystem(state),
            BirdSystem(state),
        ]

    def get_system(self, name: str) -> BaseSystem:
        for system in self.systems:
            if system.name == name:
                return system
        raise KeyError(name)

    def update(self, dt: float = 0.0) -> Dict[str, SystemResult]:
        """Advance every collection by one frame.

        Args:
            dt: Wall-clock seconds since the previous frame; only used for
                time-based shimmer in the renderers

        Returns:
            Mapping of system name to its result for this frame
        """
        self.state.frame += 1
        self.state.elapsed += max(0.0, dt)

        return {system.name: system.update(self.state.frame) for system in self.systems}
