"""Base class for per-frame scene systems.

Each entity collection is advanced by exactly one system. A system reads
the shared SceneState, mutates its own collection in place and reports
what it did through a SystemResult.

A system owns one collection (or the storm effect), is bound to its scene
at construction and can be switched off through ``enabled``; the updater
collects the per-frame results for the debug readout and tests.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

__all__ = [
    "SystemResult",
    "BaseSystem",
]

if TYPE_CHECKING:
    from scene.state import SceneState


@dataclass
class SystemResult:
    """Result of one system update.

    Attributes:
        entities_affected: Number of entities that were moved or changed
        entities_recycled: Number of entities wrapped or respawned at an edge
        skipped: Whether the update was skipped (disabled or inactive)
        details: System-specific details (e.g., {"lightning_triggered": True})
    """

    entities_affected: int = 0
    entities_recycled: int = 0
    skipped: bool = False
    details: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def skipped_result() -> "SystemResult":
        """Create a result for when a system update was skipped."""
        return SystemResult(skipped=True)

    @staticmethod
    def empty() -> "SystemResult":
        return SystemResult()


class BaseSystem(ABC):
    """Abstract base class for all scene systems.

    Subclasses implement ``is_active`` (whether the collection moves this
    frame, e.g. birds only fly during the day) and ``_do_update``.
    """

    def __init__(self, state: "SceneState", name: str) -> None:
        self._state = state
        self._name = name
        self._enabled = True
        self._update_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @property
    def state(self) -> "SceneState":
        return self._state

    @property
    def update_count(self) -> int:
        """Number of updates that actually ran."""
        return self._update_count

    def is_active(self) -> bool:
        """Whether this system's collection moves this frame."""
        return True

    def update(self, frame: int) -> SystemResult:
        """Run one integration step if enabled and active.

        Args:
            frame: Current frame number

        Returns:
            SystemResult describing what the system did
        """
        if not self._enabled or not self.is_active():
            return SystemResult.skipped_result()

        result = self._do_update(frame)
        self._update_count += 1
        return result if result is not None else SystemResult.empty()

    @abstractmethod
    def _do_update(self, frame: int) -> Optional[SystemResult]:
        """Implement system-specific update logic."""

    def get_debug_info(self) -> Dict[str, Any]:
        return {
            "name": self._name,
            "enabled": self._enabled,
            "active": self.is_active(),
            "update_count": self._update_count,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, enabled={self._enabled})"
