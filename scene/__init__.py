"""Scene state, input handling and per-frame updates.

This package holds the platform-free part of the rainbow scene; the
pygame drawing lives in the rendering package. Key modules:

- state: SceneConfig, storm effects, entity collections, weather changes
- entities: Bird, Cloud, Raindrop, Leaf, Star, TreeMarker and factories
- input_controller: named operations UI events map onto
- systems / updater: one integration step per frame per collection
- frame_driver: update-then-render per frame
"""

from scene.frame_driver import FrameDriver
from scene.input_controller import InputController
from scene.state import ClickMode, Layer, SceneConfig, SceneState, Weather
from scene.updater import EntityUpdater

__all__ = [
    "ClickMode",
    "EntityUpdater",
    "FrameDriver",
    "InputController",
    "Layer",
    "SceneConfig",
    "SceneState",
    "Weather",
]
