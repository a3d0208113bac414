"""pygame renderers for the rainbow scene."""

from rendering.scene_renderer import LAYER_DRAWERS, SceneRenderer, screen_to_scene

__all__ = ["LAYER_DRAWERS", "SceneRenderer", "screen_to_scene"]
