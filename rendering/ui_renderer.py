"""UI rendering utilities for the scene window.

This module draws the debug readout: a translucent panel listing the
current weather, rainbow settings, click mode, time and storm status.
"""

from typing import Any, Dict, List, Tuple, Union

import pygame

from scene.constants import (
    HUD_ACTIVE_COLOR,
    HUD_LINE_HEIGHT,
    HUD_PANEL_ALPHA,
    HUD_PANEL_COLOR,
    HUD_PANEL_WIDTH,
    HUD_TEXT_COLOR,
)
from scene.state import ClickMode
from scene.time_of_day import format_clock, get_time_string

Line = Union[str, Tuple[str, Tuple[int, int, int]]]


def debug_lines(snapshot: Dict[str, Any]) -> List[Line]:
    """Format a SceneState.debug_snapshot() for display."""
    lightning = snapshot["lightning"]
    thunder = snapshot["thunder"]
    hour = snapshot["time_of_day"]
    return [
        f"Weather: {snapshot['weather']}",
        f"Rainbow Intensity: {snapshot['rainbow_intensity']:.2f}",
        f"Rainbow Position: {snapshot['rainbow_position']:.2f}",
        f"Hilliness: {snapshot['hilliness']:.1f}",
        f"Wind: {snapshot['wind_speed']:.1f}",
        f"Zoom: {snapshot['zoom']:.2f}",
        f"Click Mode: {ClickMode(snapshot['click_mode']).label}",
        f"Time: {format_clock(hour)} ({get_time_string(hour)})",
        f"Raindrops: {snapshot['raindrops']}",
        f"Leaves: {snapshot['leaves']}",
        ("Lightning: on", HUD_ACTIVE_COLOR) if lightning else "Lightning: off",
        ("Thunder: rumbling", HUD_ACTIVE_COLOR) if thunder else "Thunder: quiet",
    ]


class UIRenderer:
    """Renders the debug readout on top of the scene.

    Attributes:
        screen: Pygame surface to render to
        font: Font for the readout text
    """

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font

    def draw_debug_panel(self, snapshot: Dict[str, Any]) -> None:
        """Draw the readout panel in the top-left corner.

        Args:
            snapshot: Output of SceneState.debug_snapshot()
        """
        lines = debug_lines(snapshot)

        panel = pygame.Surface((HUD_PANEL_WIDTH, 10 + HUD_LINE_HEIGHT * len(lines)))
        panel.set_alpha(HUD_PANEL_ALPHA)
        panel.fill(HUD_PANEL_COLOR)
        self.screen.blit(panel, (10, 10))

        y_offset = 15
        for line in lines:
            if isinstance(line, tuple):
                text, color = line
            else:
                text, color = line, HUD_TEXT_COLOR
            self.screen.blit(self.font.render(text, True, color), (20, y_offset))
            y_offset += HUD_LINE_HEIGHT
