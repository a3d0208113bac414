"""Lightweight application configuration helpers."""

from dataclasses import dataclass, field
from typing import Optional

from scene.config.display import FRAME_RATE, SCREEN_HEIGHT, SCREEN_WIDTH, SEPARATOR_WIDTH
from scene.exceptions import ConfigurationError


@dataclass
class DisplayConfig:
    """Window and frame pacing configuration."""

    screen_width: int = SCREEN_WIDTH
    screen_height: int = SCREEN_HEIGHT
    separator_width: int = SEPARATOR_WIDTH
    frame_rate: int = FRAME_RATE


@dataclass
class AppConfig:
    """Configuration toggles for how the scene is run.

    Attributes:
        headless: Render to an offscreen surface instead of opening a window.
        max_frames: Frames to run in headless mode.
        seed: Optional seed for the scene RNG.
        screenshot: Optional PNG path written after a headless run.
        weather: Optional starting weather name.
        time_of_day: Optional starting hour.
        show_debug: Whether the debug HUD starts visible.
    """

    headless: bool = False
    max_frames: int = 600
    seed: Optional[int] = None
    screenshot: Optional[str] = None
    weather: Optional[str] = None
    time_of_day: Optional[float] = None
    show_debug: bool = True
    display: DisplayConfig = field(default_factory=DisplayConfig)

    def validate(self) -> "AppConfig":
        """Check the values that would otherwise fail deep inside pygame.

        Raises:
            ConfigurationError: If a size, frame rate or frame count is not positive
        """
        if self.display.screen_width <= 0 or self.display.screen_height <= 0:
            raise ConfigurationError(
                f"Screen size must be positive, got "
                f"{self.display.screen_width}x{self.display.screen_height}"
            )
        if self.display.frame_rate <= 0:
            raise ConfigurationError(f"Frame rate must be positive, got {self.display.frame_rate}")
        if self.headless and self.max_frames <= 0:
            raise ConfigurationError(f"max_frames must be positive, got {self.max_frames}")
        return self
