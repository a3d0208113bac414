"""Rainbow scene exception hierarchy.

Nearly every input to the scene is clamped or ignored, so these only cover
programming errors and bad startup configuration.
"""


class SceneError(Exception):
    """Root of all scene exceptions."""


class ColorParseError(SceneError, ValueError):
    """A colour string is not a ``#RRGGBB`` hex value."""


class InvalidWeatherError(SceneError, ValueError):
    """A weather name does not match any known weather."""


class ConfigurationError(SceneError):
    """Invalid or missing configuration."""
