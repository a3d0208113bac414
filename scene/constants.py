"""Re-export of all scene configuration constants.

Prefer importing from here rather than from the individual
scene/config modules.
"""

from scene.config.display import *  # noqa: F401,F403
from scene.config.entities import *  # noqa: F401,F403
from scene.config.palette import *  # noqa: F401,F403
from scene.config.weather import *  # noqa: F401,F403
