"""Scene state: parameters, storm effects and entity collections.

SceneState is the single mutable record of the scene. The input controller
changes parameters through its setters and the entity systems advance the
collections in place; renderers only read it.

Invariants maintained by the setters:
- time_of_day is always in [0, 24)
- rainbow intensity/position and hilliness are in [0, 1]
- zoom is in [0.5, 2]
"""

import logging
import math
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from scene.constants import (
    CLOUD_Y_RANGE,
    DEFAULT_HILLINESS,
    DEFAULT_RAINBOW_INTENSITY,
    DEFAULT_RAINBOW_POSITION,
    DEFAULT_TIME_OF_DAY,
    DEFAULT_WIND_SPEED,
    GROUND_HEIGHT_FRACTION,
    INITIAL_BIRD_COUNT,
    INITIAL_BIRD_MAX_HEIGHT_FRACTION,
    INITIAL_CLOUD_COUNT,
    MAX_WIND_SPEED,
    MAX_ZOOM,
    MIN_WIND_SPEED,
    MIN_ZOOM,
    STORM_CLOUD_COUNT,
    STORM_CLOUD_MIN_SIZE,
    STORM_CLOUD_SIZE_RANGE,
    STORM_LEAF_COUNT,
    WEATHER_RAINDROP_COUNT,
)
from scene.entities import (
    Bird,
    Cloud,
    Leaf,
    Raindrop,
    Star,
    TreeMarker,
    spawn_bird,
    spawn_cloud,
    spawn_falling_raindrop,
    spawn_leaf,
    spawn_raindrop,
    spawn_star,
)
from scene.exceptions import InvalidWeatherError
from scene.math_utils import Vector2, clamp
from scene.time_of_day import is_daytime, wrap_hour
from scene.util.rng import make_rng

logger = logging.getLogger(__name__)


class Weather(Enum):
    """Weather presets selectable from the UI."""

    SUNNY = "sunny"
    RAINY = "rainy"
    CLOUDY = "cloudy"
    STORMY = "stormy"

    @property
    def has_rain(self) -> bool:
        return self in (Weather.RAINY, Weather.STORMY)

    @classmethod
    def coerce(cls, value: Union["Weather", str]) -> "Weather":
        """Accept a Weather or its (case-insensitive) name.

        Raises:
            InvalidWeatherError: If the value names no weather
        """
        if isinstance(value, Weather):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidWeatherError(
            f"Unknown weather {value!r}; expected one of {[w.value for w in cls]}"
        )


class Layer(Enum):
    """Drawable layers, declared in draw order."""

    SKY = "sky"
    STARS = "stars"
    SUN = "sun"
    MOON = "moon"
    CLOUDS = "clouds"
    RAIN = "rain"
    LEAVES = "leaves"
    HILLS = "hills"
    RAINBOW = "rainbow"
    TREES = "trees"
    BIRDS = "birds"

    @classmethod
    def from_name(cls, name: Union["Layer", str]) -> Optional["Layer"]:
        """Look a layer up by value or member name; None when unknown."""
        if isinstance(name, Layer):
            return name
        if not isinstance(name, str):
            return None
        key = name.strip().lower()
        for layer in cls:
            if layer.value == key:
                return layer
        return None


# Rainbow sits behind the trees but in front of the hills.
LAYER_ORDER = tuple(Layer)


class ClickMode(Enum):
    """What a click on empty sky places."""

    BIRD = "bird"
    TREE = "tree"
    STAR = "star"
    RAIN = "rain"
    CLOUD = "cloud"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Mode"


CLICK_MODE_CYCLE = tuple(ClickMode)


@dataclass
class SceneConfig:
    """Scalar scene parameters controlled from the UI."""

    time_of_day: float = DEFAULT_TIME_OF_DAY
    weather: Weather = Weather.SUNNY
    rainbow_intensity: float = DEFAULT_RAINBOW_INTENSITY
    rainbow_vertical_position: float = DEFAULT_RAINBOW_POSITION
    hilliness: float = DEFAULT_HILLINESS
    wind_speed: float = DEFAULT_WIND_SPEED
    zoom: float = 1.0
    visibility: Dict[Layer, bool] = field(
        default_factory=lambda: {layer: True for layer in Layer}
    )


@dataclass
class Lightning:
    active: bool = False
    intensity: float = 0.0
    remaining_frames: int = 0


@dataclass
class Thunder:
    remaining_frames: int = 0
    volume: float = 0.0

    @property
    def active(self) -> bool:
        return self.remaining_frames > 0


@dataclass
class StormEffect:
    """Transient lightning flash and thunder rumble."""

    lightning: Lightning = field(default_factory=Lightning)
    thunder: Thunder = field(default_factory=Thunder)


class SceneState:
    """All mutable scene state.

    Attributes:
        config: Scalar parameters (time, weather, intensities, visibility)
        storm: Lightning and thunder state
        width: Surface width in pixels
        height: Surface height in pixels
        click_mode: Current click-to-place mode
        birds, clouds, raindrops, leaves, stars, trees: Entity collections,
            kept in insertion order
        frame: Frames advanced so far
        elapsed: Seconds advanced so far (drives twinkle and shimmer)
        rng: The scene RNG passed to every spawn
        storm_cloud_sizes: Fixed sizes of the dense storm cover
    """

    def __init__(
        self,
        width: int,
        height: int,
        rng: Optional[random.Random] = None,
        config: Optional[SceneConfig] = None,
    ) -> None:
        self.config: SceneConfig = config if config is not None else SceneConfig()
        self.storm: StormEffect = StormEffect()
        self.width: int = int(width)
        self.height: int = int(height)
        self.click_mode: ClickMode = ClickMode.BIRD
        self.rng: random.Random = rng if rng is not None else make_rng()

        self.birds: List[Bird] = []
        self.clouds: List[Cloud] = []
        self.raindrops: List[Raindrop] = []
        self.leaves: List[Leaf] = []
        self.stars: List[Star] = []
        self.trees: List[TreeMarker] = []

        self.frame: int = 0
        self.elapsed: float = 0.0
        self.storm_cloud_sizes: List[float] = [
            STORM_CLOUD_MIN_SIZE + self.rng.random() * STORM_CLOUD_SIZE_RANGE
            for _ in range(STORM_CLOUD_COUNT)
        ]

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "SceneState":
        """Build a scene with its starting clouds and birds."""
        state = cls(width, height, rng=rng if rng is not None else make_rng(seed))
        state.populate_initial()
        return state

    def populate_initial(self) -> None:
        for _ in range(INITIAL_CLOUD_COUNT):
            self.add_cloud(self.rng.random() * self.width, self.rng.uniform(*CLOUD_Y_RANGE))
        for _ in range(INITIAL_BIRD_COUNT):
            self.add_bird(
                self.rng.random() * self.width,
                self.rng.random() * self.height * INITIAL_BIRD_MAX_HEIGHT_FRACTION,
            )

    # ------------------------------------------------------------------
    # Parameter setters
    # ------------------------------------------------------------------

    # Non-finite values (NaN, inf) leave the parameter unchanged.

    def set_time_of_day(self, hour: float) -> None:
        if not math.isfinite(hour):
            return
        self.config.time_of_day = wrap_hour(float(hour))

    def set_rainbow_intensity(self, value: float) -> None:
        if math.isfinite(value):
            self.config.rainbow_intensity = clamp(float(value), 0.0, 1.0)

    def set_rainbow_position(self, value: float) -> None:
        if math.isfinite(value):
            self.config.rainbow_vertical_position = clamp(float(value), 0.0, 1.0)

    def set_hilliness(self, value: float) -> None:
        if math.isfinite(value):
            self.config.hilliness = clamp(float(value), 0.0, 1.0)

    def set_wind_speed(self, value: float) -> None:
        if math.isfinite(value):
            self.config.wind_speed = clamp(float(value), MIN_WIND_SPEED, MAX_WIND_SPEED)

    def set_zoom(self, value: float) -> None:
        if math.isfinite(value):
            self.config.zoom = clamp(float(value), MIN_ZOOM, MAX_ZOOM)

    def set_layer_visible(self, layer: Layer, visible: bool) -> None:
        self.config.visibility[layer] = bool(visible)

    def is_visible(self, layer: Layer) -> bool:
        return self.config.visibility.get(layer, True)

    def set_weather(self, weather: Union[Weather, str]) -> Weather:
        """Switch weather and rebuild the weather-driven collections.

        Raindrops and leaves are always cleared. Rainy and stormy weather
        start a fresh shower above the surface; stormy weather also scatters
        leaves over the lower half.

        Returns:
            The weather now in effect

        Raises:
            InvalidWeatherError: If ``weather`` names no known weather
        """
        new_weather = Weather.coerce(weather)
        self.config.weather = new_weather
        self.raindrops = []
        self.leaves = []

        if new_weather.has_rain:
            self.raindrops.extend(
                spawn_falling_raindrop(self.width, self.height, self.rng)
                for _ in range(WEATHER_RAINDROP_COUNT)
            )
        if new_weather is Weather.STORMY:
            self.leaves.extend(
                spawn_leaf(self.width, self.height, self.rng) for _ in range(STORM_LEAF_COUNT)
            )

        logger.info(
            "Weather changed to %s (%d raindrops, %d leaves)",
            new_weather.value,
            len(self.raindrops),
            len(self.leaves),
        )
        return new_weather

    def resize(self, width: int, height: int) -> None:
        """Match the surface size after a window resize."""
        self.width = max(1, int(width))
        self.height = max(1, int(height))

    # ------------------------------------------------------------------
    # Entity helpers
    # ------------------------------------------------------------------

    def add_bird(self, x: float, y: float) -> Bird:
        bird = spawn_bird(x, y, self.rng)
        self.birds.append(bird)
        return bird

    def add_tree(self, x: float, y: float = 0.0) -> TreeMarker:
        """Plant a tree at x on the ground line; the clicked y is ignored."""
        tree = TreeMarker(Vector2(x, self.height * GROUND_HEIGHT_FRACTION))
        self.trees.append(tree)
        return tree

    def add_star(self, x: float, y: float) -> Star:
        star = spawn_star(x, y, self.rng)
        self.stars.append(star)
        return star

    def add_raindrop(self, x: float, y: float) -> Raindrop:
        drop = spawn_raindrop(x, y, self.rng)
        self.raindrops.append(drop)
        return drop

    def add_cloud(self, x: float, y: float) -> Cloud:
        cloud = spawn_cloud(x, y, self.rng)
        self.clouds.append(cloud)
        return cloud

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_daytime(self) -> bool:
        return is_daytime(self.config.time_of_day)

    def debug_snapshot(self) -> Dict[str, Any]:
        """Fields shown by the debug readout, polled once per frame."""
        return {
            "weather": self.config.weather.value,
            "rainbow_intensity": self.config.rainbow_intensity,
            "rainbow_position": self.config.rainbow_vertical_position,
            "hilliness": self.config.hilliness,
            "wind_speed": self.config.wind_speed,
            "zoom": self.config.zoom,
            "click_mode": self.click_mode.value,
            "time_of_day": self.config.time_of_day,
            "raindrops": len(self.raindrops),
            "leaves": len(self.leaves),
            "birds": len(self.birds),
            "clouds": len(self.clouds),
            "lightning": self.storm.lightning.active,
            "thunder": self.storm.thunder.active,
        }
