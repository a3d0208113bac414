"""Weather, sky and storm configuration constants."""

# Daytime spans these hours (inclusive); everything else is night
DAY_START_HOUR = 6.0
DAY_END_HOUR = 18.0
HOURS_PER_DAY = 24.0

# Easing exponent that slows the colour ramp near the day/night boundary
NIGHT_TRANSITION_EASING = 0.7

# Default scene parameters
DEFAULT_TIME_OF_DAY = 12.0
DEFAULT_RAINBOW_INTENSITY = 0.8
DEFAULT_RAINBOW_POSITION = 0.9
DEFAULT_HILLINESS = 0.5
DEFAULT_WIND_SPEED = 3.0

# Wind slider range
MIN_WIND_SPEED = 0.0
MAX_WIND_SPEED = 10.0

# Population created by a weather change
WEATHER_RAINDROP_COUNT = 200
STORM_LEAF_COUNT = 50

# Storm effects
LIGHTNING_CHANCE = 0.02  # per frame while stormy
LIGHTNING_INTENSITY = 0.8
LIGHTNING_FRAMES = 5
LIGHTNING_DECAY = 0.1
THUNDER_VOLUME = 0.8
THUNDER_FRAMES = 30
THUNDER_DECAY = 0.02

# Wind coupling per entity kind
CLOUD_WIND_FACTOR = 0.1
LEAF_WIND_FACTOR = 0.5
LEAF_SPIN_WIND_FACTOR = 0.01

# Dense storm cover
STORM_CLOUD_COUNT = 20
STORM_CLOUD_SPACING = 200
STORM_CLOUD_MIN_SIZE = 80.0
STORM_CLOUD_SIZE_RANGE = 120.0
