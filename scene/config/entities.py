"""Entity spawn ranges and motion bounds.

Ranges are written as (low, high) and sampled with rng.uniform, so the
upper value is effectively exclusive.
"""

import math

# Initial population
INITIAL_CLOUD_COUNT = 8
INITIAL_BIRD_COUNT = 5
INITIAL_BIRD_MAX_HEIGHT_FRACTION = 0.6

# Birds
BIRD_VX_RANGE = (-2.0, 2.0)
BIRD_VY_RANGE = (-1.0, 1.0)
BIRD_WING_SPEED_RANGE = (0.2, 0.5)
BIRD_MIN_Y = 50.0
BIRD_MAX_Y_FRACTION = 0.7

# Clouds
CLOUD_Y_RANGE = (50.0, 200.0)
CLOUD_SIZE_RANGE = (50.0, 150.0)
CLOUD_SPEED_RANGE = (0.5, 1.5)
CLOUD_OPACITY_RANGE = (0.3, 0.7)

# Clicking within this box around a cloud grabs it
CLOUD_GRAB_HALF_WIDTH = 100.0
CLOUD_GRAB_HALF_HEIGHT = 50.0

# Raindrops
RAINDROP_SPEED_RANGE = (3.0, 8.0)
RAINDROP_LENGTH_RANGE = (10.0, 30.0)

# Leaves (spawned in the lower half of the surface)
LEAF_VX_RANGE = (-2.0, 2.0)
LEAF_VY_RANGE = (-1.0, 1.0)
LEAF_ROTATION_SPEED_RANGE = (-0.05, 0.05)
LEAF_SIZE_RANGE = (5.0, 15.0)
LEAF_MIN_Y_FRACTION = 0.5

# Stars
STAR_SIZE_RANGE = (1.0, 3.0)

# Shared phase range for wing flaps, twinkles and leaf rotation
PHASE_RANGE = (0.0, 2 * math.pi)

# Trees placed by clicking sit on the ground line
GROUND_HEIGHT_FRACTION = 0.8
