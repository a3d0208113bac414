"""Colours and fixed shapes used by the layer renderers."""

# Sky gradients: (top, middle) endpoints interpolated by progress, plus a fixed bottom
DAY_SKY_TOP = ("#87CEEB", "#FFB347")
DAY_SKY_MIDDLE = ("#98D8E8", "#FFD700")
DAY_SKY_BOTTOM = "#B0E0E6"
NIGHT_SKY_TOP = ("#191970", "#000033")
NIGHT_SKY_MIDDLE = ("#4169E1", "#000080")
NIGHT_SKY_BOTTOM = "#000033"
STORM_SKY_STOPS = (
    (0.0, "#2F4F4F"),
    (0.3, "#4A4A4A"),
    (0.7, "#696969"),
    (1.0, "#808080"),
)

# Sun and moon
SUN_GLOW_COLOR = (255, 255, 0)
SUN_GLOW_RADIUS = 80
SUN_CORE_COLOR = "#FFD700"
SUN_CORE_RADIUS = 30
MOON_GLOW_COLOR = (255, 255, 255)
MOON_GLOW_RADIUS = 60
MOON_CORE_COLOR = "#F0F8FF"
MOON_CORE_RADIUS = 20
GLOW_STOPS = (0.8, 0.4, 0.0)  # sun alpha at centre, half radius, edge
MOON_GLOW_STOPS = (0.6, 0.3, 0.0)

# The celestial arc: horizontal span and peak height as fractions of the surface
ARC_HORIZONTAL_SPAN = 0.8
ARC_HORIZON_FRACTION = 0.8
ARC_PEAK_FRACTION = 0.5

# Stars
STAR_FIELD_COUNT = 100
STAR_FIELD_HEIGHT_FRACTION = 0.6
STAR_COLOR = (255, 255, 255)
STAR_ALPHA = 0.8

# Clouds
CLOUD_COLOR = (255, 255, 255)
STORM_CLOUD_COLOR = (100, 100, 100)
STORM_CLOUD_ALPHA = 0.8
# (dx, dy, radius) for each lobe, as fractions of the cloud size
CLOUD_LOBES = (
    (0.0, 0.0, 0.3),
    (0.3, 0.0, 0.4),
    (0.6, 0.0, 0.3),
    (0.2, -0.2, 0.3),
    (0.5, -0.2, 0.3),
)

# Rain
RAIN_DAY_COLOR = (174, 194, 224)
RAIN_NIGHT_COLOR = (100, 120, 150)
RAIN_ALPHA = 0.9
RAIN_LINE_WIDTH = 3

# Leaves
LEAF_COLOR = (139, 69, 19)
LEAF_ALPHA = 0.8
LEAF_ASPECT = 0.3

# Hills: (base height fraction, colour)
HILL_LAYERS = (
    (0.70, "#2D5016"),
    (0.75, "#3A5F23"),
    (0.80, "#4A6B2A"),
)
HILL_STEP = 20
HILL_SWAY_AMPLITUDE = 30
HILL_RISE_AMPLITUDE = 20

# Rainbow
RAINBOW_COLORS = (
    "#FF0000",
    "#FF7F00",
    "#FFFF00",
    "#00FF00",
    "#0000FF",
    "#4B0082",
    "#9400D3",
)
RAINBOW_BAND_WIDTH = 20
RAINBOW_RADIUS_FRACTION = 0.5

# Trees: base layout as (x, height fraction)
TREE_LAYOUT = (
    (100, 0.68),
    (200, 0.72),
    (350, 0.70),
    (500, 0.75),
    (650, 0.73),
    (800, 0.71),
    (950, 0.74),
    (1100, 0.69),
    (1250, 0.72),
    (1400, 0.70),
    (1550, 0.73),
    (1700, 0.71),
    (1850, 0.75),
    (2000, 0.70),
    (2150, 0.72),
)
TREE_CULL_MARGIN = 100
TRUNK_COLOR = "#8B4513"
TRUNK_WIDTH = 8
TRUNK_HEIGHT = 50
FOLIAGE_COLOR = "#228B22"
# (dx, dy, radius) for each foliage circle relative to the trunk top
FOLIAGE_CIRCLES = (
    (0, -15, 30),
    (-15, -25, 25),
    (15, -25, 25),
    (0, -35, 20),
)

# Birds
BIRD_BODY_COLOR = (47, 47, 47)
BIRD_OUTLINE_COLOR = (26, 26, 26)
BIRD_BEAK_COLOR = (255, 165, 0)
BIRD_WING_LIFT = 4

# Background behind a zoomed-out scene
CLEAR_COLOR = (0, 0, 0)
