"""Display and UI configuration constants."""

# Default window size in pixels (the window is resizable)
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

# The frame rate for the game loop, in frames per second
FRAME_RATE = 60

# Zoom limits and how much one unit of scroll delta changes the zoom
MIN_ZOOM = 0.5
MAX_ZOOM = 2.0
ZOOM_SCROLL_FACTOR = 0.001

# pygame reports wheel notches; one notch is treated like a 100px browser scroll
WHEEL_NOTCH_DELTA = 100

# Debug HUD panel
HUD_PANEL_WIDTH = 260
HUD_PANEL_ALPHA = 190
HUD_PANEL_COLOR = (20, 20, 40)
HUD_TEXT_COLOR = (220, 220, 255)
HUD_ACTIVE_COLOR = (255, 230, 120)
HUD_LINE_HEIGHT = 20

# UI Display Constants
SEPARATOR_WIDTH = 60  # Width of separator lines in console output
