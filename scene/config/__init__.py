"""Configuration package for the rainbow scene.

Constants are grouped by concern (display, weather, entities, palette) and
re-exported through scene/constants.py so callers can import them from one
place.
"""
