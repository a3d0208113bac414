"""Time-of-day helpers.

The scene clock is a continuous hour in [0, 24). Daytime is the closed
interval [6, 18]; the sun travels its arc during the day and the moon
during the night. Night progress restarts at midnight, so the moon sets at
midnight and rises again straight after (two short arcs per night).
"""

import math

from scene.constants import DAY_END_HOUR, DAY_START_HOUR, HOURS_PER_DAY

NIGHT_HALF_HOURS = (HOURS_PER_DAY - (DAY_END_HOUR - DAY_START_HOUR)) / 2.0


def wrap_hour(hour: float) -> float:
    """Wrap any hour into [0, 24)."""
    wrapped = math.fmod(hour, HOURS_PER_DAY)
    if wrapped < 0:
        wrapped += HOURS_PER_DAY
    # fmod of a tiny negative can round back up to exactly 24
    return 0.0 if wrapped >= HOURS_PER_DAY else wrapped


def is_daytime(hour: float) -> bool:
    """True between dawn and dusk, both ends included."""
    return DAY_START_HOUR <= hour <= DAY_END_HOUR


def day_progress(hour: float) -> float:
    """0.0 at dawn to 1.0 at dusk."""
    return (hour - DAY_START_HOUR) / (DAY_END_HOUR - DAY_START_HOUR)


def night_progress(hour: float) -> float:
    """0.0 to 1.0 over either half of the night.

    Before dawn the progress runs from midnight (0.0) to dawn (1.0); after
    dusk it runs from dusk (0.0) to midnight (1.0).
    """
    if hour < DAY_START_HOUR:
        return hour / NIGHT_HALF_HOURS
    return (hour - DAY_END_HOUR) / NIGHT_HALF_HOURS


def format_clock(hour: float) -> str:
    """Clock-style label, e.g. 6.5 -> '6:30'."""
    minutes = int((hour % 1) * 60)
    return f"{int(hour)}:{minutes:02d}"


def get_time_string(hour: float) -> str:
    """Get a human-readable period name: Night, Dawn, Day or Dusk."""
    if hour < 5.0 or hour > 20.0:
        return "Night"
    elif hour < 8.0:
        return "Dawn"
    elif hour <= 16.0:
        return "Day"
    else:
        return "Dusk"
