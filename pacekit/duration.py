from __future__ import annotations

import math

from pacekit.settings import get_settings
from pacekit.units import TIME_FACTORS

SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a duration between ms, s, min and h. Units are not validated here."""
    return value * TIME_FACTORS[from_unit] / TIME_FACTORS[to_unit]


def seconds_to_clock(total_seconds: float) -> str:
    """
    Format seconds as HH:MM:SS, rounded to the nearest whole second.

    Hours keep growing past 99 (no day rollover). Negative input gets a
    leading "-"; NaN and infinity render the configured placeholder.

    Examples:
        300 -> "00:05:00"
        3599.6 -> "01:00:00"
        90000 -> "25:00:00"
    """
    if not math.isfinite(total_seconds):
        return get_settings().clock_placeholder
    rounded = math.floor(abs(total_seconds) + 0.5)
    sign = "-" if total_seconds < 0 and rounded else ""
    hours, remainder = divmod(rounded, SECONDS_PER_HOUR)
    minutes, seconds = divmod(remainder, SECONDS_PER_MINUTE)
    return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
