from __future__ import annotations

from pacekit.units import DISTANCE_FACTORS


def convert(value: float, from_unit: str, to_unit: str) -> float:
    """Convert a distance between m, km and mi. Units are not validated here."""
    return value * DISTANCE_FACTORS[from_unit] / DISTANCE_FACTORS[to_unit]
