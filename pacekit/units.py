from __future__ import annotations

from enum import Enum
from types import MappingProxyType


class DistanceUnit(str, Enum):
    M = "m"
    KM = "km"
    MI = "mi"


class TimeUnit(str, Enum):
    MS = "ms"
    S = "s"
    MIN = "min"
    H = "h"


CANONICAL_DISTANCE_UNIT = DistanceUnit.KM.value
CANONICAL_TIME_UNIT = TimeUnit.S.value

# Factors relative to the canonical unit (km, s).
DISTANCE_FACTORS = MappingProxyType({"m": 0.001, "km": 1.0, "mi": 1.60934})
TIME_FACTORS = MappingProxyType({"ms": 0.001, "s": 1.0, "min": 60.0, "h": 3600.0})

UNIT_SETS = MappingProxyType(
    {
        "distance": frozenset(unit.value for unit in DistanceUnit),
        "time": frozenset(unit.value for unit in TimeUnit),
    }
)
