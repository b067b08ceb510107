from __future__ import annotations

import math
from typing import Any, Mapping

from pacekit import distance as distance_units
from pacekit import duration as time_units
from pacekit.log import log_event
from pacekit.models import PaceSnapshot
from pacekit.settings import get_settings
from pacekit.units import CANONICAL_DISTANCE_UNIT, CANONICAL_TIME_UNIT, DistanceUnit, TimeUnit
from pacekit.validator import check_type, check_unit, require_argument


def calc_pace(time: float, distance: float) -> float:
    # IEEE semantics for a zero distance: signed inf, or nan for 0/0.
    if distance == 0:
        if time == 0:
            return math.nan
        return math.copysign(math.inf, math.copysign(1.0, time) * math.copysign(1.0, distance))
    return time / distance


_OPTION_KEYS = {
    "distance_unit": "distance_unit",
    "distanceUnit": "distance_unit",
    "time_unit": "time_unit",
    "timeUnit": "time_unit",
}


def _check_units(distance_unit: Any, time_unit: Any) -> tuple[str, str]:
    check_type(distance_unit, "distance_unit", "string")
    check_type(time_unit, "time_unit", "string")
    check_unit(distance_unit, "distance_unit", "distance")
    check_unit(time_unit, "time_unit", "time")
    return DistanceUnit(distance_unit).value, TimeUnit(time_unit).value


class Pace:
    """
    Time per unit distance.

    Values are normalized to km and s on construction; ``format`` switches the
    stored distance, time and pace to other units in place.
    """

    def __init__(
        self,
        distance: float | None = None,
        time: float | None = None,
        *,
        distance_unit: str | None = None,
        time_unit: str | None = None,
    ) -> None:
        require_argument(distance, "distance")
        require_argument(time, "time")
        check_type(distance, "distance", "number")
        check_type(time, "time", "number")

        if distance_unit is None:
            distance_unit = get_settings().distance_unit
        if time_unit is None:
            time_unit = get_settings().time_unit
        distance_unit, time_unit = _check_units(distance_unit, time_unit)

        self.distance = distance_units.convert(distance, distance_unit, CANONICAL_DISTANCE_UNIT)
        self.distance_unit = CANONICAL_DISTANCE_UNIT
        self.time = time_units.convert(time, time_unit, CANONICAL_TIME_UNIT)
        self.time_unit = CANONICAL_TIME_UNIT
        self.pace = calc_pace(self.time, self.distance)

        log_event(
            "pace_created",
            distance=self.distance,
            time=self.time,
            pace=self.pace,
            input_units=[distance_unit, time_unit],
        )

    @classmethod
    def from_options(
        cls, distance: float | None, time: float | None, options: Mapping[str, Any] | None = None
    ) -> Pace:
        """Build from a mapping keyed by distance_unit/time_unit (or distanceUnit/timeUnit)."""
        units: dict[str, Any] = {}
        for key, value in (options or {}).items():
            try:
                name = _OPTION_KEYS[key]
            except KeyError:
                raise ValueError(f"unknown option: {key}") from None
            if name in units:
                raise ValueError(f"duplicate option: {key}")
            units[name] = value
        return cls(distance, time, **units)

    def get_pace(self) -> float:
        return self.pace

    def format(self, distance_unit: str | None = None, time_unit: str | None = None) -> Pace:
        """Convert to ``time_unit`` per ``distance_unit``. Nothing changes if either unit is rejected."""
        require_argument(distance_unit, "distance_unit")
        require_argument(time_unit, "time_unit")
        distance_unit, time_unit = _check_units(distance_unit, time_unit)

        self.distance = distance_units.convert(self.distance, self.distance_unit, distance_unit)
        self.distance_unit = distance_unit
        self.time = time_units.convert(self.time, self.time_unit, time_unit)
        self.time_unit = time_unit
        self.pace = calc_pace(self.time, self.distance)

        log_event("pace_formatted", units=[distance_unit, time_unit], pace=self.pace)
        return self

    def get_pace_clock_string(self) -> str:
        seconds = time_units.convert(self.pace, self.time_unit, CANONICAL_TIME_UNIT)
        return time_units.seconds_to_clock(seconds)

    def snapshot(self) -> PaceSnapshot:
        return PaceSnapshot(
            distance=self.distance,
            time=self.time,
            pace=self.pace,
            distance_unit=self.distance_unit,
            time_unit=self.time_unit,
            clock=self.get_pace_clock_string(),
        )

    def __repr__(self) -> str:
        return (
            f"Pace(distance={self.distance!r} {self.distance_unit}, "
            f"time={self.time!r} {self.time_unit}, "
            f"pace={self.pace!r} {self.time_unit}/{self.distance_unit})"
        )
