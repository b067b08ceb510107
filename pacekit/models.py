from __future__ import annotations

from pydantic import BaseModel

from pacekit.units import DistanceUnit, TimeUnit


class PaceSnapshot(BaseModel):
    distance: float
    time: float
    pace: float
    distance_unit: DistanceUnit
    time_unit: TimeUnit
    clock: str

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "distance": 10.0,
                    "time": 3000.0,
                    "pace": 300.0,
                    "distance_unit": "km",
                    "time_unit": "s",
                    "clock": "00:05:00",
                }
            ]
        }
    }
