from __future__ import annotations

import pytest

from pacekit import distance, duration
from pacekit.units import DISTANCE_FACTORS, TIME_FACTORS, UNIT_SETS, DistanceUnit, TimeUnit


def test_factor_tables() -> None:
    assert dict(DISTANCE_FACTORS) == {"m": 0.001, "km": 1.0, "mi": 1.60934}
    assert dict(TIME_FACTORS) == {"ms": 0.001, "s": 1.0, "min": 60.0, "h": 3600.0}


def test_factor_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DISTANCE_FACTORS["yd"] = 0.0009144  # type: ignore[index]
    with pytest.raises(TypeError):
        TIME_FACTORS["day"] = 86400.0  # type: ignore[index]


def test_unit_sets_match_enums() -> None:
    assert UNIT_SETS["distance"] == {"m", "km", "mi"}
    assert UNIT_SETS["time"] == {"ms", "s", "min", "h"}
    assert DistanceUnit.MI == "mi"
    assert TimeUnit.MIN == "min"


def test_distance_convert() -> None:
    assert distance.convert(1500, "m", "km") == pytest.approx(1.5)
    assert distance.convert(1, "mi", "m") == pytest.approx(1609.34)
    assert distance.convert(10, "km", "mi") == pytest.approx(6.21373, rel=1e-5)
    assert distance.convert(7.0, "km", "km") == 7.0


def test_duration_convert() -> None:
    assert duration.convert(1500, "min", "s") == pytest.approx(90000)
    assert duration.convert(2, "h", "min") == pytest.approx(120)
    assert duration.convert(2500, "ms", "s") == pytest.approx(2.5)


@pytest.mark.parametrize("module", [distance, duration])
def test_convert_round_trip(module) -> None:
    units = sorted(DISTANCE_FACTORS if module is distance else TIME_FACTORS)
    for a in units:
        for b in units:
            assert module.convert(module.convert(42.195, a, b), b, a) == pytest.approx(42.195)
