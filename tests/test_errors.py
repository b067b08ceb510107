from __future__ import annotations

from pacekit.errors import InvalidType, InvalidUnit, PaceError, RequiredParameterMissing


def test_error_hierarchy() -> None:
    assert issubclass(RequiredParameterMissing, PaceError)
    assert issubclass(InvalidType, TypeError)
    assert issubclass(InvalidUnit, ValueError)


def test_payload_envelope() -> None:
    payload = InvalidUnit("time_unit", "day", ["h", "min", "ms", "s"]).to_payload()
    assert payload == {
        "error": {
            "code": "invalid_unit",
            "message": "time_unit is not a valid unit",
            "detail": "'day' not in h, min, ms, s",
        }
    }


def test_payload_without_detail() -> None:
    payload = RequiredParameterMissing("time").to_payload()
    assert payload["error"]["code"] == "required_parameter_missing"
    assert payload["error"]["detail"] is None
