from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    code: str
    message: str
    detail: str | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail


class PaceError(Exception):
    code = "pace_error"

    def __init__(self, message: str, param: str | None = None, detail: str | None = None) -> None:
        self.message = message
        self.param = param
        self.detail = detail
        super().__init__(message)

    def to_payload(self) -> dict[str, Any]:
        return ErrorResponse(
            error=ErrorDetail(code=self.code, message=self.message, detail=self.detail)
        ).model_dump()


class RequiredParameterMissing(PaceError, TypeError):
    code = "required_parameter_missing"

    def __init__(self, param: str) -> None:
        super().__init__(f"{param} is required", param=param)


class InvalidType(PaceError, TypeError):
    code = "invalid_type"

    def __init__(self, param: str, expected: str, actual: Any) -> None:
        super().__init__(
            f"{param} must be a {expected}",
            param=param,
            detail=f"got {type(actual).__name__}",
        )


class InvalidUnit(PaceError, ValueError):
    code = "invalid_unit"

    def __init__(self, param: str, unit: str, allowed: list[str]) -> None:
        super().__init__(
            f"{param} is not a valid unit",
            param=param,
            detail=f"{unit!r} not in {', '.join(allowed)}",
        )
