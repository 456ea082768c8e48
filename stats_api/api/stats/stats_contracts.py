from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, field_serializer

from stats_api.calc.calc_models import AppError, StatResult


MAX_SAFE_INTEGER = 2**53 - 1


def _js_number(value: float) -> int | float:
    # 2.0 is rendered as 2, like a JavaScript number; 1e308 stays 1e+308
    if isinstance(value, float) and value.is_integer() and abs(value) <= MAX_SAFE_INTEGER:
        return int(value)
    return value


class StatResponse(BaseModel):
    operation: Literal["mean", "median", "mode"]
    result: float

    @field_serializer("result")
    def serialize_result(self, result: float) -> int | float:
        return _js_number(result)

    @staticmethod
    def from_result(stat: StatResult) -> StatResponse:
        return StatResponse(operation=stat.operation, result=stat.result)


class ErrorDetails(BaseModel):
    message: str
    status: int


class ErrorResponse(BaseModel):
    error: ErrorDetails
    message: str

    @staticmethod
    def from_error(error: AppError) -> ErrorResponse:
        return ErrorResponse(
            error=ErrorDetails(message=error.message, status=error.status_code),
            message=error.message,
        )
