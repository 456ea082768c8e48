from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from stats_api.api.errors import render_error
from stats_api.api.stats.stats_contracts import ErrorResponse, StatResponse
from stats_api.calc import calc_handlers as handlers
from stats_api.calc.calc_models import AppError, StatResult

stats_router = APIRouter()

NumsQuery = Annotated[
    str | None,
    Query(description="Comma-separated list of numbers, e.g. 1,2,3"),
]

ERROR_RESPONSES = {
    HTTPStatus.BAD_REQUEST: {
        "model": ErrorResponse,
        "description": "nums is missing or holds a value that is not a number",
    },
}


def _respond(outcome: StatResult | AppError, request: Request) -> StatResponse | JSONResponse:
    if isinstance(outcome, AppError):
        return render_error(outcome, request.url.path)
    return StatResponse.from_result(outcome)


@stats_router.get("/mean", response_model=StatResponse, responses=ERROR_RESPONSES)
async def get_mean(request: Request, nums: NumsQuery = None) -> StatResponse | JSONResponse:
    return _respond(handlers.handle_mean(nums), request)


@stats_router.get("/median", response_model=StatResponse, responses=ERROR_RESPONSES)
async def get_median(request: Request, nums: NumsQuery = None) -> StatResponse | JSONResponse:
    return _respond(handlers.handle_median(nums), request)


@stats_router.get("/mode", response_model=StatResponse, responses=ERROR_RESPONSES)
async def get_mode(request: Request, nums: NumsQuery = None) -> StatResponse | JSONResponse:
    return _respond(handlers.handle_mode(nums), request)
