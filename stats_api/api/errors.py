from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from stats_api.api.stats.stats_contracts import ErrorResponse
from stats_api.calc.calc_errors import internal, not_found
from stats_api.calc.calc_models import AppError

logger = structlog.get_logger(__name__)


def render_error(
    error: AppError,
    path: str = "",
    exc: BaseException | None = None,
) -> JSONResponse:
    status = error.status_code

    if status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error("request failed", status=status, message=error.message, path=path, exc_info=exc)
    else:
        logger.warning("request rejected", status=status, message=error.message, path=path)

    return JSONResponse(
        status_code=status,
        content=ErrorResponse.from_error(error).model_dump(),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unknown paths and unsupported methods on known paths are both plain 404s
    if exc.status_code in (HTTPStatus.NOT_FOUND, HTTPStatus.METHOD_NOT_ALLOWED):
        return render_error(not_found(), request.url.path)

    return render_error(AppError(str(exc.detail), exc.status_code), request.url.path)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return render_error(internal(str(exc)), request.url.path, exc=exc)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
