from http import HTTPStatus

from stats_api.calc.calc_models import AppError

MISSING_NUMS_MESSAGE = (
    "You must pass a query key of nums with a comma-separated list of numbers."
)


def missing_parameter() -> AppError:
    return AppError(MISSING_NUMS_MESSAGE, HTTPStatus.BAD_REQUEST)


def invalid_number(raw: str, index: int) -> AppError:
    return AppError(
        f"The value '{raw}' at index {index} is not a valid number.",
        HTTPStatus.BAD_REQUEST,
    )


def not_found() -> AppError:
    return AppError("Not Found", HTTPStatus.NOT_FOUND)


def internal(message: str) -> AppError:
    return AppError(message or "Internal Server Error", HTTPStatus.INTERNAL_SERVER_ERROR)
