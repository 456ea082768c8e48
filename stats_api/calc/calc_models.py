from dataclasses import dataclass
from http import HTTPStatus
from typing import Literal

Operation = Literal["mean", "median", "mode"]


@dataclass(slots=True, frozen=True)
class StatResult:
    operation: Operation
    result: float


@dataclass(slots=True, frozen=True)
class AppError:
    message: str
    status: int = HTTPStatus.INTERNAL_SERVER_ERROR

    @property
    def status_code(self) -> int:
        # zero or unset status falls back to 500
        return int(self.status) or HTTPStatus.INTERNAL_SERVER_ERROR
