from typing import Callable, Sequence

from stats_api.calc import calc_functions as functions
from stats_api.calc.calc_errors import missing_parameter
from stats_api.calc.calc_models import AppError, Operation, StatResult
from stats_api.calc.number_parser import parse_numbers

OPERATIONS: dict[Operation, Callable[[Sequence[float]], float]] = {
    "mean": functions.mean,
    "median": functions.median,
    "mode": functions.mode,
}


def handle(operation: Operation, raw: str | None) -> StatResult | AppError:
    """Run one statistic over the raw ``nums`` query value.

    ``raw`` is ``None`` only when the parameter was not sent at all; an empty
    string goes through the parser like any other value, so the statistic is
    never called with an empty sequence.
    """
    if raw is None:
        return missing_parameter()

    nums = parse_numbers(raw.split(","))
    if isinstance(nums, AppError):
        return nums

    return StatResult(operation=operation, result=OPERATIONS[operation](nums))


def handle_mean(raw: str | None) -> StatResult | AppError:
    return handle("mean", raw)


def handle_median(raw: str | None) -> StatResult | AppError:
    return handle("median", raw)


def handle_mode(raw: str | None) -> StatResult | AppError:
    return handle("mode", raw)
