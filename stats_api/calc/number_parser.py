import math
import re
from typing import Sequence

from stats_api.calc.calc_errors import invalid_number
from stats_api.calc.calc_models import AppError

# plain ASCII decimal notation with optional exponent; no nan/inf, no underscores
NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)


def parse_number(raw: str) -> float | None:
    text = raw.strip()
    if not NUMBER_RE.match(text):
        return None

    value = float(text)
    # "1e999" matches the pattern but overflows
    if math.isinf(value):
        return None

    return value


def parse_numbers(strings: Sequence[str]) -> tuple[float, ...] | AppError:
    """Convert every string to a float, or report the first one that is not a number.

    Parsing is all-or-nothing: elements after the first invalid one are not examined.
    """
    numbers: list[float] = []
    for index, raw in enumerate(strings):
        value = parse_number(raw)
        if value is None:
            return invalid_number(raw, index)
        numbers.append(value)

    return tuple(numbers)
