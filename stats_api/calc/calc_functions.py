import math
from collections import Counter
from typing import Sequence


class EmptyDataError(ValueError):
    pass


def frequency_counter(nums: Sequence[float]) -> Counter[float]:
    # Counter keeps keys in first-occurrence order
    return Counter(nums)


def mean(nums: Sequence[float]) -> float:
    if not nums:
        return 0

    total = sum(nums)
    if math.isinf(total):
        # the sum overflowed; scale each value down first
        return sum(n / len(nums) for n in nums)
    return total / len(nums)


def median(nums: Sequence[float]) -> float:
    """Middle value of ``nums`` sorted ascending.

    Raises :class:`EmptyDataError` for an empty sequence.
    """
    if not nums:
        raise EmptyDataError("median requires at least one number")

    ordered = sorted(nums)
    middle = len(ordered) // 2

    if len(ordered) % 2 == 1:
        return ordered[middle]

    low, high = ordered[middle - 1], ordered[middle]
    total = low + high
    if math.isinf(total):
        return low / 2 + high / 2
    return total / 2


def mode(nums: Sequence[float]) -> float:
    """Most frequent value; on a tie the value seen first in ``nums`` wins.

    Raises :class:`EmptyDataError` for an empty sequence.
    """
    if not nums:
        raise EmptyDataError("mode requires at least one number")

    counter = frequency_counter(nums)

    most_frequent = nums[0]
    count = 0
    for value, occurrences in counter.items():
        if occurrences > count:
            most_frequent = value
            count = occurrences

    return most_frequent
