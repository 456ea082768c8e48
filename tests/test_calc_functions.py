import math

import pytest

from stats_api.calc.calc_functions import (
	EmptyDataError,
	frequency_counter,
	mean,
	median,
	mode,
)


def test_mean() -> None:
	assert mean([]) == 0
	assert mean([2, 4, 6]) == 4
	assert mean([1, 2]) == 1.5
	assert mean([-1, 1]) == 0


def test_median_odd_and_even() -> None:
	assert median([1, 2, 3]) == 2
	assert median([1, 2, 3, 4]) == 2.5
	assert median([5, 1, 3]) == 3
	assert median([7]) == 7


def test_median_leaves_input_untouched() -> None:
	nums = [3.0, 1.0, 2.0]
	median(nums)
	assert nums == [3.0, 1.0, 2.0]


def test_mode() -> None:
	assert mode([1, 2, 2, 3]) == 2
	assert mode([4]) == 4
	assert mode([-1.5, -1.5, 2]) == -1.5


def test_mode_tie_goes_to_first_occurrence() -> None:
	assert mode([1, 1, 2, 2]) == 1
	assert mode([3, 1, 1, 3]) == 3
	assert mode([2, 1]) == 2


def test_frequency_counter_keeps_first_occurrence_order() -> None:
	counter = frequency_counter([3, 1, 3, 2, 1, 3])
	assert list(counter.items()) == [(3, 3), (1, 2), (2, 1)]


@pytest.mark.parametrize("func", [median, mode])
def test_empty_input_raises(func) -> None:
	with pytest.raises(EmptyDataError):
		func([])


def test_mean_of_huge_values_stays_finite() -> None:
	assert mean([1e308, 1e308]) == 1e308
	assert mean([1e308, 1e308, -1e308]) == pytest.approx(1e308 / 3)
	assert math.isfinite(mean([1.7e308] * 5))


def test_median_of_huge_values_stays_finite() -> None:
	assert median([1e308, 1e308]) == 1e308
	assert median([1.5e308, 1.7e308]) == pytest.approx(1.6e308)
	assert median([-1.7e308, -1.7e308]) == -1.7e308
