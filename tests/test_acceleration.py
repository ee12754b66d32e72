import pytest

from namiska.acceleration import distance
from namiska.config import Tuning


@pytest.mark.parametrize("elapsed_ms, expected", [
    (0, 5),
    (1000, 55),
    (3000, 150),
])
def test_distance_scenarios(tuning, elapsed_ms, expected):
    assert distance(elapsed_ms, tuning) == expected


def test_distance_starts_at_base(tuning):
    assert distance(0, tuning) == tuning.base_distance


def test_distance_is_monotonic_and_capped(tuning):
    previous = distance(0, tuning)
    for elapsed_ms in range(0, 10000, 7):
        current = distance(elapsed_ms, tuning)
        assert current >= previous
        assert current <= tuning.max_distance
        previous = current


def test_distance_truncates_fractional_step():
    tuning = Tuning(base_distance=1, acceleration_factor=0.3, max_distance=100)
    # 0.3 * 9 = 2.7 -> 2
    assert distance(9, tuning) == 3


def test_distance_cap_below_base():
    tuning = Tuning(base_distance=20, acceleration_factor=0.05, max_distance=10)
    assert distance(0, tuning) == 10


@pytest.mark.parametrize("factor", [1e308, float('inf')])
def test_huge_factor_saturates_at_cap(factor):
    tuning = Tuning(acceleration_factor=factor)
    assert distance(1, tuning) == tuning.max_distance
    assert distance(3000, tuning) == tuning.max_distance


def test_infinite_factor_at_zero_elapsed_is_base():
    # inf * 0 is NaN; no growth yet
    tuning = Tuning(acceleration_factor=float('inf'))
    assert distance(0, tuning) == tuning.base_distance


def test_negative_infinite_factor_does_not_raise():
    tuning = Tuning(acceleration_factor=float('-inf'))
    assert distance(100, tuning) < 0
