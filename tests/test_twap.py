"""Tests for the running TWAP accumulator."""

import pytest

from twap_from_file.core import TwapAccumulator


def test_new_accumulator_is_undefined(twap):
    assert twap.current_average() is None
    assert twap.total_time == 0
    assert twap.has_observation is False


def test_first_observation_never_defines_average(twap):
    assert twap.observe(100, 10.0) is True
    assert twap.current_average() is None
    assert twap.has_observation is True
    assert twap.last_time == 100
    assert twap.last_price == 10.0


def test_first_observation_without_price(twap):
    twap.observe(0, None)
    assert twap.current_average() is None
    assert twap.has_observation is True

    twap.observe(10, 5.0)
    assert twap.current_average() is None
    assert twap.total_time == 0

    twap.observe(20, 5.0)
    assert twap.current_average() == 5.0
    assert twap.total_time == 10


def test_weighted_average_of_two_intervals(twap):
    twap.observe(0, 10.0)
    twap.observe(10, 20.0)
    assert twap.current_average() == 10.0
    assert twap.total_time == 10

    twap.observe(30, 30.0)
    assert twap.current_average() == pytest.approx((10 * 10 + 20 * 20) / 30)
    assert twap.total_time == 30


def test_no_price_interval_has_no_weight(twap):
    twap.observe(0, 10.0)
    twap.observe(10, None)
    assert twap.current_average() == 10.0

    twap.observe(20, 20.0)
    assert twap.current_average() == 10.0
    assert twap.total_time == 10

    twap.observe(30, 20.0)
    assert twap.current_average() == pytest.approx(15.0)
    assert twap.total_time == 20


def test_no_price_is_not_zero(twap):
    twap.observe(0, 10.0)
    twap.observe(10, None)
    twap.observe(1000, None)
    assert twap.current_average() == 10.0


def test_backwards_time_is_fully_discarded(twap):
    twap.observe(0, 10.0)
    twap.observe(5, 20.0)
    average = twap.current_average()
    total_time = twap.total_time

    assert twap.observe(3, 30.0) is False

    assert twap.current_average() == average
    assert twap.total_time == total_time
    assert twap.last_time == 5
    assert twap.last_price == 20.0

    # 20.0 held from t=5, the discarded 30.0 never became the reference
    twap.observe(10, 30.0)
    assert twap.current_average() == pytest.approx((10 * 5 + 20 * 5) / 10)


def test_backwards_time_after_no_price_is_discarded(twap):
    twap.observe(0, 10.0)
    twap.observe(10, None)
    assert twap.observe(5, 50.0) is False
    assert twap.last_price is None
    assert twap.last_time == 10

    twap.observe(20, 50.0)
    assert twap.current_average() == 10.0
    assert twap.total_time == 10


def test_equal_timestamps_are_accepted(twap):
    twap.observe(0, 10.0)
    assert twap.observe(0, 12.0) is True
    # zero-length interval at a defined price starts the average
    assert twap.current_average() == 10.0
    assert twap.total_time == 0
    assert twap.last_price == 12.0

    twap.observe(10, 12.0)
    assert twap.current_average() == 12.0
    assert twap.total_time == 10

    twap.observe(10, 14.0)
    assert twap.current_average() == 12.0
    assert twap.total_time == 10
    assert twap.last_price == 14.0


def test_constant_price_stays_exact(twap):
    for t in range(0, 10_000, 7):
        twap.observe(t, 42.25)
    assert twap.current_average() == pytest.approx(42.25)


def test_large_timestamps_do_not_overflow(twap):
    twap.observe(0, 1e300)
    twap.observe(10**15, 1e300)
    twap.observe(2 * 10**15, 1e300)
    assert twap.current_average() == pytest.approx(1e300)


@pytest.mark.parametrize("observations, expected", [
    ([(0, 1.0), (1, 3.0), (2, None)], 2.0),
    ([(0, 1.0), (3, 5.0), (4, 5.0)], 2.0),
    ([(0, None), (5, 2.0), (10, None), (20, 8.0), (25, 1.0)], 5.0),
])
def test_matches_brute_force(observations, expected):
    twap = TwapAccumulator()
    for time, price in observations:
        twap.observe(time, price)
    assert twap.current_average() == pytest.approx(expected)
