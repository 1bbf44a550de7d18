import pytest

from Core.Entities.cycle import Cycle
from Core.Services.time_derivation import (
    DisplayTuple,
    derive_display,
    pad_two,
    remaining_seconds,
    total_seconds_for,
)


def make_cycle(minutes):
    return Cycle(id="1", task="Write report", minutes_amount=minutes)


def test_fresh_cycle_shows_full_duration():
    display = derive_display(make_cycle(25), 0)
    assert display == DisplayTuple("2", "5", ":", "0", "0")
    assert display.text == "25:00"
    assert total_seconds_for(make_cycle(25)) == 1500


def test_partial_minute():
    display = derive_display(make_cycle(5), 30)
    assert remaining_seconds(make_cycle(5), 30) == 270
    assert display.text == "04:30"
    assert display.minutes == "04"
    assert display.seconds == "30"


def test_exactly_finished():
    assert derive_display(make_cycle(5), 300).text == "00:00"


def test_overrun_is_clamped_at_zero():
    assert remaining_seconds(make_cycle(5), 301) == 0
    assert derive_display(make_cycle(5), 10_000).text == "00:00"


@pytest.mark.parametrize("elapsed", [0, 59, 3600])
def test_no_active_cycle_shows_zero(elapsed):
    assert derive_display(None, elapsed).text == "00:00"
    assert total_seconds_for(None) == 0


def test_display_order():
    display = derive_display(make_cycle(60), 1)
    assert list(display) == ["5", "9", ":", "5", "9"]
    assert display.separator == ":"


@pytest.mark.parametrize("part", range(10))
def test_single_digit_parts_are_zero_padded(part):
    assert pad_two(part) == "0" + str(part)


@pytest.mark.parametrize("part", range(10, 60))
def test_two_digit_parts_unchanged(part):
    assert pad_two(part) == str(part)


def test_three_digit_parts_not_truncated():
    assert pad_two(100) == "100"
    display = derive_display(make_cycle(120), 0)
    assert display.minute_1 == "12"
    assert display.minute_2 == "0"
    assert display.text == "120:00"
