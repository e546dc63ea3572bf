import pytest

from sibox.timer import Stopwatch


class FakeClock:
    def __init__(self, start=0):
        self.now = start

    def __call__(self):
        return self.now


def test_ticks_follow_clock():
    clock = FakeClock(100)
    watch = Stopwatch(clock)
    clock.now = 2_500_100
    assert watch.elapsed_ticks() == 2_500_000


def test_end_freezes_elapsed_time():
    clock = FakeClock()
    watch = Stopwatch(clock)
    clock.now = 3_000_000
    watch.end()
    frozen = watch.elapsed_ticks()
    clock.now = 9_000_000
    assert watch.elapsed_ticks() == frozen


def test_units_are_consistent():
    clock = FakeClock()
    watch = Stopwatch(clock)
    clock.now = 7_250_000
    watch.end()
    ticks = watch.elapsed_ticks()
    assert watch.elapsed_seconds() == pytest.approx(ticks / 1e9)
    assert watch.elapsed_milliseconds() == pytest.approx(watch.elapsed_seconds() * 1000)
    assert watch.elapsed_microseconds() == ticks // 1000


def test_custom_frequency():
    clock = FakeClock()
    watch = Stopwatch(clock, frequency=1000)
    clock.now = 1500
    assert watch.elapsed_seconds() == pytest.approx(1.5)
    assert watch.elapsed_milliseconds() == pytest.approx(1500.0)


def test_restart_resets_start_and_end():
    clock = FakeClock()
    watch = Stopwatch(clock)
    clock.now = 500
    watch.end()
    watch.restart()
    assert watch.elapsed_ticks() == 0
    clock.now = 800
    assert watch.elapsed_ticks() == 300


def test_real_clock_is_monotonic():
    watch = Stopwatch()
    first = watch.elapsed_ticks()
    second = watch.elapsed_ticks()
    assert 0 <= first <= second


def test_invalid_frequency_rejected():
    with pytest.raises(ValueError):
        Stopwatch(FakeClock(), frequency=0)