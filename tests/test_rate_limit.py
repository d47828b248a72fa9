"""
Tests for splynx_geo.geocoding.rate_limit.RateLimiter, driven by a fake clock.
"""

import pytest

from splynx_geo.geocoding.rate_limit import RateLimiter


class FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock: FakeClock) -> RateLimiter:
    return RateLimiter(1.0, clock=clock, sleep=clock.sleep)


def test_first_call_does_not_wait(limiter: RateLimiter, clock: FakeClock) -> None:
    assert limiter.last_request is None
    assert limiter.wait() == 0.0
    assert clock.sleeps == []
    assert limiter.last_request == 100.0


def test_back_to_back_calls_are_spaced(limiter: RateLimiter, clock: FakeClock) -> None:
    limiter.wait()
    limiter.wait()
    assert clock.sleeps == [pytest.approx(1.0)]
    assert limiter.last_request == pytest.approx(101.0)


def test_waits_only_for_the_remainder(limiter: RateLimiter, clock: FakeClock) -> None:
    limiter.wait()
    clock.now += 0.4
    slept = limiter.wait()
    assert slept == pytest.approx(0.6)
    assert clock.sleeps == [pytest.approx(0.6)]


def test_no_wait_after_interval_elapsed(limiter: RateLimiter, clock: FakeClock) -> None:
    limiter.wait()
    clock.now += 2.5
    assert limiter.wait() == 0.0
    assert clock.sleeps == []
    assert limiter.last_request == pytest.approx(102.5)


def test_spacing_holds_over_many_calls(limiter: RateLimiter, clock: FakeClock) -> None:
    starts = []
    for _ in range(5):
        limiter.wait()
        starts.append(limiter.last_request)
    gaps = [b - a for a, b in zip(starts, starts[1:])]
    assert all(gap >= 1.0 - 1e-9 for gap in gaps)
