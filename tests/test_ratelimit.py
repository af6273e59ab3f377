import time

import pytest

from gochanlab.ratelimit import FixedWindowLimiter, LeakyBucket, TokenBucket, run_limiter


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_fixed_window_allows_limit_then_refuses():
    clock = FakeClock()
    limiter = FixedWindowLimiter(3, 1.0, clock)
    results = [limiter.allow() for _ in range(5)]
    assert results == [True] * 3 + [False] * 2


def test_fixed_window_resets_only_after_window():
    clock = FakeClock()
    limiter = FixedWindowLimiter(3, 1.0, clock)
    for _ in range(3):
        limiter.allow()
    clock.now = 1.0
    assert limiter.allow() is False
    clock.now = 1.5
    results = [limiter.allow() for _ in range(4)]
    assert results == [True] * 3 + [False]


def test_fixed_window_negative_window_rejected():
    with pytest.raises(ValueError):
        FixedWindowLimiter(3, -1.0)


def test_leaky_bucket_starts_full():
    clock = FakeClock()
    bucket = LeakyBucket(5, 0.5, clock)
    results = [bucket.allow() for _ in range(6)]
    assert results == [True] * 5 + [False]


def test_leaky_bucket_leaks_whole_tokens():
    clock = FakeClock()
    bucket = LeakyBucket(5, 0.5, clock)
    for _ in range(5):
        bucket.allow()
    clock.now = 1.0
    assert [bucket.allow() for _ in range(3)] == [True, True, False]
    clock.now = 1.25
    assert bucket.allow() is False
    clock.now = 1.5
    assert bucket.allow() is True


def test_leaky_bucket_caps_at_capacity():
    clock = FakeClock()
    bucket = LeakyBucket(5, 0.5, clock)
    bucket.allow()
    clock.now = 100.0
    results = [bucket.allow() for _ in range(10)]
    assert sum(results) == 5


def test_leaky_bucket_rejects_zero_rate():
    with pytest.raises(ValueError):
        LeakyBucket(5, 0)


def test_token_bucket_manual_refill():
    bucket = TokenBucket(5, 1.0, auto_refill=False)
    assert [bucket.allow() for _ in range(6)] == [True] * 5 + [False]
    bucket.refill()
    assert bucket.allow() is True
    assert bucket.allow() is False


def test_token_bucket_refill_is_capped():
    bucket = TokenBucket(5, 1.0, auto_refill=False)
    for _ in range(20):
        bucket.refill()
    assert sum(bucket.allow() for _ in range(20)) == 5


def test_token_bucket_auto_refill():
    with TokenBucket(1, 0.01) as bucket:
        assert bucket.allow() is True
        deadline = time.monotonic() + 2.0
        refilled = False
        while time.monotonic() < deadline:
            if bucket.allow():
                refilled = True
                break
            time.sleep(0.005)
        assert refilled


def test_token_bucket_close_stops_refill():
    bucket = TokenBucket(1, 0.01)
    bucket.close()
    while bucket.allow():
        pass
    time.sleep(0.05)
    assert bucket.allow() is False


def test_token_bucket_invalid_refill_time():
    with pytest.raises(ValueError):
        TokenBucket(5, 0)


def test_run_limiter_reports_each_attempt(capsys):
    limiter = FixedWindowLimiter(3, 60.0)
    results = run_limiter(limiter, attempts=10, interval=0)
    assert len(results) == 10
    assert sum(results) == 3
    out = capsys.readouterr().out
    assert out.count("Action performed") == 3
    assert out.count("Rate limit exceeded, action skipped") == 7