"""Rate limiters: fixed window, leaky bucket and token bucket."""

from __future__ import annotations

import queue
import threading
import time
from typing import Callable, Protocol

Clock = Callable[[], float]


class Limiter(Protocol):
    def allow(self) -> bool: ...


class FixedWindowLimiter:
    """Allows at most ``limit`` actions per window of ``window`` seconds."""

    def __init__(self, limit: int, window: float, clock: Clock = time.monotonic) -> None:
        if window < 0:
            raise ValueError("window must not be negative")
        self.limit = limit
        self.window = window
        self._clock = clock
        self._count = 0
        self._reset_time: float | None = None
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Return True if an action may be performed now."""
        with self._lock:
            now = self._clock()
            if self._reset_time is None or now > self._reset_time:
                self._count = 0
                self._reset_time = now + self.window
            if self._count < self.limit:
                self._count += 1
                return True
            return False


class LeakyBucket:
    """Starts full; one token returns to the bucket every ``leak_rate`` seconds."""

    def __init__(self, capacity: int, leak_rate: float, clock: Clock = time.monotonic) -> None:
        if leak_rate <= 0:
            raise ValueError("leak_rate must be positive")
        self.capacity = capacity
        self.leak_rate = leak_rate
        self._clock = clock
        self._tokens = capacity
        self._last_leak = clock()
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Take a token if one is available."""
        with self._lock:
            now = self._clock()
            tokens_to_add = int((now - self._last_leak) // self.leak_rate)
            self._tokens = min(self._tokens + tokens_to_add, self.capacity)
            self._last_leak += tokens_to_add * self.leak_rate
            if self._tokens > 0:
                self._tokens -= 1
                return True
            return False


class TokenBucket:
    """Holds up to ``rate_limit`` tokens, adding one every ``refill_time`` seconds."""

    def __init__(self, rate_limit: int, refill_time: float, auto_refill: bool = True) -> None:
        if rate_limit < 0:
            raise ValueError("rate_limit must not be negative")
        if refill_time <= 0:
            raise ValueError("refill_time must be positive")
        self.rate_limit = rate_limit
        self.refill_time = refill_time
        self._tokens: queue.Queue[None] = queue.Queue(maxsize=rate_limit)
        for _ in range(rate_limit):
            self._tokens.put_nowait(None)
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None
        if auto_refill:
            self._thread = threading.Thread(target=self._refill_loop, daemon=True)
            self._thread.start()

    def _refill_loop(self) -> None:
        while not self._stop.wait(self.refill_time):
            self.refill()

    def refill(self) -> None:
        """Add one token unless the bucket is already full."""
        try:
            self._tokens.put_nowait(None)
        except queue.Full:
            pass

    def allow(self) -> bool:
        """Take a token if one is available."""
        try:
            self._tokens.get_nowait()
        except queue.Empty:
            return False
        return True

    def close(self) -> None:
        """Stop the background refill."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self) -> TokenBucket:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def run_limiter(limiter: Limiter, attempts: int = 10, interval: float = 0.2) -> list[bool]:
    """Attempt an action repeatedly, reporting each outcome."""
    results = []
    for _ in range(attempts):
        allowed = limiter.allow()
        print("Action performed" if allowed else "Rate limit exceeded, action skipped")
        results.append(allowed)
        time.sleep(interval)
    return results