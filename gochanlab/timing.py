"""Periodic ticks and one-shot timers."""

from __future__ import annotations

import threading
import time
from datetime import datetime


def tickers(interval: float = 1.0, duration: float = 5.0) -> list[datetime]:
    """Tick every ``interval`` seconds until ``duration`` has passed; return the tick times."""
    if interval <= 0:
        raise ValueError("interval must be positive")
    start = time.monotonic()
    deadline = start + duration
    next_tick = start + interval
    ticks: list[datetime] = []
    while next_tick <= deadline:
        time.sleep(max(0.0, next_tick - time.monotonic()))
        tick = datetime.now()
        print("Tick", tick)
        ticks.append(tick)
        next_tick += interval
    time.sleep(max(0.0, deadline - time.monotonic()))
    print("Stopping ticker")
    return ticks


def timers(delay: float = 2.0, wait: float = 3.0) -> bool:
    """Start a timer of ``delay`` seconds, then wait ``wait`` seconds; return whether it fired."""
    fired = threading.Event()

    def expire() -> None:
        print("Timer expired")
        fired.set()

    timer = threading.Timer(delay, expire)
    timer.daemon = True
    timer.start()
    print("Waiting...")
    time.sleep(wait)
    timer.cancel()
    print("Main function completed")
    return fired.is_set()