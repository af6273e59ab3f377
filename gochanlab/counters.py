"""Shared counters incremented from many threads."""

from __future__ import annotations

import threading
from typing import Callable


class AtomicCounter:
    """An integer counter that is safe to increment from several threads."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> None:
        with self._lock:
            self._value += 1

    def value(self) -> int:
        with self._lock:
            return self._value


def _run_workers(workers: int, target: Callable[[], None]) -> None:
    threads = [threading.Thread(target=target) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()


def atomic_counter_demo(workers: int = 10, increments: int = 1000) -> int:
    """Increment an AtomicCounter from several threads and return the total."""
    counter = AtomicCounter()

    def work() -> None:
        for _ in range(increments):
            counter.increment()

    _run_workers(workers, work)
    total = counter.value()
    print("Final counter value:", total)
    return total


def mutex_demo(workers: int = 5, increments: int = 1000) -> int:
    """Increment a plain integer under a lock from several threads."""
    counter = 0
    lock = threading.Lock()

    def work() -> None:
        nonlocal counter
        for _ in range(increments):
            with lock:
                counter += 1

    _run_workers(workers, work)
    print("Final counter value:", counter)
    return counter