"""A fixed-size buffer shared by producers and consumers."""

from __future__ import annotations

import threading
import time
from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")

BUFFER_SIZE = 5


class BoundedBuffer(Generic[T]):
    """FIFO buffer: producing blocks while full, consuming blocks while empty."""

    def __init__(self, size: int = BUFFER_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._items: deque[T] = deque()
        self._cond = threading.Condition()

    def produce(self, item: T) -> None:
        with self._cond:
            self._cond.wait_for(lambda: len(self._items) < self.size)
            self._items.append(item)
            self._cond.notify_all()

    def consume(self) -> T:
        with self._cond:
            self._cond.wait_for(lambda: bool(self._items))
            item = self._items.popleft()
            self._cond.notify_all()
            return item

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)


def run_producer_consumer(
    count: int = 20, produce_delay: float = 0.1, consume_delay: float = 0.2
) -> list[int]:
    """Run one producer and one consumer over a shared buffer; return what was consumed."""
    buffer: BoundedBuffer[int] = BoundedBuffer(BUFFER_SIZE)
    consumed: list[int] = []

    def produce() -> None:
        for i in range(count):
            buffer.produce(i + 100)
            time.sleep(produce_delay)

    def consume() -> None:
        for _ in range(count):
            consumed.append(buffer.consume())
            time.sleep(consume_delay)

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return consumed