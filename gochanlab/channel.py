"""A thread-safe channel with optional buffering and close semantics."""

from __future__ import annotations

import queue
import threading
from collections import deque
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class ChannelClosed(Exception):
    """Raised when sending on, closing, or receiving from a drained closed channel."""


class Channel(Generic[T]):
    """A FIFO channel.

    With ``capacity`` 0 a send waits until a receiver has taken the value;
    otherwise sends wait only while the buffer is full.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._sent = 0
        self._received = 0
        self._waiting_receivers = 0

    def _has_room(self) -> bool:
        return len(self._items) < max(self.capacity, 1)

    def _enqueue(self, value: T) -> int:
        self._items.append(value)
        ticket = self._sent
        self._sent += 1
        self._cond.notify_all()
        return ticket

    def _dequeue(self) -> T:
        if not self._items:
            raise ChannelClosed("receive from closed channel")
        value = self._items.popleft()
        self._received += 1
        self._cond.notify_all()
        return value

    def send(self, value: T) -> None:
        """Send ``value``, waiting for room (or for a receiver if unbuffered)."""
        with self._cond:
            self._cond.wait_for(lambda: self._closed or self._has_room())
            if self._closed:
                raise ChannelClosed("send on closed channel")
            ticket = self._enqueue(value)
            if self.capacity == 0:
                self._cond.wait_for(lambda: self._received > ticket)

    def receive(self, timeout: float | None = None) -> T:
        """Receive the next value; raise TimeoutError if none arrives in time."""
        with self._cond:
            self._waiting_receivers += 1
            try:
                ready = self._cond.wait_for(
                    lambda: bool(self._items) or self._closed, timeout
                )
            finally:
                self._waiting_receivers -= 1
            if not ready:
                raise TimeoutError("no value received in time")
            return self._dequeue()

    def try_send(self, value: T) -> bool:
        """Send without waiting; return False if the value could not be sent now."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("send on closed channel")
            if self.capacity == 0:
                ready = self._waiting_receivers > 0 and not self._items
            else:
                ready = len(self._items) < self.capacity
            if not ready:
                return False
            self._enqueue(value)
            return True

    def try_receive(self) -> T:
        """Receive without waiting; raise queue.Empty if nothing is ready."""
        with self._cond:
            if not self._items and not self._closed:
                raise queue.Empty
            return self._dequeue()

    def close(self) -> None:
        """Close the channel; buffered values can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosed("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosed:
                return

    def __len__(self) -> int:
        with self._cond:
            return min(len(self._items), self.capacity)