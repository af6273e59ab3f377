"""Channel patterns: buffering, direction, synchronisation, closing, select and workers."""

from __future__ import annotations

import queue
import random
import threading
import time

from gochanlab.channel import Channel, ChannelClosed


def _start(target, *args) -> threading.Thread:
    thread = threading.Thread(target=target, args=args, daemon=True)
    thread.start()
    return thread


def producer(ch: Channel[int], count: int = 5) -> None:
    """Send 0 .. count-1 on ``ch``, then close it."""
    for i in range(count):
        ch.send(i)
    ch.close()


def consumer(ch: Channel[int]) -> list[int]:
    """Receive every value until ``ch`` is closed; return them in order."""
    received = []
    for value in ch:
        print("Received:", value)
        received.append(value)
    return received


def even_filter(source: Channel[int], sink: Channel[int]) -> None:
    """Forward the even values of ``source`` to ``sink``, then close ``sink``."""
    for value in source:
        if value % 2 == 0:
            print("Even number:", value)
            sink.send(value)
    sink.close()


def channel_buffering(delay: float = 2.0) -> list[int]:
    """Block a send on a full buffer until another thread drains one value."""
    ch: Channel[int] = Channel(2)
    ch.send(1)
    ch.send(2)
    drained: list[int] = []

    def drain() -> None:
        print("Blocking")
        time.sleep(delay)
        value = ch.receive()
        print("Received: ", value)
        drained.append(value)

    thread = _start(drain)
    print("Start blocking")
    ch.send(3)
    print("End blocking")
    next_value = ch.receive()
    print("Received next: ", next_value)
    final_value = ch.receive()
    print("Received final: ", final_value)
    thread.join()
    return [*drained, next_value, final_value]


def channel_direction(count: int = 5) -> list[int]:
    """Run a sending producer against a receiving consumer."""
    ch: Channel[int] = Channel()
    thread = _start(producer, ch, count)
    received = consumer(ch)
    thread.join()
    return received


def channel_synchronization(count: int = 5, interval: float = 0.1) -> list[str]:
    """Receive greetings from a sender until it closes the channel."""
    data: Channel[str] = Channel()

    def send() -> None:
        for i in range(count):
            data.send(f"Hello {i}")
            time.sleep(interval)
        data.close()

    thread = _start(send)
    received = []
    for value in data:
        print("received value: ", value)
        received.append(value)
    print("Main function finished")
    thread.join()
    return received


def random_numbers(
    count: int = 5, interval: float = 1.0, rng: random.Random | None = None
) -> list[int]:
    """Receive ``count`` random numbers below 100 from a sending thread."""
    generator = rng if rng is not None else random.Random()
    ch: Channel[int] = Channel()

    def send() -> None:
        for _ in range(count):
            ch.send(generator.randrange(100))
            time.sleep(interval)
        ch.close()

    thread = _start(send)
    received = []
    for value in ch:
        print(value)
        received.append(value)
    thread.join()
    return received


def closing_channels(count: int = 5) -> list[int]:
    """Chain a producer and an even filter; return what comes out of the filter."""
    numbers: Channel[int] = Channel()
    evens: Channel[int] = Channel()
    threads = [_start(producer, numbers, count), _start(even_filter, numbers, evens)]
    filtered = []
    for value in evens:
        print("Filtered value:", value)
        filtered.append(value)
    for thread in threads:
        thread.join()
    return filtered


def _seconds(value: float) -> str:
    return f"{value:g} second" + ("" if value == 1 else "s")


def multiplexing_select(delay: float = 3.0, timeout: float = 1.0) -> tuple[list[int], int]:
    """Wait for a delayed value, reporting each timeout; return values and timeout count."""
    ch: Channel[int] = Channel()

    def send() -> None:
        time.sleep(delay)
        ch.send(1)
        ch.close()

    thread = _start(send)
    values: list[int] = []
    timeouts = 0
    while True:
        try:
            message = ch.receive(timeout)
        except ChannelClosed:
            print("Channel closed")
            break
        except TimeoutError:
            print(f"Timeout: No message received within {_seconds(timeout)}")
            timeouts += 1
            continue
        print("Received:", message)
        values.append(message)
    thread.join()
    return values, timeouts


def non_blocking_operation(
    count: int = 5, interval: float = 1.0, poll: float = 0.5
) -> list[int]:
    """Poll two channels without blocking until told to stop; return the data received."""
    data: Channel[int] = Channel()
    done: Channel[bool] = Channel()
    received: list[int] = []

    def poll_loop() -> None:
        while True:
            try:
                message = data.try_receive()
            except queue.Empty:
                pass
            else:
                print("Received:", message)
                received.append(message)
                continue
            try:
                done.try_receive()
            except queue.Empty:
                print("Waiting for data...")
                time.sleep(poll)
            else:
                print("Done receiving data")
                return

    thread = _start(poll_loop)
    for i in range(count):
        data.send(i)
        print("Sent:", i)
        time.sleep(interval)
    done.send(True)
    data.close()
    done.close()
    thread.join()
    return received


class StatefulWorker:
    """Keeps a running total of the values sent to it, updated by its own thread."""

    def __init__(self) -> None:
        self.count = 0
        self._ch: Channel[int] = Channel()
        self._thread: threading.Thread | None = None

    def _run(self) -> None:
        for value in self._ch:
            self.count += value
            print("Count:", self.count)

    def start(self) -> None:
        """Start the worker's thread."""
        if self._thread is not None:
            raise RuntimeError("worker already started")
        self._thread = _start(self._run)

    def send(self, value: int) -> None:
        """Hand ``value`` to the worker, waiting until it has been taken."""
        self._ch.send(value)

    def stop(self) -> None:
        """Close the worker's input and wait for it to finish."""
        self._ch.close()
        if self._thread is not None:
            self._thread.join()


def stateful_goroutines(count: int = 5, interval: float = 0.1) -> int:
    """Send 0 .. count-1 to a StatefulWorker and return its final total."""
    worker = StatefulWorker()
    worker.start()
    for i in range(count):
        worker.send(i)
        time.sleep(interval)
    worker.stop()
    return worker.count