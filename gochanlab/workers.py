"""Groups of workers: waiting for a fixed set of tasks and a pool fed from a channel."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Iterable

from gochanlab.channel import Channel

DEFAULT_TASKS = ("digging", "painting", "bricklaying")


@dataclass
class Worker:
    id: int
    task: str

    def perform_task(self, delay: float = 1.0) -> str:
        """Do the worker's task, taking ``delay`` seconds; return the task."""
        print("Worker", self.id, "performing task:", self.task)
        time.sleep(delay)
        print("Worker", self.id, "finished task:", self.task)
        return self.task


def wait_groups_demo(
    tasks: Iterable[str] = DEFAULT_TASKS, delay: float = 1.0
) -> list[Worker]:
    """Give each task to its own worker thread and wait for all; return workers in finishing order."""
    finished: list[Worker] = []
    lock = threading.Lock()

    def run(worker: Worker) -> None:
        worker.perform_task(delay)
        with lock:
            finished.append(worker)

    threads = [
        threading.Thread(target=run, args=(Worker(number, task),))
        for number, task in enumerate(tasks, start=1)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print("All workers finished")
    return finished


@dataclass(frozen=True)
class TicketRequest:
    person_id: int
    num_tickets: int
    cost: int


def process_tickets(
    requests: Channel[TicketRequest], results: Channel[int], delay: float = 1.0
) -> None:
    """Process requests until their channel is closed, sending each person's ID to ``results``."""
    for request in requests:
        print(
            "Processing request for person",
            request.person_id,
            "for",
            request.num_tickets,
            "tickets with total cost",
            request.cost,
        )
        time.sleep(delay)
        results.send(request.person_id)


def worker_pools_demo(
    num_requests: int = 5, price: int = 5, num_workers: int = 3, delay: float = 1.0
) -> list[int]:
    """Share ticket requests among a pool of workers; return person IDs as they are processed."""
    requests: Channel[TicketRequest] = Channel(num_requests)
    results: Channel[int] = Channel()

    threads = [
        threading.Thread(target=process_tickets, args=(requests, results, delay), daemon=True)
        for _ in range(num_workers)
    ]
    for thread in threads:
        thread.start()

    for number in range(1, num_requests + 1):
        requests.send(
            TicketRequest(person_id=number, num_tickets=number * 2, cost=price * number)
        )
    requests.close()

    processed = []
    for _ in range(num_requests):
        person_id = results.receive()
        print("Processed request for person", person_id)
        processed.append(person_id)
    results.close()
    for thread in threads:
        thread.join()
    return processed