import pytest

from gochanlab.channel import Channel
from gochanlab.workers import (
    TicketRequest,
    Worker,
    process_tickets,
    wait_groups_demo,
    worker_pools_demo,
)


def test_perform_task_returns_task_and_reports(capsys):
    worker = Worker(1, "digging")
    assert worker.perform_task(0) == "digging"
    out = capsys.readouterr().out
    assert "Worker 1 performing task: digging" in out
    assert "Worker 1 finished task: digging" in out


def test_wait_groups_demo_runs_every_task(capsys):
    finished = wait_groups_demo(["digging", "painting", "bricklaying"], 0)
    assert sorted((w.id, w.task) for w in finished) == [
        (1, "digging"),
        (2, "painting"),
        (3, "bricklaying"),
    ]
    assert capsys.readouterr().out.rstrip().endswith("All workers finished")


def test_wait_groups_demo_with_no_tasks():
    assert wait_groups_demo([], 0) == []


def test_process_tickets_forwards_person_ids():
    requests: Channel[TicketRequest] = Channel(3)
    results: Channel[int] = Channel(3)
    for number in (1, 2, 3):
        requests.send(TicketRequest(number, number * 2, number * 5))
    requests.close()
    process_tickets(requests, results, 0)
    results.close()
    assert list(results) == [1, 2, 3]


@pytest.mark.parametrize("workers", [1, 3, 8])
def test_worker_pools_demo_processes_every_request(workers):
    processed = worker_pools_demo(5, 5, workers, 0)
    assert sorted(processed) == [1, 2, 3, 4, 5]


def test_worker_pools_demo_reports_costs(capsys):
    worker_pools_demo(2, 7, 1, 0)
    out = capsys.readouterr().out
    assert "Processing request for person 2 for 4 tickets with total cost 14" in out
    assert "Processed request for person 1" in out