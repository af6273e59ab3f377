# gochanlab

Small, thread-based concurrency building blocks for Python, together with
runnable demonstrations of each pattern. Everything uses the standard
library only.

## What is inside

- `gochanlab.channel`: `Channel`, a closable FIFO that is unbuffered by
  default (`send` waits until a receiver takes the value) or buffered with a
  given capacity. It offers `send`, `receive(timeout)`, the non-blocking
  `try_send` (returns `False` when it cannot send now) and `try_receive`
  (raises `queue.Empty`), `close`, `closed`, `len()` and iteration until
  the channel is closed and drained. `ChannelClosed` is raised on sending to
  or closing a closed channel, and on receiving from a closed, empty one.
- `gochanlab.ratelimit`: `FixedWindowLimiter`, `LeakyBucket` and
  `TokenBucket`. The first two accept a `clock` function for testing.
  `TokenBucket` refills itself from a background thread unless
  `auto_refill=False`, in which case `refill()` adds tokens by hand. It is a
  context manager whose exit calls `close()`. `run_limiter` calls
  `allow()` repeatedly and returns the outcomes.
- `gochanlab.counters`: `AtomicCounter` (`increment`, `value`),
  `atomic_counter_demo` and `mutex_demo`, which count from many threads.
- `gochanlab.bounded_buffer`: `BoundedBuffer`, a condition-variable
  producer/consumer buffer, and `run_producer_consumer`.
- `gochanlab.cancellation`: `Context` objects with cancellation and
  request-scoped values (`background`, `with_cancel`, `with_timeout`,
  `with_value`), plus `do_work`, `log_with_context` and `context_demo`.
- `gochanlab.channel_demos`: `producer`, `consumer`, `even_filter`,
  `channel_buffering`, `channel_direction`, `channel_synchronization`,
  `random_numbers`, `closing_channels`, `multiplexing_select`,
  `non_blocking_operation`, `StatefulWorker` and `stateful_goroutines`.
- `gochanlab.timing`: `tickers` (periodic ticks until a deadline) and
  `timers` (a one-shot timer).
- `gochanlab.workers`: `Worker`, `wait_groups_demo`, `TicketRequest`,
  `process_tickets` and `worker_pools_demo`, a ticket-processing worker
  pool fed from a channel.
- `gochanlab.sorting`: `Person`, `By` (sorting with a "less than"
  function), `by_age`, `by_name` and `sorting_demo`.
- `gochanlab.reflection`: `Greeter`, `public_methods`, `call_method` and
  `reflection_demo`.
- `gochanlab.processes`: `grep_lines` pipes text through an external
  `grep` and returns its output. It raises `subprocess.CalledProcessError`
  when grep fails, including when nothing matches. `processes_demo`
  shows it in use.
- `gochanlab.signals`: `describe_signal`, `install_handlers` and
  `signals_demo`, which prints the process ID and waits for signals,
  exiting on SIGINT or SIGTERM.
- `gochanlab.buffered_io`: `write_buffered` and `bufio_demo`.
- `gochanlab.files`: `write_bytes`, `write_text`, `read_head` (raises
  `EOFError` on an empty file) and `files_demo`.

## Installing

```
pip install .
```

## Quick examples

```python
from gochanlab.channel import Channel

ch = Channel(2)
ch.send(1)
ch.send(2)
ch.close()
print(list(ch))          # [1, 2]
```

```python
from gochanlab.ratelimit import FixedWindowLimiter

limiter = FixedWindowLimiter(3, 1.0)
print([limiter.allow() for _ in range(5)])   # [True, True, True, False, False]
```

```python
from gochanlab.sorting import By, Person, by_age

people = [Person("Alice", 30), Person("Bob", 25), Person("Charlie", 35)]
By(by_age).sort(people)
```

## Command line

The `gochanlab` command prints each of its arguments, then the parsed flags:

```
gochanlab --name Jane --age 41 --isMale
```

The flags may also be written with a single dash (`-name`, `-age`,
`-isMale`). `--name` defaults to `John Doe`, `--age` to `30` and
`--isMale` to off. Bad input exits with status 2.

The other demos have no command of their own. Call them from Python.

## What it does not do

- Everything runs on threads. There is no asyncio or multiprocessing
  support.
- `gochanlab.processes` needs a `grep` executable on the `PATH`.
- `gochanlab.signals` relies on POSIX signals. It skips signal names the
  platform lacks, and never catches SIGSTOP.

## Running the tests

```
pip install .[test]
pytest
```