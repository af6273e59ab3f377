"""Cancellation signals and request-scoped values passed down a call tree."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

logger = logging.getLogger(__name__)

CancelFunc = Callable[[], None]


class Context:
    """Carries a cancellation signal and key/value pairs from its ancestors."""

    def __init__(
        self,
        parent: Context | None = None,
        *,
        cancellable: bool = False,
        item: tuple[Any, Any] | None = None,
    ) -> None:
        self._parent = parent
        self._item = item
        self._children: list[Context] = []
        self._lock = threading.Lock()
        self._owns_done = parent is None or cancellable
        self._done = threading.Event() if self._owns_done else parent._done
        if cancellable and parent is not None:
            parent._attach(self)

    def _owner(self) -> Context:
        ctx = self
        while not ctx._owns_done:
            ctx = ctx._parent
        return ctx

    def _attach(self, child: Context) -> None:
        owner = self._owner()
        with owner._lock:
            if not owner._done.is_set():
                owner._children.append(child)
                return
        child._cancel()

    def _cancel(self) -> None:
        with self._lock:
            if self._done.is_set():
                return
            self._done.set()
            children, self._children = self._children, []
        for child in children:
            child._cancel()

    def done(self) -> threading.Event:
        """An event that is set once this context is cancelled."""
        return self._done

    def cancelled(self) -> bool:
        return self._done.is_set()

    def value(self, key: Any) -> Any:
        """The value stored under ``key`` here or in an ancestor, or None."""
        ctx: Context | None = self
        while ctx is not None:
            if ctx._item is not None and ctx._item[0] == key:
                return ctx._item[1]
            ctx = ctx._parent
        return None


def background() -> Context:
    """An empty root context that is never cancelled."""
    return Context()


def with_cancel(parent: Context) -> tuple[Context, CancelFunc]:
    """A child of ``parent`` together with the function that cancels it."""
    ctx = Context(parent, cancellable=True)
    return ctx, ctx._cancel


def with_timeout(parent: Context, timeout: float) -> tuple[Context, CancelFunc]:
    """A child of ``parent`` that is cancelled after ``timeout`` seconds."""
    ctx, cancel_ctx = with_cancel(parent)
    timer = threading.Timer(timeout, cancel_ctx)
    timer.daemon = True
    timer.start()

    def cancel() -> None:
        timer.cancel()
        cancel_ctx()

    return ctx, cancel


def with_value(parent: Context, key: Any, value: Any) -> Context:
    """A child of ``parent`` that carries ``value`` under ``key``."""
    return Context(parent, item=(key, value))


def do_work(ctx: Context, work: str, interval: float = 0.5) -> int:
    """Work in steps until ``ctx`` is cancelled; return the number of steps done."""
    steps = 0
    while True:
        if ctx.cancelled():
            print("Work cancelled:", work)
            return steps
        print("Doing work:", work)
        steps += 1
        ctx.done().wait(interval)


def log_with_context(ctx: Context, message: str) -> str:
    """Log ``message`` with the context's request ID if it has one; return the line."""
    request_id = ctx.value("requestID")
    if request_id is not None:
        line = f"Request ID: {request_id}, Message: {message}"
        logger.info(line)
    else:
        line = f"No Request ID found, Message: {message}"
        print(line)
    return line


def context_demo(cancel_after: float = 2.0, wait: float = 3.0, interval: float = 0.5) -> Any:
    """Cancel a worker after a delay and show that context values outlive it."""
    ctx, cancel = with_cancel(background())
    timer = threading.Timer(cancel_after, cancel)
    timer.daemon = True
    timer.start()

    ctx = with_value(ctx, "requestID", "123-456")
    worker = threading.Thread(target=do_work, args=(ctx, "Task 1", interval), daemon=True)
    worker.start()
    time.sleep(wait)

    request_id = ctx.value("requestID")
    if request_id is None:
        print("Request ID not found")
    else:
        print("Request ID:", request_id)
    log_with_context(ctx, "This is a log message")

    timer.cancel()
    cancel()
    worker.join()
    return request_id