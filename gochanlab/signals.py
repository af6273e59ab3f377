"""Catching process signals and reacting to them."""

from __future__ import annotations

import os
import signal
import sys
import time
from types import FrameType
from typing import Any, Callable

Handler = Callable[[int, "FrameType | None"], Any]

# SIGSTOP cannot be caught, so it is left out; missing names are skipped on platforms without them.
_WATCHED = (
    "SIGINT",
    "SIGTERM",
    "SIGQUIT",
    "SIGHUP",
    "SIGUSR1",
    "SIGUSR2",
    "SIGPIPE",
    "SIGCHLD",
    "SIGCONT",
    "SIGTSTP",
    "SIGTTIN",
)

_EXITING = {signal.SIGINT, signal.SIGTERM}


def _name(signum: int) -> str:
    try:
        return signal.Signals(signum).name
    except ValueError:
        return str(signum)


def describe_signal(signum: int) -> str:
    """The message reported for a received signal."""
    if signum == signal.SIGINT:
        return "Received SIGINT, exiting..."
    if signum == signal.SIGTERM:
        return "Received SIGTERM, exiting..."
    return f"Received signal: {_name(signum)}"


def install_handlers(handler: Handler) -> dict[int, Any]:
    """Install ``handler`` for every watched signal; return the previous handlers by signal."""
    previous: dict[int, Any] = {}
    for name in _WATCHED:
        signum = getattr(signal, name, None)
        if signum is None:
            continue
        previous[int(signum)] = signal.signal(signum, handler)
    return previous


def _on_signal(signum: int, frame: FrameType | None) -> None:
    print("Received signal: ", _name(signum), sep="")
    print(describe_signal(signum))
    if signum in _EXITING:
        sys.exit(0)


def signals_demo() -> None:
    """Print the process ID and wait for signals, exiting on SIGINT or SIGTERM."""
    print(f"Process ID: {os.getpid()}")
    install_handlers(_on_signal)
    while True:
        time.sleep(1)