import os
import signal

import pytest

from gochanlab.signals import describe_signal, install_handlers


def _restore(previous):
    for signum, handler in previous.items():
        if handler is not None:
            signal.signal(signum, handler)


def test_describe_sigint():
    assert describe_signal(signal.SIGINT) == "Received SIGINT, exiting..."


def test_describe_sigterm():
    assert describe_signal(signal.SIGTERM) == "Received SIGTERM, exiting..."


@pytest.mark.parametrize("signum", [signal.SIGUSR1, signal.SIGHUP])
def test_describe_other_signal_names_it(signum):
    assert describe_signal(signum) == "Received signal: " + signal.Signals(signum).name


def test_installed_handler_receives_signal():
    received = []
    previous = install_handlers(lambda signum, frame: received.append(signum))
    try:
        assert int(signal.SIGUSR1) in previous
        assert int(signal.SIGINT) in previous
        os.kill(os.getpid(), signal.SIGUSR1)
        signal.pthread_sigmask(signal.SIG_BLOCK, [])  # give the interpreter a chance to run handlers
    finally:
        _restore(previous)
    assert received == [signal.SIGUSR1]


def test_install_returns_handlers_that_can_be_restored():
    def handler(signum, frame):
        return None

    before = signal.getsignal(signal.SIGUSR2)
    previous = install_handlers(handler)
    try:
        assert signal.getsignal(signal.SIGUSR2) is handler
    finally:
        _restore(previous)
    assert signal.getsignal(signal.SIGUSR2) == before