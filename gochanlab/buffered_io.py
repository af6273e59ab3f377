"""Buffered writing to a byte stream."""

from __future__ import annotations

import sys
from typing import BinaryIO

GREETING = "Hello, bufio package!\n"


def write_buffered(stream: BinaryIO, data: bytes | str) -> int:
    """Write ``data`` (text is UTF-8 encoded) to ``stream`` and flush; return the bytes written."""
    payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    written = stream.write(payload)
    stream.flush()
    return len(payload) if written is None else written


def bufio_demo(stream: BinaryIO | None = None) -> tuple[int, int]:
    """Write a greeting as bytes and then as text; return both byte counts."""
    target = stream if stream is not None else sys.stdout.buffer
    sys.stdout.flush()
    first = write_buffered(target, GREETING.encode("utf-8"))
    print(f"Wrote {first} bytes")
    sys.stdout.flush()
    second = write_buffered(target, GREETING)
    print(f"Wrote {second} bytes:")
    return first, second