"""Writing files and reading back their beginning."""

from __future__ import annotations

import os
from pathlib import Path

StrPath = str | os.PathLike


def write_bytes(path: StrPath, data: bytes) -> int:
    """Create or truncate ``path`` and write ``data``; return the bytes written."""
    with open(path, "wb") as handle:
        return handle.write(data)


def write_text(path: StrPath, text: str) -> int:
    """Create or truncate ``path`` and write ``text`` as UTF-8; return the bytes written."""
    with open(path, "wb") as handle:
        return handle.write(text.encode("utf-8"))


def read_head(path: StrPath, size: int = 20) -> bytes:
    """Read at most ``size`` bytes from the start of ``path``.

    Raises EOFError if the file is empty.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    with open(path, "rb") as handle:
        data = handle.read(size)
    if size and not data:
        raise EOFError(f"{path} is empty")
    return data


def files_demo(directory: StrPath = ".") -> bytes:
    """Write two files into ``directory`` and read back the start of the first."""
    base = Path(directory)
    output = base / "output.txt"
    write_bytes(output, b"Hello, world!\n")
    print("Data written successfully")
    write_text(base / "writeString.txt", "Hello, Go!\n")
    print("String written successfully")
    data = read_head(output, 20)
    print(f"Read {len(data)} bytes: {data.decode('utf-8', errors='replace')}")
    return data