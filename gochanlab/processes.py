"""Running external commands and feeding them input."""

from __future__ import annotations

import subprocess

SAMPLE_INPUT = "foo\nbar\nbaz\n"


def grep_lines(text: str, pattern: str) -> str:
    """Pipe ``text`` through ``grep pattern`` and return its output.

    Raises subprocess.CalledProcessError when grep fails, including when nothing matches.
    """
    completed = subprocess.run(
        ["grep", pattern],
        input=text,
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout


def processes_demo() -> str:
    """Filter a few lines through grep and print the result."""
    output = grep_lines(SAMPLE_INPUT, "foo")
    print(output)
    return output