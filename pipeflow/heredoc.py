"""Collecting here-document input up to a limiter line."""

from __future__ import annotations

import sys
from typing import Any, Optional

DEFAULT_PROMPT = ">"


def is_limiter(line: str, limiter: str) -> bool:
    """True if ``line`` is the limiter followed by its newline."""
    if len(line) - 1 != len(limiter):
        return False
    head = line.split("\n", 1)[0]
    return limiter.startswith(head)


def _next_line(stream: Any) -> Optional[str]:
    if hasattr(stream, "read_line"):
        return stream.read_line()
    line = stream.readline()
    return line or None


def read_here_doc(stream: Any, limiter: str, prompt: Optional[str] = DEFAULT_PROMPT) -> str:
    """Read lines from ``stream`` until the limiter line or end of input.

    ``prompt`` is written to standard output before each line is read. The
    text read before the limiter is returned; the limiter line is dropped.
    ``stream`` may offer ``readline()`` or ``read_line()``.
    """
    collected: list[str] = []
    while True:
        if prompt:
            sys.stdout.write(prompt)
            sys.stdout.flush()
        line = _next_line(stream)
        if line is None or is_limiter(line, limiter):
            break
        collected.append(line)
    return "".join(collected)