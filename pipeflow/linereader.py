"""Reading a descriptor one line at a time through a fixed-size read buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Optional, Protocol, Union

BUFFER_SIZE = 37


class _HasFileno(Protocol):
    def fileno(self) -> int: ...


class LineReader:
    """Reads lines from a file descriptor, ``buffer_size`` bytes at a time.

    Lines keep their trailing newline; the last line of the input may lack
    one. Bytes read past the end of a line are kept for the next call.
    """

    def __init__(self, fd: Union[int, _HasFileno], buffer_size: int = BUFFER_SIZE) -> None:
        if not isinstance(fd, int):
            fd = fd.fileno()
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size < 1:
            raise ValueError("buffer size must be positive")
        self._fd = fd
        self._buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[str]:
        """The next line, or ``None`` once the input is exhausted."""
        while b"\n" not in self._pending:
            try:
                chunk = os.read(self._fd, self._buffer_size)
            except OSError:
                self._pending.clear()
                raise
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line.decode("utf-8", errors="replace")

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line