"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from typing import Iterator, Optional

DEFAULT_BUFFER_SIZE = 10


class LineReader:
    """Read newline-terminated lines from a file descriptor.

    Data is read in chunks of buffer_size bytes; what follows a line is
    kept for the next call.
    """

    def __init__(self, fd: int, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError("file descriptor must not be negative")
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = bytearray()

    def read_line(self) -> Optional[bytes]:
        """Return the next line, newline included, or None at end of input.

        The last line is returned without a newline if the input lacks one.
        Read errors propagate as OSError.
        """
        while b"\n" not in self._pending:
            chunk = os.read(self.fd, self.buffer_size)
            if not chunk:
                break
            self._pending += chunk
        if not self._pending:
            return None
        end = self._pending.find(b"\n")
        cut = len(self._pending) if end < 0 else end + 1
        line = bytes(self._pending[:cut])
        del self._pending[:cut]
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line