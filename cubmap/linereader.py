"""Reading a text stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

BUFFER_SIZE = 42


class LineReader:
    """Yield lines, newline included, from a text stream read in chunks."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = ""

    def _fill(self) -> None:
        while "\n" not in self._pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending += chunk

    def read_line(self) -> Optional[str]:
        """Return the next line, or ``None`` once the stream is exhausted."""
        try:
            self._fill()
        except OSError:
            self._pending = ""
            raise
        if not self._pending:
            return None
        end = self._pending.find("\n")
        if end < 0:
            line, self._pending = self._pending, ""
        else:
            line, self._pending = self._pending[: end + 1], self._pending[end + 1 :]
        return line

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


def read_lines(path) -> list[str]:
    """Read every line of the file at ``path``, line endings kept."""
    with open(path, encoding="utf-8", newline="") as handle:
        return list(LineReader(handle))