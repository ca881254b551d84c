"""Line-by-line reading from a stream using a fixed read size."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, List, Optional

BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a stream in chunks of buffer_size.

    Data read past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        chunk = self._pending
        self._pending = None
        parts: List[AnyStr] = []
        while True:
            if chunk:
                newline = b"\n" if isinstance(chunk, bytes) else "\n"
                pos = chunk.find(newline)  # type: ignore[arg-type]
                if pos >= 0:
                    parts.append(chunk[: pos + 1])
                    self._pending = chunk[pos + 1 :] or None
                    return parts[0][:0].join(parts)
                parts.append(chunk)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
        if not parts:
            return None
        return parts[0][:0].join(parts)

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield every line of stream in order."""
    return iter(LineReader(stream, buffer_size))