"""Line-at-a-time reading from a stream."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

_CHUNK_SIZE = 4096


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream.

    Each call drains whatever the stream currently has, then hands out the
    next line with its newline kept; the last line may lack one.
    """

    def __init__(self, stream: IO[AnyStr]) -> None:
        self._stream = stream
        self._buffer: Optional[AnyStr] = None
        self._pos = 0

    def _fill(self) -> None:
        chunks = []
        while True:
            chunk = self._stream.read(_CHUNK_SIZE)
            if not chunk:
                break
            chunks.append(chunk)
        if not chunks:
            return
        empty = chunks[0][:0]
        data = empty.join(chunks)
        if self._buffer is None:
            self._buffer = data
        else:
            self._buffer = self._buffer[self._pos:] + data
            self._pos = 0

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        buffer = self._buffer
        if buffer is None or self._pos >= len(buffer):
            self._buffer = None
            self._pos = 0
            return None
        newline = "\n" if isinstance(buffer, str) else b"\n"
        end = buffer.find(newline, self._pos)
        end = len(buffer) if end < 0 else end + 1
        line = buffer[self._pos:end]
        self._pos = end
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line