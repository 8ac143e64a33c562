"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 2


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, reading ``buffer_size`` at a time.

    Lines are returned without their newline. A final line with no newline
    is still returned; a newline at the very end does not produce an empty
    last line.
    """

    def __init__(
        self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
    ) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eof = False

    def _fill(self) -> bool:
        """Read one chunk into the pending data; False at end of stream."""
        if self._eof:
            return False
        data = self._stream.read(self._buffer_size)
        if not data:
            self._eof = True
            return False
        self._pending = data
        return True

    def read_line(self) -> Optional[AnyStr]:
        """The next line without its newline, or None at end of stream."""
        chunks: list[AnyStr] = []
        while True:
            pending = self._pending
            if pending:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    chunks.append(pending[:index])
                    self._pending = pending[index + 1:]
                    return chunks[0][:0].join(chunks)
                chunks.append(pending)
                self._pending = None
            if not self._fill():
                break
        if chunks:
            return chunks[0][:0].join(chunks)
        return None

    def reset(self) -> None:
        """Discard any data read but not yet returned."""
        self._pending = None
        self._eof = False

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(
    stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE
) -> list[AnyStr]:
    """Every line of ``stream``, without newlines."""
    return list(LineReader(stream, buffer_size))