"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

__all__ = ["LineReader", "read_lines"]

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, each keeping its newline.

    The stream is read ``buffer_size`` characters (or bytes) at a time.
    The last line is returned without a newline when the stream does not
    end with one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._exhausted = False

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return "\n" if isinstance(sample, str) else b"\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while not self._exhausted:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                self._exhausted = True
                return
            self._pending = chunk if self._pending is None else self._pending + chunk
            if self._newline(chunk) in chunk:
                return

    def next_line(self) -> Optional[AnyStr]:
        """The next line, or None once the stream is used up."""
        pending = self._pending
        if pending is None or self._newline(pending) not in pending:
            self._fill()
            pending = self._pending
        if not pending:
            self._pending = None
            return None
        cut = pending.find(self._newline(pending))
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[: cut + 1], pending[cut + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, each with its newline kept."""
    yield from LineReader(stream)