from collections import deque
from enum import Enum
from io import BytesIO
from itertools import islice
from typing import Iterator

from common.helper import PrintColor

class SplitType(Enum):
    PREFIX = 1      # before the first separator, possibly empty. at most once, always first
    FULL_MATCH = 2  # strictly between two separators
    SUFFIX = 3      # after the last separator, or the whole stream if there is none

class SplitError(Exception):
    ...

class InvalidStateError(SplitError):
    ...

class InternalError(SplitError):
    ...

class ByteStreamSplitter:
    """
    Lazily splits a byte stream on a fixed multi-byte separator.\n
    input: anything with read(n) -> bytes; b"" is end of stream, None means no data yet\n
    separator: non-empty bytes, compared by exact equality\n
    Separator occurrences are consumed and never written out. Every other byte
    is written exactly once, in input order.
    """

    def __init__(self, input, separator: bytes, read_size=2048, prepend_separator=False, debug=False):
        if not isinstance(separator, (bytes, bytearray, memoryview)):
            raise TypeError(f"ByteStreamSplitter separator must be bytes, got {type(separator).__name__}.")
        if len(separator) == 0:
            raise ValueError("ByteStreamSplitter separator is required.")
        if read_size < 1:
            raise ValueError(f"ByteStreamSplitter read_size must be at least 1, got {read_size}.")

        self._input = input # borrowed; caller owns closing it
        self._separator = bytes(separator)
        self._read_size = read_size
        self._debug = debug

        # when iterating, re-attach the separator in front of every run after the prefix
        self.prepend_separator = prepend_separator

        self._started = False
        self._eof = False

        # bytes that match the separator so far but are not yet confirmed either way
        self._window: deque[int] = deque(maxlen=len(self._separator))

        # read-ahead chunk; nothing is read until the first run is requested
        self._chunk = b""
        self._chunk_idx = 0

    @property
    def separator(self) -> bytes:
        return self._separator

    @property
    def started_splitting(self) -> bool:
        return self._started

    @property
    def end_of_stream_reached(self) -> bool:
        return self._eof

    def next_to(self, sink) -> SplitType:
        """
        Writes the next run into sink (anything with write(bytes)) and returns how it ended.
        Raises InvalidStateError once the suffix has been produced.
        """
        if self._eof:
            raise InvalidStateError("Stream has no more data.")

        sep = self._separator
        window = self._window

        while True:
            if len(window) == 0:
                if not self._fill():
                    return self._end()

                # copy everything up to the next possible separator start straight through
                idx = self._chunk.find(sep[0], self._chunk_idx)
                if idx == -1:
                    self._write(sink, self._chunk[self._chunk_idx:])
                    self._chunk_idx = len(self._chunk)
                    continue

                self._write(sink, self._chunk[self._chunk_idx:idx])
                window.append(sep[0])
                self._chunk_idx = idx + 1

            if not self._window_matches():
                self._drain(sink)
                continue

            if len(window) == len(sep):
                window.clear()
                if self._started:
                    return SplitType.FULL_MATCH
                self._started = True
                return SplitType.PREFIX

            if not self._fill():
                # separator cut short by end of stream; what we held is plain trailing data
                self._write(sink, bytes(window))
                window.clear()
                return self._end()

            take = min(len(sep) - len(window), len(self._chunk) - self._chunk_idx)
            if take <= 0:
                raise InternalError(
                    f"Scan window stalled at {len(window)} of {len(sep)} bytes with no input consumed."
                )

            window.extend(self._chunk[self._chunk_idx:self._chunk_idx + take])
            self._chunk_idx += take

    def labeled(self) -> Iterator[tuple[bytes, SplitType]]:
        """Yields (run, SplitType) for every remaining run."""
        while not self._eof:
            yield self._next_part()

    def __iter__(self):
        return self

    def __next__(self) -> bytes:
        # errors from next_to are raised as-is; only a finished stream ends the iteration
        if self._eof:
            raise StopIteration

        return self._next_part()[0]

    def _next_part(self) -> tuple[bytes, SplitType]:
        part = BytesIO()
        if self._started and self.prepend_separator:
            part.write(self._separator)

        kind = self.next_to(part)
        return (part.getvalue(), kind)

    def _fill(self) -> bool:
        # False only on end of stream. a failed read leaves every field untouched
        if self._chunk_idx < len(self._chunk):
            return True

        data = self._input.read(self._read_size)
        if data is None:
            raise BlockingIOError("ByteStreamSplitter input has no data available yet.")
        if len(data) == 0:
            return False

        self._chunk = bytes(data)
        self._chunk_idx = 0
        return True

    def _window_matches(self) -> bool:
        for b, s in zip(self._window, self._separator):
            if b != s:
                return False
        return True

    def _drain(self, sink):
        # the front byte failed as a separator start. release it plus anything
        # after it that cannot start one either; keep the rest for rescanning
        window = self._window
        first = self._separator[0]

        count = 1
        while count < len(window) and window[count] != first:
            count += 1

        self._write(sink, bytes(islice(window, 0, count)))
        for _ in range(count):
            window.popleft()

    def _write(self, sink, data: bytes):
        if len(data) > 0:
            sink.write(data)

    def _end(self) -> SplitType:
        self._eof = True
        if self._debug:
            PrintColor.CYAN("byte stream splitter reached end of stream")
        return SplitType.SUFFIX
