from typing import Iterator

from bytesplit.config import Config
from bytesplit.splitter import ByteStreamSplitter, SplitType
from common.decorator import benchmark

class FileSplitter:
    """
    with FileSplitter("./notes.txt") as runs:
        for run in runs: ...
    """

    def __init__(self, file: str, separator=b"\n\n", read_size=2048, prepend_separator=False, strip=False, debug=False):
        self._path = file
        self._separator = separator
        self._read_size = read_size
        self._prepend = prepend_separator
        self._strip = strip
        self._debug = debug
        self._file = None

    def __enter__(self):
        self._file = open(self._path, "rb") # let errors go through

        try:
            splitter = ByteStreamSplitter(
                self._file,
                self._separator,
                read_size=self._read_size,
                prepend_separator=self._prepend,
                debug=self._debug
            )
        except (TypeError, ValueError):
            self._file.close()
            raise

        if self._strip:
            return _StrippedRuns(splitter)
        return splitter

    def __exit__(self, type, value, traceback):
        self._file.close()

class _StrippedRuns:
    def __init__(self, splitter: ByteStreamSplitter):
        self._splitter = splitter

    def labeled(self) -> Iterator[tuple[bytes, SplitType]]:
        for run, kind in self._splitter.labeled():
            run = run.strip()

            # separator right before EOF (w/ whitespaces in between) leaves nothing to output
            if run == b"" and kind == SplitType.SUFFIX:
                return

            yield (run, kind)

    def __iter__(self) -> Iterator[bytes]:
        for run, _ in self.labeled():
            yield run

@benchmark("split file", lambda: Config.BENCHMARK is True)
def split_file(file: str, separator=b"\n\n", read_size=2048, prepend_separator=False, strip=False) -> list[bytes]:
    with FileSplitter(file, separator, read_size, prepend_separator, strip) as runs:
        return list(runs)
