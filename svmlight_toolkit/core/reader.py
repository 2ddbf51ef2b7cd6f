"""Lazy row sequences over SVMLight sources.

`open_rows` opens a file and returns a `RowSequence`: a forward-only iterator
that parses one line per pull and silently skips lines that fail to decode.
The file is closed when the sequence is exhausted, when `close()` is called, or
when a `with` block around the sequence exits.

Typical use:

    with open_rows("train.svm", DisjointClassification(), SparseFeatures(1000)) as rows:
        for row in rows:
            ...
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Iterable, Iterator, Optional, Union

from .parser import LineParser
from .rows import Row


def _strip_terminator(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class RowSequence:
    """Iterator of successfully parsed rows.

    Malformed lines are counted in `n_skipped` but never yielded. A read error
    (OSError, undecodable bytes) ends the sequence the same way end-of-file does.
    Once exhausted the sequence stays exhausted.
    """

    def __init__(
        self,
        lines: Iterable[Union[str, bytes]],
        parser: LineParser,
        *,
        source: Optional[BinaryIO] = None,
        encoding: str = "utf-8",
        name: Optional[str] = None,
    ) -> None:
        self.parser = parser
        self.name = name
        self.encoding = encoding
        self.n_lines = 0
        self.n_rows = 0
        self._lines: Iterator[Union[str, bytes]] = iter(lines)
        self._source = source
        self._exhausted = False

    @property
    def n_skipped(self) -> int:
        return self.n_lines - self.n_rows

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def __iter__(self) -> "RowSequence":
        return self

    def __next__(self) -> Row:
        while not self._exhausted:
            try:
                raw = next(self._lines)
                line = raw.decode(self.encoding) if isinstance(raw, bytes) else raw
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError):
                break

            self.n_lines += 1
            row = self.parser.parse(_strip_terminator(line))
            if row is not None:
                self.n_rows += 1
                return row

        self.close()
        raise StopIteration

    def close(self) -> None:
        self._exhausted = True
        if self._source is not None:
            self._source.close()
            self._source = None

    def __enter__(self) -> "RowSequence":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, "_source", None) is not None:
            self._source.close()


def open_rows(path: Union[str, Path], target: Any, features: Any, *, encoding: str = "utf-8") -> RowSequence:
    """Open an SVMLight file and return a lazy `RowSequence` over it.

    Raises OSError (e.g. FileNotFoundError) if the file cannot be opened; this is
    the only error surfaced to the caller.
    """

    f = open(path, "rb")
    return RowSequence(f, LineParser(target, features), source=f, encoding=encoding, name=str(path))


def parse_lines(lines: Iterable[str], target: Any, features: Any) -> RowSequence:
    """Row sequence over any iterable of lines (lists, generators, text files)."""

    return RowSequence(lines, LineParser(target, features))
