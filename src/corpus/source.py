"""Line-oriented text sources that profiles are built from."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Protocol, Sequence


class CorpusUnavailableError(OSError):
    """Raised when a text source is missing or cannot be read."""


class CorpusSource(Protocol):
    """Minimal surface a profile builder needs from a corpus."""

    @property
    def source_id(self) -> str: ...

    def iter_lines(self) -> Iterator[str]: ...


def read_lines(source: CorpusSource) -> List[str]:
    """Materialize every line of ``source``."""
    return list(source.iter_lines())


def line_count(source: CorpusSource) -> int:
    """Number of lines in ``source``."""
    return sum(1 for _ in source.iter_lines())


def word_count(source: CorpusSource) -> int:
    """Number of whitespace-delimited words across all lines of ``source``."""
    return sum(len(line.split()) for line in source.iter_lines())


class TextFileSource:
    """Reads a UTF-8 (by default) text file one line at a time."""

    def __init__(self, path: Path | str, encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    @property
    def source_id(self) -> str:
        return str(self.path)

    def iter_lines(self) -> Iterator[str]:
        try:
            with self.path.open("r", encoding=self.encoding, newline=None) as handle:
                for line in handle:
                    yield line.rstrip("\r\n")
        except (OSError, UnicodeDecodeError) as exc:
            raise CorpusUnavailableError(f"Cannot read corpus {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"TextFileSource({str(self.path)!r})"


class InMemorySource:
    """Wraps an in-memory sequence of lines, mostly for tests and ad-hoc samples."""

    def __init__(self, lines: Iterable[str], source_id: str = "<memory>") -> None:
        self._lines: Sequence[str] = tuple(lines)
        self._source_id = source_id

    @property
    def source_id(self) -> str:
        return self._source_id

    def iter_lines(self) -> Iterator[str]:
        return iter(self._lines)

    @classmethod
    def from_text(cls, text: str, source_id: str = "<memory>") -> "InMemorySource":
        return cls(text.splitlines(), source_id=source_id)


__all__ = [
    "CorpusSource",
    "CorpusUnavailableError",
    "InMemorySource",
    "TextFileSource",
    "line_count",
    "read_lines",
    "word_count",
]
