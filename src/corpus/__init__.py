from .config import DEFAULT_OUTPUT_ROOT, LANGUAGES, display_name, output_dirs
from .preprocess import split_corpus, split_indices, strip_tags
from .source import (
    CorpusSource,
    CorpusUnavailableError,
    InMemorySource,
    TextFileSource,
    line_count,
    read_lines,
    word_count,
)

__all__ = [
    "CorpusSource",
    "CorpusUnavailableError",
    "DEFAULT_OUTPUT_ROOT",
    "InMemorySource",
    "LANGUAGES",
    "TextFileSource",
    "display_name",
    "line_count",
    "output_dirs",
    "read_lines",
    "split_corpus",
    "split_indices",
    "strip_tags",
    "word_count",
]
