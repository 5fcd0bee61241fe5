"""Build bigram profiles from text sources under a construction policy."""

from __future__ import annotations

import re
from collections import Counter
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterator, Optional, Tuple

import numpy as np

from src.corpus.source import CorpusSource, read_lines

from .policy import (
    ConstructionPolicy,
    LineRangeBounded,
    RandomizedWordBounded,
    Unrestricted,
    WordBounded,
)
from .profile import CLEANING_THRESHOLD, Profile

WORD_PATTERN = re.compile(r"\S+")


def iter_bigrams(line: str) -> Iterator[str]:
    """Yield every consecutive two-character window of ``line``, whitespace included."""
    for idx in range(len(line) - 1):
        yield line[idx:idx + 2]


def truncate_words(line: str, keep: int) -> str:
    """Cut ``line`` after its ``keep``-th word, keeping the spacing between retained words."""
    if keep <= 0:
        return ""
    words = list(WORD_PATTERN.finditer(line))
    if keep >= len(words):
        return line
    return line[words[0].start():words[keep - 1].end()]


@dataclass
class _Accumulator:
    """Running state for one construction pass."""

    word_limit: Optional[int] = None
    counts: Counter = field(default_factory=Counter)
    word_count: int = 0
    line_count: int = 0

    def consume(self, line: str) -> bool:
        """Count bigrams of ``line``; return True once the word budget is exhausted."""
        self.line_count += 1
        words = len(line.split())
        stop = False
        if self.word_limit is not None and self.word_count + words > self.word_limit:
            line = truncate_words(line, self.word_limit - self.word_count)
            self.word_count = self.word_limit
            stop = True
        else:
            self.word_count += words
        self.counts.update(iter_bigrams(line))
        return stop

    def run(self, lines: Iterator[str]) -> "_Accumulator":
        for line in lines:
            if self.consume(line):
                break
        return self


class ProfileBuilder:
    """Turns one corpus into profiles labelled with ``language``."""

    def __init__(
        self,
        source: CorpusSource,
        language: str,
        threshold: int = CLEANING_THRESHOLD,
    ) -> None:
        self.source = source
        self.language = language
        self.threshold = threshold

    def build(self, policy: Optional[ConstructionPolicy] = None) -> Profile:
        """Run one construction pass and return the cleaned, rank-sorted profile."""
        acc = self._populate(policy or Unrestricted())
        return Profile.from_counts(
            self.language,
            acc.counts,
            word_count=acc.word_count,
            line_count=acc.line_count,
            source_id=self.source.source_id,
            threshold=self.threshold,
        )

    def resample(
        self,
        profile: Profile,
        word_limit: Optional[int],
        rng: np.random.Generator,
    ) -> Profile:
        """Refill ``profile`` in place with a fresh random draw of ``word_limit`` words."""
        if word_limit is not None and word_limit < 0:
            raise ValueError(f"word_limit cannot be negative, got {word_limit}.")
        if profile.source_id != self.source.source_id:
            raise ValueError(
                f"Profile was built from {profile.source_id!r}, not {self.source.source_id!r}."
            )
        acc = self._populate(RandomizedWordBounded(word_limit, rng))
        fresh = Profile.from_counts(self.language, acc.counts, threshold=self.threshold)
        profile._replace_entries(fresh.entries, word_count=acc.word_count, line_count=acc.line_count)
        return profile

    def _populate(self, policy: ConstructionPolicy) -> _Accumulator:
        lines, word_limit = self._select_lines(policy)
        return _Accumulator(word_limit=word_limit).run(lines)

    def _select_lines(self, policy: ConstructionPolicy) -> Tuple[Iterator[str], Optional[int]]:
        if isinstance(policy, Unrestricted):
            return self.source.iter_lines(), None
        if isinstance(policy, WordBounded):
            return self.source.iter_lines(), policy.word_limit
        if isinstance(policy, RandomizedWordBounded):
            if policy.word_limit is None:
                return self.source.iter_lines(), None
            pool = read_lines(self.source)
            order = policy.rng.permutation(len(pool))
            return (pool[int(idx)] for idx in order), policy.word_limit
        if isinstance(policy, LineRangeBounded):
            stop = None if policy.limit is None else policy.start + policy.limit
            return islice(self.source.iter_lines(), policy.start, stop), None
        raise ValueError(f"Unsupported construction policy {policy!r}")


def build_profile(
    source: CorpusSource,
    language: str,
    policy: Optional[ConstructionPolicy] = None,
) -> Profile:
    """One-shot helper around :class:`ProfileBuilder`."""
    return ProfileBuilder(source, language).build(policy)


__all__ = [
    "ProfileBuilder",
    "WORD_PATTERN",
    "build_profile",
    "iter_bigrams",
    "truncate_words",
]
