"""Rank-ordered bigram frequency table for one corpus or sample."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .observation import BigramObservation

# Bigrams seen fewer times than this are dropped once a profile is built.
CLEANING_THRESHOLD = 2


def rank_key(entry: BigramObservation) -> Tuple[int, str]:
    """Sort key giving non-increasing counts, ties broken lexicographically."""
    return (-entry.count, entry.pair)


def _non_negative(value: int, name: str) -> int:
    if value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}.")
    return int(value)


class Profile:
    """Cleaned, rank-sorted bigram counts labelled with a language.

    Entries are kept in rank order (highest count first). The table is filled
    by :class:`~src.profiles.builder.ProfileBuilder` and is read-only for
    everyone else; only merging and resampling replace its contents.
    """

    def __init__(
        self,
        language: str,
        entries: Iterable[BigramObservation] = (),
        *,
        word_count: int = 0,
        line_count: int = 0,
        source_id: str = "",
    ) -> None:
        self._language = language
        self._source_id = source_id
        self._entries: Tuple[BigramObservation, ...] = ()
        self._index: Dict[str, int] = {}
        self._word_count = 0
        self._line_count = 0
        self._replace_entries(entries, word_count=word_count, line_count=line_count)

    @classmethod
    def from_counts(
        cls,
        language: str,
        counts: Mapping[str, int],
        *,
        word_count: int = 0,
        line_count: int = 0,
        source_id: str = "",
        threshold: int = CLEANING_THRESHOLD,
    ) -> "Profile":
        """Build a profile from raw bigram counts, dropping those below ``threshold``."""
        entries = [BigramObservation(pair, count) for pair, count in counts.items() if count >= threshold]
        return cls(
            language,
            entries,
            word_count=word_count,
            line_count=line_count,
            source_id=source_id,
        )

    # ------------------------------------------------------------------
    # Accessors

    @property
    def language(self) -> str:
        return self._language

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def entries(self) -> Tuple[BigramObservation, ...]:
        return self._entries

    @property
    def word_count(self) -> int:
        return self._word_count

    @property
    def line_count(self) -> int:
        return self._line_count

    @property
    def total_count(self) -> int:
        """Sum of all retained bigram counts."""
        return sum(entry.count for entry in self._entries)

    def pairs(self) -> Tuple[str, ...]:
        return tuple(entry.pair for entry in self._entries)

    def count_of(self, pair: str) -> int:
        """Count recorded for ``pair``, or 0 if it is not in the profile."""
        rank = self._index.get(pair)
        return 0 if rank is None else self._entries[rank].count

    def rank_of(self, pair: str) -> Optional[int]:
        """Zero-based rank of ``pair``, or None if it is not in the profile."""
        return self._index.get(pair)

    def top(self, n: int) -> Tuple[BigramObservation, ...]:
        return self._entries[: max(n, 0)]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[BigramObservation]:
        return iter(self._entries)

    def __contains__(self, pair: object) -> bool:
        return pair in self._index

    def __repr__(self) -> str:
        return (
            f"Profile(language={self._language!r}, source_id={self._source_id!r}, "
            f"entries={len(self._entries)}, words={self._word_count}, lines={self._line_count})"
        )

    # ------------------------------------------------------------------
    # Package-internal mutation (construction, merge, resampling)

    def _replace_entries(
        self,
        entries: Iterable[BigramObservation],
        *,
        word_count: int,
        line_count: int,
    ) -> None:
        ordered = tuple(sorted(entries, key=rank_key))
        index: Dict[str, int] = {}
        for rank, entry in enumerate(ordered):
            if entry.pair in index:
                raise ValueError(f"Duplicate bigram {entry.pair!r} in profile.")
            index[entry.pair] = rank
        self._word_count = _non_negative(word_count, "word_count")
        self._line_count = _non_negative(line_count, "line_count")
        self._entries = ordered
        self._index = index

    def _consume(self) -> None:
        """Empty the profile after its contents were handed to another one."""
        self._replace_entries((), word_count=0, line_count=0)


__all__ = ["CLEANING_THRESHOLD", "Profile", "rank_key"]
