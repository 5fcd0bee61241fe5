"""Construction policies selecting which part of a corpus a profile covers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np


def _check_limit(value: Optional[int], name: str) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{name} cannot be negative, got {value}.")


@dataclass(frozen=True)
class Unrestricted:
    """Consume the whole corpus."""


@dataclass(frozen=True)
class WordBounded:
    """Read lines in order until ``word_limit`` words have been taken."""

    word_limit: int

    def __post_init__(self) -> None:
        _check_limit(self.word_limit, "word_limit")


@dataclass(frozen=True)
class RandomizedWordBounded:
    """Draw lines at random, without replacement, until ``word_limit`` words are taken.

    ``word_limit=None`` means no budget, in which case the corpus is read in order.
    """

    word_limit: Optional[int]
    rng: np.random.Generator = field(default_factory=np.random.default_rng, compare=False)

    def __post_init__(self) -> None:
        _check_limit(self.word_limit, "word_limit")


@dataclass(frozen=True)
class LineRangeBounded:
    """Skip ``start`` lines, then read at most ``limit`` lines (all remaining if None)."""

    start: int = 0
    limit: Optional[int] = None

    def __post_init__(self) -> None:
        _check_limit(self.start, "start")
        _check_limit(self.limit, "limit")


ConstructionPolicy = Union[Unrestricted, WordBounded, RandomizedWordBounded, LineRangeBounded]

UNRESTRICTED = Unrestricted()


__all__ = [
    "ConstructionPolicy",
    "LineRangeBounded",
    "RandomizedWordBounded",
    "UNRESTRICTED",
    "Unrestricted",
    "WordBounded",
]
