"""Contiguous k-fold partitioning of a corpus into held-in/held-out profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from src.corpus.source import CorpusSource, line_count

from .builder import ProfileBuilder
from .merge import merge_profiles
from .policy import LineRangeBounded
from .profile import Profile


@dataclass(frozen=True)
class FoldPair:
    """Training and evaluation profiles for one cross-validation fold."""

    index: int
    training: Profile
    held_out: Profile
    held_out_range: Tuple[int, int]


def build_folds(source: CorpusSource, language: str, k: int) -> List[FoldPair]:
    """Split ``source`` into ``k`` contiguous line segments.

    Fold ``i`` holds out lines ``[i*s, (i+1)*s)`` where ``s = lines // k``; its
    training profile merges everything before and after that segment. Lines
    left over by the integer division always stay on the training side.
    """
    if k < 1:
        raise ValueError(f"Number of folds must be at least 1, got {k}.")

    segment = line_count(source) // k
    builder = ProfileBuilder(source, language)

    folds: List[FoldPair] = []
    for i in range(k):
        lower, upper = i * segment, (i + 1) * segment
        held_out = builder.build(LineRangeBounded(start=lower, limit=segment))
        head = builder.build(LineRangeBounded(start=0, limit=lower))
        tail = builder.build(LineRangeBounded(start=upper))
        folds.append(
            FoldPair(
                index=i,
                training=merge_profiles(head, tail),
                held_out=held_out,
                held_out_range=(lower, upper),
            )
        )
    return folds


__all__ = ["FoldPair", "build_folds"]
