"""Out-of-place rank distance between two bigram profiles."""

from __future__ import annotations

from typing import Dict

from src.profiles.profile import Profile

# Added for every test bigram missing from the compared training prefix.
MISSING_PENALTY = 1000
# Added per test bigram that has no training rank to compare against at all.
OVERFLOW_PENALTY = 1000


def rank_distance(train: Profile, test: Profile) -> int:
    """Compute the out-of-place distance of ``test`` from ``train``.

    Both profiles must be rank-sorted. Only the first ``L`` entries of each are
    compared, where ``L`` is the test size capped at the training size; every
    test entry beyond the training size costs ``OVERFLOW_PENALTY``. Within the
    compared prefix a test bigram at rank ``i`` contributes ``|i - j|`` when the
    training prefix holds it at rank ``j`` and ``MISSING_PENALTY`` otherwise.

    The measure is asymmetric: ``rank_distance(a, b)`` and
    ``rank_distance(b, a)`` generally differ.
    """
    compared = len(test)
    distance = 0
    if compared > len(train):
        distance += OVERFLOW_PENALTY * (compared - len(train))
        compared = len(train)

    train_ranks: Dict[str, int] = {
        entry.pair: rank for rank, entry in enumerate(train.entries[:compared])
    }
    for rank, entry in enumerate(test.entries[:compared]):
        train_rank = train_ranks.get(entry.pair)
        if train_rank is None:
            distance += MISSING_PENALTY
        else:
            distance += abs(rank - train_rank)
    return distance


__all__ = ["MISSING_PENALTY", "OVERFLOW_PENALTY", "rank_distance"]
