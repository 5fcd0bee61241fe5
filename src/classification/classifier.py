"""Nearest-profile language classification with tie detection."""

from __future__ import annotations

from typing import List, Sequence

from src.metrics.rank_distance import rank_distance
from src.profiles.profile import Profile

from .records import Classification, DistanceLabel


def classify(labels: Sequence[DistanceLabel]) -> Classification:
    """Pick the language with the lowest distance.

    The first minimum wins the scan. That single label is then set aside by
    position and the lowest remaining distance is compared against it; equal
    distances mean the sample cannot be attributed, and the result carries no
    language.
    """
    if not labels:
        raise ValueError("Cannot classify without any distance labels.")

    best_idx = 0
    for idx, label in enumerate(labels):
        if label.distance < labels[best_idx].distance:
            best_idx = idx
    best = labels[best_idx]

    remainder = [label.distance for idx, label in enumerate(labels) if idx != best_idx]
    runner_up = min(remainder) if remainder else None

    language = None if runner_up == best.distance else best.language
    return Classification(
        language=language,
        distance=best.distance,
        runner_up_distance=runner_up,
        labels=tuple(labels),
    )


def label_distances(test: Profile, candidates: Sequence[Profile]) -> List[DistanceLabel]:
    """Measure ``test`` against every candidate training profile."""
    return [DistanceLabel(candidate.language, rank_distance(candidate, test)) for candidate in candidates]


def predict_language(test: Profile, candidates: Sequence[Profile]) -> Classification:
    """Classify ``test`` against the given training profiles."""
    return classify(label_distances(test, candidates))


__all__ = ["classify", "label_distances", "predict_language"]
