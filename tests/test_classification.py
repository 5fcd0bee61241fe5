"""Tests for distance labels, tie-aware classification and prediction."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Sequence, Tuple

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.classification import Classification, DistanceLabel, classify, label_distances, predict_language
from src.profiles import BigramObservation, Profile


def _labels(*pairs: Tuple[str, int]) -> list[DistanceLabel]:
    return [DistanceLabel(language, distance) for language, distance in pairs]


def _profile(language: str, ranked: Sequence[Tuple[str, int]]) -> Profile:
    return Profile(language, [BigramObservation(pair, count) for pair, count in ranked])


# ---------------------------------------------------------------------------
# DistanceLabel


def test_distance_label_rejects_negative_distance() -> None:
    with pytest.raises(ValueError):
        DistanceLabel("A", -1)


# ---------------------------------------------------------------------------
# classify


def test_tied_minimum_is_undecided() -> None:
    result = classify(_labels(("A", 5), ("B", 5), ("C", 9)))
    assert isinstance(result, Classification)
    assert result.language is None
    assert result.decided is False
    assert result.distance == 5
    assert result.runner_up_distance == 5


def test_unique_minimum_is_returned() -> None:
    result = classify(_labels(("A", 2), ("B", 9), ("C", 9)))
    assert result.language == "A"
    assert result.decided is True
    assert result.runner_up_distance == 9


def test_identical_labels_are_removed_one_at_a_time() -> None:
    result = classify(_labels(("A", 4), ("A", 4), ("B", 8)))
    assert result.decided is False


def test_first_minimum_wins_the_scan() -> None:
    result = classify(_labels(("B", 1), ("A", 2), ("C", 3)))
    assert result.language == "B"
    tied_later = classify(_labels(("B", 3), ("A", 1), ("C", 1)))
    assert tied_later.language is None


def test_single_label_is_decided() -> None:
    result = classify(_labels(("A", 7)))
    assert result.language == "A"
    assert result.runner_up_distance is None


def test_classify_does_not_modify_input() -> None:
    labels = _labels(("A", 2), ("B", 3))
    classify(labels)
    assert len(labels) == 2


def test_classify_requires_labels() -> None:
    with pytest.raises(ValueError):
        classify([])


# ---------------------------------------------------------------------------
# Prediction against profiles


def test_predict_language_worked_example() -> None:
    train_a = _profile("A", [("th", 50), ("he", 40), ("in", 10)])
    train_b = _profile("B", [("he", 45), ("th", 30), ("er", 12)])
    sample = _profile("S", [("th", 9), ("he", 7)])

    labels = label_distances(sample, [train_a, train_b])
    assert labels == _labels(("A", 0), ("B", 2))

    result = predict_language(sample, [train_a, train_b])
    assert result.language == "A"
    assert result.labels == tuple(labels)
