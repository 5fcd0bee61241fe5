"""Classify a fixed test sample against training profiles of growing size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from src.classification import DistanceLabel, classify, label_distances
from src.corpus.source import CorpusSource, word_count
from src.metrics.rank_distance import rank_distance
from src.profiles import Profile, ProfileBuilder, RandomizedWordBounded

from .reporting import TrialRecord


@dataclass(frozen=True)
class TrainingSizeOutcome:
    word_limit: int
    train_words: int
    distance: int
    predicted: Optional[str]
    correct: bool


@dataclass(frozen=True)
class VariableTrainingResult:
    language: str
    step: int
    outcomes: Tuple[TrainingSizeOutcome, ...]
    trials: Tuple[TrialRecord, ...]

    @property
    def failures(self) -> Tuple[TrainingSizeOutcome, ...]:
        return tuple(outcome for outcome in self.outcomes if not outcome.correct)


def variable_training_run(
    source: CorpusSource,
    test_sample: Profile,
    runs: int,
    other_training: Sequence[Profile],
    rng: np.random.Generator,
) -> VariableTrainingResult:
    """Grow a randomly sampled training profile for the test sample's language.

    The training budget advances by ``words(source) // runs`` words per step,
    for ``runs - 1`` steps. Competitor distances are measured once up front.
    """
    if runs < 1:
        raise ValueError(f"runs must be at least 1, got {runs}.")

    language = test_sample.language
    step = word_count(source) // runs

    base_labels = label_distances(test_sample, other_training)
    trials: List[TrialRecord] = [
        TrialRecord.from_comparison(train, test_sample, label)
        for train, label in zip(other_training, base_labels)
    ]
    outcomes: List[TrainingSizeOutcome] = []
    if step == 0:
        return VariableTrainingResult(language=language, step=0, outcomes=(), trials=tuple(trials))

    builder = ProfileBuilder(source, language)
    for limit in tqdm(range(step, step * runs, step), desc=f"Training sizes {language}", leave=False):
        train = builder.build(RandomizedWordBounded(limit, rng))
        label = DistanceLabel(train.language, rank_distance(train, test_sample))
        trials.append(TrialRecord.from_comparison(train, test_sample, label))

        result = classify([*base_labels, label])
        correct = result.language == language
        if not correct:
            print(
                f"[experiments] {language} model with {train.word_count} words "
                f"predicted {result.language or 'undecided'} instead."
            )
        outcomes.append(
            TrainingSizeOutcome(
                word_limit=limit,
                train_words=train.word_count,
                distance=label.distance,
                predicted=result.language,
                correct=correct,
            )
        )

    return VariableTrainingResult(
        language=language,
        step=step,
        outcomes=tuple(outcomes),
        trials=tuple(trials),
    )


__all__ = ["TrainingSizeOutcome", "VariableTrainingResult", "variable_training_run"]
