"""Find the smallest test sample that is still identified reliably."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from src.classification import predict_language
from src.corpus.source import CorpusSource
from src.profiles import Profile, ProfileBuilder

from .reporting import TrialRecord

TRIALS_PER_LIMIT = 1000


@dataclass(frozen=True)
class SampleProbe:
    word_limit: int
    accuracy: float


@dataclass(frozen=True)
class MinimumSampleResult:
    language: str
    minimum_words: int
    probes: Tuple[SampleProbe, ...]
    trials: Tuple[TrialRecord, ...]


def minimum_test_sample(
    source: CorpusSource,
    language: str,
    accuracy_target: float,
    training: Sequence[Profile],
    rng: np.random.Generator,
    trials: int = TRIALS_PER_LIMIT,
) -> MinimumSampleResult:
    """Halve the sample size while the classification accuracy holds.

    Starts from the full word count of ``source``. At each size, ``trials``
    random samples are drawn and classified against ``training``. The search
    stops once accuracy falls below ``accuracy_target`` or the size stops
    changing, and reports the last size that met the target (0 if none did).
    """
    if not 0.0 <= accuracy_target <= 1.0:
        raise ValueError("accuracy_target must fall within [0, 1].")
    if trials < 1:
        raise ValueError("trials must be at least 1.")

    builder = ProfileBuilder(source, language)
    sample = builder.build()
    current, previous = sample.word_count, 0
    probes: List[SampleProbe] = []
    records: List[TrialRecord] = []

    while current != previous:
        correct = 0
        for _ in tqdm(range(trials), desc=f"{language} @ {current} words", leave=False):
            builder.resample(sample, current, rng)
            result = predict_language(sample, training)
            records.extend(
                TrialRecord.from_comparison(train, sample, label)
                for train, label in zip(training, result.labels)
            )
            if result.language == language:
                correct += 1

        accuracy = correct / trials
        probes.append(SampleProbe(word_limit=current, accuracy=accuracy))
        print(f"[experiments] [{language}] With {current} words we get {accuracy * 100:.1f}%")
        if accuracy < accuracy_target:
            break
        previous = current
        current //= 2

    return MinimumSampleResult(
        language=language,
        minimum_words=previous,
        probes=tuple(probes),
        trials=tuple(records),
    )


__all__ = ["MinimumSampleResult", "SampleProbe", "TRIALS_PER_LIMIT", "minimum_test_sample"]
