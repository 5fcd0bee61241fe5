"""k-fold cross-validation of one language against fixed competitor profiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from tqdm import tqdm

from src.classification import predict_language
from src.corpus.source import CorpusSource
from src.profiles import Profile, build_folds

from .reporting import TrialRecord


@dataclass(frozen=True)
class FoldOutcome:
    """Prediction made for a single held-out segment."""

    index: int
    held_out_range: Tuple[int, int]
    predicted: Optional[str]
    correct: bool


@dataclass(frozen=True)
class CrossValidationResult:
    language: str
    outcomes: Tuple[FoldOutcome, ...]
    trials: Tuple[TrialRecord, ...]

    @property
    def folds(self) -> int:
        return len(self.outcomes)

    @property
    def correct(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.correct)

    @property
    def pass_rate(self) -> float:
        """Percentage of folds identified correctly, rounded to a whole number."""
        if not self.outcomes:
            return 0.0
        return float(round(self.correct / self.folds * 100.0))


def cross_validate(
    source: CorpusSource,
    language: str,
    folds: int,
    other_training: Sequence[Profile],
) -> CrossValidationResult:
    """Classify every held-out fold of ``source`` against the competitors plus its held-in profile.

    Undecided predictions count as failures.
    """
    fold_pairs = build_folds(source, language, folds)
    outcomes: List[FoldOutcome] = []
    trials: List[TrialRecord] = []

    for fold in tqdm(fold_pairs, desc=f"Cross-validating {language}", leave=False):
        candidates = [*other_training, fold.training]
        result = predict_language(fold.held_out, candidates)
        trials.extend(
            TrialRecord.from_comparison(candidate, fold.held_out, label)
            for candidate, label in zip(candidates, result.labels)
        )
        outcomes.append(
            FoldOutcome(
                index=fold.index,
                held_out_range=fold.held_out_range,
                predicted=result.language,
                correct=result.language == language,
            )
        )

    return CrossValidationResult(language=language, outcomes=tuple(outcomes), trials=tuple(trials))


__all__ = ["CrossValidationResult", "FoldOutcome", "cross_validate"]
