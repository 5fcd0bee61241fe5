"""CSV exports for frequency tables and experiment trial logs."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, List

import pandas as pd

from src.classification.records import DistanceLabel
from src.profiles.profile import Profile

TRIAL_COLUMNS: List[str] = [
    "test_words",
    "test_language",
    "distance",
    "train_language",
    "train_words",
]


@dataclass(frozen=True)
class TrialRecord:
    """One comparison of a test profile against a training profile."""

    test_words: int
    test_language: str
    distance: int
    train_language: str
    train_words: int

    @classmethod
    def from_comparison(cls, train: Profile, test: Profile, label: DistanceLabel) -> "TrialRecord":
        return cls(
            test_words=test.word_count,
            test_language=test.language,
            distance=label.distance,
            train_language=train.language,
            train_words=train.word_count,
        )


def frequency_frame(profile: Profile) -> pd.DataFrame:
    """Bigram/count table in rank order."""
    return pd.DataFrame(
        {
            "bigram": [entry.pair for entry in profile.entries],
            "count": [entry.count for entry in profile.entries],
        }
    )


def write_frequency_table(profile: Profile, path: Path) -> Path:
    """Write ``<bigram>,<count>`` lines, most frequent first, CSV-escaping the bigram."""
    path.parent.mkdir(parents=True, exist_ok=True)
    frequency_frame(profile).to_csv(path, header=False, index=False, lineterminator="\n")
    return path


def trial_frame(records: Iterable[TrialRecord]) -> pd.DataFrame:
    rows = [asdict(record) for record in records]
    return pd.DataFrame(rows, columns=TRIAL_COLUMNS)


def write_trials(records: Iterable[TrialRecord], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    trial_frame(records).to_csv(path, index=False)
    return path


__all__ = [
    "TRIAL_COLUMNS",
    "TrialRecord",
    "frequency_frame",
    "trial_frame",
    "write_frequency_table",
    "write_trials",
]
