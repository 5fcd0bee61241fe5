"""Parameters for the language identification experiment suite."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class ExperimentConfig:
    """Configuration for `run_experiment_suite`."""

    folds: int = 10
    variable_training_runs: int = 100
    minimum_sample_trials: int = 1000
    accept_accuracy: float = 0.95
    train_fraction: float = 0.9
    seed: Optional[int] = None

    def validate(self) -> None:
        if self.folds < 1:
            raise ValueError("folds must be at least 1.")
        if self.variable_training_runs < 1:
            raise ValueError("variable_training_runs must be at least 1.")
        if self.minimum_sample_trials < 1:
            raise ValueError("minimum_sample_trials must be at least 1.")
        if not 0.0 <= self.accept_accuracy <= 1.0:
            raise ValueError("accept_accuracy must fall within [0, 1].")
        if not 0.0 <= self.train_fraction <= 1.0:
            raise ValueError("train_fraction must fall within [0, 1].")

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)


__all__ = ["ExperimentConfig"]
