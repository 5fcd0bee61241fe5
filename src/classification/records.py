"""Shared records for distance labels and classification outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class DistanceLabel:
    """Rank distance between a test sample and one candidate language."""

    language: str
    distance: int

    def __post_init__(self) -> None:
        if self.distance < 0:
            raise ValueError(f"Distance cannot be negative, got {self.distance}.")


@dataclass(frozen=True)
class Classification:
    """Outcome of choosing the nearest candidate language."""

    language: Optional[str]
    distance: int
    runner_up_distance: Optional[int]
    labels: Tuple[DistanceLabel, ...] = ()

    @property
    def decided(self) -> bool:
        """False when the two nearest candidates are tied."""
        return self.language is not None
