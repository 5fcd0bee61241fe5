"""Single bigram occurrence record."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BigramObservation:
    """A two-character sequence and the number of times it was seen.

    Equality and hashing only consider ``pair`` so observations can be looked
    up by bigram regardless of their count.
    """

    pair: str
    count: int = field(default=0, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pair, str) or len(self.pair) != 2:
            raise ValueError(f"A bigram must be exactly two characters, got {self.pair!r}.")
        if self.count < 0:
            raise ValueError(f"Bigram count cannot be negative, got {self.count}.")

    def incremented(self, amount: int = 1) -> "BigramObservation":
        """Return a copy with ``amount`` added to the count."""
        if amount < 0:
            raise ValueError("Increment amount cannot be negative.")
        return BigramObservation(self.pair, self.count + amount)


__all__ = ["BigramObservation"]
