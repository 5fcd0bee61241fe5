"""Combine two profiles by accumulating their bigram counts."""

from __future__ import annotations

from typing import Dict

from .observation import BigramObservation
from .profile import Profile


def merge_profiles(source: Profile, target: Profile) -> Profile:
    """Fold ``source`` into ``target`` and return ``target``.

    Counts of shared bigrams are added, bigrams only in ``source`` are appended,
    and word/line counters are summed. ``target`` is re-ranked afterwards so it
    stays usable for rank distances. ``source`` is emptied: its contents now
    belong to ``target``.
    """
    if source is target:
        raise ValueError("Cannot merge a profile into itself.")

    merged: Dict[str, BigramObservation] = {entry.pair: entry for entry in target.entries}
    for entry in source.entries:
        existing = merged.get(entry.pair)
        merged[entry.pair] = existing.incremented(entry.count) if existing else entry

    target._replace_entries(
        merged.values(),
        word_count=target.word_count + source.word_count,
        line_count=target.line_count + source.line_count,
    )
    source._consume()
    return target


__all__ = ["merge_profiles"]
