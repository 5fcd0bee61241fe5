"""Corpus preparation: tag stripping and train/test splitting."""

from __future__ import annotations

import math
import re
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np
from sklearn.model_selection import train_test_split

from .source import TextFileSource, read_lines

TAG_PATTERN = re.compile(r"<.*?>")


def strip_tags(source_path: Path, target_path: Path) -> int:
    """Remove markup tags from every line, dropping lines left empty.

    Returns the number of lines written to ``target_path``.
    """
    lines = read_lines(TextFileSource(source_path))
    kept: List[str] = []
    for line in lines:
        cleaned = TAG_PATTERN.sub("", line).strip()
        if cleaned:
            kept.append(cleaned)

    target_path.parent.mkdir(parents=True, exist_ok=True)
    target_path.write_text("".join(f"{line}\n" for line in kept), encoding="utf-8")
    print(f"[corpus] Stripped tags from {source_path} ({len(kept)} lines) → {target_path}")
    return len(kept)


def split_indices(
    total: int,
    train_fraction: float,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[List[int], List[int]]:
    """Randomly assign ``total`` line indices to train/test partitions.

    The train partition receives ``floor(total * train_fraction)`` indices; both
    partitions keep ascending order.
    """
    if not 0.0 <= train_fraction <= 1.0:
        raise ValueError("train_fraction must fall within [0, 1].")
    if total < 0:
        raise ValueError("total cannot be negative.")

    train_size = math.floor(total * train_fraction)
    indices = list(range(total))
    if train_size == 0:
        return [], indices
    if train_size == total:
        return indices, []

    generator = rng if rng is not None else np.random.default_rng()
    train_idx, test_idx = train_test_split(
        indices,
        train_size=train_size,
        shuffle=True,
        random_state=int(generator.integers(0, 2**32 - 1)),
    )
    return sorted(train_idx), sorted(test_idx)


def split_corpus(
    source_path: Path,
    train_path: Path,
    test_path: Path,
    train_fraction: float = 0.9,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[int, int]:
    """Split a corpus file line-wise into train and test files.

    Returns the number of lines written to each file.
    """
    lines = read_lines(TextFileSource(source_path))
    train_idx, test_idx = split_indices(len(lines), train_fraction, rng)

    for path, selected in ((train_path, train_idx), (test_path, test_idx)):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("".join(f"{lines[i]}\n" for i in selected), encoding="utf-8")

    print(
        f"[corpus] Split {source_path} into {len(train_idx)} train / {len(test_idx)} test lines"
    )
    return len(train_idx), len(test_idx)


__all__ = ["TAG_PATTERN", "split_corpus", "split_indices", "strip_tags"]
