"""Tests for bigram observations, profile construction, merging and folds."""

from __future__ import annotations

from pathlib import Path
import sys

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.corpus.source import CorpusUnavailableError, InMemorySource, TextFileSource
from src.profiles import (
    BigramObservation,
    LineRangeBounded,
    Profile,
    ProfileBuilder,
    RandomizedWordBounded,
    WordBounded,
    build_folds,
    build_profile,
    merge_profiles,
    rank_key,
    truncate_words,
)


SAMPLE_TEXT = [
    "the quick brown fox jumps over the lazy dog",
    "then the other fox thought about the weather",
    "there is nothing on the other side of the hill",
    "they threw the ball to the three brothers",
]


def _assert_profile_invariants(profile: Profile) -> None:
    pairs = [entry.pair for entry in profile.entries]
    assert len(pairs) == len(set(pairs))
    assert all(entry.count >= 2 for entry in profile.entries)
    assert list(profile.entries) == sorted(profile.entries, key=rank_key)


# ---------------------------------------------------------------------------
# BigramObservation


def test_observation_requires_two_characters() -> None:
    with pytest.raises(ValueError):
        BigramObservation("a")
    with pytest.raises(ValueError):
        BigramObservation("abc")


def test_observation_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        BigramObservation("ab", -1)


def test_observation_equality_ignores_count() -> None:
    assert BigramObservation("ab", 3) == BigramObservation("ab", 9)
    assert BigramObservation("ab", 3) != BigramObservation("ba", 3)
    assert len({BigramObservation("ab", 1), BigramObservation("ab", 4)}) == 1


def test_observation_incremented_returns_new_count() -> None:
    original = BigramObservation("ab", 2)
    bumped = original.incremented(5)
    assert bumped.count == 7
    assert original.count == 2


# ---------------------------------------------------------------------------
# Profile


def test_profile_orders_entries_and_breaks_ties_lexicographically() -> None:
    profile = Profile(
        "ENG",
        [BigramObservation("zz", 4), BigramObservation("bb", 4), BigramObservation("aa", 9)],
    )
    assert profile.pairs() == ("aa", "bb", "zz")
    assert profile.rank_of("zz") == 2
    assert profile.count_of("bb") == 4
    assert profile.count_of("qq") == 0
    assert "aa" in profile
    assert profile.total_count == 17


def test_profile_rejects_duplicates_and_negative_counters() -> None:
    with pytest.raises(ValueError):
        Profile("ENG", [BigramObservation("ab", 2), BigramObservation("ab", 3)])
    with pytest.raises(ValueError):
        Profile("ENG", word_count=-1)
    with pytest.raises(ValueError):
        Profile("ENG", line_count=-5)


def test_from_counts_drops_rare_bigrams() -> None:
    profile = Profile.from_counts("ENG", {"ab": 3, "cd": 1, "ef": 2})
    assert profile.pairs() == ("ab", "ef")


# ---------------------------------------------------------------------------
# ProfileBuilder


def test_build_counts_every_window_including_whitespace() -> None:
    profile = build_profile(InMemorySource(["abab", "ab"]), "ENG")
    assert profile.pairs() == ("ab",)
    assert profile.count_of("ab") == 3
    assert profile.word_count == 2
    assert profile.line_count == 2

    spaced = build_profile(InMemorySource(["a b a b"]), "ENG")
    assert spaced.count_of("a ") == 2
    assert spaced.count_of(" b") == 2


def test_built_profile_is_clean_and_sorted() -> None:
    profile = build_profile(InMemorySource(SAMPLE_TEXT, source_id="sample"), "ENG")
    _assert_profile_invariants(profile)
    assert profile.language == "ENG"
    assert profile.source_id == "sample"
    assert profile.entries[0].pair in {"th", "he"}


def test_tied_counts_are_ranked_by_bigram() -> None:
    first = build_profile(InMemorySource(["abab cdcd"]), "ENG")
    second = build_profile(InMemorySource(["cdcd abab"]), "ENG")
    assert first.pairs() == ("ab", "cd")
    assert second.pairs() == ("ab", "cd")


def test_truncate_words_keeps_spacing_between_kept_words() -> None:
    assert truncate_words("a  b   c", 2) == "a  b"
    assert truncate_words("  one two", 1) == "one"
    assert truncate_words("one two", 0) == ""
    assert truncate_words("one two", 5) == "one two"


def test_word_bounded_truncates_last_line() -> None:
    source = InMemorySource(["aaaa", "bbbb cccc", "dddd"])

    none_left = ProfileBuilder(source, "ENG").build(WordBounded(1))
    assert none_left.word_count == 1
    assert none_left.line_count == 2
    assert none_left.pairs() == ("aa",)

    one_left = ProfileBuilder(source, "ENG").build(WordBounded(2))
    assert one_left.word_count == 2
    assert one_left.line_count == 2
    assert "bb" in one_left
    assert "cc" not in one_left
    assert "dd" not in one_left


def test_word_bounded_never_exceeds_budget() -> None:
    source = InMemorySource(SAMPLE_TEXT)
    for limit in (0, 3, 9, 10, 17, 1000):
        profile = ProfileBuilder(source, "ENG").build(WordBounded(limit))
        assert profile.word_count <= limit
        assert profile.line_count <= len(SAMPLE_TEXT)
        _assert_profile_invariants(profile)


def test_line_range_bounded_reads_requested_lines() -> None:
    source = InMemorySource(["aaaa", "bbbb", "cccc", "dddd"])
    profile = ProfileBuilder(source, "ENG").build(LineRangeBounded(start=1, limit=2))
    assert set(profile.pairs()) == {"bb", "cc"}
    assert profile.line_count == 2

    tail = ProfileBuilder(source, "ENG").build(LineRangeBounded(start=3))
    assert tail.pairs() == ("dd",)

    past_end = ProfileBuilder(source, "ENG").build(LineRangeBounded(start=10))
    assert len(past_end) == 0
    assert past_end.line_count == 0


def test_policies_reject_negative_limits() -> None:
    with pytest.raises(ValueError):
        WordBounded(-1)
    with pytest.raises(ValueError):
        RandomizedWordBounded(-3)
    with pytest.raises(ValueError):
        LineRangeBounded(start=-1)
    with pytest.raises(ValueError):
        LineRangeBounded(start=0, limit=-2)


def test_randomized_sampling_is_reproducible_with_seed() -> None:
    builder = ProfileBuilder(InMemorySource(SAMPLE_TEXT), "ENG")
    first = builder.build(RandomizedWordBounded(12, np.random.default_rng(7)))
    second = builder.build(RandomizedWordBounded(12, np.random.default_rng(7)))
    assert first.entries == second.entries
    assert [entry.count for entry in first.entries] == [entry.count for entry in second.entries]
    assert first.word_count == 12
    _assert_profile_invariants(first)


def test_randomized_sampling_stops_when_pool_is_exhausted() -> None:
    source = InMemorySource(SAMPLE_TEXT)
    total_words = sum(len(line.split()) for line in SAMPLE_TEXT)
    profile = ProfileBuilder(source, "ENG").build(RandomizedWordBounded(10_000, np.random.default_rng(1)))
    unrestricted = build_profile(source, "ENG")
    assert profile.word_count == total_words
    assert profile.line_count == len(SAMPLE_TEXT)
    assert profile.pairs() == unrestricted.pairs()


def test_randomized_without_budget_reads_everything() -> None:
    source = InMemorySource(SAMPLE_TEXT)
    profile = ProfileBuilder(source, "ENG").build(RandomizedWordBounded(None))
    assert profile.pairs() == build_profile(source, "ENG").pairs()


def test_resample_replaces_previous_contents() -> None:
    source = InMemorySource(SAMPLE_TEXT, source_id="sample")
    builder = ProfileBuilder(source, "ENG")
    profile = builder.build()
    rng = np.random.default_rng(3)

    resampled = builder.resample(profile, 5, rng)
    assert resampled is profile
    assert profile.word_count == 5
    assert profile.line_count == 1
    _assert_profile_invariants(profile)

    builder.resample(profile, 0, rng)
    assert profile.word_count == 0


def test_resample_validates_arguments() -> None:
    builder = ProfileBuilder(InMemorySource(SAMPLE_TEXT, source_id="sample"), "ENG")
    profile = builder.build()
    with pytest.raises(ValueError):
        builder.resample(profile, -1, np.random.default_rng(0))

    foreign = build_profile(InMemorySource(SAMPLE_TEXT, source_id="other"), "ENG")
    with pytest.raises(ValueError):
        builder.resample(foreign, 5, np.random.default_rng(0))


def test_missing_corpus_raises_corpus_unavailable(tmp_path: Path) -> None:
    builder = ProfileBuilder(TextFileSource(tmp_path / "missing.txt"), "ENG")
    with pytest.raises(CorpusUnavailableError):
        builder.build()
    with pytest.raises(OSError):
        builder.build(RandomizedWordBounded(10, np.random.default_rng(0)))


# ---------------------------------------------------------------------------
# Merge


def test_merge_accumulates_counts_and_counters() -> None:
    source = Profile(
        "ENG",
        [BigramObservation("th", 5), BigramObservation("he", 3)],
        word_count=10,
        line_count=2,
    )
    target = Profile(
        "ENG",
        [BigramObservation("th", 4), BigramObservation("in", 2)],
        word_count=7,
        line_count=1,
    )

    merged = merge_profiles(source, target)

    assert merged is target
    assert merged.count_of("th") == 9
    assert merged.count_of("he") == 3
    assert merged.count_of("in") == 2
    assert merged.word_count == 17
    assert merged.line_count == 3
    assert merged.pairs() == ("th", "he", "in")
    assert len(source) == 0
    assert source.word_count == 0


def test_merge_resorts_appended_entries() -> None:
    source = Profile("ENG", [BigramObservation("zz", 50)])
    target = Profile("ENG", [BigramObservation("aa", 3)])
    merged = merge_profiles(source, target)
    assert merged.pairs() == ("zz", "aa")


def test_merge_rejects_self() -> None:
    profile = Profile("ENG", [BigramObservation("ab", 2)])
    with pytest.raises(ValueError):
        merge_profiles(profile, profile)


# ---------------------------------------------------------------------------
# Folds


def test_folds_cover_corpus_in_contiguous_segments() -> None:
    lines = [f"line number {idx} with some text" for idx in range(100)]
    folds = build_folds(InMemorySource(lines), "ENG", 10)

    assert [fold.held_out_range for fold in folds] == [(i * 10, (i + 1) * 10) for i in range(10)]
    for fold in folds:
        assert fold.held_out.line_count == 10
        assert fold.training.line_count == 90
        assert fold.training.language == "ENG"
        _assert_profile_invariants(fold.held_out)


def test_fold_remainder_stays_in_training() -> None:
    lines = [f"row {idx} abab" for idx in range(23)]
    folds = build_folds(InMemorySource(lines), "ENG", 5)
    last = folds[-1]
    assert last.held_out_range == (16, 20)
    assert last.held_out.line_count == 4
    assert last.training.line_count == 19


def test_folds_require_positive_k() -> None:
    with pytest.raises(ValueError):
        build_folds(InMemorySource(["abab"]), "ENG", 0)
