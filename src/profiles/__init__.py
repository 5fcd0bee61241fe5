"""Bigram profiles: construction, merging and fold generation."""

from .builder import ProfileBuilder, build_profile, iter_bigrams, truncate_words
from .folds import FoldPair, build_folds
from .merge import merge_profiles
from .observation import BigramObservation
from .policy import (
    UNRESTRICTED,
    ConstructionPolicy,
    LineRangeBounded,
    RandomizedWordBounded,
    Unrestricted,
    WordBounded,
)
from .profile import CLEANING_THRESHOLD, Profile, rank_key

__all__ = [
    "BigramObservation",
    "CLEANING_THRESHOLD",
    "ConstructionPolicy",
    "FoldPair",
    "LineRangeBounded",
    "Profile",
    "ProfileBuilder",
    "RandomizedWordBounded",
    "UNRESTRICTED",
    "Unrestricted",
    "WordBounded",
    "build_folds",
    "build_profile",
    "iter_bigrams",
    "merge_profiles",
    "rank_key",
    "truncate_words",
]
