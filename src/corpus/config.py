"""Static configuration for corpus locations and language labels."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, TypedDict


class LanguageConfig(TypedDict):
    code: str
    name: str


class OutputLayout(TypedDict):
    frequency_tables: str
    cross_validation: str
    minimum_sample: str
    variable_training: str


# Default directories used by the Typer CLI; callers may override these.
DEFAULT_OUTPUT_ROOT = Path("LanguageData")

OUTPUT_LAYOUT: OutputLayout = {
    "frequency_tables": "BigramFrequencyTables",
    "cross_validation": "CrossValidation",
    "minimum_sample": "MinimumTestSample",
    "variable_training": "VariableTrainingSize",
}

# ---------------------------------------------------------------------------
# Known language labels. Any string is accepted as a label; this registry only
# supplies display names for reports.

LANGUAGES: Dict[str, LanguageConfig] = {
    "ENG": {"code": "ENG", "name": "English"},
    "CZH": {"code": "CZH", "name": "Czech"},
    "SLV": {"code": "SLV", "name": "Slovenian"},
    "GER": {"code": "GER", "name": "German"},
}


def display_name(language: str) -> str:
    """Return the human readable name for ``language``, or the label itself."""
    config = LANGUAGES.get(language.upper())
    return config["name"] if config else language


def output_dirs(root: Path = DEFAULT_OUTPUT_ROOT) -> Dict[str, Path]:
    """Resolve (and create) every experiment output directory under ``root``."""
    resolved: Dict[str, Path] = {}
    for key, folder in OUTPUT_LAYOUT.items():
        target = root / folder
        target.mkdir(parents=True, exist_ok=True)
        resolved[key] = target
    return resolved


__all__ = [
    "DEFAULT_OUTPUT_ROOT",
    "LANGUAGES",
    "LanguageConfig",
    "OUTPUT_LAYOUT",
    "OutputLayout",
    "display_name",
    "output_dirs",
]
