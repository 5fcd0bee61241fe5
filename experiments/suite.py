"""End-to-end experiment suite over a set of labelled corpora."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Optional

import pandas as pd

from src.corpus.config import DEFAULT_OUTPUT_ROOT, display_name, output_dirs
from src.corpus.preprocess import split_corpus
from src.corpus.source import TextFileSource
from src.profiles import Profile, ProfileBuilder

from .config import ExperimentConfig
from .cross_validation import CrossValidationResult, cross_validate
from .minimum_sample import MinimumSampleResult, minimum_test_sample
from .plots import PlotSaveConfig, plot_minimum_sample, plot_training_size
from .reporting import write_frequency_table, write_trials
from .variable_training import VariableTrainingResult, variable_training_run


@dataclass(frozen=True)
class CorpusSplit:
    full: Path
    train: Path
    test: Path


@dataclass(frozen=True)
class SuiteResult:
    cross_validation: Dict[str, CrossValidationResult]
    variable_training: Dict[str, VariableTrainingResult]
    minimum_sample: Dict[str, MinimumSampleResult]
    summary: pd.DataFrame


def _split_all(
    corpora: Mapping[str, Path],
    split_root: Path,
    config: ExperimentConfig,
) -> Dict[str, CorpusSplit]:
    rng = config.make_rng()
    splits: Dict[str, CorpusSplit] = {}
    for language, path in corpora.items():
        stem = Path(path).stem
        split = CorpusSplit(
            full=Path(path),
            train=split_root / f"{stem}Train.txt",
            test=split_root / f"{stem}Test.txt",
        )
        split_corpus(split.full, split.train, split.test, config.train_fraction, rng)
        splits[language] = split
    return splits


def _others(training: Mapping[str, Profile], language: str) -> List[Profile]:
    return [profile for lang, profile in training.items() if lang != language]


def run_experiment_suite(
    corpora: Mapping[str, Path],
    config: Optional[ExperimentConfig] = None,
    output_root: Path = DEFAULT_OUTPUT_ROOT,
    plots: Optional[PlotSaveConfig] = None,
    show_plots: bool = False,
) -> SuiteResult:
    """Split each corpus, build training profiles, then run every experiment.

    ``corpora`` maps a language label to its (tag-free) corpus file.
    """
    cfg = config or ExperimentConfig()
    cfg.validate()
    if len(corpora) < 2:
        raise ValueError("At least two languages are required to run the experiments.")

    dirs = output_dirs(output_root)
    splits = _split_all(corpora, output_root / "splits", cfg)
    rng = cfg.make_rng()

    print(f"[experiments] Building training profiles for {', '.join(corpora)}")
    training: Dict[str, Profile] = {}
    for language, split in splits.items():
        profile = ProfileBuilder(TextFileSource(split.train), language).build()
        training[language] = profile
        write_frequency_table(profile, dirs["frequency_tables"] / f"{split.full.stem}Freq.csv")

    print("[experiments] -------- Cross validation --------")
    cv_results: Dict[str, CrossValidationResult] = {}
    for language, split in splits.items():
        result = cross_validate(TextFileSource(split.full), language, cfg.folds, _others(training, language))
        write_trials(result.trials, dirs["cross_validation"] / f"{language}CrossValidate.csv")
        cv_results[language] = result
        print(
            f"[experiments] {display_name(language)} validation pass rate with "
            f"{cfg.folds} folds: {result.pass_rate:.0f}%"
        )

    print("[experiments] -------- Variable sized training sets --------")
    vt_results: Dict[str, VariableTrainingResult] = {}
    for language, split in splits.items():
        test_sample = ProfileBuilder(TextFileSource(split.test), language).build()
        result = variable_training_run(
            TextFileSource(split.full),
            test_sample,
            cfg.variable_training_runs,
            _others(training, language),
            rng,
        )
        write_trials(result.trials, dirs["variable_training"] / f"{language}VariableSizeTrainRuns.csv")
        vt_results[language] = result

    print("[experiments] -------- Minimum test sample size --------")
    ms_results: Dict[str, MinimumSampleResult] = {}
    all_training = list(training.values())
    for language, split in splits.items():
        result = minimum_test_sample(
            TextFileSource(split.test),
            language,
            cfg.accept_accuracy,
            all_training,
            rng,
            trials=cfg.minimum_sample_trials,
        )
        write_trials(result.trials, dirs["minimum_sample"] / f"{language}MinTestSample.csv")
        ms_results[language] = result
        print(
            f"[experiments] For {display_name(language)} we can predict "
            f"{result.minimum_words} words minimum with the current training model."
        )

    summary = pd.DataFrame(
        [
            {
                "language": language,
                "cross_validation_pass_rate": cv_results[language].pass_rate,
                "variable_training_failures": len(vt_results[language].failures),
                "minimum_words": ms_results[language].minimum_words,
            }
            for language in corpora
        ]
    )
    summary.to_csv(output_root / "summary.csv", index=False)

    if plots or show_plots:
        plot_minimum_sample(
            list(ms_results.values()),
            save_to=plots.for_plot("minimum_sample") if plots else None,
        )
        plot_training_size(
            list(vt_results.values()),
            save_to=plots.for_plot("training_size") if plots else None,
        )

    return SuiteResult(
        cross_validation=cv_results,
        variable_training=vt_results,
        minimum_sample=ms_results,
        summary=summary,
    )


__all__ = ["CorpusSplit", "SuiteResult", "run_experiment_suite"]
