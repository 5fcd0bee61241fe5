from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
import typer

from experiments.config import ExperimentConfig
from experiments.plots import PlotSaveConfig
from experiments.reporting import write_frequency_table
from experiments.suite import run_experiment_suite
from src.classification import predict_language
from src.corpus import DEFAULT_OUTPUT_ROOT, TextFileSource, display_name, split_corpus, strip_tags
from src.profiles import ProfileBuilder, WordBounded

app = typer.Typer()


def _parse_corpora(values: List[str], option: str) -> Dict[str, Path]:
    """Turn repeated ``LANG=path`` options into a mapping."""
    corpora: Dict[str, Path] = {}
    for value in values:
        language, sep, path = value.partition("=")
        if not sep or not language or not path:
            raise typer.BadParameter(f"Expected LANG=path, got '{value}'.", param_hint=option)
        if language in corpora:
            raise typer.BadParameter(f"Language '{language}' given twice.", param_hint=option)
        corpora[language] = Path(path)
    return corpora


@app.command("strip-tags")
def strip_tags_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Tagged corpus file."),
    target: Path = typer.Argument(..., dir_okay=False, help="Where to write the tag-free corpus."),
) -> None:
    """
    Remove markup tags from a corpus, dropping lines that end up empty.
    """
    strip_tags(source, target)


@app.command("split")
def split_command(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, help="Corpus file to split."),
    train_out: Path = typer.Option(..., "--train-out", help="Destination of the training lines."),
    test_out: Path = typer.Option(..., "--test-out", help="Destination of the test lines."),
    fraction: float = typer.Option(0.9, "--fraction", help="Share of lines assigned to training."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for the random line assignment."),
) -> None:
    """
    Randomly split a corpus line-wise into training and test files.
    """
    try:
        split_corpus(source, train_out, test_out, fraction, np.random.default_rng(seed))
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command("profile")
def profile_command(
    corpus: Path = typer.Argument(..., exists=True, dir_okay=False, help="Corpus to profile."),
    language: str = typer.Option(..., "--language", help="Language label, e.g. ENG."),
    out: Path = typer.Option(..., "--out", help="CSV file for the frequency table."),
    word_limit: Optional[int] = typer.Option(None, "--word-limit", help="Stop after this many words."),
) -> None:
    """
    Build a bigram profile and export it as a rank-ordered frequency table.
    """
    try:
        policy = WordBounded(word_limit) if word_limit is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--word-limit") from exc

    profile = ProfileBuilder(TextFileSource(corpus), language).build(policy)
    write_frequency_table(profile, out)
    print(f"[profiles] {len(profile)} bigrams from {profile.word_count} words → {out}")


@app.command("identify")
def identify_command(
    sample: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text to identify."),
    train: List[str] = typer.Option(..., "--train", help="Training corpus as LANG=path; repeat per language."),
    word_limit: Optional[int] = typer.Option(None, "--word-limit", help="Only use the first N words of the sample."),
) -> None:
    """
    Identify the language of a text sample against training corpora.
    """
    corpora = _parse_corpora(train, "--train")
    try:
        policy = WordBounded(word_limit) if word_limit is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--word-limit") from exc

    candidates = [ProfileBuilder(TextFileSource(path), language).build() for language, path in corpora.items()]
    test = ProfileBuilder(TextFileSource(sample), "unknown").build(policy)
    result = predict_language(test, candidates)

    for label in sorted(result.labels, key=lambda item: item.distance):
        print(f"  {display_name(label.language):<12} distance={label.distance}")
    if result.decided:
        print(f"Predicted language: {display_name(str(result.language))}")
    else:
        print("Undecided: the nearest languages are tied.")


@app.command("experiments")
def experiments_command(
    corpus: List[str] = typer.Option(..., "--corpus", help="Tag-free corpus as LANG=path; repeat per language."),
    output_root: Path = typer.Option(
        DEFAULT_OUTPUT_ROOT,
        "--output-root",
        file_okay=False,
        dir_okay=True,
        writable=True,
        help="Directory for splits, frequency tables and trial logs.",
    ),
    folds: int = typer.Option(10, "--folds", help="Number of cross-validation folds."),
    runs: int = typer.Option(100, "--runs", help="Steps in the variable training size run."),
    trials: int = typer.Option(1000, "--trials", help="Resampling trials per minimum sample probe."),
    accept: float = typer.Option(0.95, "--accept", help="Accuracy a sample size must reach."),
    fraction: float = typer.Option(0.9, "--fraction", help="Share of lines used for training."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for all random sampling."),
    plots_root: Optional[Path] = typer.Option(
        None,
        "--plots-root",
        help="Directory where plots should be saved (subfolders are created automatically).",
    ),
    plots_tag: Optional[str] = typer.Option(
        None,
        "--plots-tag",
        help="Folder suffix for this run (defaults to timestamp).",
    ),
    show_plots: bool = typer.Option(False, "--show-plots", help="Open figures instead of only saving them."),
    save_static: bool = typer.Option(True, help="Write static PNG snapshots when saving plots."),
    save_html: bool = typer.Option(True, help="Write interactive HTML plots when saving."),
) -> None:
    """
    Run cross-validation, variable training size and minimum sample experiments.
    """
    corpora = _parse_corpora(corpus, "--corpus")
    if len(corpora) < 2:
        raise typer.BadParameter("Provide at least two languages.", param_hint="--corpus")
    config = ExperimentConfig(
        folds=folds,
        variable_training_runs=runs,
        minimum_sample_trials=trials,
        accept_accuracy=accept,
        train_fraction=fraction,
        seed=seed,
    )
    try:
        config.validate()
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    save_config: Optional[PlotSaveConfig] = None
    if plots_root:
        tag = plots_tag or datetime.utcnow().strftime("%Y%m%d-%H%M%S")
        save_config = PlotSaveConfig(base_dir=plots_root, run_tag=tag, save_static=save_static, save_html=save_html)
        print(f"[plots] Saving figures under {plots_root / tag}")

    result = run_experiment_suite(
        corpora,
        config,
        output_root=output_root,
        plots=save_config,
        show_plots=show_plots,
    )

    print(result.summary.to_string(index=False))


if __name__ == "__main__":
    app()
