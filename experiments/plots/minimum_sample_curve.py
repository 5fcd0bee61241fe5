"""Accuracy-versus-sample-size curves from minimum sample searches."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
import plotly.express as px

from src.corpus.config import display_name
from experiments.minimum_sample import MinimumSampleResult
from .save_config import PlotSaveDestinations, emit_figure


def plot_minimum_sample(
    results: Sequence[MinimumSampleResult],
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Plot accuracy at every probed sample size, one line per language."""
    rows = [
        {
            "language": display_name(result.language),
            "words": probe.word_limit,
            "accuracy": probe.accuracy,
        }
        for result in results
        for probe in result.probes
        if probe.word_limit > 0
    ]
    if not rows:
        return

    df = pd.DataFrame(rows).sort_values(["language", "words"])
    fig = px.line(
        df,
        x="words",
        y="accuracy",
        color="language",
        markers=True,
        log_x=True,
        title="Identification accuracy by test sample size",
        labels={"words": "Test sample size (words)", "accuracy": "Accuracy"},
    )
    fig.update_yaxes(range=[0.0, 1.0])
    emit_figure(fig, save_to)
