"""Distance-versus-training-size scatter from variable training runs."""

from __future__ import annotations

from typing import Optional, Sequence

import pandas as pd
import plotly.express as px

from src.corpus.config import display_name
from experiments.variable_training import VariableTrainingResult
from .save_config import PlotSaveDestinations, emit_figure


def plot_training_size(
    results: Sequence[VariableTrainingResult],
    save_to: Optional[PlotSaveDestinations] = None,
) -> None:
    """Plot rank distance of each grown training profile, marking mispredictions."""
    rows = [
        {
            "language": display_name(result.language),
            "train_words": outcome.train_words,
            "distance": outcome.distance,
            "outcome": "correct" if outcome.correct else "failed",
        }
        for result in results
        for outcome in result.outcomes
    ]
    if not rows:
        return

    df = pd.DataFrame(rows).sort_values(["language", "train_words"])
    fig = px.scatter(
        df,
        x="train_words",
        y="distance",
        color="language",
        symbol="outcome",
        title="Rank distance to own-language test sample by training size",
        labels={"train_words": "Training size (words)", "distance": "Rank distance"},
    )
    fig.update_layout(yaxis=dict(rangemode="tozero"))
    emit_figure(fig, save_to)
