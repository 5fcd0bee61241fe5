"""Plotting utilities for experiment results."""

from .minimum_sample_curve import plot_minimum_sample
from .save_config import PlotSaveConfig, PlotSaveDestinations, emit_figure
from .training_size import plot_training_size

__all__ = [
    "plot_minimum_sample",
    "plot_training_size",
    "PlotSaveConfig",
    "PlotSaveDestinations",
    "emit_figure",
]
