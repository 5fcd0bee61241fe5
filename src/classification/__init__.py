from .classifier import classify, label_distances, predict_language
from .records import Classification, DistanceLabel

__all__ = [
    "Classification",
    "DistanceLabel",
    "classify",
    "label_distances",
    "predict_language",
]
