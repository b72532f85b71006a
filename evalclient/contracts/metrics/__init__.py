"""Metric descriptor contracts.

Importing this package registers the built-in descriptors.
"""

from .common import EvaluationMetric
from .classification import (
    AccuracyMetric,
    AucRocMetric,
    MulticlassConfusionMatrixMetric,
    PrecisionMetric,
    RecallMetric,
)

__all__ = [
    "EvaluationMetric",
    "AucRocMetric",
    "AccuracyMetric",
    "PrecisionMetric",
    "RecallMetric",
    "MulticlassConfusionMatrixMetric",
]
