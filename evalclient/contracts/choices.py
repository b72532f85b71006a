from __future__ import annotations

"""Literal-based "choice" types used across contracts.

Design intent:
- Keep this file dependency-free (stdlib + typing only).
- Metric names double as registry keys and as the keys of aggregate
  metric/result documents, so they must match the ``NAME`` constants of the
  contract classes exactly.
"""

from typing import Literal, TypeAlias


# -----------------------------
# Common / high-level
# -----------------------------

# Evaluation type the metrics belong to.
EvaluationKind: TypeAlias = Literal["classification"]


# -----------------------------
# Metrics
# -----------------------------

ClassificationMetricName: TypeAlias = Literal[
    "auc_roc",
    "accuracy",
    "precision",
    "recall",
    "multiclass_confusion_matrix",
]

MetricName: TypeAlias = ClassificationMetricName


__all__ = [
    "EvaluationKind",
    "ClassificationMetricName",
    "MetricName",
]
