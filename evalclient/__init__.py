"""evalclient: evaluation-metric contracts for a remote evaluation service.

The names re-exported here are a small set of convenience imports for callers
that prefer a single namespace; the modules remain the canonical homes.
"""

from .contracts.metrics import (
    AccuracyMetric,
    AucRocMetric,
    EvaluationMetric,
    MulticlassConfusionMatrixMetric,
    PrecisionMetric,
    RecallMetric,
)
from .contracts.results import AucRocPoint, AucRocResult, MetricResult
from .contracts.evaluation import expected_result_types, metrics_to_document, parse_metrics, parse_results
from .contracts.errors import (
    InvalidArgument,
    MetricContractError,
    MissingRequiredField,
    TypeMismatch,
    UnknownField,
    UnknownMetric,
)
from .registries import get_metric_type, get_result_type, list_metric_names, register_metric, register_result

__version__ = "0.1.0"

__all__ = [
    # metrics
    "EvaluationMetric",
    "AucRocMetric",
    "AccuracyMetric",
    "PrecisionMetric",
    "RecallMetric",
    "MulticlassConfusionMatrixMetric",
    # results
    "MetricResult",
    "AucRocPoint",
    "AucRocResult",
    # aggregate documents
    "metrics_to_document",
    "parse_metrics",
    "parse_results",
    "expected_result_types",
    # errors
    "MetricContractError",
    "MissingRequiredField",
    "TypeMismatch",
    "InvalidArgument",
    "UnknownField",
    "UnknownMetric",
    # registries
    "get_metric_type",
    "get_result_type",
    "list_metric_names",
    "register_metric",
    "register_result",
]
