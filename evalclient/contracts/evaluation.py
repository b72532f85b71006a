from __future__ import annotations

"""Aggregate documents keyed by metric name.

An evaluation request carries its metrics as one object whose keys are the
metric names and whose values are each descriptor's document:

    {"auc_roc": {"class_name": "dog", "include_curve": true}, "accuracy": {}}

The response mirrors it with result documents under the same names. The
surrounding request envelope (index, fields, query) is the caller's concern.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from evalclient.registries.metrics import get_metric_type, get_result_type

from .errors import InvalidArgument, TypeMismatch
from .metrics.common import EvaluationMetric
from .results.common import MetricResult

logger = logging.getLogger(__name__)


def metrics_to_document(metrics: Iterable[EvaluationMetric]) -> Dict[str, Any]:
    """Serialize metrics under their names, keeping input order."""
    out: Dict[str, Any] = {}
    for metric in metrics:
        name = metric.get_name()
        if name in out:
            raise InvalidArgument(f"duplicate metric [{name}]", metric=name)
        out[name] = metric.to_document()
    return out


def parse_metrics(doc: Any, *, lenient: Optional[bool] = None) -> List[EvaluationMetric]:
    """Parse a ``{name: descriptor}`` object, dispatching on each name.

    ``UnknownMetric`` is raised for names with no registered descriptor;
    the first failing descriptor aborts the whole parse.
    """
    if not isinstance(doc, Mapping):
        raise TypeMismatch(f"metrics must be an object, got {type(doc).__name__}")
    metrics: List[EvaluationMetric] = []
    for name, body in doc.items():
        cls = get_metric_type(name)
        metrics.append(cls.from_document(body, lenient=lenient))
    logger.debug("parsed %d metric(s): %s", len(metrics), list(doc))
    return metrics


def parse_results(doc: Any, *, lenient: Optional[bool] = None) -> Dict[str, MetricResult]:
    """Parse a ``{name: result}`` object into result contracts by name."""
    if not isinstance(doc, Mapping):
        raise TypeMismatch(f"results must be an object, got {type(doc).__name__}")
    return {name: get_result_type(name).from_document(body, lenient=lenient) for name, body in doc.items()}


def expected_result_types(metrics: Iterable[EvaluationMetric]) -> Dict[str, Type[MetricResult]]:
    """Result type the service is expected to return for each requested metric."""
    return {m.get_name(): get_result_type(m.get_name()) for m in metrics}
