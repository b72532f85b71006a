from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Type, TypeVar

from evalclient.contracts.errors import UnknownMetric
from evalclient.registries.base import Registry

if TYPE_CHECKING:
    from evalclient.contracts.metrics.common import EvaluationMetric
    from evalclient.contracts.results.common import MetricResult

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="Type[EvaluationMetric]")
R = TypeVar("R", bound="Type[MetricResult]")

# Keyed by the contract's NAME; a metric and its result share the same key.
_METRICS: Registry[str, "Type[EvaluationMetric]"] = Registry(_name="metrics")
_RESULTS: Registry[str, "Type[MetricResult]"] = Registry(_name="metric_results")

_BUILTINS_LOADED = False


def _require_name(cls: type) -> str:
    name = getattr(cls, "NAME", "")
    if not name:
        raise ValueError(f"{cls.__name__} must define a non-empty NAME")
    return str(name)


def register_metric(cls: M) -> M:
    """Class decorator: make a metric descriptor dispatchable by its NAME."""
    name = _require_name(cls)
    _METRICS.register(name)(cls)
    logger.debug("registered metric %r -> %s", name, cls.__name__)
    return cls


def register_result(cls: R) -> R:
    """Class decorator: make a metric result parseable by its NAME."""
    name = _require_name(cls)
    _RESULTS.register(name)(cls)
    logger.debug("registered metric result %r -> %s", name, cls.__name__)
    return cls


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    # Import triggers registration side-effects.
    from evalclient.contracts.metrics import classification as _m  # noqa: F401
    from evalclient.contracts.results import classification as _r  # noqa: F401

    _BUILTINS_LOADED = True


def get_metric_type(name: str) -> "Type[EvaluationMetric]":
    _ensure_builtins()
    cls = _METRICS.try_get(name)
    if cls is None:
        raise UnknownMetric(f"unknown metric [{name}]", metric=name)
    return cls


def get_result_type(name: str) -> "Type[MetricResult]":
    _ensure_builtins()
    cls = _RESULTS.try_get(name)
    if cls is None:
        raise UnknownMetric(f"no result type for metric [{name}]", metric=name)
    return cls


def list_metric_names() -> list[str]:
    _ensure_builtins()
    return sorted(list(_METRICS.keys()))


def list_result_names() -> list[str]:
    _ensure_builtins()
    return sorted(list(_RESULTS.keys()))
