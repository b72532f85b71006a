"""Name -> contract registries.

Adding a metric kind means defining its descriptor (and result) class and
decorating it with ``register_metric`` / ``register_result``; dispatch code
stays closed for modification.
"""

from .base import Registry
from .metrics import (
    get_metric_type,
    get_result_type,
    list_metric_names,
    list_result_names,
    register_metric,
    register_result,
)

__all__ = [
    "Registry",
    "get_metric_type",
    "get_result_type",
    "list_metric_names",
    "list_result_names",
    "register_metric",
    "register_result",
]
