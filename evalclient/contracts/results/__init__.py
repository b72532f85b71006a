"""Metric result contracts.

Callers are expected to serialize via ``to_document()`` at the boundary.
"""

from .common import MetricResult
from .classification import AucRocPoint, AucRocResult

__all__ = [
    "MetricResult",
    "AucRocPoint",
    "AucRocResult",
]
