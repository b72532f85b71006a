"""Metric-contract exceptions.

These are intentionally lightweight so they can be raised from parse and
construction paths without importing registries or I/O modules.

Sink/source failures are not wrapped: an ``OSError`` raised by a stream
passed to ``write_to``/``read_document`` reaches the caller unchanged.
"""

from __future__ import annotations

from typing import Optional


class MetricContractError(ValueError):
    """Base class for metric/result contract failures.

    ``metric`` is the logical name of the contract being handled and
    ``field`` the document field that triggered the failure (if any).
    """

    def __init__(self, message: str, *, metric: Optional[str] = None, field: Optional[str] = None):
        super().__init__(message)
        self.metric = metric
        self.field = field


class MissingRequiredField(MetricContractError):
    """Raised when a required field is absent from a parsed document."""


class TypeMismatch(MetricContractError):
    """Raised when a field (or the whole document) has the wrong type."""


class InvalidArgument(MetricContractError):
    """Raised when direct construction receives an invalid value."""


class UnknownField(MetricContractError):
    """Raised in strict parsing mode for unrecognized fields."""


class UnknownMetric(MetricContractError, KeyError):
    """Raised when a name has no registered metric or result type."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0]) if self.args else ""
