from __future__ import annotations

from typing import ClassVar

from ..choices import EvaluationKind
from ..common import ContractModel


class EvaluationMetric(ContractModel):
    """Base class for metric descriptors (what to compute, not the numbers).

    Subclasses set ``NAME``; it is the registry key and the key under which
    the descriptor appears in an aggregate metrics document. It is never a
    payload field.
    """

    kind: ClassVar[EvaluationKind] = "classification"
