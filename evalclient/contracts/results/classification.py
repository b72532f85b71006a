from __future__ import annotations

from typing import ClassVar, Optional, Tuple

import numpy as np
from pydantic import StrictFloat

from evalclient.registries.metrics import register_result

from ..common import ValueModel
from .common import MetricResult


class AucRocPoint(ValueModel):
    """One point of a ROC curve."""

    tpr: StrictFloat
    fpr: StrictFloat
    threshold: StrictFloat


@register_result
class AucRocResult(MetricResult):
    """
    Computed AUC-ROC for one class.

    ``curve`` is present only when the request set ``include_curve=True``;
    otherwise it is ``None`` and omitted from the document.
    """

    NAME: ClassVar[str] = "auc_roc"

    value: StrictFloat
    curve: Optional[Tuple[AucRocPoint, ...]] = None

    def curve_arrays(self) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Return ``(fpr, tpr, thresholds)`` as float arrays, curve order kept.

        Same layout as ``sklearn.metrics.roc_curve`` so the result can be
        plotted with the usual tooling.
        """
        if self.curve is None:
            raise ValueError(f"[{self.NAME}] result carries no curve; request it with include_curve=True")
        fpr = np.asarray([p.fpr for p in self.curve], dtype=float)
        tpr = np.asarray([p.tpr for p in self.curve], dtype=float)
        thresholds = np.asarray([p.threshold for p in self.curve], dtype=float)
        return fpr, tpr, thresholds


__all__ = ["AucRocPoint", "AucRocResult"]
