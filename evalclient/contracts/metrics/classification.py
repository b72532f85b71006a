from __future__ import annotations

from typing import Annotated, ClassVar, Optional

from pydantic import Field, StrictBool, StrictInt, StrictStr

from evalclient.registries.metrics import register_metric

from .common import EvaluationMetric


# -----------------------------
# AUC-ROC
# -----------------------------

@register_metric
class AucRocMetric(EvaluationMetric):
    """
    Area under the curve (AUC) of the receiver operating characteristic (ROC).

    The ROC curve plots TPR (true positive rate) against FPR (false positive
    rate) over a varying threshold. For multiclass problems it is computed
    one-vs-rest for ``class_name``.

    Attributes
    ----------
    class_name:
        Class label whose ROC/AUC is requested. Required.

    include_curve:
        ``True`` asks the service to return the full curve, ``False`` asks for
        the scalar only, ``None`` expresses no preference and is omitted from
        the document entirely.
    """

    NAME: ClassVar[str] = "auc_roc"

    class_name: StrictStr
    include_curve: Optional[StrictBool] = None

    def __init__(self, class_name: Optional[str] = None, include_curve: Optional[bool] = None) -> None:
        super().__init__(class_name=class_name, include_curve=include_curve)

    @classmethod
    def for_class(cls, class_name: str) -> "AucRocMetric":
        return cls(class_name, False)

    @classmethod
    def for_class_with_curve(cls, class_name: str) -> "AucRocMetric":
        return cls(class_name, True)


# -----------------------------
# Parameterless metrics
# -----------------------------

@register_metric
class AccuracyMetric(EvaluationMetric):
    """Overall accuracy plus per-class accuracy."""

    NAME: ClassVar[str] = "accuracy"


@register_metric
class PrecisionMetric(EvaluationMetric):
    """Per-class and average precision."""

    NAME: ClassVar[str] = "precision"


@register_metric
class RecallMetric(EvaluationMetric):
    NAME: ClassVar[str] = "recall"


# -----------------------------
# Confusion matrix
# -----------------------------

@register_metric
class MulticlassConfusionMatrixMetric(EvaluationMetric):
    """Confusion matrix over the ``size`` most frequent actual classes.

    ``size=None`` leaves the choice to the service and is not written out.
    """

    NAME: ClassVar[str] = "multiclass_confusion_matrix"

    size: Optional[Annotated[StrictInt, Field(ge=1)]] = None

    @classmethod
    def of_size(cls, size: int) -> "MulticlassConfusionMatrixMetric":
        return cls(size=size)


__all__ = [
    "AucRocMetric",
    "AccuracyMetric",
    "PrecisionMetric",
    "RecallMetric",
    "MulticlassConfusionMatrixMetric",
]
