"""Tests for the other metric descriptors, the registries and aggregate documents."""

from typing import ClassVar, get_args

import pytest

from evalclient.contracts.choices import ClassificationMetricName
from evalclient.contracts.errors import InvalidArgument, MissingRequiredField, TypeMismatch, UnknownMetric
from evalclient.contracts.evaluation import (
    expected_result_types,
    metrics_to_document,
    parse_metrics,
    parse_results,
)
from evalclient.contracts.metrics import (
    AccuracyMetric,
    AucRocMetric,
    EvaluationMetric,
    MulticlassConfusionMatrixMetric,
    PrecisionMetric,
    RecallMetric,
)
from evalclient.contracts.results import AucRocResult
from evalclient.registries import (
    Registry,
    get_metric_type,
    get_result_type,
    list_metric_names,
    list_result_names,
    register_metric,
)


@pytest.fixture
def request_metrics():
    return [
        AucRocMetric.for_class_with_curve("dog"),
        AccuracyMetric(),
        MulticlassConfusionMatrixMetric.of_size(3),
    ]


class TestParameterlessMetrics:
    @pytest.mark.parametrize(
        "cls, name",
        [(AccuracyMetric, "accuracy"), (PrecisionMetric, "precision"), (RecallMetric, "recall")],
    )
    def test_empty_document(self, cls, name):
        m = cls.from_document({})
        assert m.get_name() == name
        assert m.to_document() == {}
        assert m.to_json() == "{}"
        assert m == cls()
        assert hash(m) == hash(cls())

    def test_different_kinds_never_equal(self):
        assert AccuracyMetric() != PrecisionMetric()
        assert PrecisionMetric() != RecallMetric()


class TestMulticlassConfusionMatrixMetric:
    def test_absent_size_is_omitted(self):
        m = MulticlassConfusionMatrixMetric.from_document({})
        assert m.size is None
        assert m.to_document() == {}

    def test_size_round_trip(self):
        m = MulticlassConfusionMatrixMetric.of_size(5)
        assert m.to_json() == '{"size":5}'
        assert MulticlassConfusionMatrixMetric.from_json(m.to_json()) == m

    def test_size_wrong_type(self):
        with pytest.raises(TypeMismatch) as excinfo:
            MulticlassConfusionMatrixMetric.from_document({"size": "3"})
        assert excinfo.value.field == "size"

    def test_size_must_be_positive(self):
        with pytest.raises(InvalidArgument):
            MulticlassConfusionMatrixMetric.from_document({"size": 0})
        with pytest.raises(InvalidArgument):
            MulticlassConfusionMatrixMetric.of_size(0)


class TestRegistry:
    def test_builtin_metric_names(self):
        assert {"auc_roc", "accuracy", "precision", "recall", "multiclass_confusion_matrix"} <= set(
            list_metric_names()
        )

    def test_choice_names_are_registered(self):
        assert set(get_args(ClassificationMetricName)) <= set(list_metric_names())

    def test_builtin_result_names(self):
        assert "auc_roc" in list_result_names()

    def test_metrics_declare_their_evaluation_kind(self):
        for name in ["auc_roc", "accuracy", "precision", "recall", "multiclass_confusion_matrix"]:
            assert get_metric_type(name).kind == "classification"

    def test_lookup_by_name(self):
        assert get_metric_type("auc_roc") is AucRocMetric
        assert get_result_type("auc_roc") is AucRocResult

    def test_unknown_metric(self):
        with pytest.raises(UnknownMetric) as excinfo:
            get_metric_type("log_loss")
        assert excinfo.value.metric == "log_loss"
        assert "log_loss" in str(excinfo.value)

    def test_unknown_metric_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_result_type("accuracy")

    def test_register_new_metric(self):
        @register_metric
        class MeanSquaredErrorMetric(EvaluationMetric):
            NAME: ClassVar[str] = "test_mse"

        assert get_metric_type("test_mse") is MeanSquaredErrorMetric
        assert parse_metrics({"test_mse": {}}) == [MeanSquaredErrorMetric()]

    def test_conflicting_registration(self):
        with pytest.raises(ValueError):

            @register_metric
            class OtherAucRoc(EvaluationMetric):
                NAME: ClassVar[str] = "auc_roc"

    def test_nameless_registration(self):
        with pytest.raises(ValueError):

            @register_metric
            class Nameless(EvaluationMetric):
                pass


class TestRegistryBase:
    def test_register_and_get(self):
        reg = Registry[str, int](_name="numbers")
        reg.register("one")(1)
        assert reg.get("one") == 1
        assert "one" in reg
        assert list(reg.keys()) == ["one"]

    def test_missing_key(self):
        reg = Registry[str, int](_name="numbers")
        with pytest.raises(KeyError, match="numbers"):
            reg.get("two")
        assert reg.try_get("two", 2) == 2

    def test_re_registering_same_value(self):
        reg = Registry[str, object]()
        value = object()
        reg.register("k")(value)
        reg.register("k")(value)
        with pytest.raises(ValueError):
            reg.register("k")(object())


class TestAggregateDocuments:
    def test_metrics_to_document(self, request_metrics):
        assert metrics_to_document(request_metrics) == {
            "auc_roc": {"class_name": "dog", "include_curve": True},
            "accuracy": {},
            "multiclass_confusion_matrix": {"size": 3},
        }

    def test_keeps_input_order(self, request_metrics):
        assert list(metrics_to_document(request_metrics)) == [
            "auc_roc",
            "accuracy",
            "multiclass_confusion_matrix",
        ]

    def test_round_trip(self, request_metrics):
        assert parse_metrics(metrics_to_document(request_metrics)) == request_metrics

    def test_duplicate_names(self):
        with pytest.raises(InvalidArgument):
            metrics_to_document([AucRocMetric.for_class("a"), AucRocMetric.for_class("b")])

    def test_unknown_metric_name(self):
        with pytest.raises(UnknownMetric):
            parse_metrics({"auc_roc": {"class_name": "a"}, "bogus": {}})

    def test_failing_descriptor_aborts(self):
        with pytest.raises(MissingRequiredField) as excinfo:
            parse_metrics({"accuracy": {}, "auc_roc": {}})
        assert excinfo.value.metric == "auc_roc"

    def test_non_object(self):
        with pytest.raises(TypeMismatch):
            parse_metrics(["auc_roc"])
        with pytest.raises(TypeMismatch):
            parse_results("auc_roc")

    def test_parse_results(self):
        results = parse_results({"auc_roc": {"value": 0.75}})
        assert results == {"auc_roc": AucRocResult(value=0.75)}

    def test_expected_result_types(self):
        assert expected_result_types([AucRocMetric.for_class("a")]) == {"auc_roc": AucRocResult}

    def test_expected_result_types_unknown(self):
        with pytest.raises(UnknownMetric):
            expected_result_types([AccuracyMetric()])
