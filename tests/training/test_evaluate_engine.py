#!filepath: tests/training/test_evaluate_engine.py
import numpy as np
import pandas as pd
import pytest

from activity_report.training.engines.evaluate_engine import EvaluateEngine
from activity_report.training.engines.train_result import TrainResult


class _Echo:
    """Predicts a fixed sequence, ignoring X."""

    def __init__(self, predictions):
        self.predictions = np.asarray(predictions)

    def predict(self, X):
        return self.predictions[: len(X)]


def _result(name: str, accuracy: float, model=None) -> TrainResult:
    return TrainResult(
        name=name,
        family="random_forest",
        resampling="cv",
        model=model,
        accuracy=accuracy,
        params={"max_features": 2},
        tuning=pd.DataFrame(),
    )


def test_select_highest_accuracy():
    fits = [_result("a", 0.90), _result("b", 0.95), _result("c", 0.93)]

    selection = EvaluateEngine().select(fits)

    assert selection.chosen.name == "b"
    assert selection.comparison["model"].tolist() == ["a", "b", "c"]
    assert selection.comparison["selected"].tolist() == [False, True, False]


def test_select_tie_goes_to_first_configured():
    fits = [_result("rf_cv", 0.97), _result("rf_oob", 0.97), _result("svm_rbf", 0.91)]

    selection = EvaluateEngine().select(fits)

    assert selection.chosen.name == "rf_cv"


def test_select_empty():
    with pytest.raises(ValueError):
        EvaluateEngine().select([])


def test_evaluate_confusion_and_error_rate():
    y = pd.Series(["A", "A", "B", "B", "C"], index=[10, 11, 12, 13, 14])
    X = pd.DataFrame({"PC1": range(5)}, index=y.index)
    model = _Echo(["A", "B", "B", "B", "A"])

    ev = EvaluateEngine().evaluate(
        result=_result("m", 0.9, model), X=X, y=y, labels=["A", "B", "C"]
    )

    # rows = actual, columns = predicted
    assert ev.confusion.loc["A", "B"] == 1
    assert ev.confusion.loc["C", "A"] == 1
    assert ev.confusion.loc["B", "B"] == 2
    assert ev.confusion.sum(axis=1).tolist() == [2, 2, 1]
    assert int(ev.confusion.to_numpy().sum()) == len(y)

    assert ev.accuracy == pytest.approx(3 / 5)
    assert ev.error_rate == pytest.approx(2 / 5)
    assert ev.correct.tolist() == [True, False, True, True, False]
    assert ev.per_class.loc["C", "recall"] == 0.0


def test_evaluate_label_absent_from_eval_subset():
    y = pd.Series(["A", "B"])
    X = pd.DataFrame({"PC1": [0.0, 1.0]})

    ev = EvaluateEngine().evaluate(
        result=_result("m", 0.9, _Echo(["A", "B"])),
        X=X,
        y=y,
        labels=["A", "B", "E"],
    )

    assert list(ev.confusion.index) == ["A", "B", "E"]
    assert ev.confusion.loc["E"].sum() == 0
    assert ev.error_rate == 0.0
