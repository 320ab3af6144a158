# activity_report/training/engines/evaluate_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd
from sklearn.metrics import classification_report, confusion_matrix

from activity_report.training.engines.train_result import TrainResult


@dataclass(frozen=True)
class ModelSelection:
    chosen: TrainResult
    comparison: pd.DataFrame


@dataclass(frozen=True)
class EvaluationResult:
    """
    Out-of-sample evaluation of the selected model.

    confusion: rows = actual class, columns = predicted class
    """
    model_name: str
    labels: List[str]
    predictions: pd.Series
    correct: pd.Series
    confusion: pd.DataFrame
    accuracy: float
    error_rate: float
    per_class: pd.DataFrame


class EvaluateEngine:
    """
    EvaluateEngine（FINAL / FROZEN）

    Responsibility:
    - Pick the best TrainResult by resampled accuracy
    - Score it once on the evaluation subset
    - Return pure results (no side effects)

    Tie-break:
    - equal accuracy → first in configured model order
    """

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select(self, fits: Sequence[TrainResult]) -> ModelSelection:
        if not fits:
            raise ValueError("[EvaluateEngine] no fitted models to select from")

        chosen = fits[0]
        for result in fits[1:]:
            if result.accuracy > chosen.accuracy:
                chosen = result

        comparison = pd.DataFrame(
            [
                {
                    "model": r.name,
                    "family": r.family,
                    "resampling": r.resampling,
                    "params": _format_params(r.params),
                    "accuracy": r.accuracy,
                    "selected": r is chosen,
                }
                for r in fits
            ]
        )

        return ModelSelection(chosen=chosen, comparison=comparison)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------
    def evaluate(
            self,
            *,
            result: TrainResult,
            X: pd.DataFrame,
            y: pd.Series,
            labels: Optional[Sequence] = None,
    ) -> EvaluationResult:
        if len(X) == 0:
            raise ValueError("[EvaluateEngine] empty eval dataset")

        if labels is None:
            labels = sorted(pd.unique(y))
        labels = list(labels)

        y_pred = pd.Series(result.model.predict(X), index=X.index, name="prediction")
        correct = pd.Series(
            np.asarray(y_pred) == np.asarray(y), index=X.index, name="correct"
        )

        cm = confusion_matrix(y, y_pred, labels=labels)
        confusion = pd.DataFrame(
            cm,
            index=pd.Index(labels, name="actual"),
            columns=pd.Index(labels, name="predicted"),
        )

        accuracy = float(correct.sum()) / len(correct)

        report = classification_report(
            y, y_pred, labels=labels, output_dict=True, zero_division=0
        )
        per_class = pd.DataFrame(
            {str(label): report[str(label)] for label in labels}
        ).T[["precision", "recall", "f1-score", "support"]]

        return EvaluationResult(
            model_name=result.name,
            labels=[str(label) for label in labels],
            predictions=y_pred,
            correct=correct,
            confusion=confusion,
            accuracy=accuracy,
            error_rate=1.0 - accuracy,
            per_class=per_class,
        )


def _format_params(params: dict) -> str:
    return ", ".join(f"{k}={v}" for k, v in params.items())
