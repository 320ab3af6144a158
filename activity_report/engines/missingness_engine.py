# activity_report/engines/missingness_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import pandas as pd

from activity_report.utils.errors import CompletenessError


@dataclass(frozen=True)
class FittedMissingnessFilter:
    """
    Drop list computed on the training subset.

    Only transform() is exposed: the evaluation subset gets the identical
    drop list, it is never recomputed.
    """

    threshold: float
    fractions: Dict[str, float]
    retained_columns: Tuple[str, ...]
    dropped_columns: Tuple[str, ...]

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        missing = [c for c in self.retained_columns if c not in X.columns]
        if missing:
            raise CompletenessError(f"retained columns absent from table: {missing}")
        return X.loc[:, list(self.retained_columns)].copy()


class MissingnessFilterEngine:
    """
    MissingnessFilterEngine（FINAL）

    Contract:
    - fraction = missing / rows, training subset only
    - fraction >= threshold → dropped
    """

    def __init__(self, threshold: float = 0.8):
        self.threshold = threshold

    def fit(self, X_train: pd.DataFrame) -> FittedMissingnessFilter:
        if len(X_train) == 0:
            raise CompletenessError("empty training subset")

        fractions = X_train.isna().mean()

        retained = tuple(c for c in X_train.columns if fractions[c] < self.threshold)
        dropped = tuple(c for c in X_train.columns if fractions[c] >= self.threshold)

        return FittedMissingnessFilter(
            threshold=self.threshold,
            fractions={c: float(fractions[c]) for c in X_train.columns},
            retained_columns=retained,
            dropped_columns=dropped,
        )


def assert_dense(X: pd.DataFrame, *, subset: str) -> None:
    """
    Scaling / PCA require fully dense input; no implicit imputation.
    """
    counts = X.isna().sum()
    offending = counts[counts > 0]
    if not offending.empty:
        shown = dict(list(offending.astype(int).items())[:10])
        raise CompletenessError(
            f"{subset} subset still has missing values in "
            f"{len(offending)} column(s): {shown}"
        )
