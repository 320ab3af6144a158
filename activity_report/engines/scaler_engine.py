# activity_report/engines/scaler_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd

from activity_report import logs
from activity_report.utils.errors import DegenerateDataError


@dataclass(frozen=True)
class FittedScaler:
    """
    Center / scale parameters fit on the training subset.

    - columns: scaled columns (zero-variance ones already excluded)
    - std: sample standard deviation (ddof=1)
    """

    columns: Tuple[str, ...]
    mean: pd.Series
    std: pd.Series
    dropped_columns: Tuple[str, ...]

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        cols = list(self.columns)
        return (X.loc[:, cols] - self.mean[cols]) / self.std[cols]

    def inverse_transform(self, Z: pd.DataFrame) -> pd.DataFrame:
        cols = list(self.columns)
        return Z.loc[:, cols] * self.std[cols] + self.mean[cols]


class ScalerEngine:
    """
    ScalerEngine（FINAL）

    Zero-variance columns (sd <= tolerance, or undefined) would divide by
    zero; they are dropped from both subsets and reported.
    """

    def __init__(self, variance_tolerance: float = 1e-12):
        self.variance_tolerance = variance_tolerance

    def fit(self, X_train: pd.DataFrame) -> FittedScaler:
        X = X_train.astype(float)

        mean = X.mean()
        std = X.std(ddof=1)

        degenerate = std.isna() | (std <= self.variance_tolerance)
        dropped = tuple(X.columns[degenerate.to_numpy()])
        kept = tuple(X.columns[~degenerate.to_numpy()])

        if dropped:
            logs.warning(
                f"[ScalerEngine] zero-variance columns dropped: {list(dropped)}"
            )

        if not kept:
            raise DegenerateDataError("every predictor column has zero variance")

        return FittedScaler(
            columns=kept,
            mean=mean[list(kept)].astype(np.float64),
            std=std[list(kept)].astype(np.float64),
            dropped_columns=dropped,
        )
