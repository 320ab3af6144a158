# activity_report/engines/pca_engine.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import numpy as np
import pandas as pd
from sklearn.decomposition import PCA

from activity_report.utils.errors import DegenerateDataError


@dataclass(frozen=True)
class FittedPCA:
    """
    FittedPCA（FROZEN）

    - components: (k, p) loadings, k = retained component count
    - transform(): identical projection for every subset
    """

    feature_columns: Tuple[str, ...]
    mean: np.ndarray
    components: np.ndarray
    explained_variance_ratio: np.ndarray
    threshold: float

    @property
    def n_components(self) -> int:
        return int(self.components.shape[0])

    @property
    def cumulative_variance(self) -> np.ndarray:
        return np.cumsum(self.explained_variance_ratio)

    @property
    def component_names(self) -> list[str]:
        return [f"PC{i + 1}" for i in range(self.n_components)]

    def transform(self, X: pd.DataFrame) -> pd.DataFrame:
        values = X.loc[:, list(self.feature_columns)].to_numpy(dtype=np.float64)
        scores = (values - self.mean) @ self.components.T
        return pd.DataFrame(scores, columns=self.component_names, index=X.index)


class PCAEngine:
    """
    PCAEngine（FINAL）

    Contract:
    - fit on the scaled training subset only
    - k = minimal count with cumulative explained variance ratio >= threshold
    """

    def __init__(self, variance_threshold: float = 0.95):
        self.variance_threshold = variance_threshold

    def fit(self, X_train: pd.DataFrame) -> FittedPCA:
        if X_train.shape[0] < 2 or X_train.shape[1] < 1:
            raise DegenerateDataError(f"cannot fit PCA on shape {X_train.shape}")

        pca = PCA(svd_solver="full")
        pca.fit(X_train.to_numpy(dtype=np.float64))

        k = self.retained_count(pca.explained_variance_ratio_, self.variance_threshold)

        return FittedPCA(
            feature_columns=tuple(X_train.columns),
            mean=pca.mean_.copy(),
            components=pca.components_[:k].copy(),
            explained_variance_ratio=pca.explained_variance_ratio_[:k].copy(),
            threshold=self.variance_threshold,
        )

    @staticmethod
    def retained_count(ratios: np.ndarray, threshold: float) -> int:
        """
        Minimal k such that sum(ratios[:k]) >= threshold.
        """
        cumulative = np.cumsum(ratios)
        # float noise on the last component: total may land at 0.9999999
        reached = np.flatnonzero(cumulative >= threshold - 1e-12)
        if reached.size == 0:
            return int(len(ratios))
        return int(reached[0] + 1)
