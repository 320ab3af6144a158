from __future__ import annotations

from abc import ABC, abstractmethod

import pandas as pd
from sklearn.model_selection import StratifiedKFold

from activity_report.training.engines.train_result import TrainResult


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine (FINAL)
    """

    def __init__(self, spec, cfg):
        self.spec = spec
        self.cfg = cfg

    @abstractmethod
    def train(
        self,
        *,
        X: pd.DataFrame,
        y: pd.Series,
    ) -> TrainResult:
        """
        Tune + fit on the training subset, return TrainResult
        """
        raise NotImplementedError

    def folds(self) -> StratifiedKFold:
        return StratifiedKFold(
            n_splits=self.cfg.cv_folds,
            shuffle=True,
            random_state=self.cfg.seed,
        )
