# activity_report/training/engines/model/svm_radial_train_engine.py
from __future__ import annotations

import pandas as pd
from sklearn.model_selection import GridSearchCV
from sklearn.svm import SVC

from activity_report import logs
from activity_report.training.engines.model_train_engine import ModelTrainEngine
from activity_report.training.engines.train_result import TrainResult


class SVMRadialTrainEngine(ModelTrainEngine):
    """
    RBF-kernel SVC.

    - kernel width: gamma heuristic from the data ("scale" by default)
    - cost C: swept over svm.c_grid, selected by k-fold CV accuracy
    """

    def train(self, *, X: pd.DataFrame, y: pd.Series) -> TrainResult:
        svm = self.cfg.svm

        logs.info(
            f"[{self.spec.name}] svm rbf folds={self.cfg.cv_folds} "
            f"gamma={svm.gamma} c_grid={svm.c_grid}"
        )

        search = GridSearchCV(
            estimator=SVC(kernel="rbf", gamma=svm.gamma),
            param_grid={"C": list(svm.c_grid)},
            scoring="accuracy",
            cv=self.folds(),
            refit=True,
        )
        search.fit(X, y)

        results = search.cv_results_
        tuning = pd.DataFrame(
            {
                "C": list(svm.c_grid),
                "accuracy": results["mean_test_score"],
                "accuracy_sd": results["std_test_score"],
            }
        )

        return TrainResult(
            name=self.spec.name,
            family=self.spec.family,
            resampling=self.spec.resampling,
            model=search.best_estimator_,
            accuracy=float(search.best_score_),
            params=dict(search.best_params_),
            tuning=tuning,
        )
