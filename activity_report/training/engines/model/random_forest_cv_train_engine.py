# activity_report/training/engines/model/random_forest_cv_train_engine.py
from __future__ import annotations

import pandas as pd
from sklearn.ensemble import RandomForestClassifier
from sklearn.model_selection import GridSearchCV

from activity_report import logs
from activity_report.training.engines.model_train_engine import ModelTrainEngine
from activity_report.training.engines.train_result import TrainResult
from activity_report.training.engines.tuning import resolve_mtry_grid


class RandomForestCVTrainEngine(ModelTrainEngine):
    """
    Random forest, max_features (mtry) selected by stratified k-fold CV accuracy.
    """

    def train(self, *, X: pd.DataFrame, y: pd.Series) -> TrainResult:
        rf = self.cfg.rf
        grid = resolve_mtry_grid(X.shape[1], rf.mtry_grid, self.cfg.tune_length)

        logs.info(
            f"[{self.spec.name}] rf cv folds={self.cfg.cv_folds} "
            f"trees={rf.n_trees} mtry_grid={grid}"
        )

        # n_jobs=None: inherit the shared joblib pool
        search = GridSearchCV(
            estimator=RandomForestClassifier(
                n_estimators=rf.n_trees,
                random_state=self.cfg.seed,
            ),
            param_grid={"max_features": grid},
            scoring="accuracy",
            cv=self.folds(),
            refit=True,
        )
        search.fit(X, y)

        results = search.cv_results_
        tuning = pd.DataFrame(
            {
                "max_features": grid,
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
