# activity_report/training/engines/model/random_forest_oob_train_engine.py
from __future__ import annotations

import warnings
from typing import List, Tuple

import pandas as pd
from sklearn.ensemble import RandomForestClassifier

from activity_report import logs
from activity_report.training.engines.model_train_engine import ModelTrainEngine
from activity_report.training.engines.train_result import TrainResult
from activity_report.training.engines.tuning import resolve_mtry_grid


class RandomForestOOBTrainEngine(ModelTrainEngine):
    """
    Random forest, max_features (mtry) selected by out-of-bag accuracy.

    Each candidate forest is grown incrementally (warm_start) in steps of
    rf.curve_step trees, so the OOB error vs number-of-trees curve comes
    for free. Final OOB accuracy at rf.n_trees decides the candidate.
    """

    def train(self, *, X: pd.DataFrame, y: pd.Series) -> TrainResult:
        rf = self.cfg.rf
        grid = resolve_mtry_grid(X.shape[1], rf.mtry_grid, self.cfg.tune_length)

        logs.info(
            f"[{self.spec.name}] rf oob trees={rf.n_trees} mtry_grid={grid}"
        )

        best = None
        rows = []
        for mtry in grid:
            model, curve = self._grow(X, y, mtry)
            accuracy = float(model.oob_score_)
            rows.append({"max_features": mtry, "accuracy": accuracy})

            logs.info(f"[{self.spec.name}] mtry={mtry} oob_accuracy={accuracy:.4f}")

            # strict >: first candidate wins ties
            if best is None or accuracy > best[1]:
                best = (mtry, accuracy, model, curve)

        mtry, accuracy, model, curve = best

        return TrainResult(
            name=self.spec.name,
            family=self.spec.family,
            resampling=self.spec.resampling,
            model=model,
            accuracy=accuracy,
            params={"max_features": mtry},
            tuning=pd.DataFrame(rows),
            diagnostics={"oob_error_curve": curve},
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def tree_schedule(self) -> List[int]:
        n_trees = self.cfg.rf.n_trees
        step = self.cfg.rf.curve_step
        schedule = list(range(step, n_trees, step))
        schedule.append(n_trees)
        return schedule

    def _grow(
            self,
            X: pd.DataFrame,
            y: pd.Series,
            mtry: int,
    ) -> Tuple[RandomForestClassifier, pd.DataFrame]:
        model = RandomForestClassifier(
            n_estimators=1,
            max_features=mtry,
            oob_score=True,
            warm_start=True,
            random_state=self.cfg.seed,
        )

        points = []
        for n in self.tree_schedule():
            model.set_params(n_estimators=n)
            with warnings.catch_warnings():
                # small forests leave some rows without OOB votes
                warnings.simplefilter("ignore", UserWarning)
                model.fit(X, y)
            points.append({"n_trees": n, "oob_error": 1.0 - float(model.oob_score_)})

        return model, pd.DataFrame(points)
