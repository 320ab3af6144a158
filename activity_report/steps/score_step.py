# activity_report/steps/score_step.py
from __future__ import annotations

import pandas as pd

from activity_report import logs
from activity_report.engines.loader_engine import LoaderEngine
from activity_report.engines.missingness_engine import assert_dense
from activity_report.engines.type_normalizer_engine import TypeNormalizerEngine
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep
from activity_report.utils.errors import LoadError
from activity_report.utils.path import PathManager


class ScoreStep(PipelineStep):
    """
    ScoreStep（OPTIONAL）

    Apply the fitted chain (missingness → scaler → PCA) and the selected
    model to an unlabeled table, e.g. the 20-case prediction set.

    Contract:
    - skipped when data.score_csv_path is not set
    - no refit: only transform() of fitted state is used
    - fills ctx.predictions only; runs before ReportStep, so a bad
      scoring table aborts the run before any file is written
    """

    stage = "score"

    def __init__(self, *, loader: LoaderEngine | None = None, inst=None):
        super().__init__(inst)
        self.loader = loader or LoaderEngine()
        self.normalizer = TypeNormalizerEngine()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        cfg = ctx.cfg.data
        if not cfg.score_csv_path:
            logs.info(f"[{self.step_name}] no score_csv_path, skip")
            return ctx

        self.require(ctx, "missingness", "scaler", "pca", "selection")

        path = PathManager.resolve(cfg.score_csv_path)

        with self.timed():
            raw = self.loader.load(path, label_column=cfg.label_column, require_label=False)
            X = self._prepare(ctx, raw)
            scores = ctx.pca.transform(ctx.scaler.transform(X))
            predicted = ctx.selection.chosen.model.predict(scores)

        if cfg.id_column in raw.columns:
            ids = raw[cfg.id_column].to_numpy()
            id_name = cfg.id_column
        else:
            ids = range(1, len(raw) + 1)
            id_name = "row"

        ctx.predictions = pd.DataFrame({id_name: ids, "prediction": predicted})

        logs.info(f"[{self.step_name}] scored {len(ctx.predictions)} rows")
        return ctx

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _prepare(self, ctx: AnalysisContext, raw: pd.DataFrame) -> pd.DataFrame:
        retained = list(ctx.missingness.retained_columns)
        predictors = raw.iloc[:, ctx.cfg.data.meta_column_count:]

        absent = [c for c in retained if c not in predictors.columns]
        if absent:
            raise LoadError(f"scoring table lacks retained predictors: {absent[:10]}")

        X = predictors.loc[:, retained]
        text_encoded = [
            c for c in retained if not pd.api.types.is_numeric_dtype(X[c])
        ]
        X, _ = self.normalizer.normalize(X, text_encoded)

        X = ctx.missingness.transform(X)
        assert_dense(X, subset="scoring")
        return X
