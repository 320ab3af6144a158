# activity_report/steps/missingness_filter_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.engines.missingness_engine import (
    MissingnessFilterEngine,
    assert_dense,
)
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep


class MissingnessFilterStep(PipelineStep):
    """
    MissingnessFilterStep（FINAL）

    Contract:
    - fit drop list on train_X, apply identically to eval_X
    - both subsets must be fully dense afterwards (CompletenessError otherwise)
    """

    stage = "missingness"

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "train_X", "eval_X")
        engine = MissingnessFilterEngine(ctx.cfg.preprocess.missing_threshold)

        with self.timed():
            fitted = engine.fit(ctx.train_X)
            train_X = fitted.transform(ctx.train_X)
            eval_X = fitted.transform(ctx.eval_X)

            assert_dense(train_X, subset="training")
            assert_dense(eval_X, subset="evaluation")

        ctx.missingness = fitted
        ctx.train_X = train_X
        ctx.eval_X = eval_X

        self.inst.record("columns_dropped_missing", len(fitted.dropped_columns))
        logs.info(
            f"[{self.step_name}] retained={len(fitted.retained_columns)} "
            f"dropped={len(fitted.dropped_columns)} threshold={fitted.threshold}"
        )
        return ctx
