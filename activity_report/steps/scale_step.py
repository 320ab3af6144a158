# activity_report/steps/scale_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.engines.scaler_engine import ScalerEngine
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep


class ScaleStep(PipelineStep):
    """
    Fit center/scale on train_X, transform both subsets.
    """

    stage = "scale"

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "train_X", "eval_X")
        engine = ScalerEngine(ctx.cfg.preprocess.variance_tolerance)

        with self.timed():
            scaler = engine.fit(ctx.train_X)
            ctx.train_X = scaler.transform(ctx.train_X)
            ctx.eval_X = scaler.transform(ctx.eval_X)

        ctx.scaler = scaler

        self.inst.record("columns_dropped_zero_variance", len(scaler.dropped_columns))
        logs.info(
            f"[{self.step_name}] scaled={len(scaler.columns)} "
            f"zero_variance={len(scaler.dropped_columns)}"
        )
        return ctx
