# activity_report/steps/pca_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.engines.pca_engine import PCAEngine
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep


class PCAStep(PipelineStep):
    """
    PCAStep（FINAL）

    Contract:
    - fit on scaled train_X only
    - train_X / eval_X replaced by component scores (PC1..PCk)
    """

    stage = "pca"

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "train_X", "eval_X")
        engine = PCAEngine(ctx.cfg.preprocess.pca_variance)

        with self.timed():
            with self.inst.timer("pca_fit"):
                pca = engine.fit(ctx.train_X)
            ctx.train_X = pca.transform(ctx.train_X)
            ctx.eval_X = pca.transform(ctx.eval_X)

        ctx.pca = pca

        self.inst.record("pca_components", pca.n_components)
        logs.info(
            f"[{self.step_name}] components={pca.n_components} "
            f"cumulative_variance={pca.cumulative_variance[-1]:.4f}"
        )
        return ctx
