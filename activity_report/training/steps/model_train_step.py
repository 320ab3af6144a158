# activity_report/training/steps/model_train_step.py
from __future__ import annotations

from joblib import parallel_config

from activity_report import logs
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep
from activity_report.training.engines.registry import resolve_model_train_engine


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep（BATCH / FINAL）

    Contract:
    - consumes ctx.train_X / ctx.train_y (component scores)
    - produces ctx.fits, one TrainResult per configured model, config order
    - all fits share one joblib pool of training.n_jobs workers
    - never touches eval_X / eval_y
    """

    stage = "model_train"

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "train_X", "train_y")
        cfg = ctx.cfg.training

        engines = [
            resolve_model_train_engine(spec=spec, cfg=cfg) for spec in cfg.models
        ]

        fits = []
        with self.timed(), parallel_config(backend="loky", n_jobs=cfg.n_jobs):
            for spec, engine in zip(cfg.models, engines):
                with self.inst.timer(f"train_{spec.name}"):
                    result = engine.train(X=ctx.train_X, y=ctx.train_y)

                fits.append(result)
                self.inst.record(f"accuracy@{spec.name}", round(result.accuracy, 6))
                logs.info(
                    f"[{self.step_name}] {spec.name} accuracy={result.accuracy:.4f} "
                    f"params={result.params}"
                )

        ctx.fits = fits
        return ctx
