# activity_report/training/steps/model_select_step.py
from __future__ import annotations

import pandas as pd

from activity_report import logs
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep
from activity_report.training.engines.evaluate_engine import EvaluateEngine


class ModelSelectStep(PipelineStep):
    """
    ModelSelectStep（FINAL / FROZEN）

    Responsibility:
    - Select the best fit by resampled accuracy (ties → config order)
    - Score the selected model ONCE on the evaluation subset
    """

    stage = "model_select"

    def __init__(self, *, engine: EvaluateEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or EvaluateEngine()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "eval_X", "eval_y", "train_y")
        if not ctx.fits:
            raise RuntimeError(f"[{self.step_name}] no fitted models")

        labels = sorted(pd.unique(pd.concat([ctx.train_y, ctx.eval_y])))

        with self.timed():
            selection = self.engine.select(ctx.fits)
            evaluation = self.engine.evaluate(
                result=selection.chosen,
                X=ctx.eval_X,
                y=ctx.eval_y,
                labels=labels,
            )

        ctx.selection = selection
        ctx.evaluation = evaluation
        self.inst.record("error_rate", round(evaluation.error_rate, 6))
        logs.info(
            f"[{self.step_name}] selected={selection.chosen.name} "
            f"cv_accuracy={selection.chosen.accuracy:.4f} "
            f"eval_accuracy={evaluation.accuracy:.4f} "
            f"error_rate={evaluation.error_rate:.4f}"
        )
        return ctx
