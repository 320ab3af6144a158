# activity_report/steps/coerce_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.engines.type_normalizer_engine import TypeNormalizerEngine
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep


class CoerceStep(PipelineStep):
    """
    Text-encoded predictors → numeric on both subsets.

    Stateless: nothing is fit, bad tokens become missing values.
    """

    stage = "coerce"

    def __init__(self, *, engine: TypeNormalizerEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or TypeNormalizerEngine()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "train_X", "eval_X", "schema")
        columns = ctx.schema.text_encoded_columns

        if not columns:
            logs.info(f"[{self.step_name}] no text-encoded predictors")
            return ctx

        with self.timed():
            ctx.train_X, train_coerced = self.engine.normalize(ctx.train_X, columns)
            ctx.eval_X, eval_coerced = self.engine.normalize(ctx.eval_X, columns)

        ctx.coerced_cells = {
            c: train_coerced.get(c, 0) + eval_coerced.get(c, 0) for c in columns
        }

        total = sum(ctx.coerced_cells.values())
        self.inst.record("coerced_cells", total)
        logs.info(
            f"[{self.step_name}] columns={len(columns)} coerced_cells={total}"
        )
        return ctx
