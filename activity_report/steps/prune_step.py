# activity_report/steps/prune_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep


class PruneStep(PipelineStep):
    """
    Drop the fixed metadata block declared by ctx.schema.
    """

    stage = "prune"

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "raw", "schema")
        schema = ctx.schema

        keep = list(schema.predictor_columns) + [schema.label_column]
        ctx.table = ctx.raw.loc[:, keep].reset_index(drop=True)

        logs.info(f"[{self.step_name}] dropped {list(schema.meta_columns)}")
        return ctx
