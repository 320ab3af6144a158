# activity_report/steps/split_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.engines.split_engine import SplitEngine
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep


class SplitStep(PipelineStep):
    """
    SplitStep（FINAL / FROZEN）

    Contract:
    - consumes ctx.table
    - produces ctx.split + train_X / train_y / eval_X / eval_y
    - no row ever crosses subsets afterwards
    """

    stage = "split"

    def __init__(self, *, engine: SplitEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or SplitEngine()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "table", "schema")
        cfg = ctx.cfg.preprocess
        schema = ctx.schema

        y = ctx.table[schema.label_column].astype(str)
        X = ctx.table.loc[:, list(schema.predictor_columns)]

        with self.timed():
            split = self.engine.split(
                y,
                train_fraction=cfg.train_fraction,
                seed=cfg.seed,
            )

        ctx.split = split
        ctx.train_X = X.iloc[split.train_index]
        ctx.train_y = y.iloc[split.train_index]
        ctx.eval_X = X.iloc[split.eval_index]
        ctx.eval_y = y.iloc[split.eval_index]

        self.inst.record("train_rows", split.n_train)
        self.inst.record("eval_rows", split.n_eval)
        logs.info(
            f"[{self.step_name}] train={split.n_train} eval={split.n_eval} "
            f"seed={split.seed}"
        )
        return ctx
