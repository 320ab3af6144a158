# activity_report/steps/load_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.engines.loader_engine import LoaderEngine
from activity_report.engines.schema import ColumnSchema
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep
from activity_report.utils.errors import LoadError
from activity_report.utils.path import PathManager


class LoadStep(PipelineStep):
    """
    LoadStep（FINAL）

    Contract:
    - produces ctx.raw (untouched table) and ctx.schema
    - schema is declared here once; later steps never re-infer roles
    """

    stage = "load"

    def __init__(self, *, engine: LoaderEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or LoaderEngine()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        cfg = ctx.cfg.data
        if not cfg.csv_path:
            raise LoadError("data.csv_path is not configured")

        path = PathManager.resolve(cfg.csv_path)

        with self.timed():
            with self.inst.timer("load_csv"):
                raw = self.engine.load(path, label_column=cfg.label_column)

            schema = ColumnSchema.declare(
                raw,
                label_column=cfg.label_column,
                meta_column_count=cfg.meta_column_count,
            )

        ctx.raw = raw
        ctx.schema = schema

        self.inst.record("rows_loaded", len(raw))
        logs.info(
            f"[{self.step_name}] predictors={len(schema.predictor_columns)} "
            f"text_encoded={len(schema.text_encoded_columns)} "
            f"label={schema.label_column}"
        )
        return ctx
