#!filepath: activity_report/pipeline/pipeline.py
from __future__ import annotations

from pathlib import Path

from activity_report import logs
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep
from activity_report.utils.errors import AnalysisError
from activity_report.observability.instrumentation import Instrumentation


class PipelineAbort(AnalysisError):
    """
    A step failed; the run stops with no partial report.
    """

    def __init__(self, step_name: str, cause: Exception):
        super().__init__(f"{step_name}: {cause}")
        self.step_name = step_name
        self.cause = cause


class AnalysisPipeline:
    """
    AnalysisPipeline = 调度器（Scheduler）

    Semantics:
    - Straight-line: step n+1 starts only after step n finished
    - No branching, no retry
    - Any step failure aborts the run
      (AnalysisError propagates as is, anything else wrapped in PipelineAbort)
    """

    def __init__(
            self,
            *,
            steps: list[PipelineStep],
            cfg,
            inst: Instrumentation,
            report_dir: Path,
    ):
        self.steps = steps
        self.cfg = cfg
        self.inst = inst
        self.report_dir = report_dir

    def run(self, run_id: str) -> AnalysisContext:
        logs.info(f"[Pipeline] ====== START run_id={run_id} ======")

        ctx = AnalysisContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
            report_dir=Path(self.report_dir),
        )

        for step in self.steps:
            try:
                ctx = step.run(ctx)
            except AnalysisError as e:
                logs.error(f"[Pipeline] ABORT step={step.step_name} reason={e}")
                raise
            except Exception as e:
                logs.error(f"[Pipeline] ABORT step={step.step_name} reason={e!r}")
                raise PipelineAbort(step.step_name, e) from e

        self.inst.generate_timeline_report(run_id)
        logs.info(f"[Pipeline] ====== DONE run_id={run_id} ======")
        return ctx
