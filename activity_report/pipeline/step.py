#!filepath: activity_report/pipeline/step.py
from __future__ import annotations

from typing import Optional

from activity_report.pipeline.context import AnalysisContext
from activity_report.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    One stage of an analysis run.

    A step reads the upstream slots of AnalysisContext, delegates the work
    to a pure engine and fills its own slot. Steps never branch or retry.

    Timing:
      - timed() marks the step boundary and is not kept in the timeline
      - leaf timers (fits, file reads) are chosen by the step itself
    """

    stage: str = ""

    def __init__(self, inst: Optional[Instrumentation] = None):
        self.inst: Instrumentation = inst if inst is not None else NoOpInstrumentation()

    @property
    def step_name(self) -> str:
        return type(self).__name__

    def timed(self):
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        raise NotImplementedError

    def require(self, ctx: AnalysisContext, *slots: str) -> None:
        """
        Upstream slots must be filled; a gap means steps were wired out of order.
        """
        missing = [s for s in slots if getattr(ctx, s, None) is None]
        if missing:
            raise RuntimeError(
                f"[{self.step_name}] upstream slots not ready: {missing}"
            )
