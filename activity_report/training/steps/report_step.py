# activity_report/training/steps/report_step.py
from __future__ import annotations

from activity_report import logs
from activity_report.pipeline.context import AnalysisContext
from activity_report.pipeline.step import PipelineStep
from activity_report.training.engines.report_engine import ReportEngine
from activity_report.training.engines.report_plot_engine import ReportPlotEngine


class ReportStep(PipelineStep):
    """
    ReportStep（FINAL）

    Outputs (ctx.report_dir):
    - report.txt
    - model_comparison.csv
    - confusion_matrix.csv
    - score_scatter.png
    - oob_error_curve.png (only when an OOB curve exists)
    - predictions.csv (only when a scoring table was given)
    """

    stage = "report"

    def __init__(
            self,
            *,
            engine: ReportEngine | None = None,
            plot_engine: ReportPlotEngine | None = None,
            inst=None,
    ):
        super().__init__(inst)
        self.engine = engine or ReportEngine()
        self.plot_engine = plot_engine or ReportPlotEngine()

    def run(self, ctx: AnalysisContext) -> AnalysisContext:
        self.require(ctx, "selection", "evaluation")
        out_dir = ctx.report_dir
        out_dir.mkdir(parents=True, exist_ok=True)

        with self.timed():
            text = self.engine.render(ctx)
            report_path = out_dir / "report.txt"
            report_path.write_text(text, encoding="utf-8")

            ctx.report_text = text
            ctx.artifacts["report"] = report_path
            ctx.artifacts.update(self.engine.write_tables(ctx, out_dir))

            if ctx.predictions is not None:
                predictions_path = out_dir / "predictions.csv"
                ctx.predictions.to_csv(predictions_path, index=False)
                ctx.artifacts["predictions"] = predictions_path

            if ctx.cfg.report.plots:
                self._plots(ctx)

        for name, path in ctx.artifacts.items():
            logs.info(f"[{self.step_name}] saved {name} -> {path}")
        return ctx

    def _plots(self, ctx: AnalysisContext) -> None:
        out_dir = ctx.report_dir

        ctx.artifacts["score_scatter"] = self.plot_engine.score_scatter(
            scores=ctx.eval_X,
            correct=ctx.evaluation.correct,
            path=out_dir / "score_scatter.png",
            title=f"Evaluation scores ({ctx.evaluation.model_name})",
        )

        curve = next(
            (
                fit.diagnostics["oob_error_curve"]
                for fit in ctx.fits
                if "oob_error_curve" in fit.diagnostics
            ),
            None,
        )
        if curve is None:
            logs.warning(f"[{self.step_name}] no OOB error curve, skip plot")
            return

        ctx.artifacts["oob_error_curve"] = self.plot_engine.oob_error_curve(
            curve=curve,
            path=out_dir / "oob_error_curve.png",
        )
