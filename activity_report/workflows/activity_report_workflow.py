# activity_report/workflows/activity_report_workflow.py
from __future__ import annotations

from datetime import datetime
from pathlib import Path

from activity_report.config.app_config import AppConfig
from activity_report.observability.instrumentation import Instrumentation
from activity_report.pipeline.pipeline import AnalysisPipeline
from activity_report.utils.path import PathManager

from activity_report.steps.load_step import LoadStep
from activity_report.steps.prune_step import PruneStep
from activity_report.steps.split_step import SplitStep
from activity_report.steps.coerce_step import CoerceStep
from activity_report.steps.missingness_filter_step import MissingnessFilterStep
from activity_report.steps.scale_step import ScaleStep
from activity_report.steps.pca_step import PCAStep
from activity_report.steps.score_step import ScoreStep

from activity_report.training.steps.model_train_step import ModelTrainStep
from activity_report.training.steps.model_select_step import ModelSelectStep
from activity_report.training.steps.report_step import ReportStep


def new_run_id() -> str:
    # microseconds: runs started in the same second get distinct report dirs
    return datetime.now().strftime("%Y%m%d-%H%M%S-%f")


def build_activity_report_pipeline(
        cfg: AppConfig | None = None,
        *,
        run_id: str,
        output_dir: str | None = None,
) -> AnalysisPipeline:
    """
    Activity Report Workflow (FINAL / FROZEN)

    load → prune → split → coerce → missingness → scale → pca
         → train → select/evaluate → (score) → report

    Nothing is written to report_dir before the last step.
    """

    if cfg is None:
        cfg = AppConfig.load()
    inst = Instrumentation()

    # --output-dir is taken as given, config paths are relative to <root>
    if output_dir:
        base = Path(output_dir)
    elif cfg.report.output_dir:
        base = PathManager.resolve(cfg.report.output_dir)
    else:
        base = None
    report_dir = PathManager.report_dir(run_id, base)

    return AnalysisPipeline(
        steps=[
            LoadStep(inst=inst),
            PruneStep(inst=inst),
            SplitStep(inst=inst),
            CoerceStep(inst=inst),
            MissingnessFilterStep(inst=inst),
            ScaleStep(inst=inst),
            PCAStep(inst=inst),
            ModelTrainStep(inst=inst),
            ModelSelectStep(inst=inst),
            ScoreStep(inst=inst),
            ReportStep(inst=inst),
        ],
        cfg=cfg,
        inst=inst,
        report_dir=report_dir,
    )
