# activity_report/training/engines/report_engine.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

from activity_report.pipeline.context import AnalysisContext

_RULE = "=" * 64


class ReportEngine:
    """
    ReportEngine（FINAL）

    Responsibility:
    - Render the human-readable report from a finished context
    - Write machine-friendly companion tables

    Contract:
    - consumes ctx.selection / ctx.evaluation (must exist)
    - never mutates fitted state
    """

    def render(self, ctx: AnalysisContext) -> str:
        sections = [
            self._header(ctx),
            self._data_summary(ctx),
            self._comparison(ctx),
            self._evaluation(ctx),
        ]
        return "\n\n".join(sections) + "\n"

    def write_tables(self, ctx: AnalysisContext, out_dir: Path) -> Dict[str, Path]:
        out_dir.mkdir(parents=True, exist_ok=True)

        comparison_path = out_dir / "model_comparison.csv"
        ctx.selection.comparison.to_csv(comparison_path, index=False)

        confusion_path = out_dir / "confusion_matrix.csv"
        ctx.evaluation.confusion.to_csv(confusion_path)

        return {
            "model_comparison": comparison_path,
            "confusion_matrix": confusion_path,
        }

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------
    @staticmethod
    def _header(ctx: AnalysisContext) -> str:
        return "\n".join(
            [
                _RULE,
                "Activity classification report",
                f"run_id: {ctx.run_id}",
                _RULE,
            ]
        )

    @staticmethod
    def _data_summary(ctx: AnalysisContext) -> str:
        schema = ctx.schema
        split = ctx.split
        missing = ctx.missingness
        scaler = ctx.scaler
        pca = ctx.pca

        coerced = sum(ctx.coerced_cells.values())
        lines = [
            "[Data]",
            f"rows loaded                : {len(ctx.raw)}",
            f"metadata columns dropped   : {len(schema.meta_columns)} {list(schema.meta_columns)}",
            f"predictor columns          : {len(schema.predictor_columns)}",
            f"text-encoded predictors    : {len(schema.text_encoded_columns)} "
            f"({coerced} cells coerced to missing)",
            f"training / evaluation rows : {split.n_train} / {split.n_eval} "
            f"(fraction={split.train_fraction}, seed={split.seed})",
            f"dropped for missingness    : {len(missing.dropped_columns)} "
            f"(threshold >= {missing.threshold:.0%})",
            f"dropped for zero variance  : {len(scaler.dropped_columns)} {list(scaler.dropped_columns)}",
            f"columns scaled             : {len(scaler.columns)}",
            f"principal components       : {pca.n_components} "
            f"(cumulative variance {pca.cumulative_variance[-1]:.4f} "
            f">= {pca.threshold})",
        ]
        return "\n".join(lines)

    @staticmethod
    def _comparison(ctx: AnalysisContext) -> str:
        table = ctx.selection.comparison.copy()
        table["accuracy"] = table["accuracy"].map(lambda v: f"{v:.4f}")
        table["selected"] = table["selected"].map(lambda v: "*" if v else "")
        return "\n".join(
            [
                "[Model comparison] resampled accuracy on the training subset",
                table.to_string(index=False),
                f"selected: {ctx.selection.chosen.name}",
            ]
        )

    @staticmethod
    def _evaluation(ctx: AnalysisContext) -> str:
        ev = ctx.evaluation
        per_class = ev.per_class.copy()
        for col in ("precision", "recall", "f1-score"):
            per_class[col] = per_class[col].map(lambda v: f"{v:.4f}")
        per_class["support"] = per_class["support"].astype(int)

        return "\n".join(
            [
                f"[Evaluation] {ev.model_name} on {len(ev.predictions)} held-out rows",
                "confusion matrix (rows = actual, columns = predicted):",
                ev.confusion.to_string(),
                "",
                f"accuracy                   : {ev.accuracy:.4f}",
                f"out-of-sample error rate   : {ev.error_rate:.4f}",
                "",
                "per-class:",
                per_class.to_string(),
            ]
        )
