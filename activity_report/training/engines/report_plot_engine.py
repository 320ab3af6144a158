# activity_report/training/engines/report_plot_engine.py
from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402


class ReportPlotEngine:
    """
    Advisory diagnostic plots (not machine-readable outputs).

    - score_scatter   : PC1 vs PC2 of the evaluation subset, coloured by correctness
    - oob_error_curve : training OOB error vs number of trees
    """

    def score_scatter(
            self,
            *,
            scores: pd.DataFrame,
            correct: pd.Series,
            path: Path,
            title: str = "Evaluation scores",
    ) -> Path:
        x = scores.iloc[:, 0]
        # single retained component: plot against row order
        if scores.shape[1] > 1:
            y, ylabel = scores.iloc[:, 1], scores.columns[1]
        else:
            y, ylabel = pd.Series(range(len(scores)), index=scores.index), "row"

        ok = correct.loc[scores.index].to_numpy(dtype=bool)

        fig = plt.figure(figsize=(7, 6))
        plt.scatter(x[ok], y[ok], s=8, alpha=0.5, c="tab:blue", label="correct")
        plt.scatter(x[~ok], y[~ok], s=14, alpha=0.9, c="tab:red", marker="x", label="incorrect")
        plt.title(title)
        plt.xlabel(scores.columns[0])
        plt.ylabel(ylabel)
        plt.legend()
        plt.grid(True)
        plt.tight_layout()

        fig.savefig(path)
        plt.close(fig)
        return path

    def oob_error_curve(
            self,
            *,
            curve: pd.DataFrame,
            path: Path,
            title: str = "Training OOB error vs number of trees",
    ) -> Path:
        fig = plt.figure(figsize=(8, 4))
        plt.plot(curve["n_trees"], curve["oob_error"], marker="o", linewidth=1)
        plt.title(title)
        plt.xlabel("Number of trees")
        plt.ylabel("OOB error")
        plt.grid(True)
        plt.tight_layout()

        fig.savefig(path)
        plt.close(fig)
        return path
