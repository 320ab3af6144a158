#!filepath: tests/pipeline/test_activity_report_e2e.py
from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from activity_report.utils.errors import CompletenessError, LoadError
from activity_report.workflows.activity_report_workflow import (
    build_activity_report_pipeline,
    new_run_id,
)


@pytest.fixture
def finished(small_cfg, tmp_path: Path):
    pipeline = build_activity_report_pipeline(
        small_cfg, run_id="e2e", output_dir=str(tmp_path / "out")
    )
    return pipeline.run("e2e")


def test_split_sizes_and_disjoint(finished):
    ctx = finished

    assert ctx.split.n_train == 750
    assert ctx.split.n_eval == 250
    assert len(ctx.train_X) == 750
    assert len(ctx.eval_X) == 250
    assert len(np.intersect1d(ctx.split.train_index, ctx.split.eval_index)) == 0


def test_preprocessing_state(finished):
    ctx = finished

    # sparse text summaries: coerced then dropped for missingness
    assert set(ctx.missingness.dropped_columns) == {"kurtosis_roll_belt", "skewness_yaw_belt"}
    assert ctx.coerced_cells["skewness_yaw_belt"] > 0
    # constant column: dropped for zero variance
    assert ctx.scaler.dropped_columns == ("amplitude_yaw_belt",)
    assert len(ctx.scaler.columns) == 50

    k = ctx.pca.n_components
    assert 1 <= k <= 50
    assert ctx.pca.cumulative_variance[-1] >= 0.95
    assert list(ctx.train_X.columns) == ctx.pca.component_names
    assert list(ctx.eval_X.columns) == ctx.pca.component_names


def test_models_and_selection(finished):
    ctx = finished

    assert [f.name for f in ctx.fits] == ["rf_cv", "rf_oob", "svm_rbf"]
    best = max(f.accuracy for f in ctx.fits)
    assert ctx.selection.chosen.accuracy == best
    assert ctx.selection.comparison["selected"].sum() == 1


def test_evaluation(finished):
    ctx = finished
    ev = ctx.evaluation

    assert ev.model_name == ctx.selection.chosen.name
    assert 0.0 <= ev.error_rate <= 1.0
    assert ev.error_rate == pytest.approx(1.0 - ev.accuracy)

    actual_counts = ctx.eval_y.value_counts()
    for label in ev.labels:
        assert ev.confusion.loc[label].sum() == actual_counts.get(label, 0)
    assert int(ev.confusion.to_numpy().sum()) == 250
    # scalar results live on the instrumentation, not on the context
    assert ctx.inst.metrics["error_rate"] == round(ev.error_rate, 6)
    assert not hasattr(ctx, "metrics")


def test_report_outputs(finished, tmp_path: Path):
    ctx = finished
    out = tmp_path / "out" / "e2e"

    assert ctx.report_dir == out
    for name in (
        "report.txt",
        "model_comparison.csv",
        "confusion_matrix.csv",
        "score_scatter.png",
        "oob_error_curve.png",
    ):
        assert (out / name).exists(), name

    text = (out / "report.txt").read_text(encoding="utf-8")
    assert "out-of-sample error rate" in text
    assert "rf_oob" in text
    assert text == ctx.report_text

    comparison = pd.read_csv(out / "model_comparison.csv")
    assert comparison["model"].tolist() == ["rf_cv", "rf_oob", "svm_rbf"]

    confusion = pd.read_csv(out / "confusion_matrix.csv", index_col=0)
    assert confusion.to_numpy().sum() == 250


def test_deterministic_rerun(small_cfg, tmp_path: Path):
    a = build_activity_report_pipeline(small_cfg, run_id="a", output_dir=str(tmp_path)).run("a")
    b = build_activity_report_pipeline(small_cfg, run_id="b", output_dir=str(tmp_path)).run("b")

    assert np.array_equal(a.split.train_index, b.split.train_index)
    assert a.pca.n_components == b.pca.n_components
    assert [f.accuracy for f in a.fits] == [f.accuracy for f in b.fits]
    assert a.evaluation.error_rate == b.evaluation.error_rate


def test_scoring_table(small_cfg, score_csv: Path, tmp_path: Path):
    small_cfg.data.score_csv_path = str(score_csv)
    ctx = build_activity_report_pipeline(
        small_cfg, run_id="score", output_dir=str(tmp_path)
    ).run("score")

    predictions = pd.read_csv(tmp_path / "score" / "predictions.csv")

    assert predictions["problem_id"].tolist() == list(range(1, 21))
    assert set(predictions["prediction"]) <= {"A", "B", "C", "D", "E"}
    assert len(ctx.predictions) == 20
    assert ctx.artifacts["predictions"] == tmp_path / "score" / "predictions.csv"


def test_missing_input_aborts(small_cfg, tmp_path: Path):
    small_cfg.data.csv_path = str(tmp_path / "absent.csv")

    with pytest.raises(LoadError):
        build_activity_report_pipeline(small_cfg, run_id="x", output_dir=str(tmp_path)).run("x")

    assert not (tmp_path / "x" / "report.txt").exists()


def test_incomplete_retained_column_aborts(small_cfg, activity_table, tmp_path: Path):
    # 30% missing survives the 80% filter but leaves holes
    holes = activity_table.copy()
    holes.loc[holes.index % 10 < 3, "sensor_03"] = np.nan
    path = tmp_path / "holes.csv"
    holes.to_csv(path, index=False)
    small_cfg.data.csv_path = str(path)

    with pytest.raises(CompletenessError):
        build_activity_report_pipeline(small_cfg, run_id="h", output_dir=str(tmp_path)).run("h")


def test_bad_scoring_table_leaves_no_report(small_cfg, make_table, tmp_path: Path):
    scoring = make_table(n_rows=20, seed=99, with_label=False).drop(columns=["sensor_05"])
    path = tmp_path / "score-missing-column.csv"
    scoring.to_csv(path, index=False)
    small_cfg.data.score_csv_path = str(path)

    with pytest.raises(LoadError, match="sensor_05"):
        build_activity_report_pipeline(
            small_cfg, run_id="partial", output_dir=str(tmp_path)
        ).run("partial")

    out = tmp_path / "partial"
    assert not (out / "report.txt").exists()
    assert not (out / "model_comparison.csv").exists()
    assert not (out / "confusion_matrix.csv").exists()


def test_run_ids_distinct_within_one_second():
    ids = {new_run_id() for _ in range(50)}

    assert len(ids) > 1
