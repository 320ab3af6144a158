# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest
from loguru import logger

from activity_report.config.app_config import AppConfig
from activity_report.utils.path import PathManager

META_COLUMNS = [
    "X",
    "user_name",
    "raw_timestamp_part_1",
    "raw_timestamp_part_2",
    "cvtd_timestamp",
    "new_window",
    "num_window",
]

CLASS_PROPORTIONS = {"A": 0.28, "B": 0.19, "C": 0.17, "D": 0.16, "E": 0.20}


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield


@pytest.fixture(autouse=True)
def isolated_root(tmp_path: Path):
    PathManager.set_root(tmp_path)
    yield tmp_path
    PathManager.set_root(None)


def make_activity_table(
        n_rows: int = 1000,
        n_numeric: int = 50,
        seed: int = 7,
        with_label: bool = True,
) -> pd.DataFrame:
    """
    Synthetic sensor table shaped like the weight-lifting data:

    7 metadata columns | numeric predictors | sparse text-encoded summaries
    | one constant column | classe
    """
    rng = np.random.default_rng(seed)

    labels = rng.choice(
        list(CLASS_PROPORTIONS),
        size=n_rows,
        p=list(CLASS_PROPORTIONS.values()),
    )
    centers = {c: rng.normal(0, 2, n_numeric) for c in CLASS_PROPORTIONS}

    df = pd.DataFrame(
        {
            "X": np.arange(1, n_rows + 1),
            "user_name": rng.choice(["adelmo", "carlitos", "pedro"], size=n_rows),
            "raw_timestamp_part_1": 1322489600 + np.arange(n_rows),
            "raw_timestamp_part_2": rng.integers(0, 999999, n_rows),
            "cvtd_timestamp": "05/12/2011 11:23",
            "new_window": np.where(np.arange(n_rows) % 50 == 0, "yes", "no"),
            "num_window": np.arange(n_rows) // 20,
        }
    )

    signal = np.vstack([centers[c] for c in labels]) + rng.normal(0, 1, (n_rows, n_numeric))
    for i in range(n_numeric):
        df[f"sensor_{i:02d}"] = signal[:, i]

    # summary rows only on window boundaries, "#DIV/0!" where undefined
    window_row = df["new_window"] == "yes"
    kurtosis = np.full(n_rows, None, dtype=object)
    kurtosis[window_row.to_numpy()] = "#DIV/0!"
    kurtosis[np.flatnonzero(window_row)[::2]] = "-1.25"
    df["kurtosis_roll_belt"] = kurtosis

    df["skewness_yaw_belt"] = np.where(window_row, "#DIV/0!", None)

    df["amplitude_yaw_belt"] = 0.0

    if with_label:
        df["classe"] = labels
    else:
        df["problem_id"] = np.arange(1, n_rows + 1)

    return df


@pytest.fixture
def make_table():
    return make_activity_table


@pytest.fixture
def activity_table() -> pd.DataFrame:
    return make_activity_table()


@pytest.fixture
def activity_csv(tmp_path: Path, activity_table: pd.DataFrame) -> Path:
    path = tmp_path / "data" / "pml-training.csv"
    path.parent.mkdir(parents=True, exist_ok=True)
    activity_table.to_csv(path, index=False)
    return path


@pytest.fixture
def score_csv(tmp_path: Path) -> Path:
    path = tmp_path / "data" / "pml-testing.csv"
    path.parent.mkdir(parents=True, exist_ok=True)
    make_activity_table(n_rows=20, seed=99, with_label=False).to_csv(path, index=False)
    return path


@pytest.fixture
def small_cfg(activity_csv: Path) -> AppConfig:
    """
    Fast config: tiny forests, 3 folds, single worker.
    """
    return AppConfig(
        data={"csv_path": str(activity_csv)},
        training={
            "n_jobs": 1,
            "cv_folds": 3,
            "rf": {"n_trees": 30, "curve_step": 10},
            "svm": {"c_grid": [0.5, 1.0]},
        },
    )
