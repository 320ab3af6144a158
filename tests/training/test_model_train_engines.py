#!filepath: tests/training/test_model_train_engines.py
import numpy as np
import pandas as pd
import pytest

from activity_report.config.training_config import ModelSpecConfig, TrainingConfig
from activity_report.training.engines.registry import resolve_model_train_engine


@pytest.fixture
def blobs():
    rng = np.random.default_rng(11)
    labels = np.repeat(["A", "B", "C"], 40)
    centers = {"A": [0, 0, 0], "B": [4, 0, 4], "C": [0, 4, -4]}
    X = np.vstack([centers[c] for c in labels]) + rng.normal(0, 0.5, (120, 3))
    return (
        pd.DataFrame(X, columns=["PC1", "PC2", "PC3"]),
        pd.Series(labels, name="classe"),
    )


@pytest.fixture
def training_cfg():
    return TrainingConfig(
        n_jobs=1,
        cv_folds=3,
        rf={"n_trees": 20, "curve_step": 5},
        svm={"c_grid": [0.5, 1.0]},
    )


def _spec(family, resampling):
    return ModelSpecConfig(name=f"{family}_{resampling}", family=family, resampling=resampling)


def test_rf_cv_engine(blobs, training_cfg):
    X, y = blobs
    result = resolve_model_train_engine(
        spec=_spec("random_forest", "cv"), cfg=training_cfg
    ).train(X=X, y=y)

    assert result.accuracy > 0.9
    assert result.params["max_features"] in (2, 3)
    assert list(result.tuning.columns) == ["max_features", "accuracy", "accuracy_sd"]
    assert set(result.model.predict(X)) <= {"A", "B", "C"}


def test_rf_oob_engine_curve(blobs, training_cfg):
    X, y = blobs
    result = resolve_model_train_engine(
        spec=_spec("random_forest", "oob"), cfg=training_cfg
    ).train(X=X, y=y)

    curve = result.diagnostics["oob_error_curve"]

    assert curve["n_trees"].tolist() == [5, 10, 15, 20]
    assert curve["oob_error"].between(0.0, 1.0).all()
    assert result.accuracy == pytest.approx(1.0 - curve["oob_error"].iloc[-1])
    assert result.model.n_estimators == 20


def test_svm_engine(blobs, training_cfg):
    X, y = blobs
    result = resolve_model_train_engine(
        spec=_spec("svm_radial", "cv"), cfg=training_cfg
    ).train(X=X, y=y)

    assert result.params["C"] in (0.5, 1.0)
    assert result.tuning["C"].tolist() == [0.5, 1.0]
    assert 0.0 <= result.accuracy <= 1.0
