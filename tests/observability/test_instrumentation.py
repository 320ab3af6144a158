#!filepath: tests/observability/test_instrumentation.py

import time
from activity_report.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)

from loguru import logger


def test_leaf_timer():
    inst = Instrumentation(enabled=True)

    with inst.timer("train_rf_cv"):
        time.sleep(0.01)

    assert "train_rf_cv" in inst.timeline
    assert inst.timeline["train_rf_cv"] > 0


def test_parent_scope_not_in_timeline():
    inst = Instrumentation(enabled=True)

    with inst.timer("ModelTrainStep", record=False):
        with inst.timer("train_svm_rbf"):
            pass

    assert list(inst.timeline) == ["train_svm_rbf"]


def test_repeated_leaf_accumulates():
    inst = Instrumentation(enabled=True)

    with inst.timer("pca_fit"):
        time.sleep(0.005)
    first = inst.timeline["pca_fit"]
    with inst.timer("pca_fit"):
        time.sleep(0.005)

    assert inst.timeline["pca_fit"] > first


def test_timer_records_even_when_body_raises():
    inst = Instrumentation(enabled=True)

    try:
        with inst.timer("load_csv"):
            raise ValueError("bad")
    except ValueError:
        pass

    assert "load_csv" in inst.timeline


def test_metrics():
    inst = Instrumentation(enabled=True)
    inst.record("rows_loaded", 1000)

    assert inst.metrics["rows_loaded"] == 1000


def test_disabled_records_nothing():
    inst = Instrumentation(enabled=False)

    with inst.timer("anything"):
        pass
    inst.record("x", 1)

    assert inst.timeline == {}
    assert inst.metrics == {}


def test_noop_instrumentation():
    inst = NoOpInstrumentation()

    with inst.timer("anything"):
        pass
    inst.record("x", 1)
    inst.generate_timeline_report("r1")

    assert inst.enabled is False
    assert inst.timeline == {}


def test_generate_timeline_report():
    inst = Instrumentation(enabled=True)

    with inst.timer("load_csv"):
        time.sleep(0.005)
    inst.record("pca_components", 7)

    captured = []
    sink_id = logger.add(lambda msg: captured.append(str(msg)))

    inst.generate_timeline_report("20261018-101500")

    logger.remove(sink_id)

    output = "\n".join(captured)

    assert "load_csv" in output
    assert "20261018-101500" in output
    assert "Run timeline" in output
    assert "pca_components = 7" in output
