#!filepath: activity_report/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

from activity_report import logs


@dataclass
class Instrumentation:
    """
    Run-level accounting（leaf timers + metrics）

    - timer(name)               : leaf, elapsed seconds kept in timeline
    - timer(name, record=False) : parent scope (step boundary), not kept
    - record(name, value)       : scalar metric (rows, components, accuracy)

    Nothing here changes pipeline results; disabled means no bookkeeping.
    """

    enabled: bool = True
    timeline: Dict[str, float] = field(default_factory=OrderedDict)
    metrics: Dict[str, Any] = field(default_factory=dict)

    @contextmanager
    def timer(self, name: str, *, record: bool = True) -> Iterator[None]:
        if not self.enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        finally:
            if record:
                # re-entered leaf names accumulate (e.g. one timer per fold)
                elapsed = time.perf_counter() - start
                self.timeline[name] = self.timeline.get(name, 0.0) + elapsed

    def record(self, name: str, value: Any) -> None:
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.info(f"[Metric] {name} = {value}")

    def generate_timeline_report(self, run_id: str) -> None:
        if not self.enabled:
            return

        total = sum(self.timeline.values())
        logs.info(f"[Timeline] ===== Run timeline for {run_id} =====")
        for name, sec in self.timeline.items():
            share = sec / total if total > 0 else 0.0
            logs.info(f"[Timeline] {name:<28} {sec:>8.3f}s {share:>6.1%}")
        logs.info(f"[Timeline] {'total':<28} {total:>8.3f}s")

        for name, value in self.metrics.items():
            logs.info(f"[Timeline] metric {name} = {value}")


class NoOpInstrumentation(Instrumentation):
    """Steps built without an Instrumentation get this one."""

    def __init__(self):
        super().__init__(enabled=False)
