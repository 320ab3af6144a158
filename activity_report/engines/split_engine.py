# activity_report/engines/split_engine.py
from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.model_selection import StratifiedShuffleSplit

from activity_report.utils.errors import SplitError


@dataclass(frozen=True)
class SplitAssignment:
    """
    One stratified partition, fixed for the rest of the run.

    train_index / eval_index are positional, sorted and disjoint.
    """

    train_index: np.ndarray
    eval_index: np.ndarray
    train_fraction: float
    seed: int

    @property
    def n_train(self) -> int:
        return len(self.train_index)

    @property
    def n_eval(self) -> int:
        return len(self.eval_index)


class SplitEngine:
    """
    SplitEngine（FINAL / FROZEN）

    Responsibility:
    - Stratified random partition keyed on the label
    - Deterministic for a fixed seed

    Contract:
    - train size = floor(train_fraction * n), eval = complement
    - per-class proportions approximate the full table in both subsets
    """

    def split(
            self,
            y: pd.Series,
            *,
            train_fraction: float,
            seed: int,
    ) -> SplitAssignment:
        if not 0.0 < train_fraction < 1.0:
            raise SplitError(f"train_fraction must be in (0, 1), got {train_fraction}")

        counts = y.value_counts()
        too_small = counts[counts < 2]
        if not too_small.empty:
            raise SplitError(
                f"classes with fewer than 2 rows cannot be stratified: "
                f"{too_small.to_dict()}"
            )

        n = len(y)
        n_train = int(np.floor(train_fraction * n))

        splitter = StratifiedShuffleSplit(
            n_splits=1,
            train_size=n_train,
            test_size=n - n_train,
            random_state=seed,
        )

        try:
            train_idx, eval_idx = next(splitter.split(np.zeros(n), y.to_numpy()))
        except ValueError as e:
            raise SplitError(str(e)) from e

        return SplitAssignment(
            train_index=np.sort(train_idx),
            eval_index=np.sort(eval_idx),
            train_fraction=train_fraction,
            seed=seed,
        )
