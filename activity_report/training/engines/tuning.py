# activity_report/training/engines/tuning.py
from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np


def default_mtry_grid(p: int, tune_length: int = 3) -> List[int]:
    """
    Candidate "predictors sampled per split" values for p predictors.

    - p <= tune_length : every value in 2..p
    - p < 500          : tune_length evenly spaced values in [2, p], floored
    - otherwise        : log2-spaced values in [2, p], floored
    """
    if p < 2:
        return [1]

    if tune_length == 1:
        return [max(int(np.floor(np.sqrt(p))), 1)]

    if p <= tune_length:
        seq = np.linspace(2, p, p - 1)
    elif p < 500:
        seq = np.linspace(2, p, tune_length)
    else:
        seq = 2 ** np.linspace(1, np.log2(p), tune_length)

    return sorted({int(np.floor(v)) for v in seq})


def resolve_mtry_grid(
        p: int,
        configured: Optional[Iterable[int]],
        tune_length: int,
) -> List[int]:
    """
    Configured grid clamped to [1, p] (order kept, duplicates removed);
    None → default_mtry_grid.
    """
    if configured is None:
        return default_mtry_grid(p, tune_length)

    grid: List[int] = []
    for m in configured:
        m = min(max(int(m), 1), p)
        if m not in grid:
            grid.append(m)
    return grid
