#!filepath: activity_report/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd


@dataclass
class AnalysisContext:
    """
    AnalysisContext = 一次 run 的唯一上下文

    Semantics:
    - One context == one report run
    - Steps read upstream slots and fill their own slot
    - Fitted* slots are immutable; they only expose transform()
    """

    # -------------------------
    # Identity
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any
    report_dir: Path

    # -------------------------
    # Load / prune
    # -------------------------
    raw: Optional[pd.DataFrame] = None
    schema: Optional[Any] = None
    table: Optional[pd.DataFrame] = None

    # -------------------------
    # Split (predictors / label per subset)
    # -------------------------
    split: Optional[Any] = None
    train_X: Optional[pd.DataFrame] = None
    train_y: Optional[pd.Series] = None
    eval_X: Optional[pd.DataFrame] = None
    eval_y: Optional[pd.Series] = None

    # -------------------------
    # Fitted transforms (fit on train only)
    # -------------------------
    coerced_cells: Dict[str, int] = field(default_factory=dict)
    missingness: Optional[Any] = None
    scaler: Optional[Any] = None
    pca: Optional[Any] = None

    # -------------------------
    # Models
    # -------------------------
    fits: List[Any] = field(default_factory=list)
    selection: Optional[Any] = None
    evaluation: Optional[Any] = None

    # -------------------------
    # Outputs
    # -------------------------
    report_text: str = ""
    artifacts: Dict[str, Path] = field(default_factory=dict)
    predictions: Optional[pd.DataFrame] = None
