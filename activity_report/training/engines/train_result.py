from dataclasses import dataclass, field
from typing import Any, Dict

import pandas as pd


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult（FINAL / FROZEN）

    语义：
    - 一次完整训练（含调参）的纯内存态结果
    - 不包含任何 I/O 语义
    """
    name: str
    family: str
    resampling: str
    model: Any
    accuracy: float
    params: Dict[str, Any]
    tuning: pd.DataFrame
    diagnostics: Dict[str, Any] = field(default_factory=dict)
