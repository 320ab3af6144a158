# activity_report/engines/type_normalizer_engine.py
from __future__ import annotations

from typing import Dict, Iterable, Tuple

import pandas as pd


class TypeNormalizerEngine:
    """
    Text-encoded numeric columns → float.

    Non-numeric tokens ("#DIV/0!", "", ...) become NaN; never fatal.
    """

    def normalize(
            self,
            df: pd.DataFrame,
            columns: Iterable[str],
    ) -> Tuple[pd.DataFrame, Dict[str, int]]:
        """
        Returns:
            normalized copy, {column: cells turned into NaN by coercion}
        """
        out = df.copy()
        coerced: Dict[str, int] = {}

        for col in columns:
            if col not in out.columns:
                continue

            before = out[col]
            if pd.api.types.is_bool_dtype(before):
                out[col] = before.astype(float)
                continue

            after = pd.to_numeric(before, errors="coerce").astype(float)
            # NaN produced by coercion only, pre-existing missing not counted
            coerced[col] = int((after.isna() & before.notna()).sum())
            out[col] = after

        return out, coerced
