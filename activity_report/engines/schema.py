# activity_report/engines/schema.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import pandas as pd

from activity_report.utils.errors import LoadError


@dataclass(frozen=True)
class ColumnSchema:
    """
    ColumnSchema（FROZEN）

    Declared once at load time, never re-inferred per stage:
    - meta_columns      : leading identifier / timestamp / window columns (dropped)
    - label_column      : categorical outcome
    - predictor_columns : everything else, in file order
    - text_encoded_columns : predictors stored as text (coerced later)
    """

    meta_columns: Tuple[str, ...]
    label_column: str
    predictor_columns: Tuple[str, ...]
    text_encoded_columns: Tuple[str, ...]

    @classmethod
    def declare(
            cls,
            df: pd.DataFrame,
            *,
            label_column: str,
            meta_column_count: int,
    ) -> "ColumnSchema":
        columns = [str(c) for c in df.columns]

        if meta_column_count > len(columns):
            raise LoadError(
                f"table has {len(columns)} columns, "
                f"expected at least {meta_column_count} metadata columns"
            )

        meta = tuple(columns[:meta_column_count])
        if label_column in meta:
            raise LoadError(
                f"label column '{label_column}' falls inside the metadata block {list(meta)}"
            )

        predictors = tuple(
            c for c in columns[meta_column_count:] if c != label_column
        )
        if not predictors:
            raise LoadError("no predictor columns left after the metadata drop")

        text_encoded = tuple(
            c for c in predictors
            if not pd.api.types.is_numeric_dtype(df[c])
            or pd.api.types.is_bool_dtype(df[c])
        )

        return cls(
            meta_columns=meta,
            label_column=label_column,
            predictor_columns=predictors,
            text_encoded_columns=text_encoded,
        )
