# activity_report/engines/loader_engine.py
from __future__ import annotations

from pathlib import Path

import pandas as pd

from activity_report import logs
from activity_report.utils.errors import LoadError


class LoaderEngine:
    """
    LoaderEngine（FINAL）

    Responsibility:
    - Read one delimited table into memory
    - Reject absent / malformed files and tables without the label column

    Contract:
    - No column inference here (ColumnSchema owns roles)
    - Any failure raises LoadError (fatal)
    """

    def load(
            self,
            path: Path | str,
            *,
            label_column: str,
            require_label: bool = True,
    ) -> pd.DataFrame:
        path = Path(path)

        if not path.exists():
            raise LoadError(f"input file not found: {path}")
        if not path.is_file():
            raise LoadError(f"input path is not a file: {path}")

        try:
            df = pd.read_csv(path, low_memory=False)
        except (
            pd.errors.ParserError,
            pd.errors.EmptyDataError,
            UnicodeDecodeError,
        ) as e:
            raise LoadError(f"malformed csv {path}: {e}") from e

        if df.empty:
            raise LoadError(f"no rows in {path}")

        if require_label:
            if label_column not in df.columns:
                raise LoadError(
                    f"label column '{label_column}' missing in {path.name}"
                )
            n_missing = int(df[label_column].isna().sum())
            if n_missing:
                raise LoadError(
                    f"label column '{label_column}' has {n_missing} missing values"
                )

        logs.info(f"[Loader] {path.name} loaded shape={df.shape}")
        return df
