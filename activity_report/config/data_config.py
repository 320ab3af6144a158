#!filepath: activity_report/config/data_config.py
from typing import Optional

from pydantic import BaseModel, Field


class DataConfig(BaseModel):
    """
    Input table contract.

    - meta_column_count: leading columns (row index, user, timestamps,
      window markers) dropped by position, never inferred
    """

    csv_path: Optional[str] = None
    score_csv_path: Optional[str] = None

    label_column: str = "classe"
    meta_column_count: int = Field(7, ge=0)
    id_column: str = "problem_id"
