#!filepath: activity_report/config/report_config.py
from typing import Optional

from pydantic import BaseModel


class ReportConfig(BaseModel):
    # None -> <root>/reports
    output_dir: Optional[str] = None
    plots: bool = True
