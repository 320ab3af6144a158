#!filepath: activity_report/config/app_config.py
from __future__ import annotations

import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .data_config import DataConfig
from .preprocess_config import PreprocessConfig
from .training_config import TrainingConfig
from .report_config import ReportConfig
from activity_report.utils.path import PathManager

# .env / environment overrides: env var -> (section, key)
ENV_OVERRIDES = {
    "ACTIVITY_CSV": ("data", "csv_path"),
    "ACTIVITY_SCORE_CSV": ("data", "score_csv_path"),
    "ACTIVITY_REPORT_DIR": ("report", "output_dir"),
}


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    data: DataConfig = Field(default_factory=DataConfig)
    preprocess: PreprocessConfig = Field(default_factory=PreprocessConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 activity_report/config/base.yml
        - 不依赖当前工作目录
        """
        # 1) 先加载 .env（在项目根目录下）
        load_dotenv(PathManager.root() / ".env")
        # .env may relocate <root> itself
        if os.getenv("ACTIVITY_ROOT"):
            PathManager.set_root(os.getenv("ACTIVITY_ROOT"))

        # 2) 决定配置文件路径
        if path is None:
            path = str(PathManager.config_file("base.yml"))

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env 覆盖
        for env_key, (section, key) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                raw.setdefault(section, {})
                raw[section][key] = value

        return cls(**raw)
