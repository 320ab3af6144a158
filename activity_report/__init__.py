#!filepath: activity_report/__init__.py

from .utils.logger import Logging, logs
from .utils.path import PathManager
from .config.app_config import AppConfig

__version__ = "0.1.0"

# alias 简化调用
path = PathManager

__all__ = [
    "logs", "Logging",
    "path",
    "AppConfig",
    "__version__",
]
