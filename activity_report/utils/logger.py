#!filepath: activity_report/utils/logger.py
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {message}"


class Logging:
    """
    Process-wide report logger (loguru)
    ---------------------------------------
    - one stderr sink, always
    - one dated file sink when log_dir is set (rotation / retention)
    - messages carry their own component tag: "[SplitStep] train=750"
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level
        self._bind_sinks()

    def configure(self, cfg) -> "Logging":
        """
        Rebind sinks from a LogConfig (dir / rotation / retention / level).
        """
        self.log_dir = cfg.dir
        self.rotation = cfg.rotation
        self.retention = cfg.retention
        self.level = cfg.level
        self._bind_sinks()
        return self

    def _bind_sinks(self) -> None:
        # loguru sinks are global: drop whatever was there before
        logger.remove()
        logger.add(sys.stderr, level=self.level, format=_FORMAT)

        if not self.log_dir:
            return

        log_dir = Path(self.log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_dir / "activity_report_{time:YYYY-MM-DD}.log",
            level=self.level,
            format=_FORMAT,
            rotation=self.rotation,
            retention=self.retention,
            enqueue=True,
            backtrace=True,
            diagnose=False,
        )
        self.info(f"[Logging] file sink -> {log_dir}")

    # depth=2: report the caller of logs.info(...), not this wrapper
    def _emit(self, level: str, msg: str, *args, **kwargs) -> None:
        logger.opt(depth=2).log(level, msg, *args, **kwargs)

    def debug(self, msg: str, *args, **kwargs):
        self._emit("DEBUG", msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        self._emit("INFO", msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        self._emit("WARNING", msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        self._emit("ERROR", msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.opt(depth=1, exception=True).error(msg, *args, **kwargs)


# 默认全局 logs（CLI 通过 logs.configure(cfg.log) 重新绑定）
logs = Logging()
