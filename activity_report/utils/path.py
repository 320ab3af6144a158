#!filepath: activity_report/utils/path.py
import os
from pathlib import Path
from typing import Optional

from activity_report import logs

# activity_report/utils/path.py -> activity_report/
_PACKAGE_DIR = Path(__file__).resolve().parents[1]


class PathManager:
    """
    Project layout:

    <root>                  (ACTIVITY_ROOT, else the working directory)
     ├── data/              (input csv)
     ├── logs/
     └── reports/<run_id>/  (report.txt, csv tables, plots, predictions)

    config/base.yml ships inside the package and does not depend on <root>.
    Relative paths in config are read against <root>.
    Tests point <root> at tmp_path via set_root.
    """

    _root: Optional[Path] = None

    @classmethod
    def root(cls) -> Path:
        if cls._root is None:
            env_root = os.getenv("ACTIVITY_ROOT")
            cls._root = Path(env_root).resolve() if env_root else Path.cwd().resolve()
            logs.debug(f"[PathManager] root = {cls._root}")
        return cls._root

    @classmethod
    def set_root(cls, new_root: Path | str | None):
        cls._root = Path(new_root).resolve() if new_root is not None else None
        logs.debug(f"[PathManager] set_root = {cls._root}")

    @classmethod
    def reports_dir(cls) -> Path:
        return cls.root() / "reports"

    @classmethod
    def report_dir(cls, run_id: str, base: Path | str | None = None) -> Path:
        """<base or <root>/reports>/<run_id>"""
        return (Path(base) if base else cls.reports_dir()) / run_id

    @classmethod
    def config_file(cls, name: str = "base.yml") -> Path:
        # shipped inside the package, independent of <root>
        return _PACKAGE_DIR / "config" / name

    @classmethod
    def resolve(cls, p: Path | str) -> Path:
        """
        absolute        -> as is
        exists from cwd -> as is (command-line convenience)
        otherwise       -> <root>/p
        """
        path = Path(p)
        if path.is_absolute() or path.exists():
            return path
        return cls.root() / path
