#!filepath: tests/base_test/test_path.py
from pathlib import Path

from activity_report.utils.path import PathManager


def test_root_follows_set_root(tmp_path: Path):
    assert PathManager.root() == tmp_path.resolve()
    assert PathManager.reports_dir() == tmp_path.resolve() / "reports"


def test_default_root_is_working_directory(tmp_path: Path, monkeypatch):
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.delenv("ACTIVITY_ROOT", raising=False)
    monkeypatch.chdir(workdir)
    PathManager.set_root(None)

    assert PathManager.root() == workdir.resolve()
    assert PathManager.report_dir("r1") == workdir.resolve() / "reports" / "r1"


def test_root_from_env(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("ACTIVITY_ROOT", str(tmp_path / "project"))
    PathManager.set_root(None)

    assert PathManager.root() == (tmp_path / "project").resolve()


def test_report_dir_default_and_override(tmp_path: Path):
    assert PathManager.report_dir("r1") == tmp_path.resolve() / "reports" / "r1"
    assert PathManager.report_dir("r1", tmp_path / "elsewhere") == tmp_path / "elsewhere" / "r1"


def test_resolve_relative_against_root(tmp_path: Path):
    assert PathManager.resolve("/abs/file.csv") == Path("/abs/file.csv")
    assert PathManager.resolve("data/never-here.csv") == tmp_path.resolve() / "data" / "never-here.csv"


def test_config_file_ships_with_package():
    assert PathManager.config_file().name == "base.yml"
    assert PathManager.config_file().exists()
