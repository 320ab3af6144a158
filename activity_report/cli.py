#!filepath: activity_report/cli.py
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from activity_report import __version__, logs
from activity_report.config.app_config import AppConfig
from activity_report.utils.errors import AnalysisError, UserInputError
from activity_report.utils.path import PathManager
from activity_report.workflows.activity_report_workflow import (
    build_activity_report_pipeline,
    new_run_id,
)

app = typer.Typer(help="Activity Classification Report CLI")


def _load_config(config: Optional[str]) -> AppConfig:
    try:
        return AppConfig.load(config)
    except FileNotFoundError as e:
        raise UserInputError(str(e)) from e
    except ValidationError as e:
        raise UserInputError(f"invalid config: {e}") from e


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def run(
        config: Optional[str] = typer.Option(None, "--config", "-c", help="YAML config path"),
        csv: Optional[str] = typer.Option(None, "--csv", help="Labeled training table"),
        score_csv: Optional[str] = typer.Option(None, "--score-csv", help="Unlabeled table to predict"),
        output_dir: Optional[str] = typer.Option(None, "--output-dir", "-o", help="Report base directory"),
):
    """
    训练 + 评估 + 生成报告（一次完整 run）
    """
    try:
        cfg = _load_config(config)
    except UserInputError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1)

    if csv:
        cfg.data.csv_path = csv
    if score_csv:
        cfg.data.score_csv_path = score_csv
    if cfg.log.dir:
        cfg.log.dir = str(PathManager.resolve(cfg.log.dir))
    logs.configure(cfg.log)

    run_id = new_run_id()
    print(f"[green]Running activity report {run_id}[/green]")

    pipeline = build_activity_report_pipeline(cfg, run_id=run_id, output_dir=output_dir)
    try:
        ctx = pipeline.run(run_id)
    except AnalysisError as e:
        print(f"[red]Run failed: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    typer.echo(ctx.report_text)
    print(f"[blue]Report saved to {ctx.report_dir}[/blue]")


if __name__ == "__main__":
    app()

# python -m activity_report.cli run --csv data/pml-training.csv
