#!filepath: gradfit/cli.py
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.markup import escape

from gradfit import __version__
from gradfit.api import fit_linear, fit_logistic
from gradfit.config.app_config import AppConfig
from gradfit.dataloader.csv_loader import read_csv
from gradfit.utils.errors import GradfitError
from gradfit.utils.logger import init_logging

app = typer.Typer(help="gradfit regression CLI")


class ModelKind(str, Enum):
    linear = "linear"
    logistic = "logistic"


_FITTERS = {
    ModelKind.linear: fit_linear,
    ModelKind.logistic: fit_logistic,
}


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def fit(
    model: ModelKind = typer.Argument(..., help="linear | logistic"),
    csv_path: Path = typer.Argument(..., help="headed CSV file"),
    x: List[str] = typer.Option(..., "--x", help="feature column (repeatable, order kept)"),
    y: str = typer.Option(..., "--y", help="target column"),
    solver: Optional[str] = typer.Option(None, help="vanilla | adam | adagrad"),
    iterations: Optional[int] = typer.Option(None, help="solve iterations"),
    learning_rate: Optional[float] = typer.Option(None, "--learning-rate", help="solver learning rate"),
    mode: Optional[str] = typer.Option(None, "--mode", help="tape | interpreted"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML config file"),
):
    """
    Fit a model on CSV columns and print theta_0 .. theta_N
    """
    try:
        app_cfg = AppConfig.load(str(config) if config is not None else None)
        init_logging(app_cfg.log)

        options = app_cfg.fit.model_dump(exclude_unset=True)
        overrides = {
            "solver": solver,
            "iterations": iterations,
            "learning_rate": learning_rate,
            "execution_mode": mode,
        }
        options.update({k: v for k, v in overrides.items() if v is not None})

        xs, ys = read_csv(csv_path, x, y)
        thetas = _FITTERS[model](xs, ys, options)
    except GradfitError as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    for i, theta in enumerate(thetas):
        print(f"theta_{i}: {theta:0.3f}")


if __name__ == "__main__":
    app()

# python -m gradfit.cli fit logistic study.csv --x Hours --y Pass
