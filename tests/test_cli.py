from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from gradfit import __version__
from gradfit.cli import app

runner = CliRunner()


@pytest.fixture
def quiet_config(tmp_path: Path) -> Path:
    p = tmp_path / "cli.yml"
    p.write_text(yaml.safe_dump({"log": {"level": "ERROR"}, "fit": {"iterations": 200}}), encoding="utf-8")
    return p


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_fit_linear_from_csv(study_csv: Path, quiet_config: Path):
    result = runner.invoke(
        app,
        ["fit", "linear", str(study_csv), "--x", "Hours", "--y", "Pass", "--config", str(quiet_config)],
    )

    assert result.exit_code == 0, result.stdout
    assert "theta_0:" in result.stdout
    assert "theta_1:" in result.stdout


def test_fit_logistic_with_overrides(study_csv: Path, quiet_config: Path):
    result = runner.invoke(
        app,
        [
            "fit", "logistic", str(study_csv),
            "--x", "Hours", "--y", "Pass",
            "--solver", "adam",
            "--iterations", "0",
            "--mode", "interpreted",
            "--config", str(quiet_config),
        ],
    )

    assert result.exit_code == 0, result.stdout
    assert "theta_0: 1.000" in result.stdout
    assert "theta_1: 1.000" in result.stdout


def test_fit_missing_header_exits_nonzero(study_csv: Path, quiet_config: Path):
    result = runner.invoke(
        app,
        ["fit", "linear", str(study_csv), "--x", "Minutes", "--y", "Pass", "--config", str(quiet_config)],
    )

    assert result.exit_code == 1
    assert "could not find header" in result.stdout


def test_fit_unknown_solver_exits_nonzero(study_csv: Path, quiet_config: Path):
    result = runner.invoke(
        app,
        [
            "fit", "linear", str(study_csv),
            "--x", "Hours", "--y", "Pass",
            "--solver", "sgd",
            "--config", str(quiet_config),
        ],
    )

    assert result.exit_code == 1
    assert "invalid option" in result.stdout
