import pytest

from gradfit.config import FitConfig
from gradfit.utils.errors import ConfigurationError


def test_defaults():
    cfg = FitConfig()

    assert cfg.iterations == 10000
    assert cfg.learning_rate == 0.1
    assert cfg.execution_mode == "tape"
    assert cfg.solver is None
    assert cfg.accelerated is False


def test_default_solver_depends_on_task():
    cfg = FitConfig()

    assert cfg.resolved_solver("linear") == "adam"
    assert cfg.resolved_solver("logistic") == "vanilla"
    assert FitConfig(solver="adagrad").resolved_solver("linear") == "adagrad"


def test_unknown_task():
    with pytest.raises(ConfigurationError, match="unknown task"):
        FitConfig().resolved_solver("poisson")


def test_from_options_passthrough():
    cfg = FitConfig(iterations=3)

    assert FitConfig.from_options(cfg) is cfg
    assert FitConfig.from_options(None) == FitConfig()
    assert FitConfig.from_options({"iterations": 3}) == cfg


@pytest.mark.parametrize(
    "options, field",
    [
        ({"solver": "momentum"}, "solver"),
        ({"iterations": -5}, "iterations"),
        ({"iterations": True}, "iterations"),
        ({"iterations": "10"}, "iterations"),
        ({"iterations": 10.0}, "iterations"),
        ({"log_every": True}, "log_every"),
        ({"learning_rate": -1.0}, "learning_rate"),
        ({"beta1": 1.0}, "beta1"),
        ({"execution_mode": "gpu"}, "execution_mode"),
        ({"rate": 0.1}, "rate"),
    ],
)
def test_from_options_rejects(options, field):
    with pytest.raises(ConfigurationError, match=field):
        FitConfig.from_options(options)


def test_from_options_rejects_non_mapping():
    with pytest.raises(ConfigurationError, match="mapping"):
        FitConfig.from_options([("iterations", 3)])


def test_config_is_frozen():
    cfg = FitConfig()

    with pytest.raises(Exception):
        cfg.iterations = 1
