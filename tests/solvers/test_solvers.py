from __future__ import annotations

import numpy as np
import pytest

from gradfit.config import FitConfig
from gradfit.solvers import (
    AdaGradSolver,
    AdamSolver,
    VanillaSolver,
    available_solvers,
    resolve_solver,
)
from gradfit.utils.errors import ConfigurationError, ExecutionError


def test_vanilla_step():
    s = VanillaSolver(2, learning_rate=0.5)

    out = s.step(np.array([1.0, 1.0]), np.array([0.2, -0.4]))

    np.testing.assert_allclose(out, [0.9, 1.2])


def test_adam_first_step_is_rate_times_sign():
    s = AdamSolver(2, learning_rate=0.1)

    out = s.step(np.array([1.0, 1.0]), np.array([4.0, -0.01]))

    # bias correction makes m_hat = g, v_hat = g^2 on step 1
    np.testing.assert_allclose(out, [0.9, 1.1], rtol=1e-6)
    assert s.t == 1


def test_adam_moments_persist_across_steps():
    s = AdamSolver(1, learning_rate=0.1, beta1=0.9, beta2=0.999)
    s.step(np.array([0.0]), np.array([1.0]))
    s.step(np.array([0.0]), np.array([1.0]))

    np.testing.assert_allclose(s.m, [0.19])
    np.testing.assert_allclose(s.v, [0.001999])


def test_adagrad_accumulates_squared_gradients():
    s = AdaGradSolver(1, learning_rate=0.1)
    values = np.array([1.0])

    values = s.step(values, np.array([1.0]))
    values = s.step(values, np.array([1.0]))

    np.testing.assert_allclose(s.cache, [2.0])
    np.testing.assert_allclose(values, [1.0 - 0.1 - 0.1 / np.sqrt(2.0)], rtol=1e-7)


@pytest.mark.parametrize("solver_cls", [VanillaSolver, AdamSolver, AdaGradSolver])
def test_state_is_sized_to_parameters(solver_cls):
    s = solver_cls(3, learning_rate=0.1)

    with pytest.raises(ExecutionError, match="sized for 3 parameters"):
        s.step(np.ones(2), np.ones(2))


@pytest.mark.parametrize("rate", [0.0, -0.1, float("nan"), float("inf")])
def test_invalid_learning_rate(rate):
    with pytest.raises(ConfigurationError, match="learning rate"):
        VanillaSolver(1, learning_rate=rate)


def test_zero_parameters_rejected():
    with pytest.raises(ConfigurationError, match="at least one parameter"):
        AdamSolver(0)


def test_default_learning_rate():
    assert VanillaSolver(1).learning_rate == 0.1
    assert AdamSolver(1).learning_rate == 0.1
    assert AdaGradSolver(1).learning_rate == 0.1


@pytest.mark.parametrize(
    "name, cls",
    [("vanilla", VanillaSolver), ("adam", AdamSolver), ("adagrad", AdaGradSolver)],
)
def test_resolve_solver(name, cls):
    cfg = FitConfig(learning_rate=0.05)

    s = resolve_solver(name, n_params=4, cfg=cfg)

    assert isinstance(s, cls)
    assert s.n_params == 4
    assert s.learning_rate == 0.05


def test_resolve_solver_passes_adam_settings():
    cfg = FitConfig(beta1=0.8, beta2=0.99, epsilon=1e-6)

    s = resolve_solver("adam", n_params=1, cfg=cfg)

    assert (s.beta1, s.beta2, s.epsilon) == (0.8, 0.99, 1e-6)


def test_resolve_unknown_solver():
    with pytest.raises(ConfigurationError, match="Available: vanilla, adam, adagrad"):
        resolve_solver("sgd", n_params=1, cfg=FitConfig())

    assert available_solvers() == ["vanilla", "adam", "adagrad"]
