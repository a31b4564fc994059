from __future__ import annotations

import numpy as np
import pytest

from gradfit import (
    ConfigurationError,
    FitConfig,
    ShapeError,
    fit_linear,
    fit_logistic,
    predict_linear,
    predict_logistic,
)


@pytest.mark.parametrize("fit", [fit_linear, fit_logistic])
def test_one_parameter_per_feature_plus_bias(fit, plane_data):
    xs, y = plane_data

    thetas = fit(xs, y, {"iterations": 5})

    assert len(thetas) == len(xs) + 1


def test_linear_converges_with_default_options(line_data):
    xs, y = line_data

    theta0, theta1 = fit_linear(xs, y)

    assert abs(theta0 - 2.0) < 0.1
    assert abs(theta1 - 3.0) < 0.1


@pytest.mark.parametrize("solver", ["vanilla", "adam"])
def test_linear_converges_per_solver(solver, line_data):
    xs, y = line_data

    theta0, theta1 = fit_linear(xs, y, {"solver": solver})

    assert theta0 == pytest.approx(2.0, abs=0.1)
    assert theta1 == pytest.approx(3.0, abs=0.1)


def test_adagrad_reduces_cost(line_data):
    xs, y = line_data

    def mse(thetas):
        return float(np.mean((predict_linear(thetas, xs) - np.array(y)) ** 2))

    thetas = fit_linear(xs, y, {"solver": "adagrad", "iterations": 500})

    assert mse(thetas) < mse([1.0, 1.0])


def test_multi_feature_order_is_preserved(plane_data):
    xs, y = plane_data

    thetas = fit_linear(xs, y, {"solver": "vanilla"})

    np.testing.assert_allclose(thetas, [1.0, 2.0, -1.0], atol=1e-4)


@pytest.mark.parametrize("fit", [fit_linear, fit_logistic])
def test_zero_iterations_returns_initial_parameters(fit, plane_data):
    xs, y = plane_data

    assert fit(xs, y, {"iterations": 0}) == [1.0, 1.0, 1.0]


@pytest.mark.parametrize("fit", [fit_linear, fit_logistic])
@pytest.mark.parametrize("solver", ["vanilla", "adam", "adagrad"])
def test_tape_and_interpreted_agree(fit, solver, plane_data):
    xs, y = plane_data
    options = {"solver": solver, "iterations": 300}

    tape = fit(xs, y, {**options, "execution_mode": "tape"})
    interpreted = fit(xs, y, {**options, "execution_mode": "interpreted"})

    np.testing.assert_allclose(tape, interpreted, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("fit", [fit_linear, fit_logistic])
def test_mismatched_lengths_raise_shape_error(fit):
    with pytest.raises(ShapeError, match="target has 5 values, features have 4"):
        fit([[1.0, 2.0, 3.0, 4.0]], [0.0, 1.0, 0.0, 1.0, 1.0])


def test_empty_feature_list_raises_shape_error():
    with pytest.raises(ShapeError, match="feature list is empty"):
        fit_linear([], [1.0, 2.0])


@pytest.mark.parametrize(
    "options",
    [
        {"solver": "sgd"},
        {"execution_mode": "lisp"},
        {"iterations": -1},
        {"learning_rate": 0.0},
        {"learning_rate": float("nan")},
        {"lr": 0.1},
    ],
)
def test_invalid_options_raise_configuration_error(options, line_data):
    xs, y = line_data

    with pytest.raises(ConfigurationError):
        fit_linear(xs, y, options)


def test_fit_config_instance_accepted(line_data):
    xs, y = line_data

    thetas = fit_linear(xs, y, FitConfig(iterations=0))

    assert thetas == [1.0, 1.0]


def test_study_hours_scenario(study_data):
    xs, y = study_data

    thetas = fit_logistic(xs, y)
    preds = predict_logistic(thetas, [[1.0, 2.0, 3.0, 4.0, 5.0]])

    # p = 1 / (1 + e^(θ0 + θ1·x)) rises with x only when θ1 < 0
    assert thetas[1] < 0
    assert np.all(np.diff(preds) > 0)


def test_logistic_predictions_stay_in_open_interval(study_data):
    xs, y = study_data
    thetas = fit_logistic(xs, y, {"iterations": 2000})

    preds = predict_logistic(thetas, [np.linspace(-2.0, 7.0, 19)])

    assert np.all(preds > 0.0)
    assert np.all(preds < 1.0)


@pytest.mark.parametrize("mode", ["tape", "interpreted"])
def test_logistic_fit_survives_saturated_link(mode):
    thetas = fit_logistic(
        [[700.0, 710.0, 720.0, 730.0]],
        [0.0, 0.0, 1.0, 1.0],
        {"iterations": 50, "execution_mode": mode},
    )

    assert len(thetas) == 2
    assert all(np.isfinite(thetas))
