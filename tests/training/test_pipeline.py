from __future__ import annotations

import pytest

from gradfit import fit_linear, fit_logistic
from gradfit.config import FitConfig
from gradfit.observability import Instrumentation
from gradfit.training import TrainingContext, build_training_pipeline
from gradfit.utils.errors import ConfigurationError, ExecutionError, ShapeError


def test_pipeline_produces_params_and_timeline(line_data):
    xs, y = line_data
    inst = Instrumentation()
    ctx = TrainingContext(
        run_id="pipe",
        task="linear",
        cfg=FitConfig(iterations=10),
        features=xs,
        target=y,
    )

    ctx = build_training_pipeline(inst).run(ctx)

    assert len(ctx.params) == 2
    assert list(inst.timeline) == ["GraphBuildStep", "CostGradStep", "MachineBuildStep", "SolveStep"]


def test_shape_error_tagged_with_stage():
    with pytest.raises(ShapeError) as exc:
        fit_linear([[1.0, 2.0, 3.0, 4.0]], [1.0, 2.0, 3.0, 4.0, 5.0])

    assert exc.value.stage == "GraphBuildStep"
    assert str(exc.value).startswith("[GraphBuildStep]")


def test_execution_error_tagged_with_stage_and_iteration():
    with pytest.raises(ExecutionError) as exc:
        fit_linear([[1e200, 2e200]], [0.0, 1.0], {"iterations": 5})

    assert exc.value.stage == "SolveStep"
    assert "iteration 0" in str(exc.value)


def test_unknown_task_rejected(line_data):
    xs, y = line_data
    ctx = TrainingContext(run_id="t", task="poisson", cfg=FitConfig(), features=xs, target=y)

    with pytest.raises(ConfigurationError, match="No model builder"):
        build_training_pipeline().run(ctx)


def test_configuration_checked_before_shapes():
    # both invalid: the configuration error wins, no graph is built
    with pytest.raises(ConfigurationError):
        fit_logistic([[1.0, 2.0]], [1.0], {"solver": "sgd"})


def test_runs_do_not_share_graphs(line_data):
    xs, y = line_data
    contexts = []
    for run_id in ("a", "b"):
        ctx = TrainingContext(
            run_id=run_id,
            task="linear",
            cfg=FitConfig(iterations=3),
            features=xs,
            target=y,
        )
        contexts.append(build_training_pipeline().run(ctx))

    a, b = contexts
    assert a.graph is not b.graph
    assert a.solver is not b.solver
    assert a.params == b.params
