# tests/training/conftest.py
from __future__ import annotations

import pytest

from gradfit.config import FitConfig
from gradfit.observability import Instrumentation
from gradfit.training import TrainingContext
from gradfit.training.steps import CostGradStep, GraphBuildStep, MachineBuildStep


@pytest.fixture
def make_training_context(line_data):
    """
    Factory fixture: TrainingContext pushed through every step but SolveStep.
    """

    def _make(task: str = "linear", **options) -> TrainingContext:
        xs, y = line_data
        ctx = TrainingContext(
            run_id="test",
            task=task,
            cfg=FitConfig(**options),
            features=xs,
            target=y,
        )
        inst = Instrumentation()
        for step in (GraphBuildStep(inst), CostGradStep(inst), MachineBuildStep(inst)):
            ctx = step.run(ctx)
        return ctx

    return _make
